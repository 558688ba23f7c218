"""create foods, carts and line_items

Revision ID: 3a7c9e1f5b20
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c9e1f5b20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('foods'):
        op.create_table(
            'foods',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('price', sa.Numeric(8, 2), nullable=False),
            sa.Column('image_url', sa.String(length=500), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_foods_name', 'foods', ['name'], unique=True)

    if not insp.has_table('carts'):
        op.create_table(
            'carts',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )

    if not insp.has_table('line_items'):
        op.create_table(
            'line_items',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('food_id', sa.Integer(), sa.ForeignKey('foods.id', ondelete='RESTRICT'), nullable=False),
            sa.Column('cart_id', sa.Integer(), sa.ForeignKey('carts.id', ondelete='CASCADE'), nullable=False),
            sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_line_items_food_id', 'line_items', ['food_id'])
        op.create_index('ix_line_items_cart_id', 'line_items', ['cart_id'])


def downgrade():
    op.drop_index('ix_line_items_cart_id', table_name='line_items')
    op.drop_index('ix_line_items_food_id', table_name='line_items')
    op.drop_table('line_items')
    op.drop_table('carts')
    op.drop_index('ix_foods_name', table_name='foods')
    op.drop_table('foods')
