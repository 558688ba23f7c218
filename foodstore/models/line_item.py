from decimal import Decimal

from foodstore.extensions import db


class LineItem(db.Model):
    __tablename__ = "line_items"

    id = db.Column(db.Integer, primary_key=True)
    food_id = db.Column(db.Integer, db.ForeignKey("foods.id", ondelete="RESTRICT"), nullable=False, index=True)
    cart_id = db.Column(db.Integer, db.ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    quantity = db.Column(db.Integer, nullable=False, default=1)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)

    food = db.relationship("Food", back_populates="line_items")
    cart = db.relationship("Cart", back_populates="line_items")

    @property
    def total_price(self):
        if self.food is None or self.food.price is None:
            return Decimal("0")
        return Decimal(self.food.price) * (self.quantity or 0)

    def to_dict(self):
        return {
            "id": self.id,
            "food_id": self.food_id,
            "cart_id": self.cart_id,
            "food_name": self.food.name if self.food else None,
            "quantity": self.quantity,
            "total_price": float(self.total_price),
        }
