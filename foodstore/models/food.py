from sqlalchemy import event, func, select

from foodstore.extensions import db
from foodstore.utils.errors import RestrictedDeleteError

FOOD_FIELDS = ("name", "description", "price", "image_url")


class Food(db.Model):
    __tablename__ = "foods"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=False)
    price = db.Column(db.Numeric(8, 2), nullable=False)
    image_url = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)

    # Children are never touched on delete; the before_delete hook vetoes it instead
    line_items = db.relationship("LineItem", back_populates="food", passive_deletes="all")

    @classmethod
    def by_letter(cls, letter):
        """Foods whose name starts with ``letter`` (case-sensitive), ordered by name."""
        return (
            cls.query
            .filter(cls.name.startswith(letter, autoescape=True))
            # SQLite's LIKE ignores ASCII case
            .filter(func.substr(cls.name, 1, len(letter)) == letter)
            .order_by(cls.name)
            .all()
        )

    @property
    def errors(self):
        # Loaded rows skip __init__, so the dict is created on first access
        if "_errors" not in self.__dict__:
            self._errors = {}
        return self._errors

    @errors.setter
    def errors(self, value):
        self._errors = dict(value or {})

    def attributes(self):
        return {field: getattr(self, field) for field in FOOD_FIELDS}

    def is_valid(self):
        """Run the field validations against the current attributes and store the result in ``errors``."""
        from foodstore.schemas.food_schema import FoodSchema

        schema = FoodSchema(instance=self)
        payload = {key: value for key, value in self.attributes().items() if value is not None}
        self.errors = schema.validate(payload)
        return not self.errors

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": float(self.price) if self.price is not None else None,
            "image_url": self.image_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Food {self.id}: {self.name}>"


@event.listens_for(Food, "before_delete")
def _restrict_delete_with_line_items(mapper, connection, target):
    from foodstore.models.line_item import LineItem

    count = connection.execute(
        select(func.count()).select_from(LineItem.__table__).where(LineItem.__table__.c.food_id == target.id)
    ).scalar()
    if count:
        raise RestrictedDeleteError("Cannot delete record because dependent line items exist")
