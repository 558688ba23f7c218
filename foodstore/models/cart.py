from decimal import Decimal

from foodstore.extensions import db


class Cart(db.Model):
    __tablename__ = "carts"

    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)

    line_items = db.relationship(
        "LineItem",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="LineItem.id",
    )

    @property
    def total_price(self):
        return sum((item.total_price for item in self.line_items), Decimal("0"))

    def to_dict(self, include_items=True):
        data = {
            "id": self.id,
            "total_price": float(self.total_price),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_items:
            data["line_items"] = [item.to_dict() for item in self.line_items]
        return data

    def __repr__(self):
        return f"<Cart {self.id}>"
