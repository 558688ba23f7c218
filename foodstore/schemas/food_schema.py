import decimal
from decimal import Decimal
from marshmallow import Schema, fields, validate, validates, pre_load, ValidationError, EXCLUDE

from foodstore.extensions import db
from foodstore.models.food import Food

BLANK = "can't be blank"
TAKEN = "has already been taken"
NOT_A_NUMBER = "is not a number"
MIN_PRICE = Decimal("0.01")
# Largest value a Numeric(8, 2) column holds
MAX_PRICE = Decimal("999999.99")

_required_messages = {"required": BLANK, "null": BLANK}


class FoodSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(
        required=True,
        validate=validate.Length(max=150, error="is too long (maximum is {max} characters)"),
        error_messages=_required_messages,
    )
    description = fields.Str(required=True, error_messages=_required_messages)
    price = fields.Decimal(
        required=True,
        places=2,
        rounding=decimal.ROUND_HALF_UP,
        validate=[
            validate.Range(min=MIN_PRICE, error="must be greater than or equal to {min}"),
            validate.Range(max=MAX_PRICE, error="must be less than or equal to {max}"),
        ],
        error_messages={**_required_messages, "invalid": NOT_A_NUMBER, "special": NOT_A_NUMBER},
    )
    image_url = fields.Str(
        allow_none=True,
        validate=validate.Length(max=500, error="is too long (maximum is {max} characters)"),
    )

    def __init__(self, *args, instance=None, **kwargs):
        super().__init__(*args, **kwargs)
        # Record being edited; excluded from the uniqueness check
        self.instance = instance

    @pre_load
    def strip_strings(self, data, **kwargs):
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip() or None
            cleaned[key] = value
        return cleaned

    @validates("name")
    def validate_unique_name(self, value, **kwargs):
        query = Food.query.filter(Food.name == value)
        if self.instance is not None and self.instance.id is not None:
            query = query.filter(Food.id != self.instance.id)
        # Pending edits on the instance must not reach the database during validation
        with db.session.no_autoflush:
            taken = query.first() is not None
        if taken:
            raise ValidationError(TAKEN)
