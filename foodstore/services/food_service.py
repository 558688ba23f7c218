"""
Food Service Module

Persistence operations for the food catalog:
- Listing, optionally filtered by first letter
- Lookup by primary key
- Create / update with field validation
- Destroy, honouring the line item restriction
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from foodstore.extensions import db
from foodstore.models.food import Food, FOOD_FIELDS
from foodstore.schemas.food_schema import FoodSchema, TAKEN
from foodstore.utils.errors import NotFoundError, RestrictedDeleteError
from foodstore.utils.http import validate_schema

logger = logging.getLogger(__name__)


def permitted_attributes(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the attributes a client may assign."""
    return {key: data[key] for key in FOOD_FIELDS if key in data}


def validate_food(data: Dict[str, Any], instance: Optional[Food] = None) -> Tuple[Optional[Dict[str, Any]], Dict[str, Any]]:
    return validate_schema(FoodSchema(instance=instance), data)


def list_foods(letter: Optional[str] = None) -> List[Food]:
    if letter:
        return Food.by_letter(letter)
    return Food.query.order_by(Food.name).all()


def get_food(food_id: int) -> Food:
    food = db.session.get(Food, food_id)
    if food is None:
        raise NotFoundError("Food not found", details={"id": food_id})
    return food


def build_food(**attrs) -> Food:
    return Food(**permitted_attributes(attrs))


def create_food(data: Dict[str, Any]) -> Tuple[Food, bool]:
    """
    Validate and insert a new food.

    Returns:
        ``(food, saved)``. When ``saved`` is False the food is unsaved, carries
        the submitted attributes and its ``errors`` are populated.
    """
    attrs = permitted_attributes(data)
    clean, errors = validate_food(attrs)
    if errors:
        food = build_food(**attrs)
        food.errors = errors
        return food, False

    food = Food(**clean)
    db.session.add(food)
    try:
        db.session.commit()
    except IntegrityError:
        # Unique index on name caught a concurrent insert
        db.session.rollback()
        food = build_food(**attrs)
        food.errors = {"name": [TAKEN]}
        return food, False
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to create food %r", attrs.get("name"))
        raise

    logger.info("Created food %s (%s)", food.id, food.name)
    return food, True


def update_food(food: Food, data: Dict[str, Any]) -> bool:
    """
    Validate ``data`` over the food's current attributes and save.

    The food is left untouched when validation fails; errors land in ``food.errors``.
    """
    attrs = {**food.attributes(), **permitted_attributes(data)}
    attrs = {key: value for key, value in attrs.items() if value is not None or key in data}
    clean, errors = validate_food(attrs, instance=food)
    if errors:
        food.errors = errors
        return False

    for key, value in clean.items():
        setattr(food, key, value)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        food.errors = {"name": [TAKEN]}
        return False
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to update food %s", food.id)
        raise

    food.errors = {}
    logger.info("Updated food %s (%s)", food.id, food.name)
    return True


def destroy_food(food: Food) -> bool:
    """
    Delete a food unless line items still reference it.

    Returns:
        True if deleted. False if the delete was vetoed; the reason is stored
        under ``food.errors["base"]`` and nothing is removed.
    """
    try:
        db.session.delete(food)
        db.session.commit()
    except RestrictedDeleteError as exc:
        db.session.rollback()
        food.errors = {"base": [exc.message]}
        logger.warning("Refused to delete food %s: %s", food.id, exc.message)
        return False
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to delete food %s", food.id)
        raise

    logger.info("Deleted food %s (%s)", food.id, food.name)
    return True
