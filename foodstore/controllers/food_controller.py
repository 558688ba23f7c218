"""
Food Controller Module

Handles the food catalog resource:
- index / show / new / edit views
- create / update with validation errors re-rendered on the form
- destroy, refused while line items reference the food
"""

from typing import Any, Dict

from flask import flash, redirect, render_template, url_for

from foodstore.models.food import FOOD_FIELDS
from foodstore.services.food_service import (
    build_food,
    create_food,
    destroy_food,
    get_food,
    list_foods,
    update_food,
)
from foodstore.utils.errors import RestrictedDeleteError
from foodstore.utils.http import arg_str, error, json_body, ok, wants_json

LETTERS = [chr(code) for code in range(ord("A"), ord("Z") + 1)]


def _food_params() -> Dict[str, Any]:
    """Submitted food attributes: ``{"food": {...}}``, ``food[name]`` form fields or flat bodies."""
    body = json_body()
    if isinstance(body.get("food"), dict):
        body = body["food"]
    params = {key: body[key] for key in FOOD_FIELDS if key in body}
    for key in FOOD_FIELDS:
        nested = f"food[{key}]"
        if nested in body:
            params[key] = body[nested]
    return params


def _form_values(food, params=None) -> Dict[str, Any]:
    values = {key: ("" if value is None else value) for key, value in food.attributes().items()}
    for key, value in (params or {}).items():
        values[key] = "" if value is None else value
    return values


def _validation_error(food):
    return error("VALIDATION_ERROR", "Food could not be saved", 422, fields=food.errors)


def index_handler():
    """
    List foods.

    Query Parameters:
        - letter: only foods whose name starts with this letter
    """
    letter = (arg_str("letter") or "").strip() or None
    foods = list_foods(letter)

    if wants_json():
        return ok({"items": [food.to_dict() for food in foods], "letter": letter})
    return render_template("foods/index.html", foods=foods, letter=letter, letters=LETTERS)


def show_handler(food_id: int):
    food = get_food(food_id)
    if wants_json():
        return ok(food.to_dict())
    return render_template("foods/show.html", food=food)


def new_handler():
    food = build_food()
    return render_template("foods/new.html", food=food, form=_form_values(food), errors={})


def edit_handler(food_id: int):
    food = get_food(food_id)
    return render_template("foods/edit.html", food=food, form=_form_values(food), errors={})


def create_handler():
    """
    Create a food.

    Body Parameters:
        - name (required, unique)
        - description (required)
        - price (required, numeric, >= 0.01)
        - image_url (optional)
    """
    params = _food_params()
    food, saved = create_food(params)

    if wants_json():
        return ok(food.to_dict(), 201) if saved else _validation_error(food)
    if saved:
        flash("Food was successfully created.", "notice")
        return redirect(url_for("foods.show", id=food.id))
    return render_template("foods/new.html", food=food, form=_form_values(food, params), errors=food.errors)


def update_handler(food_id: int):
    food = get_food(food_id)
    params = _food_params()
    saved = update_food(food, params)

    if wants_json():
        return ok(food.to_dict()) if saved else _validation_error(food)
    if saved:
        flash("Food was successfully updated.", "notice")
        return redirect(url_for("foods.show", id=food.id))
    return render_template("foods/edit.html", food=food, form=_form_values(food, params), errors=food.errors)


def destroy_handler(food_id: int):
    food = get_food(food_id)
    destroyed = destroy_food(food)

    if wants_json():
        if destroyed:
            return ok({"message": "Food was successfully destroyed."})
        return error(RestrictedDeleteError.code, food.errors["base"][0], RestrictedDeleteError.http_status)
    if destroyed:
        flash("Food was successfully destroyed.", "notice")
    else:
        flash(food.errors["base"][0], "alert")
    return redirect(url_for("foods.index"))
