from flask import Blueprint
from foodstore.controllers.food_controller import (
    index_handler,
    show_handler,
    new_handler,
    edit_handler,
    create_handler,
    update_handler,
    destroy_handler,
)

food_bp = Blueprint("foods", __name__, url_prefix="/foods")

@food_bp.get("")
def index():
    return index_handler()


@food_bp.post("")
def create():
    return create_handler()


@food_bp.get("/new")
def new():
    return new_handler()


@food_bp.get("/<int:id>")
def show(id):
    return show_handler(id)


@food_bp.get("/<int:id>/edit")
def edit(id):
    return edit_handler(id)


@food_bp.route("/<int:id>", methods=["PATCH", "PUT"])
def update(id):
    return update_handler(id)


@food_bp.delete("/<int:id>")
def destroy(id):
    return destroy_handler(id)
