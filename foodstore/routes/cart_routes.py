from flask import Blueprint
from foodstore.controllers.cart_controller import (
    index_handler,
    show_handler,
    new_handler,
    edit_handler,
    create_handler,
    update_handler,
    destroy_handler,
)

cart_bp = Blueprint("carts", __name__, url_prefix="/carts")

@cart_bp.get("")
def index():
    return index_handler()


@cart_bp.post("")
def create():
    return create_handler()


@cart_bp.get("/new")
def new():
    return new_handler()


@cart_bp.get("/<int:id>")
def show(id):
    return show_handler(id)


@cart_bp.get("/<int:id>/edit")
def edit(id):
    return edit_handler(id)


@cart_bp.route("/<int:id>", methods=["PATCH", "PUT"])
def update(id):
    return update_handler(id)


@cart_bp.delete("/<int:id>")
def destroy(id):
    return destroy_handler(id)
