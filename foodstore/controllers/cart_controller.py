from flask import flash, redirect, render_template, url_for

from foodstore.services.cart_service import create_cart, destroy_cart, get_cart, list_carts, update_cart
from foodstore.utils.http import ok, wants_json


def index_handler():
    carts = list_carts()
    if wants_json():
        return ok({"items": [cart.to_dict(include_items=False) for cart in carts]})
    return render_template("carts/index.html", carts=carts)


def show_handler(cart_id: int):
    cart = get_cart(cart_id)
    if wants_json():
        return ok(cart.to_dict())
    return render_template("carts/show.html", cart=cart)


def new_handler():
    return render_template("carts/new.html", cart=None)


def edit_handler(cart_id: int):
    cart = get_cart(cart_id)
    return render_template("carts/edit.html", cart=cart)


def create_handler():
    cart = create_cart()
    if wants_json():
        return ok(cart.to_dict(), 201)
    flash("Cart was successfully created.", "notice")
    return redirect(url_for("carts.show", id=cart.id))


def update_handler(cart_id: int):
    cart = update_cart(get_cart(cart_id))
    if wants_json():
        return ok(cart.to_dict())
    flash("Cart was successfully updated.", "notice")
    return redirect(url_for("carts.show", id=cart.id))


def destroy_handler(cart_id: int):
    destroy_cart(get_cart(cart_id))
    if wants_json():
        return ok({"message": "Cart was successfully destroyed."})
    flash("Cart was successfully destroyed.", "notice")
    return redirect(url_for("carts.index"))
