from flask import render_template

from foodstore.services.food_service import list_foods


def store_index():
    """Storefront: the whole catalog ordered by name."""
    return render_template("store/index.html", foods=list_foods())
