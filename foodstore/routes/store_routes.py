from flask import Blueprint
from foodstore.controllers.store_controller import store_index

store_bp = Blueprint("store", __name__)

@store_bp.get("/")
def index():
    return store_index()
