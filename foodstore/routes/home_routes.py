from flask import Blueprint
from foodstore.controllers.home_controller import hello as hello_handler

home_bp = Blueprint("home", __name__, url_prefix="/home")

@home_bp.get("/hello")
def hello():
    return hello_handler()
