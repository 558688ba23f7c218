from werkzeug.exceptions import NotFound

from foodstore.controllers.error_controller import not_found_handler
from foodstore.utils.errors import NotFoundError
from .store_routes import store_bp
from .home_routes import home_bp
from .food_routes import food_bp
from .cart_routes import cart_bp


def register_routes(app):
    app.register_blueprint(store_bp)
    app.register_blueprint(home_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(cart_bp)

    app.register_error_handler(NotFoundError, not_found_handler)
    app.register_error_handler(NotFound, not_found_handler)
