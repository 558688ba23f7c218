import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from foodstore.extensions import db
from foodstore.models.cart import Cart
from foodstore.utils.errors import NotFoundError

logger = logging.getLogger(__name__)


def list_carts() -> List[Cart]:
    return Cart.query.order_by(Cart.id).all()


def get_cart(cart_id: int) -> Cart:
    cart = db.session.get(Cart, cart_id)
    if cart is None:
        raise NotFoundError("Cart not found", details={"id": cart_id})
    return cart


def create_cart() -> Cart:
    cart = Cart()
    db.session.add(cart)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to create cart")
        raise
    logger.info("Created cart %s", cart.id)
    return cart


def update_cart(cart: Cart) -> Cart:
    """Carts have no editable attributes; saving only bumps ``updated_at``."""
    cart.updated_at = db.func.now()
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to update cart %s", cart.id)
        raise
    return cart


def destroy_cart(cart: Cart) -> None:
    """Delete a cart together with its line items."""
    cart_id = cart.id
    try:
        db.session.delete(cart)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to delete cart %s", cart_id)
        raise
    logger.info("Deleted cart %s", cart_id)
