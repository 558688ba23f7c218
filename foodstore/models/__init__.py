from .food import Food
from .cart import Cart
from .line_item import LineItem

__all__ = ["Food", "Cart", "LineItem"]
