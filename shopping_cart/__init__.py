"""
Shopping cart demo.

The cart can be edited through reversible operations (undo/redo one step
at a time) or saved and restored as a whole through snapshots.
"""

from shopping_cart.cart import CartCaretaker, ShoppingCart
from shopping_cart.operations import AddItem, ClearCart, RemoveItem

__all__ = [
    "ShoppingCart",
    "CartCaretaker",
    "AddItem",
    "RemoveItem",
    "ClearCart",
]
