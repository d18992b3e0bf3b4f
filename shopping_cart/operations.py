"""
Reversible cart operations.

Same contract as the elevator operations, different target: the log does
not care what it is undoing.
"""

import logging
from typing import Optional

from command_history.operation_log import ReversibleOperation
from shared.models import CartSnapshot, OperationKind, OperationStatus
from shopping_cart.cart import ShoppingCart

logger = logging.getLogger("cart_operations")


class AddItem(ReversibleOperation):
    kind = OperationKind.ADD_ITEM

    def __init__(self, item: str):
        super().__init__()
        self.item = item
        self.position: Optional[int] = None

    @property
    def name(self) -> str:
        return f"AddItem({self.item})"

    def _apply(self, cart: ShoppingCart) -> OperationStatus:
        if not self.item or not self.item.strip():
            logger.warning("Refusing to add an item without a name")
            return OperationStatus.REJECTED
        self.position = cart.item_count
        cart.add_item(self.item)
        return OperationStatus.APPLIED

    def _revert(self, cart: ShoppingCart) -> None:
        cart.remove_at(self.position)


class RemoveItem(ReversibleOperation):
    """Remove the first occurrence of an item; undo puts it back in place."""
    kind = OperationKind.REMOVE_ITEM

    def __init__(self, item: str):
        super().__init__()
        self.item = item
        self.position: Optional[int] = None

    @property
    def name(self) -> str:
        return f"RemoveItem({self.item})"

    def _apply(self, cart: ShoppingCart) -> OperationStatus:
        position = cart.index_of(self.item)
        if position is None:
            logger.warning(f"Item '{self.item}' not found in cart")
            return OperationStatus.REJECTED
        self.position = position
        cart.remove_at(position)
        return OperationStatus.APPLIED

    def _revert(self, cart: ShoppingCart) -> None:
        cart.add_item(self.item, position=self.position)


class ClearCart(ReversibleOperation):
    kind = OperationKind.CLEAR_CART

    def __init__(self):
        super().__init__()
        self.removed: Optional[CartSnapshot] = None

    def _apply(self, cart: ShoppingCart) -> OperationStatus:
        if not cart.item_count:
            return OperationStatus.NO_CHANGE
        self.removed = cart.create_snapshot()
        cart.clear()
        return OperationStatus.APPLIED

    def _revert(self, cart: ShoppingCart) -> None:
        cart.restore(self.removed)
