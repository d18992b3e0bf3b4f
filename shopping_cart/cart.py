"""
Shopping cart and its snapshot history (Memento pattern).

The cart is a second kind of target: it can be changed through reversible
operations recorded in an OperationLog, or saved and restored wholesale
through a CartCaretaker.

Design decisions:
- Items are plain product names, duplicates allowed, order preserved
- Every item costs the same flat price; pricing is not the point here
- Snapshots are immutable pydantic models, so the caretaker's history
  cannot be edited behind its back
"""

import logging
from decimal import Decimal
from typing import Optional

from shared.models import CartSnapshot

logger = logging.getLogger("shopping_cart")

PRICE_PER_ITEM = Decimal("10")


class ShoppingCart:
    """
    Ordered list of item names.

    Example:
        cart = ShoppingCart()
        cart.add_item("Laptop")
        snapshot = cart.create_snapshot()
        cart.clear()
        cart.restore(snapshot)      # ["Laptop"] again
    """

    def __init__(self, items: Optional[list[str]] = None):
        self._items: list[str] = list(items or [])

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def total_price(self) -> Decimal:
        return PRICE_PER_ITEM * len(self._items)

    def add_item(self, item: str, position: Optional[int] = None) -> None:
        """Add an item at the end, or at ``position`` when given."""
        if position is None:
            self._items.append(item)
        else:
            self._items.insert(position, item)
        logger.info(f"Added item: {item}")

    def remove_item(self, item: str) -> bool:
        """
        Remove the first occurrence of an item.

        Returns:
            True if removed, False if the item was not in the cart
        """
        index = self.index_of(item)
        if index is None:
            logger.warning(f"Item '{item}' not found in cart")
            return False
        self.remove_at(index)
        return True

    def remove_at(self, index: int) -> str:
        item = self._items.pop(index)
        logger.info(f"Removed item: {item}")
        return item

    def index_of(self, item: str) -> Optional[int]:
        try:
            return self._items.index(item)
        except ValueError:
            return None

    def clear(self) -> None:
        self._items.clear()
        logger.info("Cart cleared")

    def create_snapshot(self) -> CartSnapshot:
        return CartSnapshot(items=tuple(self._items))

    def restore(self, snapshot: CartSnapshot) -> None:
        self._items = list(snapshot.items)
        logger.info(f"Cart restored to {len(self._items)} items")

    def describe(self) -> str:
        if not self._items:
            return "Cart is empty"
        lines = [f"Items in cart: {self.item_count}", f"Total price: ${self.total_price}"]
        lines.extend(f"  {i}. {item}" for i, item in enumerate(self._items, start=1))
        return "\n".join(lines)


class CartCaretaker:
    """
    Keeps saved snapshots of one cart.

    ``undo`` restores the most recently saved snapshot and forgets it, so
    repeated undos walk back through older saves.
    """

    def __init__(self, cart: ShoppingCart):
        self.cart = cart
        self._snapshots: list[CartSnapshot] = []

    @property
    def depth(self) -> int:
        return len(self._snapshots)

    def save(self) -> CartSnapshot:
        snapshot = self.cart.create_snapshot()
        self._snapshots.append(snapshot)
        logger.info(f"Cart state saved ({self.depth} saved)")
        return snapshot

    def undo(self) -> bool:
        """
        Restore the latest saved state.

        Returns:
            True if a snapshot was restored, False if none were saved
        """
        if not self._snapshots:
            logger.warning("No saved cart states to restore")
            return False

        snapshot = self._snapshots.pop()
        self.cart.restore(snapshot)
        logger.info(f"Restored state from {snapshot.taken_at:%H:%M:%S} ({self.depth} left)")
        return True

    def history(self) -> list[CartSnapshot]:
        """Saved snapshots, oldest first."""
        return list(self._snapshots)
