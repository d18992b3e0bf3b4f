"""
Demonstration script for the shopping cart.

Runs the same cart through both kinds of history: step-by-step operations
in an OperationLog, and whole-cart snapshots kept by a CartCaretaker.
"""

import logging

from command_history.operation_log import OperationLog
from shopping_cart.cart import CartCaretaker, ShoppingCart
from shopping_cart.operations import AddItem, ClearCart, RemoveItem

# Configure logging to see what's happening
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)


def run_cart_demo() -> ShoppingCart:
    """
    Edit a cart, undo and redo single steps, then roll back to a snapshot.

    This shows:
    1. The OperationLog works for a cart exactly as it does for the elevator
    2. Removing an unknown item is recorded but its undo changes nothing
    3. Snapshots restore the whole cart in one go
    """
    print("\n" + "=" * 70)
    print("COMMAND + MEMENTO DEMO: Shopping Cart History")
    print("=" * 70 + "\n")

    cart = ShoppingCart()
    log = OperationLog()
    caretaker = CartCaretaker(cart)

    print("-" * 70)
    print("ACTION: add three items, remove one that is not there")
    print("-" * 70 + "\n")
    log.execute(AddItem("Laptop"), cart)
    log.execute(AddItem("Wireless Mouse"), cart)
    log.execute(AddItem("USB Cable"), cart)
    log.execute(RemoveItem("Phone"), cart)
    print(f"\n{cart.describe()}")

    print("\n" + "-" * 70)
    print("ACTION: undo twice, redo once")
    print("-" * 70 + "\n")
    log.undo()
    log.undo()
    log.redo()
    print(f"\n{cart.describe()}")
    print("\nHistory (most recent first):")
    for i, name in enumerate(log.history(), start=1):
        print(f"  {i}. {name}")

    print("\n" + "-" * 70)
    print("ACTION: save, clear the cart, restore the saved state")
    print("-" * 70 + "\n")
    caretaker.save()
    log.execute(ClearCart(), cart)
    print(f"\n{cart.describe()}")
    caretaker.undo()
    print(f"\n{cart.describe()}")

    return cart


if __name__ == "__main__":
    run_cart_demo()
