"""
Demonstration script for order pricing.

Prices the nested-box order from the fixtures with the tax and delivery
visitors, then reuses the same visitors on a second order to show why
they have to be reset in between.
"""

import logging
from typing import Optional

from order_pricing.traversal import price_order
from order_pricing.visitors import create_visitor
from shared.data_store import DataStore
from shared.models import OrderSummary, VisitorKind

# Configure logging to see what's happening
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)


def _print_breakdown(title: str, visitor) -> None:
    print(f"\n--- {title} ---")
    for label, amount in visitor.entries:
        print(f"  {label}: ${amount:.2f}")
    print(f"  Total: ${visitor.total:.2f}")


def run_order_pricing_demo(data_store: Optional[DataStore] = None) -> OrderSummary:
    """
    Price Alice's order (boxes inside boxes) and a small follow-up order.

    This shows:
    1. The visitors see every product before the box holding it
    2. The same visitor instance can be reused once it is reset
    """
    print("\n" + "=" * 70)
    print("VISITOR DEMO: Tax and Delivery for a Nested Order")
    print("=" * 70 + "\n")

    data_store = data_store or DataStore()
    rules = data_store.get_pricing_rules()
    order = data_store.get_order("ord-001")

    print(f"Order {order.id} for {order.customer_name}")
    print(f"Goods subtotal: ${order.calculate_total():.2f}")

    tax = create_visitor(VisitorKind.TAX, rules)
    delivery = create_visitor(VisitorKind.DELIVERY, rules)
    trace = create_visitor(VisitorKind.TRACE)

    order.accept(trace)
    print("\nVisit order: " + " -> ".join(trace.visited))

    order.accept(tax)
    _print_breakdown("Tax", tax)

    order.accept(delivery)
    _print_breakdown("Delivery", delivery)

    summary = price_order(order, rules)
    print("\n" + "-" * 70)
    print(f"ORDER TOTAL: ${summary.total:.2f}")
    print("-" * 70)

    print("\n" + "=" * 70)
    print("Reusing the visitors on a second order (after reset)")
    print("=" * 70)

    tax.reset()
    delivery.reset()
    simple_order = data_store.get_order("ord-002")
    simple_order.accept(tax)
    simple_order.accept(delivery)
    print(f"\nTax for {simple_order.id}: ${tax.total:.2f}")
    print(f"Delivery for {simple_order.id}: ${delivery.total:.2f}")

    return summary


if __name__ == "__main__":
    run_order_pricing_demo()
