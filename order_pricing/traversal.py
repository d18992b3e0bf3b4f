"""
Composite traversal engine.

Walks an order tree in post-order (everything inside a box before the box
itself) and hands each node to a visitor. Visitors accumulate their own
results; the engine never resets them, so running two traversals with the
same visitor adds up unless the caller resets it in between.

Key points:
- Children are visited in insertion order, so traversal is deterministic
- Box-level costs (packaging) are seen after the item-level costs inside
- Trees are acyclic by construction (Box.add refuses cycles); ``guard=True``
  additionally checks while walking, for trees assembled by other means
"""

import logging
from typing import Iterator, Optional, Union

from order_pricing.visitors import DeliveryCostCalculator, TaxCalculator, Visitor
from shared.errors import CycleError
from shared.models import Box, Order, OrderSummary, PricingRules, Product

logger = logging.getLogger("traversal")

Node = Union[Product, Box]


def accept(node: Node, visitor: Visitor, guard: bool = False) -> None:
    """
    Apply a visitor to every node under (and including) ``node``.

    Args:
        node: Product or Box to start from
        visitor: Anything with visit_product(product) and visit_box(box)
        guard: Track the boxes on the current path and raise CycleError if
               one is entered twice

    Raises:
        CycleError: only with guard=True, when the tree contains a cycle
        TypeError: if a node is neither a Product nor a Box
    """
    _accept(node, visitor, set() if guard else None)


def _accept(node: Node, visitor: Visitor, path: Optional[set[int]]) -> None:
    if node.kind == "product":
        logger.debug(f"Visiting product '{node.name}'")
        visitor.visit_product(node)
        return

    if node.kind != "box":
        raise TypeError(f"Cannot traverse node of kind {node.kind!r}")

    if path is not None:
        if id(node) in path:
            raise CycleError(f"Box '{node.name}' contains itself")
        path.add(id(node))

    for child in node.children:
        _accept(child, visitor, path)

    if path is not None:
        path.discard(id(node))

    logger.debug(f"Visiting box '{node.name}'")
    visitor.visit_box(node)


def walk(node: Node) -> Iterator[Node]:
    """Lazily yield nodes in the same post-order ``accept`` visits them."""
    if isinstance(node, Box):
        for child in node.children:
            yield from walk(child)
    yield node


def price_order(order: Order, rules: Optional[PricingRules] = None) -> OrderSummary:
    """
    Run the tax and delivery visitors over an order.

    Fresh visitors are used for every call, so summaries never carry totals
    over from another order.
    """
    rules = rules or PricingRules()
    tax = TaxCalculator(rules)
    delivery = DeliveryCostCalculator(rules)
    order.accept(tax)
    order.accept(delivery)

    summary = OrderSummary(
        order_id=order.id,
        subtotal=order.calculate_total(),
        tax=tax.total,
        delivery=delivery.total,
    )
    logger.info(
        f"Priced order {order.id}: subtotal={summary.subtotal} tax={summary.tax} "
        f"delivery={summary.delivery} total={summary.total}"
    )
    return summary
