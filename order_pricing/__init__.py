"""
Order pricing with the Composite and Visitor patterns.

Orders are trees of products packed in boxes. Visitors walk those trees
to work out tax, delivery cost and shipping weight without the tree
knowing anything about pricing.
"""

from order_pricing.traversal import accept, price_order, walk
from order_pricing.visitors import (
    AccumulatingVisitor,
    DeliveryCostCalculator,
    TaxCalculator,
    TraversalRecorder,
    Visitor,
    WeightCalculator,
    create_visitor,
)

__all__ = [
    "accept",
    "walk",
    "price_order",
    "Visitor",
    "AccumulatingVisitor",
    "TaxCalculator",
    "DeliveryCostCalculator",
    "WeightCalculator",
    "TraversalRecorder",
    "create_visitor",
]
