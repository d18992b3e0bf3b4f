"""
Visitors applied to order trees.

Each visitor keeps a running total (and a line-by-line breakdown) across
every node it is shown. Call ``reset()`` before reusing a visitor on an
unrelated order.

Visitors:
- TaxCalculator: reduced rate for electronics, standard rate otherwise,
  plus a small packaging tax per kg of box
- DeliveryCostCalculator: per-kg cost plus a handling fee per product and
  a packaging fee per box
- WeightCalculator: total shipping weight
- TraversalRecorder: remembers the names of visited nodes, in order
"""

import logging
from decimal import Decimal
from typing import Optional, Protocol, Union

from shared.errors import UnknownVisitorError
from shared.models import Box, PricingRules, Product, VisitorKind

logger = logging.getLogger("visitors")


class Visitor(Protocol):
    """Capabilities the traversal engine and the demos rely on."""

    def visit_product(self, product: Product) -> None: ...

    def visit_box(self, box: Box) -> None: ...

    def reset(self) -> None: ...


class AccumulatingVisitor:
    """Running total plus the (label, amount) entries that make it up."""

    def __init__(self):
        self.total = Decimal("0")
        self.entries: list[tuple[str, Decimal]] = []

    def _record(self, label: str, amount: Decimal) -> None:
        self.total += amount
        self.entries.append((label, amount))
        logger.debug(f"{type(self).__name__}: {label} -> {amount:.2f}")

    def reset(self) -> None:
        self.total = Decimal("0")
        self.entries.clear()


class TaxCalculator(AccumulatingVisitor):
    """
    Tax owed on an order.

    Products recognised as electronics (by name, see
    ``PricingRules.electronic_keywords``) use the reduced rate.
    """

    def __init__(self, rules: Optional[PricingRules] = None):
        super().__init__()
        self.rules = rules or PricingRules()

    def visit_product(self, product: Product) -> None:
        if self.rules.is_electronic(product):
            rate = self.rules.reduced_tax_rate
        else:
            rate = self.rules.standard_tax_rate
        self._record(f"Tax on '{product.name}' ({rate * 100:.0f}%)", product.price * rate)

    def visit_box(self, box: Box) -> None:
        self._record(f"Packaging tax on '{box.name}'", box.weight * self.rules.box_tax_per_kg)


class DeliveryCostCalculator(AccumulatingVisitor):
    def __init__(self, rules: Optional[PricingRules] = None):
        super().__init__()
        self.rules = rules or PricingRules()

    def visit_product(self, product: Product) -> None:
        cost = product.weight * self.rules.delivery_cost_per_kg + self.rules.product_handling_fee
        self._record(f"Delivery of '{product.name}'", cost)

    def visit_box(self, box: Box) -> None:
        cost = box.weight * self.rules.delivery_cost_per_kg + self.rules.box_packaging_fee
        self._record(f"Delivery of box '{box.name}'", cost)


class WeightCalculator(AccumulatingVisitor):
    def visit_product(self, product: Product) -> None:
        self._record(product.name, product.weight)

    def visit_box(self, box: Box) -> None:
        self._record(box.name, box.weight)


class TraversalRecorder:
    """Records node names in the order they were visited."""

    def __init__(self):
        self.visited: list[str] = []

    @property
    def total(self) -> int:
        return len(self.visited)

    def visit_product(self, product: Product) -> None:
        self.visited.append(product.name)

    def visit_box(self, box: Box) -> None:
        self.visited.append(box.name)

    def reset(self) -> None:
        self.visited.clear()


_VISITORS = {
    VisitorKind.TAX: TaxCalculator,
    VisitorKind.DELIVERY: DeliveryCostCalculator,
}


def create_visitor(kind: Union[VisitorKind, str], rules: Optional[PricingRules] = None):
    """
    Build a fresh visitor by name.

    Args:
        kind: A VisitorKind or its value ("tax", "delivery", "weight", "trace")
        rules: Pricing rules for the tax and delivery visitors

    Raises:
        UnknownVisitorError: if ``kind`` is not a known visitor
    """
    try:
        kind = VisitorKind(kind)
    except ValueError as e:
        valid = ", ".join(k.value for k in VisitorKind)
        raise UnknownVisitorError(f"Unknown visitor kind {kind!r}; expected one of: {valid}") from e

    if kind in _VISITORS:
        return _VISITORS[kind](rules)
    if kind == VisitorKind.WEIGHT:
        return WeightCalculator()
    return TraversalRecorder()
