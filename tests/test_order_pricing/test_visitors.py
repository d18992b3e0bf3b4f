"""
Tests for the pricing visitors and the visitor factory.
"""

from decimal import Decimal

import pytest

from order_pricing.demo import run_order_pricing_demo
from order_pricing.visitors import (
    DeliveryCostCalculator,
    TaxCalculator,
    TraversalRecorder,
    WeightCalculator,
    create_visitor,
)
from shared.data_store import DataStore
from shared.errors import UnknownVisitorError
from shared.models import Box, Order, PricingRules, Product, VisitorKind


class TestTaxCalculator:
    """Tests for TaxCalculator."""

    def test_electronics_use_reduced_rate(self, pricing_rules: PricingRules):
        tax = TaxCalculator(pricing_rules)
        tax.visit_product(Product(name="Gaming Laptop", price=Decimal("1000")))
        assert tax.total == Decimal("100")

    def test_other_products_use_standard_rate(self, pricing_rules: PricingRules):
        tax = TaxCalculator(pricing_rules)
        tax.visit_product(Product(name="Programming Book", price=Decimal("45")))
        assert tax.total == Decimal("9")

    def test_box_packaging_tax(self, pricing_rules: PricingRules):
        tax = TaxCalculator(pricing_rules)
        tax.visit_box(Box(name="Box", weight=Decimal("0.3")))
        assert tax.total == Decimal("0.03")

    def test_nested_order(self, nested_order: Order):
        tax = TaxCalculator()
        nested_order.accept(tax)
        assert tax.total == Decimal("180.17")
        assert len(tax.entries) == 9

    def test_custom_rules(self):
        rules = PricingRules(standard_tax_rate=Decimal("0.5"), electronic_keywords=[])
        tax = TaxCalculator(rules)
        tax.visit_product(Product(name="Laptop", price=Decimal("10")))
        assert tax.total == Decimal("5")


class TestDeliveryCostCalculator:
    """Tests for DeliveryCostCalculator."""

    def test_product_cost(self):
        delivery = DeliveryCostCalculator()
        delivery.visit_product(Product(name="Laptop", price=Decimal("1500"), weight=Decimal("2.5")))
        assert delivery.total == Decimal("5.5")

    def test_box_cost(self):
        delivery = DeliveryCostCalculator()
        delivery.visit_box(Box(name="Large Box", weight=Decimal("1.0")))
        assert delivery.total == Decimal("3.5")

    def test_nested_order(self, nested_order: Order):
        delivery = DeliveryCostCalculator()
        nested_order.accept(delivery)
        assert delivery.total == Decimal("21.1")


class TestWeightCalculator:
    def test_matches_box_total_weight(self, nested_order: Order):
        """Test that visiting a box sums the same weight as Box.total_weight()."""
        large_box = nested_order.components[0]
        weight = WeightCalculator()

        large_box.accept(weight)

        assert weight.total == large_box.total_weight() == Decimal("5.9")


class TestReset:
    """Tests for reusing visitors across traversals."""

    def test_accumulates_without_reset(self, nested_order: Order):
        tax = TaxCalculator()
        nested_order.accept(tax)
        nested_order.accept(tax)
        assert tax.total == Decimal("360.34")

    def test_reset_between_orders(self, nested_order: Order):
        """Test that reset leaves no trace of the previous traversal."""
        tax = TaxCalculator()
        nested_order.accept(tax)

        tax.reset()
        second = Order(id="ord-small")
        second.add_component(Product(name="Smartphone", price=Decimal("800"), weight=Decimal("0.3")))
        second.add_component(Box(name="Phone Box", weight=Decimal("0.3")))
        second.accept(tax)

        assert tax.total == Decimal("80.03")
        assert len(tax.entries) == 2

    def test_recorder_reset(self):
        recorder = TraversalRecorder()
        recorder.visit_product(Product(name="a", price=Decimal("1")))
        recorder.reset()
        assert recorder.visited == []
        assert recorder.total == 0


class TestCreateVisitor:
    """Tests for the visitor factory."""

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (VisitorKind.TAX, TaxCalculator),
            ("delivery", DeliveryCostCalculator),
            ("weight", WeightCalculator),
            ("trace", TraversalRecorder),
        ],
    )
    def test_known_kinds(self, kind, expected):
        visitor = create_visitor(kind)
        assert isinstance(visitor, expected)
        for capability in ("visit_product", "visit_box", "reset", "total"):
            assert hasattr(visitor, capability)

    def test_returns_fresh_instances(self):
        assert create_visitor("tax") is not create_visitor("tax")

    def test_passes_rules(self):
        rules = PricingRules(box_packaging_fee=Decimal("9"))
        visitor = create_visitor("delivery", rules)
        assert visitor.rules is rules

    @pytest.mark.parametrize("kind", ["shipping", "", "TAX", None])
    def test_unknown_kind_raises(self, kind):
        with pytest.raises(UnknownVisitorError):
            create_visitor(kind)

    def test_unknown_kind_is_value_error(self):
        with pytest.raises(ValueError):
            create_visitor("discount")


class TestOrderPricingDemo:
    """Smoke test for the scripted demo."""

    def test_demo_runs(self, data_store: DataStore, capsys):
        summary = run_order_pricing_demo(data_store)

        assert summary.total == Decimal("1956.27")
        out = capsys.readouterr().out
        assert "Wireless Mouse -> Mechanical Keyboard -> Small Box" in out
        assert "Tax for ord-002: $80.03" in out
