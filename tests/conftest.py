"""
Shared pytest fixtures for the pattern demo tests.

These fixtures provide consistent test data and fresh targets for every
test, so no undo history or visitor total leaks between tests.
"""

import pytest
from decimal import Decimal
from pathlib import Path

from command_history.operation_log import OperationLog
from elevator.building import Building, Elevator
from elevator.controller import LiftControl
from shared.data_store import DataStore
from shared.models import Box, BuildingConfig, Order, PricingRules, Product
from shopping_cart.cart import ShoppingCart


@pytest.fixture
def data_dir() -> Path:
    """Path to the fixture data directory."""
    return Path(__file__).parent.parent / "data"


@pytest.fixture
def data_store(data_dir: Path) -> DataStore:
    """Fresh DataStore instance for each test."""
    return DataStore(data_dir=data_dir)


@pytest.fixture
def pricing_rules() -> PricingRules:
    """Default pricing rules (same values as data/pricing_rules.json)."""
    return PricingRules()


# =============================================================================
# Elevator Fixtures
# =============================================================================

@pytest.fixture
def building() -> Building:
    """Five floors, no move delay."""
    return Building(BuildingConfig(name="Test Tower", floors=5, rooms_per_floor=3))


@pytest.fixture
def elevator(building: Building) -> Elevator:
    """Elevator on floor 1 with closed doors."""
    return Elevator(building)


@pytest.fixture
def log() -> OperationLog:
    return OperationLog()


@pytest.fixture
def control(elevator: Elevator, log: OperationLog) -> LiftControl:
    return LiftControl(elevator, log)


# =============================================================================
# Cart Fixtures
# =============================================================================

@pytest.fixture
def cart() -> ShoppingCart:
    return ShoppingCart()


# =============================================================================
# Order Tree Fixtures
# =============================================================================

@pytest.fixture
def nested_order() -> Order:
    """
    The nested-box order used throughout the pricing tests.

    Large Box
      Medium Box
        Small Box: Wireless Mouse, Mechanical Keyboard
        Bluetooth Headphones
      Laptop
    USB Cable
    Programming Book
    """
    mouse = Product(name="Wireless Mouse", price=Decimal("25"), weight=Decimal("0.2"))
    keyboard = Product(name="Mechanical Keyboard", price=Decimal("75"), weight=Decimal("1.2"))
    headphones = Product(name="Bluetooth Headphones", price=Decimal("100"), weight=Decimal("0.3"))
    laptop = Product(name="Laptop", price=Decimal("1500"), weight=Decimal("2.5"))
    cable = Product(name="USB Cable", price=Decimal("10"), weight=Decimal("0.1"))
    book = Product(name="Programming Book", price=Decimal("45"), weight=Decimal("0.8"))

    small_box = Box(name="Small Box", weight=Decimal("0.2")).add(mouse).add(keyboard)
    medium_box = Box(name="Medium Box", weight=Decimal("0.5")).add(small_box).add(headphones)
    large_box = Box(name="Large Box", weight=Decimal("1.0")).add(medium_box).add(laptop)

    order = Order(id="ord-test", customer_name="Test Customer")
    order.add_component(large_box)
    order.add_component(cable)
    order.add_component(book)
    return order


@pytest.fixture
def nested_order_visit_order() -> list[str]:
    """Names in the post-order a visitor sees them for ``nested_order``."""
    return [
        "Wireless Mouse",
        "Mechanical Keyboard",
        "Small Box",
        "Bluetooth Headphones",
        "Medium Box",
        "Laptop",
        "Large Box",
        "USB Cable",
        "Programming Book",
    ]
