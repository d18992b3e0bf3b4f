"""
Shared infrastructure for the pattern demos.

This package contains code used by the elevator, order pricing and
shopping cart demos:
- Domain and configuration models (order tree, building, pricing rules)
- Data store for the JSON fixtures
- Exception types
"""

from shared.models import (
    Product,
    Box,
    Order,
    OrderSummary,
    BuildingConfig,
    PricingRules,
    CartSnapshot,
    OperationKind,
    OperationStatus,
    VisitorKind,
)
from shared.data_store import DataStore
from shared.errors import (
    PatternDemoError,
    CycleError,
    UnknownVisitorError,
    OperationStateError,
)

__all__ = [
    "Product",
    "Box",
    "Order",
    "OrderSummary",
    "BuildingConfig",
    "PricingRules",
    "CartSnapshot",
    "OperationKind",
    "OperationStatus",
    "VisitorKind",
    "DataStore",
    "PatternDemoError",
    "CycleError",
    "UnknownVisitorError",
    "OperationStateError",
]
