"""
JSON-backed data store for the pattern demos.

This module reads the fixtures the demos start from: the building the
elevator runs in, the sample orders the pricing visitors walk, and the
pricing rules those visitors apply.

Design decisions:
- Fixtures are read lazily, on first access
- Missing fixture files fall back to defaults (or an empty collection)
- Malformed fixtures fail loudly with pydantic's ValidationError
- Orders are handed out as deep copies so a demo that re-packs boxes
  cannot corrupt the cached fixture for the next caller
"""

import json
import logging
from pathlib import Path
from typing import Optional

from shared.models import BuildingConfig, Order, PricingRules

logger = logging.getLogger("data_store")


class DataStore:
    """
    Central access point for the JSON fixtures in ``data/``.

    Example:
        store = DataStore()
        order = store.get_order("ord-001")
        rules = store.get_pricing_rules()
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Initialize the data store.

        Args:
            data_dir: Path to the directory containing JSON fixtures.
                     Defaults to ./data relative to project root.
        """
        if data_dir is None:
            data_dir = Path(__file__).parent.parent / "data"

        self.data_dir = Path(data_dir)

        self._building: Optional[BuildingConfig] = None
        self._pricing_rules: Optional[PricingRules] = None
        self._orders: Optional[dict[str, Order]] = None

    # =========================================================================
    # Data Loading (lazy)
    # =========================================================================

    def _load_json(self, filename: str):
        """Load a JSON fixture file, or None if it does not exist."""
        filepath = self.data_dir / filename
        if not filepath.exists():
            logger.debug(f"Fixture not found, using defaults: {filepath}")
            return None
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)

    def _ensure_orders_loaded(self):
        if self._orders is None:
            data = self._load_json("orders.json") or []
            self._orders = {o["id"]: Order.model_validate(o) for o in data}

    # =========================================================================
    # Configuration
    # =========================================================================

    def get_building_config(self) -> BuildingConfig:
        """Building layout for the elevator demo."""
        if self._building is None:
            data = self._load_json("building.json")
            self._building = BuildingConfig.model_validate(data) if data else BuildingConfig()
        return self._building

    def get_pricing_rules(self) -> PricingRules:
        """Tax and delivery rates for the pricing visitors."""
        if self._pricing_rules is None:
            data = self._load_json("pricing_rules.json")
            self._pricing_rules = PricingRules.model_validate(data) if data else PricingRules()
        return self._pricing_rules

    # =========================================================================
    # Order Operations
    # =========================================================================

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get a fresh copy of an order by ID."""
        self._ensure_orders_loaded()
        order = self._orders.get(order_id)
        return order.model_copy(deep=True) if order else None

    def get_orders(self) -> list[Order]:
        """Get fresh copies of all orders, in fixture order."""
        self._ensure_orders_loaded()
        return [o.model_copy(deep=True) for o in self._orders.values()]

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def reload(self):
        """Force reload all data from JSON files."""
        self._building = None
        self._pricing_rules = None
        self._orders = None
