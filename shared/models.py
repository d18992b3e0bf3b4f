"""
Domain models for the pattern demos.

The order tree (products packed into boxes, boxes packed into boxes) is the
hierarchical structure the pricing visitors walk. The building and pricing
settings are plain configuration models loaded from the JSON fixtures.

Design decisions:
- Using Pydantic for validation and (de)serialization of fixtures
- Tree nodes are tagged variants discriminated by their ``kind`` field,
  so an order can be loaded from JSON without knowing node classes up front
- Money and weights are Decimals so tax/delivery totals stay exact
- Nodes keep identity: the same Product object placed in a Box is the one
  a visitor later receives
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Iterator, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from shared.errors import CycleError

if TYPE_CHECKING:
    from order_pricing.visitors import Visitor


# =============================================================================
# Enums - closed sets of kinds and statuses
# =============================================================================

class OperationStatus(str, Enum):
    """
    Lifecycle of a reversible operation.

    NO_CHANGE and REJECTED both mean nothing happened to the target, but they
    are kept apart so callers can tell "already there" from "refused".
    """
    PENDING = "PENDING"           # Never executed
    APPLIED = "APPLIED"           # Target accepted the change
    NO_CHANGE = "NO_CHANGE"       # Target was already in the requested state
    REJECTED = "REJECTED"         # Target refused the change
    UNDONE = "UNDONE"             # Reversed by undo


class OperationKind(str, Enum):
    """Every operation the demos know how to record."""
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    OPEN_DOOR = "open_door"
    CLOSE_DOOR = "close_door"
    MOVE_TO_FLOOR = "move_to_floor"
    ADD_ITEM = "add_item"
    REMOVE_ITEM = "remove_item"
    CLEAR_CART = "clear_cart"


class VisitorKind(str, Enum):
    """Visitors that can be built by name."""
    TAX = "tax"
    DELIVERY = "delivery"
    WEIGHT = "weight"
    TRACE = "trace"


# =============================================================================
# Configuration models
# =============================================================================

class BuildingConfig(BaseModel):
    """
    Shape of the building the elevator serves.

    ``move_delay`` is the pause (in seconds) the elevator takes between
    floors. It is purely cosmetic and defaults to 0 so tests run instantly.
    """
    name: str = Field(default="Office Tower", description="Display name")
    floors: int = Field(default=5, ge=1, description="Number of floors")
    rooms_per_floor: int = Field(default=3, ge=1, description="Rooms on every floor")
    move_delay: float = Field(default=0.0, ge=0, description="Seconds per move")


class PricingRules(BaseModel):
    """Rates used by the tax and delivery visitors."""
    delivery_cost_per_kg: Decimal = Field(default=Decimal("2.0"), ge=0)
    box_packaging_fee: Decimal = Field(default=Decimal("1.5"), ge=0)
    product_handling_fee: Decimal = Field(default=Decimal("0.5"), ge=0)
    standard_tax_rate: Decimal = Field(default=Decimal("0.2"), ge=0, le=1)
    reduced_tax_rate: Decimal = Field(
        default=Decimal("0.1"),
        ge=0,
        le=1,
        description="Applied to products recognised as electronics",
    )
    box_tax_per_kg: Decimal = Field(default=Decimal("0.1"), ge=0)
    electronic_keywords: list[str] = Field(
        default_factory=lambda: [
            "laptop", "phone", "tablet", "mouse", "keyboard", "headphones", "cable",
        ],
    )

    def is_electronic(self, product: "Product") -> bool:
        """Check the product name (case-insensitive) against the keyword list."""
        name = product.name.lower()
        return any(keyword in name for keyword in self.electronic_keywords)


# =============================================================================
# Order tree
# =============================================================================

class Product(BaseModel):
    """
    Leaf of the order tree.

    ``weight`` is in kilograms and only matters for delivery cost.
    """
    kind: Literal["product"] = "product"
    name: str = Field(..., description="Product display name")
    price: Decimal = Field(..., ge=0, description="Unit price")
    weight: Decimal = Field(default=Decimal("1.0"), ge=0, description="Weight in kg")
    category: Optional[str] = Field(default=None)

    def compute_value(self) -> Decimal:
        return self.price

    def accept(self, visitor: "Visitor") -> None:
        from order_pricing.traversal import accept
        accept(self, visitor)


class Box(BaseModel):
    """
    Container node of the order tree.

    A box's value is the sum of everything packed in it; its own ``weight``
    is the empty-box weight. Children keep insertion order, which is also
    the order visitors see them in.
    """
    kind: Literal["box"] = "box"
    name: str = Field(..., description="Box label")
    weight: Decimal = Field(default=Decimal("0.5"), ge=0, description="Empty box weight in kg")
    children: list["OrderComponent"] = Field(default_factory=list)

    def add(self, component: "OrderComponent") -> "Box":
        """
        Pack a component into this box.

        Raises:
            CycleError: if the component is this box or already contains it
        """
        if isinstance(component, Box):
            if component is self or any(node is self for node in component.descendants()):
                raise CycleError(f"Box '{self.name}' cannot be packed inside itself")
        self.children.append(component)
        return self

    def remove(self, component: "OrderComponent") -> bool:
        """Remove a direct child (matched by identity). Returns False if absent."""
        for index, child in enumerate(self.children):
            if child is component:
                del self.children[index]
                return True
        return False

    def descendants(self) -> Iterator["OrderComponent"]:
        """Yield every node below this box, depth-first."""
        for child in self.children:
            yield child
            if isinstance(child, Box):
                yield from child.descendants()

    def compute_value(self) -> Decimal:
        return sum((child.compute_value() for child in self.children), Decimal("0"))

    def total_weight(self) -> Decimal:
        """Own weight plus the weight of everything inside, recursively."""
        total = self.weight
        for child in self.children:
            if isinstance(child, Box):
                total += child.total_weight()
            else:
                total += child.weight
        return total

    def accept(self, visitor: "Visitor") -> None:
        from order_pricing.traversal import accept
        accept(self, visitor)


OrderComponent = Annotated[Union[Product, Box], Field(discriminator="kind")]

Box.model_rebuild()


class Order(BaseModel):
    """
    A customer order made of top-level components.

    The order itself is not a node: visitors see its components one after
    another, in the order they were added.
    """
    id: str = Field(..., description="Unique order identifier")
    customer_name: str = Field(default="", description="Who placed the order")
    components: list[OrderComponent] = Field(default_factory=list)

    def add_component(self, component: OrderComponent) -> None:
        self.components.append(component)

    def calculate_total(self) -> Decimal:
        """Sum of all product prices in the order (before tax and delivery)."""
        return sum((c.compute_value() for c in self.components), Decimal("0"))

    def accept(self, visitor: "Visitor") -> None:
        from order_pricing.traversal import accept
        for component in self.components:
            accept(component, visitor)


class OrderSummary(BaseModel):
    """Price breakdown produced by running the pricing visitors over an order."""
    order_id: str
    subtotal: Decimal
    tax: Decimal
    delivery: Decimal

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.tax + self.delivery


# =============================================================================
# Shopping cart snapshots
# =============================================================================

class CartSnapshot(BaseModel):
    """
    Frozen copy of a cart's contents.

    Restoring a snapshot never shares the list with the cart, so later edits
    to the cart cannot leak back into the saved history.
    """
    items: tuple[str, ...] = Field(default_factory=tuple)
    taken_at: datetime = Field(default_factory=datetime.now)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        listed = ", ".join(self.items) if self.items else "(empty)"
        return f"Snapshot {self.taken_at:%H:%M:%S}: {listed}"
