from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import List, Optional, Tuple


def to_decimal(value, what: str = "amount") -> Decimal:
    """Exact, finite Decimal from a str/int/float/Decimal. No rounding."""
    if isinstance(value, bool):
        raise ValueError(f"{what} must be a number, got {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"{what} must be a number, got {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"{what} must be finite, got {value!r}")
    return result


@dataclass(frozen=True, slots=True)
class CatalogItem:
    name: str
    inventory: int
    unit_cost: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.inventory, bool) or not isinstance(self.inventory, int):
            raise ValueError(f"inventory for {self.name} must be an integer")
        if self.inventory < 0:
            raise ValueError(f"inventory for {self.name} must be >= 0")
        object.__setattr__(self, "unit_cost", to_decimal(self.unit_cost, f"unit cost for {self.name}"))
        if self.unit_cost < 0:
            raise ValueError(f"unit cost for {self.name} must be >= 0")


@dataclass(frozen=True, slots=True)
class OrderLine:
    item: str
    quantity: int

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"quantity for {self.item} must be an integer")
        if self.quantity <= 0:
            raise ValueError(f"quantity for {self.item} must be > 0")


def _new_order_id() -> str:
    return f"ord-{uuid.uuid4().hex[:8]}"


def _as_line(line) -> OrderLine:
    if isinstance(line, OrderLine):
        return line
    try:
        item, quantity = line
    except (TypeError, ValueError):
        raise ValueError(f"order line must be an OrderLine or (item, quantity) pair, got {line!r}") from None
    return OrderLine(item, quantity)


@dataclass(frozen=True, slots=True)
class Order:
    """
    Order request handed to the pipeline once.

    Lines keep the caller's order; the same item may appear more than once.
    """

    items: Tuple[OrderLine, ...]
    giftcard_balance: Decimal
    order_id: str = field(default_factory=_new_order_id)

    def __post_init__(self) -> None:
        lines = tuple(_as_line(line) for line in self.items)
        if not lines:
            raise ValueError("order must contain at least one item")
        object.__setattr__(self, "items", lines)
        object.__setattr__(self, "giftcard_balance", to_decimal(self.giftcard_balance, "giftcard balance"))
        if self.giftcard_balance < 0:
            raise ValueError("giftcard balance must be >= 0")

    @classmethod
    def create(cls, items, giftcard_balance, order_id: Optional[str] = None) -> "Order":
        """Build an order from ``(name, qty)`` pairs and a plain balance value."""
        kwargs = {"order_id": order_id} if order_id else {}
        return cls(items=tuple(items), giftcard_balance=giftcard_balance, **kwargs)


@dataclass(frozen=True, slots=True)
class InventoryChecked:
    order: Order
    total_cost: Decimal


@dataclass(frozen=True, slots=True)
class PaymentProcessed:
    order: Order
    tracking_number: int


class PipelineState(Enum):
    PENDING = "PENDING"
    INVENTORY_CHECKED = "INVENTORY_CHECKED"
    PAYMENT_PROCESSED = "PAYMENT_PROCESSED"
    SHIPPED = "SHIPPED"
    ABORTED = "ABORTED"


@dataclass(slots=True)
class PipelineResult:
    order_id: str
    state: PipelineState
    message: str
    reason: Optional[str] = None
    total_cost: Optional[Decimal] = None
    tracking_number: Optional[int] = None
    completed_stages: List[str] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.state is PipelineState.SHIPPED
