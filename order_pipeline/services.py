from __future__ import annotations

from decimal import Decimal

from order_pipeline.catalog import Catalog
from order_pipeline.config import PipelineConfig
from order_pipeline.journal import Journal
from order_pipeline.models import InventoryChecked, Order, PaymentProcessed


class PipelineError(Exception):
    """A stage refused the order. ``message`` is what the caller gets back."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OutOfStock(PipelineError):
    def __init__(self, item: str, requested: int, available: int):
        super().__init__("The order could not be completed because some items are sold out.")
        self.item = item
        self.requested = requested
        self.available = available


class UnknownItem(PipelineError):
    def __init__(self, item: str):
        super().__init__(f"The order could not be completed because item '{item}' is not in the catalog.")
        self.item = item


class InsufficientBalance(PipelineError):
    def __init__(self, balance: Decimal, total_cost: Decimal):
        super().__init__("Cannot process order: giftcard balance was insufficient.")
        self.balance = balance
        self.total_cost = total_cost


class InventoryService:
    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def check_inventory(self, order: Order, journal: Journal) -> InventoryChecked:
        for line in order.items:
            item = self.catalog.lookup(line.item)
            if item is None:
                raise UnknownItem(line.item)
            if item.inventory < line.quantity:
                journal.debug(f"sold out: {line.item} have={item.inventory}, need={line.quantity}")
                raise OutOfStock(line.item, line.quantity, item.inventory)

        total = self.total_cost(order)
        journal.log(f"All of the items are in stock. The total cost of the order is ${total}")
        return InventoryChecked(order=order, total_cost=total)

    def total_cost(self, order: Order) -> Decimal:
        # Exact: compared as-is against the giftcard balance.
        return sum(
            (self.catalog[line.item].unit_cost * line.quantity for line in order.items),
            Decimal("0"),
        )


class PaymentService:
    def __init__(self, config: PipelineConfig):
        self.config = config

    def process_payment(self, checked: InventoryChecked, journal: Journal) -> PaymentProcessed:
        order = checked.order
        if order.giftcard_balance < checked.total_cost:
            journal.debug(f"balance={order.giftcard_balance}, need={checked.total_cost}")
            raise InsufficientBalance(order.giftcard_balance, checked.total_cost)

        journal.log("Payment processed with giftcard. Generating shipping label.")
        return PaymentProcessed(order=order, tracking_number=self.config.next_tracking_number())


class ShippingService:
    def ship_order(self, paid: PaymentProcessed, journal: Journal) -> str:
        message = f"The order has been shipped. The tracking number is: {paid.tracking_number}"
        journal.log(f"shipped with tracking number {paid.tracking_number}")
        return message
