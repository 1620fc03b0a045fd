from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional, Tuple

from order_pipeline.catalog import Catalog
from order_pipeline.config import PipelineConfig
from order_pipeline.journal import Journal
from order_pipeline.models import InventoryChecked, Order, PaymentProcessed, PipelineResult, PipelineState
from order_pipeline.services import PipelineError
from order_pipeline.stages import CheckInventory, ProcessPayment, ShipOrder, Stage


class OrderPipeline:
    """
    Runs an order through CheckInventory -> ProcessPayment -> ShipOrder.

    Stages run one after another; the first ``PipelineError`` aborts the run
    and its message becomes the result. Anything else is a bug and is raised.
    """

    def __init__(self, catalog: Catalog, config: Optional[PipelineConfig] = None):
        self.catalog = catalog
        self.config = config or PipelineConfig()

    def _stages(self) -> List[Tuple[Stage, PipelineState]]:
        return [
            (CheckInventory(self.config, self.catalog), PipelineState.INVENTORY_CHECKED),
            (ProcessPayment(self.config), PipelineState.PAYMENT_PROCESSED),
            (ShipOrder(self.config), PipelineState.SHIPPED),
        ]

    async def run(self, order: Order) -> PipelineResult:
        journal = Journal(order.order_id)
        journal.log(
            f"PIPELINE START items={[(line.item, line.quantity) for line in order.items]} "
            f"giftcard={order.giftcard_balance}"
        )
        result = PipelineResult(order_id=order.order_id, state=PipelineState.PENDING, message="", logs=journal.lines)

        value = order
        try:
            for stage, reached in self._stages():
                value = await stage.run(value, journal)
                result.state = reached
                result.completed_stages.append(stage.name())
                if isinstance(value, InventoryChecked):
                    result.total_cost = value.total_cost
                elif isinstance(value, PaymentProcessed):
                    result.tracking_number = value.tracking_number
        except PipelineError as e:
            journal.log(f"PIPELINE FAILED: {e.message}")
            journal.log("PIPELINE END (failed)")
            result.state = PipelineState.ABORTED
            result.reason = type(e).__name__
            result.message = e.message
            return result

        journal.log("PIPELINE OK")
        result.message = value
        return result

    async def process(self, order: Order) -> str:
        return (await self.run(order)).message

    async def run_many(self, orders: Iterable[Order]) -> List[PipelineResult]:
        return list(await asyncio.gather(*(self.run(order) for order in orders)))
