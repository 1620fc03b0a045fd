from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any

from order_pipeline.catalog import Catalog
from order_pipeline.config import PipelineConfig
from order_pipeline.journal import Journal
from order_pipeline.models import InventoryChecked, Order, PaymentProcessed
from order_pipeline.services import InventoryService, PaymentService, ShippingService


class Stage(ABC):
    def __init__(self, config: PipelineConfig):
        self.config = config

    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    async def execute(self, value: Any, journal: Journal) -> Any: ...

    async def run(self, value: Any, journal: Journal) -> Any:
        delay = self.config.next_delay()
        if delay > 0:
            journal.debug(f"{self.name()} waiting {delay:.3f}s")
            await asyncio.sleep(delay)
        journal.log(f"STEP {self.name()}")
        result = await self.execute(value, journal)
        journal.log(f"STEP {self.name()} OK")
        return result


class CheckInventory(Stage):
    def __init__(self, config: PipelineConfig, catalog: Catalog):
        super().__init__(config)
        self.service = InventoryService(catalog)

    def name(self) -> str:
        return "CheckInventory"

    async def execute(self, value: Order, journal: Journal) -> InventoryChecked:
        return self.service.check_inventory(value, journal)


class ProcessPayment(Stage):
    def __init__(self, config: PipelineConfig):
        super().__init__(config)
        self.service = PaymentService(config)

    def name(self) -> str:
        return "ProcessPayment"

    async def execute(self, value: InventoryChecked, journal: Journal) -> PaymentProcessed:
        return self.service.process_payment(value, journal)


class ShipOrder(Stage):
    def __init__(self, config: PipelineConfig):
        super().__init__(config)
        self.service = ShippingService()

    def name(self) -> str:
        return "ShipOrder"

    async def execute(self, value: PaymentProcessed, journal: Journal) -> str:
        return self.service.ship_order(value, journal)
