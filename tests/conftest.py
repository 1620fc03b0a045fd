"""Pytest fixtures for the order pipeline."""

from decimal import Decimal

import pytest

from order_pipeline.catalog import Catalog
from order_pipeline.config import PipelineConfig
from order_pipeline.pipeline import OrderPipeline


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.from_dict(
        {
            "sunglasses": {"inventory": 817, "cost": Decimal("9.99")},
            "pants": {"inventory": 236, "cost": Decimal("7.99")},
            "bags": {"inventory": 17, "cost": Decimal("12.99")},
            "hats": {"inventory": 0, "cost": Decimal("5.00")},  # Sold out
        }
    )


@pytest.fixture
def config() -> PipelineConfig:
    return PipelineConfig.immediate(seed=42)


@pytest.fixture
def pipeline(catalog, config) -> OrderPipeline:
    return OrderPipeline(catalog, config)
