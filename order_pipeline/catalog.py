from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from order_pipeline.models import CatalogItem


class Catalog(Mapping[str, CatalogItem]):
    """
    Read-only item table: name -> inventory and unit cost.

    The pipeline never mutates it, so one instance can be shared by any
    number of concurrent runs.
    """

    def __init__(self, items: Mapping[str, CatalogItem]) -> None:
        self._items = MappingProxyType(dict(items))

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping]) -> "Catalog":
        items: Dict[str, CatalogItem] = {}
        for name, entry in data.items():
            items[name] = CatalogItem(
                name=name,
                inventory=entry["inventory"],
                unit_cost=entry["cost"],
            )
        return cls(items)

    def __getitem__(self, name: str) -> CatalogItem:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def lookup(self, name: str) -> Optional[CatalogItem]:
        return self._items.get(name)

    def __repr__(self) -> str:
        return f"Catalog({dict(self._items)!r})"


DEFAULT_CATALOG_DATA = {
    "sunglasses": {"inventory": 817, "cost": Decimal("9.99")},
    "pants": {"inventory": 236, "cost": Decimal("7.99")},
    "bags": {"inventory": 17, "cost": Decimal("12.99")},
}


def default_catalog() -> Catalog:
    return Catalog.from_dict(DEFAULT_CATALOG_DATA)
