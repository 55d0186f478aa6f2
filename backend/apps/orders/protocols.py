from __future__ import annotations

from typing import Iterable, Optional, Protocol, TYPE_CHECKING

from .models import Order

if TYPE_CHECKING:
    from apps.catalog.models import Product
    from apps.orders.dtos import OrderDTO


class OrderRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional[Order]:
        ...

    def create(self, **data) -> Order:
        ...

    def list_recent(self, estado: Optional[str] = None) -> Iterable[Order]:
        ...

    def set_status(self, order: Order, estado: str) -> Order:
        ...


class ProductLookupProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]:
        ...


class OrderMapperProtocol(Protocol):
    def to_dto(self, order: Order) -> "OrderDTO":
        ...

    def many_to_dto(self, orders: Iterable[Order]) -> list:
        ...
