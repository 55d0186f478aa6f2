from __future__ import annotations

from apps.catalog.repositories import ProductRepository

from .mappers import OrderMapper, OrderProductMapper
from .repositories import OrderRepository
from .services import OrderService


def build_order_service() -> OrderService:
    return OrderService(
        orders=OrderRepository(),
        products=ProductRepository(),
        order_mapper=OrderMapper(OrderProductMapper()),
    )
