from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from apps.common import get_logger
from apps.common.errors import InvalidInputError
from .commands import OrderCreateCommand, OrderStatusCommand
from .dtos import OrderDTO
from .models import CREATION_STATUS
from .protocols import (
    OrderMapperProtocol,
    OrderRepositoryProtocol,
    ProductLookupProtocol,
)

logger = get_logger(__name__).bind(component="orders", layer="service")

PRODUCT_NOT_FOUND_MESSAGE = "Producto no encontrado"


class OrderService:
    def __init__(
        self,
        orders: OrderRepositoryProtocol,
        products: ProductLookupProtocol,
        order_mapper: OrderMapperProtocol,
    ):
        self.orders = orders
        self.products = products
        self.order_mapper = order_mapper
        self.logger = logger.bind(service="OrderService")

    def create_order(
        self, data: Union[Mapping[str, Any], OrderCreateCommand]
    ) -> OrderDTO:
        cmd = (
            data
            if isinstance(data, OrderCreateCommand)
            else OrderCreateCommand.from_raw(data)
        )
        self.logger.info(
            "Creating order", producto_id=cmd.producto_id, cantidad=cmd.cantidad
        )
        product = self.products.get(id=cmd.producto_id)
        if not product:
            self.logger.warning(
                "Order rejected: product not found", producto_id=cmd.producto_id
            )
            raise InvalidInputError(
                PRODUCT_NOT_FOUND_MESSAGE, {"productoId": cmd.producto_id}
            )
        # No stock is decremented or reserved here.
        order = self.orders.create(
            nombre=cmd.nombre,
            email=cmd.email,
            telefono=cmd.telefono,
            producto=product,
            talla=cmd.talla,
            color=cmd.color,
            cantidad=cmd.cantidad,
            notas_adicionales=cmd.notas_adicionales,
            estado=CREATION_STATUS,
        )
        self.logger.info("Order created", order_id=order.id, producto_id=product.id)
        return self.order_mapper.to_dto(order)

    def get_order(self, order_id) -> Optional[OrderDTO]:
        self.logger.debug("Fetching order", order_id=order_id)
        order = self.orders.get(id=order_id)
        if not order:
            self.logger.info("Order not found", order_id=order_id)
            return None
        return self.order_mapper.to_dto(order)

    def list_orders(self, estado: Optional[str] = None) -> List[OrderDTO]:
        self.logger.debug("Listing orders", estado=estado)
        return self.order_mapper.many_to_dto(self.orders.list_recent(estado))

    def update_status(
        self, order_id, estado: Union[str, OrderStatusCommand]
    ) -> Optional[OrderDTO]:
        """Set the order's status; any allowed value may replace any other.

        The value is checked before the order is looked up, so an invalid
        status is reported even for unknown orders.
        """
        cmd = (
            estado
            if isinstance(estado, OrderStatusCommand)
            else OrderStatusCommand.from_raw(estado)
        )
        order = self.orders.get(id=order_id)
        if not order:
            self.logger.warning("Status update failed: order not found", order_id=order_id)
            return None
        previous = order.estado
        self.orders.set_status(order, cmd.estado)
        self.logger.info(
            "Order status updated", order_id=order_id, previous=previous, estado=cmd.estado
        )
        return self.order_mapper.to_dto(order)
