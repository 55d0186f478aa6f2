from typing import Iterable, List, Optional

from django.core.exceptions import ObjectDoesNotExist

from apps.catalog.mappers import ProductMapper
from apps.catalog.models import Product
from .dtos import OrderDTO, OrderProductDTO
from .models import Order


class OrderProductMapper:
    @staticmethod
    def to_dto(product: Optional[Product]) -> Optional[OrderProductDTO]:
        if product is None:
            return None
        urls = ProductMapper.image_urls(product)
        return OrderProductDTO(
            id=str(product.id),
            nombre=product.nombre,
            precio=product.precio,
            imagen=urls[0] if urls else "",
            imagenes=urls,
            categoria=ProductMapper.category_name(product) or "",
            colores=ProductMapper.color_hexes(product),
        )


class OrderMapper:
    def __init__(self, product_mapper: Optional[OrderProductMapper] = None) -> None:
        self.product_mapper = product_mapper or OrderProductMapper()

    @staticmethod
    def _resolve_product(order: Order) -> Optional[Product]:
        try:
            return order.producto
        except ObjectDoesNotExist:
            return None

    def to_dto(self, order: Order) -> OrderDTO:
        return OrderDTO(
            id=str(order.id),
            nombre=order.nombre,
            email=order.email,
            telefono=order.telefono,
            estado=order.estado,
            fecha_pedido=order.fecha_pedido,
            talla=order.talla,
            color=order.color,
            cantidad=order.cantidad,
            notas_adicionales=order.notas_adicionales,
            producto=self.product_mapper.to_dto(self._resolve_product(order)),
        )

    def many_to_dto(self, orders: Iterable[Order]) -> List[OrderDTO]:
        return [self.to_dto(o) for o in orders]
