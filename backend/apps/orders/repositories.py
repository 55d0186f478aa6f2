from typing import Iterable, Optional

from django.db.models import Prefetch

from apps.catalog.models import ProductColor, ProductImage
from apps.common.repository import GenericRepository
from .models import Order


class OrderRepository(GenericRepository[Order]):
    def __init__(self):
        super().__init__(Order)

    def queryset(self):  # type: ignore[override]
        """Orders with the product summary's relations loaded up front."""
        return self.model.objects.select_related("producto__categoria").prefetch_related(
            Prefetch(
                "producto__imagenes",
                queryset=ProductImage.objects.order_by("orden", "id"),
            ),
            Prefetch("producto__colores", queryset=ProductColor.objects.order_by("id")),
        )

    def list_recent(self, estado: Optional[str] = None) -> Iterable[Order]:
        qs = self.queryset()
        if estado:
            qs = qs.filter(estado=estado)
        return qs.order_by("-fecha_pedido")

    def set_status(self, order: Order, estado: str) -> Order:
        order.estado = estado
        order.save(update_fields=["estado"])
        return order
