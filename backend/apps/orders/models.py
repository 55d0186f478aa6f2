import uuid

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.catalog.models import Product


class OrderStatus(models.TextChoices):
    PENDIENTE = "pendiente", "Pendiente"
    CONFIRMADO = "confirmado", "Confirmado"
    PROCESANDO = "procesando", "Procesando"
    ENVIADO = "enviado", "Enviado"
    ENTREGADO = "entregado", "Entregado"
    CANCELADO = "cancelado", "Cancelado"
    DEVUELTO = "devuelto", "Devuelto"


CREATION_STATUS = OrderStatus.PENDIENTE
# procesando and devuelto remain valid stored values but cannot be set.
UPDATABLE_STATUSES = (
    OrderStatus.PENDIENTE,
    OrderStatus.CONFIRMADO,
    OrderStatus.ENVIADO,
    OrderStatus.ENTREGADO,
    OrderStatus.CANCELADO,
)


class Order(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    nombre = models.CharField(max_length=200)
    email = models.EmailField(max_length=254)
    telefono = models.CharField(max_length=50)
    notas_adicionales = models.TextField(null=True, blank=True)
    fecha_pedido = models.DateTimeField(default=timezone.now, editable=False)
    estado = models.CharField(
        max_length=20, choices=OrderStatus.choices, default=CREATION_STATUS
    )
    producto = models.ForeignKey(
        Product, on_delete=models.PROTECT, related_name="pedidos"
    )
    talla = models.CharField(max_length=20)
    color = models.CharField(max_length=20)
    cantidad = models.PositiveIntegerField(
        default=1, validators=[MinValueValidator(1)]
    )

    class Meta:
        db_table = "orders"
        ordering = ["-fecha_pedido"]
        indexes = [
            models.Index(fields=["estado"], name="order_estado_idx"),
            models.Index(fields=["fecha_pedido"], name="order_fecha_idx"),
        ]

    def __str__(self):
        return f"Order {self.id} ({self.estado})"
