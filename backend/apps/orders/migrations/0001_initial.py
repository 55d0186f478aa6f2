import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("catalog", "0002_add_indexes"),
    ]

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("nombre", models.CharField(max_length=200)),
                ("email", models.EmailField(max_length=254)),
                ("telefono", models.CharField(max_length=50)),
                ("notas_adicionales", models.TextField(blank=True, null=True)),
                (
                    "fecha_pedido",
                    models.DateTimeField(
                        default=django.utils.timezone.now, editable=False
                    ),
                ),
                (
                    "estado",
                    models.CharField(
                        choices=[
                            ("pendiente", "Pendiente"),
                            ("confirmado", "Confirmado"),
                            ("procesando", "Procesando"),
                            ("enviado", "Enviado"),
                            ("entregado", "Entregado"),
                            ("cancelado", "Cancelado"),
                            ("devuelto", "Devuelto"),
                        ],
                        default="pendiente",
                        max_length=20,
                    ),
                ),
                ("talla", models.CharField(max_length=20)),
                ("color", models.CharField(max_length=20)),
                (
                    "cantidad",
                    models.PositiveIntegerField(
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "producto",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="pedidos",
                        to="catalog.product",
                    ),
                ),
            ],
            options={
                "db_table": "orders",
                "ordering": ["-fecha_pedido"],
                "indexes": [
                    models.Index(fields=["estado"], name="order_estado_idx"),
                    models.Index(fields=["fecha_pedido"], name="order_fecha_idx"),
                ],
            },
        ),
    ]
