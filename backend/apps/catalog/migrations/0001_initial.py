import apps.catalog.models
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("slug", models.SlugField(max_length=100, unique=True)),
                ("nombre", models.CharField(max_length=100)),
                (
                    "descripcion",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                ("icono", models.CharField(blank=True, default="", max_length=20)),
                ("ruta", models.CharField(blank=True, max_length=200, null=True)),
            ],
            options={
                "db_table": "categories",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=apps.catalog.models.generate_product_id,
                        editable=False,
                        max_length=100,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("nombre", models.CharField(blank=True, max_length=200, null=True)),
                ("titulo", models.CharField(blank=True, max_length=200, null=True)),
                ("descripcion", models.TextField(blank=True, default="")),
                (
                    "precio",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=10, null=True
                    ),
                ),
                (
                    "precio_anterior",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=10, null=True
                    ),
                ),
                ("badge", models.CharField(blank=True, max_length=50, null=True)),
                ("size", models.CharField(blank=True, max_length=20, null=True)),
                ("nuevo", models.BooleanField(default=False)),
                ("stock", models.IntegerField(blank=True, null=True)),
                ("tallas_json", models.TextField(blank=True, null=True)),
                ("caracteristicas_json", models.TextField(blank=True, null=True)),
                ("ruta", models.CharField(blank=True, max_length=200, null=True)),
                (
                    "categoria",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="productos",
                        to="catalog.category",
                    ),
                ),
            ],
            options={
                "db_table": "products",
            },
        ),
        migrations.CreateModel(
            name="ProductImage",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("url", models.CharField(max_length=500)),
                ("es_principal", models.BooleanField(default=False)),
                ("orden", models.IntegerField(default=0)),
                (
                    "producto",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="imagenes",
                        to="catalog.product",
                    ),
                ),
            ],
            options={
                "db_table": "product_images",
                "ordering": ["orden", "id"],
            },
        ),
        migrations.CreateModel(
            name="ProductColor",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("hex", models.CharField(max_length=20)),
                ("nombre", models.CharField(blank=True, max_length=50, null=True)),
                (
                    "producto",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="colores",
                        to="catalog.product",
                    ),
                ),
            ],
            options={
                "db_table": "product_colors",
                "ordering": ["id"],
            },
        ),
    ]
