import uuid

from django.db import models

from .encoding import decode_string_list, encode_string_list


def generate_product_id() -> str:
    return str(uuid.uuid4())


class Category(models.Model):
    slug = models.SlugField(max_length=100, unique=True)
    nombre = models.CharField(max_length=100)
    descripcion = models.CharField(max_length=500, blank=True, default="")
    icono = models.CharField(max_length=20, blank=True, default="")
    ruta = models.CharField(max_length=200, null=True, blank=True)

    class Meta:
        db_table = "categories"
        ordering = ["id"]

    def save(self, *args, **kwargs):
        # Slugs are compared lowercase everywhere.
        if self.slug:
            self.slug = self.slug.strip().lower()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.nombre


class Product(models.Model):
    id = models.CharField(
        primary_key=True, max_length=100, default=generate_product_id, editable=False
    )
    nombre = models.CharField(max_length=200, null=True, blank=True)
    titulo = models.CharField(max_length=200, null=True, blank=True)
    descripcion = models.TextField(blank=True, default="")
    precio = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    precio_anterior = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True
    )
    badge = models.CharField(max_length=50, null=True, blank=True)
    # normal | featured | wide | tall; free text, not validated
    size = models.CharField(max_length=20, null=True, blank=True)
    nuevo = models.BooleanField(default=False)
    stock = models.IntegerField(null=True, blank=True)
    tallas_json = models.TextField(null=True, blank=True)
    caracteristicas_json = models.TextField(null=True, blank=True)
    ruta = models.CharField(max_length=200, null=True, blank=True)
    categoria = models.ForeignKey(
        Category, on_delete=models.PROTECT, related_name="productos"
    )

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["nombre"], name="product_nombre_idx"),
            models.Index(fields=["precio"], name="product_precio_idx"),
            models.Index(fields=["nuevo"], name="product_nuevo_idx"),
        ]

    def __str__(self):
        return self.nombre or self.titulo or self.id

    @property
    def tallas(self):
        return decode_string_list(self.tallas_json, owner=self.pk, field="tallas")

    @tallas.setter
    def tallas(self, values):
        self.tallas_json = encode_string_list(values)

    @property
    def caracteristicas(self):
        return decode_string_list(
            self.caracteristicas_json, owner=self.pk, field="caracteristicas"
        )

    @caracteristicas.setter
    def caracteristicas(self, values):
        self.caracteristicas_json = encode_string_list(values)


class ProductImage(models.Model):
    url = models.CharField(max_length=500)
    es_principal = models.BooleanField(default=False)
    orden = models.IntegerField(default=0)
    producto = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="imagenes"
    )

    class Meta:
        db_table = "product_images"
        ordering = ["orden", "id"]
        indexes = [
            models.Index(fields=["producto", "orden"], name="image_producto_orden_idx"),
        ]

    def __str__(self):
        return f"{self.producto_id}#{self.orden}"


class ProductColor(models.Model):
    hex = models.CharField(max_length=20)
    nombre = models.CharField(max_length=50, null=True, blank=True)
    producto = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="colores"
    )

    class Meta:
        db_table = "product_colors"
        ordering = ["id"]

    def __str__(self):
        return self.hex
