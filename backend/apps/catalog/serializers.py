from decimal import Decimal

from rest_framework import serializers

from .dtos import CategoryDTO, ProductDTO

# (DTO attribute, output key, always emitted) in output order.
PRODUCT_FIELDS = (
    ("id", "id", True),
    ("nombre", "nombre", False),
    ("titulo", "titulo", False),
    ("imagen", "imagen", True),
    ("imagenes", "imagenes", False),
    ("precio", "precio", False),
    ("precio_anterior", "precioAnterior", False),
    ("categoria", "categoria", False),
    ("nuevo", "nuevo", True),
    ("colores", "colores", False),
    ("descripcion", "descripcion", False),
    ("caracteristicas", "caracteristicas", False),
    ("stock", "stock", False),
    ("tallas", "tallas", False),
    ("ruta", "ruta", False),
    ("badge", "badge", False),
    ("size", "size", False),
)


def _number(value):
    if isinstance(value, Decimal):
        return float(value)
    return value


class ProductReadSerializer(serializers.Serializer):
    # Documents the ProductDTO output shape; keys other than id, imagen and
    # nuevo are only emitted when the product has a value for them.
    id = serializers.CharField()
    nombre = serializers.CharField(required=False)
    titulo = serializers.CharField(required=False)
    imagen = serializers.CharField()
    imagenes = serializers.ListField(child=serializers.CharField(), required=False)
    precio = serializers.FloatField(required=False)
    precioAnterior = serializers.FloatField(required=False)
    categoria = serializers.CharField(required=False)
    nuevo = serializers.BooleanField()
    colores = serializers.ListField(child=serializers.CharField(), required=False)
    descripcion = serializers.CharField(required=False)
    caracteristicas = serializers.ListField(
        child=serializers.CharField(), required=False
    )
    stock = serializers.IntegerField(required=False)
    tallas = serializers.ListField(child=serializers.CharField(), required=False)
    ruta = serializers.CharField(required=False)
    badge = serializers.CharField(required=False)
    size = serializers.CharField(required=False)

    def to_representation(self, instance: ProductDTO):
        if instance is None:
            return None
        out = {}
        for attr, key, always in PRODUCT_FIELDS:
            value = getattr(instance, attr)
            if always or value is not None:
                out[key] = _number(value)
        return out


class CategorySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    slug = serializers.CharField()
    nombre = serializers.CharField()
    descripcion = serializers.CharField()
    icono = serializers.CharField()
    ruta = serializers.CharField(required=False)
    productos = ProductReadSerializer(many=True)

    def to_representation(self, instance: CategoryDTO):
        if instance is None:
            return None
        out = {
            "id": instance.id,
            "slug": instance.slug,
            "nombre": instance.nombre,
            "descripcion": instance.descripcion,
            "icono": instance.icono,
        }
        if instance.ruta is not None:
            out["ruta"] = instance.ruta
        out["productos"] = ProductReadSerializer(instance.productos, many=True).data
        return out


class PageSerializer(serializers.Serializer):
    """Renders a PageResult of ProductDTOs with camelCase navigation fields."""

    items = ProductReadSerializer(many=True)
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    pageSize = serializers.IntegerField()
    totalPages = serializers.IntegerField()
    hasNext = serializers.BooleanField()
    hasPrev = serializers.BooleanField()

    def to_representation(self, instance):
        return {
            "items": ProductReadSerializer(instance.items, many=True).data,
            "total": instance.total,
            "page": instance.page,
            "pageSize": instance.page_size,
            "totalPages": instance.total_pages,
            "hasNext": instance.has_next,
            "hasPrev": instance.has_prev,
        }


class ProductWriteSerializer(serializers.Serializer):
    # Payload for create (POST) and full replace (PUT). ``id`` is optional on
    # create; the server generates one when omitted and ignores it on PUT.
    # Must stay addressable through the <str:product_id> route.
    id = serializers.RegexField(r"^[^/]+$", required=False, max_length=100)
    nombre = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=200
    )
    titulo = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=200
    )
    descripcion = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False, default=""
    )
    precio = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    precioAnterior = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    categoriaId = serializers.IntegerField()
    badge = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=50
    )
    size = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=20
    )
    nuevo = serializers.BooleanField(required=False, default=False)
    stock = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    ruta = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=200
    )
    imagenUrls = serializers.ListField(
        child=serializers.CharField(max_length=500), required=False, default=list
    )
    colores = serializers.ListField(
        child=serializers.CharField(max_length=20), required=False, default=list
    )
    tallas = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True
    )
    caracteristicas = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True
    )
