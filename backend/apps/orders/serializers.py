from decimal import Decimal

from rest_framework import serializers

from .dtos import OrderDTO, OrderProductDTO


class OrderProductSerializer(serializers.Serializer):
    id = serializers.CharField()
    nombre = serializers.CharField(required=False)
    precio = serializers.FloatField(required=False)
    imagen = serializers.CharField()
    imagenes = serializers.ListField(child=serializers.CharField())
    categoria = serializers.CharField()
    colores = serializers.ListField(child=serializers.CharField())

    def to_representation(self, instance: OrderProductDTO):
        out = {"id": instance.id}
        if instance.nombre is not None:
            out["nombre"] = instance.nombre
        if instance.precio is not None:
            out["precio"] = (
                float(instance.precio)
                if isinstance(instance.precio, Decimal)
                else instance.precio
            )
        out["imagen"] = instance.imagen
        out["imagenes"] = list(instance.imagenes)
        out["categoria"] = instance.categoria
        out["colores"] = list(instance.colores)
        return out


class OrderReadSerializer(serializers.Serializer):
    id = serializers.CharField()
    nombre = serializers.CharField()
    email = serializers.EmailField()
    telefono = serializers.CharField()
    estado = serializers.CharField()
    fechaPedido = serializers.DateTimeField()
    talla = serializers.CharField()
    color = serializers.CharField()
    cantidad = serializers.IntegerField()
    notasAdicionales = serializers.CharField(required=False)
    producto = OrderProductSerializer(allow_null=True)

    def to_representation(self, instance: OrderDTO):
        if instance is None:
            return None
        out = {
            "id": instance.id,
            "nombre": instance.nombre,
            "email": instance.email,
            "telefono": instance.telefono,
            "estado": instance.estado,
            "fechaPedido": serializers.DateTimeField().to_representation(
                instance.fecha_pedido
            ),
            "talla": instance.talla,
            "color": instance.color,
            "cantidad": instance.cantidad,
        }
        if instance.notas_adicionales is not None:
            out["notasAdicionales"] = instance.notas_adicionales
        # Present as null, never omitted, when the product is gone.
        out["producto"] = (
            OrderProductSerializer(instance.producto).data
            if instance.producto is not None
            else None
        )
        return out


class OrderWriteSerializer(serializers.Serializer):
    nombre = serializers.CharField(max_length=200)
    email = serializers.EmailField(max_length=254)
    telefono = serializers.CharField(max_length=50)
    productoId = serializers.CharField(max_length=100)
    talla = serializers.CharField(max_length=20)
    color = serializers.CharField(max_length=20)
    cantidad = serializers.IntegerField(required=False, default=1, min_value=1)
    notasAdicionales = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )


class OrderStatusSerializer(serializers.Serializer):
    estado = serializers.CharField()
