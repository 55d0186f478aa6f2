import unittest
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

from apps.common.errors import InvalidInputError
from apps.orders.mappers import OrderMapper, OrderProductMapper
from apps.orders.services import OrderService


def make_product(product_id="rem-1"):
    return SimpleNamespace(
        id=product_id,
        nombre="Arcana Nº1",
        precio=Decimal("45.00"),
        categoria=SimpleNamespace(nombre="Remeras"),
        imagenes=[SimpleNamespace(url="/images/remera-1.jpg", orden=0, id=1)],
        colores=[SimpleNamespace(hex="#000000")],
    )


class FakeProductLookup:
    def __init__(self, products):
        self._products = {p.id: p for p in products}

    def get(self, **filters):
        return self._products.get(filters.get("id"))


class FakeOrderRepository:
    def __init__(self):
        self._orders = {}
        self.status_updates = []

    def create(self, **data):
        order = SimpleNamespace(
            id=uuid.uuid4(), fecha_pedido=datetime.now(timezone.utc), **data
        )
        self._orders[order.id] = order
        return order

    def get(self, **filters):
        return self._orders.get(filters.get("id"))

    def list_recent(self, estado=None):
        rows = sorted(self._orders.values(), key=lambda o: o.fecha_pedido, reverse=True)
        return [o for o in rows if not estado or o.estado == estado]

    def set_status(self, order, estado):
        self.status_updates.append((order.id, estado))
        order.estado = estado
        return order


class OrderServiceTests(unittest.TestCase):
    def setUp(self):
        self.orders = FakeOrderRepository()
        self.products = FakeProductLookup([make_product()])
        self.service = OrderService(self.orders, self.products, OrderMapper(OrderProductMapper()))
        self.payload = {
            "nombre": "Ana",
            "email": "ana@example.com",
            "telefono": "1155550000",
            "productoId": "rem-1",
            "talla": "M",
            "color": "#000000",
            "cantidad": 2,
        }

    def test_create_sets_pending_and_embeds_product(self):
        dto = self.service.create_order(self.payload)
        self.assertEqual(dto.estado, "pendiente")
        self.assertEqual(dto.cantidad, 2)
        self.assertEqual(dto.producto.id, "rem-1")
        self.assertEqual(dto.producto.imagen, "/images/remera-1.jpg")
        self.assertEqual(dto.producto.categoria, "Remeras")
        self.assertEqual(dto.producto.colores, ["#000000"])

    def test_create_rejects_unknown_product(self):
        self.payload["productoId"] = "nope"
        with self.assertRaises(InvalidInputError) as ctx:
            self.service.create_order(self.payload)
        self.assertEqual(ctx.exception.message, "Producto no encontrado")
        self.assertEqual(self.service.list_orders(), [])

    def test_get_order(self):
        dto = self.service.create_order(self.payload)
        self.assertEqual(self.service.get_order(uuid.UUID(dto.id)).id, dto.id)
        self.assertIsNone(self.service.get_order(uuid.uuid4()))

    def test_list_filters_by_status(self):
        first = self.service.create_order(self.payload)
        self.service.create_order(self.payload)
        self.service.update_status(uuid.UUID(first.id), "enviado")
        self.assertEqual(len(self.service.list_orders()), 2)
        self.assertEqual([o.id for o in self.service.list_orders("enviado")], [first.id])

    def test_update_status_is_idempotent(self):
        dto = self.service.create_order(self.payload)
        order_id = uuid.UUID(dto.id)
        self.assertEqual(self.service.update_status(order_id, "enviado").estado, "enviado")
        self.assertEqual(self.service.update_status(order_id, "enviado").estado, "enviado")

    def test_any_status_may_follow_any_other(self):
        dto = self.service.create_order(self.payload)
        order_id = uuid.UUID(dto.id)
        self.service.update_status(order_id, "entregado")
        self.assertEqual(self.service.update_status(order_id, "pendiente").estado, "pendiente")

    def test_invalid_status_checked_before_lookup(self):
        with self.assertRaises(InvalidInputError):
            self.service.update_status(uuid.uuid4(), "shipped")
        self.assertEqual(self.orders.status_updates, [])

    def test_update_status_unknown_order(self):
        self.assertIsNone(self.service.update_status(uuid.uuid4(), "enviado"))


class OrderMapperTests(unittest.TestCase):
    def test_missing_product_maps_to_none(self):
        order = SimpleNamespace(
            id=uuid.uuid4(),
            nombre="Ana",
            email="ana@example.com",
            telefono="1",
            estado="pendiente",
            fecha_pedido=datetime.now(timezone.utc),
            talla="M",
            color="#000",
            cantidad=1,
            notas_adicionales=None,
            producto=None,
        )
        self.assertIsNone(OrderMapper().to_dto(order).producto)

    def test_product_summary_without_images(self):
        product = make_product()
        product.imagenes = []
        product.nombre = None
        dto = OrderProductMapper.to_dto(product)
        self.assertEqual(dto.imagen, "")
        self.assertEqual(dto.imagenes, [])
        self.assertIsNone(dto.nombre)
