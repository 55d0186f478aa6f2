from io import StringIO

from django.core.management import call_command
from rest_framework import status
from rest_framework.test import APITestCase

from apps.catalog.models import Category, Product, ProductImage
from apps.orders.models import Order

PRODUCTS_URL = "/api/products"


def seed(*args):
    call_command("seed_store", *args, stdout=StringIO())


class TestProductSearch(APITestCase):
    def setUp(self):
        seed()

    def search(self, **params):
        res = self.client.get(PRODUCTS_URL, params)
        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)
        self.assertTrue(res.data["success"])
        return res.data["data"]

    def ids(self, **params):
        params.setdefault("pageSize", 100)
        return [p["id"] for p in self.search(**params)["items"]]

    def test_remeras_by_price_desc_second_page_exists(self):
        page = self.search(
            categoria="remeras",
            minPrecio=40,
            maxPrecio=100,
            orderBy="precio",
            desc="true",
            pageSize=2,
        )
        self.assertEqual([p["precio"] for p in page["items"]], [50.0, 48.0])
        self.assertEqual(page["total"], 4)
        self.assertEqual(page["totalPages"], 2)
        self.assertTrue(page["hasNext"])
        self.assertFalse(page["hasPrev"])

    def test_default_listing(self):
        page = self.search()
        self.assertEqual(page["total"], 12)
        self.assertEqual(page["page"], 1)
        self.assertEqual(page["pageSize"], 12)
        names = [p["nombre"] for p in page["items"]]
        self.assertEqual(names, sorted(names))

    def test_name_descending(self):
        names = [p["nombre"] for p in self.search(desc="true", pageSize=100)["items"]]
        self.assertEqual(names, sorted(names, reverse=True))

    def test_category_is_case_insensitive(self):
        self.assertEqual(self.ids(categoria="REMERAS"), self.ids(categoria="remeras"))
        self.assertEqual(len(self.ids(categoria="Remeras")), 4)

    def test_unknown_category_gives_empty_page(self):
        page = self.search(categoria="zapatos")
        self.assertEqual(page["items"], [])
        self.assertEqual(page["total"], 0)
        self.assertEqual(page["totalPages"], 0)
        self.assertFalse(page["hasNext"])

    def test_price_bounds_are_inclusive(self):
        prices = [p["precio"] for p in self.search(minPrecio=45, maxPrecio=50, pageSize=100)["items"]]
        self.assertEqual(sorted(prices), [45.0, 48.0, 50.0])

    def test_only_new(self):
        items = self.search(soloNuevos="true", pageSize=100)["items"]
        self.assertEqual(len(items), 6)
        self.assertTrue(all(p["nuevo"] for p in items))

    def test_search_matches_name_or_description(self):
        self.assertEqual(self.ids(search="Hoodie"), ["buz-1"])
        self.assertEqual(self.ids(search="tarot"), ["rem-3"])

    def test_whitespace_search_is_ignored(self):
        page = self.search(search="   ")
        self.assertEqual(page["total"], 12)

    def test_filters_combine_as_intersection(self):
        by_category = set(self.ids(categoria="buzos"))
        only_new = set(self.ids(soloNuevos="true"))
        both = set(self.ids(categoria="buzos", soloNuevos="true"))
        self.assertEqual(both, by_category & only_new)
        self.assertEqual(both, {"buz-1", "buz-3"})

    def test_products_without_price_are_excluded_by_price_filters(self):
        Product.objects.create(
            id="sin-precio", nombre="Sin Precio", categoria=Category.objects.get(slug="remeras")
        )
        self.assertIn("sin-precio", self.ids(categoria="remeras"))
        self.assertNotIn("sin-precio", self.ids(categoria="remeras", minPrecio=0))
        self.assertNotIn("sin-precio", self.ids(categoria="remeras", maxPrecio=1000))

    def test_order_by_new_ignores_direction(self):
        asc = self.search(orderBy="nuevo", pageSize=100)["items"]
        desc = self.search(orderBy="nuevo", desc="true", pageSize=100)["items"]
        self.assertEqual([p["id"] for p in asc], [p["id"] for p in desc])
        flags = [p["nuevo"] for p in asc]
        self.assertEqual(flags, sorted(flags, reverse=True))

    def test_pages_partition_the_result(self):
        everything = self.ids()
        collected = []
        for n in (1, 2, 3):
            page = self.search(page=n, pageSize=5)
            collected.extend(p["id"] for p in page["items"])
            self.assertEqual(page["totalPages"], 3)
        self.assertEqual(collected, everything)

    def test_page_past_the_end(self):
        page = self.search(page=4, pageSize=5)
        self.assertEqual(page["items"], [])
        self.assertEqual(page["total"], 12)
        self.assertFalse(page["hasNext"])
        self.assertTrue(page["hasPrev"])

    def test_invalid_query_values_are_rejected(self):
        for params in ({"pageSize": 0}, {"page": 0}, {"minPrecio": "abc"}, {"desc": "quizas"}):
            res = self.client.get(PRODUCTS_URL, params)
            self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST, params)
            self.assertFalse(res.data["success"])
            self.assertTrue(res.data["errors"])


class TestFeaturedProducts(APITestCase):
    def test_default_seed_features_new_products(self):
        seed()
        res = self.client.get(f"{PRODUCTS_URL}/featured")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        items = res.data["data"]
        self.assertEqual(len(items), 6)
        self.assertTrue(all(p["nuevo"] for p in items))

    def test_featured_collection(self):
        seed("--with-featured")
        res = self.client.get(f"{PRODUCTS_URL}/featured", {"limit": 20})
        ids = [p["id"] for p in res.data["data"]]
        self.assertEqual(len(ids), 10)
        self.assertIn("featured-1", ids)
        self.assertIn("featured-4", ids)
        self.assertNotIn("featured-2", ids)
        self.assertNotIn("featured-5", ids)
        flags = [p["nuevo"] for p in res.data["data"]]
        self.assertEqual(flags, sorted(flags, reverse=True))
        badge = next(p for p in res.data["data"] if p["id"] == "featured-1")
        self.assertEqual(badge["badge"], "EXCLUSIVO")
        self.assertEqual(badge["size"], "featured")

    def test_limit(self):
        seed()
        res = self.client.get(f"{PRODUCTS_URL}/featured", {"limit": 2})
        self.assertEqual(len(res.data["data"]), 2)

    def test_zero_limit_gives_empty_list(self):
        seed()
        res = self.client.get(f"{PRODUCTS_URL}/featured", {"limit": 0})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["data"], [])

    def test_negative_limit_rejected(self):
        res = self.client.get(f"{PRODUCTS_URL}/featured", {"limit": -1})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)


class TestCategories(APITestCase):
    def setUp(self):
        seed()

    def test_list_categories_with_products(self):
        res = self.client.get("/api/categories")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        data = res.data["data"]
        self.assertEqual([c["slug"] for c in data], ["remeras", "buzos", "pantalones"])
        self.assertEqual([len(c["productos"]) for c in data], [4, 4, 4])
        self.assertEqual(data[0]["ruta"], "/categoria/remeras")
        self.assertEqual(data[0]["icono"], "✧")

    def test_category_detail_pages_products(self):
        res = self.client.get("/api/categories/Remeras", {"pageSize": 3})
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        data = res.data["data"]
        self.assertEqual(data["slug"], "remeras")
        self.assertEqual(len(data["productos"]), 3)
        self.assertEqual(data["paginacion"]["total"], 4)
        self.assertTrue(data["paginacion"]["hasNext"])

    def test_category_detail_applies_filters(self):
        res = self.client.get("/api/categories/remeras", {"soloNuevos": "true"})
        ids = [p["id"] for p in res.data["data"]["productos"]]
        self.assertEqual(sorted(ids), ["rem-1", "rem-3"])

    def test_unknown_category(self):
        res = self.client.get("/api/categories/zapatos")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data, {"success": False, "errors": ["Categoría 'zapatos' no encontrada"]})


class TestProductDetail(APITestCase):
    def setUp(self):
        seed()

    def test_full_product(self):
        res = self.client.get(f"{PRODUCTS_URL}/rem-1")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        data = res.data["data"]
        self.assertEqual(data["imagen"], "/images/remera-1.jpg")
        self.assertEqual(data["imagenes"], ["/images/remera-1.jpg", "/images/remera-1-alt.jpg"])
        self.assertEqual(data["precioAnterior"], 60.0)
        self.assertEqual(data["categoria"], "Remeras")
        self.assertEqual(len(data["caracteristicas"]), 4)
        self.assertEqual(data["tallas"], ["XS", "S", "M", "L", "XL", "XXL"])
        self.assertEqual(data["colores"][0], "#000000")

    def test_absent_values_are_omitted(self):
        data = self.client.get(f"{PRODUCTS_URL}/rem-2").data["data"]
        for key in ("precioAnterior", "caracteristicas", "stock", "badge", "size", "titulo", "ruta"):
            self.assertNotIn(key, data)
        self.assertNotIn(None, data.values())

    def test_primary_image_is_lowest_order(self):
        product = Product.objects.get(id="rem-1")
        ProductImage.objects.filter(producto=product, orden=1).update(orden=-1)
        data = self.client.get(f"{PRODUCTS_URL}/rem-1").data["data"]
        self.assertEqual(data["imagen"], "/images/remera-1-alt.jpg")

    def test_unknown_product(self):
        res = self.client.get(f"{PRODUCTS_URL}/nope")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["errors"], ["Producto 'nope' no encontrado"])


class TestProductManagement(APITestCase):
    def setUp(self):
        seed()
        self.remeras = Category.objects.get(slug="remeras")
        self.buzos = Category.objects.get(slug="buzos")

    def test_create_read_replace_delete(self):
        payload = {
            "nombre": "Nueva Remera",
            "precio": "55.50",
            "categoriaId": self.remeras.id,
            "nuevo": True,
            "stock": 0,
            "imagenUrls": ["/images/nueva.jpg", "/images/nueva-alt.jpg"],
            "colores": ["#000000"],
            "tallas": ["S", "M"],
        }
        created = self.client.post(PRODUCTS_URL, payload, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED, created.data)
        self.assertEqual(created.data["message"], "Producto creado exitosamente")
        product_id = created.data["data"]["id"]
        self.assertTrue(created["Location"].endswith(f"{PRODUCTS_URL}/{product_id}"))
        self.assertEqual(created.data["data"]["stock"], 0)
        self.assertEqual(created.data["data"]["imagen"], "/images/nueva.jpg")

        fetched = self.client.get(f"{PRODUCTS_URL}/{product_id}")
        self.assertEqual(fetched.data["data"]["precio"], 55.5)
        self.assertEqual(fetched.data["data"]["tallas"], ["S", "M"])

        replaced = self.client.put(
            f"{PRODUCTS_URL}/{product_id}",
            {"nombre": "Ahora Buzo", "categoriaId": self.buzos.id, "imagenUrls": ["/images/otro.jpg"]},
            format="json",
        )
        self.assertEqual(replaced.status_code, status.HTTP_200_OK, replaced.data)
        data = replaced.data["data"]
        self.assertEqual(data["categoria"], "Buzos")
        self.assertEqual(data["imagenes"], ["/images/otro.jpg"])
        self.assertNotIn("precio", data)
        self.assertNotIn("colores", data)
        self.assertFalse(data["nuevo"])

        deleted = self.client.delete(f"{PRODUCTS_URL}/{product_id}")
        self.assertEqual(deleted.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Product.objects.filter(id=product_id).exists())
        self.assertEqual(
            self.client.get(f"{PRODUCTS_URL}/{product_id}").status_code,
            status.HTTP_404_NOT_FOUND,
        )

    def test_create_with_explicit_id(self):
        res = self.client.post(
            PRODUCTS_URL, {"id": "rem-99", "categoriaId": self.remeras.id}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["data"]["id"], "rem-99")
        self.assertEqual(res.data["data"]["imagen"], "")

    def test_create_id_with_slash_rejected(self):
        res = self.client.post(
            PRODUCTS_URL, {"id": "a/b", "categoriaId": self.remeras.id}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(res.data["success"])
        self.assertFalse(Product.objects.filter(pk="a/b").exists())

    def test_whitespace_description_round_trips(self):
        res = self.client.post(
            PRODUCTS_URL,
            {"id": "rem-ws", "nombre": "X", "descripcion": "   ", "categoriaId": self.remeras.id},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["data"]["descripcion"], "   ")
        self.assertEqual(Product.objects.get(id="rem-ws").descripcion, "   ")
        fetched = self.client.get(f"{PRODUCTS_URL}/rem-ws").data["data"]
        self.assertEqual(fetched["descripcion"], "   ")

    def test_create_duplicate_id_rejected(self):
        res = self.client.post(
            PRODUCTS_URL, {"id": "rem-1", "categoriaId": self.remeras.id}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_create_requires_existing_category(self):
        missing = self.client.post(PRODUCTS_URL, {"nombre": "X"}, format="json")
        self.assertEqual(missing.status_code, status.HTTP_400_BAD_REQUEST)
        unknown = self.client.post(PRODUCTS_URL, {"categoriaId": 999}, format="json")
        self.assertEqual(unknown.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(unknown.data["errors"], ["Categoría '999' no encontrada"])

    def test_replace_unknown_product(self):
        res = self.client.put(
            f"{PRODUCTS_URL}/nope", {"categoriaId": self.remeras.id}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_unknown_product(self):
        res = self.client.delete(f"{PRODUCTS_URL}/nope")
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_product_with_orders_is_rejected(self):
        product = Product.objects.get(id="rem-1")
        Order.objects.create(
            nombre="Ana",
            email="ana@example.com",
            telefono="1155550000",
            producto=product,
            talla="M",
            color="#000000",
        )
        res = self.client.delete(f"{PRODUCTS_URL}/rem-1")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(Product.objects.filter(id="rem-1").exists())

    def test_malformed_json_body(self):
        res = self.client.generic(
            "POST", PRODUCTS_URL, "{not json", content_type="application/json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(res.data["success"])
