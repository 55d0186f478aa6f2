from typing import Iterable, List, Optional

from django.db.models import Prefetch, Q

from apps.common.repository import GenericRepository
from .commands import ProductQuery
from .models import Category, Product, ProductColor, ProductImage

FEATURED_SIZES = ("featured", "wide", "tall")


class CategoryRepository(GenericRepository[Category]):
    def __init__(self):
        super().__init__(Category)

    def get_by_slug(self, slug: str) -> Optional[Category]:
        return self.model.objects.filter(slug=(slug or "").strip().lower()).first()

    def list_with_products(self) -> Iterable[Category]:
        """All categories by id, each with its products eagerly loaded."""
        products = ProductRepository.base_queryset().order_by("id")
        return self.model.objects.order_by("id").prefetch_related(
            Prefetch("productos", queryset=products)
        )


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    @staticmethod
    def base_queryset():
        """Products with category, ordered images and colors loaded up front."""
        return Product.objects.select_related("categoria").prefetch_related(
            Prefetch("imagenes", queryset=ProductImage.objects.order_by("orden", "id")),
            Prefetch("colores", queryset=ProductColor.objects.order_by("id")),
        )

    def queryset(self):  # type: ignore[override]
        return self.base_queryset()

    def search(self, query: ProductQuery):
        """Filtered and ordered queryset; pagination is left to the caller."""
        qs = self.base_queryset()
        if query.categoria:
            qs = qs.filter(categoria__slug=query.categoria.lower())
        if query.search:
            qs = qs.filter(
                Q(nombre__contains=query.search) | Q(descripcion__contains=query.search)
            )
        if query.min_precio is not None:
            qs = qs.filter(precio__gte=query.min_precio)
        if query.max_precio is not None:
            qs = qs.filter(precio__lte=query.max_precio)
        if query.solo_nuevos:
            qs = qs.filter(nuevo=True)
        return qs.order_by(*self.ordering_for(query.order_by, query.desc))

    @staticmethod
    def ordering_for(order_by: Optional[str], desc: bool) -> List[str]:
        key = (order_by or "").lower()
        if key == "precio":
            primary = "-precio" if desc else "precio"
        elif key == "nuevo":
            # Always newest first, whatever the direction flag says.
            primary = "-nuevo"
        else:
            primary = "-nombre" if desc else "nombre"
        return [primary, "id"]

    def featured(self, limit: int) -> List[Product]:
        qs = self.base_queryset().filter(
            Q(badge__isnull=False) | Q(nuevo=True) | Q(size__in=FEATURED_SIZES)
        )
        return list(qs.order_by("-nuevo", "id")[:limit])

    def replace_images(self, product: Product, urls: Iterable[str]) -> None:
        product.imagenes.all().delete()
        ProductImage.objects.bulk_create(
            [
                ProductImage(producto=product, url=url, es_principal=(i == 0), orden=i)
                for i, url in enumerate(urls)
            ]
        )

    def replace_colors(self, product: Product, hexes: Iterable[str]) -> None:
        product.colores.all().delete()
        ProductColor.objects.bulk_create(
            [ProductColor(producto=product, hex=value) for value in hexes]
        )

    def refresh(self, product_id: str) -> Optional[Product]:
        return self.base_queryset().filter(pk=product_id).first()
