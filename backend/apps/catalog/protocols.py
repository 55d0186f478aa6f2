from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from .commands import ProductQuery
from .models import Category, Product


class CategoryRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional[Category]:
        ...

    def exists(self, **filters) -> bool:
        ...

    def get_by_slug(self, slug: str) -> Optional[Category]:
        ...

    def list_with_products(self) -> Iterable[Category]:
        ...


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional[Product]:
        ...

    def exists(self, **filters) -> bool:
        ...

    def search(self, query: ProductQuery):
        ...

    def featured(self, limit: int) -> List[Product]:
        ...

    def create(self, **data) -> Product:
        ...

    def update(self, obj: Product, **data) -> Product:
        ...

    def delete(self, obj: Product) -> None:
        ...

    def replace_images(self, product: Product, urls: Iterable[str]) -> None:
        ...

    def replace_colors(self, product: Product, hexes: Iterable[str]) -> None:
        ...

    def refresh(self, product_id: str) -> Optional[Product]:
        ...
