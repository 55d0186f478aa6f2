from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple, Union

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from apps.common import get_logger
from apps.common.errors import InvalidInputError
from .commands import (
    DEFAULT_FEATURED_LIMIT,
    FeaturedQuery,
    ProductCreateCommand,
    ProductQuery,
    ProductUpdateCommand,
)
from .dtos import CategoryDTO, ProductDTO
from .mappers import CategoryMapper, ProductMapper
from .pagination import PageResult, paginate
from .protocols import CategoryRepositoryProtocol, ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        categories: CategoryRepositoryProtocol,
    ):
        self.products = products
        self.categories = categories
        self.logger = logger.bind(service="ProductService")

    def search_products(
        self, query: Union[ProductQuery, Mapping[str, Any], None]
    ) -> PageResult[ProductDTO]:
        q = query if isinstance(query, ProductQuery) else ProductQuery.from_raw(query)
        self.logger.debug(
            "Searching products",
            categoria=q.categoria,
            search=q.search,
            min_precio=q.min_precio,
            max_precio=q.max_precio,
            solo_nuevos=q.solo_nuevos,
            order_by=q.order_by,
            desc=q.desc,
            page=q.page,
            page_size=q.page_size,
        )
        result = paginate(self.products.search(q), q.page, q.page_size)
        self.logger.debug(
            "Product search complete", total=result.total, returned=len(result.items)
        )
        return result.map(ProductMapper.to_dto)

    def featured_products(
        self, limit: Union[int, FeaturedQuery] = DEFAULT_FEATURED_LIMIT
    ) -> List[ProductDTO]:
        n = limit.limit if isinstance(limit, FeaturedQuery) else int(limit)
        if n < 0:
            raise InvalidInputError("limit debe ser mayor o igual a 0", {"limit": n})
        self.logger.debug("Listing featured products", limit=n)
        if n == 0:
            return []
        return ProductMapper.many_to_dto(self.products.featured(n))

    def get_product(self, product_id: str) -> Optional[ProductDTO]:
        self.logger.debug("Fetching product", product_id=product_id)
        product = self.products.get(id=product_id)
        if not product:
            self.logger.info("Product not found", product_id=product_id)
            return None
        return ProductMapper.to_dto(product)

    def _require_category(self, categoria_id: int) -> None:
        if not self.categories.exists(id=categoria_id):
            self.logger.warning("Unknown category reference", categoria_id=categoria_id)
            raise InvalidInputError(
                f"Categoría '{categoria_id}' no encontrada",
                {"categoriaId": categoria_id},
            )

    def create_product(
        self, data: Union[Mapping[str, Any], ProductCreateCommand]
    ) -> ProductDTO:
        cmd = (
            data
            if isinstance(data, ProductCreateCommand)
            else ProductCreateCommand.from_raw(data)
        )
        self.logger.info("Creating product", product_id=cmd.id, nombre=cmd.nombre)
        self._require_category(cmd.categoria_id)
        if cmd.id and self.products.exists(id=cmd.id):
            self.logger.warning("Duplicate product id", product_id=cmd.id)
            raise InvalidInputError(
                f"Ya existe un producto con id '{cmd.id}'", {"id": cmd.id}
            )
        fields = cmd.scalar_fields()
        if cmd.id:
            fields["id"] = cmd.id
        try:
            with transaction.atomic():
                product = self.products.create(**fields)
                self.products.replace_images(product, cmd.imagen_urls)
                self.products.replace_colors(product, cmd.colores)
        except IntegrityError as exc:
            self.logger.warning("Product create rejected by store", error=str(exc))
            raise InvalidInputError("No se pudo crear el producto", {"id": cmd.id})
        self.logger.info("Product created", product_id=product.id)
        return ProductMapper.to_dto(self.products.refresh(product.id) or product)

    def update_product(
        self, product_id: str, data: Union[Mapping[str, Any], ProductUpdateCommand]
    ) -> Optional[ProductDTO]:
        cmd = (
            data
            if isinstance(data, ProductUpdateCommand)
            else ProductUpdateCommand.from_raw(product_id, data)
        )
        self.logger.info("Replacing product", product_id=product_id)
        product = self.products.get(id=product_id)
        if not product:
            self.logger.warning("Product replace failed: not found", product_id=product_id)
            return None
        self._require_category(cmd.categoria_id)
        with transaction.atomic():
            self.products.update(product, **cmd.scalar_fields())
            self.products.replace_images(product, cmd.imagen_urls)
            self.products.replace_colors(product, cmd.colores)
        self.logger.info("Product replaced", product_id=product_id)
        return ProductMapper.to_dto(self.products.refresh(product_id) or product)

    def delete_product(self, product_id: str) -> bool:
        self.logger.info("Deleting product", product_id=product_id)
        product = self.products.get(id=product_id)
        if not product:
            self.logger.warning("Product deletion failed: not found", product_id=product_id)
            return False
        try:
            self.products.delete(product)
        except ProtectedError:
            self.logger.warning(
                "Product deletion blocked by existing orders", product_id=product_id
            )
            raise InvalidInputError(
                f"El producto '{product_id}' tiene pedidos asociados y no puede eliminarse",
                {"id": product_id},
            )
        self.logger.info("Product deleted", product_id=product_id)
        return True


class CategoryService:
    def __init__(
        self,
        categories: CategoryRepositoryProtocol,
        products: ProductRepositoryProtocol,
    ):
        self.categories = categories
        self.products = products
        self.logger = logger.bind(service="CategoryService")

    def list_categories(self) -> List[CategoryDTO]:
        self.logger.debug("Listing categories with products")
        return CategoryMapper.many_to_dto(self.categories.list_with_products())

    def get_category(
        self, slug: str, query: Union[ProductQuery, Mapping[str, Any], None] = None
    ) -> Optional[Tuple[CategoryDTO, PageResult]]:
        """Category by slug plus one page of its products.

        Remaining query criteria apply on top of the category filter. The
        category's ``productos`` holds only the page items.
        """
        self.logger.debug("Fetching category", slug=slug)
        category = self.categories.get_by_slug(slug)
        if not category:
            self.logger.info("Category not found", slug=slug)
            return None
        q = query if isinstance(query, ProductQuery) else ProductQuery.from_raw(query)
        q.categoria = category.slug
        page = paginate(self.products.search(q), q.page, q.page_size)
        dto = CategoryMapper.to_dto(category, productos=page.items)
        return dto, page.map(ProductMapper.to_dto)
