from typing import Iterable, List, Optional

from .dtos import CategoryDTO, ProductDTO
from .models import Category, Product


def _related(obj, name: str) -> list:
    manager = getattr(obj, name, None)
    if manager is None:
        return []
    all_fn = getattr(manager, "all", None)
    return list(all_fn() if callable(all_fn) else manager)


class ProductMapper:
    @staticmethod
    def image_urls(product: Product) -> List[str]:
        """Image URLs ascending by ``orden``; ties keep insertion order."""
        images = sorted(
            _related(product, "imagenes"),
            key=lambda img: (img.orden, getattr(img, "id", None) or 0),
        )
        return [img.url for img in images]

    @staticmethod
    def color_hexes(product: Product) -> List[str]:
        return [c.hex for c in _related(product, "colores")]

    @staticmethod
    def category_name(product: Product) -> Optional[str]:
        categoria = getattr(product, "categoria", None)
        return getattr(categoria, "nombre", None) if categoria is not None else None

    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        urls = ProductMapper.image_urls(product)
        colores = ProductMapper.color_hexes(product)
        descripcion = product.descripcion
        return ProductDTO(
            id=str(product.id),
            nombre=product.nombre,
            titulo=product.titulo,
            # The lowest orden wins regardless of es_principal.
            imagen=urls[0] if urls else "",
            imagenes=urls or None,
            precio=product.precio,
            precio_anterior=product.precio_anterior,
            categoria=ProductMapper.category_name(product),
            nuevo=bool(product.nuevo),
            colores=colores or None,
            descripcion=descripcion if descripcion != "" else None,
            caracteristicas=product.caracteristicas,
            stock=product.stock,
            tallas=product.tallas,
            ruta=product.ruta,
            badge=product.badge,
            size=product.size,
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]


class CategoryMapper:
    @staticmethod
    def to_dto(
        cat: Category, productos: Optional[Iterable[Product]] = None
    ) -> CategoryDTO:
        source = _related(cat, "productos") if productos is None else productos
        return CategoryDTO(
            id=cat.id,
            slug=cat.slug,
            nombre=cat.nombre,
            descripcion=cat.descripcion,
            icono=cat.icono,
            ruta=cat.ruta,
            productos=ProductMapper.many_to_dto(source),
        )

    @staticmethod
    def many_to_dto(categories: Iterable[Category]) -> List[CategoryDTO]:
        return [CategoryMapper.to_dto(c) for c in categories]
