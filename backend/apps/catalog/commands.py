from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional

from apps.common.errors import InvalidInputError
from .encoding import encode_string_list

DEFAULT_ORDER_BY = "nombre"
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 12
DEFAULT_FEATURED_LIMIT = 6

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_int(name: str, value: Any, default: int, *, minimum: int = 1) -> int:
    if _blank(value):
        return default
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} debe ser un número entero", {name: value})
    if parsed < minimum:
        raise InvalidInputError(f"{name} debe ser mayor o igual a {minimum}", {name: value})
    return parsed


def parse_decimal(name: str, value: Any) -> Optional[Decimal]:
    if _blank(value):
        return None
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInputError(f"{name} debe ser un número", {name: value})
    if not parsed.is_finite():
        raise InvalidInputError(f"{name} debe ser un número", {name: value})
    return parsed


def parse_bool(name: str, value: Any, default: Optional[bool] = None) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if _blank(value):
        return default
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise InvalidInputError(f"{name} debe ser true o false", {name: value})


def _optional_str(value: Any) -> Optional[str]:
    if _blank(value):
        return None
    return str(value).strip()


@dataclass
class ProductQuery:
    """Flat product search criteria as received on the query string."""

    categoria: Optional[str] = None
    search: Optional[str] = None
    min_precio: Optional[Decimal] = None
    max_precio: Optional[Decimal] = None
    solo_nuevos: Optional[bool] = None
    order_by: str = DEFAULT_ORDER_BY
    desc: bool = False
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @staticmethod
    def from_raw(
        params: Optional[Mapping[str, Any]], *, default_page_size: int = DEFAULT_PAGE_SIZE
    ) -> "ProductQuery":
        data = params or {}
        categoria = _optional_str(data.get("categoria"))
        order_by = _optional_str(data.get("orderBy")) or DEFAULT_ORDER_BY
        search = data.get("search")
        return ProductQuery(
            categoria=categoria.lower() if categoria else None,
            # not stripped; matched as a literal substring
            search=None if _blank(search) else search,
            min_precio=parse_decimal("minPrecio", data.get("minPrecio")),
            max_precio=parse_decimal("maxPrecio", data.get("maxPrecio")),
            solo_nuevos=parse_bool("soloNuevos", data.get("soloNuevos")),
            order_by=order_by.lower(),
            desc=bool(parse_bool("desc", data.get("desc"), False)),
            page=parse_int("page", data.get("page"), DEFAULT_PAGE),
            page_size=parse_int("pageSize", data.get("pageSize"), default_page_size),
        )


@dataclass
class ProductCreateCommand:
    categoria_id: int
    descripcion: str = ""
    id: Optional[str] = None
    nombre: Optional[str] = None
    titulo: Optional[str] = None
    precio: Optional[Decimal] = None
    precio_anterior: Optional[Decimal] = None
    badge: Optional[str] = None
    size: Optional[str] = None
    nuevo: bool = False
    stock: Optional[int] = None
    ruta: Optional[str] = None
    imagen_urls: List[str] = field(default_factory=list)
    colores: List[str] = field(default_factory=list)
    tallas: Optional[List[str]] = None
    caracteristicas: Optional[List[str]] = None

    @staticmethod
    def _parse_strings(raw) -> List[str]:
        if not raw:
            return []
        return [str(v).strip() for v in raw if not _blank(v)]

    @staticmethod
    def _optional_strings(raw) -> Optional[List[str]]:
        if raw is None:
            return None
        return [str(v) for v in raw]

    def scalar_fields(self) -> Dict[str, Any]:
        return {
            "nombre": self.nombre,
            "titulo": self.titulo,
            "descripcion": self.descripcion,
            "precio": self.precio,
            "precio_anterior": self.precio_anterior,
            "badge": self.badge,
            "size": self.size,
            "nuevo": self.nuevo,
            "stock": self.stock,
            "ruta": self.ruta,
            "categoria_id": self.categoria_id,
            "tallas_json": encode_string_list(self.tallas),
            "caracteristicas_json": encode_string_list(self.caracteristicas),
        }

    @staticmethod
    def from_raw(payload: Mapping[str, Any]) -> "ProductCreateCommand":
        data = dict(payload or {})
        try:
            categoria_id = int(data.get("categoriaId"))
        except (TypeError, ValueError):
            raise InvalidInputError(
                "categoriaId es obligatorio", {"categoriaId": data.get("categoriaId")}
            )
        stock = data.get("stock")
        return ProductCreateCommand(
            id=_optional_str(data.get("id")),
            categoria_id=categoria_id,
            descripcion=str(data.get("descripcion") or ""),
            nombre=_optional_str(data.get("nombre")),
            titulo=_optional_str(data.get("titulo")),
            precio=parse_decimal("precio", data.get("precio")),
            precio_anterior=parse_decimal("precioAnterior", data.get("precioAnterior")),
            badge=_optional_str(data.get("badge")),
            size=_optional_str(data.get("size")),
            nuevo=bool(parse_bool("nuevo", data.get("nuevo"), False)),
            stock=None if _blank(stock) else parse_int("stock", stock, 0, minimum=0),
            ruta=_optional_str(data.get("ruta")),
            imagen_urls=ProductCreateCommand._parse_strings(data.get("imagenUrls")),
            colores=ProductCreateCommand._parse_strings(data.get("colores")),
            tallas=ProductCreateCommand._optional_strings(data.get("tallas")),
            caracteristicas=ProductCreateCommand._optional_strings(
                data.get("caracteristicas")
            ),
        )


@dataclass
class ProductUpdateCommand(ProductCreateCommand):
    """Full replacement of a product's scalars, images and colors."""

    @staticmethod
    def from_raw(product_id: str, payload: Mapping[str, Any]) -> "ProductUpdateCommand":  # type: ignore[override]
        base = ProductCreateCommand.from_raw(payload)
        values = dict(base.__dict__)
        values["id"] = product_id
        return ProductUpdateCommand(**values)


@dataclass
class FeaturedQuery:
    limit: int = DEFAULT_FEATURED_LIMIT

    @staticmethod
    def from_raw(
        params: Optional[Mapping[str, Any]], *, default_limit: int = DEFAULT_FEATURED_LIMIT
    ) -> "FeaturedQuery":
        data = params or {}
        return FeaturedQuery(
            limit=parse_int("limit", data.get("limit"), default_limit, minimum=0)
        )
