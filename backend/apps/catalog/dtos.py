from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


@dataclass
class ProductDTO:
    id: str
    imagen: str
    nuevo: bool
    nombre: Optional[str] = None
    titulo: Optional[str] = None
    imagenes: Optional[List[str]] = None
    precio: Optional[Decimal] = None
    precio_anterior: Optional[Decimal] = None
    categoria: Optional[str] = None
    colores: Optional[List[str]] = None
    descripcion: Optional[str] = None
    caracteristicas: Optional[List[str]] = None
    stock: Optional[int] = None
    tallas: Optional[List[str]] = None
    ruta: Optional[str] = None
    badge: Optional[str] = None
    size: Optional[str] = None


@dataclass
class CategoryDTO:
    id: int
    slug: str
    nombre: str
    descripcion: str
    icono: str
    ruta: Optional[str] = None
    productos: List[ProductDTO] = field(default_factory=list)


"""DTO dataclasses only. Mapping logic lives in mappers.py."""
