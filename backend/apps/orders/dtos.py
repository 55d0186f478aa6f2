from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional


@dataclass
class OrderProductDTO:
    """Reduced product summary nested in an order."""

    id: str
    imagen: str
    categoria: str
    nombre: Optional[str] = None
    precio: Optional[Decimal] = None
    imagenes: List[str] = field(default_factory=list)
    colores: List[str] = field(default_factory=list)


@dataclass
class OrderDTO:
    id: str
    nombre: str
    email: str
    telefono: str
    estado: str
    fecha_pedido: datetime
    talla: str
    color: str
    cantidad: int
    notas_adicionales: Optional[str] = None
    producto: Optional[OrderProductDTO] = None
