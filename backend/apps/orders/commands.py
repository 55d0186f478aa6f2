from dataclasses import dataclass
from typing import Any, Mapping, Optional

from apps.common.errors import InvalidInputError
from .models import UPDATABLE_STATUSES

INVALID_STATUS_MESSAGE = "Estado inválido. Válidos: " + ", ".join(
    str(s.value) for s in UPDATABLE_STATUSES
)
_UPDATABLE_VALUES = frozenset(str(s.value) for s in UPDATABLE_STATUSES)


@dataclass
class OrderCreateCommand:
    nombre: str
    email: str
    telefono: str
    producto_id: str
    talla: str
    color: str
    cantidad: int = 1
    notas_adicionales: Optional[str] = None

    @staticmethod
    def from_raw(payload: Mapping[str, Any]) -> "OrderCreateCommand":
        data = dict(payload or {})
        try:
            cantidad = int(data.get("cantidad") if data.get("cantidad") is not None else 1)
        except (TypeError, ValueError):
            raise InvalidInputError(
                "cantidad debe ser un número entero", {"cantidad": data.get("cantidad")}
            )
        if cantidad < 1:
            raise InvalidInputError("cantidad debe ser al menos 1", {"cantidad": cantidad})
        notas = data.get("notasAdicionales")
        return OrderCreateCommand(
            nombre=str(data.get("nombre", "")).strip(),
            email=str(data.get("email", "")).strip(),
            telefono=str(data.get("telefono", "")).strip(),
            producto_id=str(data.get("productoId", "")).strip(),
            talla=str(data.get("talla", "")).strip(),
            color=str(data.get("color", "")).strip(),
            cantidad=cantidad,
            notas_adicionales=notas if notas not in (None, "") else None,
        )


@dataclass
class OrderStatusCommand:
    estado: str

    @staticmethod
    def from_raw(raw: Any) -> "OrderStatusCommand":
        """Accepts the bare JSON string body or an ``{"estado": ...}`` object.

        Matching is exact and case-sensitive.
        """
        value = raw.get("estado") if isinstance(raw, Mapping) else raw
        if not isinstance(value, str) or value not in _UPDATABLE_VALUES:
            raise InvalidInputError(INVALID_STATUS_MESSAGE, {"estado": value})
        return OrderStatusCommand(estado=value)
