from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    AuthenticationFailed,
    NotAuthenticated,
    NotFound,
    ParseError,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import set_rollback

from apps.api.utils import error_response
from apps.common import get_logger
from apps.common.errors import (
    InvalidInputError,
    NotFoundError,
    StoreError,
    UnauthorizedError,
)

logger = get_logger(__name__).bind(component="api", layer="exception")

SERVER_ERROR_MESSAGE = "Error interno del servidor"

# First match wins. Domain errors come before their framework equivalents.
EXCEPTION_TABLE: Tuple[Tuple[Tuple[type, ...], str, int, str], ...] = (
    ((InvalidInputError,), "VALIDATION_ERROR", status.HTTP_400_BAD_REQUEST, "Solicitud inválida"),
    ((NotFoundError,), "NOT_FOUND", status.HTTP_404_NOT_FOUND, "Recurso no encontrado"),
    ((UnauthorizedError,), "UNAUTHORIZED", status.HTTP_401_UNAUTHORIZED, "No autorizado"),
    (
        (ValidationError, DjangoValidationError),
        "VALIDATION_ERROR",
        status.HTTP_400_BAD_REQUEST,
        "Datos inválidos",
    ),
    ((ParseError,), "VALIDATION_ERROR", status.HTTP_400_BAD_REQUEST, "JSON mal formado"),
    ((NotFound, Http404), "NOT_FOUND", status.HTTP_404_NOT_FOUND, "Recurso no encontrado"),
    (
        (NotAuthenticated, AuthenticationFailed),
        "UNAUTHORIZED",
        status.HTTP_401_UNAUTHORIZED,
        "No autorizado",
    ),
)


def classify(exc: Exception) -> Optional[Tuple[str, int, str]]:
    for types, code, http_status, fallback in EXCEPTION_TABLE:
        if isinstance(exc, types):
            return code, http_status, fallback
    if isinstance(exc, APIException):
        return "API_ERROR", exc.status_code, "Solicitud rechazada"
    return None


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Central exception handler for DRF views returning the failure envelope.
    """

    bound_logger = _bind_logger(context)
    match = classify(exc)
    set_rollback()

    if match is None or match[1] >= 500:
        bound_logger.exception(
            "Unhandled exception bubbled to global handler",
            exception=exc.__class__.__name__,
        )
        return error_response(
            "SERVER_ERROR",
            SERVER_ERROR_MESSAGE,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    code, http_status, fallback = match
    message, details = _message_and_details(exc, fallback)
    bound_logger.info(
        "Handled exception",
        code=code,
        status=http_status,
        exception=exc.__class__.__name__,
        detail=getattr(exc, "details", None),
    )
    return error_response(
        code,
        message,
        details,
        http_status=http_status,
        headers=_exception_headers(exc),
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        view_name = getattr(view, "__class__", type(view)).__name__
        log = log.bind(view=view_name)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _message_and_details(exc: Exception, fallback: str) -> Tuple[str, Optional[Any]]:
    if isinstance(exc, StoreError):
        # Domain details are context for the log, not client-facing text.
        return exc.message or fallback, None
    if isinstance(exc, DjangoValidationError):
        return fallback, _normalize_django_validation_error(exc)
    if isinstance(exc, ValidationError):
        return fallback, exc.detail
    if isinstance(exc, APIException):
        detail = exc.detail
        if isinstance(detail, str) and detail:
            return str(detail), None
        return fallback, detail
    return fallback, None


def _exception_headers(exc: Exception) -> Optional[Dict[str, str]]:
    headers: Dict[str, str] = {}
    auth_header = getattr(exc, "auth_header", None)
    if auth_header:
        headers["WWW-Authenticate"] = auth_header
    wait = getattr(exc, "wait", None)
    if wait:
        headers["Retry-After"] = "%d" % wait
    return headers or None


def _normalize_django_validation_error(
    exc: DjangoValidationError,
) -> Union[Dict[str, Any], list]:
    if hasattr(exc, "error_dict"):
        return exc.message_dict
    return list(exc.messages)


__all__ = ["EXCEPTION_TABLE", "classify", "global_exception_handler"]
