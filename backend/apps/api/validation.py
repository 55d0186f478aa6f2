import json
from typing import Any

from django.conf import settings
from django.http import HttpRequest

from apps.api.utils import error_response
from apps.catalog.commands import FeaturedQuery, ProductQuery
from apps.common import get_logger
from apps.common.errors import InvalidInputError
from apps.orders.commands import OrderStatusCommand

logger = get_logger(__name__).bind(component="api", layer="validation")

MALFORMED_BODY = object()


def _default_page_size() -> int:
    return int(getattr(settings, "DEFAULT_PAGE_SIZE", 12))


def _default_featured_limit() -> int:
    return int(getattr(settings, "FEATURED_LIMIT", 6))


def _extract_json_body(request: HttpRequest) -> Any:
    """Raw JSON body; the status endpoint accepts a bare JSON string."""
    try:
        body = request.body.decode("utf-8") if hasattr(request, "body") else ""
    except (AttributeError, UnicodeDecodeError):
        return MALFORMED_BODY
    if not body.strip():
        return None
    try:
        return json.loads(body)
    except ValueError:
        return MALFORMED_BODY


def parse_product_query(params) -> ProductQuery:
    return ProductQuery.from_raw(params, default_page_size=_default_page_size())


def parse_featured_query(params) -> FeaturedQuery:
    return FeaturedQuery.from_raw(params, default_limit=_default_featured_limit())


def _invalid(view_name: str, exc: InvalidInputError):
    logger.warning(
        "Request rejected by validation",
        view=view_name,
        error=exc.message,
        details=exc.details,
    )
    return error_response("VALIDATION_ERROR", exc.message)


def validate_request_context(request: HttpRequest, view_class, view_kwargs) -> Any:
    """
    Performs request level validation for specific API views.
    Returns a DRF Response when validation fails; otherwise None and
    attaches the parsed input to the request instance.
    """
    view_name = getattr(view_class, "__name__", "")
    method = getattr(request, "method", None)

    logger.debug("Running request context validation", view=view_name, method=method)

    try:
        if view_name in ("ProductListView", "CategoryDetailView") and method == "GET":
            request.product_query = parse_product_query(request.GET)
            return None

        if view_name == "ProductFeaturedView" and method == "GET":
            request.featured_query = parse_featured_query(request.GET)
            return None

        if view_name == "OrderListView" and method == "GET":
            estado = request.GET.get("estado")
            request.order_estado_filter = estado.strip() if estado else None
            return None

        if view_name == "OrderStatusView" and method == "PATCH":
            body = _extract_json_body(request)
            if body is MALFORMED_BODY:
                raise InvalidInputError("JSON mal formado")
            request.order_status = OrderStatusCommand.from_raw(body).estado
            return None
    except InvalidInputError as exc:
        return _invalid(view_name, exc)

    return None
