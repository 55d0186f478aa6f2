from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, ParseError, Throttled, ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import SERVER_ERROR_MESSAGE, classify, global_exception_handler
from apps.common.errors import InvalidInputError, NotFoundError, UnauthorizedError

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_invalid_input_returns_its_message_only():
    request = factory.post("/api/orders", data={})
    exc = InvalidInputError("Producto no encontrado", {"productoId": "nope"})
    response = global_exception_handler(exc, _context(request))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data == {"success": False, "errors": ["Producto no encontrado"]}


def test_domain_errors_map_to_statuses():
    request = factory.get("/api/example")
    assert global_exception_handler(NotFoundError("x"), _context(request)).status_code == 404
    assert global_exception_handler(UnauthorizedError("x"), _context(request)).status_code == 401


def test_validation_error_flattens_field_messages():
    request = factory.post("/api/products", data={})
    exc = ValidationError({"categoriaId": ["This field is required."]})
    response = global_exception_handler(exc, _context(request))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data["success"] is False
    assert response.data["errors"] == [
        "Datos inválidos",
        "categoriaId: This field is required.",
    ]


def test_django_validation_error_is_a_bad_request():
    request = factory.post("/api/products", data={})
    exc = DjangoValidationError({"cantidad": ["Ensure this value is greater than or equal to 1."]})
    response = global_exception_handler(exc, _context(request))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data["errors"][1].startswith("cantidad:")


def test_parse_error_reports_its_detail():
    request = factory.post("/api/products", data={})
    response = global_exception_handler(ParseError(), _context(request))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert len(response.data["errors"]) == 1


def test_http404_maps_to_not_found():
    request = factory.get("/api/example")
    response = global_exception_handler(Http404(), _context(request))
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data["errors"] == ["Recurso no encontrado"]


def test_not_authenticated_keeps_401():
    request = factory.get("/api/example")
    response = global_exception_handler(NotAuthenticated(), _context(request))
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_other_api_exceptions_keep_their_status_and_headers():
    request = factory.get("/api/example")
    response = global_exception_handler(Throttled(wait=30), _context(request))
    assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
    assert response["Retry-After"] == "30"


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/example")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.data == {"success": False, "errors": [SERVER_ERROR_MESSAGE]}
    assert "boom" not in str(response.data)


def test_classify_prefers_domain_errors():
    assert classify(InvalidInputError("x"))[0] == "VALIDATION_ERROR"
    assert classify(KeyError("x")) is None
