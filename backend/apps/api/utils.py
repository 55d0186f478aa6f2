from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

ERROR_STATUS_MAP = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "UNSUPPORTED_MEDIA_TYPE": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _headers(headers: Optional[Mapping[str, Any]]) -> Optional[Dict[str, str]]:
    if headers is None:
        return None
    if not isinstance(headers, Mapping):
        raise TypeError("response headers must be a mapping if provided")
    return {str(key): str(value) for key, value in headers.items()}


def flatten_details(details: Any, prefix: Optional[str] = None) -> List[str]:
    """Flatten validation details into ``"field: message"`` strings."""
    if details is None:
        return []
    if isinstance(details, ValidationError):
        details = as_serializer_error(details)
    if isinstance(details, Mapping):
        out: List[str] = []
        for key, value in details.items():
            field = str(key) if prefix is None else f"{prefix}.{key}"
            if field == "non_field_errors" or key == "detail":
                field = prefix
            out.extend(flatten_details(value, field))
        return out
    if isinstance(details, (list, tuple)):
        out = []
        for index, value in enumerate(details):
            if isinstance(value, (Mapping, list, tuple)):
                field = str(index) if prefix is None else f"{prefix}.{index}"
                out.extend(flatten_details(value, field))
            else:
                out.extend(flatten_details(value, prefix))
        return out
    text = str(details)
    return [f"{prefix}: {text}" if prefix else text]


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    http_status: int = status.HTTP_200_OK,
    *,
    headers: Optional[Mapping[str, Any]] = None,
) -> Response:
    """Wrap ``data`` in the ``{success, data, message?}`` envelope."""
    payload: Dict[str, Any] = {"success": True, "data": data}
    if message is not None:
        payload["message"] = message
    return Response(payload, status=http_status, headers=_headers(headers))


def error_response(
    code: str,
    message: str,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
    *,
    headers: Optional[Mapping[str, Any]] = None,
) -> Response:
    """
    Return a failure envelope ``{success: false, errors: [...]}``.

    Args:
        code: Machine-readable error identifier; selects the HTTP status.
        message: Human-readable explanation, always the first entry of ``errors``.
        details: Optional validation details, flattened after the message.
        http_status: Explicit HTTP status code to override the code mapping.
        headers: Optional response headers.
    """

    if not isinstance(code, str):
        raise TypeError("error_response requires code to be a string")
    if not isinstance(message, str):
        raise TypeError("error_response requires message to be a string")

    code = code.strip()
    message = message.strip()

    if not code:
        raise ValueError("error_response requires a non-empty code")
    if not message:
        raise ValueError("error_response requires a non-empty message")

    status_code = (
        int(http_status)
        if http_status is not None
        else ERROR_STATUS_MAP.get(code.upper(), DEFAULT_ERROR_STATUS)
    )
    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")

    errors = [message]
    for entry in flatten_details(details):
        if entry not in errors:
            errors.append(entry)

    return Response(
        {"success": False, "errors": errors},
        status=status_code,
        headers=_headers(headers),
    )
