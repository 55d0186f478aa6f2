import unittest

from rest_framework import status
from rest_framework.exceptions import ValidationError

from apps.api.utils import error_response, flatten_details, success_response


class SuccessResponseTests(unittest.TestCase):
    def test_envelope_without_message(self):
        resp = success_response({"id": "rem-1"})
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data, {"success": True, "data": {"id": "rem-1"}})

    def test_envelope_with_message_status_and_headers(self):
        resp = success_response(
            {"id": "x"}, "Producto creado exitosamente", status.HTTP_201_CREATED,
            headers={"Location": "/api/products/x"},
        )
        self.assertEqual(resp.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resp.data["message"], "Producto creado exitosamente")
        self.assertEqual(resp["Location"], "/api/products/x")


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping(self):
        resp = error_response("NOT_FOUND", "Pedido no encontrado")
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data, {"success": False, "errors": ["Pedido no encontrado"]})

    def test_unknown_code_defaults_to_bad_request(self):
        self.assertEqual(error_response("WHATEVER", "oops").status_code, 400)

    def test_custom_status_override(self):
        resp = error_response("UNKNOWN", "oops", http_status=status.HTTP_409_CONFLICT)
        self.assertEqual(resp.status_code, status.HTTP_409_CONFLICT)

    def test_details_follow_message_without_duplicates(self):
        resp = error_response(
            "VALIDATION_ERROR",
            "Datos inválidos",
            {"email": ["Formato inválido", "Formato inválido"], "non_field_errors": ["Datos inválidos"]},
        )
        self.assertEqual(resp.data["errors"], ["Datos inválidos", "email: Formato inválido"])

    def test_rejects_blank_message(self):
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "   ")
        with self.assertRaises(TypeError):
            error_response("NOT_FOUND", None)

    def test_rejects_invalid_status(self):
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "x", http_status=42)


class FlattenDetailsTests(unittest.TestCase):
    def test_nested_structures(self):
        details = {"imagenUrls": {0: ["Too long"]}, "precio": ["Not a number"]}
        self.assertEqual(
            flatten_details(details),
            ["imagenUrls.0: Too long", "precio: Not a number"],
        )

    def test_validation_error_and_plain_values(self):
        self.assertEqual(flatten_details(ValidationError("bad")), ["bad"])
        self.assertEqual(flatten_details("plain"), ["plain"])
        self.assertEqual(flatten_details(None), [])
