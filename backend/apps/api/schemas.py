from functools import lru_cache

from drf_spectacular.utils import inline_serializer
from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField(default=False)
    errors = serializers.ListField(child=serializers.CharField())


@lru_cache(maxsize=None)
def envelope(
    data_serializer_class: type[serializers.Serializer], *, many: bool = False
) -> serializers.Serializer:
    """Inline schema for the success envelope; one component per data shape."""
    name = getattr(data_serializer_class, "__name__", "Data").replace("Serializer", "")
    suffix = "ListEnvelope" if many else "Envelope"
    return inline_serializer(
        name=f"{name}{suffix}",
        fields={
            "success": serializers.BooleanField(default=True),
            "data": data_serializer_class(many=many),
            "message": serializers.CharField(required=False),
        },
    )
