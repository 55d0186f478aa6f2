from uuid import UUID

from django.urls import reverse
from rest_framework.views import APIView
from rest_framework import status
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from .commands import OrderStatusCommand
from .container import build_order_service
from .serializers import OrderReadSerializer, OrderStatusSerializer, OrderWriteSerializer
from apps.api.schemas import ErrorResponseSerializer, envelope
from apps.api.utils import error_response, success_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="orders", layer="view")

ORDER_CREATED_MESSAGE = "Pedido recibido. Te contactaremos pronto."
ORDER_NOT_FOUND_MESSAGE = "Pedido no encontrado"


@extend_schema(tags=["Orders"])
class OrderListView(APIView):
    permission_classes = [AllowAny]
    service = build_order_service()
    log = logger.bind(view="OrderListView")

    @extend_schema(
        operation_id="orders_list",
        summary="List orders, newest first",
        parameters=[OpenApiParameter("estado", str, description="Exact status filter")],
        responses={200: envelope(OrderReadSerializer, many=True)},
    )
    def get(self, request):
        if hasattr(request, "order_estado_filter"):
            estado = request.order_estado_filter
        else:
            estado = request.query_params.get("estado") or None
        self.log.debug("Listing orders", estado=estado)
        data = self.service.list_orders(estado)
        return success_response(OrderReadSerializer(data, many=True).data)

    @extend_schema(
        operation_id="orders_create",
        summary="Place an order",
        request=OrderWriteSerializer,
        responses={
            201: envelope(OrderReadSerializer),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = OrderWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Creating order via API",
            producto_id=serializer.validated_data.get("productoId"),
        )
        dto = self.service.create_order(serializer.validated_data)
        location = request.build_absolute_uri(
            reverse("api-orders-detail", args=[dto.id])
        )
        return success_response(
            OrderReadSerializer(dto).data,
            ORDER_CREATED_MESSAGE,
            status.HTTP_201_CREATED,
            headers={"Location": location},
        )


@extend_schema(tags=["Orders"])
class OrderDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_order_service()
    log = logger.bind(view="OrderDetailView")

    @extend_schema(
        operation_id="orders_retrieve",
        summary="Get order",
        parameters=[OpenApiParameter("order_id", UUID, OpenApiParameter.PATH)],
        responses={
            200: envelope(OrderReadSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, order_id: UUID):
        self.log.debug("Fetching order detail", order_id=order_id)
        dto = self.service.get_order(order_id)
        if not dto:
            return error_response("NOT_FOUND", ORDER_NOT_FOUND_MESSAGE)
        return success_response(OrderReadSerializer(dto).data)


@extend_schema(tags=["Orders"])
class OrderStatusView(APIView):
    permission_classes = [AllowAny]
    service = build_order_service()
    log = logger.bind(view="OrderStatusView")

    @extend_schema(
        operation_id="orders_status_update",
        summary="Update order status",
        description=(
            "Body is the bare JSON status string, e.g. \"enviado\"; an object "
            "with an estado key is also accepted."
        ),
        parameters=[OpenApiParameter("order_id", UUID, OpenApiParameter.PATH)],
        request=OrderStatusSerializer,
        responses={
            200: envelope(OrderReadSerializer),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def patch(self, request, order_id: UUID):
        estado = getattr(request, "order_status", None)
        if estado is None:
            estado = OrderStatusCommand.from_raw(request.data).estado
        self.log.info("Updating order status", order_id=order_id, estado=estado)
        dto = self.service.update_status(order_id, estado)
        if not dto:
            return error_response("NOT_FOUND", ORDER_NOT_FOUND_MESSAGE)
        return success_response(
            OrderReadSerializer(dto).data, f"Estado actualizado a '{estado}'"
        )
