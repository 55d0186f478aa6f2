from django.urls import path
from .views import OrderDetailView, OrderListView, OrderStatusView

urlpatterns = [
    path("orders", OrderListView.as_view(), name="api-orders-list"),
    path("orders/<uuid:order_id>", OrderDetailView.as_view(), name="api-orders-detail"),
    path(
        "orders/<uuid:order_id>/estado",
        OrderStatusView.as_view(),
        name="api-orders-status",
    ),
]
