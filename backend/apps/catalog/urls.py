from django.urls import path
from .views import (
    CategoryDetailView,
    CategoryListView,
    ProductDetailView,
    ProductFeaturedView,
    ProductListView,
)

urlpatterns = [
    path("categories", CategoryListView.as_view(), name="api-categories-list"),
    path("categories/<slug:slug>", CategoryDetailView.as_view(), name="api-categories-detail"),
    path("products", ProductListView.as_view(), name="api-products-list"),
    # Must precede the detail route, which would otherwise capture "featured".
    path("products/featured", ProductFeaturedView.as_view(), name="api-products-featured"),
    path("products/<str:product_id>", ProductDetailView.as_view(), name="api-products-detail"),
]
