from django.urls import reverse
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from .container import build_product_service, build_category_service
from .serializers import (
    CategorySerializer,
    PageSerializer,
    ProductReadSerializer,
    ProductWriteSerializer,
)
from apps.api.schemas import ErrorResponseSerializer, envelope
from apps.api.utils import error_response, success_response
from apps.api.validation import parse_featured_query, parse_product_query
from apps.common import get_logger

logger = get_logger(__name__).bind(component="catalog", layer="view")

PRODUCT_QUERY_PARAMETERS = [
    OpenApiParameter("categoria", str, description="Category slug (case-insensitive)"),
    OpenApiParameter("search", str, description="Substring of name or description"),
    OpenApiParameter("minPrecio", float, description="Inclusive lower price bound"),
    OpenApiParameter("maxPrecio", float, description="Inclusive upper price bound"),
    OpenApiParameter("soloNuevos", bool, description="Only products flagged as new"),
    OpenApiParameter("orderBy", str, description="precio | nuevo | nombre (default)"),
    OpenApiParameter("desc", bool, description="Descending order (ignored for nuevo)"),
    OpenApiParameter("page", int, description="1-based page number, default 1"),
    OpenApiParameter("pageSize", int, description="Items per page, default 12"),
]


def _product_not_found(product_id):
    return error_response("NOT_FOUND", f"Producto '{product_id}' no encontrado")


@extend_schema(tags=["Categories"])
class CategoryListView(APIView):
    permission_classes = [AllowAny]
    service = build_category_service()
    log = logger.bind(view="CategoryListView")

    @extend_schema(
        operation_id="categories_list",
        summary="List categories with their products",
        responses={200: envelope(CategorySerializer, many=True)},
    )
    def get(self, request):
        self.log.debug("Listing categories")
        data = self.service.list_categories()
        return success_response(CategorySerializer(data, many=True).data)


@extend_schema(tags=["Categories"])
class CategoryDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_category_service()
    log = logger.bind(view="CategoryDetailView")

    @extend_schema(
        operation_id="categories_retrieve",
        summary="Get category with a page of its products",
        parameters=[OpenApiParameter("slug", str, OpenApiParameter.PATH)]
        + [p for p in PRODUCT_QUERY_PARAMETERS if p.name != "categoria"],
        responses={
            200: envelope(CategorySerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, slug: str):
        query = getattr(request, "product_query", None) or parse_product_query(
            request.query_params
        )
        self.log.debug("Fetching category detail", slug=slug, page=query.page)
        result = self.service.get_category(slug, query)
        if result is None:
            self.log.info("Category not found", slug=slug)
            return error_response("NOT_FOUND", f"Categoría '{slug}' no encontrada")
        category, page = result
        data = CategorySerializer(category).data
        page_data = PageSerializer(page).data
        page_data.pop("items")
        data["paginacion"] = page_data
        return success_response(data)


@extend_schema(tags=["Products"])
class ProductListView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="Search products",
        description="Filters combine with AND; results are paginated.",
        parameters=PRODUCT_QUERY_PARAMETERS,
        responses={
            200: envelope(PageSerializer),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        query = getattr(request, "product_query", None) or parse_product_query(
            request.query_params
        )
        self.log.debug("Handling product search", categoria=query.categoria, page=query.page)
        page = self.service.search_products(query)
        return success_response(PageSerializer(page).data)

    @extend_schema(
        operation_id="products_create",
        summary="Create product",
        request=ProductWriteSerializer,
        responses={
            201: envelope(ProductReadSerializer),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info(
            "Creating product via API", nombre=serializer.validated_data.get("nombre")
        )
        dto = self.service.create_product(serializer.validated_data)
        self.log.info("Product created via API", product_id=dto.id)
        location = request.build_absolute_uri(
            reverse("api-products-detail", args=[dto.id])
        )
        return success_response(
            ProductReadSerializer(dto).data,
            "Producto creado exitosamente",
            status.HTTP_201_CREATED,
            headers={"Location": location},
        )


@extend_schema(tags=["Products"])
class ProductFeaturedView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductFeaturedView")

    @extend_schema(
        operation_id="products_featured",
        summary="Featured products",
        description="Products with a badge, flagged as new, or a featured/wide/tall layout.",
        parameters=[OpenApiParameter("limit", int, description="Maximum items, default 6")],
        responses={
            200: envelope(ProductReadSerializer, many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        query = getattr(request, "featured_query", None) or parse_featured_query(
            request.query_params
        )
        self.log.debug("Listing featured products", limit=query.limit)
        data = self.service.featured_products(query)
        return success_response(ProductReadSerializer(data, many=True).data)


@extend_schema(tags=["Products"])
class ProductDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[OpenApiParameter("product_id", str, OpenApiParameter.PATH)],
        responses={
            200: envelope(ProductReadSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: str):
        self.log.debug("Fetching product detail", product_id=product_id)
        dto = self.service.get_product(product_id)
        if not dto:
            self.log.info("Product not found", product_id=product_id)
            return _product_not_found(product_id)
        return success_response(ProductReadSerializer(dto).data)

    @extend_schema(
        operation_id="products_replace",
        summary="Replace product",
        request=ProductWriteSerializer,
        responses={
            200: envelope(ProductReadSerializer),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, product_id: str):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Replacing product", product_id=product_id)
        dto = self.service.update_product(product_id, serializer.validated_data)
        if not dto:
            self.log.warning("Product replace failed: not found", product_id=product_id)
            return _product_not_found(product_id)
        return success_response(ProductReadSerializer(dto).data, "Producto actualizado")

    @extend_schema(
        operation_id="products_destroy",
        summary="Delete product",
        responses={
            204: None,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, product_id: str):
        self.log.info("Deleting product", product_id=product_id)
        if not self.service.delete_product(product_id):
            return _product_not_found(product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
