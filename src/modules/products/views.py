"""Product API views.

Exposes ``ProductService`` via DRF ViewSets.  Domain errors and DTO
validation errors are not caught here: ``domain_exception_handler``
turns them into 4xx responses.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.core.api import request_object
from modules.products.dtos import ProductRequestDTO
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductDetailSerializer, ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the Django repositories (DIP).  Does
    **not** extend ``ModelViewSet``: all ORM access goes through the
    service/repository layer.
    """

    filterset_class = ProductFilter
    search_fields = ["name", "description"]
    ordering_fields = ["name", "created_at"]
    ordering = ["name", "id"]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            category_repository=CategoryDjangoRepository(),
        )

    @staticmethod
    def _dto_from(request: Request) -> ProductRequestDTO:
        data = request_object(request)
        return ProductRequestDTO(
            name=data.get("name", ""),
            description=data.get("description"),
            category_id=data.get("category_id"),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list_products()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.get_product(pk)
        return Response(ProductDetailSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        product = self._service.create_product(self._dto_from(request))
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/"""
        product = self._service.update_product(pk, self._dto_from(request))
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        self._service.delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
