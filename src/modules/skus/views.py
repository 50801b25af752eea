"""SKU API views.

``GET /api/v1/skus/?product=<id>`` lists the SKUs of one product and
answers 404 when that product does not exist.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.api import request_object
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.skus.dtos import SKURequestDTO
from modules.skus.filters import SKUFilter
from modules.skus.models import SKU
from modules.skus.repositories.django_repository import SKUDjangoRepository
from modules.skus.serializers import SKUSerializer
from modules.skus.services import SKUService


class SKUViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for SKU CRUD operations."""

    filterset_class = SKUFilter
    ordering_fields = ["price", "stock_quantity", "color", "size"]
    ordering = ["color", "size", "id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    queryset = SKU.objects.all()
    serializer_class = SKUSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = SKUService(
            repository=SKUDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    @staticmethod
    def _dto_from(request: Request) -> SKURequestDTO:
        data = request_object(request)
        return SKURequestDTO(
            product_id=data.get("product_id"),
            color=data.get("color", ""),
            size=data.get("size", ""),
            price=data.get("price"),
            stock_quantity=data.get("stock_quantity"),
        )

    def get_queryset(self):
        product_id = self.request.query_params.get("product")
        if product_id:
            return self._service.list_skus_for_product(product_id)
        return self._service.list_skus()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/skus/{pk}/"""
        sku = self._service.get_sku(pk)
        return Response(SKUSerializer(sku).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/skus/"""
        sku = self._service.create_sku(self._dto_from(request))
        return Response(SKUSerializer(sku).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/skus/{pk}/"""
        sku = self._service.update_sku(pk, self._dto_from(request))
        return Response(SKUSerializer(sku).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/skus/{pk}/"""
        self._service.delete_sku(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
