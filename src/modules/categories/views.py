"""Category API views.

Exposes ``CategoryService`` via DRF.  Domain errors and DTO validation
errors propagate to ``domain_exception_handler``; the views only parse
input and serialize output.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.categories.dtos import CategoryRequestDTO
from modules.categories.filters import CategoryFilter
from modules.categories.models import Category
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.serializers import CategorySerializer
from modules.categories.services import CategoryService
from modules.core.api import request_object


class CategoryViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Category CRUD operations."""

    filterset_class = CategoryFilter
    search_fields = ["name"]
    ordering_fields = ["name", "created_at"]
    ordering = ["name"]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    queryset = Category.objects.all()
    serializer_class = CategorySerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(repository=CategoryDjangoRepository())

    def get_queryset(self):
        return self._service.list_categories()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/categories/{pk}/"""
        category = self._service.get_category(pk)
        return Response(CategorySerializer(category).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/categories/"""
        data = request_object(request)
        dto = CategoryRequestDTO(name=data.get("name", ""), active=data.get("active"))
        category = self._service.create_category(dto)
        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/categories/{pk}/"""
        data = request_object(request)
        dto = CategoryRequestDTO(name=data.get("name", ""), active=data.get("active"))
        category = self._service.update_category(pk, dto)
        return Response(CategorySerializer(category).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/categories/{pk}/"""
        self._service.delete_category(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
