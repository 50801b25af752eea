"""SKU URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.skus.views import SKUViewSet

router = DefaultRouter(trailing_slash=True)
router.register("skus", SKUViewSet, basename="sku")

urlpatterns = router.urls
