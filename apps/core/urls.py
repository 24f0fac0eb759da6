# apps/core/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.core.views import MeView, UnionViewSet

router = DefaultRouter()
router.register("unions", UnionViewSet, basename="system-admin-union")

urlpatterns = [
    path("me/", MeView.as_view(), name="core-me"),
]

system_admin_urlpatterns = [
    path("", include(router.urls)),
]
