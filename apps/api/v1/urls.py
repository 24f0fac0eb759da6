# apps/api/v1/urls.py
from django.urls import path, include

from apps.core.urls import system_admin_urlpatterns

urlpatterns = [
    # =========================
    # Domain APIs
    # =========================
    path("consent/", include("apps.domains.consent.urls")),
    path("jobs/", include("apps.domains.jobs.urls")),

    # =========================
    # Alimtalk
    # =========================
    path("alimtalk/", include("apps.support.alimtalk.urls")),

    # =========================
    # Core
    # =========================
    path("core/", include("apps.core.urls")),

    # =========================
    # System admin (조합 헤더 불필요)
    # =========================
    path("system-admin/", include(system_admin_urlpatterns)),
]
