from django.urls import include, path
from rest_framework.routers import DefaultRouter

from apps.domains.consent import views

router = DefaultRouter()
router.register("stages", views.ConsentStageViewSet, basename="consent-stage")

urlpatterns = [
    path("bulk-upload/", views.ConsentBulkUploadView.as_view(), name="consent-bulk-upload"),
    path("bulk-upload/file/", views.ConsentBulkUploadFileView.as_view(), name="consent-bulk-upload-file"),
    path("bulk-update/", views.ConsentBulkUpdateView.as_view(), name="consent-bulk-update"),
    path("", include(router.urls)),
]
