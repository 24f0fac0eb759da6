from django.urls import path

from apps.domains.jobs import views

urlpatterns = [
    path("<uuid:job_id>/", views.SyncJobStatusView.as_view(), name="sync-job-status"),
]
