# apps/support/alimtalk/urls.py
from django.urls import path

from apps.support.alimtalk import views

urlpatterns = [
    path("send/", views.SendAlimtalkView.as_view(), name="alimtalk-send"),
    path("consent-reminder/", views.ConsentReminderView.as_view(), name="alimtalk-consent-reminder"),
    path(
        "consent-reminder/bulk/",
        views.BulkConsentReminderView.as_view(),
        name="alimtalk-consent-reminder-bulk",
    ),
    path("logs/", views.AlimtalkLogListView.as_view(), name="alimtalk-logs"),
    path("logs/<int:pk>/", views.AlimtalkLogDetailView.as_view(), name="alimtalk-log-detail"),
    path("pricing/", views.AlimtalkPricingListCreateView.as_view(), name="alimtalk-pricing"),
    path("pricing/current/", views.AlimtalkCurrentPricingView.as_view(), name="alimtalk-pricing-current"),
    path("templates/", views.AlimtalkTemplateListView.as_view(), name="alimtalk-templates"),
    path("templates/sync/", views.AlimtalkTemplateSyncView.as_view(), name="alimtalk-templates-sync"),
    path(
        "templates/<str:template_code>/",
        views.AlimtalkTemplateDetailView.as_view(),
        name="alimtalk-template-detail",
    ),
]
