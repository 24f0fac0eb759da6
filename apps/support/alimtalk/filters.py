import django_filters
from django.db.models import Q

from apps.support.alimtalk.models import DEFAULT_CHANNEL_NAME, AlimtalkLog


class AlimtalkLogFilter(django_filters.FilterSet):
    unionId = django_filters.NumberFilter(field_name="union_id")
    channel = django_filters.ChoiceFilter(
        method="filter_channel",
        choices=[("all", "all"), ("default", "default"), ("custom", "custom")],
    )
    dateFrom = django_filters.DateFilter(field_name="sent_at", lookup_expr="date__gte")
    dateTo = django_filters.DateFilter(field_name="sent_at", lookup_expr="date__lte")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = AlimtalkLog
        fields = ["unionId", "channel", "dateFrom", "dateTo", "search"]

    def filter_channel(self, queryset, name, value):
        if value == "default":
            return queryset.filter(sender_channel_name=DEFAULT_CHANNEL_NAME)
        if value == "custom":
            return queryset.exclude(sender_channel_name=DEFAULT_CHANNEL_NAME)
        return queryset

    def filter_search(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(title__icontains=value) |
            Q(template_name__icontains=value)
        )
