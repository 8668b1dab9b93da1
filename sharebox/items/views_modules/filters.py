from django.db.models import Q
from django_filters import rest_framework as df

from ..models import Item


class ItemSearchFilter(df.FilterSet):
    """Free-text search over available items."""
    text = df.CharFilter(method='filter_text', label='Text in name or description')

    class Meta:
        model = Item
        fields = []

    def filter_text(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset.none()
        return queryset.filter(
            Q(name__icontains=value) | Q(description__icontains=value)
        )
