from django.conf import settings
from rest_framework import serializers
from rest_framework.pagination import BasePagination
from rest_framework.response import Response


class FromSizeParamsSerializer(serializers.Serializer):
    size = serializers.IntegerField(required=False, min_value=1)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # `from` is a keyword, so it cannot be declared as a class attribute
        self.fields["from"] = serializers.IntegerField(required=False, default=0, min_value=0)

    def validate_size(self, value):
        max_size = int(getattr(settings, "SHAREBOX_MAX_PAGE_SIZE", 100))
        if value > max_size:
            raise serializers.ValidationError(f"Ensure this value is less than or equal to {max_size}.")
        return value


class FromSizePagination(BasePagination):
    """
    Offset window driven by `?from=<offset>&size=<n>`, rendered as a bare list.
    The offset is turned into a zero-based page number (`from // size`).
    """

    def get_window(self, request):
        """Return (page, size); invalid params raise a 400 ValidationError."""
        params = FromSizeParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        size = params.validated_data.get("size") or int(getattr(settings, "SHAREBOX_DEFAULT_PAGE_SIZE", 10))
        return params.validated_data["from"] // size, size

    def paginate_queryset(self, queryset, request, view=None):
        page, size = self.get_window(request)
        offset = page * size
        return list(queryset[offset:offset + size])

    def get_paginated_response(self, data):
        return Response(data)

    def get_paginated_response_schema(self, schema):
        return schema
