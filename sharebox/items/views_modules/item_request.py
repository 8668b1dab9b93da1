import logging

from django.utils import timezone
from rest_framework import viewsets, mixins, permissions
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import (
    extend_schema_view, extend_schema, OpenApiParameter, OpenApiTypes, OpenApiResponse,
)

from ..models import ItemRequest
from ..pagination import FromSizePagination
from ..serializers import ItemRequestSerializer
from ..services.gateways import get_item_request

logger = logging.getLogger(__name__)


@extend_schema(tags=["requests"])
@extend_schema_view(
    list=extend_schema(summary="List my item requests", responses={200: ItemRequestSerializer(many=True)}),
    create=extend_schema(summary="Ask for an item"),
    retrieve=extend_schema(
        summary="Get item request",
        responses={200: ItemRequestSerializer, 404: OpenApiResponse(description="Request not found")},
    ),
)
class ItemRequestViewSet(mixins.CreateModelMixin, viewsets.GenericViewSet):
    serializer_class = ItemRequestSerializer
    permission_classes = (permissions.IsAuthenticated,)
    pagination_class = FromSizePagination
    http_method_names = ['get', 'post', 'head', 'options']
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        return ItemRequest.objects.prefetch_related('items').order_by('-created', '-id')

    def perform_create(self, serializer):
        item_request = serializer.save(requestor=self.request.user, created=timezone.now())
        logger.info("Item request id=%s by user=%s", item_request.pk, item_request.requestor_id)

    def list(self, request, *args, **kwargs):
        own = self.get_queryset().filter(requestor_id=request.user.pk)
        return Response(self.get_serializer(own, many=True).data)

    def retrieve(self, request, *args, **kwargs):
        item_request = get_item_request(int(self.kwargs['pk']))
        return Response(self.get_serializer(item_request).data)

    @extend_schema(
        summary="Browse other users' item requests",
        parameters=[
            OpenApiParameter("from", OpenApiTypes.INT, description="Offset of the first request (>= 0)"),
            OpenApiParameter("size", OpenApiTypes.INT, description="Page size (>= 1)"),
        ],
        responses={200: ItemRequestSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path='all')
    def others(self, request):
        queryset = self.get_queryset().exclude(requestor_id=request.user.pk)
        page = self.paginate_queryset(queryset)
        return self.get_paginated_response(self.get_serializer(page, many=True).data)
