import logging

from django.utils import timezone
from django_filters import rest_framework as df
from rest_framework import viewsets, mixins, permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import (
    extend_schema_view, extend_schema, OpenApiParameter, OpenApiTypes,
    OpenApiExample, OpenApiResponse,
)

from ..exceptions import Forbidden
from ..models import Item
from ..serializers import ItemSerializer, CommentSerializer
from ..services import ensure_may_comment
from ..services.gateways import get_item
from ..throttling import ScopedRateThrottleIsolated
from .filters import ItemSearchFilter

logger = logging.getLogger(__name__)


@extend_schema(tags=["items"])
@extend_schema_view(
    list=extend_schema(
        summary="List my items",
        description="Own items ordered by id, each with last/next approved booking and comments.",
        responses={200: ItemSerializer(many=True)},
    ),
    create=extend_schema(
        summary="List a new item",
        responses={
            201: ItemSerializer,
            400: OpenApiResponse(description="Validation error"),
            404: OpenApiResponse(description="Referenced item request not found"),
        },
    ),
    retrieve=extend_schema(
        summary="Get item",
        description="last_booking/next_booking are filled only for the owner.",
        responses={200: ItemSerializer, 404: OpenApiResponse(description="Item not found")},
    ),
    partial_update=extend_schema(
        summary="Update item (owner only)",
        responses={
            200: ItemSerializer,
            404: OpenApiResponse(description="Item not found or not the owner"),
        },
    ),
)
class ItemViewSet(mixins.CreateModelMixin, viewsets.GenericViewSet):
    serializer_class = ItemSerializer
    permission_classes = (permissions.IsAuthenticated,)
    filter_backends = (df.DjangoFilterBackend,)
    filterset_class = ItemSearchFilter
    throttle_classes = (ScopedRateThrottleIsolated,)
    http_method_names = ['get', 'post', 'patch', 'head', 'options']
    lookup_value_regex = r"\d+"

    def get_throttles(self):
        self.throttle_scope = 'comments' if getattr(self, 'action', None) == 'comment' else None
        return super().get_throttles()

    def get_queryset(self):
        return (
            Item.objects
            .select_related('owner')
            .prefetch_related('comments__author')
            .order_by('id')
        )

    def get_serializer_context(self):
        """One `now` per request for every last/next booking lookup."""
        ctx = super().get_serializer_context()
        ctx['now'] = timezone.now()
        return ctx

    def get_object(self):
        return get_item(int(self.kwargs['pk']))

    def perform_create(self, serializer):
        item = serializer.save(owner=self.request.user)
        logger.info("Item id=%s listed by owner=%s", item.pk, item.owner_id)

    def list(self, request, *args, **kwargs):
        items = self.get_queryset().filter(owner_id=request.user.pk)
        return Response(self.get_serializer(items, many=True).data)

    def retrieve(self, request, *args, **kwargs):
        return Response(self.get_serializer(self.get_object()).data)

    def partial_update(self, request, *args, **kwargs):
        item = self.get_object()
        if item.owner_id != request.user.pk:
            raise Forbidden(f"Item with id={item.pk} belongs to another user.")
        serializer = self.get_serializer(item, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    @extend_schema(
        summary="Search available items",
        parameters=[
            OpenApiParameter("text", OpenApiTypes.STR,
                             description="Case-insensitive match on name or description"),
        ],
        responses={200: ItemSerializer(many=True)},
    )
    @action(detail=False, methods=['get'])
    def search(self, request):
        text = (request.query_params.get('text') or '').strip()
        if not text:
            return Response([])
        items = self.filter_queryset(self.get_queryset().filter(available=True))
        return Response(self.get_serializer(items, many=True).data)

    @extend_schema(
        summary="Comment on an item",
        description="Allowed only after an APPROVED booking of this item by the user has ended.",
        request=CommentSerializer,
        examples=[OpenApiExample("Comment", value={"text": "Worked great, thanks!"})],
        responses={
            201: CommentSerializer,
            400: OpenApiResponse(description="Blank text or no finished approved booking"),
            404: OpenApiResponse(description="Item not found"),
        },
    )
    @action(detail=True, methods=['post'])
    def comment(self, request, pk=None):
        serializer = CommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        now = timezone.now()
        item = self.get_object()
        ensure_may_comment(request.user.pk, item.pk, now=now)

        comment = serializer.save(item=item, author=request.user, created=now)
        logger.info("Comment id=%s on item=%s by user=%s", comment.pk, item.pk, request.user.pk)
        return Response(CommentSerializer(comment).data, status=status.HTTP_201_CREATED)
