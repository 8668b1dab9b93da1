import logging

from rest_framework import viewsets, permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import (
    extend_schema_view, extend_schema, OpenApiParameter, OpenApiTypes,
    OpenApiResponse,
)

from ..models import Booking
from ..pagination import FromSizePagination
from ..serializers import BookingInputSerializer, BookingSerializer, StatusDecisionSerializer
from ..services import (
    BookingState,
    create_booking,
    update_status,
    get_booking,
    list_for_booker,
    list_for_owner,
)
from ..throttling import ScopedRateThrottleIsolated

logger = logging.getLogger(__name__)

LISTING_PARAMETERS = [
    OpenApiParameter(
        "state", OpenApiTypes.STR,
        description="ALL, CURRENT, PAST, FUTURE, WAITING or REJECTED (default ALL)",
    ),
    OpenApiParameter("from", OpenApiTypes.INT, description="Offset of the first booking (>= 0)"),
    OpenApiParameter("size", OpenApiTypes.INT, description="Page size (>= 1)"),
]


@extend_schema(tags=["bookings"])
@extend_schema_view(
    list=extend_schema(
        summary="List my bookings (as booker)",
        parameters=LISTING_PARAMETERS,
        responses={
            200: BookingSerializer(many=True),
            400: OpenApiResponse(description="Unknown state or invalid from/size"),
        },
    ),
    create=extend_schema(
        summary="Request a booking",
        request=BookingInputSerializer,
        responses={
            201: BookingSerializer,
            400: OpenApiResponse(description="Validation error or item unavailable"),
            404: OpenApiResponse(description="User/item not found, or own item"),
        },
    ),
    retrieve=extend_schema(
        summary="Get booking (booker or item owner)",
        responses={
            200: BookingSerializer,
            404: OpenApiResponse(description="Booking not found or not visible"),
        },
    ),
    partial_update=extend_schema(
        summary="Approve or reject a booking (item owner only)",
        request=None,
        parameters=[
            OpenApiParameter("approved", OpenApiTypes.BOOL, required=True,
                             description="true approves, false rejects"),
        ],
        responses={
            200: BookingSerializer,
            400: OpenApiResponse(description="Booking is no longer WAITING"),
            404: OpenApiResponse(description="Booking not found or not the item owner"),
        },
    ),
)
class BookingViewSet(viewsets.GenericViewSet):
    """
    - create: request a booking of someone else's item
    - partial_update: owner approves/rejects (`?approved=true|false`)
    - retrieve: visible to the booker and the item owner
    - list / owner: listings by category with `from`/`size` window
    """
    queryset = Booking.objects.none()
    serializer_class = BookingSerializer
    permission_classes = (permissions.IsAuthenticated,)
    pagination_class = FromSizePagination
    throttle_classes = (ScopedRateThrottleIsolated,)
    http_method_names = ['get', 'post', 'patch', 'head', 'options']
    lookup_value_regex = r"\d+"

    def get_throttles(self):
        scope_map = {
            'create': 'bookings_mutation',
            'partial_update': 'bookings_mutation',
        }
        self.throttle_scope = scope_map.get(getattr(self, 'action', None))
        return super().get_throttles()

    def create(self, request, *args, **kwargs):
        payload = BookingInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        booking = create_booking(request.user.pk, **payload.validated_data)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None, *args, **kwargs):
        decision = StatusDecisionSerializer(data=request.query_params.dict())
        decision.is_valid(raise_exception=True)
        booking = update_status(request.user.pk, int(pk), decision.validated_data['approved'])
        return Response(BookingSerializer(booking).data)

    def retrieve(self, request, pk=None, *args, **kwargs):
        booking = get_booking(request.user.pk, int(pk))
        return Response(BookingSerializer(booking).data)

    def list(self, request, *args, **kwargs):
        page, size = self.paginator.get_window(request)
        state = BookingState.parse(request.query_params.get('state'))
        bookings = list_for_booker(request.user.pk, state, page, size)
        return Response(BookingSerializer(bookings, many=True).data)

    @extend_schema(
        summary="List bookings of my items (as owner)",
        parameters=LISTING_PARAMETERS,
        responses={
            200: BookingSerializer(many=True),
            400: OpenApiResponse(description="Unknown state or invalid from/size"),
        },
    )
    @action(detail=False, methods=['get'])
    def owner(self, request):
        page, size = self.paginator.get_window(request)
        state = BookingState.parse(request.query_params.get('state'))
        bookings = list_for_owner(request.user.pk, state, page, size)
        return Response(BookingSerializer(bookings, many=True).data)
