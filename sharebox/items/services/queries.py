"""
Booking listings for a booker or for the owner of a set of items.

A listing is filtered by a ``BookingState`` category evaluated against one
``now`` captured per call, ordered by start (newest first) and sliced into
zero-based pages.
"""
import enum
from datetime import datetime
from typing import Optional

from django.db.models import Q, QuerySet
from django.utils import timezone

from ..exceptions import UnknownState
from ..models import Booking
from .gateways import ensure_user, owned_item_ids


class BookingState(str, enum.Enum):
    ALL = "ALL"
    CURRENT = "CURRENT"
    PAST = "PAST"
    FUTURE = "FUTURE"
    WAITING = "WAITING"
    REJECTED = "REJECTED"
    # Anything the client sent that is not one of the above
    UNSUPPORTED = "UNSUPPORTED_STATUS"

    @classmethod
    def parse(cls, raw) -> "BookingState":
        """Case-insensitive parse; unknown input maps to UNSUPPORTED, never raises."""
        if isinstance(raw, cls):
            return raw
        value = (raw or cls.ALL.value).strip().upper()
        try:
            state = cls(value)
        except ValueError:
            return cls.UNSUPPORTED
        return state

    def predicate(self, now: datetime) -> Q:
        """Filter for this category at instant ``now``."""
        if self is BookingState.ALL:
            return Q()
        if self is BookingState.CURRENT:
            return Q(start__lte=now, end__gte=now)
        if self is BookingState.PAST:
            return Q(end__lt=now)
        if self is BookingState.FUTURE:
            return Q(start__gt=now)
        if self is BookingState.WAITING:
            return Q(status=Booking.WAITING)
        if self is BookingState.REJECTED:
            return Q(status=Booking.REJECTED)
        raise UnknownState(self.value)


def _page(queryset: QuerySet, page: int, size: int) -> list:
    offset = page * size
    return list(queryset[offset:offset + size])


def _listing(base: QuerySet, state, page: int, size: int, now: Optional[datetime]) -> list:
    state = BookingState.parse(state)
    now = now or timezone.now()
    queryset = (
        base
        .filter(state.predicate(now))
        .select_related('item', 'booker')
        .order_by('-start', '-id')
    )
    return _page(queryset, page, size)


def list_for_booker(user_id, state, page: int, size: int, now: Optional[datetime] = None) -> list:
    """Bookings made by ``user_id`` in the given category."""
    ensure_user(user_id)
    return _listing(Booking.objects.filter(booker_id=user_id), state, page, size, now)


def list_for_owner(owner_id, state, page: int, size: int, now: Optional[datetime] = None) -> list:
    """Bookings of any item owned by ``owner_id`` in the given category."""
    ensure_user(owner_id)
    item_ids = owned_item_ids(owner_id)
    return _listing(Booking.objects.filter(item_id__in=item_ids), state, page, size, now)
