"""
Per-item "last" and "next" approved bookings, shown to the item owner.

Both are recomputed on every call from the booking table.
"""
from datetime import datetime
from typing import Optional

from django.utils import timezone

from ..models import Booking


def _approved(item_id):
    return Booking.objects.filter(item_id=item_id, status=Booking.APPROVED)


def last_booking(item_id, now: Optional[datetime] = None) -> Optional[Booking]:
    """Approved booking that started before ``now`` with the latest end."""
    now = now or timezone.now()
    return (
        _approved(item_id)
        .filter(start__lt=now)
        .order_by('-end', '-id')
        .first()
    )


def next_booking(item_id, now: Optional[datetime] = None) -> Optional[Booking]:
    """Approved booking starting after ``now`` with the earliest start."""
    now = now or timezone.now()
    return (
        _approved(item_id)
        .filter(start__gt=now)
        .order_by('start', 'id')
        .first()
    )
