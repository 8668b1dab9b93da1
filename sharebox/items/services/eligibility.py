from datetime import datetime
from typing import Optional

from django.utils import timezone

from ..exceptions import ItemAvailabilityError
from ..models import Booking


def may_comment(user_id, item_id, now: Optional[datetime] = None) -> bool:
    """True if ``user_id`` has an approved booking of ``item_id`` that already ended."""
    now = now or timezone.now()
    return Booking.objects.filter(
        item_id=item_id,
        booker_id=user_id,
        status=Booking.APPROVED,
        end__lt=now,
    ).exists()


def ensure_may_comment(user_id, item_id, now: Optional[datetime] = None) -> None:
    if not may_comment(user_id, item_id, now=now):
        raise ItemAvailabilityError(user_id, item_id)
