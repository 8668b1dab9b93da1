"""
Booking lifecycle: creation, owner approval/rejection and single-booking reads.

State machine: WAITING -> APPROVED | REJECTED. Both outcomes are terminal.
"""
import logging

from django.db import transaction

from ..exceptions import (
    Forbidden,
    InvalidStateTransition,
    ItemUnavailable,
    SelfBookingForbidden,
    BookingNotVisible,
)
from ..models import Booking
from .gateways import get_user, ensure_user, get_item, get_booking_record

logger = logging.getLogger(__name__)


def create_booking(booker_id, item_id, start, end) -> Booking:
    """
    Persist a WAITING booking of ``item_id`` for ``booker_id``.

    Date sanity (both present, ``end > start``) is checked by the input
    serializer before this is called.
    """
    booker = get_user(booker_id)
    item = get_item(item_id)

    if item.owner_id == booker.pk:
        raise SelfBookingForbidden(item.pk)
    if not item.available:
        raise ItemUnavailable(item.pk)

    booking = Booking.objects.create(
        item=item,
        booker=booker,
        start=start,
        end=end,
        status=Booking.WAITING,
    )
    logger.info("Booking id=%s created: item=%s booker=%s", booking.pk, item.pk, booker.pk)
    return booking


@transaction.atomic
def update_status(owner_id, booking_id, approved: bool) -> Booking:
    """
    Approve or reject a WAITING booking on behalf of the item owner.

    The WAITING check and the write are one conditional UPDATE, so of two
    concurrent calls on the same booking only one can succeed; the other
    re-reads the persisted status and reports it.
    """
    ensure_user(owner_id)
    booking = get_booking_record(booking_id)

    if booking.item.owner_id != owner_id:
        raise Forbidden(
            f"User with id={owner_id} cannot change status of booking with id={booking_id}."
        )

    target = Booking.APPROVED if approved else Booking.REJECTED
    updated = (
        Booking.objects
        .filter(pk=booking.pk, status=Booking.WAITING)
        .update(status=target)
    )
    if not updated:
        current = (
            Booking.objects
            .filter(pk=booking.pk)
            .values_list('status', flat=True)
            .first()
        )
        raise InvalidStateTransition(booking.pk, current)

    booking.status = target
    logger.info("Booking id=%s %s by owner=%s", booking.pk, target, owner_id)
    return booking


def get_booking(user_id, booking_id) -> Booking:
    """Return a booking visible to ``user_id`` (its booker or the item owner)."""
    ensure_user(user_id)
    booking = get_booking_record(booking_id)

    if user_id not in (booking.booker_id, booking.item.owner_id):
        raise BookingNotVisible(booking_id, user_id)
    return booking
