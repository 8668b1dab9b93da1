"""
Lookups the booking core needs from the identity store, the item catalog and
the booking store. Each getter raises the matching ``NotFound`` error.
"""
from django.contrib.auth import get_user_model

from ..exceptions import UserNotFound, ItemNotFound, BookingNotFound, RequestNotFound
from ..models import Item, Booking, ItemRequest


def get_user(user_id):
    User = get_user_model()
    try:
        return User.objects.get(pk=user_id)
    except User.DoesNotExist:
        raise UserNotFound(user_id)


def user_exists(user_id) -> bool:
    return get_user_model().objects.filter(pk=user_id).exists()


def ensure_user(user_id) -> None:
    if not user_exists(user_id):
        raise UserNotFound(user_id)


def get_item(item_id) -> Item:
    try:
        return Item.objects.select_related('owner').get(pk=item_id)
    except Item.DoesNotExist:
        raise ItemNotFound(item_id)


def owned_item_ids(owner_id) -> list:
    return list(Item.objects.filter(owner_id=owner_id).values_list('id', flat=True))


def get_booking_record(booking_id) -> Booking:
    try:
        return Booking.objects.select_related('item', 'item__owner', 'booker').get(pk=booking_id)
    except Booking.DoesNotExist:
        raise BookingNotFound(booking_id)


def get_item_request(request_id) -> ItemRequest:
    try:
        return ItemRequest.objects.select_related('requestor').get(pk=request_id)
    except ItemRequest.DoesNotExist:
        raise RequestNotFound(request_id)
