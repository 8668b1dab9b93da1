"""
Errors raised by the sharing core.

Every error is a DRF ``APIException`` so views can let it propagate: the
``default_code`` doubles as the stable ``kind`` reported to clients, and
``handlers.api_exception_handler`` adds it to the response body next to
``detail``.
"""
from rest_framework import status
from rest_framework.exceptions import APIException


class SharingError(APIException):
    """Base class for domain errors."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "error"
    default_detail = "Request cannot be processed."

    @property
    def kind(self) -> str:
        return self.default_code


# -------------------------
# Not found
# -------------------------
class NotFound(SharingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "not_found"
    default_detail = "Not found."


class UserNotFound(NotFound):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User with id={user_id} not found.")


class ItemNotFound(NotFound):
    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Item with id={item_id} not found.")


class BookingNotFound(NotFound):
    def __init__(self, booking_id):
        self.booking_id = booking_id
        super().__init__(f"Booking with id={booking_id} not found.")


class BookingNotVisible(NotFound):
    """The booking exists but the user is neither its booker nor the item owner."""

    def __init__(self, booking_id, user_id):
        self.booking_id = booking_id
        self.user_id = user_id
        super().__init__(f"Booking with id={booking_id} not found for user with id={user_id}.")


class RequestNotFound(NotFound):
    def __init__(self, request_id):
        self.request_id = request_id
        super().__init__(f"Item request with id={request_id} not found.")


# -------------------------
# Rule violations
# -------------------------
class SelfBookingForbidden(SharingError):
    # Reported like a missing item: owners never see their own items as bookable
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "self_booking_forbidden"

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Item with id={item_id} cannot be booked by its owner.")


class Forbidden(SharingError):
    # Reported like a missing object, same as SelfBookingForbidden
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "forbidden"
    default_detail = "You have no rights over this object."


class InvalidStateTransition(SharingError):
    default_code = "invalid_state_transition"

    def __init__(self, booking_id, current_status):
        self.booking_id = booking_id
        self.current_status = current_status
        super().__init__(
            f"Cannot change status of booking id={booking_id}: current status is {current_status}."
        )


class ItemUnavailable(SharingError):
    default_code = "item_unavailable"

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Item with id={item_id} is not available for booking.")


class UnknownState(SharingError):
    default_code = "unknown_state"

    def __init__(self, state):
        self.state = state
        super().__init__(f"Unknown state: {state}")


class ItemAvailabilityError(SharingError):
    """Raised when a user tries to comment on an item they never finished booking."""
    default_code = "item_availability"

    def __init__(self, user_id, item_id):
        self.user_id = user_id
        self.item_id = item_id
        super().__init__(f"User with id={user_id} has no finished booking of item with id={item_id}.")

