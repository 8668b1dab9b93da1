from .lifecycle import create_booking, update_status, get_booking
from .queries import BookingState, list_for_booker, list_for_owner
from .availability import last_booking, next_booking
from .eligibility import may_comment, ensure_may_comment

__all__ = [
    "create_booking",
    "update_status",
    "get_booking",
    "BookingState",
    "list_for_booker",
    "list_for_owner",
    "last_booking",
    "next_booking",
    "may_comment",
    "ensure_may_comment",
]
