from .common import UserTinySerializer, ItemTinySerializer, BookingShortSerializer
from .comment import CommentSerializer
from .item import ItemSerializer, ItemTinyForRequestSerializer
from .booking import BookingInputSerializer, BookingSerializer, StatusDecisionSerializer
from .item_request import ItemRequestSerializer

__all__ = [
    "UserTinySerializer",
    "ItemTinySerializer",
    "BookingShortSerializer",
    "CommentSerializer",
    "ItemSerializer",
    "ItemTinyForRequestSerializer",
    "BookingInputSerializer",
    "BookingSerializer",
    "StatusDecisionSerializer",
    "ItemRequestSerializer",
]
