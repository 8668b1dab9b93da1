from .item_request import ItemRequest
from .item import Item
from .booking import Booking
from .comment import Comment

__all__ = [
    "ItemRequest",
    "Item",
    "Booking",
    "Comment",
]
