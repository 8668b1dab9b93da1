from .item import ItemViewSet
from .booking import BookingViewSet
from .item_request import ItemRequestViewSet
from .filters import ItemSearchFilter

__all__ = [
    "ItemViewSet",
    "BookingViewSet",
    "ItemRequestViewSet",
    "ItemSearchFilter",
]
