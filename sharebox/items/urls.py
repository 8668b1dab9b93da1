from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views_modules import ItemViewSet, BookingViewSet, ItemRequestViewSet

app_name = "items"

router = DefaultRouter()
router.register(r"items", ItemViewSet, basename="item")
router.register(r"bookings", BookingViewSet, basename="booking")
router.register(r"requests", ItemRequestViewSet, basename="item-request")

urlpatterns = [
    path("", include(router.urls)),
]
