import importlib

from django.conf import settings
from django.urls import resolve, reverse
from rest_framework.settings import api_settings

from sharebox.items.handlers import api_exception_handler
from sharebox.items.views_modules import BookingViewSet, ItemViewSet, ItemRequestViewSet
from sharebox.users.authentication import SharerUserIdAuthentication
from sharebox.users.views import UserViewSet


def test_root_urlconf_imports():
    urls = importlib.import_module(settings.ROOT_URLCONF)
    assert urls.urlpatterns


def test_api_settings_resolve_project_classes():
    assert SharerUserIdAuthentication in api_settings.DEFAULT_AUTHENTICATION_CLASSES
    assert api_settings.EXCEPTION_HANDLER is api_exception_handler


def test_routes_resolve_to_viewsets():
    cases = [
        (reverse("items:booking-list"), BookingViewSet),
        (reverse("items:booking-detail", args=[1]), BookingViewSet),
        (reverse("items:booking-owner"), BookingViewSet),
        (reverse("items:item-list"), ItemViewSet),
        (reverse("items:item-search"), ItemViewSet),
        (reverse("items:item-comment", args=[1]), ItemViewSet),
        (reverse("items:item-request-list"), ItemRequestViewSet),
        (reverse("items:item-request-others"), ItemRequestViewSet),
        (reverse("users:user-detail", args=[1]), UserViewSet),
    ]
    for url, viewset in cases:
        assert resolve(url).func.cls is viewset, url

    assert reverse("items:booking-owner") == "/api/bookings/owner/"
    assert reverse("items:item-request-others") == "/api/requests/all/"
