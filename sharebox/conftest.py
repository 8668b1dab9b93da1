import pytest
from django.core.cache import caches
from django.conf import settings
from rest_framework.test import APIClient

from sharebox.items.factories import OwnerFactory, BookerFactory, ItemFactory


@pytest.fixture(autouse=True)
def clear_all_caches():
    """Reset throttle history and any per-site cache before every test."""
    for alias in settings.CACHES.keys():
        caches[alias].clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def owner(db):
    return OwnerFactory(email="owner@example.com", name="Owner")


@pytest.fixture
def booker(db):
    return BookerFactory(email="booker@example.com", name="Booker")


@pytest.fixture
def item(owner):
    return ItemFactory(owner=owner, name="Drill", description="Cordless drill", available=True)


@pytest.fixture
def as_user(api_client):
    """Send requests as the given user via the X-Sharer-User-Id header."""
    def _as(user):
        api_client.credentials(HTTP_X_SHARER_USER_ID=str(user.pk))
        return api_client
    return _as
