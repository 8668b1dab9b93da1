import random
from datetime import timedelta

import factory
from django.contrib.auth import get_user_model
from django.utils import timezone
from factory import Faker, LazyFunction, post_generation
from factory.django import DjangoModelFactory

from .models import Item, ItemRequest, Booking, Comment

ITEM_NOUNS = (
    "Drill", "Ladder", "Tent", "Projector", "Bicycle",
    "Kayak", "Sewing machine", "Pressure washer", "Camera", "Lawn mower",
)


class UserFactory(DjangoModelFactory):
    """
    Demo user keyed by email. Password is hashed in @post_generation.
    """
    class Meta:
        model = get_user_model()
        django_get_or_create = ("email",)

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    name = Faker("name")

    @post_generation
    def password(self, create, extracted, **kwargs):
        pwd = extracted or "Passw0rd!"
        self.set_password(pwd)
        if create:
            self.save()


class OwnerFactory(UserFactory):
    """User who lists items."""
    pass


class BookerFactory(UserFactory):
    """User who books other people's items."""
    pass


class ItemRequestFactory(DjangoModelFactory):
    class Meta:
        model = ItemRequest

    requestor = factory.SubFactory(BookerFactory)
    description = Faker("sentence", nb_words=8)
    created = LazyFunction(timezone.now)


class ItemFactory(DjangoModelFactory):
    class Meta:
        model = Item

    owner = factory.SubFactory(OwnerFactory)
    name = factory.LazyFunction(
        lambda: f"{random.choice(['Old', 'Sturdy', 'Handy', 'Compact'])} {random.choice(ITEM_NOUNS)}"
    )
    description = Faker("paragraph", nb_sentences=3)
    available = True


class BookingFactory(DjangoModelFactory):
    """
    WAITING booking starting tomorrow by default.

    Traits place the window relative to now: `past_approved`, `current`,
    `future_approved` and `rejected`.
    """
    class Meta:
        model = Booking

    item = factory.SubFactory(ItemFactory)
    booker = factory.SubFactory(BookerFactory)

    start = LazyFunction(lambda: timezone.now() + timedelta(days=1))
    end = factory.LazyAttribute(lambda o: o.start + timedelta(days=2))
    status = Booking.WAITING

    class Params:
        past_approved = factory.Trait(
            status=Booking.APPROVED,
            start=LazyFunction(lambda: timezone.now() - timedelta(days=10)),
            end=LazyFunction(lambda: timezone.now() - timedelta(days=8)),
        )
        current = factory.Trait(
            status=Booking.APPROVED,
            start=LazyFunction(lambda: timezone.now() - timedelta(days=1)),
            end=LazyFunction(lambda: timezone.now() + timedelta(days=1)),
        )
        future_approved = factory.Trait(
            status=Booking.APPROVED,
            start=LazyFunction(lambda: timezone.now() + timedelta(days=5)),
            end=LazyFunction(lambda: timezone.now() + timedelta(days=7)),
        )
        rejected = factory.Trait(status=Booking.REJECTED)


class CommentFactory(DjangoModelFactory):
    class Meta:
        model = Comment

    item = factory.SubFactory(ItemFactory)
    author = factory.SubFactory(BookerFactory)
    text = Faker("sentence", nb_words=12)
    created = LazyFunction(timezone.now)
