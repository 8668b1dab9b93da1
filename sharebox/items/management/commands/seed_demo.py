from __future__ import annotations

import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from sharebox.items.models import Item, ItemRequest, Booking, Comment
from sharebox.items.factories import (
    OwnerFactory,
    BookerFactory,
    ItemFactory,
    ItemRequestFactory,
    BookingFactory,
    CommentFactory,
)


class Command(BaseCommand):
    """
    Seed the database with demo data:
    - Owners and bookers (password: Passw0rd!)
    - Items spread across owners, some answering open item requests
    - One past APPROVED booking per item (so comments are allowed)
    - A few future bookings per item in every status
    - Optional comments for ~60% of finished bookings
    """

    help = "Seed the DB with demo users, items, item requests, bookings and comments."

    def add_arguments(self, parser):
        parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
        parser.add_argument("--wipe", action="store_true", help="Delete all items/requests/bookings/comments first.")
        parser.add_argument("--owners", type=int, default=3, help="How many owners to create.")
        parser.add_argument("--bookers", type=int, default=6, help="How many bookers to create.")
        parser.add_argument("--items", type=int, default=30, help="How many items to create.")
        parser.add_argument("--requests", type=int, default=5, help="How many item requests to create.")
        parser.add_argument("--future", type=int, default=2, help="Future bookings per item.")
        parser.add_argument("--with-comments", action="store_true", help="Comment on part of finished bookings.")

    @transaction.atomic
    def handle(self, *args, **opts):
        seed = opts.get("seed")
        if seed is not None:
            random.seed(seed)

        if opts["wipe"]:
            self.stdout.write(self.style.WARNING("Wiping items/requests/bookings/comments..."))
            Comment.objects.all().delete()
            Booking.objects.all().delete()
            Item.objects.all().delete()
            ItemRequest.objects.all().delete()

        owners_n = opts["owners"]
        bookers_n = opts["bookers"]

        owners = [OwnerFactory(password="Passw0rd!") for _ in range(owners_n)]
        bookers = [BookerFactory(password="Passw0rd!") for _ in range(bookers_n)]
        self.stdout.write(
            self.style.SUCCESS(
                f"Users created: owners={owners_n}, bookers={bookers_n} (password: Passw0rd!)"
            )
        )

        requests = [
            ItemRequestFactory(requestor=random.choice(bookers))
            for _ in range(opts["requests"])
        ]

        items: list[Item] = []
        for i in range(opts["items"]):
            # Round-robin owners; every fifth item answers a request
            request = random.choice(requests) if requests and i % 5 == 0 else None
            items.append(ItemFactory(owner=owners[i % owners_n], request=request))

        now = timezone.now()
        statuses = (Booking.WAITING, Booking.APPROVED, Booking.REJECTED)
        for item in items:
            BookingFactory(item=item, booker=random.choice(bookers), past_approved=True)

            for _ in range(opts["future"]):
                start = now + timedelta(days=random.randint(2, 30), hours=random.randint(0, 23))
                BookingFactory(
                    item=item,
                    booker=random.choice(bookers),
                    start=start,
                    end=start + timedelta(days=random.randint(1, 5)),
                    status=random.choice(statuses),
                )

        if opts["with_comments"]:
            finished = list(
                Booking.objects.filter(status=Booking.APPROVED, end__lt=now).select_related("item", "booker")
            )
            random.shuffle(finished)
            for booking in finished[: int(len(finished) * 0.6)]:
                CommentFactory(item=booking.item, author=booking.booker)

        self.stdout.write(self.style.SUCCESS(f"Seeding done: items={len(items)}, requests={len(requests)}"))
