from datetime import timedelta

import pytest
from django.utils import timezone

from sharebox.items.exceptions import (
    UserNotFound,
    ItemNotFound,
    BookingNotFound,
    BookingNotVisible,
    SelfBookingForbidden,
    ItemUnavailable,
    Forbidden,
    InvalidStateTransition,
)
from sharebox.items.factories import UserFactory, ItemFactory, BookingFactory
from sharebox.items.models import Booking
from sharebox.items.services import create_booking, update_status, get_booking


@pytest.mark.django_db
class TestCreateBooking:
    def setup_method(self):
        self.start = timezone.now() + timedelta(days=1)
        self.end = self.start + timedelta(days=1)

    def test_creates_waiting_booking(self, booker, item):
        booking = create_booking(booker.pk, item.pk, self.start, self.end)

        assert booking.pk is not None
        assert booking.status == Booking.WAITING
        assert booking.booker_id == booker.pk
        assert booking.item_id == item.pk
        assert Booking.objects.filter(pk=booking.pk, status=Booking.WAITING).exists()

    def test_unknown_booker(self, item):
        with pytest.raises(UserNotFound):
            create_booking(999_999, item.pk, self.start, self.end)
        assert Booking.objects.count() == 0

    def test_unknown_item(self, booker):
        with pytest.raises(ItemNotFound):
            create_booking(booker.pk, 999_999, self.start, self.end)

    def test_owner_cannot_book_own_item(self, owner, item):
        with pytest.raises(SelfBookingForbidden) as exc:
            create_booking(owner.pk, item.pk, self.start, self.end)
        assert exc.value.status_code == 404
        assert exc.value.kind == "self_booking_forbidden"
        assert Booking.objects.count() == 0

    def test_unavailable_item(self, booker, owner):
        item = ItemFactory(owner=owner, available=False)
        with pytest.raises(ItemUnavailable):
            create_booking(booker.pk, item.pk, self.start, self.end)
        assert Booking.objects.count() == 0

    def test_overlapping_requests_are_allowed(self, booker, item):
        first = create_booking(booker.pk, item.pk, self.start, self.end)
        second = create_booking(booker.pk, item.pk, self.start, self.end)
        assert first.pk != second.pk


@pytest.mark.django_db
class TestUpdateStatus:
    def test_owner_approves(self, owner, item):
        booking = BookingFactory(item=item)
        updated = update_status(owner.pk, booking.pk, True)

        assert updated.status == Booking.APPROVED
        booking.refresh_from_db()
        assert booking.status == Booking.APPROVED

    def test_owner_rejects(self, owner, item):
        booking = BookingFactory(item=item)
        updated = update_status(owner.pk, booking.pk, False)

        assert updated.status == Booking.REJECTED
        booking.refresh_from_db()
        assert booking.status == Booking.REJECTED

    def test_second_decision_reports_current_status(self, owner, item):
        booking = BookingFactory(item=item)
        update_status(owner.pk, booking.pk, True)

        with pytest.raises(InvalidStateTransition) as exc:
            update_status(owner.pk, booking.pk, True)
        assert "APPROVED" in str(exc.value.detail)
        assert exc.value.current_status == Booking.APPROVED

    def test_rejected_is_terminal(self, owner, item):
        booking = BookingFactory(item=item, rejected=True)

        with pytest.raises(InvalidStateTransition) as exc:
            update_status(owner.pk, booking.pk, True)
        assert "REJECTED" in str(exc.value.detail)
        booking.refresh_from_db()
        assert booking.status == Booking.REJECTED

    def test_non_owner_is_forbidden(self, booker, item):
        booking = BookingFactory(item=item, booker=booker)

        with pytest.raises(Forbidden) as exc:
            update_status(booker.pk, booking.pk, True)
        assert exc.value.status_code == 404
        assert exc.value.kind == "forbidden"
        booking.refresh_from_db()
        assert booking.status == Booking.WAITING

    def test_unknown_owner(self, item):
        booking = BookingFactory(item=item)
        with pytest.raises(UserNotFound):
            update_status(999_999, booking.pk, True)

    def test_unknown_booking(self, owner):
        with pytest.raises(BookingNotFound):
            update_status(owner.pk, 999_999, True)

    def test_decision_does_not_touch_other_bookings(self, owner, item):
        target = BookingFactory(item=item)
        other = BookingFactory(item=item)

        update_status(owner.pk, target.pk, True)

        other.refresh_from_db()
        assert other.status == Booking.WAITING


@pytest.mark.django_db
class TestGetBooking:
    def test_visible_to_booker_and_owner(self, owner, booker, item):
        booking = BookingFactory(item=item, booker=booker)

        assert get_booking(booker.pk, booking.pk).pk == booking.pk
        assert get_booking(owner.pk, booking.pk).pk == booking.pk

    def test_hidden_from_third_party(self, booker, item):
        booking = BookingFactory(item=item, booker=booker)
        stranger = UserFactory()

        with pytest.raises(BookingNotVisible) as exc:
            get_booking(stranger.pk, booking.pk)
        assert exc.value.status_code == 404

    def test_unknown_user(self, booker, item):
        booking = BookingFactory(item=item, booker=booker)
        with pytest.raises(UserNotFound):
            get_booking(999_999, booking.pk)

    def test_unknown_booking(self, booker):
        with pytest.raises(BookingNotFound):
            get_booking(booker.pk, 999_999)
