from datetime import timedelta

from django.utils import timezone
from rest_framework.test import APITestCase

from sharebox.items.factories import UserFactory, ItemFactory, BookingFactory
from sharebox.items.models import Booking


class BookingApiTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.owner = UserFactory(email="owner@example.com", name="Owner")
        cls.booker = UserFactory(email="booker@example.com", name="Booker")
        cls.stranger = UserFactory(email="stranger@example.com", name="Stranger")
        cls.item = ItemFactory(owner=cls.owner, name="Drill", available=True)

    def setUp(self):
        self.start = timezone.now() + timedelta(days=1)
        self.end = self.start + timedelta(days=2)

    # ---------- helpers ----------
    def _as(self, user):
        self.client.credentials(HTTP_X_SHARER_USER_ID=str(user.pk))

    def _create(self, item=None, start=None, end=None):
        return self.client.post("/api/bookings/", {
            "item_id": (item or self.item).pk,
            "start": (start or self.start).isoformat(),
            "end": (end or self.end).isoformat(),
        }, format="json")

    def _decide(self, booking_id, approved):
        flag = "true" if approved else "false"
        return self.client.patch(f"/api/bookings/{booking_id}/?approved={flag}")

    # ---------- creation ----------
    def test_create_returns_waiting_booking(self):
        self._as(self.booker)
        r = self._create()
        self.assertEqual(r.status_code, 201, r.data)
        self.assertEqual(r.data["status"], "WAITING")
        self.assertEqual(r.data["item"], {"id": self.item.pk, "name": "Drill"})
        self.assertEqual(r.data["booker"], {"id": self.booker.pk, "name": "Booker"})

    def test_end_must_be_after_start(self):
        self._as(self.booker)
        r = self._create(end=self.start)
        self.assertEqual(r.status_code, 400)
        self.assertIn("end", r.data)
        self.assertEqual(Booking.objects.count(), 0)

    def test_start_in_the_past_rejected(self):
        self._as(self.booker)
        r = self._create(start=timezone.now() - timedelta(days=1))
        self.assertEqual(r.status_code, 400)
        self.assertIn("start", r.data)

    def test_missing_dates_rejected(self):
        self._as(self.booker)
        r = self.client.post("/api/bookings/", {"item_id": self.item.pk}, format="json")
        self.assertEqual(r.status_code, 400)
        self.assertIn("start", r.data)
        self.assertIn("end", r.data)

    def test_owner_cannot_book_own_item(self):
        self._as(self.owner)
        r = self._create()
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.data["kind"], "self_booking_forbidden")

    def test_unavailable_item(self):
        self._as(self.booker)
        item = ItemFactory(owner=self.owner, available=False)
        r = self._create(item=item)
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.data["kind"], "item_unavailable")

    def test_unknown_item(self):
        self._as(self.booker)
        r = self.client.post("/api/bookings/", {
            "item_id": 999999,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }, format="json")
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.data["kind"], "not_found")

    # ---------- acting user ----------
    def test_unknown_user_header(self):
        self.client.credentials(HTTP_X_SHARER_USER_ID="999999")
        r = self._create()
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.data["kind"], "not_found")

    def test_non_integer_user_header(self):
        self.client.credentials(HTTP_X_SHARER_USER_ID="abc")
        r = self._create()
        self.assertEqual(r.status_code, 400)

    def test_anonymous_is_rejected(self):
        r = self._create()
        self.assertEqual(r.status_code, 401)

    # ---------- approval ----------
    def test_owner_approves_then_cannot_approve_again(self):
        booking = BookingFactory(item=self.item, booker=self.booker)
        self._as(self.owner)

        r1 = self._decide(booking.pk, True)
        self.assertEqual(r1.status_code, 200, r1.data)
        self.assertEqual(r1.data["status"], "APPROVED")

        r2 = self._decide(booking.pk, True)
        self.assertEqual(r2.status_code, 400)
        self.assertEqual(r2.data["kind"], "invalid_state_transition")
        self.assertIn("APPROVED", str(r2.data["detail"]))

    def test_owner_rejects(self):
        booking = BookingFactory(item=self.item, booker=self.booker)
        self._as(self.owner)
        r = self._decide(booking.pk, False)
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.data["status"], "REJECTED")

    def test_booker_cannot_approve(self):
        booking = BookingFactory(item=self.item, booker=self.booker)
        self._as(self.booker)
        r = self._decide(booking.pk, True)
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.data["kind"], "forbidden")
        booking.refresh_from_db()
        self.assertEqual(booking.status, Booking.WAITING)

    def test_approved_flag_is_required(self):
        booking = BookingFactory(item=self.item, booker=self.booker)
        self._as(self.owner)
        r = self.client.patch(f"/api/bookings/{booking.pk}/")
        self.assertEqual(r.status_code, 400)
        self.assertIn("approved", r.data)

    def test_unknown_booking(self):
        self._as(self.owner)
        r = self._decide(999999, True)
        self.assertEqual(r.status_code, 404)

    # ---------- reads ----------
    def test_retrieve_visible_to_booker_and_owner_only(self):
        booking = BookingFactory(item=self.item, booker=self.booker)

        for user in (self.booker, self.owner):
            self._as(user)
            r = self.client.get(f"/api/bookings/{booking.pk}/")
            self.assertEqual(r.status_code, 200)
            self.assertEqual(r.data["id"], booking.pk)

        self._as(self.stranger)
        r = self.client.get(f"/api/bookings/{booking.pk}/")
        self.assertEqual(r.status_code, 404)

    def test_list_as_booker_and_owner(self):
        mine = BookingFactory(item=self.item, booker=self.booker)
        BookingFactory(item=ItemFactory(owner=self.stranger), booker=self.stranger)

        self._as(self.booker)
        r = self.client.get("/api/bookings/")
        self.assertEqual(r.status_code, 200)
        self.assertEqual([b["id"] for b in r.data], [mine.pk])

        self._as(self.owner)
        r = self.client.get("/api/bookings/owner/")
        self.assertEqual(r.status_code, 200)
        self.assertEqual([b["id"] for b in r.data], [mine.pk])

    def test_list_state_is_case_insensitive(self):
        waiting = BookingFactory(item=self.item, booker=self.booker)
        BookingFactory(item=self.item, booker=self.booker, rejected=True)

        self._as(self.booker)
        r = self.client.get("/api/bookings/", {"state": "waiting"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual([b["id"] for b in r.data], [waiting.pk])

    def test_unknown_state(self):
        self._as(self.booker)
        for url in ("/api/bookings/", "/api/bookings/owner/"):
            r = self.client.get(url, {"state": "SOMETHING"})
            self.assertEqual(r.status_code, 400)
            self.assertEqual(r.data["detail"], "Unknown state: UNSUPPORTED_STATUS")
            self.assertEqual(r.data["kind"], "unknown_state")

    def test_from_size_window(self):
        now = timezone.now()
        bookings = [
            BookingFactory(item=self.item, booker=self.booker,
                           start=now + timedelta(days=i + 1), end=now + timedelta(days=i + 2))
            for i in range(5)
        ]
        newest_first = [b.pk for b in reversed(bookings)]

        self._as(self.booker)
        r = self.client.get("/api/bookings/", {"from": 0, "size": 2})
        self.assertEqual([b["id"] for b in r.data], newest_first[:2])

        # from=3,size=2 -> page 1
        r = self.client.get("/api/bookings/", {"from": 3, "size": 2})
        self.assertEqual([b["id"] for b in r.data], newest_first[2:4])

    def test_invalid_window(self):
        self._as(self.booker)
        self.assertEqual(self.client.get("/api/bookings/", {"from": -1}).status_code, 400)
        self.assertEqual(self.client.get("/api/bookings/", {"size": 0}).status_code, 400)
        self.assertEqual(self.client.get("/api/bookings/owner/", {"size": "x"}).status_code, 400)
