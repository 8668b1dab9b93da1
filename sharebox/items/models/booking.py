from django.db import models
from django.conf import settings


class Booking(models.Model):
    """Time-bounded request to use someone else's item."""

    class Status(models.TextChoices):
        WAITING = 'WAITING', 'Waiting'
        APPROVED = 'APPROVED', 'Approved'
        REJECTED = 'REJECTED', 'Rejected'

    WAITING = Status.WAITING
    APPROVED = Status.APPROVED
    REJECTED = Status.REJECTED

    item = models.ForeignKey('Item', on_delete=models.CASCADE, related_name='bookings')
    booker = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='bookings')
    start = models.DateTimeField()
    end = models.DateTimeField()
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.WAITING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-start', '-id']
        indexes = [
            models.Index(fields=['booker', 'start'], name='booking_booker_start_idx'),
            models.Index(fields=['item', 'status', 'start'], name='booking_item_status_idx'),
        ]

    def __str__(self):
        return f"{self.booker} → {self.item} [{self.status}]"
