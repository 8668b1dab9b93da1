from django.db import models
from django.conf import settings


class Item(models.Model):
    """Thing a user offers for others to book."""
    name = models.CharField(max_length=255)
    description = models.TextField()
    available = models.BooleanField(default=True)

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='items',
    )
    # Set when the item was listed in answer to someone's request
    request = models.ForeignKey(
        'ItemRequest',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='items',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        indexes = [
            models.Index(fields=['owner', 'id'], name='item_owner_idx'),
            models.Index(fields=['available'], name='item_available_idx'),
        ]

    def __str__(self):
        return self.name
