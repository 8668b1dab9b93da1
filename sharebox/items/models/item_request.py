from django.db import models
from django.conf import settings


class ItemRequest(models.Model):
    """A user asking the community for an item nobody has listed yet."""
    description = models.TextField()
    requestor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='item_requests',
    )
    created = models.DateTimeField()

    class Meta:
        ordering = ['-created', '-id']

    def __str__(self):
        return f"Request {self.id} by {self.requestor_id}"
