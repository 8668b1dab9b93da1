from django.db import models
from django.conf import settings


class Comment(models.Model):
    """Feedback left on an item by someone who has finished a booking of it."""
    item = models.ForeignKey('Item', on_delete=models.CASCADE, related_name='comments')
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='comments')
    text = models.TextField()
    created = models.DateTimeField()

    class Meta:
        ordering = ['created', 'id']
        indexes = [
            models.Index(fields=['item', 'created'], name='comment_item_created_idx'),
        ]

    def __str__(self):
        return f"Comment {self.id} on item {self.item_id} by {self.author_id}"
