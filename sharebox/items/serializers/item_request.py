from rest_framework import serializers

from sharebox.items.models import ItemRequest
from .item import ItemTinyForRequestSerializer


class ItemRequestSerializer(serializers.ModelSerializer):
    items = ItemTinyForRequestSerializer(many=True, read_only=True)

    class Meta:
        model = ItemRequest
        fields = ("id", "description", "created", "items")
        read_only_fields = ("id", "created", "items")

    def validate_description(self, value):
        if not value.strip():
            raise serializers.ValidationError("Description must not be blank.")
        return value
