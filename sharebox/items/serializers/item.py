from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from sharebox.items.models import Item
from sharebox.items.services import last_booking, next_booking
from sharebox.items.services.gateways import get_item_request
from .common import BookingShortSerializer
from .comment import CommentSerializer


class ItemSerializer(serializers.ModelSerializer):
    request_id = serializers.IntegerField(required=False, allow_null=True)
    last_booking = serializers.SerializerMethodField(read_only=True)
    next_booking = serializers.SerializerMethodField(read_only=True)
    comments = CommentSerializer(many=True, read_only=True)

    class Meta:
        model = Item
        fields = [
            "id", "name", "description", "available",
            "request_id",
            "last_booking", "next_booking",
            "comments",
        ]
        read_only_fields = ["id", "last_booking", "next_booking", "comments"]
        extra_kwargs = {
            "available": {"required": True},
        }

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name must not be blank.")
        return value

    def validate_description(self, value):
        if not value.strip():
            raise serializers.ValidationError("Description must not be blank.")
        return value

    def validate_request_id(self, value):
        if value is not None:
            get_item_request(value)
        return value

    def update(self, instance, validated_data):
        # The answered request is fixed at creation
        validated_data.pop("request_id", None)
        return super().update(instance, validated_data)

    # -------------------------
    # Owner-only booking facts
    # -------------------------
    def _viewer_is_owner(self, obj):
        user = getattr(self.context.get("request"), "user", None)
        return bool(user and obj.owner_id == getattr(user, "pk", None))

    @extend_schema_field(BookingShortSerializer(allow_null=True))
    def get_last_booking(self, obj):
        if not self._viewer_is_owner(obj):
            return None
        booking = last_booking(obj.pk, now=self.context.get("now"))
        return {"id": booking.pk, "booker_id": booking.booker_id} if booking else None

    @extend_schema_field(BookingShortSerializer(allow_null=True))
    def get_next_booking(self, obj):
        if not self._viewer_is_owner(obj):
            return None
        booking = next_booking(obj.pk, now=self.context.get("now"))
        return {"id": booking.pk, "booker_id": booking.booker_id} if booking else None


class ItemTinyForRequestSerializer(serializers.ModelSerializer):
    """Item as listed under the request it answers."""
    request_id = serializers.IntegerField(read_only=True)
    owner_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Item
        fields = ["id", "name", "description", "available", "request_id", "owner_id"]
        read_only_fields = fields
