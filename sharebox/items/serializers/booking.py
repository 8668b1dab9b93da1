from django.utils import timezone
from rest_framework import serializers

from sharebox.items.models import Booking
from sharebox.items.serializers.common import UserTinySerializer, ItemTinySerializer


class BookingInputSerializer(serializers.Serializer):
    """Create payload: which item and for what time window."""
    item_id = serializers.IntegerField()
    start = serializers.DateTimeField(
        error_messages={"invalid": "Invalid datetime. Expected ISO 8601, e.g. 2030-01-01T10:00:00."}
    )
    end = serializers.DateTimeField(
        error_messages={"invalid": "Invalid datetime. Expected ISO 8601, e.g. 2030-01-01T10:00:00."}
    )

    def validate(self, attrs):
        """
        - end must be strictly after start -> key 'end'
        - start must not be in the past    -> key 'start'
        """
        errors = {}
        start, end = attrs["start"], attrs["end"]

        if end <= start:
            errors.setdefault("end", []).append("must be greater than start")
        if start < timezone.now():
            errors.setdefault("start", []).append("Start must not be in the past.")

        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class BookingSerializer(serializers.ModelSerializer):
    item = ItemTinySerializer(read_only=True)
    booker = UserTinySerializer(read_only=True)

    class Meta:
        model = Booking
        fields = ("id", "start", "end", "status", "item", "booker")
        read_only_fields = fields


class StatusDecisionSerializer(serializers.Serializer):
    """`?approved=true|false` on the status PATCH. Bind a plain dict, not a QueryDict (which reads a missing boolean as False)."""
    approved = serializers.BooleanField()
