from rest_framework import serializers


class UserTinySerializer(serializers.Serializer):
    """Public projection for nested user references."""
    id = serializers.IntegerField()
    name = serializers.CharField(allow_blank=True)


class ItemTinySerializer(serializers.Serializer):
    """Public projection for nested item references."""
    id = serializers.IntegerField()
    name = serializers.CharField()


class BookingShortSerializer(serializers.Serializer):
    """Last/next booking reference shown on an item card."""
    id = serializers.IntegerField()
    booker_id = serializers.IntegerField()
