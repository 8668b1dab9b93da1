from rest_framework import serializers

from sharebox.items.models import Comment


class CommentSerializer(serializers.ModelSerializer):
    author_name = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = Comment
        fields = ("id", "text", "author_name", "created")
        read_only_fields = ("id", "author_name", "created")

    def get_author_name(self, obj) -> str:
        author = obj.author
        return author.name or author.email

    def validate_text(self, value):
        if not value.strip():
            raise serializers.ValidationError("Comment text must not be blank.")
        return value
