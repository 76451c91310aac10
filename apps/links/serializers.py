from rest_framework import serializers
from .models import Link


class LinkSerializer(serializers.ModelSerializer):
    """Link details."""

    created_by = serializers.UUIDField(source='created_by_id', read_only=True)

    class Meta:
        model = Link
        fields = [
            'id',
            'title',
            'created_by',
            'created_at',
        ]
        read_only_fields = fields


class LinkWithLatestSerializer(LinkSerializer):
    """Link annotated with whether it is the newest link in the system."""

    is_latest = serializers.BooleanField(read_only=True)

    class Meta(LinkSerializer.Meta):
        fields = LinkSerializer.Meta.fields + ['is_latest']
        read_only_fields = fields


class LinkCreateSerializer(serializers.Serializer):
    """Input for link creation."""

    title = serializers.CharField(max_length=200)
    admin_id = serializers.UUIDField()


class LinkCreateResponseSerializer(serializers.Serializer):
    link = LinkSerializer()
    submission_path = serializers.CharField()
