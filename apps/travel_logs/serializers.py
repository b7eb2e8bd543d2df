from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from .models import TravelLog, TravelLogMembership, TravelLogStatus


class TravelLogMemberSerializer(serializers.ModelSerializer):
    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = TravelLogMembership
        fields = ['user', 'note', 'added_at']
        read_only_fields = fields


class TravelLogSerializer(serializers.ModelSerializer):
    """Full travel log with social sets and members."""

    user = UserPublicSerializer(read_only=True)
    likes = serializers.PrimaryKeyRelatedField(many=True, read_only=True)
    bookmarks = serializers.PrimaryKeyRelatedField(many=True, read_only=True)
    members = TravelLogMemberSerializer(source='memberships', many=True, read_only=True)
    like_count = serializers.SerializerMethodField()
    bookmark_count = serializers.SerializerMethodField()

    class Meta:
        model = TravelLog
        fields = [
            'id',
            'title',
            'destination',
            'description',
            'status',
            'is_public',
            'latitude',
            'longitude',
            'date',
            'user',
            'group_trip',
            'likes',
            'bookmarks',
            'like_count',
            'bookmark_count',
            'members',
        ]
        read_only_fields = fields

    def get_like_count(self, obj):
        # Annotated on the public feed, counted from the prefetch elsewhere
        if hasattr(obj, 'like_count'):
            return obj.like_count
        return len(obj.likes.all())

    def get_bookmark_count(self, obj):
        if hasattr(obj, 'bookmark_count'):
            return obj.bookmark_count
        return len(obj.bookmarks.all())


class TravelLogCreateSerializer(serializers.Serializer):
    """Input for creating a travel log."""

    title = serializers.CharField(max_length=200)
    destination = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    status = serializers.ChoiceField(choices=TravelLogStatus.choices, default=TravelLogStatus.PRIVATE)
    is_public = serializers.BooleanField(required=False, default=False)
    latitude = serializers.FloatField(required=False, allow_null=True, min_value=-90, max_value=90, default=None)
    longitude = serializers.FloatField(required=False, allow_null=True, min_value=-180, max_value=180, default=None)
    date = serializers.DateTimeField(required=False, allow_null=True, default=None)
    group_trip = serializers.UUIDField(required=False, allow_null=True, default=None)

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title is required")
        return value

    def validate_destination(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Destination is required")
        return value


class TravelLogUpdateSerializer(TravelLogCreateSerializer):
    """Every field optional; only provided fields are applied."""

    title = serializers.CharField(max_length=200, required=False)
    destination = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=TravelLogStatus.choices, required=False)
    is_public = serializers.BooleanField(required=False)
    latitude = serializers.FloatField(required=False, allow_null=True, min_value=-90, max_value=90)
    longitude = serializers.FloatField(required=False, allow_null=True, min_value=-180, max_value=180)
    date = serializers.DateTimeField(required=False)
    # Empty string unlinks the trip
    group_trip = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_group_trip(self, value):
        if not value:
            return None
        return serializers.UUIDField().to_internal_value(value)


class AddLogMemberSerializer(serializers.Serializer):
    travel_log_id = serializers.UUIDField()
    member_email = serializers.EmailField()
    description = serializers.CharField(required=False, allow_blank=True, default='')


class TravelStatsSerializer(serializers.Serializer):
    """Dashboard numbers for the current user."""

    total_logs = serializers.IntegerField()
    by_status = serializers.DictField(child=serializers.IntegerField())
    destinations = serializers.IntegerField()
    likes_received = serializers.IntegerField()
    bookmarks_received = serializers.IntegerField()
    total_expenses = serializers.DecimalField(max_digits=14, decimal_places=2)
