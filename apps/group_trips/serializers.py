from decimal import Decimal

from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from apps.expenses.models import Expense
from apps.travel_logs.models import TravelLog
from .models import GroupTrip, ItineraryItem, TripExpense, TripDocument


class ItineraryItemSerializer(serializers.ModelSerializer):
    """Itinerary entries, ordered by date."""

    class Meta:
        model = ItineraryItem
        fields = ['id', 'name', 'date', 'location', 'description', 'added_by']
        read_only_fields = fields


class TripExpenseSerializer(serializers.ModelSerializer):
    """Expenses paid for the group."""

    added_by = UserPublicSerializer(read_only=True)

    class Meta:
        model = TripExpense
        fields = ['id', 'description', 'amount', 'category', 'added_by', 'date']
        read_only_fields = fields


class TripDocumentSerializer(serializers.ModelSerializer):
    """Uploaded trip documents with their download URL."""

    url = serializers.SerializerMethodField()

    class Meta:
        model = TripDocument
        fields = ['id', 'name', 'url', 'file_type', 'uploaded_by', 'upload_date']
        read_only_fields = fields

    def get_url(self, obj):
        if not obj.file:
            return None
        request = self.context.get('request')
        url = obj.file.url
        return request.build_absolute_uri(url) if request else url


class SharedExpenseSerializer(serializers.ModelSerializer):
    """Personal expenses linked to the trip."""

    class Meta:
        model = Expense
        fields = ['id', 'description', 'amount', 'category', 'date', 'user']
        read_only_fields = fields


class SharedTravelLogSerializer(serializers.ModelSerializer):
    """Travel logs linked to the trip."""

    class Meta:
        model = TravelLog
        fields = ['id', 'title', 'destination', 'status', 'user', 'date']
        read_only_fields = fields


class GroupTripListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    creator = UserPublicSerializer(read_only=True)
    members = UserPublicSerializer(many=True, read_only=True)

    class Meta:
        model = GroupTrip
        fields = [
            'id',
            'name',
            'description',
            'creator',
            'members',
            'start_date',
            'end_date',
            'created_at',
        ]
        read_only_fields = fields


class GroupTripSerializer(GroupTripListSerializer):
    """Full trip with every embedded collection."""

    itinerary = ItineraryItemSerializer(many=True, read_only=True)
    expenses = TripExpenseSerializer(many=True, read_only=True)
    documents = TripDocumentSerializer(many=True, read_only=True)
    shared_expenses = SharedExpenseSerializer(many=True, read_only=True)
    shared_travel_logs = SharedTravelLogSerializer(many=True, read_only=True)

    class Meta(GroupTripListSerializer.Meta):
        fields = GroupTripListSerializer.Meta.fields + [
            'itinerary',
            'expenses',
            'documents',
            'shared_expenses',
            'shared_travel_logs',
        ]
        read_only_fields = fields


class GroupTripCreateSerializer(serializers.Serializer):
    """Input for creating a trip."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    start_date = serializers.DateField(required=False, allow_null=True, default=None)
    end_date = serializers.DateField(required=False, allow_null=True, default=None)
    members = serializers.ListField(
        child=serializers.CharField(max_length=255),
        required=False,
        default=list,
        help_text="Usernames or emails to invite"
    )

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required")
        return value


class GroupTripUpdateSerializer(serializers.Serializer):
    """Input for updating a trip; every field is optional."""

    name = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)


class AddMembersSerializer(serializers.Serializer):
    """Serializer for inviting members."""

    new_members = serializers.ListField(
        child=serializers.CharField(max_length=255),
        allow_empty=False,
        help_text="Usernames or emails to add"
    )


class ItineraryItemCreateSerializer(serializers.Serializer):
    """Input for a new itinerary entry."""

    name = serializers.CharField(max_length=200)
    date = serializers.DateField()
    location = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    description = serializers.CharField(required=False, allow_blank=True, default='')


class TripExpenseCreateSerializer(serializers.Serializer):
    """Input for a new group expense."""

    description = serializers.CharField(max_length=255)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.00'))
    category = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')


class DocumentUploadSerializer(serializers.Serializer):
    """Multipart input for document uploads."""

    document = serializers.FileField()
    name = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')


class MemberBalanceSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    username = serializers.CharField()
    share = serializers.DecimalField(max_digits=12, decimal_places=2)
    paid = serializers.DecimalField(max_digits=12, decimal_places=2)
    balance = serializers.DecimalField(max_digits=12, decimal_places=2)


class ExpenseSummarySerializer(serializers.Serializer):
    """How the group expenses split across members."""

    trip_id = serializers.UUIDField()
    total = serializers.DecimalField(max_digits=12, decimal_places=2)
    member_count = serializers.IntegerField()
    per_member = MemberBalanceSerializer(many=True)
