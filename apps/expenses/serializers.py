from decimal import Decimal

from rest_framework import serializers

from .models import Expense


class ExpenseSerializer(serializers.ModelSerializer):
    """Expense with the title of its travel log, if any."""

    travel_log_title = serializers.CharField(source='travel_log.title', read_only=True, default=None)

    class Meta:
        model = Expense
        fields = [
            'id',
            'description',
            'amount',
            'category',
            'date',
            'user',
            'travel_log',
            'travel_log_title',
            'group_trip',
        ]
        read_only_fields = fields


def _optional_uuid(value):
    # Empty string clears the link
    if not value:
        return None
    return serializers.UUIDField().to_internal_value(value)


class ExpenseCreateSerializer(serializers.Serializer):
    """Input for creating an expense."""

    description = serializers.CharField(max_length=255)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.00'))
    category = serializers.CharField(max_length=100)
    date = serializers.DateTimeField(required=False, allow_null=True, default=None)
    travel_log = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    group_trip = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)

    def validate_description(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Description is required")
        return value

    def validate_travel_log(self, value):
        return _optional_uuid(value)

    def validate_group_trip(self, value):
        return _optional_uuid(value)


class ExpenseUpdateSerializer(ExpenseCreateSerializer):
    """Every field optional; only provided fields are applied."""

    description = serializers.CharField(max_length=255, required=False)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.00'), required=False)
    category = serializers.CharField(max_length=100, required=False)
    date = serializers.DateTimeField(required=False)
    travel_log = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    group_trip = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ExpenseSummarySerializer(serializers.Serializer):
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    by_category = serializers.DictField(child=serializers.DecimalField(max_digits=14, decimal_places=2))
    count = serializers.IntegerField()
