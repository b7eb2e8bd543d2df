from rest_framework import serializers

from .models import CalendarEvent


class CalendarEventSerializer(serializers.ModelSerializer):

    class Meta:
        model = CalendarEvent
        fields = ['id', 'title', 'start', 'end', 'description', 'location', 'user', 'date']
        read_only_fields = ['id', 'user', 'date']

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title is required")
        return value


class CalendarRangeSerializer(serializers.Serializer):
    """Query parameters for filtering the calendar."""

    # 'from' is a keyword, so the field is declared in __init__
    to = serializers.DateField(required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['from'] = serializers.DateField(required=False)
