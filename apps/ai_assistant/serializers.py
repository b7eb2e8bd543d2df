from rest_framework import serializers


class AssistantRequestSerializer(serializers.Serializer):
    type = serializers.CharField()


class ItineraryRequestSerializer(serializers.Serializer):
    destination = serializers.CharField(max_length=200)
    interests = serializers.CharField(max_length=500, required=False, allow_blank=True, default='local highlights')
    days = serializers.IntegerField(min_value=1, max_value=30, required=False, default=2)


class PackingListRequestSerializer(serializers.Serializer):
    destination = serializers.CharField(max_length=200)
    duration = serializers.IntegerField(min_value=1, max_value=365)
    season = serializers.CharField(max_length=50)


class BudgetEstimateRequestSerializer(serializers.Serializer):
    destination = serializers.CharField(max_length=200)
    duration = serializers.IntegerField(min_value=1, max_value=365)


FORM_SERIALIZERS = {
    'itinerary': ItineraryRequestSerializer,
    'packing-list': PackingListRequestSerializer,
    'budget-estimate': BudgetEstimateRequestSerializer,
}


class AssistantResponseSerializer(serializers.Serializer):
    response = serializers.CharField()
