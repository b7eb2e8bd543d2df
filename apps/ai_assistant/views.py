from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .client import AIProviderError
from .serializers import AssistantRequestSerializer, AssistantResponseSerializer, FORM_SERIALIZERS
from .services import generate_suggestion, InvalidAssistantTypeError


@extend_schema(
    request=AssistantRequestSerializer,
    responses={200: AssistantResponseSerializer},
    description=(
        "Ask the assistant for an itinerary, packing list or budget estimate. "
        "The body carries `type` plus the form fields of that type."
    )
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def ai_assistant(request):
    """Generate a travel suggestion for the given type."""
    request_serializer = AssistantRequestSerializer(data=request.data)
    request_serializer.is_valid(raise_exception=True)
    assistant_type = request_serializer.validated_data['type']

    form_serializer_class = FORM_SERIALIZERS.get(assistant_type)
    if form_serializer_class is None:
        return Response({'msg': 'Invalid AI assistant type'}, status=status.HTTP_400_BAD_REQUEST)

    form = form_serializer_class(data=request.data)
    form.is_valid(raise_exception=True)

    try:
        text = generate_suggestion(assistant_type, **form.validated_data)
    except InvalidAssistantTypeError as e:
        return Response({'msg': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except AIProviderError as e:
        return Response(
            {'msg': 'Error generating AI response', 'error': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response({'response': text})
