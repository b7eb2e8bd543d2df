from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import CalendarEventSerializer, CalendarRangeSerializer
from .services import (
    list_events,
    create_event,
    update_event,
    delete_event,
    EventNotFoundError,
    NotEventOwnerError,
    InvalidEventRangeError,
)


class CalendarEventViewSet(viewsets.GenericViewSet):
    """
    ViewSet for calendar events.

    list: The caller's events by start time (?from=, ?to=)
    create: Add an event
    update/partial_update/destroy: Owner only
    """

    serializer_class = CalendarEventSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F-]+'

    @extend_schema(
        parameters=[
            OpenApiParameter('from', str, description='Only events ending on or after this date (YYYY-MM-DD)'),
            OpenApiParameter('to', str, description='Only events starting on or before this date (YYYY-MM-DD)'),
        ],
        responses={200: CalendarEventSerializer(many=True)}
    )
    def list(self, request):
        """List the caller's calendar events."""
        params = CalendarRangeSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        events = list_events(
            user=request.user,
            date_from=params.validated_data.get('from'),
            date_to=params.validated_data.get('to')
        )
        return Response(CalendarEventSerializer(events, many=True).data)

    def create(self, request):
        """Add an event to the caller's calendar."""
        serializer = CalendarEventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            event = create_event(user=request.user, **serializer.validated_data)
        except InvalidEventRangeError as e:
            return Response({'msg': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CalendarEventSerializer(event).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        """Update an event (owner only). Only provided fields change."""
        serializer = CalendarEventSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            event = update_event(event_id=pk, user=request.user, **serializer.validated_data)
        except EventNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotEventOwnerError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
        except InvalidEventRangeError as e:
            return Response({'msg': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CalendarEventSerializer(event).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        try:
            delete_event(event_id=pk, user=request.user)
        except EventNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotEventOwnerError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response({'msg': 'Event removed'})
