from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    GroupTripSerializer,
    GroupTripListSerializer,
    GroupTripCreateSerializer,
    GroupTripUpdateSerializer,
    AddMembersSerializer,
    ItineraryItemSerializer,
    ItineraryItemCreateSerializer,
    TripExpenseSerializer,
    TripExpenseCreateSerializer,
    TripDocumentSerializer,
    DocumentUploadSerializer,
    ExpenseSummarySerializer,
)

from apps.group_trips.services import (
    create_group_trip,
    list_user_trips,
    get_trip_for_member,
    update_group_trip,
    delete_group_trip,
    add_members,
    remove_member,
    add_itinerary_item,
    add_trip_expense,
    upload_document,
    get_expense_summary,
    # Exceptions
    GroupTripNotFoundError,
    MemberNotFoundError,
    NotTripMemberError,
    NotTripCreatorError,
    CannotRemoveCreatorError,
    InvalidTripDatesError,
    DocumentTooLargeError,
)

NOT_FOUND_ERRORS = (GroupTripNotFoundError, MemberNotFoundError)


class GroupTripViewSet(viewsets.GenericViewSet):
    """
    ViewSet for group trips.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Trips the user is a member of
    create: Create a trip and invite members
    retrieve: Full trip (members only)
    update/partial_update: Edit trip details (creator only)
    destroy: Delete the trip (creator only)
    """

    serializer_class = GroupTripSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F-]+'

    def get_queryset(self):
        return list_user_trips(user=self.request.user)

    def _detail(self, pk, request, status_code=status.HTTP_200_OK):
        trip = get_trip_for_member(trip_id=pk, user=request.user)
        serializer = GroupTripSerializer(trip, context={'request': request})
        return Response(serializer.data, status=status_code)

    @extend_schema(responses={200: GroupTripListSerializer(many=True)})
    def list(self, request):
        """List trips where the user is a member."""
        serializer = GroupTripListSerializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    @extend_schema(request=GroupTripCreateSerializer, responses={201: GroupTripSerializer})
    def create(self, request):
        """Create a new group trip."""
        serializer = GroupTripCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            trip = create_group_trip(creator=request.user, **serializer.validated_data)
        except MemberNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidTripDatesError as e:
            return Response({'msg': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._detail(trip.id, request, status_code=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        """Get a single trip with itinerary, expenses and documents."""
        try:
            return self._detail(pk, request)
        except GroupTripNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotTripMemberError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

    @extend_schema(request=GroupTripUpdateSerializer, responses={200: GroupTripSerializer})
    def update(self, request, pk=None, partial=False):
        """Update trip details (creator only)."""
        serializer = GroupTripUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            update_group_trip(trip_id=pk, user=request.user, **serializer.validated_data)
        except GroupTripNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotTripCreatorError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
        except InvalidTripDatesError as e:
            return Response({'msg': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._detail(pk, request)

    @extend_schema(request=GroupTripUpdateSerializer, responses={200: GroupTripSerializer})
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):
        """Delete a trip (creator only)."""
        try:
            delete_group_trip(trip_id=pk, user=request.user)
        except GroupTripNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotTripCreatorError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response({'msg': 'Group trip removed'})

    @extend_schema(request=AddMembersSerializer, responses={200: GroupTripSerializer})
    @action(detail=True, methods=['put'], url_path='members', url_name='members')
    def add_members(self, request, pk=None):
        """Add members by username or email (members only)."""
        serializer = AddMembersSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            add_members(
                trip_id=pk,
                identifiers=serializer.validated_data['new_members'],
                added_by=request.user
            )
        except NOT_FOUND_ERRORS as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotTripMemberError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return self._detail(pk, request)

    @extend_schema(request=None, responses={200: GroupTripSerializer})
    @action(
        detail=True,
        methods=['delete'],
        url_path=r'members/(?P<member_id>[0-9a-fA-F-]+)',
        url_name='remove-member'
    )
    def remove_member(self, request, pk=None, member_id=None):
        """Remove a member (creator) or leave the trip (member)."""
        try:
            trip = remove_member(trip_id=pk, member_id=member_id, removed_by=request.user)
        except (GroupTripNotFoundError, MemberNotFoundError) as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotTripCreatorError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
        except CannotRemoveCreatorError as e:
            return Response({'msg': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        if not trip.has_member(request.user):
            return Response({'msg': 'You left the group trip'})
        return self._detail(pk, request)

    @extend_schema(request=ItineraryItemCreateSerializer, responses={201: ItineraryItemSerializer})
    @action(detail=True, methods=['post'])
    def itinerary(self, request, pk=None):
        """Add an itinerary item (members only)."""
        serializer = ItineraryItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            item = add_itinerary_item(trip_id=pk, user=request.user, **serializer.validated_data)
        except GroupTripNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotTripMemberError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response(ItineraryItemSerializer(item).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=TripExpenseCreateSerializer, responses={201: TripExpenseSerializer})
    @action(detail=True, methods=['post'])
    def expenses(self, request, pk=None):
        """Add a group expense paid by the caller (members only)."""
        serializer = TripExpenseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            expense = add_trip_expense(trip_id=pk, user=request.user, **serializer.validated_data)
        except GroupTripNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotTripMemberError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response(TripExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=DocumentUploadSerializer, responses={201: TripDocumentSerializer})
    @action(detail=True, methods=['post'], parser_classes=[MultiPartParser, FormParser])
    def documents(self, request, pk=None):
        """Upload a trip document (members only)."""
        serializer = DocumentUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            document = upload_document(
                trip_id=pk,
                user=request.user,
                name=serializer.validated_data['name'],
                uploaded_file=serializer.validated_data['document']
            )
        except GroupTripNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotTripMemberError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
        except DocumentTooLargeError as e:
            return Response({'msg': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        output = TripDocumentSerializer(document, context={'request': request})
        return Response(output.data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ExpenseSummarySerializer})
    @action(detail=True, methods=['get'])
    def expense_summary(self, request, pk=None):
        """Even split of group expenses with per-member balances."""
        try:
            summary = get_expense_summary(trip_id=pk, user=request.user)
        except GroupTripNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotTripMemberError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response(ExpenseSummarySerializer(summary).data)
