from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .models import TravelLogStatus
from .serializers import (
    TravelLogSerializer,
    TravelLogCreateSerializer,
    TravelLogUpdateSerializer,
    AddLogMemberSerializer,
    TravelLogMemberSerializer,
    TravelStatsSerializer,
)

from apps.group_trips.services import GroupTripNotFoundError, NotTripMemberError
from apps.travel_logs.services import (
    create_travel_log,
    list_user_logs,
    list_public_logs,
    get_log_for_viewer,
    update_travel_log,
    delete_travel_log,
    like_log,
    unlike_log,
    bookmark_log,
    unbookmark_log,
    add_log_member,
    get_user_stats,
    # Exceptions
    TravelLogNotFoundError,
    NotLogOwnerError,
    LogAccessDeniedError,
    AlreadyLikedError,
    NotLikedError,
    AlreadyBookmarkedError,
    NotBookmarkedError,
    LogMemberNotFoundError,
    AlreadyLogMemberError,
)


class PublicFeedPagination(PageNumberPagination):
    """Pagination for the community feed."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class TravelLogViewSet(viewsets.GenericViewSet):
    """
    ViewSet for travel logs.

    list: The caller's own logs (optional ?status=)
    create: Create a log
    retrieve: A public log, or a private one the caller owns or shares
    update/partial_update: Edit a log (owner only)
    destroy: Delete a log (owner only)
    """

    serializer_class = TravelLogSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F-]+'

    def get_permissions(self):
        if self.action == 'public':
            return [AllowAny()]
        return super().get_permissions()

    @extend_schema(
        parameters=[
            OpenApiParameter('status', str, enum=TravelLogStatus.values, description='Filter by status'),
        ],
        responses={200: TravelLogSerializer(many=True)}
    )
    def list(self, request):
        """List the caller's travel logs, newest first."""
        log_status = request.query_params.get('status')
        if log_status and log_status not in TravelLogStatus.values:
            return Response({'msg': 'Invalid status'}, status=status.HTTP_400_BAD_REQUEST)

        logs = list_user_logs(user=request.user, status=log_status)
        return Response(TravelLogSerializer(logs, many=True).data)

    @extend_schema(request=TravelLogCreateSerializer, responses={201: TravelLogSerializer})
    def create(self, request):
        """Create a travel log owned by the caller."""
        serializer = TravelLogCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            log = create_travel_log(user=request.user, **serializer.validated_data)
        except GroupTripNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotTripMemberError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response(TravelLogSerializer(log).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        """Get a single travel log."""
        try:
            log = get_log_for_viewer(log_id=pk, user=request.user)
        except TravelLogNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except LogAccessDeniedError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response(TravelLogSerializer(log).data)

    @extend_schema(request=TravelLogUpdateSerializer, responses={200: TravelLogSerializer})
    def update(self, request, pk=None):
        """Update a travel log (owner only). Only provided fields change."""
        serializer = TravelLogUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            log = update_travel_log(log_id=pk, user=request.user, **serializer.validated_data)
        except (TravelLogNotFoundError, GroupTripNotFoundError) as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (NotLogOwnerError, NotTripMemberError) as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response(TravelLogSerializer(log).data)

    @extend_schema(request=TravelLogUpdateSerializer, responses={200: TravelLogSerializer})
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        """Delete a travel log (owner only)."""
        try:
            delete_travel_log(log_id=pk, user=request.user)
        except TravelLogNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotLogOwnerError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

        return Response({'msg': 'Travel log removed'})

    @extend_schema(responses={200: TravelLogSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def public(self, request):
        """Community feed of public logs (no login needed)."""
        paginator = PublicFeedPagination()
        page = paginator.paginate_queryset(list_public_logs(), request, view=self)
        serializer = TravelLogSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    @extend_schema(responses={200: TravelStatsSerializer})
    @action(detail=False, methods=['get'])
    def stats(self, request):
        """Dashboard statistics for the caller."""
        stats = get_user_stats(user=request.user)
        return Response(TravelStatsSerializer(stats).data)

    @extend_schema(request=AddLogMemberSerializer, responses={201: TravelLogMemberSerializer})
    @action(detail=False, methods=['post'], url_path='add-member', url_name='add-member')
    def add_member(self, request):
        """Share a log with another traveller by email (owner only)."""
        serializer = AddLogMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            membership = add_log_member(
                log_id=serializer.validated_data['travel_log_id'],
                owner=request.user,
                member_email=serializer.validated_data['member_email'],
                note=serializer.validated_data['description']
            )
        except (TravelLogNotFoundError, LogMemberNotFoundError) as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotLogOwnerError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
        except AlreadyLogMemberError as e:
            return Response({'msg': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(TravelLogMemberSerializer(membership).data, status=status.HTTP_201_CREATED)

    def _toggle(self, operation, pk, request, rejected):
        try:
            user_ids = operation(log_id=pk, user=request.user)
        except TravelLogNotFoundError as e:
            return Response({'msg': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except LogAccessDeniedError as e:
            return Response({'msg': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
        except rejected as e:
            return Response({'msg': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(user_ids)

    @extend_schema(request=None, responses={200: None})
    @action(detail=True, methods=['put'])
    def like(self, request, pk=None):
        """Like a log. Returns the ids of users who liked it."""
        return self._toggle(like_log, pk, request, AlreadyLikedError)

    @extend_schema(request=None, responses={200: None})
    @action(detail=True, methods=['put'])
    def unlike(self, request, pk=None):
        return self._toggle(unlike_log, pk, request, NotLikedError)

    @extend_schema(request=None, responses={200: None})
    @action(detail=True, methods=['put'])
    def bookmark(self, request, pk=None):
        """Bookmark a log. Returns the ids of users who bookmarked it."""
        return self._toggle(bookmark_log, pk, request, AlreadyBookmarkedError)

    @extend_schema(request=None, responses={200: None})
    @action(detail=True, methods=['put'])
    def unbookmark(self, request, pk=None):
        return self._toggle(unbookmark_log, pk, request, NotBookmarkedError)
