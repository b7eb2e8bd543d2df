"""
Likes and bookmarks on travel logs.

Each user appears in a set at most once. The log row is locked while
the set changes so two requests from the same user cannot both pass
the membership check.
"""

from uuid import UUID

from django.db import transaction

from apps.accounts.models import User

from .exceptions import (
    AlreadyLikedError,
    NotLikedError,
    AlreadyBookmarkedError,
    NotBookmarkedError,
    LogAccessDeniedError,
)
from .log_management import get_log


def _get_visible_log(log_id: UUID, user: User):
    log = get_log(log_id, for_update=True)
    if not log.can_view(user):
        raise LogAccessDeniedError("User not authorized")
    return log


def _user_ids(relation) -> list:
    return [str(user_id) for user_id in relation.values_list('id', flat=True)]


@transaction.atomic
def like_log(*, log_id: UUID, user: User) -> list:
    """
    Like a log. Returns the ids of everyone who liked it.

    Raises:
        TravelLogNotFoundError: If log doesn't exist
        LogAccessDeniedError: If the log is private and user is outside it
        AlreadyLikedError: If user already liked the log
    """
    log = _get_visible_log(log_id, user)
    if log.likes.filter(id=user.id).exists():
        raise AlreadyLikedError("Travel log already liked")
    log.likes.add(user)
    return _user_ids(log.likes)


@transaction.atomic
def unlike_log(*, log_id: UUID, user: User) -> list:
    """
    Remove a like.

    Raises:
        TravelLogNotFoundError: If log doesn't exist
        LogAccessDeniedError: If the log is private and user is outside it
        NotLikedError: If user has not liked the log
    """
    log = _get_visible_log(log_id, user)
    if not log.likes.filter(id=user.id).exists():
        raise NotLikedError("Travel log has not yet been liked")
    log.likes.remove(user)
    return _user_ids(log.likes)


@transaction.atomic
def bookmark_log(*, log_id: UUID, user: User) -> list:
    """
    Bookmark a log. Returns the ids of everyone who bookmarked it.

    Raises:
        TravelLogNotFoundError: If log doesn't exist
        LogAccessDeniedError: If the log is private and user is outside it
        AlreadyBookmarkedError: If user already bookmarked the log
    """
    log = _get_visible_log(log_id, user)
    if log.bookmarks.filter(id=user.id).exists():
        raise AlreadyBookmarkedError("Travel log already bookmarked")
    log.bookmarks.add(user)
    return _user_ids(log.bookmarks)


@transaction.atomic
def unbookmark_log(*, log_id: UUID, user: User) -> list:
    """
    Remove a bookmark.

    Raises:
        TravelLogNotFoundError: If log doesn't exist
        LogAccessDeniedError: If the log is private and user is outside it
        NotBookmarkedError: If user has not bookmarked the log
    """
    log = _get_visible_log(log_id, user)
    if not log.bookmarks.filter(id=user.id).exists():
        raise NotBookmarkedError("Travel log has not yet been bookmarked")
    log.bookmarks.remove(user)
    return _user_ids(log.bookmarks)
