"""Profile management service."""

from typing import Optional

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import UsernameTakenError

User = get_user_model()


@transaction.atomic
def update_profile(
    *,
    user: User,
    username: Optional[str] = None,
    bio: Optional[str] = None,
    travel_tags: Optional[list[str]] = None,
    profile_picture_url: Optional[str] = None
) -> User:
    """
    Update the editable profile fields of a user.

    Only fields that are not None are written.

    Raises:
        UsernameTakenError: If another user already has the username
    """
    update_fields = []

    if username is not None and username != user.username:
        clash = User.objects.filter(username__iexact=username).exclude(id=user.id)
        if clash.exists():
            raise UsernameTakenError("Username is already taken")
        user.username = username
        update_fields.append('username')

    if bio is not None:
        user.bio = bio
        update_fields.append('bio')

    if travel_tags is not None:
        user.travel_tags = travel_tags
        update_fields.append('travel_tags')

    if profile_picture_url is not None:
        user.profile_picture_url = profile_picture_url
        update_fields.append('profile_picture_url')

    if update_fields:
        user.save(update_fields=update_fields)

    return user
