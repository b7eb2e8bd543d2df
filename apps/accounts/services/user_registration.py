"""User registration service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model

from .exceptions import UserRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    username: str,
    password: str
) -> User:
    """
    Register a new user.

    Args:
        email: User's email address (login identifier)
        username: Public handle, unique across users
        password: User's password (will be hashed)

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If email or username is already taken
    """
    email = User.objects.normalize_email(email)

    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("User already exists")

    if User.objects.filter(username__iexact=username).exists():
        raise UserRegistrationError("Username is already taken")

    user = User.objects.create_user(
        email=email,
        password=password,
        username=username
    )
    logger.info("Registered user %s", user.id)
    return user
