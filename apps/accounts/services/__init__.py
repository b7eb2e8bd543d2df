"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UsernameTakenError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, issue_tokens
from .profile_management import update_profile

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UsernameTakenError',
    # Services
    'register_user',
    'authenticate_user',
    'issue_tokens',
    'update_profile',
]
