"""
Sharing a travel log with other travellers.
"""

import logging
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.notifications import send_log_member_notice
from apps.travel_logs.models import TravelLogMembership

from .exceptions import LogMemberNotFoundError, AlreadyLogMemberError
from .log_management import _get_owned_log

logger = logging.getLogger(__name__)


@transaction.atomic
def add_log_member(
    *,
    log_id: UUID,
    owner: User,
    member_email: str,
    note: str = ''
) -> TravelLogMembership:
    """
    Add a user to a log by email (owner only) and notify them.

    Raises:
        TravelLogNotFoundError: If log doesn't exist
        NotLogOwnerError: If owner does not own the log
        LogMemberNotFoundError: If no active user has that email
        AlreadyLogMemberError: If the user is already a member
    """
    log = _get_owned_log(log_id, owner)

    try:
        member = User.objects.get(email__iexact=member_email, is_active=True)
    except User.DoesNotExist:
        raise LogMemberNotFoundError("User not found")

    if log.memberships.filter(user=member).exists():
        raise AlreadyLogMemberError("User is already a member of this travel log")

    membership = TravelLogMembership.objects.create(travel_log=log, user=member, note=note)
    send_log_member_notice(log, member, added_by=owner, note=note)

    logger.info("User %s added to travel log %s", member.id, log_id)
    return membership
