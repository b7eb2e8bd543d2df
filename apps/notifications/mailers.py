"""
Email notifications.

Messages go out through Django's mail framework (SMTP in production, the
console backend by default). Delivery is best effort: a failing relay is
logged and never fails the request that triggered it.
"""

import logging
from smtplib import SMTPException

from django.conf import settings
from django.core.mail import BadHeaderError, send_mail
from django.db import transaction

logger = logging.getLogger(__name__)


def _one_line(text):
    # Mail headers cannot carry newlines
    return " ".join(str(text).split())


def _deliver(subject, body, recipients):
    if not recipients:
        return 0
    try:
        return send_mail(
            subject,
            body,
            settings.DEFAULT_FROM_EMAIL,
            recipients,
        )
    except (SMTPException, OSError, BadHeaderError) as e:
        logger.warning("Could not send '%s' to %d recipient(s): %s", subject, len(recipients), e)
        return 0


def send_trip_invite(trip, users, invited_by):
    """Tell newly added members they were invited to a group trip."""
    recipients = [user.email for user in users if user.email and user.id != invited_by.id]
    subject = f"You've been added to the trip '{_one_line(trip.name)}'"
    body = (
        f"Hi,\n\n"
        f"{invited_by.username} added you to the group trip '{trip.name}'.\n"
    )
    if trip.start_date:
        body += f"The trip starts on {trip.start_date.isoformat()}.\n"
    body += "\nLog in to see the itinerary, shared expenses and documents.\n"

    transaction.on_commit(lambda: _deliver(subject, body, recipients))


def send_log_member_notice(log, user, added_by, note=''):
    """Tell a user they were added to someone's travel log."""
    subject = f"{_one_line(added_by.username)} shared the travel log '{_one_line(log.title)}' with you"
    body = (
        f"Hi {user.username},\n\n"
        f"{added_by.username} added you as a member of '{log.title}' ({log.destination}).\n"
    )
    if note:
        body += f"\nNote: {note}\n"

    transaction.on_commit(lambda: _deliver(subject, body, [user.email]))
