"""Outbound email notifications for trips and travel logs."""

from .mailers import send_trip_invite, send_log_member_notice

__all__ = [
    'send_trip_invite',
    'send_log_member_notice',
]
