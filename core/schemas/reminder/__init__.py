"""Reminder sweep schemas."""

from core.schemas.reminder.send_email_request import SendEmailRequest
from core.schemas.reminder.send_email_response import SendEmailResponse
from core.schemas.reminder.sweep_result import SubscriberResult, SweepResult

__all__ = [
    "SendEmailRequest",
    "SendEmailResponse",
    "SubscriberResult",
    "SweepResult",
]
