"""Enumerations for the core app."""

from core.enums.health_status import HealthStatus
from core.enums.notification import (
    EmailType,
    PreferredLanguage,
    ReminderMode,
    TimeSlot,
)

__all__ = [
    "EmailType",
    "HealthStatus",
    "PreferredLanguage",
    "ReminderMode",
    "TimeSlot",
]
