"""Reminder-related enumerations.

This module contains the enums for subscriber preferences, sweep modes
and the email types recorded in the notification log.
"""

from enum import Enum


class TimeSlot(str, Enum):
    """Time of day a subscriber prefers to receive reminders.

    Each slot maps to an hour band in the notification scheduler. ANY (and any
    unknown value) falls back to the broad daytime band.
    """

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    ANY = "any"


class PreferredLanguage(str, Enum):
    """Languages the reminder email is rendered in."""

    DE = "de"
    EN = "en"


class ReminderMode(str, Enum):
    """What happens to a subscription's schedule after a reminder is sent.

    RECURRING reschedules via the notification scheduler. ONE_SHOT clears the
    next notification and waits for the review to be completed.
    """

    RECURRING = "recurring"
    ONE_SHOT = "one_shot"


class EmailType(str, Enum):
    """Email types written to the notification log."""

    REVIEW_REMINDER = "review_reminder"
