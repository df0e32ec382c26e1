"""Subscriber model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import PreferredLanguage, TimeSlot


class Subscriber(models.Model):
    """Customer who signed up for review reminders.

    A subscriber can follow several companies through SubscriberCompany rows.
    Deactivation stops all scheduling but keeps the history.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(max_length=255, unique=True)
    name = models.CharField(max_length=255, null=True, blank=True)
    preferred_language = models.CharField(
        max_length=5,
        choices=[(lang.value, lang.value) for lang in PreferredLanguage],
        default=PreferredLanguage.DE.value,
    )
    notification_interval_days = models.FloatField(null=True, blank=True)
    preferred_time_slot = models.CharField(
        max_length=20,
        choices=[(slot.value, slot.value) for slot in TimeSlot],
        null=True,
        blank=True,
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "subscribers"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of subscriber."""
        return self.email

    def __repr__(self) -> str:
        """Return detailed representation of subscriber."""
        return f"<Subscriber(id={self.id}, email='{self.email}')>"

    def save(self, *args, **kwargs):
        """Store the email normalised so uniqueness is case-insensitive."""
        self.email = normalize_email(self.email)
        super().save(*args, **kwargs)


def normalize_email(email: str) -> str:
    """Return the canonical form used for subscriber lookups."""
    return (email or "").strip().lower()
