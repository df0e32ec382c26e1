"""SubscriberCompany model for per-company reminder scheduling.

This module defines the join between a subscriber and a company. It carries
the scheduling state the reminder sweep reads and writes.
"""

import uuid
from typing import ClassVar

from django.db import models
from django.utils import timezone


class SubscriberCompany(models.Model):
    """Subscription of one subscriber to one company's review reminders.

    A subscription is due when next_notification_at has passed and
    review_completed_at is unset. Completing the review closes it for good:
    next_notification_at is cleared and never scheduled again.

    Attributes:
        subscriber: The subscriber receiving reminders.
        company: The company the reminders are about.
        subscribed_at: When the subscription was created.
        last_notified_at: When the last reminder was sent.
        next_notification_at: When the next reminder is due (NULL if none).
        review_completed_at: When the subscriber completed the review.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    subscriber = models.ForeignKey(
        "core.Subscriber",
        on_delete=models.CASCADE,
        related_name="subscriptions",
        db_column="subscriber_id",
    )
    company = models.ForeignKey(
        "core.Company",
        on_delete=models.CASCADE,
        related_name="subscriptions",
        db_column="company_id",
    )
    subscribed_at = models.DateTimeField(default=timezone.now)
    last_notified_at = models.DateTimeField(null=True, blank=True)
    next_notification_at = models.DateTimeField(null=True, blank=True)
    review_completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        """Django model metadata."""

        db_table = "subscriber_companies"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["next_notification_at"]
        unique_together: ClassVar[list[list[str]]] = [["subscriber", "company"]]
        indexes: ClassVar[list] = [
            models.Index(fields=["next_notification_at", "review_completed_at"]),
        ]

    def __str__(self) -> str:
        """Return string representation of subscription."""
        return f"{self.subscriber_id} -> {self.company_id}"

    def __repr__(self) -> str:
        """Return detailed representation of subscription."""
        return (
            f"<SubscriberCompany(id={self.id}, "
            f"subscriber={self.subscriber_id}, "
            f"company={self.company_id}, "
            f"next={self.next_notification_at})>"
        )

    @property
    def is_completed(self) -> bool:
        return self.review_completed_at is not None

    def mark_review_completed(self) -> bool:
        """Close the subscription.

        Returns:
            False if it was already completed, True otherwise.
        """
        if self.is_completed:
            return False
        self.review_completed_at = timezone.now()
        self.next_notification_at = None
        self.save(update_fields=["review_completed_at", "next_notification_at"])
        return True
