"""NotificationLog model for append-only send attempt records."""

from typing import ClassVar

from django.db import models
from django.utils import timezone

from core.enums import EmailType


class NotificationLog(models.Model):
    """One reminder send attempt, successful or not.

    Rows are written once and never updated. A successful attempt stores the
    subject and the transport's delivery id; a failed one stores the error.

    Attributes:
        subscriber: Recipient of the attempt.
        company: Company the reminder was about.
        email_type: Kind of email sent.
        email_subject: Subject line (successful sends).
        error_message: Failure description (failed sends).
        delivery_id: Identifier returned by the email transport.
        sent_at: When the attempt was made.
    """

    subscriber = models.ForeignKey(
        "core.Subscriber",
        on_delete=models.CASCADE,
        related_name="notification_logs",
        db_column="subscriber_id",
    )
    company = models.ForeignKey(
        "core.Company",
        on_delete=models.CASCADE,
        related_name="notification_logs",
        db_column="company_id",
    )
    email_type = models.CharField(
        max_length=50,
        default=EmailType.REVIEW_REMINDER.value,
    )
    email_subject = models.CharField(max_length=255, null=True, blank=True)
    error_message = models.TextField(null=True, blank=True)
    delivery_id = models.CharField(max_length=255, null=True, blank=True)
    sent_at = models.DateTimeField(default=timezone.now)

    class Meta:
        """Django model metadata."""

        db_table = "notifications_sent"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-sent_at"]

    def __str__(self) -> str:
        """Return string representation of log entry."""
        outcome = "failed" if self.error_message else "sent"
        return f"{self.email_type} {outcome} for {self.subscriber_id}"

    @property
    def succeeded(self) -> bool:
        return not self.error_message

    def save(self, *args, **kwargs):
        """Insert the entry; existing entries cannot be modified.

        Raises:
            ValueError: If the entry has already been stored.
        """
        if self.pk is not None and not self._state.adding:
            raise ValueError("Notification log entries are write-once")
        super().save(*args, **kwargs)
