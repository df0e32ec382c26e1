"""Repository for subscription and reminder log queries."""

from datetime import datetime
from uuid import UUID

from django.db import DatabaseError
from django.db.models import Q, QuerySet

import structlog

from core.enums import EmailType
from core.exceptions import (
    CompanyNotFoundError,
    StoreFailureError,
    SubscriptionNotFoundError,
)
from core.models import Company, NotificationLog, SubscriberCompany

logger = structlog.get_logger(__name__)


def _due_filter(now: datetime) -> Q:
    return Q(
        next_notification_at__lte=now,
        review_completed_at__isnull=True,
        subscriber__is_active=True,
    )


class SubscriptionRepository:
    """Repository for encapsulating subscription database queries.

    Schedule updates are conditional UPDATE statements: they only touch a row
    that is still open and still carries the schedule the caller read, so two
    overlapping sweeps cannot both move the same subscription forward.
    """

    @staticmethod
    def get_due_subscriptions(now: datetime) -> list[SubscriberCompany]:
        """Load every subscription due at or before now.

        Due means next_notification_at <= now, review not completed and the
        subscriber active. Subscriber and company are fetched in the same query.

        Args:
            now: Reference instant of the sweep

        Returns:
            Due subscriptions, oldest schedule first

        Raises:
            StoreFailureError: If the query fails
        """
        try:
            return list(
                SubscriberCompany.objects.filter(_due_filter(now))
                .select_related("subscriber", "company")
                .order_by("next_notification_at")
            )
        except DatabaseError as e:
            logger.error("due_subscriptions_query_failed", error=str(e))
            raise StoreFailureError(f"Could not load due subscriptions: {e}") from e

    @staticmethod
    def is_still_due(subscription_id: UUID, now: datetime) -> bool:
        """Re-check the due condition for a single subscription."""
        return SubscriberCompany.objects.filter(
            _due_filter(now), pk=subscription_id
        ).exists()

    @staticmethod
    def update_schedule(
        subscription_id: UUID,
        notified_at: datetime,
        next_notification_at: datetime | None,
        expected_next_notification_at: datetime | None,
    ) -> bool:
        """Record a sent reminder and store the next schedule.

        Args:
            subscription_id: Subscription to update
            notified_at: Value for last_notified_at
            next_notification_at: New schedule, or None to stop reminders
            expected_next_notification_at: Schedule the caller read before
                sending; the update is skipped if the row no longer has it

        Returns:
            True if the row was updated, False if it was completed, removed or
            rescheduled by someone else in the meantime
        """
        updated = SubscriberCompany.objects.filter(
            pk=subscription_id,
            review_completed_at__isnull=True,
            next_notification_at=expected_next_notification_at,
        ).update(
            last_notified_at=notified_at,
            next_notification_at=next_notification_at,
        )
        return updated == 1

    @staticmethod
    def touch_last_notified(subscription_id: UUID, notified_at: datetime) -> bool:
        """Set last_notified_at only, leaving the schedule alone."""
        updated = SubscriberCompany.objects.filter(
            pk=subscription_id,
            review_completed_at__isnull=True,
        ).update(last_notified_at=notified_at)
        return updated == 1

    @staticmethod
    def append_log(
        subscriber_id: UUID,
        company_id: UUID,
        sent_at: datetime,
        subject: str | None = None,
        delivery_id: str | None = None,
        error_message: str | None = None,
    ) -> NotificationLog:
        """Append one send attempt to the notification log.

        Args:
            subscriber_id: Recipient subscriber
            company_id: Company the reminder was about
            sent_at: When the attempt was made
            subject: Subject line of a successful send
            delivery_id: Transport id of a successful send
            error_message: Failure description of a failed send

        Returns:
            The stored log entry
        """
        return NotificationLog.objects.create(
            subscriber_id=subscriber_id,
            company_id=company_id,
            email_type=EmailType.REVIEW_REMINDER.value,
            email_subject=subject,
            delivery_id=delivery_id,
            error_message=error_message,
            sent_at=sent_at,
        )

    @staticmethod
    def get_subscription(subscriber_id: UUID, company_id: UUID) -> SubscriberCompany:
        """Fetch one subscription with subscriber and company.

        Raises:
            SubscriptionNotFoundError: If the subscriber does not follow the company
        """
        try:
            return SubscriberCompany.objects.select_related(
                "subscriber", "company"
            ).get(subscriber_id=subscriber_id, company_id=company_id)
        except SubscriberCompany.DoesNotExist as e:
            raise SubscriptionNotFoundError(str(subscriber_id), str(company_id)) from e

    @staticmethod
    def get_open_subscriptions(subscriber_id: UUID) -> QuerySet[SubscriberCompany]:
        """Subscriptions of a subscriber whose review is not completed yet."""
        return SubscriberCompany.objects.filter(
            subscriber_id=subscriber_id,
            review_completed_at__isnull=True,
        ).select_related("company")

    @staticmethod
    def get_company_by_slug(slug: str) -> Company:
        """Fetch a company by its slug.

        Raises:
            CompanyNotFoundError: If no company has the slug
        """
        try:
            return Company.objects.get(slug=slug)
        except Company.DoesNotExist as e:
            raise CompanyNotFoundError(slug) from e

    @staticmethod
    def get_first_company() -> Company | None:
        """Return the alphabetically first company, used for test emails."""
        return Company.objects.order_by("name").first()
