"""Due-reminder sweep.

One sweep loads every due subscription and handles each one in order:

1. re-check that it is still due (otherwise skip it without sending)
2. render and send the reminder
3. append a notification log entry for the attempt
4. store the new schedule with a conditional update

A failed send is logged and counted and the sweep moves on. Store errors on a
single subscription are recorded on its result in the same way. Only a failure
to load the due set aborts the sweep.
"""

from datetime import datetime

from django.db import DatabaseError
from django.utils import timezone

import structlog

from core.enums import ReminderMode
from core.exceptions import (
    CompanyNotFoundError,
    ReviewServiceError,
    SubscriptionClosedError,
)
from core.models import SubscriberCompany
from core.repositories.subscription_repository import SubscriptionRepository
from core.schemas.reminder import SendEmailResponse, SubscriberResult, SweepResult
from core.services.email_service import EmailService, email_service
from core.services.notification_scheduler import NotificationScheduler
from core.services.reminder_email import default_review_url, render_review_reminder

logger = structlog.get_logger(__name__)

TEST_RECIPIENT_NAME = "Test User"


class ReminderSweepService:
    """Send review reminders for due subscriptions."""

    def __init__(
        self,
        email_sender: EmailService | None = None,
        scheduler: NotificationScheduler | None = None,
        repository: type[SubscriptionRepository] = SubscriptionRepository,
    ) -> None:
        """Initialize the sweep service.

        Args:
            email_sender: Transport; the module-level EmailService by default.
            scheduler: Next-schedule computation; built from settings lazily.
            repository: Data access for subscriptions and logs.
        """
        self.email_sender = email_sender or email_service
        self._scheduler = scheduler
        self.repository = repository

    @property
    def scheduler(self) -> NotificationScheduler:
        if self._scheduler is None:
            self._scheduler = NotificationScheduler()
        return self._scheduler

    def run(
        self,
        mode: ReminderMode = ReminderMode.RECURRING,
        now: datetime | None = None,
    ) -> SweepResult:
        """Run one sweep.

        Args:
            mode: RECURRING reschedules each sent subscription, ONE_SHOT clears
                its schedule.
            now: Reference instant; defaults to the current time.

        Returns:
            Counts and per-subscription outcomes.

        Raises:
            StoreFailureError: If the due subscriptions cannot be loaded.
        """
        mode = ReminderMode(mode)
        now = now or timezone.now()

        due = self.repository.get_due_subscriptions(now)
        logger.info("reminder_sweep_started", mode=mode.value, due_count=len(due))

        result = SweepResult(mode=mode, timestamp=now)
        for subscription in due:
            outcome = self._process(subscription, mode, now)
            result.results.append(outcome)
            if outcome.skipped:
                result.skipped_count += 1
            elif outcome.success:
                result.sent_count += 1
            else:
                result.failed_count += 1

        logger.info(
            "reminder_sweep_finished",
            mode=mode.value,
            sent=result.sent_count,
            failed=result.failed_count,
            skipped=result.skipped_count,
        )
        return result

    def send_test_email(self, email: str) -> SendEmailResponse:
        """Send a sample reminder for the first company.

        Nothing is logged or rescheduled.

        Raises:
            ValueError: If the address is invalid.
            CompanyNotFoundError: If there is no company to use.
            TransportFailureError: If the transport rejects the message.
        """
        company = self.repository.get_first_company()
        if company is None:
            raise CompanyNotFoundError("for test email")

        rendered = render_review_reminder(
            company_name=company.name,
            review_url=default_review_url(company.slug),
            subscriber_name=TEST_RECIPIENT_NAME,
        )
        delivery_id = self.email_sender.send_email(
            to_email=email,
            subject=rendered.subject,
            html_content=rendered.html,
        )
        logger.info("test_reminder_sent", to_email=email, company_id=str(company.id))
        return SendEmailResponse(
            success=True,
            message=f"Test email sent to {email}",
            email_id=delivery_id,
        )

    def send_to_subscriber(
        self,
        subscriber_id,
        company_id,
        now: datetime | None = None,
    ) -> SendEmailResponse:
        """Send one reminder right away, outside the schedule.

        The attempt is logged and last_notified_at is updated; the next
        scheduled reminder is left as it is.

        Raises:
            SubscriptionNotFoundError: If the subscription does not exist.
            SubscriptionClosedError: If the review is completed or the
                subscriber is inactive.
            TransportFailureError: If the transport rejects the message.
        """
        now = now or timezone.now()
        subscription = self.repository.get_subscription(subscriber_id, company_id)
        if subscription.is_completed:
            raise SubscriptionClosedError("Review already completed for this company")
        if not subscription.subscriber.is_active:
            raise SubscriptionClosedError("Subscriber is inactive")

        subscriber = subscription.subscriber
        rendered = self._render(subscription)
        try:
            delivery_id = self.email_sender.send_email(
                to_email=subscriber.email,
                subject=rendered.subject,
                html_content=rendered.html,
            )
        except (ReviewServiceError, ValueError) as e:
            self.repository.append_log(
                subscriber_id=subscription.subscriber_id,
                company_id=subscription.company_id,
                sent_at=now,
                error_message=str(e),
            )
            raise

        self.repository.append_log(
            subscriber_id=subscription.subscriber_id,
            company_id=subscription.company_id,
            sent_at=now,
            subject=rendered.subject,
            delivery_id=delivery_id,
        )
        self.repository.touch_last_notified(subscription.id, now)
        logger.info(
            "manual_reminder_sent",
            subscription_id=str(subscription.id),
            delivery_id=delivery_id,
        )
        return SendEmailResponse(
            success=True,
            message=f"Email sent to {subscriber.email}",
            email_id=delivery_id,
        )

    def _render(self, subscription: SubscriberCompany):
        subscriber = subscription.subscriber
        company = subscription.company
        return render_review_reminder(
            company_name=company.name,
            review_url=default_review_url(company.slug, subscription.subscriber_id),
            subscriber_name=subscriber.name,
            language=subscriber.preferred_language,
        )

    def _process(
        self,
        subscription: SubscriberCompany,
        mode: ReminderMode,
        now: datetime,
    ) -> SubscriberResult:
        subscriber = subscription.subscriber
        log = logger.bind(
            subscription_id=str(subscription.id),
            subscriber_id=str(subscription.subscriber_id),
            company_id=str(subscription.company_id),
        )
        outcome = SubscriberResult(
            subscription_id=subscription.id,
            subscriber_id=subscription.subscriber_id,
            company_id=subscription.company_id,
            email=subscriber.email,
            success=False,
        )

        try:
            still_due = self.repository.is_still_due(subscription.id, now)
        except DatabaseError as e:
            log.error("reminder_due_check_failed", error=str(e))
            outcome.error = f"Could not re-check subscription: {e}"
            return outcome

        if not still_due:
            log.info("reminder_skipped_not_due")
            outcome.skipped = True
            return outcome

        try:
            rendered = self._render(subscription)
            delivery_id = self.email_sender.send_email(
                to_email=subscriber.email,
                subject=rendered.subject,
                html_content=rendered.html,
            )
        except Exception as e:
            error = str(e) or e.__class__.__name__
            log.warning("reminder_send_failed", error=error)
            self._append_log(log, subscription, now, error_message=error)
            outcome.error = error
            return outcome

        outcome.success = True
        outcome.delivery_id = delivery_id
        if not self._append_log(
            log,
            subscription,
            now,
            subject=rendered.subject,
            delivery_id=delivery_id,
        ):
            outcome.error = "Sent, but the notification log entry could not be stored"

        try:
            next_at = None
            if mode is ReminderMode.RECURRING:
                next_at = self.scheduler.compute_next(
                    self.scheduler.config.resolve_interval(
                        subscriber.notification_interval_days
                    ),
                    self.scheduler.config.resolve_time_slot(
                        subscriber.preferred_time_slot
                    ),
                    now,
                )
            updated = self.repository.update_schedule(
                subscription.id,
                notified_at=now,
                next_notification_at=next_at,
                expected_next_notification_at=subscription.next_notification_at,
            )
        except (DatabaseError, ReviewServiceError) as e:
            log.error(
                "reminder_schedule_update_failed",
                delivery_id=delivery_id,
                error=str(e),
            )
            outcome.stale = True
            outcome.error = f"Sent, but the schedule could not be updated: {e}"
            return outcome

        if updated:
            outcome.next_notification_at = next_at
            log.info(
                "reminder_sent",
                delivery_id=delivery_id,
                next_notification_at=next_at.isoformat() if next_at else None,
            )
        else:
            outcome.stale = True
            log.warning("reminder_schedule_update_stale", delivery_id=delivery_id)
        return outcome

    def _append_log(
        self, log, subscription: SubscriberCompany, now: datetime, **entry
    ) -> bool:
        """Store one attempt in the notification log.

        Returns:
            False if the entry could not be written
        """
        try:
            self.repository.append_log(
                subscriber_id=subscription.subscriber_id,
                company_id=subscription.company_id,
                sent_at=now,
                **entry,
            )
        except (DatabaseError, ReviewServiceError) as e:
            log.error("notification_log_write_failed", error=str(e), **entry)
            return False
        return True


reminder_sweep_service = ReminderSweepService()
