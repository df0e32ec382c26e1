"""Subscription lifecycle: signup, review completion and unsubscribe."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from django.db import transaction
from django.utils import timezone

import structlog

from core.exceptions import CompanyNotFoundError, SubscriberNotFoundError
from core.models import Company, Subscriber, SubscriberCompany
from core.repositories.subscription_repository import SubscriptionRepository
from core.schemas.subscription import SubscribeRequest
from core.services.notification_scheduler import NotificationScheduler

logger = structlog.get_logger(__name__)


@dataclass
class SubscribeOutcome:
    """What a signup changed."""

    subscriber: Subscriber
    created: bool
    added_company_ids: list[UUID] = field(default_factory=list)
    rescheduled_company_ids: list[UUID] = field(default_factory=list)


@dataclass
class CompletionOutcome:
    """Result of marking a review completed."""

    subscription: SubscriberCompany
    completed: bool
    subscriber_active: bool


class SubscriptionService:
    """Create and close reminder subscriptions."""

    def __init__(
        self,
        scheduler: NotificationScheduler | None = None,
        repository: type[SubscriptionRepository] = SubscriptionRepository,
    ) -> None:
        self._scheduler = scheduler
        self.repository = repository

    @property
    def scheduler(self) -> NotificationScheduler:
        if self._scheduler is None:
            self._scheduler = NotificationScheduler()
        return self._scheduler

    @transaction.atomic
    def subscribe(
        self, request: SubscribeRequest, now: datetime | None = None
    ) -> SubscribeOutcome:
        """Create or update a subscriber and schedule its first reminders.

        Companies the subscriber already follows are not duplicated, and a
        company whose review was completed is never subscribed again. When the
        interval or time slot changes, open subscriptions are rescheduled
        from now.

        Args:
            request: Validated signup data
            now: Reference instant for scheduling

        Returns:
            The subscriber and the companies that were added or rescheduled

        Raises:
            CompanyNotFoundError: If a requested company does not exist
        """
        now = now or timezone.now()
        requested_ids = list(dict.fromkeys(request.company_ids))
        companies = {c.id: c for c in Company.objects.filter(id__in=requested_ids)}
        for company_id in requested_ids:
            if company_id not in companies:
                raise CompanyNotFoundError(str(company_id))

        subscriber = Subscriber.objects.filter(email=request.email).first()
        created = subscriber is None
        preferences_changed = False
        if created:
            subscriber = Subscriber(email=request.email)
        else:
            preferences_changed = (
                subscriber.notification_interval_days
                != request.notification_interval_days
                or subscriber.preferred_time_slot != request.preferred_time_slot
            )

        subscriber.name = (request.name or "").strip() or None
        subscriber.notification_interval_days = request.notification_interval_days
        subscriber.preferred_time_slot = request.preferred_time_slot
        subscriber.preferred_language = request.preferred_language
        subscriber.is_active = True
        subscriber.save()

        outcome = SubscribeOutcome(subscriber=subscriber, created=created)
        existing = {
            sc.company_id: sc
            for sc in SubscriberCompany.objects.filter(subscriber=subscriber)
        }

        for company_id in requested_ids:
            if company_id in existing:
                continue
            SubscriberCompany.objects.create(
                subscriber=subscriber,
                company=companies[company_id],
                subscribed_at=now,
                next_notification_at=self._next_for(subscriber, now),
            )
            outcome.added_company_ids.append(company_id)

        if preferences_changed:
            for subscription in existing.values():
                if subscription.is_completed:
                    continue
                subscription.next_notification_at = self._next_for(subscriber, now)
                subscription.save(update_fields=["next_notification_at"])
                outcome.rescheduled_company_ids.append(subscription.company_id)

        logger.info(
            "subscriber_saved",
            subscriber_id=str(subscriber.id),
            created=created,
            added=len(outcome.added_company_ids),
            rescheduled=len(outcome.rescheduled_company_ids),
        )
        return outcome

    @transaction.atomic
    def complete_review(self, company_slug: str, subscriber_id: UUID) -> CompletionOutcome:
        """Mark a subscriber's review for a company as completed.

        Once no open subscription is left, the subscriber is deactivated.
        Calling this again for the same company changes nothing.

        Raises:
            CompanyNotFoundError: If the slug is unknown
            SubscriptionNotFoundError: If the subscriber does not follow the company
        """
        company = self.repository.get_company_by_slug(company_slug)
        subscription = self.repository.get_subscription(subscriber_id, company.id)
        subscriber = subscription.subscriber

        completed = subscription.mark_review_completed()
        if completed and not self.repository.get_open_subscriptions(subscriber.id).exists():
            subscriber.is_active = False
            subscriber.save(update_fields=["is_active"])
            logger.info("subscriber_deactivated_all_reviewed", subscriber_id=str(subscriber.id))

        logger.info(
            "review_completed",
            subscriber_id=str(subscriber.id),
            company_id=str(company.id),
            changed=completed,
        )
        return CompletionOutcome(
            subscription=subscription,
            completed=completed,
            subscriber_active=subscriber.is_active,
        )

    def unsubscribe(self, subscriber_id: UUID) -> Subscriber:
        """Stop all reminders for a subscriber, keeping its history.

        Raises:
            SubscriberNotFoundError: If the subscriber does not exist
        """
        try:
            subscriber = Subscriber.objects.get(pk=subscriber_id)
        except Subscriber.DoesNotExist as e:
            raise SubscriberNotFoundError(str(subscriber_id)) from e

        if subscriber.is_active:
            subscriber.is_active = False
            subscriber.save(update_fields=["is_active"])
            logger.info("subscriber_unsubscribed", subscriber_id=str(subscriber.id))
        return subscriber

    def _next_for(self, subscriber: Subscriber, now: datetime) -> datetime:
        config = self.scheduler.config
        return self.scheduler.compute_next(
            config.resolve_interval(subscriber.notification_interval_days),
            config.resolve_time_slot(subscriber.preferred_time_slot),
            now,
        )


subscription_service = SubscriptionService()
