"""Next-reminder computation for subscriptions.

Three regimes, selected by the subscriber's interval in days:

- 0: instant test mode, ten seconds from now.
- between 0 and 1: fractional-day test mode, the interval converted to
  whole minutes.
- 1 or more: production mode. The interval is jittered by up to a third
  (never below one day), the hour and minute are drawn from the preferred
  time slot, and weekend dates are moved to the adjacent weekday four times
  out of five.

All random draws go through an injected RandomSource so tests can script them.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from django.conf import settings
from django.utils import timezone

import structlog

from core.constants.review import (
    DEFAULT_HOURS,
    INSTANT_TEST_DELAY_SECONDS,
    INTERVAL_VARIANCE_RATIO,
    TIME_SLOT_HOURS,
    WEEKEND_KEEP_PROBABILITY,
)
from core.enums import TimeSlot
from core.exceptions import InvalidArgumentError
from core.services.randomness import RandomSource, default_random_source, uniform_int

logger = structlog.get_logger(__name__)

SATURDAY = 5
SUNDAY = 6


@dataclass(frozen=True)
class SchedulerConfig:
    """Scheduling defaults passed explicitly instead of read from globals.

    Attributes:
        default_interval_days: Interval used when a subscriber has none stored.
        default_time_slot: Time slot used when a subscriber has none stored.
        time_zone: Zone whose calendar the day arithmetic and hours refer to.
    """

    default_interval_days: float = 30.0
    default_time_slot: str = TimeSlot.MORNING.value
    time_zone: str = field(default="Europe/Berlin")

    @classmethod
    def from_settings(cls) -> "SchedulerConfig":
        """Build the configuration from Django settings."""
        return cls(
            default_interval_days=settings.REMINDER_DEFAULT_INTERVAL_DAYS,
            default_time_slot=settings.REMINDER_DEFAULT_TIME_SLOT,
            time_zone=settings.TIME_ZONE,
        )

    def resolve_interval(self, interval_days: float | None) -> float:
        """Return the stored interval, or the default when none is stored.

        A stored 0 is kept: it selects the instant test schedule.
        """
        return self.default_interval_days if interval_days is None else interval_days

    def resolve_time_slot(self, time_slot: str | None) -> str:
        """Return the stored time slot, or the default when none is stored."""
        return time_slot or self.default_time_slot


class NotificationScheduler:
    """Compute when a subscriber's next reminder should go out."""

    def __init__(
        self,
        config: SchedulerConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        """Initialize the scheduler.

        Args:
            config: Scheduling defaults; built from settings when omitted.
            rng: Random source for jitter, hour, minute and weekend draws.
        """
        self.config = config or SchedulerConfig.from_settings()
        self.rng = rng or default_random_source

    def compute_next(
        self,
        interval_days: float,
        preferred_time_slot: str | None,
        now: datetime | None = None,
    ) -> datetime:
        """Compute the next notification instant.

        Args:
            interval_days: Non-negative interval between reminders, in days.
            preferred_time_slot: morning, afternoon, evening or anything else
                for the broad daytime band.
            now: Reference instant; defaults to the current time.

        Returns:
            The next notification instant. For intervals of a day or more it
            is expressed in the configured time zone when now is aware.

        Raises:
            InvalidArgumentError: If interval_days is negative, not a number, or
                so large that the result falls outside the calendar.
        """
        if interval_days is None or math.isnan(interval_days) or interval_days < 0:
            raise InvalidArgumentError(
                f"interval_days must be a non-negative number, got {interval_days!r}"
            )

        if now is None:
            now = timezone.now()

        if interval_days == 0:
            return now + timedelta(seconds=INSTANT_TEST_DELAY_SECONDS)

        if interval_days < 1:
            # Half-up rounding, not Python's round-half-to-even
            minutes = math.floor(interval_days * 24 * 60 + 0.5)
            return now + timedelta(minutes=minutes)

        try:
            return self._compute_regular(interval_days, preferred_time_slot, now)
        except OverflowError as e:
            raise InvalidArgumentError(
                f"interval_days {interval_days!r} is beyond the supported calendar range"
            ) from e

    def _compute_regular(
        self,
        interval_days: float,
        preferred_time_slot: str | None,
        now: datetime,
    ) -> datetime:
        local_now = self._to_local(now)

        variance = math.floor(interval_days * INTERVAL_VARIANCE_RATIO)
        random_offset = uniform_int(self.rng, variance * 2 + 1) - variance
        effective_days = max(1, interval_days + random_offset)

        candidate = local_now + timedelta(days=math.floor(effective_days))

        first_hour, hour_count = TIME_SLOT_HOURS.get(
            _slot_value(preferred_time_slot), DEFAULT_HOURS
        )
        candidate = candidate.replace(
            hour=first_hour + uniform_int(self.rng, hour_count),
            minute=uniform_int(self.rng, 60),
            second=0,
            microsecond=0,
        )

        weekday = candidate.weekday()
        if weekday in (SATURDAY, SUNDAY) and self.rng.random() > WEEKEND_KEEP_PROBABILITY:
            shift = 1 if weekday == SUNDAY else -1
            earliest_date = local_now.date() + timedelta(days=1)
            if (candidate + timedelta(days=shift)).date() < earliest_date:
                # Friday would fall inside the one-day floor; use Monday
                shift = 2
            candidate += timedelta(days=shift)

        logger.debug(
            "next_notification_computed",
            interval_days=interval_days,
            random_offset=random_offset,
            effective_days=effective_days,
            time_slot=preferred_time_slot,
            next_notification_at=candidate.isoformat(),
        )
        return candidate

    def _to_local(self, now: datetime) -> datetime:
        if timezone.is_naive(now):
            return now
        return now.astimezone(ZoneInfo(self.config.time_zone))


def _slot_value(time_slot: str | None) -> str | None:
    if isinstance(time_slot, TimeSlot):
        return time_slot.value
    return time_slot
