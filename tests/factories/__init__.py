"""Test data builders for the review models.

Each builder fills the required fields with Faker data and saves the row;
keyword arguments override any field.
"""

from collections.abc import Iterable
from datetime import timedelta

from django.utils import timezone
from faker import Faker

from core.models import (
    Company,
    Descriptor,
    DescriptorCategory,
    Subscriber,
    SubscriberCompany,
)

fake = Faker("de_DE")


class ScriptedRandom:
    """Random source that replays the given draws in order."""

    def __init__(self, *values: float) -> None:
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        """Return the next scripted draw."""
        if not self.values:
            raise AssertionError("ScriptedRandom ran out of values")
        self.calls += 1
        return self.values.pop(0)


def make_company(**kwargs) -> Company:
    """Create a company with a unique slug."""
    name = kwargs.pop("name", None) or fake.company()
    defaults = {
        "name": name,
        "slug": f"{fake.slug()}-{fake.unique.random_int(1, 999_999)}",
        "google_review_url": f"https://g.page/r/{fake.pystr(min_chars=12, max_chars=12)}/review",
    }
    defaults.update(kwargs)
    return Company.objects.create(**defaults)


def make_subscriber(**kwargs) -> Subscriber:
    """Create an active subscriber."""
    defaults = {
        "email": fake.unique.email(),
        "name": fake.first_name(),
        "preferred_language": "de",
        "notification_interval_days": 30,
        "preferred_time_slot": "morning",
        "is_active": True,
    }
    defaults.update(kwargs)
    return Subscriber.objects.create(**defaults)


def make_subscription(subscriber=None, company=None, **kwargs) -> SubscriberCompany:
    """Create a subscription that is due one minute ago unless overridden."""
    defaults = {
        "next_notification_at": timezone.now() - timedelta(minutes=1),
    }
    defaults.update(kwargs)
    return SubscriberCompany.objects.create(
        subscriber=subscriber or make_subscriber(),
        company=company or make_company(),
        **defaults,
    )


def make_descriptors(
    company: Company, categories: Iterable[tuple[str, int, list[str]]]
) -> dict[str, Descriptor]:
    """Create descriptor categories with their phrases.

    Args:
        company: Owner of the categories
        categories: (name, sort_order, phrases) per category

    Returns:
        Descriptors keyed by phrase
    """
    descriptors = {}
    for name, sort_order, phrases in categories:
        category = DescriptorCategory.objects.create(
            company=company, name=name, sort_order=sort_order
        )
        for position, phrase in enumerate(phrases):
            descriptors[phrase] = Descriptor.objects.create(
                category=category, text=phrase, sort_order=position
            )
    return descriptors
