"""Database models for core application."""

from core.models.company import Company
from core.models.descriptor import Descriptor, DescriptorCategory
from core.models.generated_review import GeneratedReview
from core.models.notification_log import NotificationLog
from core.models.subscriber import Subscriber, normalize_email
from core.models.subscriber_company import SubscriberCompany

__all__ = [
    "Company",
    "Descriptor",
    "DescriptorCategory",
    "GeneratedReview",
    "NotificationLog",
    "Subscriber",
    "SubscriberCompany",
    "normalize_email",
]
