"""Exception handling utilities for the review service."""

from core.exceptions.handlers import custom_exception_handler
from core.exceptions.review_exceptions import (
    CompanyNotFoundError,
    InvalidArgumentError,
    InvalidConfigurationError,
    ReviewServiceError,
    SelectionError,
    StoreFailureError,
    SubscriberNotFoundError,
    SubscriptionClosedError,
    SubscriptionNotFoundError,
    TransportFailureError,
)

__all__ = [
    "CompanyNotFoundError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "ReviewServiceError",
    "SelectionError",
    "StoreFailureError",
    "SubscriberNotFoundError",
    "SubscriptionClosedError",
    "SubscriptionNotFoundError",
    "TransportFailureError",
    "custom_exception_handler",
]
