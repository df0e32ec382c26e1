"""Subscription schemas."""

from core.schemas.subscription.subscribe_request import SubscribeRequest
from core.schemas.subscription.subscription_response import (
    SubscriberResponse,
    SubscriptionInfo,
)

__all__ = ["SubscribeRequest", "SubscriberResponse", "SubscriptionInfo"]
