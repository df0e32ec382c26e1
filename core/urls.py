"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    CompleteReviewView,
    CopiedReviewView,
    CronSendEmailsView,
    GenerateReviewView,
    LivenessCheckView,
    ReadinessCheckView,
    SendEmailView,
    SubscribeView,
    UnsubscribeView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Reminder sending
    path("cron/send-emails", CronSendEmailsView.as_view(), name="cron-send-emails"),
    path("email/send", SendEmailView.as_view(), name="email-send"),
    # Subscriptions
    path("subscribers", SubscribeView.as_view(), name="subscribe"),
    path(
        "subscribers/<uuid:subscriber_id>/unsubscribe",
        UnsubscribeView.as_view(),
        name="unsubscribe",
    ),
    # Review page
    path(
        "companies/<slug:company_slug>/reviews",
        GenerateReviewView.as_view(),
        name="review-generate",
    ),
    path(
        "companies/<slug:company_slug>/reviews/copied",
        CopiedReviewView.as_view(),
        name="review-copied",
    ),
    path(
        "companies/<slug:company_slug>/reviews/completed",
        CompleteReviewView.as_view(),
        name="review-completed",
    ),
]
