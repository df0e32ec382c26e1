"""API views for core application."""

from uuid import UUID

import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.auth.cron_secret import CronSecretAuthentication
from core.enums import ReminderMode
from core.schemas.reminder import SendEmailRequest
from core.schemas.review import (
    CompleteReviewRequest,
    CompleteReviewResponse,
    CopiedReviewRequest,
    CopiedReviewResponse,
    GenerateReviewRequest,
)
from core.schemas.subscription import (
    SubscribeRequest,
    SubscriberResponse,
    SubscriptionInfo,
)
from core.services.health_service import health_service
from core.services.reminder_sweep_service import reminder_sweep_service
from core.services.review_generation_service import review_generation_service
from core.services.subscription_service import subscription_service

logger = structlog.get_logger(__name__)


def _validation_error_response(error: ValidationError) -> Response:
    """Build the 400 response for a rejected request body."""
    return Response(
        {
            "error": "bad_request",
            "message": "Invalid request parameters",
            "errors": error.errors(include_url=False, include_context=False),
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)


class LivenessCheckView(APIView):
    """Liveness probe endpoint for Kubernetes.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check."""
        liveness = health_service.get_liveness_status()
        return Response(_dump(liveness), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint for Kubernetes.

    Returns 200 when the database is reachable (even if the job queue is
    not, in which case the body reports degraded) and 503 otherwise.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        http_status = (
            status.HTTP_200_OK
            if readiness.ready
            else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return Response(_dump(readiness), status=http_status)


class CronSendEmailsView(APIView):
    """Scheduled trigger for the recurring reminder sweep.

    Called by the platform scheduler every few minutes. Individual send
    failures are reported in the body with a 200; only a store failure
    fails the request.
    """

    authentication_classes = (CronSecretAuthentication,)
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Run a recurring sweep.

        Returns:
            200 with SweepResult
            401 Unauthorized if the cron secret is missing or wrong
            500 if due subscriptions cannot be loaded
        """
        result = reminder_sweep_service.run(ReminderMode.RECURRING)
        return Response(_dump(result), status=status.HTTP_200_OK)


class SendEmailView(APIView):
    """Manual sending endpoint with three modes.

    - test: sample reminder to the given address
    - due: one-shot sweep over all due subscriptions
    - subscriber: immediate reminder for one subscription
    """

    def post(self, request):
        """Handle POST request to send reminder emails.

        Returns:
            200 with SendEmailResponse (test, subscriber) or SweepResult (due)
            400 Bad Request if validation fails or the subscription is closed
            404 Not Found if the subscription or a company does not exist
            502 Bad Gateway if the email transport rejects the message
        """
        try:
            send_request = SendEmailRequest(**request.data)
        except ValidationError as e:
            logger.warning("send_email_request_invalid", validation_errors=e.errors())
            return _validation_error_response(e)

        logger.info("send_email_request_received", mode=send_request.mode)

        if send_request.mode == "test":
            result = reminder_sweep_service.send_test_email(send_request.email)
        elif send_request.mode == "due":
            result = reminder_sweep_service.run(ReminderMode.ONE_SHOT)
        else:
            result = reminder_sweep_service.send_to_subscriber(
                send_request.subscriber_id,
                send_request.company_id,
            )
        return Response(_dump(result), status=status.HTTP_200_OK)


class SubscribeView(APIView):
    """Signup endpoint for review reminders."""

    def post(self, request):
        """Create or update a subscriber and its company subscriptions.

        Returns:
            201 Created for a new subscriber, 200 OK for an existing one
            400 Bad Request if validation fails
            404 Not Found if a company does not exist
        """
        try:
            subscribe_request = SubscribeRequest(**request.data)
        except ValidationError as e:
            logger.warning("subscribe_request_invalid", validation_errors=e.errors())
            return _validation_error_response(e)

        outcome = subscription_service.subscribe(subscribe_request)
        subscriber = outcome.subscriber
        response = SubscriberResponse(
            id=subscriber.id,
            email=subscriber.email,
            is_active=subscriber.is_active,
            subscriptions=[
                SubscriptionInfo.model_validate(subscription)
                for subscription in subscriber.subscriptions.all()
            ],
        )
        return Response(
            _dump(response),
            status=status.HTTP_201_CREATED if outcome.created else status.HTTP_200_OK,
        )


class UnsubscribeView(APIView):
    """Deactivate a subscriber."""

    def post(self, _request, subscriber_id: UUID):
        """Stop all reminders for the subscriber.

        Returns:
            200 with the subscriber
            404 Not Found if the subscriber does not exist
        """
        subscriber = subscription_service.unsubscribe(subscriber_id)
        response = SubscriberResponse(
            id=subscriber.id,
            email=subscriber.email,
            is_active=subscriber.is_active,
        )
        return Response(_dump(response), status=status.HTTP_200_OK)


class GenerateReviewView(APIView):
    """Compose review text from selected descriptors."""

    def post(self, request, company_slug: str):
        """Handle POST request to generate a review.

        Returns:
            200 with GeneratedReviewResponse
            400 Bad Request if validation fails or the selection is out of bounds
            404 Not Found if the company does not exist
        """
        try:
            generate_request = GenerateReviewRequest(**request.data)
        except ValidationError as e:
            return _validation_error_response(e)

        review = review_generation_service.generate(
            company_slug, generate_request.descriptor_ids
        )
        return Response(_dump(review), status=status.HTTP_200_OK)


class CopiedReviewView(APIView):
    """Record that a customer copied a generated review."""

    def post(self, request, company_slug: str):
        """Store the copied text.

        Returns:
            201 Created with the stored review ID
        """
        try:
            copied_request = CopiedReviewRequest(**request.data)
        except ValidationError as e:
            return _validation_error_response(e)

        review = review_generation_service.record_copied(
            company_slug, copied_request.review_text
        )
        response = CopiedReviewResponse(id=review.id, created_at=review.created_at)
        return Response(_dump(response), status=status.HTTP_201_CREATED)


class CompleteReviewView(APIView):
    """Mark a subscriber's review for a company as completed."""

    def post(self, request, company_slug: str):
        """Close the subscription for good.

        Returns:
            200 with CompleteReviewResponse
            404 Not Found if the company or the subscription does not exist
        """
        try:
            complete_request = CompleteReviewRequest(**request.data)
        except ValidationError as e:
            return _validation_error_response(e)

        outcome = subscription_service.complete_review(
            company_slug, complete_request.subscriber_id
        )
        response = CompleteReviewResponse(
            subscriber_id=outcome.subscription.subscriber_id,
            company_id=outcome.subscription.company_id,
            completed=outcome.completed,
            subscriber_active=outcome.subscriber_active,
        )
        return Response(_dump(response), status=status.HTTP_200_OK)
