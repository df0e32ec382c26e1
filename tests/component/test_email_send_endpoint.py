"""Component tests for the manual email trigger."""

import smtplib
import uuid
from datetime import timedelta
from unittest.mock import MagicMock, patch

from django.test import Client, TestCase
from django.utils import timezone

from core.models import NotificationLog
from tests.factories import make_company, make_subscriber, make_subscription


class TestSendEmailEndpoint(TestCase):
    """POST /email/send."""

    url = "/api/v1/reviews/email/send"

    def setUp(self):
        """Set up test fixtures."""
        self.client = Client()
        smtp_patcher = patch("core.services.email_service.smtplib.SMTP")
        mock_smtp_class = smtp_patcher.start()
        self.addCleanup(smtp_patcher.stop)
        self.smtp = MagicMock()
        mock_smtp_class.return_value.__enter__.return_value = self.smtp

    def post(self, data):
        return self.client.post(self.url, data, content_type="application/json")

    def test_test_mode(self):
        """Test a sample reminder goes to the given address."""
        make_company(name="Café Sonne")

        response = self.post({"mode": "test", "email": "tester@example.com"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["success"])
        self.assertEqual(data["message"], "Test email sent to tester@example.com")
        self.assertTrue(data["emailId"])
        self.assertEqual(self.smtp.send_message.call_args[0][0]["To"], "tester@example.com")
        self.assertFalse(NotificationLog.objects.exists())

    def test_test_mode_requires_email(self):
        response = self.post({"mode": "test"})

        self.assertEqual(response.status_code, 400)
        data = response.json()
        self.assertEqual(data["error"], "bad_request")
        self.assertEqual(data["message"], "Invalid request parameters")
        self.assertIn("email is required", data["errors"][0]["msg"])

    def test_test_mode_invalid_address(self):
        make_company()

        response = self.post({"mode": "test", "email": "not-an-address"})

        self.assertEqual(response.status_code, 400)
        self.smtp.send_message.assert_not_called()

    def test_test_mode_without_companies(self):
        response = self.post({"mode": "test", "email": "tester@example.com"})

        self.assertEqual(response.status_code, 404)

    def test_due_mode_runs_one_shot_sweep(self):
        """Test due mode sends and clears the schedule."""
        subscription = make_subscription()

        response = self.post({"mode": "due"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["mode"], "one_shot")
        self.assertEqual(data["sentCount"], 1)
        subscription.refresh_from_db()
        self.assertIsNone(subscription.next_notification_at)

    def test_subscriber_mode(self):
        """Test an immediate reminder for one subscription."""
        scheduled = timezone.now() + timedelta(days=10)
        subscription = make_subscription(next_notification_at=scheduled)

        response = self.post(
            {
                "mode": "subscriber",
                "subscriberId": str(subscription.subscriber_id),
                "companyId": str(subscription.company_id),
            }
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["message"], f"Email sent to {subscription.subscriber.email}"
        )
        subscription.refresh_from_db()
        self.assertEqual(subscription.next_notification_at, scheduled)
        self.assertIsNotNone(subscription.last_notified_at)

    def test_subscriber_mode_requires_ids(self):
        response = self.post({"mode": "subscriber", "subscriberId": str(uuid.uuid4())})

        self.assertEqual(response.status_code, 400)

    def test_subscriber_mode_unknown_subscription(self):
        response = self.post(
            {
                "mode": "subscriber",
                "subscriberId": str(make_subscriber().id),
                "companyId": str(make_company().id),
            }
        )

        self.assertEqual(response.status_code, 404)

    def test_subscriber_mode_completed_review(self):
        subscription = make_subscription(review_completed_at=timezone.now())

        response = self.post(
            {
                "mode": "subscriber",
                "subscriberId": str(subscription.subscriber_id),
                "companyId": str(subscription.company_id),
            }
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["message"], "Review already completed for this company"
        )

    def test_transport_failure_is_bad_gateway(self):
        """Test a rejected message maps to 502 and is logged."""
        subscription = make_subscription()
        self.smtp.send_message.side_effect = smtplib.SMTPDataError(554, b"rejected")

        response = self.post(
            {
                "mode": "subscriber",
                "subscriberId": str(subscription.subscriber_id),
                "companyId": str(subscription.company_id),
            }
        )

        self.assertEqual(response.status_code, 502)
        self.assertIsNotNone(NotificationLog.objects.get().error_message)

    def test_unknown_mode(self):
        response = self.post({"mode": "everyone"})

        self.assertEqual(response.status_code, 400)
