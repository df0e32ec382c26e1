"""Component tests for the subscription endpoints."""

import uuid

from django.test import Client, TestCase

from core.models import Subscriber
from tests.factories import make_company, make_subscription


class TestSubscribeEndpoint(TestCase):
    """POST /subscribers."""

    url = "/api/v1/reviews/subscribers"

    def setUp(self):
        """Set up test fixtures."""
        self.client = Client()
        self.company = make_company()

    def post(self, **overrides):
        data = {
            "email": "Neu@Example.com",
            "name": "Jonas",
            "companyIds": [str(self.company.id)],
            "notificationIntervalDays": 14,
            "preferredTimeSlot": "afternoon",
            "preferredLanguage": "en",
        }
        data.update(overrides)
        return self.client.post(self.url, data, content_type="application/json")

    def test_new_subscriber_is_created(self):
        """Test signup returns 201 with the scheduled subscription."""
        response = self.post()

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["email"], "neu@example.com")
        self.assertTrue(data["isActive"])
        (subscription,) = data["subscriptions"]
        self.assertEqual(subscription["companyId"], str(self.company.id))
        self.assertIsNotNone(subscription["nextNotificationAt"])
        self.assertIsNone(subscription["reviewCompletedAt"])

        subscriber = Subscriber.objects.get()
        self.assertEqual(subscriber.preferred_language, "en")
        self.assertEqual(subscriber.preferred_time_slot, "afternoon")

    def test_existing_subscriber_returns_200(self):
        self.post()

        response = self.post(email="neu@example.com")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(Subscriber.objects.count(), 1)

    def test_invalid_email(self):
        response = self.post(email="kein-email")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["errors"][0]["loc"], ["email"])

    def test_company_ids_required(self):
        response = self.post(companyIds=[])

        self.assertEqual(response.status_code, 400)

    def test_negative_interval(self):
        response = self.post(notificationIntervalDays=-1)

        self.assertEqual(response.status_code, 400)

    def test_interval_above_one_year(self):
        for interval in (366, 1e9):
            with self.subTest(interval=interval):
                response = self.post(notificationIntervalDays=interval)

                self.assertEqual(response.status_code, 400)
                self.assertEqual(
                    response.json()["errors"][0]["loc"], ["notificationIntervalDays"]
                )
        self.assertFalse(Subscriber.objects.exists())

    def test_one_year_interval_is_accepted(self):
        response = self.post(notificationIntervalDays=365)

        self.assertEqual(response.status_code, 201)
        self.assertIsNotNone(response.json()["subscriptions"][0]["nextNotificationAt"])

    def test_unknown_time_slot(self):
        response = self.post(preferredTimeSlot="night")

        self.assertEqual(response.status_code, 400)

    def test_unknown_company(self):
        response = self.post(companyIds=[str(uuid.uuid4())])

        self.assertEqual(response.status_code, 404)
        self.assertFalse(Subscriber.objects.exists())


class TestUnsubscribeEndpoint(TestCase):
    """POST /subscribers/<id>/unsubscribe."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = Client()

    def test_unsubscribe(self):
        subscription = make_subscription()

        response = self.client.post(
            f"/api/v1/reviews/subscribers/{subscription.subscriber_id}/unsubscribe"
        )

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["isActive"])
        self.assertFalse(Subscriber.objects.get().is_active)

    def test_unknown_subscriber(self):
        response = self.client.post(f"/api/v1/reviews/subscribers/{uuid.uuid4()}/unsubscribe")

        self.assertEqual(response.status_code, 404)

    def test_get_not_allowed(self):
        subscription = make_subscription()

        response = self.client.get(
            f"/api/v1/reviews/subscribers/{subscription.subscriber_id}/unsubscribe"
        )

        self.assertEqual(response.status_code, 405)
