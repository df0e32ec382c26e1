"""Tests for ReviewGenerationService."""

import uuid

from django.test import TestCase

from core.exceptions import CompanyNotFoundError, SelectionError
from core.models import GeneratedReview
from core.services.review_composer import ReviewComposer
from core.services.review_generation_service import ReviewGenerationService
from tests.factories import ScriptedRandom, make_company, make_descriptors


class TestReviewGenerationService(TestCase):
    """Test suite for review generation."""

    def setUp(self):
        """Set up test fixtures."""
        self.company = make_company(
            name="Café Sonne",
            slug="cafe-sonne",
            google_review_url="ChIJplace",
        )
        self.descriptors = make_descriptors(
            self.company,
            [
                ("Atmosphäre", 2, ["gemütliche Einrichtung", "ruhige Lage"]),
                ("Essen", 1, ["leckerer Kuchen", "frischer Kaffee", "große Portionen"]),
                ("Service", 3, ["freundliches Personal", "schnelle Bedienung"]),
            ],
        )
        composer = ReviewComposer(
            templates=["Mir gefiel: {descriptors}."], rng=ScriptedRandom(0.0)
        )
        self.service = ReviewGenerationService(composer=composer)

    def ids(self, *phrases):
        return [self.descriptors[phrase].id for phrase in phrases]

    def test_phrases_follow_category_then_descriptor_order(self):
        """Test selection order does not matter, page order does."""
        review = self.service.generate(
            "cafe-sonne",
            self.ids("freundliches Personal", "ruhige Lage", "frischer Kaffee", "leckerer Kuchen"),
        )

        self.assertEqual(
            review.descriptors,
            ["leckerer Kuchen", "frischer Kaffee", "ruhige Lage", "freundliches Personal"],
        )
        self.assertEqual(
            review.review_text,
            "Mir gefiel: leckerer Kuchen, frischer Kaffee, ruhige Lage "
            "und freundliches Personal.",
        )
        self.assertEqual(review.company_slug, "cafe-sonne")
        self.assertEqual(
            review.google_review_url,
            "https://search.google.com/local/writereview?placeid=ChIJplace",
        )

    def test_too_few_descriptors(self):
        """Test a single descriptor is rejected."""
        with self.assertRaisesRegex(SelectionError, "at least 2") as ctx:
            self.service.generate("cafe-sonne", self.ids("ruhige Lage"))

        self.assertEqual(ctx.exception.selected_count, 1)
        self.assertEqual(ctx.exception.status_code, 400)

    def test_duplicates_count_once(self):
        """Test the same descriptor twice is still one selection."""
        descriptor_id = self.descriptors["ruhige Lage"].id

        with self.assertRaises(SelectionError):
            self.service.generate("cafe-sonne", [descriptor_id, descriptor_id])

    def test_too_many_descriptors(self):
        """Test seven descriptors are rejected."""
        with self.assertRaisesRegex(SelectionError, "at most 6") as ctx:
            self.service.generate(
                "cafe-sonne", [d.id for d in self.descriptors.values()]
            )

        self.assertEqual(ctx.exception.selected_count, 7)

    def test_six_descriptors_are_allowed(self):
        """Test the upper bound is inclusive."""
        selected = [d.id for d in self.descriptors.values()][:6]

        review = self.service.generate("cafe-sonne", selected)

        self.assertEqual(len(review.descriptors), 6)

    def test_foreign_and_unknown_descriptors_are_ignored(self):
        """Test descriptors of other companies do not count."""
        other = make_descriptors(make_company(), [("X", 0, ["fremde Phrase"])])

        with self.assertRaises(SelectionError):
            self.service.generate(
                "cafe-sonne",
                [*self.ids("ruhige Lage"), other["fremde Phrase"].id, uuid.uuid4()],
            )

    def test_unknown_company(self):
        """Test an unknown slug."""
        with self.assertRaises(CompanyNotFoundError):
            self.service.generate("unbekannt", self.ids("ruhige Lage", "leckerer Kuchen"))

    def test_record_copied(self):
        """Test copied reviews are stored for the company."""
        review = self.service.record_copied("cafe-sonne", "Sehr schön!")

        stored = GeneratedReview.objects.get(pk=review.pk)
        self.assertEqual(stored.company, self.company)
        self.assertEqual(stored.review_text, "Sehr schön!")
        self.assertTrue(stored.copied)

    def test_record_copied_unknown_company(self):
        """Test copying for an unknown slug."""
        with self.assertRaises(CompanyNotFoundError):
            self.service.record_copied("unbekannt", "Text")
