"""Company model."""

import uuid
from typing import ClassVar

from django.db import models


class Company(models.Model):
    """A business that collects reviews.

    Customers reach the review page through the company's slug; the Google
    review URL is where the generated text is finally posted.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    google_review_url = models.CharField(max_length=500, default="", blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "companies"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["name"]

    def __str__(self) -> str:
        """Return string representation of company."""
        return f"{self.name} ({self.slug})"

    def __repr__(self) -> str:
        """Return detailed representation of company."""
        return f"<Company(id={self.id}, slug='{self.slug}')>"
