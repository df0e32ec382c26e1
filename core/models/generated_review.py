"""Generated review model."""

import uuid
from typing import ClassVar

from django.db import models


class GeneratedReview(models.Model):
    """Review text a customer copied from the review page."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(
        "core.Company",
        on_delete=models.CASCADE,
        related_name="generated_reviews",
        db_column="company_id",
    )
    review_text = models.TextField()
    copied = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "generated_reviews"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of generated review."""
        return f"Review for {self.company_id}: {self.review_text[:40]}"
