"""Descriptor and descriptor category models."""

import uuid
from typing import ClassVar

from django.db import models


class DescriptorCategory(models.Model):
    """Presentation group of descriptors for one company.

    Only the sort order matters to review generation: selected phrases are
    composed in category order.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(
        "core.Company",
        on_delete=models.CASCADE,
        related_name="descriptor_categories",
        db_column="company_id",
    )
    name = models.CharField(max_length=255)
    sort_order = models.IntegerField(default=0)

    class Meta:
        """Django model metadata."""

        db_table = "descriptor_categories"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["sort_order", "name"]

    def __str__(self) -> str:
        """Return string representation of category."""
        return self.name


class Descriptor(models.Model):
    """An immutable short phrase describing one aspect of an experience."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    category = models.ForeignKey(
        DescriptorCategory,
        on_delete=models.CASCADE,
        related_name="descriptors",
        db_column="category_id",
    )
    text = models.CharField(max_length=255)
    sort_order = models.IntegerField(default=0)

    class Meta:
        """Django model metadata."""

        db_table = "descriptors"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["sort_order", "text"]

    def __str__(self) -> str:
        """Return the descriptor phrase."""
        return self.text
