"""Review page actions: compose a review and record copied reviews."""

from collections.abc import Sequence
from uuid import UUID

import structlog

from core.constants.review import MAX_DESCRIPTORS_PER_REVIEW, MIN_DESCRIPTORS_FOR_REVIEW
from core.exceptions import SelectionError
from core.models import Descriptor, GeneratedReview
from core.repositories.subscription_repository import SubscriptionRepository
from core.schemas.review import GeneratedReviewResponse
from core.services.reminder_email import get_google_review_url
from core.services.review_composer import ReviewComposer, review_composer

logger = structlog.get_logger(__name__)


class ReviewGenerationService:
    """Turn a descriptor selection into review text for one company."""

    def __init__(
        self,
        composer: ReviewComposer | None = None,
        repository: type[SubscriptionRepository] = SubscriptionRepository,
    ) -> None:
        self.composer = composer or review_composer
        self.repository = repository

    def generate(
        self, company_slug: str, descriptor_ids: Sequence[UUID]
    ) -> GeneratedReviewResponse:
        """Compose a review from the selected descriptors.

        Phrases are used in page order: category sort order first, then the
        descriptor order inside the category. IDs that do not belong to the
        company are ignored, and duplicates count once.

        Args:
            company_slug: Company whose review page the selection came from
            descriptor_ids: Selected descriptor IDs

        Returns:
            The composed text, the phrases used and the Google review link

        Raises:
            CompanyNotFoundError: If the slug is unknown
            SelectionError: If fewer than MIN or more than MAX descriptors
                are selected
        """
        company = self.repository.get_company_by_slug(company_slug)
        descriptors = list(
            Descriptor.objects.filter(
                id__in=set(descriptor_ids),
                category__company=company,
            )
            .select_related("category")
            .order_by("category__sort_order", "category__name", "sort_order", "text")
        )

        count = len(descriptors)
        if count < MIN_DESCRIPTORS_FOR_REVIEW:
            raise SelectionError(
                f"Select at least {MIN_DESCRIPTORS_FOR_REVIEW} descriptors",
                selected_count=count,
            )
        if count > MAX_DESCRIPTORS_PER_REVIEW:
            raise SelectionError(
                f"Select at most {MAX_DESCRIPTORS_PER_REVIEW} descriptors",
                selected_count=count,
            )

        phrases = [descriptor.text for descriptor in descriptors]
        review_text = self.composer.compose(phrases)
        logger.info(
            "review_generated",
            company_id=str(company.id),
            descriptor_count=count,
        )
        return GeneratedReviewResponse(
            company_slug=company.slug,
            review_text=review_text,
            descriptors=phrases,
            google_review_url=get_google_review_url(company.google_review_url),
        )

    def record_copied(self, company_slug: str, review_text: str) -> GeneratedReview:
        """Store a review the customer copied.

        Raises:
            CompanyNotFoundError: If the slug is unknown
        """
        company = self.repository.get_company_by_slug(company_slug)
        review = GeneratedReview.objects.create(
            company=company,
            review_text=review_text,
            copied=True,
        )
        logger.info("review_copied", company_id=str(company.id), review_id=str(review.id))
        return review


review_generation_service = ReviewGenerationService()
