"""Review generation schemas."""

from core.schemas.review.complete_review_request import CompleteReviewRequest
from core.schemas.review.copied_review_request import CopiedReviewRequest
from core.schemas.review.generate_review_request import GenerateReviewRequest
from core.schemas.review.generated_review_response import (
    CompleteReviewResponse,
    CopiedReviewResponse,
    GeneratedReviewResponse,
)

__all__ = [
    "CompleteReviewRequest",
    "CompleteReviewResponse",
    "CopiedReviewRequest",
    "CopiedReviewResponse",
    "GenerateReviewRequest",
    "GeneratedReviewResponse",
]
