"""Constants package for core application."""

from core.constants.http import (
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SLOW_REQUEST_THRESHOLD,
)
from core.constants.review import (
    DESCRIPTORS_PLACEHOLDER,
    MAX_DESCRIPTORS_PER_REVIEW,
    MIN_DESCRIPTORS_FOR_REVIEW,
    REVIEW_TEMPLATES,
)

__all__ = [
    "DESCRIPTORS_PLACEHOLDER",
    "MAX_DESCRIPTORS_PER_REVIEW",
    "MIN_DESCRIPTORS_FOR_REVIEW",
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "REVIEW_TEMPLATES",
    "SLOW_REQUEST_THRESHOLD",
]
