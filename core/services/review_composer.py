"""Review text composition from selected descriptor phrases.

The composer joins phrases German-style ("A, B und C"), picks one template at
random and substitutes the joined text for the template's placeholder.
"""

from collections.abc import Sequence

import structlog

from core.constants.review import (
    DESCRIPTORS_PLACEHOLDER,
    FINAL_CONJUNCTION,
    PHRASE_SEPARATOR,
    REVIEW_TEMPLATES,
)
from core.exceptions import InvalidConfigurationError
from core.services.randomness import RandomSource, default_random_source, uniform_int

logger = structlog.get_logger(__name__)


def combine_descriptors(phrases: Sequence[str]) -> str:
    """Join phrases into one sentence fragment.

    Args:
        phrases: Ordered descriptor phrases.

    Returns:
        "" for no phrases, the phrase itself for one, "A und B" for two and
        "A, B und C" (no comma before "und") for three or more.
    """
    if not phrases:
        return ""
    if len(phrases) == 1:
        return phrases[0]
    return PHRASE_SEPARATOR.join(phrases[:-1]) + FINAL_CONJUNCTION + phrases[-1]


def capitalize(text: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


class ReviewComposer:
    """Compose a review sentence from descriptor phrases.

    The template pool and random source can be fixed per instance; both can
    also be overridden per call.
    """

    def __init__(
        self,
        templates: Sequence[str] | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        """Initialize the composer.

        Args:
            templates: Default template pool (REVIEW_TEMPLATES if omitted).
            rng: Random source used for template selection.
        """
        self.templates = list(REVIEW_TEMPLATES if templates is None else templates)
        self.rng = rng or default_random_source

    def compose(
        self,
        selected_phrases: Sequence[str],
        templates: Sequence[str] | None = None,
        rng: RandomSource | None = None,
    ) -> str:
        """Compose one review from the selected phrases.

        Args:
            selected_phrases: Ordered, distinct descriptor phrases.
            templates: Template pool to pick from; defaults to the instance pool.
            rng: Random source for this call; defaults to the instance source.

        Returns:
            The review text, or "" when no phrases were selected.

        Raises:
            InvalidConfigurationError: If the pool is empty or the chosen
                template does not contain the placeholder exactly once.
        """
        if not selected_phrases:
            return ""

        pool = self.templates if templates is None else list(templates)
        if not pool:
            raise InvalidConfigurationError("Review template pool is empty")

        template = pool[uniform_int(rng or self.rng, len(pool))]
        occurrences = template.count(DESCRIPTORS_PLACEHOLDER)
        if occurrences != 1:
            logger.error(
                "review_template_malformed",
                template=template,
                placeholder_count=occurrences,
            )
            raise InvalidConfigurationError(
                f"Review template must contain {DESCRIPTORS_PLACEHOLDER} "
                f"exactly once: {template!r}"
            )

        combined = combine_descriptors(selected_phrases)
        if template.startswith(DESCRIPTORS_PLACEHOLDER):
            combined = capitalize(combined)

        return template.replace(DESCRIPTORS_PLACEHOLDER, combined)


review_composer = ReviewComposer()
