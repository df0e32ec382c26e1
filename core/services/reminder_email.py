"""Rendering of review reminder emails."""

from dataclasses import dataclass
from urllib.parse import urlencode

from django.template.loader import render_to_string

from core.config.app_urls import (
    REVIEW_PAGE_PATH,
    SUBSCRIBER_QUERY_PARAM,
    get_app_base_url,
)
from core.constants.review import GOOGLE_WRITE_REVIEW_URL
from core.enums import EmailType
from core.services.notification_templates import (
    REMINDER_TEXTS,
    get_email_template,
    resolve_language,
)


@dataclass(frozen=True)
class RenderedEmail:
    """Subject and HTML body ready to hand to the transport."""

    subject: str
    html: str


def build_review_url(base_url: str, slug: str, subscriber_id: object = None) -> str:
    """Build the link to a company's review page.

    Args:
        base_url: Front-end base URL; a trailing slash is ignored.
        slug: Company slug.
        subscriber_id: When given, appended as the sid query parameter so the
            review page can attribute the visit.

    Returns:
        "{base}/review/{slug}" or "{base}/review/{slug}?sid={id}".
    """
    url = base_url.rstrip("/") + REVIEW_PAGE_PATH.format(slug=slug)
    if subscriber_id is not None:
        url += "?" + urlencode({SUBSCRIBER_QUERY_PARAM: str(subscriber_id)})
    return url


def get_google_review_url(value: str | None) -> str:
    """Return a usable Google review link.

    Full URLs are returned unchanged; a bare place id is expanded to the
    write-review URL. Empty values give "".
    """
    value = (value or "").strip()
    if not value:
        return ""
    if value.startswith(("http://", "https://")):
        return value
    return GOOGLE_WRITE_REVIEW_URL.format(place_id=value)


def reminder_subject(company_name: str, language: str | None) -> str:
    """Return the localised reminder subject line."""
    config = get_email_template(EmailType.REVIEW_REMINDER.value)
    return config["subject"][resolve_language(language)].format(
        company_name=company_name
    )


def render_review_reminder(
    company_name: str,
    review_url: str,
    subscriber_name: str | None = None,
    language: str | None = None,
) -> RenderedEmail:
    """Render a review reminder.

    Args:
        company_name: Name shown in the header and the intro.
        review_url: Target of the call-to-action button.
        subscriber_name: Used in the greeting when present.
        language: "de" or "en"; anything else renders German.

    Returns:
        The subject and HTML body.
    """
    language = resolve_language(language)
    texts = REMINDER_TEXTS[language]
    greeting = (
        texts["greeting_named"].format(name=subscriber_name)
        if subscriber_name
        else texts["greeting"]
    )

    html = render_to_string(
        get_email_template(EmailType.REVIEW_REMINDER.value)["template"],
        {
            "company_name": company_name,
            "review_url": review_url,
            "greeting": greeting,
            "intro": texts["intro"].format(company_name=company_name),
            "texts": texts,
            "language": language,
        },
    )
    return RenderedEmail(subject=reminder_subject(company_name, language), html=html)


def default_review_url(slug: str, subscriber_id: object = None) -> str:
    """build_review_url against the configured front-end base URL."""
    return build_review_url(get_app_base_url(), slug, subscriber_id)
