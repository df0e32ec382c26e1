"""Email template configuration for reminder emails.

This module maps each email type to its localised subject lines, its HTML
template path and the localised copy the template renders. Rendering happens
at send time in core.services.reminder_email.
"""

from typing import TypedDict

from core.enums import EmailType, PreferredLanguage

FALLBACK_LANGUAGE = PreferredLanguage.DE.value


class EmailTemplateConfig(TypedDict):
    """Configuration for an email template."""

    subject: dict[str, str]
    template: str


EMAIL_TEMPLATES: dict[str, EmailTemplateConfig] = {
    EmailType.REVIEW_REMINDER.value: {
        "subject": {
            "de": "Bewertungserinnerung: {company_name}",
            "en": "Review reminder: {company_name}",
        },
        "template": "emails/review_reminder.html",
    },
}

REMINDER_TEXTS: dict[str, dict[str, str]] = {
    "de": {
        "greeting": "Hallo",
        "greeting_named": "Hallo {name}",
        "intro": "Wir hoffen, Sie hatten eine gute Erfahrung bei {company_name}.",
        "cta": (
            "Würden Sie sich einen Moment Zeit nehmen, "
            "um eine Bewertung zu hinterlassen?"
        ),
        "button": "Jetzt bewerten",
        "thanks": "Vielen Dank für Ihre Unterstützung!",
        "footer": (
            "Sie erhalten diese E-Mail, weil Sie sich für "
            "Bewertungserinnerungen angemeldet haben."
        ),
    },
    "en": {
        "greeting": "Hello",
        "greeting_named": "Hello {name}",
        "intro": "We hope you had a great experience at {company_name}.",
        "cta": "Would you take a moment to share your experience with a review?",
        "button": "Write a Review",
        "thanks": "Thank you for your support!",
        "footer": (
            "You are receiving this email because you signed up for "
            "review reminders."
        ),
    },
}


def get_email_template(email_type: str) -> EmailTemplateConfig:
    """Get email template configuration for an email type.

    Args:
        email_type: The email type, e.g. "review_reminder".

    Returns:
        EmailTemplateConfig with localised subjects and template path.

    Raises:
        KeyError: If email_type is not found in EMAIL_TEMPLATES.
    """
    return EMAIL_TEMPLATES[email_type]


def resolve_language(language: str | None) -> str:
    """Return a language the templates support, falling back to German."""
    return language if language in REMINDER_TEXTS else FALLBACK_LANGUAGE
