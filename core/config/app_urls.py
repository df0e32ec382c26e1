"""Front-end URL configuration.

Links placed in reminder emails point at the review front end, whose base
URL comes from the APP_BASE_URL setting.
"""

from django.conf import settings

# Review page of a company, relative to the front-end base URL
REVIEW_PAGE_PATH = "/review/{slug}"

# Query parameter carrying the subscriber id on personalised review links
SUBSCRIBER_QUERY_PARAM = "sid"


def get_app_base_url() -> str:
    """Return the configured front-end base URL without a trailing slash."""
    return settings.APP_BASE_URL.rstrip("/")
