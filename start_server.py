"""Production server startup script for the review reminder service.

This module provides the entry point for starting the Django application
with Gunicorn in production environments.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the review reminder service using Gunicorn.

    Worker count and request timeout come from GUNICORN_WORKERS and
    GUNICORN_TIMEOUT. The timeout defaults to 300 seconds because the
    cron-triggered sweep sends its reminders inside the request.
    """
    sys.argv = [
        "gunicorn",
        "review_service.wsgi:application",
        "--bind",
        os.getenv("GUNICORN_BIND", "0.0.0.0:8000"),
        "--workers",
        os.getenv("GUNICORN_WORKERS", "2"),
        "--threads",
        "2",
        "--timeout",
        os.getenv("GUNICORN_TIMEOUT", "300"),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
