#!/usr/bin/env python
"""Script to run the Django development server for the review service."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Run the Django development server via the runlocal command.

    LOCAL_ADDRPORT (for example "0.0.0.0:8010") overrides runserver's default
    address. The database may be down; readiness reports it.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "review_service.settings")
    argv = [sys.argv[0], "runlocal"]
    addrport = os.getenv("LOCAL_ADDRPORT")
    if addrport:
        argv.append(addrport)
    execute_from_command_line(argv)


if __name__ == "__main__":
    main()
