"""Development server that does not check migrations.

The review tables belong to the platform database and are not migrated by
this service, so the server starts even when the database is unreachable and
readiness reports it as not ready.
"""

from django.core.management.commands.runserver import Command as RunServer


class Command(RunServer):
    """runserver without the migration check."""

    help = "Start development server without migration checks"

    def check_migrations(self, *_args, **_kwargs):
        """Skip migration checks; the schema is managed outside this service."""
        self.stdout.write(
            self.style.WARNING("Skipping migration checks (external review schema)")
        )
