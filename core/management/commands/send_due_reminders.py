"""Run a reminder sweep from the command line."""

import json

from django.core.management.base import BaseCommand, CommandError

from core.enums import ReminderMode
from core.exceptions import StoreFailureError
from core.jobs.reminder_jobs import enqueue_reminder_sweep
from core.services.reminder_sweep_service import reminder_sweep_service


class Command(BaseCommand):
    """Send every due reminder now, or hand the sweep to an rq worker."""

    help = "Send review reminders for all due subscriptions"

    def add_arguments(self, parser):
        """Register --mode and --enqueue."""
        parser.add_argument(
            "--mode",
            choices=[mode.value for mode in ReminderMode],
            default=ReminderMode.RECURRING.value,
            help="recurring reschedules sent subscriptions, one_shot clears them",
        )
        parser.add_argument(
            "--enqueue",
            action="store_true",
            help="Queue the sweep for an rq worker instead of running it here",
        )

    def handle(self, *_args, **options):
        """Run or enqueue the sweep and print the outcome."""
        mode = ReminderMode(options["mode"])

        if options["enqueue"]:
            job = enqueue_reminder_sweep(mode.value)
            self.stdout.write(self.style.SUCCESS(f"Enqueued sweep job {job.id}"))
            return

        try:
            result = reminder_sweep_service.run(mode)
        except StoreFailureError as e:
            raise CommandError(str(e)) from e

        self.stdout.write(
            json.dumps(result.model_dump(mode="json", by_alias=True), indent=2)
        )
        style = self.style.SUCCESS if result.failed_count == 0 else self.style.WARNING
        self.stdout.write(
            style(
                f"Sent {result.sent_count}, failed {result.failed_count}, "
                f"skipped {result.skipped_count}"
            )
        )
