"""Register the periodic reminder sweep with rq-scheduler."""

from django.core.management.base import BaseCommand

from core.jobs.reminder_jobs import schedule_reminder_sweep


class Command(BaseCommand):
    """Replace the reminder sweep schedule."""

    help = "Schedule the recurring review reminder sweep"

    def add_arguments(self, parser):
        """Register --cron."""
        parser.add_argument(
            "--cron",
            default=None,
            help="Cron expression (default: REMINDER_SWEEP_CRON setting)",
        )

    def handle(self, *_args, **options):
        """Schedule the sweep and report the job id."""
        job = schedule_reminder_sweep(options["cron"])
        self.stdout.write(self.style.SUCCESS(f"Scheduled sweep job {job.id}"))
