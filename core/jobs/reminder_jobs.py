"""Background jobs for the reminder sweep.

The sweep runs on an rq worker. rq-scheduler enqueues it on a cron schedule,
every five minutes unless REMINDER_SWEEP_CRON says otherwise.
"""

from django.conf import settings

import django_rq
import structlog

from core.enums import ReminderMode
from core.exceptions import StoreFailureError
from core.services.reminder_sweep_service import reminder_sweep_service

logger = structlog.get_logger(__name__)

QUEUE_NAME = "default"
SWEEP_JOB_ID = "review-reminder-sweep"


def run_reminder_sweep_job(mode: str = ReminderMode.RECURRING.value) -> dict:
    """Run one reminder sweep on a worker.

    Args:
        mode: "recurring" or "one_shot".

    Returns:
        The sweep result as a JSON-ready dict, stored by rq as the job result.

    Raises:
        StoreFailureError: If the due subscriptions cannot be loaded. rq marks
            the job failed; the next scheduled run starts from scratch.
    """
    try:
        result = reminder_sweep_service.run(ReminderMode(mode))
    except StoreFailureError as e:
        logger.error("reminder_sweep_job_failed", mode=mode, error=str(e))
        raise

    logger.info(
        "reminder_sweep_job_completed",
        mode=mode,
        sent=result.sent_count,
        failed=result.failed_count,
        skipped=result.skipped_count,
    )
    return result.model_dump(mode="json", by_alias=True)


def enqueue_reminder_sweep(mode: str = ReminderMode.RECURRING.value):
    """Queue a single sweep for the next free worker."""
    queue = django_rq.get_queue(QUEUE_NAME)
    job = queue.enqueue(run_reminder_sweep_job, ReminderMode(mode).value)
    logger.info("reminder_sweep_enqueued", job_id=job.id, mode=mode)
    return job


def schedule_reminder_sweep(cron_string: str | None = None):
    """Register the periodic recurring sweep with rq-scheduler.

    Any job previously registered under SWEEP_JOB_ID is cancelled first, so
    calling this on every deploy leaves exactly one schedule.

    Args:
        cron_string: Cron expression; defaults to settings.REMINDER_SWEEP_CRON.

    Returns:
        The scheduled rq job.
    """
    cron_string = cron_string or settings.REMINDER_SWEEP_CRON
    scheduler = django_rq.get_scheduler(QUEUE_NAME)

    for job in scheduler.get_jobs():
        if job.id == SWEEP_JOB_ID:
            scheduler.cancel(job)
            logger.info("reminder_sweep_schedule_replaced", job_id=job.id)

    job = scheduler.cron(
        cron_string,
        func=run_reminder_sweep_job,
        args=[ReminderMode.RECURRING.value],
        id=SWEEP_JOB_ID,
        queue_name=QUEUE_NAME,
        repeat=None,
    )
    logger.info("reminder_sweep_scheduled", job_id=job.id, cron=cron_string)
    return job
