import asyncio
import logging
from datetime import datetime, timezone

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.date import DateTrigger

from dualpascal import database
from dualpascal.models.contact import Contact
from dualpascal.services.analytics_service import provision_analytics_for_user
from dualpascal.services.email_service import email_service

scheduler = AsyncIOScheduler()

logger = logging.getLogger(__name__)


async def send_contact_notification(contact_id: int) -> bool:
    async with database.AsyncSessionLocal() as db:
        contact = await db.get(Contact, contact_id)
    if contact is None:
        logger.warning(f"[Scheduler] Contact {contact_id} vanished before notification")
        return False
    sent = await asyncio.to_thread(email_service.send_new_contact_notification, contact)
    logger.info(f"[Scheduler] Contact {contact_id} notification sent={sent}")
    return sent


def _run_now(func, job_id: str, *args) -> None:
    scheduler.add_job(
        func,
        trigger=DateTrigger(run_date=datetime.now(timezone.utc)),
        args=list(args),
        id=job_id,
        replace_existing=True,
        misfire_grace_time=None,
    )
    logger.info(f"[Scheduler] Job {job_id} enqueued")


def enqueue_analytics_setup(user_id: int) -> None:
    _run_now(provision_analytics_for_user, f"analytics_setup_{user_id}", user_id)


def enqueue_contact_notification(contact_id: int) -> None:
    _run_now(send_contact_notification, f"contact_notification_{contact_id}", contact_id)
