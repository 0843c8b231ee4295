import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal import scheduler
from dualpascal.config import settings
from dualpascal.exceptions import ContactNotFoundError
from dualpascal.models.contact import Contact
from dualpascal.schemas.contact import ContactCreate
from dualpascal.utils.pagination import Page, paginate

logger = logging.getLogger(__name__)


async def create_contact(db: AsyncSession, data: ContactCreate) -> Contact:
    """Store a contact submission and queue the operator notification."""
    contact = Contact(name=data.name, email=data.email, subject=data.subject, message=data.message)
    db.add(contact)
    await db.commit()
    await db.refresh(contact)
    logger.info(f"Contact received: id={contact.id}")
    scheduler.enqueue_contact_notification(contact.id)
    return contact


async def list_contacts(db: AsyncSession, page: int | None = 1) -> Page[Contact]:
    stmt = select(Contact).order_by(Contact.created_at.desc(), Contact.id.desc())
    return await paginate(db, stmt, page, settings.dashboard_page_size)


async def get_contact(db: AsyncSession, contact_id: int) -> Contact:
    contact = await db.get(Contact, contact_id)
    if contact is None:
        raise ContactNotFoundError(contact_id)
    return contact


async def set_contact_resolved(db: AsyncSession, contact_id: int, resolved: bool) -> Contact:
    contact = await get_contact(db, contact_id)
    contact.resolved = resolved
    await db.commit()
    await db.refresh(contact)
    logger.info(f"Contact {contact_id} marked {'resolved' if resolved else 'unresolved'}")
    return contact
