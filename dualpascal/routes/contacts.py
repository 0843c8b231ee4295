from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal.database import get_db
from dualpascal.schemas.contact import ContactCreate, ContactResponse
from dualpascal.services.contact_service import create_contact

router = APIRouter()


@router.post("/contacts", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact(contact: ContactCreate, db: AsyncSession = Depends(get_db)):
    return await create_contact(db, contact)
