import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal import scheduler
from dualpascal.auth import hash_password, verify_password
from dualpascal.exceptions import AccountSuspendedError, DuplicateResourceError, InvalidCredentialsError
from dualpascal.models.user import RoleEnum, User, UserStatus
from dualpascal.schemas.user import UserCreate

logger = logging.getLogger(__name__)


async def register_user(db: AsyncSession, data: UserCreate) -> User:
    """
    Create an author account and queue analytics provisioning for it.

    Raises:
        DuplicateResourceError: username or email already taken
    """
    result = await db.execute(select(User).where(or_(User.username == data.username, User.email == data.email)))
    existing = result.scalars().first()
    if existing is not None:
        if existing.username == data.username:
            raise DuplicateResourceError("User", "username", data.username)
        raise DuplicateResourceError("User", "email", data.email)

    user = User(
        username=data.username,
        email=data.email,
        hashed_password=hash_password(data.password),
        role=RoleEnum.user,
        status=UserStatus.active,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise DuplicateResourceError("User", "username", data.username)
    await db.refresh(user)
    logger.info(f"User registered: {user.username} (id={user.id})")

    scheduler.enqueue_analytics_setup(user.id)
    return user


async def authenticate_user(db: AsyncSession, username: str, password: str) -> User:
    result = await db.execute(select(User).where(or_(User.username == username, User.email == username)))
    user = result.scalars().first()
    if user is None or not verify_password(password, user.hashed_password):
        logger.warning(f"Failed login attempt for '{username}'")
        raise InvalidCredentialsError("Invalid username or password")
    if user.status != UserStatus.active:
        raise AccountSuspendedError(user.status.value)
    return user
