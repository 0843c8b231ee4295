from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dualpascal.constants import ACCESS_TOKEN_EXPIRE_MINUTES, ALGORITHM, SECRET_KEY
from dualpascal.database import get_db
from dualpascal.exceptions import AccountSuspendedError, AdminRequiredError, AuthenticationError
from dualpascal.models.user import User

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if "sub" not in to_encode:
        raise ValueError("Missing 'sub' claim (username) in token data.")
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> str:
    """Return the username carried in the token's ``sub`` claim."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        logger.warning("Token expired")
        raise AuthenticationError("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT decoding failed: {e}")
        raise AuthenticationError("Invalid token")

    username = payload.get("sub")
    if username is None:
        logger.warning("Token is missing 'sub' claim")
        raise AuthenticationError("Token does not contain 'sub' field")
    return username


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    username = decode_access_token(token)
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalars().first()
    if user is None:
        logger.warning(f"Token subject '{username}' does not match any user")
        raise AuthenticationError("Could not validate credentials")
    if not user.is_active:
        raise AccountSuspendedError(user.status.value)
    return user


async def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        logger.warning(f"User {current_user.username} attempted an admin action")
        raise AdminRequiredError()
    return current_user
