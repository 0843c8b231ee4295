import pytest
from sqlalchemy import select

from dualpascal.auth import create_access_token, decode_access_token, hash_password, verify_password
from dualpascal.exceptions import (
    AccountSuspendedError,
    AuthenticationError,
    DuplicateResourceError,
    InvalidCredentialsError,
)
from dualpascal.models.user import User, UserStatus
from dualpascal.schemas.user import UserCreate
from dualpascal.services.auth_service import authenticate_user, register_user


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("secret123")
        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("wrong", hashed)


class TestTokens:
    def test_round_trip_subject(self):
        assert decode_access_token(create_access_token({"sub": "alice"})) == "alice"

    def test_missing_sub_rejected_on_create(self):
        with pytest.raises(ValueError):
            create_access_token({"user": "alice"})

    def test_garbage_token(self):
        with pytest.raises(AuthenticationError):
            decode_access_token("not-a-token")


class TestRegisterUser:
    async def test_register_enqueues_analytics(self, test_db, enqueued_jobs):
        user = await register_user(
            test_db, UserCreate(username="newbie", email="newbie@example.com", password="password1")
        )

        assert user.id is not None
        assert user.analytics_setup_completed is False
        assert enqueued_jobs == [("analytics_setup", user.id)]

    async def test_duplicate_username(self, test_db, test_user):
        with pytest.raises(DuplicateResourceError) as exc_info:
            await register_user(test_db, UserCreate(username="testuser", email="fresh@example.com", password="password1"))
        assert exc_info.value.details["field"] == "username"

    async def test_duplicate_email(self, test_db, test_user):
        with pytest.raises(DuplicateResourceError) as exc_info:
            await register_user(
                test_db, UserCreate(username="fresh", email="testuser@example.com", password="password1")
            )
        assert exc_info.value.details["field"] == "email"


class TestAuthenticateUser:
    async def test_by_username_or_email(self, test_db, test_user):
        assert (await authenticate_user(test_db, "testuser", "testpassword")).id == test_user.id
        assert (await authenticate_user(test_db, "testuser@example.com", "testpassword")).id == test_user.id

    async def test_wrong_password(self, test_db, test_user):
        with pytest.raises(InvalidCredentialsError):
            await authenticate_user(test_db, "testuser", "nope")

    async def test_suspended_account(self, test_db, test_user):
        result = await test_db.execute(select(User).where(User.id == test_user.id))
        user = result.scalars().one()
        user.status = UserStatus.suspended
        await test_db.commit()

        with pytest.raises(AccountSuspendedError):
            await authenticate_user(test_db, "testuser", "testpassword")
