"""
Analytics Service

Provisions an Umami website and public share link for each new author.
Provisioning runs only as a background job; failures are logged and leave
``analytics_setup_completed`` false so the dashboard keeps showing the
"setup in progress" state.
"""

import logging
import secrets
import string
from typing import Any

import httpx

from dualpascal import database
from dualpascal.config import settings
from dualpascal.exceptions import AnalyticsProvisioningError
from dualpascal.models.user import User
from dualpascal.schemas.user import AnalyticsOverview

logger = logging.getLogger(__name__)

SHARE_ID_ALPHABET = string.ascii_letters + string.digits
SHARE_ID_LENGTH = 10


def generate_share_id() -> str:
    return "".join(secrets.choice(SHARE_ID_ALPHABET) for _ in range(SHARE_ID_LENGTH))


class UmamiClient:
    """Minimal async client for the Umami HTTP API (login, create site, enable sharing)."""

    def __init__(
        self,
        base_url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.umami_base_url).rstrip("/")
        self.username = username or settings.umami_username
        self.password = password if password is not None else settings.umami_password
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "UmamiClient":
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(settings.umami_read_timeout, connect=settings.umami_connect_timeout),
            verify=settings.umami_verify_ssl,
            transport=self._transport,
            headers={
                "Accept": "application/json",
                "User-Agent": f"{settings.app_name}/{settings.app_version}",
            },
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _post(self, step: str, path: str, payload: dict[str, Any], token: str | None = None) -> dict[str, Any]:
        if self._client is None:
            raise RuntimeError("UmamiClient must be used as an async context manager")
        headers = {"Authorization": f"Bearer {token}"} if token else None
        response = await self._client.post(path, json=payload, headers=headers)
        if response.status_code not in (200, 201):
            raise AnalyticsProvisioningError(step, response.status_code)
        return response.json()

    async def login(self) -> str:
        data = await self._post("login", "/api/auth/login", {"username": self.username, "password": self.password})
        token = data.get("token")
        if not token:
            raise AnalyticsProvisioningError("login")
        return token

    async def create_website(self, token: str, name: str, domain: str) -> dict[str, Any]:
        data = await self._post("create_website", "/api/websites", {"name": name, "domain": domain}, token)
        if not data.get("id"):
            raise AnalyticsProvisioningError("create_website")
        return data

    async def enable_share(self, token: str, website_id: str) -> str:
        """Turn on public sharing for a website and return its share id."""
        share_id = generate_share_id()
        data = await self._post(
            "enable_share",
            f"/api/websites/{website_id}",
            {"id": website_id, "shareId": share_id},
            token,
        )
        return data.get("shareId") or share_id

    def share_url(self, share_id: str) -> str:
        return f"{self.base_url}/share/{share_id}"


async def provision_analytics_for_user(user_id: int, transport: httpx.AsyncBaseTransport | None = None) -> bool:
    """
    Background job: create the analytics website and share link for a user.

    Returns:
        bool: True when the user ends up provisioned, False otherwise. Never raises
        for provider or network failures.
    """
    async with database.AsyncSessionLocal() as db:
        user = await db.get(User, user_id)
        if user is None:
            logger.warning(f"Analytics setup skipped, user {user_id} not found")
            return False
        if user.analytics_setup_completed:
            return True

        logger.info(f"Analytics setup started for user {user_id}")
        try:
            async with UmamiClient(transport=transport) as client:
                token = await client.login()
                website = await client.create_website(
                    token,
                    name=f"{user.username} - {settings.app_name}",
                    domain=settings.umami_site_domain,
                )
                share_id = await client.enable_share(token, website["id"])
                share_url = client.share_url(share_id)
        except (httpx.HTTPError, AnalyticsProvisioningError, ValueError) as e:
            logger.error(f"Analytics setup failed for user {user_id}: {e}")
            return False

        user.umami_website_id = str(website["id"])
        user.umami_share_url = share_url
        user.analytics_setup_completed = True
        await db.commit()
        logger.info(f"Analytics setup completed for user {user_id}")
        return True


def analytics_overview(user: User) -> AnalyticsOverview:
    return AnalyticsOverview(
        has_analytics=user.has_analytics,
        dashboard_url=user.umami_share_url,
        setup_in_progress=not user.analytics_setup_completed,
    )
