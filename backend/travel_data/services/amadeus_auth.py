"""Amadeus OAuth2 — exchanges client credentials for a bearer token."""

import logging

import httpx

from travel_data.config import Settings, settings as default_settings
from travel_data.services.errors import AuthError
from travel_data.services.http_client import get_http_client

logger = logging.getLogger(__name__)


class AmadeusAuthService:
    """Fetches a fresh access token on every call; nothing is cached."""

    def __init__(self, client: httpx.AsyncClient | None = None, settings: Settings | None = None):
        self._client = client
        self._settings = settings or default_settings

    async def acquire_token(self) -> str:
        """POST the client_credentials grant and return the access token."""
        client = self._client or get_http_client()
        try:
            resp = await client.post(
                self._settings.amadeus_token_url,
                data={
                    "grant_type": "client_credentials",
                    "client_id": self._settings.amadeus_client_id,
                    "client_secret": self._settings.amadeus_client_secret,
                },
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except httpx.RequestError as e:
            logger.error(f"Amadeus token request failed: {e}")
            raise AuthError("Token endpoint unreachable") from e

        if not resp.is_success:
            logger.error(f"Amadeus token error: {resp.status_code}")
            raise AuthError(
                "Token request rejected",
                status_code=resp.status_code,
                details={"body": resp.text},
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise AuthError("Token response is not JSON") from e

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            logger.error("Amadeus token response has no access_token")
            raise AuthError("Token response has no access_token")

        logger.info("Amadeus token acquired")
        return str(token)
