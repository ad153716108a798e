from __future__ import annotations
import logging
from typing import Optional

import httpx

from .config import ClientConfig, settings
from .errors import TransportError
from .models import Mail
from .utils.form import make_post_body

logger = logging.getLogger(__name__)


def _headers(api_key: str, user_agent: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/x-www-form-urlencoded",
        "User-Agent": user_agent,
    }


class SGClient:
    """Sends mail through the SendGrid v2 web API using a static API key."""

    def __init__(
        self,
        api_key: str,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self.config = config or ClientConfig()
        self._transport = transport

    @classmethod
    def from_env(
        cls,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> SGClient:
        if not settings.sendgrid_api_key:
            raise ValueError("SENDGRID_API_KEY is not set")
        return cls(
            settings.sendgrid_api_key,
            config=config or ClientConfig.from_settings(settings),
            transport=transport,
        )

    def send(self, mail: Mail) -> str:
        """
        Send ``mail`` and return the raw response body.

        The body is returned whatever the status code; it is the caller's
        job to interpret it.

        Raises:
            EncodingError: if the mail cannot be encoded. Nothing is sent.
            TransportError: if the request fails or the response cannot be read.
        """
        body = make_post_body(mail)
        headers = _headers(self._api_key, self.config.user_agent)

        logger.info("mail_send_request", extra={"endpoint": self.config.endpoint, "recipients": len(mail.to)})
        try:
            with httpx.Client(timeout=self.config.timeout_seconds, transport=self._transport) as client:
                resp = client.post(self.config.endpoint, content=body, headers=headers)
                text = resp.text
        except httpx.HTTPError as e:
            logger.warning("mail_send_transport_error", extra={"endpoint": self.config.endpoint, "error": str(e)})
            raise TransportError(str(e)) from e

        logger.info("mail_send_response", extra={"endpoint": self.config.endpoint, "status": resp.status_code})
        return text
