import os
from typing import Optional

from pydantic import BaseModel


DEFAULT_API_URL = "https://api.sendgrid.com/api/mail.send.json"
DEFAULT_USER_AGENT = "sendgrid-python-sgclient"


def _parse_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        value = int(raw.strip())
        if value <= 0:
            raise ValueError
        return value
    except ValueError:
        # Fallback to default if malformed
        return int(default)


class Settings:
    # SendGrid credentials and endpoint
    sendgrid_api_key: Optional[str]
    sendgrid_api_url: str
    user_agent: str

    request_timeout_ms: int

    def __init__(self) -> None:
        self.sendgrid_api_key = os.getenv("SENDGRID_API_KEY") or None
        self.sendgrid_api_url = os.getenv("SENDGRID_API_URL", DEFAULT_API_URL)
        self.user_agent = os.getenv("SENDGRID_USER_AGENT", DEFAULT_USER_AGENT)
        self.request_timeout_ms = _parse_int("REQUEST_TIMEOUT_MS", "8000")


settings = Settings()


class ClientConfig(BaseModel):
    endpoint: str = settings.sendgrid_api_url
    user_agent: str = settings.user_agent
    timeout_seconds: float = settings.request_timeout_ms / 1000

    @classmethod
    def from_settings(cls, source: Settings) -> "ClientConfig":
        return cls(
            endpoint=source.sendgrid_api_url,
            user_agent=source.user_agent,
            timeout_seconds=source.request_timeout_ms / 1000,
        )
