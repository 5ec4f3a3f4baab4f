from __future__ import annotations

"""Outbound delivery of contact-form messages through the EmailJS REST API.

Env vars:
- EMAILJS_SERVICE_ID, EMAILJS_TEMPLATE_ID, EMAILJS_PUBLIC_KEY (required to send)
- EMAILJS_PRIVATE_KEY (optional access token)
- EMAILJS_BASE_URL (default https://api.emailjs.com)
- EMAILJS_TIMEOUT (seconds, default 10)
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..domain.contact_models import ContactMessage
from ..observability.metrics import CONTACT_MESSAGES

LOG = logging.getLogger("portfolio.contact")

DEFAULT_BASE_URL = "https://api.emailjs.com"
SEND_PATH = "/api/v1.0/email/send"
NOT_CONFIGURED = "email delivery not configured"


@dataclass
class DeliveryResult:
    ok: bool
    detail: Optional[str] = None
    status_code: Optional[int] = None


@dataclass
class EmailJSConfig:
    service_id: str
    template_id: str
    public_key: str
    private_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0

    @staticmethod
    def from_env() -> "EmailJSConfig":
        try:
            timeout = float(os.getenv("EMAILJS_TIMEOUT", "10"))
        except ValueError:
            timeout = 10.0
        return EmailJSConfig(
            service_id=os.getenv("EMAILJS_SERVICE_ID", ""),
            template_id=os.getenv("EMAILJS_TEMPLATE_ID", ""),
            public_key=os.getenv("EMAILJS_PUBLIC_KEY", ""),
            private_key=os.getenv("EMAILJS_PRIVATE_KEY") or None,
            base_url=os.getenv("EMAILJS_BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
        )

    @property
    def configured(self) -> bool:
        return bool(self.service_id and self.template_id and self.public_key)


def _build_session() -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=2,
        backoff_factor=0.5,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset(["POST"]),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


class EmailDeliveryClient:
    def __init__(self, config: EmailJSConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self._session = session or _build_session()

    def _payload(self, message: ContactMessage) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "service_id": self.config.service_id,
            "template_id": self.config.template_id,
            "user_id": self.config.public_key,
            "template_params": message.template_params(),
        }
        if self.config.private_key:
            payload["accessToken"] = self.config.private_key
        return payload

    def send(self, message: ContactMessage) -> DeliveryResult:
        """Deliver one message. Never raises; failures come back as ``ok=False``."""
        if not self.config.configured:
            LOG.warning("EmailJS not fully configured; skipping contact message send")
            CONTACT_MESSAGES.labels(outcome="unconfigured").inc()
            return DeliveryResult(ok=False, detail=NOT_CONFIGURED)

        url = f"{self.config.base_url.rstrip('/')}{SEND_PATH}"
        try:
            resp = self._session.post(url, json=self._payload(message), timeout=self.config.timeout)
        except requests.exceptions.RequestException as exc:
            LOG.warning("contact_delivery_error", extra={"url": url, "err": str(exc)})
            CONTACT_MESSAGES.labels(outcome="error").inc()
            return DeliveryResult(ok=False, detail="email delivery unavailable")

        if resp.status_code >= 400:
            LOG.warning(
                "contact_delivery_rejected",
                extra={"status": resp.status_code, "body": (resp.text or "")[:200]},
            )
            CONTACT_MESSAGES.labels(outcome="rejected").inc()
            return DeliveryResult(ok=False, detail="email delivery rejected", status_code=resp.status_code)

        LOG.info("contact_delivery_sent", extra={"status": resp.status_code})
        CONTACT_MESSAGES.labels(outcome="sent").inc()
        return DeliveryResult(ok=True, status_code=resp.status_code)


@lru_cache(maxsize=1)
def get_delivery_client() -> EmailDeliveryClient:
    return EmailDeliveryClient(EmailJSConfig.from_env())
