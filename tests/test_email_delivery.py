import logging

import requests

from src.portfolio.domain.contact_models import ContactMessage
from src.portfolio.services.email_delivery import (
    NOT_CONFIGURED,
    EmailDeliveryClient,
    EmailJSConfig,
)

from .utils import VALID_MESSAGE


class _FakeResponse:
    def __init__(self, status_code: int, text: str = "OK") -> None:
        self.status_code = status_code
        self.text = text


class _FakeSession:
    def __init__(self, response=None, error=None) -> None:
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _config(**overrides) -> EmailJSConfig:
    values = dict(service_id="svc", template_id="tpl", public_key="pub", timeout=5.0)
    values.update(overrides)
    return EmailJSConfig(**values)


def _message() -> ContactMessage:
    return ContactMessage(**VALID_MESSAGE)


def test_send_posts_emailjs_payload():
    session = _FakeSession(response=_FakeResponse(200))
    client = EmailDeliveryClient(_config(private_key="secret"), session=session)

    result = client.send(_message())

    assert result.ok is True
    call = session.calls[0]
    assert call["url"] == "https://api.emailjs.com/api/v1.0/email/send"
    assert call["timeout"] == 5.0
    body = call["json"]
    assert body["service_id"] == "svc"
    assert body["template_id"] == "tpl"
    assert body["user_id"] == "pub"
    assert body["accessToken"] == "secret"
    assert body["template_params"] == VALID_MESSAGE


def test_send_without_private_key_omits_access_token():
    session = _FakeSession(response=_FakeResponse(200))
    EmailDeliveryClient(_config(base_url="http://mail.local/"), session=session).send(_message())
    assert session.calls[0]["url"] == "http://mail.local/api/v1.0/email/send"
    assert "accessToken" not in session.calls[0]["json"]


def test_rejected_response_is_failure():
    session = _FakeSession(response=_FakeResponse(400, "The service ID is invalid"))
    result = EmailDeliveryClient(_config(), session=session).send(_message())
    assert result.ok is False
    assert result.status_code == 400


def test_network_error_is_failure_not_exception():
    session = _FakeSession(error=requests.exceptions.ConnectionError("boom"))
    result = EmailDeliveryClient(_config(), session=session).send(_message())
    assert result.ok is False
    assert result.detail


def test_unconfigured_client_does_not_call_out():
    session = _FakeSession(response=_FakeResponse(200))
    result = EmailDeliveryClient(_config(template_id=""), session=session).send(_message())
    assert result.ok is False
    assert result.detail == NOT_CONFIGURED
    assert session.calls == []


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("EMAILJS_SERVICE_ID", "service_x")
    monkeypatch.setenv("EMAILJS_TEMPLATE_ID", "template_x")
    monkeypatch.setenv("EMAILJS_PUBLIC_KEY", "public_x")
    monkeypatch.setenv("EMAILJS_TIMEOUT", "not-a-number")
    monkeypatch.delenv("EMAILJS_PRIVATE_KEY", raising=False)
    monkeypatch.delenv("EMAILJS_BASE_URL", raising=False)

    cfg = EmailJSConfig.from_env()
    assert cfg.configured is True
    assert cfg.private_key is None
    assert cfg.base_url == "https://api.emailjs.com"
    assert cfg.timeout == 10.0


def test_config_missing_values_is_unconfigured(monkeypatch):
    for name in ("EMAILJS_SERVICE_ID", "EMAILJS_TEMPLATE_ID", "EMAILJS_PUBLIC_KEY"):
        monkeypatch.delenv(name, raising=False)
    assert EmailJSConfig.from_env().configured is False


def test_successful_send_does_not_log_sender_address(caplog):
    caplog.set_level(logging.DEBUG, logger="portfolio.contact")
    session = _FakeSession(response=_FakeResponse(200))
    EmailDeliveryClient(_config(), session=session).send(_message())

    assert any(r.getMessage() == "contact_delivery_sent" for r in caplog.records)
    assert all(VALID_MESSAGE["email"] not in r.getMessage() for r in caplog.records)
    assert all(VALID_MESSAGE["email"] not in str(r.__dict__) for r in caplog.records)
