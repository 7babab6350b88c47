from types import SimpleNamespace

import requests
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from requests.cookies import RequestsCookieJar

from tests.helpers.pytest_import import pytest
from tests.helpers.autocomplete_imports import AuditConfig, PageLoadError, loader


class FakeResponse:
    def __init__(self, text="<html></html>", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    def __init__(self, response=None, error=None):
        self.cookies = RequestsCookieJar()
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def get(self, url, timeout):
        self.calls.append((url, timeout))
        if self.error:
            raise self.error
        return self.response


def test_fetch_static_html_sets_session_cookie(monkeypatch):
    session = FakeSession(FakeResponse("<form></form>"))
    monkeypatch.setattr(loader.requests, "Session", lambda: session)

    html = loader.fetch_static_html("https://app.test/login", session_cookie="sid=abc", timeout=3)

    assert html == "<form></form>"
    assert session.calls == [("https://app.test/login", 3)]
    assert session.cookies.get("sid", domain="app.test") == "abc"


def test_fetch_static_html_ignores_incomplete_cookie(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(loader.requests, "Session", lambda: session)

    loader.fetch_static_html("https://app.test", session_cookie="sid=")

    assert len(session.cookies) == 0


def test_fetch_static_html_wraps_request_errors(monkeypatch):
    session = FakeSession(error=requests.ConnectionError("refused"))
    monkeypatch.setattr(loader.requests, "Session", lambda: session)

    with pytest.raises(PageLoadError):
        loader.fetch_static_html("https://app.test")


def test_fetch_static_html_rejects_error_status(monkeypatch):
    session = FakeSession(FakeResponse(status_code=404))
    monkeypatch.setattr(loader.requests, "Session", lambda: session)

    with pytest.raises(PageLoadError):
        loader.fetch_static_html("https://app.test/missing")


def test_render_page_html_requires_target():
    with pytest.raises(PageLoadError):
        loader.render_page_html(AuditConfig(target_url=None))


def test_apply_session_cookie_targets_page_host():
    added = []
    page = SimpleNamespace(context=SimpleNamespace(add_cookies=added.extend))
    config = AuditConfig(target_url="https://shop.test/checkout", session_cookie="sid = abc")

    assert loader._apply_session_cookie(page, config) is True
    assert added == [{"name": "sid", "value": "abc", "domain": "shop.test", "path": "/"}]


def test_apply_session_cookie_skips_without_cookie():
    page = SimpleNamespace(context=SimpleNamespace(add_cookies=lambda _: pytest.fail("unexpected")))

    assert loader._apply_session_cookie(page, AuditConfig(target_url="https://shop.test")) is False


def test_wait_settled_falls_back_on_timeouts():
    calls = []

    def wait_for_load_state(state, timeout):
        calls.append(state)
        raise PlaywrightTimeoutError("slow")

    page = SimpleNamespace(
        wait_for_load_state=wait_for_load_state,
        wait_for_timeout=lambda ms: calls.append(ms),
    )

    loader._wait_settled(page)

    assert calls == ["networkidle", "domcontentloaded", 300]


def test_wait_settled_wraps_closed_page_errors():
    def wait_for_load_state(state, timeout):
        raise PlaywrightError("Target page, context or browser has been closed")

    page = SimpleNamespace(wait_for_load_state=wait_for_load_state)

    with pytest.raises(PageLoadError):
        loader._wait_settled(page)
