"""Fetches page markup, either as served or as rendered by a browser."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

import requests
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..core.config import AuditConfig
from ..core.errors import PageLoadError
from .utils import parse_session_cookie

logger = logging.getLogger(__name__)


def fetch_static_html(
    url: str,
    *,
    session_cookie: Optional[str] = None,
    timeout: int = 10,
) -> str:
    """Downloads the page HTML without executing scripts."""

    session = requests.Session()
    cookie = parse_session_cookie(session_cookie)
    if cookie:
        name, value = cookie
        session.cookies.set(name, value, domain=urlparse(url).hostname or "")

    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise PageLoadError(f"Failed to fetch {url}: {exc}") from exc

    logger.debug("Fetched %s (%d bytes)", url, len(response.text))
    return response.text


def render_page_html(config: AuditConfig) -> str:
    """Loads ``config.target_url`` in Chromium and returns the rendered DOM."""

    if not config.target_url:
        raise PageLoadError("No target URL configured")

    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=config.headless)
        try:
            context = browser.new_context()
            page = context.new_page()
            _apply_session_cookie(page, config)

            try:
                page.goto(config.target_url, timeout=config.timeout_ms)
            except (PlaywrightTimeoutError, PlaywrightError) as exc:
                raise PageLoadError(f"Failed to render {config.target_url}: {exc}") from exc

            _wait_settled(page)
            return page.content()
        finally:
            browser.close()


def _apply_session_cookie(page: Page, config: AuditConfig) -> bool:
    cookie = parse_session_cookie(config.session_cookie)
    domain = urlparse(config.target_url or "").hostname
    if not cookie or not domain:
        return False

    name, value = cookie
    page.context.add_cookies(
        [
            {
                "name": name,
                "value": value,
                "domain": domain,
                "path": "/",
            }
        ]
    )
    return True


def _wait_settled(page: Page) -> None:
    try:
        try:
            page.wait_for_load_state("networkidle", timeout=3000)
        except PlaywrightTimeoutError:
            try:
                page.wait_for_load_state("domcontentloaded", timeout=1500)
            except PlaywrightTimeoutError:
                logger.debug("Page did not settle; reading content as is")
                page.wait_for_timeout(300)
    except PlaywrightError as exc:
        raise PageLoadError(f"Page closed while loading: {exc}") from exc
