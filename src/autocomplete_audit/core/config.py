"""Configuration loading utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..i18n.messages import resolve_locale
from .errors import ConfigurationError

TRUTHY_VALUES = {"1", "true", "yes"}


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in TRUTHY_VALUES


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(slots=True)
class AuditConfig:
    """Holds runtime options for a single audit execution."""

    target_url: Optional[str]
    report_path: Optional[Path] = None
    session_cookie: Optional[str] = None
    headless: bool = True
    render: bool = False
    locale: str = "en-US"
    timeout: int = 10

    @property
    def timeout_ms(self) -> int:
        return self.timeout * 1000


def load_configuration(
    target_url: Optional[str] = None,
    report_name: Optional[str] = None,
    *,
    render: Optional[bool] = None,
    locale: Optional[str] = None,
    timeout: Optional[int] = None,
) -> AuditConfig:
    """Builds an ``AuditConfig`` from CLI input and environment variables."""

    load_dotenv()  # Loads .env values if present

    report_path = Path(report_name).resolve() if report_name else None
    render_value = render if render is not None else _env_flag("RENDER_JS")
    timeout_value = timeout if timeout is not None else _env_int("PAGE_TIMEOUT", 10)

    return AuditConfig(
        target_url=target_url.rstrip("/") if target_url else None,
        report_path=report_path,
        session_cookie=os.getenv("SESSION_COOKIE") or None,
        headless=_env_flag("HEADLESS", "true"),
        render=render_value,
        locale=resolve_locale(locale or os.getenv("AUDIT_LOCALE")),
        timeout=timeout_value,
    )
