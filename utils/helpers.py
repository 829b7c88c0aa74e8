"""Helper utility functions."""

from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlencode, urljoin


def utc_today(now: Optional[datetime] = None) -> str:
    """Current UTC calendar day as YYYY-MM-DD."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.date().isoformat()


def strip_code_fence(content: str) -> str:
    """Remove a markdown code fence wrapped around model output."""
    content = content.strip()
    if "```json" in content:
        content = content.split("```json")[1].split("```")[0].strip()
    elif content.startswith("```"):
        content = content.split("```")[1].split("```")[0].strip()
    return content


def build_redirect_url(base_url: str, path: str, **params: str) -> str:
    """Absolute URL for ``path`` on the same origin as ``base_url``."""
    url = urljoin(base_url, path)
    if params:
        url = f"{url}?{urlencode(params)}"
    return url
