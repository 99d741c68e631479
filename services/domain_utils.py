from __future__ import annotations

import re
from typing import Optional


_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)
_LINKEDIN_PREFIX_RE = re.compile(r"^(?:[a-z0-9\-]+\.)*linkedin\.com(?:/in)?/?", re.IGNORECASE)

LINKEDIN_PROFILE_BASE = "https://linkedin.com/in/"


def has_scheme(value: Optional[str]) -> bool:
    if not value:
        return False
    return bool(_SCHEME_RE.match(value))


def website_href(website: Optional[str]) -> Optional[str]:
    """Link target for a stored website; None when nothing is stored."""
    if not website:
        return None
    if has_scheme(website):
        return website
    return f"https://{website}"


def linkedin_href(linkedin: Optional[str]) -> Optional[str]:
    """Link target for a stored LinkedIn URL or bare profile slug."""
    if not linkedin:
        return None
    if has_scheme(linkedin):
        return linkedin
    return f"{LINKEDIN_PROFILE_BASE}{linkedin}"


def strip_scheme(url: str) -> str:
    text = _SCHEME_RE.sub("", url.strip())
    if text.lower().startswith("www."):
        text = text[4:]
    return text.rstrip("/")


def display_website(website: Optional[str]) -> str:
    if not website:
        return ""
    return strip_scheme(website)


def display_linkedin(linkedin: Optional[str]) -> str:
    """Profile slug (or whatever follows the LinkedIn host) for display."""
    if not linkedin:
        return ""
    text = strip_scheme(linkedin)
    stripped = _LINKEDIN_PREFIX_RE.sub("", text)
    return stripped.rstrip("/") or text
