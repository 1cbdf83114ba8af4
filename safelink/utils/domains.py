"""Domain normalization utilities."""

from __future__ import annotations

import logging
import re
from urllib.parse import urlparse

import idna

logger = logging.getLogger(__name__)

_BLACKLIST_PREFIX_RE = re.compile(r"^(?:https?://)?(?:www\.)?", re.IGNORECASE)


def _ascii_host(host: str) -> str | None:
    """Return the ASCII (punycode) form of a host, as browsers report it."""
    if host.isascii():
        return host
    try:
        return idna.encode(host, uts46=True).decode("ascii")
    except (idna.IDNAError, UnicodeError):
        return None


def get_domain_from_url(url: str) -> str | None:
    """
    Extract the normalized host from a link URL.

    - Lowercase
    - Strip one leading "www."
    - Ignore scheme/port/path/query/fragment

    Returns None when the value has no host (mailto:, javascript:, relative
    links) or cannot be parsed at all.
    """
    raw = (url or "").strip()
    if not raw:
        return None

    try:
        parsed = urlparse(raw)
        host = parsed.hostname
    except ValueError as exc:
        logger.debug("Unparseable URL %r: %s", raw, exc)
        return None

    if not parsed.scheme or not host:
        return None

    host = _ascii_host(host.lower())
    if not host:
        return None

    if host.startswith("www."):
        host = host[4:]

    return host or None


def clean_blacklist_entry(value: str) -> str:
    """Normalize user input for the blacklist (scheme, www. and path removed)."""
    raw = (value or "").strip().lower()
    if not raw:
        return ""
    return _BLACKLIST_PREFIX_RE.sub("", raw, count=1).split("/")[0]
