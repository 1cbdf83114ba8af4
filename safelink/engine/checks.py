"""Individual link checks used by the classifier."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..constants import TRUSTED_DOMAINS, TYPOSQUAT_MAX_DISTANCE
from .levenshtein import levenshtein

logger = logging.getLogger(__name__)


def is_http(url: str) -> bool:
    """Whether the link uses plaintext HTTP (literal, case-sensitive prefix)."""
    return (url or "").startswith("http://")


def is_blacklisted(domain: str, blacklist: Optional[Iterable[str]]) -> bool:
    """Whether any blacklist entry appears anywhere inside the domain.

    Matching is plain substring containment: "evil.com" also matches
    "notevil.com.phish.net". Both sides are expected to be lower-case already.
    """
    if not domain or not blacklist:
        return False
    for entry in blacklist:
        if entry and entry in domain:
            logger.debug("%s matched blacklist entry %s", domain, entry)
            return True
    return False


def is_typosquatted(
    domain: str,
    trusted_domains: Iterable[str] = TRUSTED_DOMAINS,
    max_distance: int = TYPOSQUAT_MAX_DISTANCE,
) -> bool:
    """Whether the domain is close to, but not the same as, a trusted domain."""
    if not domain:
        return False
    for trusted in trusted_domains:
        distance = levenshtein(domain, trusted)
        if 0 < distance <= max_distance:
            logger.debug("%s looks like %s (distance %d)", domain, trusted, distance)
            return True
    return False
