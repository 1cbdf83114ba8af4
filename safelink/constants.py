"""Centralized constants for SafeLink.

This module contains the reason enum and the fixed lists shared by the
classification engine, the storage layer and the link scanner.
"""

from enum import Enum


class Reason(str, Enum):
    """Why a link was classified as suspicious."""

    UNENCRYPTED = "Unencrypted"  # Plain http:// transport
    BLACKLISTED = "Blacklisted"  # Matches a user blacklist entry
    IMPOSTER = "Imposter"  # Lookalike of a trusted domain

    def __str__(self) -> str:
        return self.value


# Domains we trust; lookalikes of these are reported as imposters.
TRUSTED_DOMAINS: tuple[str, ...] = (
    "google.com",
    "youtube.com",
    "facebook.com",
    "amazon.com",
    "reddit.com",
    "wikipedia.org",
    "twitter.com",
    "instagram.com",
    "linkedin.com",
    "paypal.com",
)

# Allow 2 "mistakes" (gogle.com, amaz0n.com)
TYPOSQUAT_MAX_DISTANCE = 2

# Storage keys
BLACKLIST_KEY = "safelink_blacklist"
SETTINGS_KEY = "safelink_settings"

WARNING_PREFIX = "SafeLink Warning"
WARNING_TEMPLATE = "{prefix}: This link is suspicious.\nReason: {reason}"


def format_warning(reason: Reason | str, prefix: str = WARNING_PREFIX) -> str:
    """Render the tooltip text attached to a suspicious link."""
    return WARNING_TEMPLATE.format(prefix=prefix, reason=str(reason))
