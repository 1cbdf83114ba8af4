"""Link classification: runs the checks in priority order."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from ..constants import Reason
from ..utils.domains import get_domain_from_url
from .checks import is_blacklisted, is_http, is_typosquatted

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Per-check toggles. Every check is enabled unless switched off."""

    check_http: bool = True
    check_blacklist: bool = True
    check_imposter: bool = True

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Settings":
        """Build settings from the stored camelCase object; missing keys stay on."""
        if not isinstance(data, Mapping):
            return cls()

        def _flag(key: str) -> bool:
            value = data.get(key)
            return True if value is None else bool(value)

        return cls(
            check_http=_flag("checkHttp"),
            check_blacklist=_flag("checkBlacklist"),
            check_imposter=_flag("checkImposter"),
        )

    def to_mapping(self) -> dict[str, bool]:
        return {
            "checkHttp": self.check_http,
            "checkBlacklist": self.check_blacklist,
            "checkImposter": self.check_imposter,
        }


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one link."""

    reason: Optional[Reason] = None

    @property
    def is_safe(self) -> bool:
        return self.reason is None

    @property
    def is_suspicious(self) -> bool:
        return self.reason is not None

    @property
    def label(self) -> Optional[str]:
        """The reason label, or None for a safe link."""
        return self.reason.value if self.reason else None


SAFE = ClassificationResult()

SettingsLike = Union[Settings, Mapping[str, Any], None]

# (settings flag, predicate(url, domain, blacklist), reason); first hit wins.
_CHECKS: tuple[tuple[str, Callable[[str, str, tuple[str, ...]], bool], Reason], ...] = (
    ("check_http", lambda url, domain, blacklist: is_http(url), Reason.UNENCRYPTED),
    ("check_blacklist", lambda url, domain, blacklist: is_blacklisted(domain, blacklist), Reason.BLACKLISTED),
    ("check_imposter", lambda url, domain, blacklist: is_typosquatted(domain), Reason.IMPOSTER),
)


def resolve_settings(settings: SettingsLike) -> Settings:
    if isinstance(settings, Settings):
        return settings
    return Settings.from_mapping(settings)


def classify(
    url: str,
    domain: str,
    blacklist: Optional[Iterable[str]] = None,
    settings: SettingsLike = None,
) -> ClassificationResult:
    """
    Classify a link whose domain has already been extracted.

    Checks run in a fixed order (transport, blacklist, imposter) and the first
    enabled check that fires decides the reason. Disabled checks are skipped.
    """
    resolved = resolve_settings(settings)
    entries = tuple(blacklist or ())

    for flag, predicate, reason in _CHECKS:
        if getattr(resolved, flag) and predicate(url, domain, entries):
            return ClassificationResult(reason=reason)
    return SAFE


def analyze_url(
    url: str,
    blacklist: Optional[Iterable[str]] = None,
    settings: SettingsLike = None,
) -> Optional[ClassificationResult]:
    """Extract the domain and classify; None when the link has no domain."""
    domain = get_domain_from_url(url)
    if not domain:
        logger.debug("Skipping link without a domain: %r", url)
        return None
    return classify(url, domain, blacklist, settings)
