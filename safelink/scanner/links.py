"""Scan page links and flag suspicious ones."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Iterable, Optional
from urllib.parse import urljoin

from ..constants import WARNING_PREFIX, Reason, format_warning
from ..engine.classifier import Settings, SettingsLike, classify, resolve_settings
from ..utils.domains import get_domain_from_url

logger = logging.getLogger(__name__)


class _AnchorExtractor(HTMLParser):
    """Collects href values of <a> tags; attribute entities arrive decoded."""

    def __init__(self) -> None:
        super().__init__()
        self.hrefs: list[str] = []

    def handle_starttag(self, tag: str, attrs) -> None:  # type: ignore[override]
        if tag != "a":
            return
        href = dict(attrs).get("href")
        if href and href.strip():
            self.hrefs.append(href.strip())

    def handle_startendtag(self, tag: str, attrs) -> None:  # type: ignore[override]
        self.handle_starttag(tag, attrs)


def extract_links(raw_html: str, base_url: Optional[str] = None) -> list[str]:
    """Return anchor hrefs in document order, resolved against base_url when given."""
    if not raw_html:
        return []
    parser = _AnchorExtractor()
    parser.feed(raw_html)
    parser.close()
    if base_url:
        return [urljoin(base_url, href) for href in parser.hrefs]
    return parser.hrefs


@dataclass(frozen=True)
class LinkWarning:
    """A suspicious link and the tooltip shown next to it."""

    url: str
    domain: str
    reason: Reason
    message: str


class LinkScanner:
    """Classifies links one at a time, each distinct URL only once."""

    def __init__(
        self,
        blacklist: Optional[Iterable[str]] = None,
        settings: SettingsLike = None,
        warning_prefix: str = WARNING_PREFIX,
    ):
        self.blacklist = tuple(blacklist or ())
        self.settings: Settings = resolve_settings(settings)
        self.warning_prefix = warning_prefix
        self._processed: set[str] = set()

    def process(self, url: str) -> Optional[LinkWarning]:
        """Classify a single link; None for safe, skipped, or already-seen links."""
        if not url or url in self._processed:
            return None
        self._processed.add(url)

        domain = get_domain_from_url(url)
        if not domain:
            return None

        result = classify(url, domain, self.blacklist, self.settings)
        if result.is_safe:
            return None

        logger.info("Suspicious link %s (%s)", url, result.label)
        return LinkWarning(
            url=url,
            domain=domain,
            reason=result.reason,
            message=format_warning(result.reason, self.warning_prefix),
        )

    def scan(self, urls: Iterable[str]) -> list[LinkWarning]:
        warnings: list[LinkWarning] = []
        for url in urls:
            warning = self.process(url)
            if warning:
                warnings.append(warning)
        return warnings

    def scan_html(self, raw_html: str, base_url: Optional[str] = None) -> list[LinkWarning]:
        """Scan every anchor in an HTML document."""
        return self.scan(extract_links(raw_html, base_url))
