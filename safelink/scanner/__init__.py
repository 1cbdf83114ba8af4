"""Page link scanning for SafeLink."""

from .links import LinkScanner, LinkWarning, extract_links

__all__ = ["LinkScanner", "LinkWarning", "extract_links"]
