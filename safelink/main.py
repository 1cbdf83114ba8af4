"""Command line entry point for SafeLink.

Usage:
    safelink check https://gogle.com http://example.com
    safelink scan page.html --base-url https://example.com/
    safelink blacklist add evil-phish.com
    safelink blacklist remove 0
    safelink settings set http off
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import LOG_LEVELS, Config, load_config, validate_config
from .constants import format_warning
from .engine import analyze_url
from .scanner import LinkScanner
from .storage import SETTING_FIELDS, BlacklistStore, KeyValueStore, SettingsStore

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level if level in LOG_LEVELS else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def _load_env_file(path: str) -> None:
    """Load environment variables from a .env-style file."""
    from dotenv import dotenv_values

    values = dotenv_values(path)
    for key, value in values.items():
        if value is None:
            continue
        os.environ[key] = value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="safelink", description="Flag suspicious links.")
    parser.add_argument("--env-file", help="Load environment variables from this file first")
    parser.add_argument("--store", help="Path to the storage JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Classify one or more URLs")
    check.add_argument("urls", nargs="+")

    scan = sub.add_parser("scan", help="Scan the links of an HTML file")
    scan.add_argument("file", type=Path)
    scan.add_argument("--base-url", help="Resolve relative links against this URL")

    blacklist = sub.add_parser("blacklist", help="Show or edit the blacklist")
    bl_sub = blacklist.add_subparsers(dest="action", required=True)
    bl_sub.add_parser("list")
    bl_add = bl_sub.add_parser("add")
    bl_add.add_argument("domain")
    bl_remove = bl_sub.add_parser("remove")
    bl_remove.add_argument("index", type=int)

    settings = sub.add_parser("settings", help="Show or change check toggles")
    st_sub = settings.add_subparsers(dest="action", required=True)
    st_sub.add_parser("show")
    st_set = st_sub.add_parser("set")
    st_set.add_argument("name", choices=sorted(SETTING_FIELDS))
    st_set.add_argument("value", choices=["on", "off"])

    return parser


def _cmd_check(args, config: Config, blacklist: BlacklistStore, settings: SettingsStore) -> int:
    entries = blacklist.entries()
    current = settings.load()
    suspicious = False
    for url in args.urls:
        result = analyze_url(url, entries, current)
        if result is None:
            print(f"SKIP\t{url}\t(no domain)")
        elif result.is_safe:
            print(f"SAFE\t{url}")
        else:
            suspicious = True
            print(f"WARN\t{url}\t{format_warning(result.reason, config.warning_prefix)!r}")
    return 1 if suspicious else 0


def _cmd_scan(args, config: Config, blacklist: BlacklistStore, settings: SettingsStore) -> int:
    try:
        raw_html = args.file.read_text(encoding="utf-8", errors="ignore")
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.file, exc)
        return 2
    scanner = LinkScanner(blacklist.entries(), settings.load(), config.warning_prefix)
    warnings = scanner.scan_html(raw_html, base_url=args.base_url)
    for warning in warnings:
        print(f"{warning.reason.value}\t{warning.url}")
    print(f"{len(warnings)} suspicious link(s)")
    return 1 if warnings else 0


def _cmd_blacklist(args, blacklist: BlacklistStore) -> int:
    if args.action == "add":
        added = blacklist.add(args.domain)
        print(f"Added {added}" if added else "Nothing added")
    elif args.action == "remove":
        removed = blacklist.remove(args.index)
        print(f"Removed {removed}" if removed else f"No entry at {args.index}")

    entries = blacklist.entries()
    if not entries:
        print("Blacklist is empty.")
    for index, domain in enumerate(entries):
        print(f"{index}\t{domain}")
    return 0


def _cmd_settings(args, settings: SettingsStore) -> int:
    if args.action == "set":
        settings.set_flag(args.name, args.value == "on")
    current = settings.load()
    for name, field_name in SETTING_FIELDS.items():
        print(f"{name}\t{'on' if getattr(current, field_name) else 'off'}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.env_file:
        _load_env_file(args.env_file)

    config = load_config()
    if args.store:
        config.store_path = Path(args.store)

    configure_logging(config.log_level)

    errors = validate_config(config)
    if errors:
        for error in errors:
            logger.error(error)
        return 2

    store = KeyValueStore(config.store_path)
    blacklist = BlacklistStore(store)
    blacklist.initialize(config.blacklist_file)
    settings = SettingsStore(store, config.default_settings)

    if args.command == "check":
        return _cmd_check(args, config, blacklist, settings)
    if args.command == "scan":
        return _cmd_scan(args, config, blacklist, settings)
    if args.command == "blacklist":
        return _cmd_blacklist(args, blacklist)
    return _cmd_settings(args, settings)


if __name__ == "__main__":
    sys.exit(main())
