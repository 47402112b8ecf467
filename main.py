from __future__ import annotations

"""Command-line entry point.

    python main.py 新宿 フットサル            # one result per line
    echo 東京都 | python main.py --lang ko
    python main.py --events data/events.json  # localized events as JSON
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable, TextIO

from kanahangul.domain.enums import Language
from kanahangul.domain.transliterate import transliterate
from kanahangul.services.event_localizer import EventRecord, localize_event
from kanahangul.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Transliterate Japanese text into Korean.")
    parser.add_argument("text", nargs="*", help="Text to transliterate (reads stdin if omitted).")
    parser.add_argument("--lang", help="Target language: ko or ja (default from settings.yaml).")
    parser.add_argument("--events", type=Path, help="JSON file with a list of events to localize.")
    parser.add_argument("--settings", type=Path, help="Path to settings.yaml.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def load_events(path: Path) -> list[EventRecord]:
    """Read a JSON list of event objects; non-object entries are skipped."""
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("events", [])
    if not isinstance(data, list):
        raise ValueError("Expected a list of events in {}".format(path))

    events = []
    for raw in data:
        if isinstance(raw, dict):
            events.append(EventRecord.from_mapping(raw))
        else:
            logger.debug("Skipping non-object event entry: %r", raw)
    return events


def _iter_lines(stream: TextIO) -> Iterable[str]:
    for line in stream:
        yield line.rstrip("\r\n")


def run(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = _build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    store = SettingsStore(args.settings)
    level = logging.DEBUG if args.verbose else getattr(logging, store.get_log_level())
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        lang = Language.parse(args.lang) if args.lang is not None else store.get_language()
    except ValueError as e:
        print("[ERROR] {}".format(e), file=sys.stderr)
        return EXIT_USAGE

    if args.events is not None:
        try:
            events = load_events(args.events)
        except (OSError, UnicodeError, json.JSONDecodeError, ValueError) as e:
            print("[ERROR] Failed to read events from {}: {}".format(args.events, e), file=sys.stderr)
            return EXIT_USAGE
        logger.info("Localizing %d events to %s", len(events), lang.value)
        payload: list[dict[str, Any]] = [asdict(localize_event(ev, lang)) for ev in events]
        json.dump(payload, stdout, ensure_ascii=False, indent=2)
        stdout.write("\n")
        return EXIT_OK

    lines = args.text if args.text else _iter_lines(stdin)
    for line in lines:
        stdout.write(transliterate(line, lang) + "\n")
    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
