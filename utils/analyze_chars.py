from __future__ import annotations

"""List the katakana and kanji used by scraped events.

Imports the `kanahangul` package, so either install it (`pip install -e .`)
or run from the repository root as a module:

    python -m utils.analyze_chars data/events.json --missing
"""

import argparse
import json
from pathlib import Path
from typing import Any

from kanahangul.domain.char_coverage import collect_script_chars, uncovered_chars

_TEXT_FIELDS = ("title", "stadium", "address")


def _load_texts(path: Path) -> list[str]:
    data: Any = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("events", [])
    if not isinstance(data, list):
        return []

    texts: list[str] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        for field in _TEXT_FIELDS:
            value = item.get(field)
            if isinstance(value, str):
                texts.append(value)
    return texts


def main() -> int:
    parser = argparse.ArgumentParser(description="List katakana/kanji used by scraped events.")
    parser.add_argument("events", help="JSON file with a list of events.")
    parser.add_argument("--missing", action="store_true", help="Only show characters the tables don't cover.")
    args = parser.parse_args()

    path = Path(args.events)
    if not path.exists():
        print("No events file at {}".format(path))
        return 1

    chars = collect_script_chars(_load_texts(path))
    if args.missing:
        chars = uncovered_chars(chars)

    label = "uncovered" if args.missing else "unique"
    print("Found {} {} Katakana chars.".format(len(chars.katakana), label))
    print("Found {} {} Kanji chars.".format(len(chars.kanji), label))
    print("Katakana:", "".join(chars.katakana))
    print("Kanji:", "".join(chars.kanji))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
