#!/usr/bin/env python3
"""Build the bundled emoji catalog from the Unicode ``emoji-test.txt`` file."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
import re
import sys
import unicodedata
from urllib.request import urlopen


ROOT = Path(__file__).resolve().parents[1]
OUTPUT_PATH = ROOT / "src" / "emojindex" / "emoji" / "data.py"
EMOJI_TEST_URL = "https://unicode.org/Public/emoji/latest/emoji-test.txt"

MODIFIERS = {chr(code) for code in range(0x1F3FB, 0x1F400)}
LINE_WIDTH = 99
TONE_SUFFIX = "skin tone"

# Labels distinguished only by punctuation.
_SYMBOL_NAMES = {"#": " number sign ", "*": " asterisk "}

_LINE_PATTERN = re.compile(
    r"^(?P<codes>[0-9A-F ]+?)\s*;\s*(?P<status>[a-z-]+)\s*#\s*\S+\s+E(?P<version>[0-9.]+)\s+(?P<name>.+)$"
)
_VERSION_PATTERN = re.compile(r"^#\s*Version:\s*(?P<version>[0-9.]+)")


@dataclass(slots=True)
class Entry:
    name: str
    sequence: str
    version: str
    group: str
    toned: dict[tuple[str, ...], str] = field(default_factory=dict)


def download_text(url: str) -> str:
    with urlopen(url) as response:
        return response.read().decode("utf-8")


def slugify(label: str) -> str:
    for symbol, replacement in _SYMBOL_NAMES.items():
        label = label.replace(symbol, replacement)
    ascii_label = unicodedata.normalize("NFKD", label).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^0-9a-z]+", "_", ascii_label.lower()).strip("_")


def group_slug(label: str) -> str:
    return re.sub(r"[^0-9a-z]+", "-", label.lower()).strip("-")


def split_tone_label(label: str) -> tuple[str, tuple[str, ...], bool]:
    """Split a toned label into its base label and tone names.

    Skin tone parts may sit between other qualifiers, as in
    ``person: light skin tone, red hair``. The remaining qualifiers rebuild the
    base label (``person: red hair``). The third value tells whether every
    remaining qualifier is ``person``, in which case the bare prefix names the
    base (``kiss: person, person`` belongs to ``kiss``).
    """
    prefix, _sep, rest = label.partition(":")
    qualifiers: list[str] = []
    tones: list[str] = []
    for part in (item.strip() for item in rest.split(",")):
        if part.endswith(TONE_SUFFIX):
            tones.append(slugify(part[: -len(TONE_SUFFIX)]))
        elif part:
            qualifiers.append(part)
    base_label = f"{prefix}: {', '.join(qualifiers)}" if qualifiers else prefix
    people_only = bool(qualifiers) and all(part == "person" for part in qualifiers)
    return base_label, tuple(tones), people_only


def parse_emoji_test(text: str) -> tuple[str, list[Entry]]:
    """Return the file's emoji version and the fully-qualified base entries."""
    version = "0.0"
    group = ""
    entries: dict[str, Entry] = {}
    pending_tones: list[tuple[str, str]] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith("#"):
            version_match = _VERSION_PATTERN.match(line)
            if version_match:
                version = version_match.group("version")
            elif line.startswith("# group:"):
                group = group_slug(line.split(":", 1)[1])
            continue
        match = _LINE_PATTERN.match(line)
        if match is None or match.group("status") != "fully-qualified":
            continue
        sequence = "".join(chr(int(code, 16)) for code in match.group("codes").split())
        label = match.group("name")
        if any(char in MODIFIERS for char in sequence):
            pending_tones.append((label, sequence))
            continue
        name = slugify(label)
        entries[name] = Entry(name, sequence, match.group("version"), group)

    for label, sequence in pending_tones:
        base_label, tones, people_only = split_tone_label(label)
        entry = entries.get(slugify(base_label))
        if entry is None and people_only:
            entry = entries.get(slugify(base_label.partition(":")[0]))
        if entry is None:
            sys.stderr.write(f"skipping toned sequence without a base: {label}\n")
            continue
        entry.toned[tones] = sequence
    return version, list(entries.values())


def _template(sequence: str) -> str:
    slot = 0
    parts: list[str] = []
    for char in sequence:
        if char in MODIFIERS:
            parts.append("{" + str(slot) + "}")
            slot += 1
        else:
            parts.append(char)
    return "".join(parts)


def tone_declaration(entry: Entry) -> object:
    """Derive the row's tone declaration from its toned sequences."""
    if not entry.toned:
        return None
    if all(len(tones) == 1 for tones in entry.toned) and len(entry.toned) == 5:
        single = _template(entry.toned[("light",)])
        if "{1}" not in single:
            return "single"
    mixed_sequence = entry.toned.get(("light", "medium_light"))
    if mixed_sequence is None:
        return None
    mixed = _template(mixed_sequence)
    uniform_sequence = entry.toned.get(("light",))
    uniform = _template(uniform_sequence) if uniform_sequence is not None else None
    if uniform is not None and "{1}" in uniform:
        uniform = None
    return ("pair", uniform, mixed)


def _literal(value: object) -> str:
    if value is None:
        return "None"
    if isinstance(value, str):
        return '"' + ascii(value)[1:-1] + '"'
    if isinstance(value, tuple):
        return "(" + ", ".join(_literal(item) for item in value) + ")"
    return repr(value)


def format_row(name: str, sequence: str, order: int, version: str, tones: object) -> list[str]:
    fields = [_literal(name), _literal(sequence), str(order), _literal(version), _literal(tones)]
    single_line = "    (" + ", ".join(fields) + "),"
    if len(single_line) <= LINE_WIDTH:
        return [single_line]
    lines = ["    ("]
    lines.extend(f"        {item}," for item in fields[:4])
    declaration = f"        {fields[4]},"
    if len(declaration) <= LINE_WIDTH or not isinstance(tones, tuple):
        lines.append(declaration)
    else:
        lines.append("        (")
        lines.extend(f"            {_literal(item)}," for item in tones)
        lines.append("        ),")
    lines.append("    ),")
    return lines


def render_module(version: str, entries: list[Entry]) -> str:
    lines = [
        "# Generated by scripts/generate_catalog.py from emoji-test.txt. Do not edit by hand.",
        "#",
        "# Row layout: (name, default sequence, sort order, emoji version, tone declaration)",
        "#",
        "# Tone declaration is one of:",
        "#   None                            no skin tone support",
        '#   "single"                        one modifier after the first code point',
        "#   (\"pair\", uniform, mixed)        one modifier per person; ``uniform`` (or",
        "#                                   ``None``) is used when both tones match,",
        "#                                   ``{0}``/``{1}`` mark the modifier slots",
        "",
        f'CATALOG_VERSION = "{version}"',
        "",
        "CATALOG_ENTRIES = (",
    ]
    group = None
    for order, entry in enumerate(entries, start=1):
        if entry.group != group:
            group = entry.group
            lines.append(f"    # {group}")
        lines.extend(
            format_row(entry.name, entry.sequence, order, entry.version, tone_declaration(entry))
        )
    lines.append(")")
    return "\n".join(lines) + "\n"


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--source",
        type=Path,
        help="Read a local emoji-test.txt instead of downloading the latest release.",
    )
    parser.add_argument("--output", type=Path, default=OUTPUT_PATH)
    args = parser.parse_args()

    text = args.source.read_text(encoding="utf-8") if args.source else download_text(EMOJI_TEST_URL)
    version, entries = parse_emoji_test(text)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(render_module(version, entries), encoding="utf-8")
    sys.stdout.write(f"Wrote {len(entries)} catalog entries to {args.output}\n")


if __name__ == "__main__":
    main()
