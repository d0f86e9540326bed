from __future__ import annotations

import importlib.util
from pathlib import Path
import sys
from types import ModuleType

import pytest

from emojindex.emoji.catalog import build_catalog
from emojindex.emoji.registry import build_registry
from emojindex.emoji.tones import SkinTone


SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "generate_catalog.py"

SAMPLE = """\
# emoji-test.txt
# Version: 17.0

# group: People & Body
1F44D      ; fully-qualified     # \U0001f44d E0.6 thumbs up
1F44D 1F3FB ; fully-qualified    # \U0001f44d\U0001f3fb E1.0 thumbs up: light skin tone
1F44D 1F3FC ; fully-qualified    # \U0001f44d\U0001f3fc E1.0 thumbs up: medium-light skin tone
1F44D 1F3FD ; fully-qualified    # \U0001f44d\U0001f3fd E1.0 thumbs up: medium skin tone
1F44D 1F3FE ; fully-qualified    # \U0001f44d\U0001f3fe E1.0 thumbs up: medium-dark skin tone
1F44D 1F3FF ; fully-qualified    # \U0001f44d\U0001f3ff E1.0 thumbs up: dark skin tone
1F91D      ; fully-qualified     # \U0001f91d E3.0 handshake
1F91D 1F3FB ; fully-qualified    # \U0001f91d\U0001f3fb E14.0 handshake: light skin tone
1FAF1 1F3FB 200D 1FAF2 1F3FC ; fully-qualified # \U0001faf1\U0001f3fb\u200d\U0001faf2\U0001f3fc E14.0 handshake: light skin tone, medium-light skin tone

# group: Smileys & Emotion
263A FE0F  ; fully-qualified     # \u263a\ufe0f E0.6 smiling face
263A       ; unqualified         # \u263a E0.6 smiling face
"""

PEOPLE_SAMPLE = """\
# Version: 15.1

# group: People & Body
1F9D1      ; fully-qualified     # \U0001f9d1 E5.0 person
1F9D1 1F3FB ; fully-qualified    # \U0001f9d1\U0001f3fb E5.0 person: light skin tone
1F9D1 1F3FC ; fully-qualified    # \U0001f9d1\U0001f3fc E5.0 person: medium-light skin tone
1F9D1 1F3FD ; fully-qualified    # \U0001f9d1\U0001f3fd E5.0 person: medium skin tone
1F9D1 1F3FE ; fully-qualified    # \U0001f9d1\U0001f3fe E5.0 person: medium-dark skin tone
1F9D1 1F3FF ; fully-qualified    # \U0001f9d1\U0001f3ff E5.0 person: dark skin tone
1F9D1 200D 1F9B0 ; fully-qualified # \U0001f9d1\u200d\U0001f9b0 E12.1 person: red hair
1F9D1 1F3FB 200D 1F9B0 ; fully-qualified # \U0001f9d1\U0001f3fb\u200d\U0001f9b0 E12.1 person: light skin tone, red hair
1F9D1 1F3FC 200D 1F9B0 ; fully-qualified # \U0001f9d1\U0001f3fc\u200d\U0001f9b0 E12.1 person: medium-light skin tone, red hair
1F9D1 1F3FD 200D 1F9B0 ; fully-qualified # \U0001f9d1\U0001f3fd\u200d\U0001f9b0 E12.1 person: medium skin tone, red hair
1F9D1 1F3FE 200D 1F9B0 ; fully-qualified # \U0001f9d1\U0001f3fe\u200d\U0001f9b0 E12.1 person: medium-dark skin tone, red hair
1F9D1 1F3FF 200D 1F9B0 ; fully-qualified # \U0001f9d1\U0001f3ff\u200d\U0001f9b0 E12.1 person: dark skin tone, red hair
1F48F      ; fully-qualified     # \U0001f48f E0.6 kiss
1F48F 1F3FB ; fully-qualified    # \U0001f48f\U0001f3fb E13.1 kiss: light skin tone
1F9D1 1F3FB 200D 2764 FE0F 200D 1F48B 200D 1F9D1 1F3FC ; fully-qualified # \U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc E13.1 kiss: person, person, light skin tone, medium-light skin tone

# group: Symbols
0023 FE0F 20E3 ; fully-qualified # #\ufe0f\u20e3 E0.6 keycap: #
002A FE0F 20E3 ; fully-qualified # *\ufe0f\u20e3 E2.0 keycap: *
"""


@pytest.fixture
def script(monkeypatch: pytest.MonkeyPatch) -> ModuleType:
    module_spec = importlib.util.spec_from_file_location("generate_catalog", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    monkeypatch.setitem(sys.modules, module_spec.name, module)
    module_spec.loader.exec_module(module)
    return module


def test_parse_emoji_test_groups_tones_under_base(script: ModuleType) -> None:
    version, entries = script.parse_emoji_test(SAMPLE)

    assert version == "17.0"
    assert [entry.name for entry in entries] == ["thumbs_up", "handshake", "smiling_face"]
    assert [entry.group for entry in entries] == ["people-body", "people-body", "smileys-emotion"]
    assert script.tone_declaration(entries[0]) == "single"
    assert script.tone_declaration(entries[1]) == (
        "pair",
        "\U0001f91d{0}",
        "\U0001faf1{0}\u200d\U0001faf2{1}",
    )
    assert script.tone_declaration(entries[2]) is None


def test_rendered_module_builds_a_catalog(script: ModuleType) -> None:
    version, entries = script.parse_emoji_test(SAMPLE)
    source = script.render_module(version, entries)
    namespace: dict[str, object] = {}
    exec(source, namespace)

    assert source.isascii()
    assert namespace["CATALOG_VERSION"] == "17.0"
    registry = build_registry(build_catalog(namespace["CATALOG_ENTRIES"]))
    assert registry.resolve("\U0001f44d\U0001f3ff").tones == (SkinTone.DARK,)
    assert registry.resolve("\u263a").base.name == "smiling_face"



@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("thumbs up: dark skin tone", ("thumbs up", ("dark",), False)),
        ("person: light skin tone, red hair", ("person: red hair", ("light",), False)),
        (
            "kiss: person, person, light skin tone, medium-light skin tone",
            ("kiss: person, person", ("light", "medium_light"), True),
        ),
        (
            "kiss: woman, man, medium skin tone, dark skin tone",
            ("kiss: woman, man", ("medium", "dark"), False),
        ),
    ],
)
def test_split_tone_label(script: ModuleType, label: str, expected: tuple) -> None:
    assert script.split_tone_label(label) == expected


def test_tones_attach_to_the_base_named_by_remaining_qualifiers(script: ModuleType) -> None:
    _version, entries = script.parse_emoji_test(PEOPLE_SAMPLE)
    by_name = {entry.name: entry for entry in entries}

    assert list(by_name) == [
        "person",
        "person_red_hair",
        "kiss",
        "keycap_number_sign",
        "keycap_asterisk",
    ]
    assert sorted(by_name["person"].toned) == sorted(
        [("light",), ("medium_light",), ("medium",), ("medium_dark",), ("dark",)]
    )
    assert script.tone_declaration(by_name["person"]) == "single"
    assert script.tone_declaration(by_name["person_red_hair"]) == "single"
    assert by_name["person_red_hair"].toned[("dark",)] == "\U0001f9d1\U0001f3ff\u200d\U0001f9b0"
    assert script.tone_declaration(by_name["kiss"]) == (
        "pair",
        "\U0001f48f{0}",
        "\U0001f9d1{0}\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1{1}",
    )
    assert script.tone_declaration(by_name["keycap_number_sign"]) is None
    assert by_name["keycap_asterisk"].sequence == "*\ufe0f\u20e3"


def test_people_sample_renders_resolvable_variants(script: ModuleType) -> None:
    version, entries = script.parse_emoji_test(PEOPLE_SAMPLE)
    namespace: dict[str, object] = {}
    exec(script.render_module(version, entries), namespace)
    registry = build_registry(build_catalog(namespace["CATALOG_ENTRIES"]))

    red_hair = registry.resolve("\U0001f9d1\U0001f3fd\u200d\U0001f9b0")
    kiss = registry.resolve(
        "\U0001f9d1\U0001f3fb\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1\U0001f3fc"
    )

    assert red_hair.base.name == "person_red_hair"
    assert red_hair.tones == (SkinTone.MEDIUM,)
    assert kiss.base.name == "kiss"
    assert kiss.tones == (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT)
    assert registry.variants.render(registry.identifier("kiss"), ["dark", "dark"]) == (
        "\U0001f48f\U0001f3ff"
    )
