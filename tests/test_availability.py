from __future__ import annotations

import pytest

from emojindex.emoji.availability import PlatformVersion, is_renderable, minimum_platform
from emojindex.emoji.catalog import Identifier, build_catalog


PLATFORMS = ["1.0", "15.0", "16.3", "16.4", "17.0", "17.3", "17.4", "18.0", "18.3", "18.4", "26.0"]


def _identifier(introduced: str | None) -> Identifier:
    return Identifier(name="sample", sequence="S", sort_order=1, introduced=introduced)


def test_platform_version_parsing() -> None:
    assert PlatformVersion.parse("18.4") == PlatformVersion(18, 4)
    assert PlatformVersion.parse("17") == PlatformVersion(17, 0)
    assert PlatformVersion.parse((17, 4, 1)) == PlatformVersion(17, 4, 1)
    assert str(PlatformVersion(17, 4, 1)) == "17.4.1"
    assert str(PlatformVersion(18)) == "18.0"
    assert PlatformVersion(16, 4) < PlatformVersion(17, 0) < PlatformVersion(17, 4)
    for bad in ("", "eighteen", "1.2.3.4"):
        with pytest.raises(ValueError):
            PlatformVersion.parse(bad)


def test_platform_version_refuses_floats() -> None:
    assert PlatformVersion.parse("17.10") > PlatformVersion.parse("17.9")
    assert PlatformVersion.parse("17.10") != PlatformVersion.parse("17.1")
    with pytest.raises(TypeError):
        PlatformVersion.parse(17.10)
    with pytest.raises(TypeError):
        is_renderable(_identifier("15.1"), 17.4)


@pytest.mark.parametrize(
    ("introduced", "below", "at_least"),
    [
        ("15.0", "16.3", "16.4"),
        ("15.1", "17.3", "17.4"),
        ("16.0", "18.3", "18.4"),
    ],
)
def test_recent_emoji_need_a_minimum_platform(introduced: str, below: str, at_least: str) -> None:
    identifier = _identifier(introduced)
    assert not is_renderable(identifier, below)
    assert is_renderable(identifier, at_least)


def test_older_and_unversioned_emoji_always_render() -> None:
    assert is_renderable(_identifier("0.6"), "1.0")
    assert is_renderable(_identifier("14.0"), "1.0")
    assert is_renderable(_identifier(None), "1.0")
    assert minimum_platform(_identifier("13.1")) == PlatformVersion(0)


def test_unknown_recent_revisions_never_render() -> None:
    identifier = _identifier("17.0")
    assert minimum_platform(identifier) is None
    assert not is_renderable(identifier, "99.0")


def test_bundled_catalog_gating() -> None:
    catalog = build_catalog()
    assert is_renderable(catalog["shaking_face"], "16.4")
    assert not is_renderable(catalog["phoenix"], "17.0")
    assert is_renderable(catalog["phoenix"], "17.4")
    assert not is_renderable(catalog["head_shaking_vertically"], "17.3")


def test_availability_is_monotonic_in_platform_version() -> None:
    catalog = build_catalog()
    for identifier in catalog:
        seen_renderable = False
        for platform in PLATFORMS:
            renderable = is_renderable(identifier, platform)
            if seen_renderable:
                assert renderable, (identifier.name, platform)
            seen_renderable = seen_renderable or renderable
