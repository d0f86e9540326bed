"""Platform availability gate for newer emoji revisions.

Platform releases ship font support for a Unicode emoji revision some time after
the revision is published. The table below pins, per revision, the first
platform release known to draw every glyph of that revision. The pairs are
empirical and cannot be derived from the version numbers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import total_ordering
import re

from .catalog import Identifier


_VERSION_PATTERN = re.compile(r"^\s*(\d+)(?:\.(\d+))?(?:\.(\d+))?\s*$")


@total_ordering
@dataclass(frozen=True, slots=True)
class PlatformVersion:
    """Dotted release number compared component-wise (``17.4`` < ``17.10``)."""

    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, value: PlatformVersion | str | Sequence[int]) -> PlatformVersion:
        """Coerce ``value`` into a version; raises ``ValueError`` when malformed.

        Floats are refused with ``TypeError``: ``17.10`` and ``17.1`` are the same
        float but different releases.
        """
        if isinstance(value, PlatformVersion):
            return value
        if isinstance(value, str):
            match = _VERSION_PATTERN.match(value)
            if match is None:
                raise ValueError(f"invalid version '{value}'")
            parts = [int(part) for part in match.groups() if part is not None]
            return cls(*parts)
        if isinstance(value, float):
            raise TypeError(f"platform version {value!r} is a float; pass a string or a tuple")
        if isinstance(value, int):
            return cls(value)
        parts = [int(part) for part in value]
        if not 1 <= len(parts) <= 3:
            raise ValueError(f"invalid version {tuple(value)!r}")
        return cls(*parts)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PlatformVersion):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __str__(self) -> str:
        if self.patch:
            return f"{self.major}.{self.minor}.{self.patch}"
        return f"{self.major}.{self.minor}"


ALWAYS_AVAILABLE_BELOW = PlatformVersion(15, 0)

# emoji revision -> first platform release able to render it
MINIMUM_PLATFORM: dict[PlatformVersion, PlatformVersion] = {
    PlatformVersion(15, 0): PlatformVersion(16, 4),
    PlatformVersion(15, 1): PlatformVersion(17, 4),
    PlatformVersion(16, 0): PlatformVersion(18, 4),
}


def minimum_platform(identifier: Identifier) -> PlatformVersion | None:
    """Return the release required by ``identifier``.

    ``None`` means no release is known to render it; identifiers older than
    emoji 15.0 report ``PlatformVersion(0)``.
    """
    if identifier.introduced is None:
        return PlatformVersion(0)
    introduced = PlatformVersion.parse(identifier.introduced)
    if introduced < ALWAYS_AVAILABLE_BELOW:
        return PlatformVersion(0)
    return MINIMUM_PLATFORM.get(introduced)


def is_renderable(
    identifier: Identifier,
    platform_version: PlatformVersion | str | Sequence[int],
) -> bool:
    """Return whether ``identifier`` renders on ``platform_version``."""
    required = minimum_platform(identifier)
    if required is None:
        return False
    return PlatformVersion.parse(platform_version) >= required


__all__ = [
    "ALWAYS_AVAILABLE_BELOW",
    "MINIMUM_PLATFORM",
    "PlatformVersion",
    "is_renderable",
    "minimum_platform",
]
