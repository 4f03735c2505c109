"""
Release model — the vendor's half-year release label as a structured value.

Labels such as ``R2024a`` are only a serialization format.  Inside the
program a release is a ``(year, half)`` pair with a chronological total
order, so comparisons never depend on how the label happens to sort as
a string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

_RELEASE_RE = re.compile(r"^[rR]?(\d{4})([abAB])$")


class ReleaseFormatError(ValueError):
    """Raised when a release label cannot be parsed."""


class Half(StrEnum):
    """Release half of the year. ``a`` (spring) precedes ``b`` (autumn)."""

    A = "a"
    B = "b"


@dataclass(frozen=True, order=True)
class Release:
    """A vendor release, ordered by ``(year, half)``."""

    year: int
    half: Half

    @classmethod
    def parse(cls, label: str) -> Release:
        """Parse ``R2024a``, ``r2024A`` or ``2024a`` into a Release.

        Raises:
            ReleaseFormatError: If the label is not a release label.
        """
        match = _RELEASE_RE.match(label.strip()) if isinstance(label, str) else None
        if match is None:
            raise ReleaseFormatError(f"Not a release label: {label!r}")
        return cls(int(match.group(1)), Half(match.group(2).lower()))

    @property
    def label(self) -> str:
        """Canonical label, e.g. ``R2024a``."""
        return f"R{self.year}{self.half.value}"

    def next(self) -> Release:
        """The release that follows this one."""
        if self.half == Half.A:
            return Release(self.year, Half.B)
        return Release(self.year + 1, Half.A)

    def __str__(self) -> str:
        return self.label


def release_range(first: Release, last: Release) -> list[Release]:
    """All releases from ``first`` to ``last`` inclusive, in order."""
    releases: list[Release] = []
    current = first
    while current <= last:
        releases.append(current)
        current = current.next()
    return releases
