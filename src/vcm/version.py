"""
Thin wrapper around the semver library for the versions constraints compare.

semver owns parsing and SemVer 2.0.0 precedence. This module adds the
leading "v" prefix, rejects non-ASCII text and stray control characters
that the library's regex lets through, and reports failures as
InvalidVersionString.

A Version is immutable and hashable; equality and ordering follow
precedence, so build metadata never affects a comparison.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Tuple, Union

import semver

from vcm.exceptions import InvalidVersionString


# semver matches with \d and $, which accept Unicode digits and a trailing newline
_SEMVER_CHARACTERS_RE = re.compile(r'[0-9A-Za-z.+-]+')

Identifiers = Tuple[str, ...]


def _split_identifiers(value: Union[str, Tuple[Any, ...], list, None]) -> Identifiers:
    if value is None or value == "":
        return ()
    if isinstance(value, str):
        return tuple(value.split("."))
    return tuple(str(part) for part in value)


def _parse_semver(text: str) -> semver.Version:
    if not _SEMVER_CHARACTERS_RE.fullmatch(text):
        raise InvalidVersionString.for_version_string(text)
    try:
        return semver.Version.parse(text)
    except (ValueError, TypeError) as e:
        raise InvalidVersionString.for_version_string(text) from e


@dataclass(frozen=True, eq=False)
class Version:
    """
    A semantic version.

    Properties:
        major, minor, patch: Non-negative integers
        pre_release: Pre-release identifiers, e.g. ("alpha", "1")
        build: Build metadata identifiers (ignored for precedence)

    Use Version.from_string() to parse text such as "1.2.3-rc.1+build.5".
    """

    major: int
    minor: int
    patch: int
    pre_release: Identifiers = ()
    build: Identifiers = ()
    _semver: semver.Version = field(init=False, repr=False)

    def __post_init__(self) -> None:
        for part in ("major", "minor", "patch"):
            value = getattr(self, part)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidVersionString(
                    f"Version {part} must be a non-negative integer; got {value!r}"
                )

        pre_release = _split_identifiers(self.pre_release)
        build = _split_identifiers(self.build)
        object.__setattr__(self, "pre_release", pre_release)
        object.__setattr__(self, "build", build)

        # Validate the parts by round-tripping the canonical text through semver
        object.__setattr__(self, "_semver", _parse_semver(str(self)))

    @classmethod
    def from_string(cls, version_string: Any) -> Version:
        """
        Parse a SemVer string.

        A leading "v" or "V" and surrounding whitespace are accepted.

        Args:
            version_string: Text such as "1.2.3", "v2.0.0-beta.1+sha.5114f85"

        Returns:
            Version

        Raises:
            InvalidVersionString: If the input is not a str or not valid SemVer
        """
        if not isinstance(version_string, str):
            raise InvalidVersionString(
                f"Version string must be of type str; {type(version_string).__name__} given",
                version_string,
            )

        cleaned = version_string.strip()
        if cleaned[:1] in ("v", "V"):
            cleaned = cleaned[1:]

        try:
            parsed = _parse_semver(cleaned)
        except InvalidVersionString as e:
            raise InvalidVersionString.for_version_string(version_string) from e

        return cls(
            major=parsed.major,
            minor=parsed.minor,
            patch=parsed.patch,
            pre_release=_split_identifiers(parsed.prerelease),
            build=_split_identifiers(parsed.build),
        )

    def is_pre_release(self) -> bool:
        return bool(self.pre_release)

    def _compare(self, other: Version) -> int:
        if not isinstance(other, Version):
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        return self._semver.compare(other._semver)

    # Comparison predicates consumed by Constraint

    def is_equal_to(self, other: Version) -> bool:
        return self._compare(other) == 0

    def is_greater_than(self, other: Version) -> bool:
        return self._compare(other) > 0

    def is_greater_or_equal_to(self, other: Version) -> bool:
        return self._compare(other) >= 0

    def is_less_than(self, other: Version) -> bool:
        return self._compare(other) < 0

    def is_less_or_equal_to(self, other: Version) -> bool:
        return self._compare(other) <= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.pre_release))

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            text += "-" + ".".join(self.pre_release)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


__all__ = ["Version"]
