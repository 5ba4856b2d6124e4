# SPDX-License-Identifier: MIT
"""Version incrementing.

An increment always produces a new release: the bumped field goes up by one,
lower fields reset to zero, and pre-release and build metadata are dropped.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .semver import SemverError, Version, parse_version


class InvalidFieldError(SemverError, ValueError):
    """Raised when an increment target is not major, minor or patch."""

    def __init__(self, field: object, message: str = ""):
        self.field = field
        self.message = message or (
            f"Invalid version field: {field!r} (expected 'major', 'minor' or 'patch')"
        )
        super().__init__(self.message)


class VersionField(Enum):
    """Version component that can be incremented."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


FieldLike = Union[str, VersionField]


def parse_field(field: FieldLike) -> VersionField:
    """Resolve an increment target.

    Accepts a VersionField unchanged, or one of the exact tokens "major",
    "minor" or "patch". Matching is case-sensitive.

    Raises:
        InvalidFieldError: If the field is not recognized

    Examples:
        >>> parse_field("minor")
        <VersionField.MINOR: 'minor'>
    """
    if isinstance(field, VersionField):
        return field
    if isinstance(field, str):
        for member in VersionField:
            if member.value == field:
                return member
    raise InvalidFieldError(field)


def increment_version(version: Version, field: FieldLike) -> Version:
    """Return a new Version with the given field bumped.

    The input is never modified.

    Args:
        version: The version to increment
        field: VersionField or "major", "minor", "patch"

    Returns:
        A new release Version

    Raises:
        InvalidFieldError: If the field is not recognized

    Examples:
        >>> increment_version(parse_version("1.4.7-rc.1+b5"), "minor")
        Version(major=1, minor=5, patch=0, prerelease=(), build=())
    """
    field = parse_field(field)

    if field is VersionField.MAJOR:
        return Version(version.major + 1, 0, 0)
    if field is VersionField.MINOR:
        return Version(version.major, version.minor + 1, 0)
    return Version(version.major, version.minor, version.patch + 1)


def increment(version_string: str, field: FieldLike) -> str:
    """Increment a version string and return the new version string.

    Args:
        version_string: A valid semantic version string
        field: VersionField or "major", "minor", "patch"

    Raises:
        InvalidFieldError: If the field is not recognized
        InvalidVersionError: If the version string is invalid

    Examples:
        >>> increment("1.3.9", "patch")
        '1.3.10'
        >>> increment("1.3.10", "minor")
        '1.4.0'
        >>> increment("1.4.0", "major")
        '2.0.0'
    """
    target = parse_field(field)
    return str(increment_version(parse_version(version_string), target))
