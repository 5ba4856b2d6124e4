# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0 section 11.

Major, minor and patch compare numerically. A pre-release has lower
precedence than the associated release, and two pre-releases compare
identifier by identifier:
- numeric identifiers compare as integers
- numeric identifiers are lower than alphanumeric ones
- alphanumeric identifiers compare lexically in ASCII order
- a larger set of identifiers wins when all preceding ones are equal

Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Optional, TypeVar, Union

from .semver import InvalidVersionError, Version, is_numeric_identifier, parse_version

VersionLike = Union[str, Version]
V = TypeVar("V", str, Version)


class Ordering(IntEnum):
    """Result of a precedence comparison.

    Members are ints, so results also work as the classic -1/0/1 triple.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _sign(value1, value2) -> int:
    if value1 == value2:
        return 0
    return -1 if value1 < value2 else 1


def _as_version(version: VersionLike) -> Version:
    return version if isinstance(version, Version) else parse_version(version)


def _compare_identifier(id1: str, id2: str) -> int:
    """Compare a single pair of pre-release identifiers."""
    is_num1 = is_numeric_identifier(id1)
    is_num2 = is_numeric_identifier(id2)

    if is_num1 and is_num2:
        # Python ints are unbounded, so identifiers of any length compare exactly
        return _sign(int(id1), int(id2))
    if is_num1:
        # Numeric < alphanumeric per SemVer
        return -1
    if is_num2:
        return 1
    return _sign(id1, id2)


def _compare_prerelease(pre1: tuple[str, ...], pre2: tuple[str, ...]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    An empty sequence means "no pre-release", which has higher precedence
    than any pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for id1, id2 in zip(pre1, pre2):
        result = _compare_identifier(id1, id2)
        if result:
            return result

    # All shared identifiers equal - longer pre-release has higher precedence
    return _sign(len(pre1), len(pre2))


def compare_versions(version1: VersionLike, version2: VersionLike) -> Ordering:
    """Compare two semantic versions by SemVer precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS if version1 < version2
        Ordering.EQUAL if version1 and version2 have the same precedence
        Ordering.GREATER if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0-alpha.beta", "1.0.0-beta") == -1
        True
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        <Ordering.EQUAL: 0>
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    # Compare major.minor.patch
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result:
            return Ordering(result)

    # Compare pre-release (build metadata is ignored)
    return Ordering(_compare_prerelease(v1.prerelease, v2.prerelease))


def _try_compare(version1: VersionLike, version2: VersionLike) -> Optional[Ordering]:
    try:
        return compare_versions(version1, version2)
    except InvalidVersionError:
        return None


def is_newer(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 has higher precedence than version2.

    Returns False if either version is invalid.

    Examples:
        >>> is_newer("3.1.2", "3.1.2-alpha")
        True
        >>> is_newer("3.1.2", "not-a-version")
        False
    """
    return _try_compare(version1, version2) is Ordering.GREATER


def is_older(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 has lower precedence than version2.

    Returns False if either version is invalid.
    """
    return _try_compare(version1, version2) is Ordering.LESS


def is_equivalent(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if both versions have the same precedence.

    Build metadata is not considered, so "2.0.1" and "2.0.1+build.125124"
    are equivalent. Returns False if either version is invalid.
    """
    return _try_compare(version1, version2) is Ordering.EQUAL


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Keys order exactly like compare_versions: two versions get equal keys
    if and only if they have the same precedence.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Raises:
        InvalidVersionError: If the version string is invalid

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)

    # Pre-release key: a release becomes (1,) to sort after pre-releases.
    # Pre-releases become (0, parts) with numeric parts (0, n) sorting
    # before alphanumeric parts (1, s).
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease:
            if is_numeric_identifier(part):
                parts.append((0, int(part)))
            else:
                parts.append((1, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(versions: Iterable[V], reverse: bool = False) -> list[V]:
    """Sort versions by precedence, oldest first.

    Items are returned as given (strings stay strings). The sort is stable,
    so versions differing only in build metadata keep their input order.

    Raises:
        InvalidVersionError: If any version string is invalid
    """
    return sorted(versions, key=version_key, reverse=reverse)


def max_version(versions: Iterable[V]) -> V:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If versions is empty
        InvalidVersionError: If any version string is invalid
    """
    candidates = list(versions)
    if not candidates:
        raise ValueError("max_version() arg is an empty sequence")
    return max(candidates, key=version_key)
