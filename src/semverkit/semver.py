# SPDX-License-Identifier: MIT
"""Semantic version validation, parsing and rendering.

Supports the full SemVer 2.0.0 grammar, MAJOR.MINOR.PATCH with optional
pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -01a
- Build metadata: +001, +20130313144700, +exp.sha.5114f85

Anything outside the grammar (a leading "v", a fourth component, surrounding
whitespace) is rejected rather than coerced.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
# re.ASCII keeps \d from matching non-ASCII digits.
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

# Patterns for the individual pieces, used for diagnostics and field checks
_CORE_PATTERN = re.compile(r"(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)", re.ASCII)
_PRERELEASE_IDENTIFIER = re.compile(r"0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*", re.ASCII)
_BUILD_IDENTIFIER = re.compile(r"[0-9a-zA-Z-]+", re.ASCII)


class SemverError(Exception):
    """Base class for all semverkit errors."""

    pass


class InvalidVersionError(SemverError, ValueError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class InvalidPreReleaseError(InvalidVersionError):
    """Raised when the pre-release part of a version is malformed.

    Pre-release identifiers must be non-empty, drawn from [0-9A-Za-z-], and
    purely numeric identifiers must not have leading zeros.
    """

    def __init__(self, version: str, prerelease: str, message: str = ""):
        self.prerelease = prerelease
        super().__init__(
            version, message or f"Invalid pre-release '{prerelease}' in version: {version}"
        )


class InvalidBuildMetadataError(InvalidVersionError):
    """Raised when the build metadata part of a version is malformed."""

    def __init__(self, version: str, build: str, message: str = ""):
        self.build = build
        super().__init__(
            version, message or f"Invalid build metadata '{build}' in version: {version}"
        )


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if the identifier consists solely of ASCII digits.

    Examples:
        >>> is_numeric_identifier("11")
        True
        >>> is_numeric_identifier("01a")
        False
        >>> is_numeric_identifier("")
        False
    """
    return identifier.isascii() and identifier.isdigit()


def _split_first(text: str, delimiter: str) -> tuple[str, Optional[str]]:
    """Split text at the first delimiter; the tail is None if it is absent."""
    head, found, tail = text.partition(delimiter)
    return head, (tail if found else None)


def _identifiers(part: Optional[Union[str, tuple[str, ...], list[str]]]) -> tuple[str, ...]:
    if part is None:
        return ()
    if isinstance(part, str):
        return tuple(part.split("."))
    return tuple(part)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1")), empty for releases
        build: Build metadata identifiers (e.g., ("build", "123")), empty if absent

    The pre-release and build fields also accept a dotted string, which is
    split into identifiers. Every field is validated on construction, so an
    instance always renders to a valid version string.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidVersionError(
                    str(value),
                    f"{name.capitalize()} version must be a non-negative integer, got {value!r}",
                )

        object.__setattr__(self, "prerelease", _identifiers(self.prerelease))
        object.__setattr__(self, "build", _identifiers(self.build))

        for identifier in self.prerelease:
            if not isinstance(identifier, str) or not _PRERELEASE_IDENTIFIER.fullmatch(identifier):
                raise InvalidPreReleaseError(
                    self._render(), ".".join(map(str, self.prerelease)),
                    f"Invalid pre-release identifier: {identifier!r}",
                )
        for identifier in self.build:
            if not isinstance(identifier, str) or not _BUILD_IDENTIFIER.fullmatch(identifier):
                raise InvalidBuildMetadataError(
                    self._render(), ".".join(map(str, self.build)),
                    f"Invalid build metadata identifier: {identifier!r}",
                )

    def _render(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(map(str, self.prerelease))
        if self.build:
            version += "+" + ".".join(map(str, self.build))
        return version

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return self._render()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _invalid(version_string: str) -> InvalidVersionError:
    """Build the most specific error for a string that failed the grammar."""
    rest, build = _split_first(version_string, "+")
    core, prerelease = _split_first(rest, "-")

    if not _CORE_PATTERN.fullmatch(core):
        return InvalidVersionError(version_string)
    if prerelease is not None and not all(
        _PRERELEASE_IDENTIFIER.fullmatch(identifier) for identifier in prerelease.split(".")
    ):
        return InvalidPreReleaseError(version_string, prerelease)
    if build is not None and not all(
        _BUILD_IDENTIFIER.fullmatch(identifier) for identifier in build.split(".")
    ):
        return InvalidBuildMetadataError(version_string, build)
    return InvalidVersionError(version_string)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidPreReleaseError: If only the pre-release part is malformed
        InvalidBuildMetadataError: If only the build metadata is malformed
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=())

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease=('rc', '1'), build=('build', '456'))
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    if not SEMVER_PATTERN.fullmatch(version_string):
        raise _invalid(version_string)

    rest, build = _split_first(version_string, "+")
    core, prerelease = _split_first(rest, "-")
    major, minor, patch = core.split(".")

    return Version(
        major=int(major),
        minor=int(minor),
        patch=int(patch),
        prerelease=_identifiers(prerelease),
        build=_identifiers(build),
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None


def render_version(version: Version) -> str:
    """Render a Version back to its canonical string.

    This is the inverse of parse_version: for every valid string ``s``,
    ``render_version(parse_version(s)) == s``.

    Examples:
        >>> render_version(Version(1, 4, 0, prerelease=("rc", "1")))
        '1.4.0-rc.1'
    """
    return str(version)
