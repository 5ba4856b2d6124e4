# SPDX-License-Identifier: MIT
"""Semantic Versioning 2.0.0 parsing, comparison and incrementing.

This package validates version strings against the SemVer 2.0.0 grammar,
decomposes them into immutable Version values, orders them by SemVer
precedence and bumps them to new releases.

Example:
    >>> from semverkit import parse_version, is_valid_semver, is_newer, increment
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> is_valid_semver("1.0.0")
    True
    >>>
    >>> is_newer("1.0.0", "1.0.0-rc.1")
    True
    >>>
    >>> increment("1.3.9", "patch")
    '1.3.10'
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    render_version,
    is_valid_semver,
    is_numeric_identifier,
    SemverError,
    InvalidVersionError,
    InvalidPreReleaseError,
    InvalidBuildMetadataError,
    SEMVER_PATTERN,
)
from .compare import (
    Ordering,
    compare_versions,
    is_newer,
    is_older,
    is_equivalent,
    version_key,
    sort_versions,
    max_version,
)
from .increment import (
    VersionField,
    InvalidFieldError,
    parse_field,
    increment_version,
    increment,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "render_version",
    "is_valid_semver",
    "is_numeric_identifier",
    "SEMVER_PATTERN",
    # Errors
    "SemverError",
    "InvalidVersionError",
    "InvalidPreReleaseError",
    "InvalidBuildMetadataError",
    "InvalidFieldError",
    # Version comparison
    "Ordering",
    "compare_versions",
    "is_newer",
    "is_older",
    "is_equivalent",
    "version_key",
    "sort_versions",
    "max_version",
    # Version incrementing
    "VersionField",
    "parse_field",
    "increment_version",
    "increment",
]
