# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing, comparison and incrementing.

These tests verify that:
- Every valid version string survives a parse/render round trip
- Validation and parsing agree on which strings are versions
- Precedence is a total order that ignores build metadata
- Increments always produce newer release versions
"""

from __future__ import annotations

from hypothesis import assume, given, settings, strategies as st

from semverkit import (
    InvalidVersionError,
    Ordering,
    Version,
    VersionField,
    compare_versions,
    increment,
    increment_version,
    is_equivalent,
    is_newer,
    is_older,
    is_valid_semver,
    parse_version,
    render_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

# Numeric fields and identifiers without leading zeros
numeric_fields = st.integers(min_value=0, max_value=2**70).map(str)

# Alphanumeric pre-release identifiers (at least one non-digit)
alphanumeric_identifiers = st.from_regex(r"[0-9]{0,3}[a-zA-Z-][0-9a-zA-Z-]{0,6}", fullmatch=True)

prerelease_identifiers = st.one_of(numeric_fields, alphanumeric_identifiers)

# Build identifiers may have leading zeros
build_identifiers = st.from_regex(r"[0-9a-zA-Z-]{1,8}", fullmatch=True)

field_tokens = st.sampled_from(["major", "minor", "patch"])


@st.composite
def version_strings(draw, with_build: bool | None = None):
    """Generate a valid SemVer 2.0.0 version string."""
    version = ".".join(draw(numeric_fields) for _ in range(3))

    prerelease = draw(st.lists(prerelease_identifiers, max_size=4))
    if prerelease:
        version += "-" + ".".join(prerelease)

    if with_build is None:
        with_build = draw(st.booleans())
    if with_build:
        version += "+" + ".".join(draw(st.lists(build_identifiers, min_size=1, max_size=3)))

    return version


@st.composite
def small_version_strings(draw):
    """Generate versions from a small space so that ties are common."""
    version = ".".join(str(draw(st.integers(0, 2))) for _ in range(3))
    prerelease = draw(
        st.lists(st.sampled_from(["0", "1", "2", "10", "alpha", "beta", "rc"]), max_size=3)
    )
    if prerelease:
        version += "-" + ".".join(prerelease)
    return version


# =============================================================================
# Property-Based Tests
# =============================================================================


class TestParsingProperties:
    """Property-based tests for validation, parsing and rendering."""

    @given(version=version_strings())
    @settings(max_examples=200)
    def test_round_trip(self, version):
        """
        *For any* valid version string, rendering the parsed Version SHALL
        reproduce the string exactly.
        """
        assert is_valid_semver(version)
        assert render_version(parse_version(version)) == version

    @given(text=st.text(alphabet="0123456789.-+abAZ$ ", max_size=16))
    @settings(max_examples=300)
    def test_validation_agrees_with_parsing(self, text):
        """
        *For any* string, is_valid_semver SHALL be True exactly when
        parse_version succeeds.
        """
        try:
            parse_version(text)
        except InvalidVersionError:
            parsed = False
        else:
            parsed = True

        assert is_valid_semver(text) is parsed

    @given(version=version_strings())
    @settings(max_examples=100)
    def test_parsed_fields_rebuild_version(self, version):
        """
        *For any* valid version, constructing a Version from its parsed
        fields SHALL produce an equal Version.
        """
        v = parse_version(version)
        assert Version(v.major, v.minor, v.patch, v.prerelease, v.build) == v

    @given(version=version_strings(with_build=False), extra=numeric_fields)
    @settings(max_examples=100)
    def test_fourth_component_rejected(self, version, extra):
        """
        *For any* version core, appending a fourth numeric component SHALL
        make it invalid.
        """
        core = version.split("-", 1)[0]
        assert not is_valid_semver(f"{core}.{extra}")
        assert not is_valid_semver(f"v{version}")


class TestPrecedenceProperties:
    """Property-based tests for precedence comparison."""

    @given(a=small_version_strings(), b=small_version_strings())
    @settings(max_examples=300)
    def test_exactly_one_relation_holds(self, a, b):
        """
        *For any* two valid versions, exactly one of is_newer, is_older and
        is_equivalent SHALL hold.
        """
        relations = [is_newer(a, b), is_older(a, b), is_equivalent(a, b)]
        assert relations.count(True) == 1

    @given(a=small_version_strings(), b=small_version_strings())
    @settings(max_examples=300)
    def test_antisymmetry(self, a, b):
        """
        *For any* two versions, swapping the arguments SHALL negate the result.
        """
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(a=small_version_strings(), b=small_version_strings(), c=small_version_strings())
    @settings(max_examples=300)
    def test_transitivity(self, a, b, c):
        """
        *For any* three versions with a <= b and b <= c, a <= c SHALL hold.
        """
        assume(compare_versions(a, b) <= 0 and compare_versions(b, c) <= 0)
        assert compare_versions(a, c) <= 0

    @given(a=version_strings(), b=version_strings())
    @settings(max_examples=300)
    def test_version_key_matches_compare(self, a, b):
        """
        *For any* two versions, ordering their sort keys SHALL agree with
        compare_versions.
        """
        key_a, key_b = version_key(a), version_key(b)
        expected = compare_versions(a, b)
        if expected is Ordering.LESS:
            assert key_a < key_b
        elif expected is Ordering.GREATER:
            assert key_a > key_b
        else:
            assert key_a == key_b

    @given(version=version_strings(with_build=False), build=st.lists(build_identifiers, min_size=1, max_size=3))
    @settings(max_examples=100)
    def test_build_metadata_ignored(self, version, build):
        """
        *For any* version, adding build metadata SHALL NOT change precedence
        while rendering SHALL keep each build suffix.
        """
        with_build = f"{version}+{'.'.join(build)}"
        assert is_equivalent(version, with_build)
        assert str(parse_version(with_build)) == with_build

    @given(version=version_strings(), garbage=st.sampled_from(["1.0", "01.0.0", "1.0.0-", "x"]))
    @settings(max_examples=50)
    def test_invalid_input_never_related(self, version, garbage):
        """
        *For any* valid version and invalid string, all predicates SHALL
        return False in both argument orders.
        """
        for a, b in ((version, garbage), (garbage, version)):
            assert not is_newer(a, b)
            assert not is_older(a, b)
            assert not is_equivalent(a, b)


class TestIncrementProperties:
    """Property-based tests for incrementing."""

    @given(version=version_strings(), field=field_tokens)
    @settings(max_examples=200)
    def test_increment_is_newer_release(self, version, field):
        """
        *For any* version and field, the incremented version SHALL be a valid
        release with higher precedence than the original.
        """
        result = increment(version, field)

        assert is_valid_semver(result)
        assert is_newer(result, version)
        assert not parse_version(result).is_prerelease
        assert parse_version(result).build == ()

    @given(version=version_strings(), field=st.sampled_from(list(VersionField)))
    @settings(max_examples=100)
    def test_lower_fields_reset(self, version, field):
        """
        *For any* version, fields below the incremented one SHALL be zero and
        fields above it SHALL be unchanged.
        """
        v = parse_version(version)
        bumped = increment_version(v, field)

        if field is VersionField.MAJOR:
            assert (bumped.major, bumped.minor, bumped.patch) == (v.major + 1, 0, 0)
        elif field is VersionField.MINOR:
            assert (bumped.major, bumped.minor, bumped.patch) == (v.major, v.minor + 1, 0)
        else:
            assert (bumped.major, bumped.minor, bumped.patch) == (v.major, v.minor, v.patch + 1)
