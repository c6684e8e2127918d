# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semver_core import (
    InvalidVersionError,
    Ordering,
    Version,
    compare,
    compare_versions,
    identical,
    parse_version,
    semantic_equals,
    sort_versions,
    version_key,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_core_compared_numerically(self):
        """Test that core numbers are not compared as strings."""
        assert compare_versions("1.10.0", "1.9.0") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_prerelease_does_not_override_core(self):
        """Test that a higher core wins regardless of pre-release."""
        assert compare_versions("1.0.1-alpha", "1.0.0") == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        v1 = parse_version("1.0.0")
        v2 = parse_version("2.0.0")
        assert compare_versions(v1, v2) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        """Test that invalid strings raise."""
        with pytest.raises(InvalidVersionError):
            compare_versions("1.0", "1.0.0")


class TestCompare:
    """Tests for the Ordering-valued compare function."""

    def test_returns_ordering(self):
        """Test that compare returns Ordering members."""
        assert compare(parse_version("1.0.0"), parse_version("2.0.0")) is Ordering.LESS
        assert compare(parse_version("2.0.0"), parse_version("2.0.0")) is Ordering.EQUAL
        assert compare(parse_version("2.0.0"), parse_version("1.0.0")) is Ordering.GREATER

    def test_ordering_values(self):
        """Test that Ordering members behave as -1, 0 and 1."""
        assert [int(o) for o in Ordering] == [-1, 0, 1]

    def test_agrees_with_operators(self):
        """Test that compare agrees with the rich comparison operators."""
        a = parse_version("1.0.0-beta.2")
        b = parse_version("1.0.0-beta.11")
        assert compare(a, b) is Ordering.LESS
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a != b

    def test_operators_reject_other_types(self):
        """Test that ordering against non-versions raises TypeError."""
        with pytest.raises(TypeError):
            parse_version("1.0.0") < "2.0.0"  # type: ignore


class TestPrereleaseOrdering:
    """Tests for pre-release ordering edge cases."""

    def test_full_prerelease_chain(self):
        """Test the pre-release ordering example from semver.org."""
        versions = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for i in range(len(versions) - 1):
            assert (
                compare_versions(versions[i], versions[i + 1]) == -1
            ), f"{versions[i]} should be < {versions[i + 1]}"

        shuffled = [versions[i] for i in (5, 0, 7, 3, 1, 6, 2, 4)]
        assert [str(v) for v in sort_versions(shuffled)] == versions

    def test_numeric_prerelease_parts(self):
        """Test numeric pre-release parts comparison."""
        assert compare_versions("1.0.0-1", "1.0.0-2") == -1
        assert compare_versions("1.0.0-10", "1.0.0-2") == 1  # Numeric comparison
        assert compare_versions("1.0.0-1", "1.0.0-11") == -1

    def test_numeric_below_alphanumeric(self):
        """Test that numeric identifiers sort below alphanumeric ones."""
        assert compare_versions("1.0.0-1", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta") == -1
        assert compare_versions("1.0.0-999", "1.0.0-0a") == -1

    def test_alphanumeric_ascii_order(self):
        """Test that alphanumeric identifiers compare in ASCII order."""
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-a", "1.0.0-beta") == -1
        assert compare_versions("1.0.0-rc-1", "1.0.0-rc1") == -1

    def test_shorter_prerelease_is_lower(self):
        """Test that a prefix ranks below the longer sequence."""
        assert compare_versions("1.0.0-alpha", "1.0.0-alpha.1") == -1
        assert compare_versions("0.0.2-alpha.0", "0.0.2-alpha.0.1") == -1

    def test_huge_numeric_identifiers(self):
        """Test that numeric identifiers beyond 64 bits compare by value."""
        assert compare_versions("1.0.0-18446744073709551616", "1.0.0-18446744073709551615") == 1
        assert compare_versions("1.0.0-" + "9" * 100, "1.0.0-1" + "0" * 100) == -1
        assert compare_versions("1.0.0-" + "9" * 5000, "1.0.0-" + "9" * 5000) == 0

    def test_original_sort_fixture(self):
        """Test sorting a large mixed list of versions."""
        unsorted = [
            "0.1.0-rc.1",
            "0.0.1-alpha.0",
            "0.0.1",
            "0.0.2-alpha.0",
            "0.0.2-alpha.0.1",
            "0.0.2",
            "0.0.3-aaa.11",
            "0.0.3-aaa.2",
            "0.0.3-aaa",
            "0.0.3-alpha.1",
            "0.1.0-beta.2",
            "0.1.0-beta.3",
            "0.1.0",
            "1.0.1",
            "1.0.0-alpha.0",
            "1.0.0",
            "0.0.2-alpha",
            "1.1.0",
            "0.1.0-alpha.3",
            "1.2.0",
            "2.0.0-alpha.0",
            "2.0.0-1",
            "1.0.0-1",
            "1.0.0-3",
            "1.0.0-11",
        ]
        expected = [
            "0.0.1-alpha.0",
            "0.0.1",
            "0.0.2-alpha",
            "0.0.2-alpha.0",
            "0.0.2-alpha.0.1",
            "0.0.2",
            "0.0.3-aaa",
            "0.0.3-aaa.2",
            "0.0.3-aaa.11",
            "0.0.3-alpha.1",
            "0.1.0-alpha.3",
            "0.1.0-beta.2",
            "0.1.0-beta.3",
            "0.1.0-rc.1",
            "0.1.0",
            "1.0.0-1",
            "1.0.0-3",
            "1.0.0-11",
            "1.0.0-alpha.0",
            "1.0.0",
            "1.0.1",
            "1.1.0",
            "1.2.0",
            "2.0.0-1",
            "2.0.0-alpha.0",
        ]
        assert sorted(parse_version(v) for v in unsorted) == [parse_version(v) for v in expected]
        assert sorted(unsorted, key=version_key) == expected


class TestEqualityHelpers:
    """Tests for semantic_equals and identical."""

    @pytest.mark.parametrize(
        "left,right",
        [
            ("3.0.0", "3.0.0+metadata"),
            ("3.0.0-alpha.0", "3.0.0-alpha.0+metadata"),
            ("3.0.0-boo", "3.0.0-boo+metadata"),
            ("3.0.0", "v3.0.0"),
            ("3.0.0-alpha.0", "v3.0.0-alpha.0+metadata"),
        ],
    )
    def test_semantically_equal(self, left, right):
        """Test pairs that differ only in build metadata or prefix."""
        assert semantic_equals(left, right)
        assert parse_version(left) == parse_version(right)

    @pytest.mark.parametrize(
        "left,right",
        [
            ("3.0.0", "3.0.0-alpha.0"),
            ("3.0.0", "3.0.1"),
            ("3.0.0", "3.1.0"),
            ("4.0.0", "3.0.0"),
            ("3.0.0-alpha.0", "3.0.0-alpha.5"),
            ("3.0.0-alpha.0", "3.0.0-beta.0"),
            ("3.0.0-alpha.0", "3.0.0-boo"),
            ("3.0.0-alpha.0", "3.0.1-alpha.1"),
        ],
    )
    def test_not_equal(self, left, right):
        """Test pairs with different precedence."""
        assert not semantic_equals(left, right)
        assert parse_version(left) != parse_version(right)

    def test_identical_includes_build(self):
        """Test that identical compares build metadata."""
        assert identical("1.0.0+a", "1.0.0+a")
        assert identical("v1.0.0", "1.0.0")
        assert not identical("1.0.0+a", "1.0.0+b")
        assert not identical("1.0.0+a", "1.0.0")


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_with_prerelease(self):
        """Test sorting versions with pre-releases."""
        versions = ["1.0.0", "1.0.0-alpha", "1.0.0-beta", "1.0.0-rc"]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions == ["1.0.0-alpha", "1.0.0-beta", "1.0.0-rc", "1.0.0"]

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_version("2.0.0"), parse_version("1.0.0")]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions[0].major == 1
        assert sorted_versions[1].major == 2


class TestSortVersions:
    """Tests for sort_versions function."""

    def test_returns_versions(self):
        """Test that strings are parsed into Version objects."""
        result = sort_versions(["1.0.0", "0.9.0"])
        assert all(isinstance(v, Version) for v in result)
        assert [str(v) for v in result] == ["0.9.0", "1.0.0"]

    def test_reverse(self):
        """Test descending order."""
        result = sort_versions(["1.0.0-rc.1", "1.0.0", "0.9.0"], reverse=True)
        assert [str(v) for v in result] == ["1.0.0", "1.0.0-rc.1", "0.9.0"]

    def test_stable_for_build_metadata(self):
        """Test that versions equal in precedence keep their input order."""
        result = sort_versions(["1.0.0+b", "1.0.0+a", "0.1.0"])
        assert [str(v) for v in result] == ["0.1.0", "1.0.0+b", "1.0.0+a"]

    def test_invalid_version(self):
        """Test that an invalid version aborts sorting."""
        with pytest.raises(InvalidVersionError):
            sort_versions(["1.0.0", "nope"])


class TestTransitivity:
    """Tests for comparison transitivity."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        a = "1.0.0-alpha"
        b = "1.0.0-beta"
        c = "1.0.0"

        assert compare_versions(a, b) == -1
        assert compare_versions(b, c) == -1
        assert compare_versions(a, c) == -1

    def test_antisymmetry(self):
        """Test that comparison is antisymmetric: if a < b, then b > a."""
        a = "1.0.0"
        b = "2.0.0"

        assert compare_versions(a, b) == -1
        assert compare_versions(b, a) == 1

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        versions = ["1.0.0", "1.0.0-alpha", "1.0.0+build"]
        for v in versions:
            assert compare_versions(v, v) == 0
