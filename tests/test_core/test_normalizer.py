"""Unit tests for tagkeeper.core.normalizer.

Test Coverage:
- Tag prefix stripping (match, mismatch, separator handling)
- RC suffix normalization (spellings, case, idempotence)
- Parsing of normalized tags into semver versions
- ParseError contents for rejected tags
"""

from __future__ import annotations

import pytest
import semver

from tagkeeper.exceptions import ParseError
from tagkeeper.core.normalizer import (
    normalize_rc_format,
    normalize_tag,
    parse_tag,
    strip_tag_prefix,
)


@pytest.mark.unit
class TestStripTagPrefix:
    """Tests for strip_tag_prefix."""

    def test_strips_prefix_and_separator(self) -> None:
        assert strip_tag_prefix("op-node/v1.16.2", "op-node") == "v1.16.2"

    def test_strips_prefix_without_separator(self) -> None:
        assert strip_tag_prefix("op-nodev1.16.2", "op-node") == "v1.16.2"

    def test_strips_only_one_separator(self) -> None:
        assert strip_tag_prefix("op-node//v1.16.2", "op-node") == "/v1.16.2"

    def test_empty_prefix_returns_tag_unchanged(self) -> None:
        assert strip_tag_prefix("op-node/v1.16.2", "") == "op-node/v1.16.2"

    def test_mismatched_prefix_returns_tag_unchanged(self) -> None:
        """A prefix mismatch is not an error at this stage."""
        assert strip_tag_prefix("op-batcher/v1.16.2", "op-node") == "op-batcher/v1.16.2"

    def test_prefix_is_literal_not_pattern(self) -> None:
        assert strip_tag_prefix("opxnode/v1.0.0", "op.node") == "opxnode/v1.0.0"

    def test_default_prefix_is_empty(self) -> None:
        assert strip_tag_prefix("v1.0.0") == "v1.0.0"


@pytest.mark.unit
class TestNormalizeRCFormat:
    """Tests for normalize_rc_format."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("v0.3.0-rc1", "v0.3.0-rc.1"),
            ("v0.3.0-rc.1", "v0.3.0-rc.1"),
            ("v0.3.0-rc-1", "v0.3.0-rc.1"),
            ("v0.3.0-RC1", "v0.3.0-rc.1"),
            ("v0.3.0-Rc.1", "v0.3.0-rc.1"),
            ("v0.3.0-rc12", "v0.3.0-rc.12"),
            ("v0.3.0", "v0.3.0"),
            ("v0.3.0-alpha", "v0.3.0-alpha"),
            ("v0.3.0-beta.1", "v0.3.0-beta.1"),
        ],
    )
    def test_normalization_table(self, value: str, expected: str) -> None:
        assert normalize_rc_format(value) == expected

    def test_canonical_form_is_idempotent(self) -> None:
        once = normalize_rc_format("v1.2.3-RC-7")
        assert normalize_rc_format(once) == once == "v1.2.3-rc.7"

    def test_rc_without_digits_is_untouched(self) -> None:
        assert normalize_rc_format("v1.0.0-rc") == "v1.0.0-rc"

    def test_embedded_rc_without_hyphen_is_untouched(self) -> None:
        assert normalize_rc_format("v1.0.0-alpha.rc1") == "v1.0.0-alpha.rc1"

    def test_every_marker_is_rewritten(self) -> None:
        assert normalize_rc_format("v1.0.0-rc1-rc2") == "v1.0.0-rc.1-rc.2"

    def test_empty_string(self) -> None:
        assert normalize_rc_format("") == ""


@pytest.mark.unit
class TestNormalizeTag:
    """Tests for normalize_tag (prefix stripping + RC rewrite)."""

    def test_prefix_and_rc(self) -> None:
        assert normalize_tag("op-node/v1.16.3-rc1", "op-node") == "v1.16.3-rc.1"

    def test_plain_tag(self) -> None:
        assert normalize_tag("v1.16.3") == "v1.16.3"


@pytest.mark.unit
class TestParseTag:
    """Tests for parse_tag."""

    @pytest.mark.parametrize(
        "tag, tag_prefix",
        [
            ("v0.2.2", ""),
            ("v0.3.0", ""),
            ("1.35.3", ""),
            ("v0.3.0-rc1", ""),
            ("v0.3.0-rc.1", ""),
            ("v0.3.0-rc-1", ""),
            ("v0.3.0-rc.2", ""),
            ("op-node/v1.16.2", "op-node"),
            ("op-node/v1.16.3-rc1", "op-node"),
            ("v1.101603.5", ""),
        ],
    )
    def test_valid_tags(self, tag: str, tag_prefix: str) -> None:
        assert isinstance(parse_tag(tag, tag_prefix), semver.Version)

    @pytest.mark.parametrize(
        "tag",
        ["not-a-version", "", "rollup-boost/v0.7.11", "websocket-proxy/v0.0.2", "vv1.0.0"],
    )
    def test_invalid_tags_raise_parse_error(self, tag: str) -> None:
        with pytest.raises(ParseError):
            parse_tag(tag, "")

    def test_components(self) -> None:
        version = parse_tag("op-node/v1.16.3-rc1+build.5", "op-node")

        assert version.major == 1
        assert version.minor == 16
        assert version.patch == 3
        assert version.prerelease == "rc.1"
        assert version.build == "build.5"

    def test_leading_v_is_optional(self) -> None:
        assert parse_tag("v1.2.3") == parse_tag("1.2.3")

    def test_missing_minor_and_patch_default_to_zero(self) -> None:
        assert parse_tag("v1.2") == semver.Version(1, 2, 0)
        assert parse_tag("v2") == semver.Version(2, 0, 0)

    def test_prefix_stripping_matches_unprefixed_parse(self) -> None:
        assert parse_tag("op-node/v1.16.2", "op-node") == parse_tag("v1.16.2", "")

    def test_rc_spellings_parse_equal(self) -> None:
        versions = {parse_tag(t) for t in ("v1.0.0-RC1", "v1.0.0-rc1", "v1.0.0-Rc.1")}
        assert versions == {semver.Version(1, 0, 0, prerelease="rc.1")}

    def test_mismatched_prefix_fails_on_parse(self) -> None:
        with pytest.raises(ParseError):
            parse_tag("op-batcher/v1.16.2", "op-node")

    def test_parse_error_carries_original_tag(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_tag("op-node/garbage-rc1", "op-node")

        err = exc_info.value
        assert err.tag == "op-node/garbage-rc1"
        assert err.reason
        assert "op-node/garbage-rc1" in str(err)

    def test_parse_error_chains_library_error(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_tag("not-a-version")

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_returns_fresh_instances(self) -> None:
        first = parse_tag("v1.0.0")
        second = parse_tag("v1.0.0")

        assert first == second
        assert first is not second
