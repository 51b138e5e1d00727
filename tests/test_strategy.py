"""Tests for dependabot_ignore.strategy."""

from __future__ import annotations

import pytest

from dependabot_ignore.errors import RequirementParseError
from dependabot_ignore.strategy import UpdateStrategy, classify, classify_requirement
from dependabot_ignore.versions import VersionReq, parse_requirement


class TestClassify:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.2.3", UpdateStrategy.MAJOR),
            ("0.5.2", UpdateStrategy.MINOR),
            ("0.0.3", UpdateStrategy.PATCH),
            ("0.0", UpdateStrategy.PATCH),
            ("2", UpdateStrategy.MAJOR),
        ],
    )
    def test_tier_boundaries(self, text: str, expected: UpdateStrategy) -> None:
        assert classify(parse_requirement(text)) is expected

    def test_major_zero_without_minor(self) -> None:
        assert classify_requirement("0") is UpdateStrategy.PATCH

    def test_major_wildcard(self) -> None:
        assert classify_requirement("1.*") is UpdateStrategy.MAJOR

    def test_zero_major_wildcard(self) -> None:
        assert classify_requirement("0.*") is UpdateStrategy.PATCH

    def test_minor_wildcard_keeps_minor(self) -> None:
        assert classify_requirement("0.3.*") is UpdateStrategy.MINOR

    def test_operator_does_not_matter(self) -> None:
        assert classify_requirement("=0.7.1") is UpdateStrategy.MINOR
        assert classify_requirement("~1.2") is UpdateStrategy.MAJOR
        assert classify_requirement("<0.0.9") is UpdateStrategy.PATCH

    def test_only_first_comparator_is_used(self) -> None:
        assert classify_requirement(">=0.9, <2.0") is UpdateStrategy.MINOR
        assert classify_requirement(">=1.0, <1.1") is UpdateStrategy.MAJOR

    def test_any_version_is_patch(self) -> None:
        assert classify(VersionReq()) is UpdateStrategy.PATCH
        assert classify_requirement("*") is UpdateStrategy.PATCH

    def test_deterministic(self) -> None:
        results = {classify_requirement("0.5.2") for _ in range(10)}
        assert results == {UpdateStrategy.MINOR}

    def test_invalid_requirement_raises(self) -> None:
        with pytest.raises(RequirementParseError):
            classify_requirement("1.x.3")
