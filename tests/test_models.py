"""Tests for loading GitHub records into source models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from github_to_jira import ConversionError
from github_to_jira.models import SourceComment, SourceIssue

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.mark.unit
class TestSourceIssue:
    def test_missing_author_rejected(self, raw_issue: Callable[..., dict[str, Any]]) -> None:
        with pytest.raises(ConversionError, match="GitHub issue #42 has no author"):
            SourceIssue.from_raw(raw_issue(42, user=None))

    def test_null_body_read_as_empty(self, raw_issue: Callable[..., dict[str, Any]]) -> None:
        assert SourceIssue.from_raw(raw_issue(1, body=None)).body == ""


@pytest.mark.unit
class TestSourceComment:
    def test_missing_author_rejected(self, raw_comment: Callable[..., dict[str, Any]]) -> None:
        raw = raw_comment(7)
        raw["user"] = None
        with pytest.raises(ConversionError, match="comment on .*/issues/7 has no author"):
            SourceComment.from_raw(raw)

    def test_issue_number_from_url(self, raw_comment: Callable[..., dict[str, Any]]) -> None:
        assert SourceComment.from_raw(raw_comment(7)).issue_number == "7"
