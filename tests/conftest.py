"""
Pytest configuration and fixtures.

Raw records follow the GitHub REST payload layout consumed by the loader.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from github_to_jira.config import ConverterConfig

if TYPE_CHECKING:
    from collections.abc import Callable

REPO_URL = "https://api.github.com/repos/octo-org/octo-repo"


def make_raw_issue(number: int = 1, **overrides: Any) -> dict[str, Any]:
    """Build a GitHub issue payload."""
    issue: dict[str, Any] = {
        "number": number,
        "state": "open",
        "user": {"login": "octocat"},
        "assignee": None,
        "created_at": "2021-01-01T00:00:00Z",
        "updated_at": "2021-01-02T12:30:00Z",
        "title": f"Issue {number}",
        "body": "Some **bold** text",
        "milestone": None,
        "labels": [],
    }
    issue.update(overrides)
    return issue


def make_raw_comment(issue_number: int, body: str = "A comment", login: str = "hubot") -> dict[str, Any]:
    """Build a GitHub issue comment payload."""
    return {
        "body": body,
        "user": {"login": login},
        "created_at": "2021-01-03T08:00:00Z",
        "issue_url": f"{REPO_URL}/issues/{issue_number}",
    }


def make_labels(*names: str) -> list[dict[str, str]]:
    return [{"name": name} for name in names]


@pytest.fixture
def config_data() -> dict[str, Any]:
    """A complete configuration document, as parsed from YAML."""
    return {
        "github": {"owner": "octo-org", "repo": "octo-repo", "state": "all", "include_comments": True},
        "jira": {"project_key": "OCTO"},
        "user_map": {"octocat": "jdoe", "hubot": "robot"},
        "issue_types": {"default": "Story", "map": {"bug": "Bug", "feature": "Story"}},
        "priorities": {"default": "Medium", "map": {"p1": "High", "p3": "Low"}},
        "custom_fields": [
            {"field_name": "Team", "field_type": "multiselect", "prefixes": ["team-"]},
            {"field_name": "Component", "field_type": "labels", "map": {"ui": "Frontend", "api": "Backend"}},
        ],
    }


@pytest.fixture
def config(config_data: dict[str, Any]) -> ConverterConfig:
    return ConverterConfig.from_dict(config_data)


@pytest.fixture
def raw_issue() -> Callable[..., dict[str, Any]]:
    return make_raw_issue


@pytest.fixture
def raw_comment() -> Callable[..., dict[str, Any]]:
    return make_raw_comment


@pytest.fixture
def raw_labels() -> Callable[..., list[dict[str, str]]]:
    return make_labels
