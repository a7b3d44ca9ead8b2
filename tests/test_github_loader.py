"""
Tests for GitHub data retrieval.
"""

from __future__ import annotations

import datetime as dt
from unittest.mock import Mock

import pytest
from github import GithubException

from github_to_jira import ConversionError
from github_to_jira.github_loader import GithubDataLoader, comment_record, issue_record
from github_to_jira.models import SourceComment, SourceIssue

CREATED = dt.datetime(2021, 1, 1, 0, 0, tzinfo=dt.UTC)
UPDATED = dt.datetime(2021, 1, 2, 12, 30, tzinfo=dt.UTC)


def _user(login: str) -> Mock:
    user = Mock()
    user.login = login
    return user


def _label(name: str) -> Mock:
    label = Mock()
    label.name = name
    return label


def _github_issue(number: int = 1, *, with_milestone: bool = True) -> Mock:
    issue = Mock()
    issue.number = number
    issue.state = "closed"
    issue.user = _user("octocat")
    issue.assignee = None
    issue.created_at = CREATED
    issue.updated_at = UPDATED
    issue.title = "Title"
    issue.body = None
    if with_milestone:
        issue.milestone = Mock()
        issue.milestone.title = "v1.0"
    else:
        issue.milestone = None
    issue.labels = [_label("bug"), _label("team-core")]
    return issue


def _github_comment(issue_number: int = 1) -> Mock:
    comment = Mock()
    comment.body = "Comment"
    comment.user = _user("hubot")
    comment.created_at = CREATED
    comment.issue_url = f"https://api.github.com/repos/octo-org/octo-repo/issues/{issue_number}"
    return comment


@pytest.mark.unit
class TestRecords:
    def test_issue_record(self) -> None:
        record = issue_record(_github_issue(5))
        assert record == {
            "number": 5,
            "state": "closed",
            "user": {"login": "octocat"},
            "assignee": None,
            "created_at": "2021-01-01T00:00:00Z",
            "updated_at": "2021-01-02T12:30:00Z",
            "title": "Title",
            "body": None,
            "milestone": {"title": "v1.0"},
            "labels": [{"name": "bug"}, {"name": "team-core"}],
        }

    def test_issue_record_loads_as_source_issue(self) -> None:
        issue = SourceIssue.from_raw(issue_record(_github_issue(5, with_milestone=False)))
        assert issue.number == 5
        assert issue.body == ""
        assert issue.milestone is None
        assert issue.label_names == ("bug", "team-core")

    def test_comment_record_loads_as_source_comment(self) -> None:
        comment = SourceComment.from_raw(comment_record(_github_comment(12)))
        assert comment.issue_number == "12"
        assert comment.user.login == "hubot"
        assert comment.created_at == "2021-01-01T00:00:00Z"


@pytest.mark.unit
class TestGithubDataLoader:
    def _loader(self) -> tuple[GithubDataLoader, Mock]:
        client = Mock()
        repo = Mock()
        client.get_repo.return_value = repo
        return GithubDataLoader(client, "octo-org", "octo-repo", "open"), repo

    def test_fetch_issues(self) -> None:
        loader, repo = self._loader()
        repo.get_issues.return_value = [_github_issue(1), _github_issue(2)]

        issues = loader.fetch_issues()

        loader.client.get_repo.assert_called_once_with("octo-org/octo-repo")
        repo.get_issues.assert_called_once_with(state="open")
        assert [issue["number"] for issue in issues] == [1, 2]

    def test_fetch_data_with_comments(self) -> None:
        loader, repo = self._loader()
        repo.get_issues.return_value = [_github_issue(1)]
        repo.get_issues_comments.return_value = [_github_comment(1)]

        data = loader.fetch_data(include_comments=True)

        assert len(data["githubIssues"]) == 1
        assert data["githubComments"][0]["issue_url"].endswith("/issues/1")

    def test_fetch_data_without_comments(self) -> None:
        loader, repo = self._loader()
        repo.get_issues.return_value = []

        data = loader.fetch_data(include_comments=False)

        assert data == {"githubIssues": [], "githubComments": None}
        repo.get_issues_comments.assert_not_called()

    def test_repository_not_accessible(self) -> None:
        loader, _ = self._loader()
        loader.client.get_repo.side_effect = GithubException(404, {"message": "Not Found"}, headers={})

        with pytest.raises(ConversionError, match="Cannot access GitHub repository octo-org/octo-repo"):
            loader.fetch_issues()

    def test_api_error_while_fetching_comments(self) -> None:
        loader, repo = self._loader()
        repo.get_issues_comments.side_effect = GithubException(500, {"message": "Server Error"}, headers={})

        with pytest.raises(ConversionError, match="Failed to retrieve comments"):
            loader.fetch_comments()
