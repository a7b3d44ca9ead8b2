"""
Retrieval of issues and comments from a GitHub repository.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from github import GithubException

from .exceptions import ConversionError

if TYPE_CHECKING:
    from datetime import datetime

    from github import Github
    from github.Issue import Issue
    from github.IssueComment import IssueComment
    from github.NamedUser import NamedUser
    from github.Repository import Repository

logger: logging.Logger = logging.getLogger(__name__)


def _format_date(value: datetime) -> str:
    """Format a PyGithub timestamp the way the GitHub REST API reports it."""
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def _user_record(user: NamedUser | None) -> dict[str, Any] | None:
    return {"login": user.login} if user is not None else None


def issue_record(issue: Issue) -> dict[str, Any]:
    """Reduce a PyGithub issue to the REST payload fields used by the conversion."""
    return {
        "number": issue.number,
        "state": issue.state,
        "user": _user_record(issue.user),
        "assignee": _user_record(issue.assignee),
        "created_at": _format_date(issue.created_at),
        "updated_at": _format_date(issue.updated_at),
        "title": issue.title,
        "body": issue.body,
        "milestone": {"title": issue.milestone.title} if issue.milestone is not None else None,
        "labels": [{"name": label.name} for label in issue.labels],
    }


def comment_record(comment: IssueComment) -> dict[str, Any]:
    """Reduce a PyGithub issue comment to the REST payload fields used by the conversion."""
    return {
        "body": comment.body,
        "user": _user_record(comment.user),
        "created_at": _format_date(comment.created_at),
        "issue_url": comment.issue_url,
    }


class GithubDataLoader:
    """Fetches all issues and comments of one repository."""

    def __init__(self, client: Github, owner: str, repo: str, state: str = "all") -> None:
        self.client: Github = client
        self.repo_path: str = f"{owner}/{repo}"
        self.state: str = state
        self._repo: Repository | None = None

    @property
    def repo(self) -> Repository:
        if self._repo is None:
            try:
                self._repo = self.client.get_repo(self.repo_path)
            except GithubException as e:
                msg = f"Cannot access GitHub repository {self.repo_path}: {e}"
                raise ConversionError(msg) from e
        return self._repo

    def fetch_issues(self) -> list[dict[str, Any]]:
        """Fetch all issues (in the configured state) of the repository."""
        logger.info("Retrieving GitHub issues...")
        try:
            issues = [issue_record(issue) for issue in self.repo.get_issues(state=self.state)]
        except GithubException as e:
            msg = f"Failed to retrieve issues from {self.repo_path}: {e}"
            raise ConversionError(msg) from e
        logger.info(f"Retrieved {len(issues)} issues from GitHub")
        return issues

    def fetch_comments(self) -> list[dict[str, Any]]:
        """Fetch every issue comment of the repository."""
        logger.info("Retrieving GitHub comments...")
        try:
            comments = [comment_record(comment) for comment in self.repo.get_issues_comments()]
        except GithubException as e:
            msg = f"Failed to retrieve comments from {self.repo_path}: {e}"
            raise ConversionError(msg) from e
        logger.info(f"Retrieved {len(comments)} comments from GitHub")
        return comments

    def fetch_data(self, *, include_comments: bool = True) -> dict[str, Any]:
        """Fetch the ``{githubIssues, githubComments}`` pair; comments are None when not included."""
        return {
            "githubIssues": self.fetch_issues(),
            "githubComments": self.fetch_comments() if include_comments else None,
        }
