"""Build Jira issue records from GitHub issue data."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from .custom_fields import map_custom_fields
from .label_classifier import LabelClassifier
from .markup import to_wiki_markup
from .models import TargetComment, TargetIssue

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import ConverterConfig, FieldSpec
    from .models import SourceComment, SourceIssue, SourceUser

logger: logging.Logger = logging.getLogger(__name__)

# Imported issues always start in the initial workflow state
INITIAL_STATUS: Final[str] = "To Do"
CLOSED_RESOLUTION: Final[str] = "Fixed"


def map_date(github_date: str) -> str:
    """Convert the UTC 'Z' shorthand used by GitHub to the explicit '+00:00' offset Jira expects.

    Args:
        github_date: ISO 8601 timestamp (e.g., "2021-01-01T00:00:00Z")

    Returns:
        The same timestamp with an explicit offset (e.g., "2021-01-01T00:00:00+00:00").
        Values without a 'Z' suffix are returned unchanged.
    """
    if github_date.endswith("Z"):
        return f"{github_date[:-1]}+00:00"
    return github_date


def map_comments(github_comments: Sequence[SourceComment]) -> list[TargetComment]:
    """Transform GitHub comments to Jira comments, keeping their order."""
    return [
        TargetComment(
            body=to_wiki_markup(comment.body),
            author=comment.user.login,
            created=map_date(comment.created_at),
        )
        for comment in github_comments
    ]


class IssueMapper:
    """Transforms GitHub issues and their comments to Jira issues."""

    def __init__(self, config: ConverterConfig) -> None:
        self.project_key: str = config.project_key
        self.user_map: dict[str, str] = dict(config.user_map)
        self.custom_fields: tuple[FieldSpec, ...] = config.custom_fields
        self.issue_type_classifier: LabelClassifier = LabelClassifier(
            config.issue_types.map, config.issue_types.default
        )
        self.priority_classifier: LabelClassifier = LabelClassifier(config.priorities.map, config.priorities.default)

    def _reporter(self, user: SourceUser) -> str | None:
        # No fallback to the GitHub login for reporters, unlike assignees
        reporter = self.user_map.get(user.login)
        if reporter is None:
            logger.warning(f"No Jira user mapped for reporter '{user.login}', leaving the reporter empty")
        return reporter

    def _assignee(self, user: SourceUser | None) -> str | None:
        if user is None:
            return None
        return self.user_map.get(user.login) or user.login

    def map_issue(self, issue: SourceIssue, comments: Sequence[SourceComment] | None = None) -> TargetIssue:
        """Transform a GitHub issue and its comments to a Jira issue.

        Issue type is classified before priority; each consumes the label it
        matched, and the labels left after both become the Jira labels and
        feed the custom fields.

        Args:
            issue: GitHub issue
            comments: Comments on this issue, or None if there are none

        Returns:
            Jira issue record with embedded comments
        """
        logger.debug(f"Transforming GitHub issue #{issue.number} to Jira format")

        issue_type, labels = self.issue_type_classifier.classify(issue.label_names)
        priority, labels = self.priority_classifier.classify(labels)

        mapped_comments = map_comments(comments) if comments else []
        if mapped_comments:
            logger.debug(f"Mapped {len(mapped_comments)} comments for issue #{issue.number}")

        return TargetIssue(
            key=f"{self.project_key}-{issue.number}",
            status=INITIAL_STATUS,
            resolution=CLOSED_RESOLUTION if issue.state == "closed" else None,
            reporter=self._reporter(issue.user),
            assignee=self._assignee(issue.assignee),
            fixed_versions=[issue.milestone.title] if issue.milestone else [],
            created=map_date(issue.created_at),
            updated=map_date(issue.updated_at),
            summary=issue.title,
            description=to_wiki_markup(issue.body),
            issue_type=issue_type,
            priority=priority,
            labels=list(labels),
            custom_field_values=map_custom_fields(labels, self.custom_fields),
            comments=mapped_comments,
        )
