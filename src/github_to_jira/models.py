"""Data models for conversion between GitHub and Jira records.

Source models are read-only snapshots of the GitHub REST payload, built once
from the retrieved dicts. Target models mirror the record layout expected by
the Jira JSON importer and serialise to its camelCase keys via ``to_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from .exceptions import ConversionError

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class SourceUser:
    """A GitHub account."""

    login: str

    @classmethod
    def from_raw(cls, data: Mapping[str, Any] | None) -> SourceUser | None:
        if not data:
            return None
        return cls(login=data["login"])


@dataclass(frozen=True)
class SourceLabel:
    """A label attached to a GitHub issue."""

    name: str


@dataclass(frozen=True)
class SourceMilestone:
    """A GitHub milestone. Only the title is carried over (as a Jira fix version)."""

    title: str


@dataclass(frozen=True)
class SourceIssue:
    """An issue as retrieved from GitHub.

    ``number`` is the stable identifier: it keys the comment groups and is
    used to build the Jira issue key.
    """

    number: int
    state: Literal["open", "closed"]
    user: SourceUser
    created_at: str
    updated_at: str
    title: str
    body: str = ""
    assignee: SourceUser | None = None
    milestone: SourceMilestone | None = None
    labels: tuple[SourceLabel, ...] = ()

    @property
    def label_names(self) -> tuple[str, ...]:
        return tuple(label.name for label in self.labels)

    @classmethod
    def from_raw(cls, data: Mapping[str, Any]) -> SourceIssue:
        """Build an issue from a GitHub REST issue payload."""
        user = SourceUser.from_raw(data["user"])
        if user is None:
            msg = f"GitHub issue #{data.get('number')} has no author"
            raise ConversionError(msg)
        milestone = data.get("milestone")
        return cls(
            number=int(data["number"]),
            state=data["state"],
            user=user,
            assignee=SourceUser.from_raw(data.get("assignee")),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
            title=data["title"],
            body=data.get("body") or "",
            milestone=SourceMilestone(title=milestone["title"]) if milestone else None,
            labels=tuple(SourceLabel(name=label["name"]) for label in data.get("labels") or []),
        )


@dataclass(frozen=True)
class SourceComment:
    """A comment on a GitHub issue.

    GitHub lists repository comments without a direct reference to the issue;
    the parent issue number is the last path segment of ``issue_url`` and is
    resolved once, when the comment is loaded.
    """

    body: str
    user: SourceUser
    created_at: str
    issue_url: str
    issue_number: str

    @classmethod
    def from_raw(cls, data: Mapping[str, Any]) -> SourceComment:
        """Build a comment from a GitHub REST issue comment payload."""
        issue_url: str = data["issue_url"]
        user = SourceUser.from_raw(data["user"])
        if user is None:
            msg = f"GitHub comment on {issue_url} has no author"
            raise ConversionError(msg)
        return cls(
            body=data.get("body") or "",
            user=user,
            created_at=data["created_at"],
            issue_url=issue_url,
            issue_number=issue_number_from_url(issue_url),
        )


def issue_number_from_url(issue_url: str) -> str:
    """Return the trailing path segment of an issue API URL (the issue number)."""
    return issue_url.rsplit("/", 1)[-1]


@dataclass
class TargetCustomField:
    """A Jira custom field value. The payload is always a list, possibly empty."""

    field_name: str
    field_type: str
    value: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"fieldName": self.field_name, "fieldType": self.field_type, "value": list(self.value)}


@dataclass
class TargetComment:
    """A Jira comment embedded in an issue record."""

    body: str
    author: str
    created: str

    def to_dict(self) -> dict[str, Any]:
        return {"body": self.body, "author": self.author, "created": self.created}


@dataclass
class TargetIssue:
    """An issue record for the Jira JSON importer.

    Imported issues always start in the initial workflow state ("To Do");
    closed GitHub issues only carry over a "Fixed" resolution.
    """

    key: str
    status: str
    resolution: str | None
    reporter: str | None
    assignee: str | None
    fixed_versions: list[str]
    created: str
    updated: str
    summary: str
    description: str
    issue_type: str
    priority: str
    labels: list[str] = field(default_factory=list)
    custom_field_values: list[TargetCustomField] = field(default_factory=list)
    comments: list[TargetComment] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the importer layout. An unknown reporter is left out entirely."""
        data: dict[str, Any] = {
            "key": self.key,
            "status": self.status,
            "resolution": self.resolution,
            "reporter": self.reporter,
            "assignee": self.assignee,
            "fixedVersions": list(self.fixed_versions),
            "created": self.created,
            "updated": self.updated,
            "summary": self.summary,
            "description": self.description,
            "issueType": self.issue_type,
            "priority": self.priority,
            "labels": list(self.labels),
            "customFieldValues": [custom_field.to_dict() for custom_field in self.custom_field_values],
            "comments": [comment.to_dict() for comment in self.comments],
        }
        if self.reporter is None:
            del data["reporter"]
        return data


@dataclass
class TargetProject:
    """A Jira project record holding every converted issue."""

    name: str
    external_name: str
    key: str
    issues: list[TargetIssue] = field(default_factory=list)
    versions: frozenset[str] = frozenset()

    def to_dict(self) -> dict[str, Any]:
        # Sorted so repeated runs over the same data produce identical files
        return {
            "name": self.name,
            "externalName": self.external_name,
            "key": self.key,
            "issues": [issue.to_dict() for issue in self.issues],
            "versions": sorted(self.versions),
        }
