"""Assemble converted issues into a Jira project record."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import TargetProject

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import TargetIssue


def assemble_project(issues: Sequence[TargetIssue], name: str, key: str) -> TargetProject:
    """Build the project record, collecting every fix version used by its issues.

    Args:
        issues: Converted Jira issues
        name: Project name, also used as the external name
        key: Jira project key

    Returns:
        TargetProject whose versions are the distinct fix versions of all issues
    """
    versions = frozenset(version for issue in issues for version in issue.fixed_versions)
    return TargetProject(name=name, external_name=name, key=key, issues=list(issues), versions=versions)
