"""Conversion pipeline that turns retrieved GitHub data into a Jira import file.

Conversion Flow
---------------
1. Retrieval (optional, see ``run``): the GithubDataLoader fetches issues and,
   if enabled, all repository comments.
2. Diagnostics (optional): the raw ``{githubIssues, githubComments}`` pair is
   written to disk before anything is transformed.
3. Loading: raw dicts become typed source records. Each comment resolves its
   parent issue number here, once.
4. Grouping: comments are grouped by parent issue number.
5. Mapping: each issue and its comment group become one Jira issue.
6. Assembly: all Jira issues go into a single project whose versions are the
   distinct fix versions used by the issues.

Every mapping step is a pure function over in-memory data. Any error aborts
the run; the output file is only written once the whole project is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .comments import group_comments_by_issue
from .issue_mapper import IssueMapper
from .models import SourceComment, SourceIssue
from .project import assemble_project
from .utils import write_json

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from .config import ConverterConfig
    from .github_loader import GithubDataLoader
    from .models import TargetProject

logger = logging.getLogger(__name__)


@dataclass
class ConversionStats:
    """Statistics collected during conversion."""

    issues_converted: int = 0
    comments_converted: int = 0
    versions: list[str] = field(default_factory=list)


@dataclass
class ConversionResult:
    """Result of a conversion run."""

    output: dict[str, Any]
    stats: ConversionStats


def load_issues(raw_issues: Iterable[Mapping[str, Any]]) -> list[SourceIssue]:
    return [SourceIssue.from_raw(raw) for raw in raw_issues]


def load_comments(raw_comments: Iterable[Mapping[str, Any]] | None) -> list[SourceComment] | None:
    if raw_comments is None:
        return None
    return [SourceComment.from_raw(raw) for raw in raw_comments]


def convert_records(
    issues: Iterable[SourceIssue],
    comments: Iterable[SourceComment] | None,
    config: ConverterConfig,
) -> TargetProject:
    """Map GitHub issues and comments to a Jira project.

    Args:
        issues: GitHub issues
        comments: All repository comments, or None if comments were not fetched
        config: Conversion configuration

    Returns:
        The Jira project holding one converted issue per GitHub issue
    """
    issues = list(issues)
    logger.info(f"Mapping {len(issues)} GitHub issues to Jira format")

    comment_groups = group_comments_by_issue(comments)
    mapper = IssueMapper(config)
    jira_issues = [mapper.map_issue(issue, comment_groups.get(str(issue.number))) for issue in issues]

    return assemble_project(jira_issues, name=config.repo, key=config.project_key)


def convert(github_data: Mapping[str, Any], config: ConverterConfig) -> ConversionResult:
    """Convert a raw ``{githubIssues, githubComments}`` pair to the Jira import structure.

    ``githubComments`` may be missing or None when comments were not fetched.
    """
    issues = load_issues(github_data.get("githubIssues") or [])
    comments = load_comments(github_data.get("githubComments"))

    project = convert_records(issues, comments, config)

    stats = ConversionStats(
        issues_converted=len(project.issues),
        comments_converted=sum(len(issue.comments) for issue in project.issues),
        versions=sorted(project.versions),
    )
    logger.info(
        f"Converted {stats.issues_converted} issues with {stats.comments_converted} comments "
        f"and {len(stats.versions)} versions"
    )
    return ConversionResult(output={"projects": [project.to_dict()]}, stats=stats)


def run(
    config: ConverterConfig,
    loader: GithubDataLoader,
    output_path: str | Path,
    *,
    raw_output_path: str | Path | None = None,
) -> ConversionResult:
    """Fetch GitHub data, convert it and write the Jira import file.

    Args:
        config: Conversion configuration
        loader: Loader for the configured GitHub repository
        output_path: Where to write the Jira import JSON
        raw_output_path: If given, also write the raw GitHub data there before converting

    Returns:
        ConversionResult with the written structure and statistics
    """
    logger.info(f"Fetching GitHub data from {config.repo_path}")
    github_data = loader.fetch_data(include_comments=config.include_comments)

    if raw_output_path is not None:
        write_json(github_data, raw_output_path)

    result = convert(github_data, config)
    write_json(result.output, output_path)
    return result
