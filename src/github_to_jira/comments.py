"""Group repository-wide GitHub comments by the issue they belong to."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import SourceComment

logger: logging.Logger = logging.getLogger(__name__)


def group_comments_by_issue(comments: Iterable[SourceComment] | None) -> dict[str, list[SourceComment]]:
    """Create a dictionary of comments keyed by issue number.

    Comments keep their input order within each group. ``None`` means the
    comments were not fetched and gives an empty dictionary.
    """
    groups: dict[str, list[SourceComment]] = {}
    if comments is None:
        return groups

    for comment in comments:
        groups.setdefault(comment.issue_number, []).append(comment)

    logger.debug(f"Grouped comments for {len(groups)} issues")
    return groups
