"""
Label classification for the GitHub to Jira conversion tool.

A classification picks one categorical value (issue type, priority) from the
issue's labels. The label that decided the value is consumed: it is left out
of the returned ``remaining`` labels so later steps cannot match it again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


class LabelClassification(NamedTuple):
    """Result of classifying a set of labels."""

    value: str
    """The chosen value, or the default when no label matched."""
    remaining: tuple[str, ...]
    """The input labels minus the one that was consumed."""


class LabelClassifier:
    """Maps labels to a single value using an ordered label -> value table."""

    def __init__(self, table: Sequence[tuple[str, str]] | None, default: str) -> None:
        self.table: list[tuple[str, str]] = list(table or [])
        self.default: str = default

    def classify(self, labels: Iterable[str]) -> LabelClassification:
        """Classify labels, first matching table entry wins.

        Table order decides between several matching labels, not label order.
        """
        label_names = tuple(labels)
        for label, value in self.table:
            if label in label_names:
                return LabelClassification(value, tuple(name for name in label_names if name != label))
        return LabelClassification(self.default, label_names)


def classify_labels(
    labels: Iterable[str], table: Sequence[tuple[str, str]] | None, default: str
) -> LabelClassification:
    """Classify labels against a table without building a classifier first."""
    return LabelClassifier(table, default).classify(labels)
