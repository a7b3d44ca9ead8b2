import pytest

from github_to_jira.label_classifier import LabelClassification, LabelClassifier, classify_labels


@pytest.mark.unit
class TestLabelClassifier:
    """Test label classification."""

    def test_first_table_entry_wins(self) -> None:
        classifier = LabelClassifier([("bug", "Bug"), ("feature", "Story")], "Story")
        result = classifier.classify(["feature", "bug"])
        assert result.value == "Bug"
        assert result.remaining == ("feature",)

    def test_only_matched_label_is_consumed(self) -> None:
        classifier = LabelClassifier([("feature", "Story"), ("bug", "Bug")], "Task")
        result = classifier.classify(["bug", "ui", "feature"])
        assert result == LabelClassification("Story", ("bug", "ui"))

    def test_no_match_returns_default(self) -> None:
        classifier = LabelClassifier([("bug", "Bug")], "Story")
        result = classifier.classify(["docs", "ui"])
        assert result.value == "Story"
        assert result.remaining == ("docs", "ui")

    def test_empty_table_returns_default(self) -> None:
        result = LabelClassifier([], "Medium").classify(["p1"])
        assert result == LabelClassification("Medium", ("p1",))

    def test_missing_table_returns_default(self) -> None:
        result = LabelClassifier(None, "Medium").classify(["p1"])
        assert result == LabelClassification("Medium", ("p1",))

    def test_duplicate_label_names_are_all_consumed(self) -> None:
        result = LabelClassifier([("bug", "Bug")], "Story").classify(["bug", "ui", "bug"])
        assert result == LabelClassification("Bug", ("ui",))

    def test_input_is_not_modified(self) -> None:
        label_names = ["bug", "ui"]
        LabelClassifier([("bug", "Bug")], "Story").classify(label_names)
        assert label_names == ["bug", "ui"]

    def test_sequential_classification_threads_remaining_labels(self) -> None:
        issue_type, remaining = classify_labels(["p1", "bug", "ui"], [("bug", "Bug")], "Story")
        priority, remaining = classify_labels(remaining, [("p1", "High"), ("bug", "Highest")], "Medium")
        assert issue_type == "Bug"
        assert priority == "High"
        assert remaining == ("ui",)

    def test_consumed_label_cannot_match_again(self) -> None:
        _, remaining = classify_labels(["bug"], [("bug", "Bug")], "Story")
        priority, remaining = classify_labels(remaining, [("bug", "Highest")], "Medium")
        assert priority == "Medium"
        assert remaining == ()
