"""Tests for prseed.models (PRDescriptor, SubmissionReport)."""

import pytest
from pydantic import ValidationError

from prseed.models import PRDescriptor, SubmissionReport, SubmissionResult


def _descriptor(source: str = "feature/a", target: str = "main", **kwargs) -> PRDescriptor:
    return PRDescriptor(source_branch=source, target_branch=target, title="feat: A", **kwargs)


class TestPRDescriptor:
    """PRDescriptor validation, immutability and value equality."""

    def test_defaults(self) -> None:
        """Body defaults to empty, labels to an empty tuple."""
        d = _descriptor()
        assert d.body == ""
        assert d.labels == ()
        assert d.is_stacked is False

    def test_labels_list_is_stored_as_tuple(self) -> None:
        """Labels given as a list become a tuple."""
        d = _descriptor(labels=["stacked"])
        assert d.labels == ("stacked",)
        assert d.is_stacked is True

    def test_same_source_and_target_rejected(self) -> None:
        """Source and target must differ."""
        with pytest.raises(ValidationError, match="same"):
            _descriptor(source="main", target="main")

    @pytest.mark.parametrize("source,target", [("", "main"), ("feature/a", "  ")])
    def test_empty_branch_rejected(self, source: str, target: str) -> None:
        """Empty or whitespace-only branch names are rejected."""
        with pytest.raises(ValidationError):
            _descriptor(source=source, target=target)

    def test_frozen(self) -> None:
        """Assigning to a field raises."""
        d = _descriptor()
        with pytest.raises(ValidationError):
            d.title = "changed"

    def test_equal_fields_are_equal_and_hash_equal(self) -> None:
        """Descriptors have no identity beyond their fields."""
        assert _descriptor() == _descriptor()
        assert hash(_descriptor()) == hash(_descriptor())
        assert _descriptor() != _descriptor(source="feature/b")

    def test_extra_fields_forbidden(self) -> None:
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            PRDescriptor(source_branch="a", target_branch="b", title="t", draft=True)


class TestSubmissionReport:
    """SubmissionReport counters."""

    def test_counts_by_outcome(self) -> None:
        """created/skipped/failed counts follow result outcomes."""
        d = _descriptor()
        report = SubmissionReport()
        report.add(SubmissionResult(d, "submitted"))
        report.add(SubmissionResult(d, "submitted"))
        report.add(SubmissionResult(d, "skipped_missing_branch"))
        report.add(SubmissionResult(d, "skipped_already_merged"))
        report.add(SubmissionResult(d, "submit_failed", "boom"))
        assert report.attempted == 5
        assert report.created_count == 2
        assert report.skipped_count == 2
        assert report.failed_count == 1
        assert report.count("skipped_already_merged") == 1
        assert report.results[-1].detail == "boom"

    def test_empty_report(self) -> None:
        """New report has zero counts."""
        report = SubmissionReport()
        assert report.attempted == 0
        assert report.created_count == 0
