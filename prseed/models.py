"""Data models: pull request descriptors and submission outcomes."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

STACKED_LABEL = "stacked"

Outcome = Literal[
    "skipped_missing_branch",
    "skipped_already_merged",
    "submitted",
    "submit_failed",
]

SKIP_OUTCOMES: tuple[Outcome, ...] = ("skipped_missing_branch", "skipped_already_merged")


class PRDescriptor(BaseModel):
    """Candidate pull request: source -> target branch with title, body and
    labels.

    Immutable; two descriptors with equal fields are equal.
    """

    source_branch: str = Field(..., description="Branch to merge from (head)")
    target_branch: str = Field(..., description="Branch to merge into (base)")
    title: str = Field(..., description="Short PR title")
    body: str = Field(default="", description="Markdown PR body")
    labels: tuple[str, ...] = Field(default=(), description="Labels to attach")

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("source_branch", "target_branch")
    @classmethod
    def _non_empty_branch(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("branch name must be non-empty")
        return value

    @model_validator(mode="after")
    def _distinct_branches(self) -> "PRDescriptor":
        if self.source_branch == self.target_branch:
            raise ValueError(f"source and target branch are the same: {self.source_branch!r}")
        return self

    @property
    def is_stacked(self) -> bool:
        """True if the PR is labelled as stacked on another feature branch."""
        return STACKED_LABEL in self.labels


class SubmissionResult:
    """Terminal state of one descriptor after validation/submission."""

    def __init__(self, descriptor: PRDescriptor, outcome: Outcome, detail: str | None = None) -> None:
        self.descriptor = descriptor
        self.outcome = outcome
        self.detail = detail or ""

    def __repr__(self) -> str:
        return f"SubmissionResult({self.descriptor.source_branch!r}, {self.outcome!r})"


class SubmissionReport:
    """Results of one run, in processing order."""

    def __init__(self, results: list[SubmissionResult] | None = None) -> None:
        self.results: list[SubmissionResult] = list(results or [])

    def add(self, result: SubmissionResult) -> None:
        self.results.append(result)

    def count(self, outcome: Outcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    @property
    def attempted(self) -> int:
        return len(self.results)

    @property
    def created_count(self) -> int:
        return self.count("submitted")

    @property
    def skipped_count(self) -> int:
        return sum(1 for r in self.results if r.outcome in SKIP_OUTCOMES)

    @property
    def failed_count(self) -> int:
        return self.count("submit_failed")
