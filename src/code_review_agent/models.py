"""Pydantic models for the code review agent."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Severity levels for issues, ordered by deduction weight."""

    error = "error"
    warning = "warning"
    info = "info"


class Issue(BaseModel):
    """A single pattern-match problem detected in a file."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0, description="1-based line number, 0 for whole-file issues")
    severity: Severity = Field(description="Severity level: error, warning, info")
    rule: str = Field(description="Rule identifier (e.g., 'no-var')")
    message: str = Field(description="Human-readable description")
    original: str = Field(description="Trimmed source line the issue was raised against")


class FileResult(BaseModel):
    """Review result for one file."""

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(description="Base name of the file")
    relative_path: str = Field(description="Path relative to the project root, forward slashes")
    line_count: int = Field(description="Number of lines in the file")
    issues: list[Issue] = Field(default_factory=list, description="Issues in line order")
    score: int = Field(ge=0, le=10, description="Quality score 0-10")
    grade: str = Field(description="Letter grade A-F")
    suggestions: list[str] = Field(default_factory=list, description="Deduplicated remediation tips")
    fixed_text: str = Field(description="Rewritten file content")


class SkippedFile(BaseModel):
    """A collected file that could not be read."""

    path: str = Field(description="Path of the unreadable file")
    error: str = Field(description="Why the file was skipped")


class ReviewSummary(BaseModel):
    """Project-wide aggregate of the per-file results."""

    total_files: int = Field(default=0, description="Number of reviewed files")
    clean_files: int = Field(default=0, description="Files with no issues")
    files_with_issues: int = Field(default=0, description="Files with at least one issue")
    total_issues: int = Field(default=0, description="Sum of issues across all files")
    overall_score: int = Field(default=10, description="Rounded mean of per-file scores")
    overall_grade: str = Field(default="A", description="Letter grade for the overall score")
    verdict: str = Field(default="", description="Narrative verdict for the overall score")


class ReviewReport(BaseModel):
    """Full output of one review run."""

    files: list[FileResult] = Field(
        default_factory=list, description="Per-file results in collection order"
    )
    summary: ReviewSummary = Field(
        default_factory=ReviewSummary, description="Aggregate statistics"
    )
    skipped: list[SkippedFile] = Field(
        default_factory=list, description="Files that could not be read"
    )
