"""Report for collecting data-quality issues found while processing records."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """Represents a single data-quality issue.

    Attributes:
        severity: The severity level of the issue
        field: The field name that has the issue
        message: Human-readable description of the issue
        value: The value that caused the issue
        context: Optional context information (e.g., record index)
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any
    context: Optional[Dict[str, Any]] = None

    @property
    def index(self) -> Optional[int]:
        """Record index from the context, if any."""
        if self.context:
            return self.context.get("index")
        return None

    def __str__(self) -> str:
        """Return string representation of the issue.

        Returns:
            Formatted string with severity, field, and message
        """
        context_str = ""
        if self.context:
            context_parts = [f"{k}={v}" for k, v in self.context.items()]
            context_str = f" ({', '.join(context_parts)})"

        return f"[{self.severity.name}] {self.field}: {self.message}{context_str}"


class ValidationReport:
    """Collects issues found while converting or checking records.

    Issues never stop processing; callers decide how to surface them.

    Example:
        >>> report = ValidationReport()
        >>> report.add_warning("pickup_state", "State not resolved", "Nowhere",
        ...                    context={"index": 3})
        >>> report.warning_count
        1
        >>> report.is_valid()
        True
    """

    def __init__(self) -> None:
        """Initialize an empty validation report."""
        self.issues: List[ValidationIssue] = []

    def _count(self, severity: ValidationSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @property
    def error_count(self) -> int:
        return self._count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(ValidationSeverity.INFO)

    def is_valid(self) -> bool:
        """Check if the report has no errors (warnings do not count)."""
        return self.error_count == 0

    def add_issue(
        self,
        severity: ValidationSeverity,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add an issue to the report.

        Args:
            severity: Severity of the issue
            field: The field name with the issue
            message: Human-readable description
            value: The value that caused the issue
            context: Optional context information
        """
        self.issues.append(
            ValidationIssue(
                severity=severity,
                field=field,
                message=message,
                value=value,
                context=context,
            )
        )

    def add_error(self, field: str, message: str, value: Any, context=None) -> None:
        self.add_issue(ValidationSeverity.ERROR, field, message, value, context)

    def add_warning(self, field: str, message: str, value: Any, context=None) -> None:
        self.add_issue(ValidationSeverity.WARNING, field, message, value, context)

    def add_info(self, field: str, message: str, value: Any, context=None) -> None:
        self.add_issue(ValidationSeverity.INFO, field, message, value, context)

    def get_issues(
        self, min_severity: ValidationSeverity = ValidationSeverity.INFO
    ) -> List[ValidationIssue]:
        """Get issues at or above a severity, in the order they were added."""
        return [issue for issue in self.issues if issue.severity >= min_severity]

    def get_warnings(self) -> List[ValidationIssue]:
        """Get all warning-level issues."""
        return [
            issue
            for issue in self.issues
            if issue.severity == ValidationSeverity.WARNING
        ]

    def merge(self, other: "ValidationReport") -> None:
        """Merge another validation report into this one."""
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Get a summary of the report.

        Returns:
            Summary string with counts of errors, warnings, and info messages
        """
        parts = []
        if self.error_count > 0:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count > 0:
            parts.append(f"{self.warning_count} warning(s)")
        if self.info_count > 0:
            parts.append(f"{self.info_count} info message(s)")

        if not parts:
            return "No issues found"

        return ", ".join(parts)
