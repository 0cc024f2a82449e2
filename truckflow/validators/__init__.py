"""Data-quality reporting for record processing."""

from truckflow.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "ValidationReport",
    "ValidationIssue",
    "ValidationSeverity",
]
