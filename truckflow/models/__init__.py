"""Record models for TruckFlow.

This package contains Pydantic models for the records the application stores
and exchanges:
- BaseDataModel: Base class with common configuration
- Load / RawLoad: Stored and exported load records
- Expense: Business expense
- PayProfile: Earning configuration (settings record)
- BackupDocument: Full-backup import/export document
"""

from truckflow.models.backup import BACKUP_VERSION, BackupDocument, format_export_date
from truckflow.models.base import BaseDataModel, coerce_number, coerce_text, to_decimal
from truckflow.models.expense import Expense, ExpenseCategory
from truckflow.models.load import Load, LoadStatus, RawLoad
from truckflow.models.pay_profile import DEFAULT_SETTINGS, EarningProfile, PayProfile

__all__ = [
    "BACKUP_VERSION",
    "BackupDocument",
    "BaseDataModel",
    "DEFAULT_SETTINGS",
    "EarningProfile",
    "Expense",
    "ExpenseCategory",
    "Load",
    "LoadStatus",
    "PayProfile",
    "RawLoad",
    "coerce_number",
    "coerce_text",
    "format_export_date",
    "to_decimal",
]
