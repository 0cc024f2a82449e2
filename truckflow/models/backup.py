"""Full-backup document model.

The application exports and imports all of its data as one JSON document:

    {"version": "1.0", "exportDate": "...", "loads": [...],
     "expenses": [...], "settings": {...}}
"""

import datetime as dt
from typing import Any, Dict, List

from pydantic import ConfigDict, Field

from truckflow.models.base import BaseDataModel
from truckflow.models.expense import Expense
from truckflow.models.load import Load

BACKUP_VERSION = "1.0"


def format_export_date(moment: dt.datetime) -> str:
    """Format a timestamp as ISO-8601 UTC with milliseconds and a Z suffix.

    Example:
        >>> moment = dt.datetime(2026, 2, 22, 14, 5, 9, 123456, dt.timezone.utc)
        >>> format_export_date(moment)
        '2026-02-22T14:05:09.123Z'
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(dt.timezone.utc).replace(tzinfo=None)
    return moment.isoformat(timespec="milliseconds") + "Z"


class BackupDocument(BaseDataModel):
    """A full-backup document holding loads, expenses and settings.

    Attributes:
        version: Document format version
        export_date: ISO-8601 timestamp of the export (``exportDate`` in JSON)
        loads: Load records
        expenses: Expense records
        settings: The settings record ({} when none)
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: str = BACKUP_VERSION
    export_date: str = Field(
        default_factory=lambda: format_export_date(dt.datetime.now(dt.timezone.utc)),
        alias="exportDate",
    )
    loads: List[Load] = Field(default_factory=list)
    expenses: List[Expense] = Field(default_factory=list)
    settings: Dict[str, Any] = Field(default_factory=dict)

    def to_json_dict(self) -> Dict[str, Any]:
        """Serialize using the JSON key names of the import format."""
        return self.model_dump(mode="json", by_alias=True)
