"""Converter from exported load records to the full-backup import format.

Source records look like::

    {"loadId": "L1", "broker": "TQL", "origin": "Rittmann, oh",
     "destination": "Bolingbrook IL", "puDate": "2025-05-01",
     "doDate": "2025-05-02", "miles": 300, "deadhead": 20,
     "amount": 900, "notes": ""}

Each record becomes a Load with split city/state fields. Every converted load
is marked Delivered because exported records are completed historical trips.
Unresolved states do not stop the conversion; they are collected as warnings
so the operator can fix those addresses by hand.
"""

import datetime as dt
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from truckflow.models.backup import BackupDocument, format_export_date
from truckflow.models.load import Load, LoadStatus, RawLoad
from truckflow.normalizers import parse_city_state
from truckflow.utils.logging_utils import LogContext
from truckflow.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)


class InputShapeError(ValueError):
    """Raised when a source document holds no array of load records."""


def extract_raw_loads(source: Any) -> List[Any]:
    """Find the array of raw load records in a parsed source document.

    Args:
        source: Parsed JSON: either the array itself or an object with "loads"

    Returns:
        List of raw load records

    Raises:
        InputShapeError: If no array of loads can be found

    Example:
        >>> extract_raw_loads({"loads": [{"loadId": "L1"}]})
        [{'loadId': 'L1'}]
    """
    if isinstance(source, list):
        return source

    if isinstance(source, Mapping) and isinstance(source.get("loads"), list):
        return source["loads"]

    raise InputShapeError('Could not find a "loads" array in the input file.')


def _as_raw_load(record: Any) -> RawLoad:
    if isinstance(record, RawLoad):
        return record
    if isinstance(record, Mapping):
        return RawLoad.model_validate({str(k): v for k, v in record.items()})
    return RawLoad()


def convert_load(record: Any) -> Load:
    """Convert a single exported record into a Load.

    Missing text fields become "" and missing numbers become 0.

    Args:
        record: Raw exported record (mapping or RawLoad)

    Returns:
        Converted Load with status Delivered

    Example:
        >>> load = convert_load({"loadId": "L1", "origin": "Rittmann, oh"})
        >>> load.pickup_city, load.pickup_state, load.status
        ('Rittmann', 'OH', 'Delivered')
    """
    raw = _as_raw_load(record)
    pickup = parse_city_state(raw.origin)
    delivery = parse_city_state(raw.destination)

    return Load(
        load_id=raw.load_id or "",
        broker_name=raw.broker or "",
        pickup_city=pickup.city,
        pickup_state=pickup.state,
        delivery_city=delivery.city,
        delivery_state=delivery.state,
        pickup_date=raw.pu_date or "",
        delivery_date=raw.do_date or "",
        loaded_miles=raw.miles if raw.miles is not None else 0,
        deadhead_miles=raw.deadhead if raw.deadhead is not None else 0,
        gross_amount=raw.amount if raw.amount is not None else 0,
        notes=raw.notes or "",
        status=LoadStatus.DELIVERED.value,
    )


@dataclass
class ConversionResult:
    """Outcome of a batch conversion.

    Attributes:
        document: Full-backup document ready to be written
        report: Warnings for loads whose pickup/delivery state is empty
    """

    document: BackupDocument
    report: ValidationReport = field(default_factory=ValidationReport)

    @property
    def load_count(self) -> int:
        return len(self.document.loads)


class LoadConverter:
    """Converts exported load files into full-backup import documents.

    Example:
        >>> converter = LoadConverter()
        >>> result = converter.convert({"loads": [{"origin": "Somewhereville"}]})
        >>> result.load_count, result.report.warning_count
        (1, 2)
    """

    def convert(
        self, source: Any, export_date: Optional[dt.datetime] = None
    ) -> ConversionResult:
        """Convert a parsed source document.

        Args:
            source: Parsed JSON (array of records or object with "loads")
            export_date: Timestamp for the document (defaults to now, UTC)

        Returns:
            ConversionResult with the document and unresolved-state warnings

        Raises:
            InputShapeError: If the source holds no array of loads
        """
        raw_loads = extract_raw_loads(source)
        logger.info(f"Converting {len(raw_loads)} load records")

        loads: List[Load] = []
        report = ValidationReport()

        for index, record in enumerate(raw_loads):
            with LogContext(record_index=index):
                raw = _as_raw_load(record)
                load = convert_load(raw)
                loads.append(load)
                self._check_states(index, raw, load, report)

        document = BackupDocument(
            exportDate=format_export_date(
                export_date or dt.datetime.now(dt.timezone.utc)
            ),
            loads=loads,
            expenses=[],
            settings={},
        )

        logger.info(
            f"Converted {len(loads)} loads with {report.warning_count} "
            f"unresolved states"
        )
        return ConversionResult(document=document, report=report)

    def convert_file(
        self, input_path: Union[str, Path], output_path: Union[str, Path]
    ) -> ConversionResult:
        """Read, convert and write a load export file.

        The output file is only written once the input has been read and
        converted successfully.

        Args:
            input_path: Source JSON file
            output_path: Destination for the import document

        Returns:
            ConversionResult for the written document

        Raises:
            OSError: If the input cannot be read or the output written
            json.JSONDecodeError: If the input is not valid JSON
            InputShapeError: If the input holds no array of loads
        """
        source = read_json(input_path)
        result = self.convert(source)
        write_document(result.document, output_path)
        return result

    def _check_states(
        self, index: int, raw: RawLoad, load: Load, report: ValidationReport
    ) -> None:
        """Record a warning for each empty pickup/delivery state."""
        if not load.pickup_state:
            logger.debug(f"Unresolved pickup state: {raw.origin!r}")
            report.add_warning(
                "pickup_state",
                "pickup_state empty",
                raw.origin,
                context={"index": index, "origin": raw.origin},
            )

        if not load.delivery_state:
            logger.debug(f"Unresolved delivery state: {raw.destination!r}")
            report.add_warning(
                "delivery_state",
                "delivery_state empty",
                raw.destination,
                context={"index": index, "destination": raw.destination},
            )


def read_json(path: Union[str, Path]) -> Any:
    """Read and parse a UTF-8 JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_document(document: BackupDocument, path: Union[str, Path]) -> None:
    """Write a backup document as indented UTF-8 JSON.

    Args:
        document: Document to write
        path: Destination file path
    """
    output_path = Path(path)
    output_path.write_text(
        json.dumps(document.to_json_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info(f"Wrote {len(document.loads)} loads to {output_path}")
