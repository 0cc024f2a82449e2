"""Converters from exported load files to the import format."""

from truckflow.converters.load_converter import (
    ConversionResult,
    InputShapeError,
    LoadConverter,
    convert_load,
    extract_raw_loads,
    read_json,
    write_document,
)

__all__ = [
    "ConversionResult",
    "InputShapeError",
    "LoadConverter",
    "convert_load",
    "extract_raw_loads",
    "read_json",
    "write_document",
]
