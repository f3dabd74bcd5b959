"""
Breakdown exporters for different formats
"""

from pathlib import Path

from .base_exporter import BaseExporter
from .csv_exporter import CsvExporter
from .json_exporter import JsonExporter

EXPORTER_MAP = {
    'csv': CsvExporter,
    'json': JsonExporter
}


def get_exporter(format: str, output_path: Path) -> BaseExporter:
    """Get an exporter instance for a format name"""
    try:
        exporter_class = EXPORTER_MAP[format.lower()]
    except KeyError:
        raise ValueError(f"Unsupported export format: {format}") from None
    return exporter_class(Path(output_path))


__all__ = [
    'BaseExporter',
    'CsvExporter',
    'JsonExporter',
    'EXPORTER_MAP',
    'get_exporter'
]
