"""
CSV exporter - one row per sub-period plus the overall window
"""

import csv
import logging
from pathlib import Path

from .base_exporter import BaseExporter
from ..models import PeriodBreakdown

logger = logging.getLogger(__name__)

HEADER = ['Period', 'Start', 'End', 'Filter']


class CsvExporter(BaseExporter):
    """Export period breakdowns to CSV"""

    def export(self, breakdown: PeriodBreakdown) -> Path:
        self._ensure_directory()

        with open(self.output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            self._write_metadata_header(writer, breakdown)
            writer.writerow(HEADER)

            for entry in breakdown.entries:
                writer.writerow([entry.label, entry.start, entry.end, entry.expression])

            writer.writerow([
                'RANGE',
                breakdown.boundaries.start,
                breakdown.boundaries.end,
                breakdown.expression
            ])

        logger.info(f"CSV breakdown saved to: {self.output_path}")
        return self.output_path
