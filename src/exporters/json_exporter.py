"""
JSON exporter
"""

import json
import logging
from pathlib import Path

from .base_exporter import BaseExporter
from ..models import PeriodBreakdown

logger = logging.getLogger(__name__)


class JsonExporter(BaseExporter):
    """Export period breakdowns to JSON"""

    def export(self, breakdown: PeriodBreakdown) -> Path:
        self._ensure_directory()

        with open(self.output_path, 'w', encoding='utf-8') as f:
            json.dump(breakdown.to_dict(), f, indent=2, ensure_ascii=False)

        logger.info(f"JSON breakdown saved to: {self.output_path}")
        return self.output_path
