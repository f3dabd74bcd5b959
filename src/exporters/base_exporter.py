"""
Base exporter class for all export formats
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ..models import PeriodBreakdown


class BaseExporter(ABC):
    """Abstract base class for exporters"""

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)

    @abstractmethod
    def export(self, breakdown: PeriodBreakdown) -> Path:
        """Export a period breakdown"""
        pass

    def _ensure_directory(self):
        """Ensure output directory exists"""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def _write_metadata_header(self, writer, breakdown: PeriodBreakdown):
        """Write generation timestamp and window settings to CSV

        Args:
            writer: CSV writer object
            breakdown: PeriodBreakdown with timestamp metadata
        """
        if breakdown.generated_at:
            timestamp_str = breakdown.generated_at.strftime('%Y-%m-%d %H:%M:%S')
            writer.writerow([f"Generated: {timestamp_str} (UTC)"])
        writer.writerow([
            f"Field: {breakdown.field_name}",
            f"Range: {breakdown.options.range}",
            f"Timezone offset: {breakdown.options.timezone_offset}"
        ])
        writer.writerow([])
