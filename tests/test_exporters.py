#!/usr/bin/env python3
"""
Unit tests for breakdown exporters
"""

import csv
import json
import sys
import pytest
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.exporters import CsvExporter, JsonExporter, get_exporter
from src.models import RangeOptions
from src.processors import PeriodProcessor


@pytest.fixture
def sample_breakdown():
    """Breakdown of a 3-day window in UTC"""
    options = RangeOptions(range=3, timezone_offset=0)
    return PeriodProcessor(options).process("publishedAt", "2023-06-08")


class TestCsvExporter:
    """Test CsvExporter"""

    def test_export_rows(self, tmp_path, sample_breakdown):
        """Test one row per sub-period plus the RANGE row"""
        output = tmp_path / "nested" / "breakdown.csv"

        result = CsvExporter(output).export(sample_breakdown)

        assert result == output
        assert output.exists()

        with open(output, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))

        assert rows[0][0].startswith("Generated: ")
        assert rows[1] == ["Field: publishedAt", "Range: 3", "Timezone offset: 0"]
        assert rows[2] == []
        assert rows[3] == ['Period', 'Start', 'End', 'Filter']

        data_rows = rows[4:]
        assert [row[0] for row in data_rows] == ["2023-06-06", "2023-06-07", "2023-06-08", "RANGE"]
        assert data_rows[0][1] == "2023-06-05T23:59:59.999Z"
        assert data_rows[-1] == [
            "RANGE",
            "2023-06-05T23:59:59.999Z",
            "2023-06-09T00:00:00.000Z",
            sample_breakdown.expression
        ]


class TestJsonExporter:
    """Test JsonExporter"""

    def test_export(self, tmp_path, sample_breakdown):
        """Test JSON output mirrors to_dict"""
        output = tmp_path / "breakdown.json"

        JsonExporter(output).export(sample_breakdown)

        data = json.loads(output.read_text(encoding='utf-8'))
        assert data['field'] == "publishedAt"
        assert data['period'] == "2023-06-08"
        assert data['granularity'] == "day"
        assert data['range'] == 3
        assert data['end'] == "2023-06-09T00:00:00.000Z"
        assert len(data['entries']) == 3
        assert data['entries'][-1]['period'] == "2023-06-08"


class TestGetExporter:
    """Test get_exporter"""

    def test_known_formats(self, tmp_path):
        """Test format names map to exporter classes"""
        assert isinstance(get_exporter("csv", tmp_path / "a.csv"), CsvExporter)
        assert isinstance(get_exporter("JSON", tmp_path / "a.json"), JsonExporter)

    def test_unknown_format(self, tmp_path):
        """Test unsupported formats"""
        with pytest.raises(ValueError, match="Unsupported export format"):
            get_exporter("xlsx", tmp_path / "a.xlsx")
