"""
Tests for configuration module
"""

import sys
import pytest
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import FilterConfig, ExportConfig, Config
from src.models import RangeOptions

ENV_VARS = [
    'DATE_RANGE_FIELD',
    'DATE_RANGE_TIMEZONE_OFFSET',
    'DATE_RANGE_RANGE',
    'DATE_RANGE_TIMEZONE',
    'DATE_RANGE_LOCALE',
    'DATE_RANGE_OUTPUT_DIR',
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all DATE_RANGE_* variables"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestFilterConfig:
    """Test FilterConfig class"""

    def test_defaults(self):
        """Test default values"""
        config = FilterConfig()

        assert config.field_name == "publishedAt"
        assert config.timezone_offset == 9
        assert config.range == 1
        assert config.time_zone == "Asia/Tokyo"
        assert config.locale == "ja-JP"

    def test_from_env_defaults(self, clean_env):
        """Test loading with no environment variables set"""
        config = FilterConfig.from_env()

        assert config == FilterConfig()

    def test_from_env(self, clean_env):
        """Test loading from environment variables"""
        clean_env.setenv('DATE_RANGE_FIELD', ' createdAt ')
        clean_env.setenv('DATE_RANGE_TIMEZONE_OFFSET', '-5')
        clean_env.setenv('DATE_RANGE_RANGE', '7')
        clean_env.setenv('DATE_RANGE_TIMEZONE', 'America/New_York')
        clean_env.setenv('DATE_RANGE_LOCALE', 'en-US')

        config = FilterConfig.from_env()

        assert config.field_name == "createdAt"
        assert config.timezone_offset == -5
        assert config.range == 7
        assert config.time_zone == "America/New_York"
        assert config.locale == "en-US"

    def test_from_env_invalid_offset(self, clean_env):
        """Test non-integer offset"""
        clean_env.setenv('DATE_RANGE_TIMEZONE_OFFSET', 'JST')

        with pytest.raises(ValueError, match="Invalid DATE_RANGE_TIMEZONE_OFFSET"):
            FilterConfig.from_env()

    def test_from_env_invalid_range(self, clean_env):
        """Test non-integer range"""
        clean_env.setenv('DATE_RANGE_RANGE', 'week')

        with pytest.raises(ValueError, match="Invalid DATE_RANGE_RANGE"):
            FilterConfig.from_env()

    def test_validate_valid_config(self):
        """Test validation with valid config"""
        assert FilterConfig(timezone_offset=-12).validate() is True
        assert FilterConfig(timezone_offset=14).validate() is True

    def test_validate_empty_field(self):
        """Test validation with empty field name"""
        with pytest.raises(ValueError, match="Invalid DATE_RANGE_FIELD"):
            FilterConfig(field_name="").validate()

    def test_validate_offset_out_of_range(self):
        """Test validation with impossible offset"""
        with pytest.raises(ValueError, match="Invalid DATE_RANGE_TIMEZONE_OFFSET"):
            FilterConfig(timezone_offset=15).validate()

    def test_validate_range(self):
        """Test validation with range below 1"""
        with pytest.raises(ValueError, match="Invalid DATE_RANGE_RANGE"):
            FilterConfig(range=0).validate()

    def test_to_range_options(self):
        """Test conversion to RangeOptions"""
        options = FilterConfig(range=3, timezone_offset=0).to_range_options()
        assert options == RangeOptions(range=3, timezone_offset=0)


class TestExportConfig:
    """Test ExportConfig class"""

    def test_create_export_config(self):
        """Test creating ExportConfig"""
        config = ExportConfig()

        assert config.format == "csv"
        assert config.filename is None
        assert config.output_dir == "reports"

    def test_get_filename_default(self):
        """Test filename generation per format"""
        assert ExportConfig(format="csv").get_filename("2023-06") == "filter_breakdown_2023-06.csv"
        assert ExportConfig(format="json").get_filename("2023") == "filter_breakdown_2023.json"

    def test_get_filename_custom(self):
        """Test custom filename"""
        config = ExportConfig(filename="custom.csv")
        assert config.get_filename("2023") == "custom.csv"

    def test_from_env_output_dir(self, clean_env):
        """Test output directory from environment"""
        clean_env.setenv('DATE_RANGE_OUTPUT_DIR', '/tmp/filters')
        assert ExportConfig.from_env().output_dir == "/tmp/filters"


class TestConfig:
    """Test main Config class"""

    def test_from_env(self, clean_env):
        """Test loading all configuration"""
        clean_env.setenv('DATE_RANGE_FIELD', 'updatedAt')

        config = Config.from_env()

        assert config.filter.field_name == "updatedAt"
        assert isinstance(config.export, ExportConfig)
        assert config.validate() is True

    def test_explicit_sections(self):
        """Test passing configuration sections"""
        config = Config(
            filter=FilterConfig(field_name="date"),
            export=ExportConfig(format="json")
        )

        assert config.filter.field_name == "date"
        assert config.export.format == "json"

    def test_validate_propagates(self):
        """Test validation errors surface from the container"""
        config = Config(filter=FilterConfig(range=0), export=ExportConfig())

        with pytest.raises(ValueError):
            config.validate()
