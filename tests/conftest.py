"""
Pytest configuration and fixtures for momento2dayone tests.
"""

from pathlib import Path
from typing import Generator
import tempfile
import pytest

from momento2dayone.settings import AppSettings, DayOneSettings, LoggingSettings


SAMPLE_EXPORT = """13 August 2002
==============

13:45
Hello, Day One!
With: Joe Bloggs, John Smith
At: Home: 1 Road Drive, Country (0.00000000, -0.00000000)
At: Work
Tags: Journaling, First Entry
Media: MEDIA_005.mp4
Media: MEDIA_109.jpg

18:02
Second moment of the day.

Spans two paragraphs.

14 August 2002
==============

09:15
Tags: Morning
Next day.
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_settings() -> AppSettings:
    """Create test settings with minimal configuration."""
    return AppSettings(
        name="TestMomento2DayOne",
        version="0.1.0-test",
        debug=True,
        dayone=DayOneSettings(batch_pause_seconds=0, require_macos=False),
        logging=LoggingSettings(file=None)
    )


@pytest.fixture
def sample_export() -> str:
    """Three moments across two days."""
    return SAMPLE_EXPORT


@pytest.fixture
def export_file(temp_dir: Path, sample_export: str) -> Path:
    """Write the sample export the way Momento lays it out on disk."""
    export_dir = temp_dir / "Momento Export 2017-08-13 16_27_04"
    (export_dir / "Attachments").mkdir(parents=True)
    export = export_dir / "Export.txt"
    export.write_bytes(b"\xef\xbb\xbf" + sample_export.encode("utf-8"))
    return export


@pytest.fixture
def sample_env_file(temp_dir: Path) -> Path:
    """Create a sample .env file for testing."""
    env_file = temp_dir / ".env"
    env_content = """
DAYONE_JOURNAL=Momento
MOMENTO_EXPECTED_MOMENTS=6134
LOG_LEVEL=DEBUG
"""
    env_file.write_text(env_content.strip())
    return env_file


@pytest.fixture
def sample_yaml_config(temp_dir: Path) -> Path:
    """Create a sample YAML config file for testing."""
    yaml_file = temp_dir / "settings.yaml"
    yaml_content = """
app:
  name: "TestMomento2DayOne"
  version: "0.1.0-test"
  debug: true

momento:
  media_dir: "/tmp/Attachments"
  expected_moments: 3

dayone:
  journal: "Imported"
  batch_size: 50
  batch_pause_seconds: 2.5

logging:
  level: "DEBUG"
  file: null
"""
    yaml_file.write_text(yaml_content.strip())
    return yaml_file
