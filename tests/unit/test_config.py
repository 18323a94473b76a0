"""Tests for configuration management."""
import pytest

from src.file_reader.config import FileReaderSettings, load_pyproject_settings
from src.file_reader.reader_types import FileSystemConfig


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("CWD", "IGNORE_PATTERNS", "IGNORE_FILES", "COALESCE_READS", "LOG_LEVEL"):
        monkeypatch.delenv(f"FILE_READER_{name}", raising=False)


@pytest.fixture
def mock_pyproject(temp_dir):
    """Create a mock pyproject.toml file."""
    pyproject = temp_dir / "pyproject.toml"
    pyproject.write_text("""
[project]
name = "demo"

[tool.file-reader]
cwd = "/project"
ignore-patterns = ["dist", "*.test.ts"]
coalesce_reads = true
""")
    return pyproject


def test_defaults():
    settings = FileReaderSettings()
    assert settings.cwd == "./"
    assert settings.ignore_patterns == []
    assert settings.ignore_files == [".gitignore"]
    assert settings.coalesce_reads is False
    assert settings.log_level == "INFO"


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("FILE_READER_CWD", "/from/env")
    monkeypatch.setenv("FILE_READER_IGNORE_PATTERNS", '["coverage"]')
    monkeypatch.setenv("FILE_READER_COALESCE_READS", "true")

    settings = FileReaderSettings()

    assert settings.cwd == "/from/env"
    assert settings.ignore_patterns == ["coverage"]
    assert settings.coalesce_reads is True


def test_load_pyproject_settings(mock_pyproject):
    assert load_pyproject_settings(mock_pyproject) == {
        'cwd': '/project',
        'ignore_patterns': ['dist', '*.test.ts'],
        'coalesce_reads': True,
    }


def test_load_pyproject_settings_missing_file(temp_dir):
    assert load_pyproject_settings(temp_dir / "pyproject.toml") == {}


def test_load_pyproject_settings_without_table(temp_dir):
    pyproject = temp_dir / "pyproject.toml"
    pyproject.write_text('[project]\nname = "demo"\n')
    assert load_pyproject_settings(pyproject) == {}


def test_load_pyproject_settings_invalid_toml(temp_dir, caplog):
    pyproject = temp_dir / "pyproject.toml"
    pyproject.write_text('[tool.file-reader\ncwd = ')

    assert load_pyproject_settings(pyproject) == {}
    assert "Error parsing" in caplog.text


def test_from_pyproject_overrides_environment(mock_pyproject, monkeypatch):
    monkeypatch.setenv("FILE_READER_CWD", "/from/env")
    monkeypatch.setenv("FILE_READER_LOG_LEVEL", "DEBUG")

    settings = FileReaderSettings.from_pyproject(mock_pyproject)

    assert settings.cwd == "/project"
    assert settings.log_level == "DEBUG"
    assert settings.ignore_patterns == ["dist", "*.test.ts"]


def test_merge_with_prefers_explicit_values():
    base = FileReaderSettings(cwd="/base", ignore_patterns=["dist"])
    override = FileReaderSettings(ignore_patterns=["coverage"])

    merged = base.merge_with(override)

    assert merged.cwd == "/base"
    assert merged.ignore_patterns == ["coverage"]


def test_to_file_system_config():
    settings = FileReaderSettings(cwd="/project", ignore_patterns=["dist"])

    assert settings.to_file_system_config() == FileSystemConfig(cwd="/project", ignore_patterns=("dist",))
    assert settings.to_file_system_config(cwd="/elsewhere").cwd == "/elsewhere"
