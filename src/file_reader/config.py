"""Configuration management for the file reader."""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import tomli
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .reader_types import FileSystemConfig

logger = logging.getLogger('file_reader.config')

PYPROJECT_TABLE = 'file-reader'


def load_pyproject_settings(file_path: Union[str, Path]) -> Dict[str, Any]:
    """Read the ``[tool.file-reader]`` table of a pyproject.toml file.

    Keys may be written with dashes or underscores.

    Returns:
        The table as a dict, empty if the file or table is missing or the
        file cannot be parsed
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        return {}

    try:
        with open(file_path, 'rb') as f:
            data = tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        logger.error(f"Error parsing {file_path}: {e}")
        return {}

    table = data.get('tool', {}).get(PYPROJECT_TABLE, {})
    if not isinstance(table, dict):
        logger.warning(f"Ignoring [tool.{PYPROJECT_TABLE}] in {file_path}: not a table")
        return {}
    return {key.replace('-', '_'): value for key, value in table.items()}


class FileReaderSettings(BaseSettings):
    """Configuration settings for file reader backends."""

    cwd: str = Field(
        default="./",
        description="Project root that ignore patterns are relative to"
    )
    ignore_patterns: List[str] = Field(
        default_factory=list,
        description="Glob patterns excluded from reads and traversal"
    )
    ignore_files: List[str] = Field(
        default_factory=lambda: [".gitignore"],
        description="Ignore files honoured when listing files on disk"
    )
    coalesce_reads: bool = Field(
        default=False,
        description="Share one in-flight read between concurrent reads of the same file"
    )
    log_level: str = Field(
        default="INFO",
        description="Console log level"
    )

    model_config = SettingsConfigDict(
        env_prefix="FILE_READER_",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def from_pyproject(cls, file_path: Union[str, Path]) -> "FileReaderSettings":
        """Settings from pyproject.toml; values there take precedence over the environment."""
        return cls(**load_pyproject_settings(file_path))

    def merge_with(self, other: "FileReaderSettings") -> "FileReaderSettings":
        """Merge this config with another, preferring values set on the other."""
        return FileReaderSettings(**{
            **self.model_dump(),
            **other.model_dump(exclude_unset=True)
        })

    def to_file_system_config(self, cwd: Optional[Union[str, Path]] = None) -> FileSystemConfig:
        """The immutable configuration handed to a backend."""
        return FileSystemConfig(
            cwd=str(cwd) if cwd is not None else self.cwd,
            ignore_patterns=tuple(self.ignore_patterns),
        )
