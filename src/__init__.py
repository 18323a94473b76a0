"""File content and traversal provider package."""

from .file_reader import (
    FileReader,
    FileReaderSettings,
    FileSystemConfig,
    FileSystemReader,
    IgnoredFileError,
    InMemoryFileReader,
    InMemoryFileSystem,
    create_file_reader,
)

__version__ = "0.1.0"

__all__ = [
    "FileReader",
    "FileReaderSettings",
    "FileSystemConfig",
    "FileSystemReader",
    "IgnoredFileError",
    "InMemoryFileReader",
    "InMemoryFileSystem",
    "create_file_reader",
]
