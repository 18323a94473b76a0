"""File content and traversal provider."""
from .cache import ContentCache
from .classification import (
    DefaultFileClassifier,
    FileClassifier,
    is_dir_supported_by_default,
    is_file_supported_by_default,
    is_manifest_file,
)
from .config import FileReaderSettings
from .default_file_system import FileSystemReader
from .error_handling import (
    CollectingErrorHandler,
    CompositeErrorHandler,
    ConsoleErrorHandler,
    ErrorHandler,
    FileErrorHandler,
)
from .factory import create_file_reader
from .file_reader_interface import CachingFileReader, FileReader
from .ignore import IgnoreMatcher, glob_match, is_ignored
from .logging_config import setup_logging
from .memory_file_system import InMemoryFileReader, InMemoryFileSystem
from .path import to_unix_path_like
from .reader_types import (
    CacheEntry,
    FileReaderError,
    FileSystemConfig,
    IgnoredFileError,
    ProbeResult,
    TraversalIssue,
)
from .walker import ignore_walk, ignore_walk_async

__all__ = [
    'CacheEntry',
    'CachingFileReader',
    'CollectingErrorHandler',
    'CompositeErrorHandler',
    'ConsoleErrorHandler',
    'ContentCache',
    'DefaultFileClassifier',
    'ErrorHandler',
    'FileClassifier',
    'FileErrorHandler',
    'FileReader',
    'FileReaderError',
    'FileReaderSettings',
    'FileSystemConfig',
    'FileSystemReader',
    'IgnoreMatcher',
    'IgnoredFileError',
    'InMemoryFileReader',
    'InMemoryFileSystem',
    'ProbeResult',
    'TraversalIssue',
    'create_file_reader',
    'glob_match',
    'ignore_walk',
    'ignore_walk_async',
    'is_dir_supported_by_default',
    'is_file_supported_by_default',
    'is_ignored',
    'is_manifest_file',
    'setup_logging',
    'to_unix_path_like',
]
