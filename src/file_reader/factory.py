"""Factory for file reader backends."""
from typing import Optional

from .classification import FileClassifier
from .config import FileReaderSettings
from .default_file_system import FileSystemReader
from .error_handling import ErrorHandler
from .file_reader_interface import FileReader
from .memory_file_system import InMemoryFileReader, InMemoryFileSystem


def create_file_reader(
    settings: Optional[FileReaderSettings] = None,
    virtual: bool = False,
    fs: Optional[InMemoryFileSystem] = None,
    classifier: Optional[FileClassifier] = None,
    error_handler: Optional[ErrorHandler] = None,
) -> FileReader:
    """Create a file reader for the given settings.

    Args:
        settings: Settings to use, read from the environment when omitted
        virtual: Return an in-memory backend instead of the disk backend
        fs: In-memory filesystem for the virtual backend
        classifier: File classifier, the default one when omitted
        error_handler: Receives traversal issues from the disk backend

    Returns:
        A new backend with an empty cache
    """
    settings = settings or FileReaderSettings()
    config = settings.to_file_system_config()

    if virtual or fs is not None:
        return InMemoryFileReader(
            config,
            fs=fs,
            classifier=classifier,
            coalesce_reads=settings.coalesce_reads,
        )
    return FileSystemReader(
        config,
        classifier=classifier,
        error_handler=error_handler,
        coalesce_reads=settings.coalesce_reads,
        ignore_files=settings.ignore_files,
    )
