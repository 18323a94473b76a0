"""File reader backed by the operating system's filesystem."""
import logging
import os
from typing import AsyncGenerator, Iterable, Optional, Sequence

from .async_utils import probe_modified_at, probe_readable, probe_size, read_text, read_text_async
from .classification import FileClassifier
from .error_handling import ErrorHandler
from .file_reader_interface import CachingFileReader
from .reader_types import FileSystemConfig, ProbeResult
from .walker import DEFAULT_IGNORE_FILES, ignore_walk_async

logger = logging.getLogger('file_reader.default_file_system')


class FileSystemReader(CachingFileReader):
    """Reads project files from disk, caching content by modification time."""

    def __init__(
        self,
        config: FileSystemConfig,
        classifier: Optional[FileClassifier] = None,
        error_handler: Optional[ErrorHandler] = None,
        coalesce_reads: bool = False,
        ignore_files: Sequence[str] = DEFAULT_IGNORE_FILES,
    ):
        super().__init__(config, classifier=classifier, coalesce_reads=coalesce_reads)
        self.error_handler = error_handler
        self.ignore_files = tuple(ignore_files)

    async def _modified_at(self, filename: str) -> ProbeResult[float]:
        return await probe_modified_at(filename)

    async def _read_text(self, filename: str) -> str:
        return await read_text_async(filename)

    async def exists(self, filename: str) -> bool:
        result = await probe_readable(filename)
        if result.is_fatal:
            logger.error(f"Unexpected error probing {filename}: {result.error!r}")
        return result.unwrap_or(False)

    def read_sync(self, filename: str) -> str:
        return read_text(filename)

    async def stats(self, filename: str) -> int:
        result = await probe_size(filename)
        if result.is_fatal:
            logger.error(f"Unexpected error getting the size of {filename}: {result.error!r}")
        return result.unwrap_or(0)

    async def readdir(self, root: str, extensions: Iterable[str]) -> AsyncGenerator[str, None]:
        """Yield qualifying files under ``root`` in the lister's order.

        The whole candidate list is fetched up front; filtering then happens
        as the caller pulls each path.
        """
        extensions = frozenset(extensions)
        file_paths = await ignore_walk_async(root, self.ignore_files, self.error_handler)

        for relative_path in file_paths:
            file_path = os.path.normpath(os.path.join(root, relative_path))
            if self.is_qualifying_file(file_path, extensions):
                yield file_path
