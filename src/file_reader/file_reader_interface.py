"""File reader interface shared by the real and the in-memory backends."""
import asyncio
import logging
import os
from typing import AsyncGenerator, Dict, Iterable, Optional

from .cache import STALE_SENTINEL, ContentCache
from .classification import DEFAULT_CLASSIFIER, FileClassifier
from .ignore import IgnoreMatcher
from .reader_types import FileSystemConfig, IgnoredFileError, ProbeResult

logger = logging.getLogger('file_reader.core')


class FileReader:
    """Interface for reading and enumerating project files."""

    async def read(self, filename: str) -> str:
        """Read a file's contents.

        Args:
            filename: Path to the file to read

        Returns:
            The file's contents as a string

        Raises:
            IgnoredFileError: If the file matches an ignore pattern
            OSError: If the file cannot be read
        """
        raise NotImplementedError

    async def exists(self, filename: str) -> bool:
        """Check if a file can be read. Never raises.

        Args:
            filename: Path to check

        Returns:
            True if the file is readable, False otherwise
        """
        raise NotImplementedError

    def read_sync(self, filename: str) -> str:
        """Read a file's contents synchronously, bypassing cache and ignore patterns."""
        raise NotImplementedError

    def readdir(self, root: str, extensions: Iterable[str]) -> AsyncGenerator[str, None]:
        """Lazily yield the files under ``root`` worth analyzing.

        Args:
            root: Directory to traverse
            extensions: File extensions (with leading dot) to keep

        Yields:
            Paths joined onto ``root``, in traversal order
        """
        raise NotImplementedError

    async def stats(self, filename: str) -> int:
        """Size of a file in bytes, 0 when unknown. Never raises."""
        raise NotImplementedError

    def get_current_working_dir(self) -> str:
        """The configured project root."""
        raise NotImplementedError


class CachingFileReader(FileReader):
    """Ignore handling, content caching and file qualification for backends.

    Subclasses provide ``_modified_at`` and ``_read_text``.
    """

    def __init__(
        self,
        config: FileSystemConfig,
        classifier: Optional[FileClassifier] = None,
        coalesce_reads: bool = False,
    ):
        self.config = config
        self.classifier = classifier or DEFAULT_CLASSIFIER
        self.cache = ContentCache()
        self.is_file_ignored = IgnoreMatcher(config.ignore_patterns, config.cwd)
        self.coalesce_reads = coalesce_reads
        self._in_flight: Dict[str, asyncio.Future] = {}

    async def _modified_at(self, filename: str) -> ProbeResult[float]:
        raise NotImplementedError

    async def _read_text(self, filename: str) -> str:
        raise NotImplementedError

    async def read(self, filename: str) -> str:
        if self.is_file_ignored(filename):
            raise IgnoredFileError(filename, self.config.ignore_patterns)

        cached = await self._read_from_cache(filename)
        if cached is not None:
            return cached

        if not self.coalesce_reads:
            return await self._load(filename)

        pending = self._in_flight.get(filename)
        if pending is None:
            pending = asyncio.ensure_future(self._load(filename))
            self._in_flight[filename] = pending
            pending.add_done_callback(lambda done: self._forget(filename, done))
        return await asyncio.shield(pending)

    def _forget(self, filename: str, done: asyncio.Future) -> None:
        if self._in_flight.get(filename) is done:
            del self._in_flight[filename]
        if not done.cancelled():
            # Marks a failure as retrieved when every waiter was cancelled
            done.exception()

    async def _read_from_cache(self, filename: str) -> Optional[str]:
        """Return cached content if it is still fresh, evicting it otherwise."""
        entry = self.cache.get(filename)
        if entry is None:
            return None

        current = await self._modified_at(filename)
        if current.is_fatal:
            raise current.error
        if not current.ok:
            logger.warning(f"Could not stat cached file {filename}, reading it again: {current.error}")
            return None

        if not self.cache.is_fresh(entry, current.value):
            self.cache.evict(filename)
            return None
        logger.debug(f"Cache hit for {filename}")
        return entry.content

    async def _load(self, filename: str) -> str:
        content = await self._read_text(filename)

        modified_at = await self._modified_at(filename)
        if modified_at.is_fatal:
            raise modified_at.error
        if not modified_at.ok:
            logger.warning(f"Could not stat {filename} after reading it: {modified_at.error}")

        self.cache.set(filename, modified_at.unwrap_or(STALE_SENTINEL), content)
        return content

    def is_qualifying_file(self, file_path: str, extensions: Iterable[str]) -> bool:
        """Whether traversal should yield this file.

        Supported files in supported directories with a requested extension
        qualify, as do manifest files regardless of extension. Ignored files
        never qualify.
        """
        classifier = self.classifier
        is_supported_file = (
            classifier.is_dir_supported(os.path.dirname(file_path))
            and classifier.is_file_supported(file_path)
            and os.path.splitext(file_path)[1] in extensions
        )
        if not (is_supported_file or classifier.is_manifest_file(file_path)):
            return False
        return not self.is_file_ignored(file_path)

    def get_current_working_dir(self) -> str:
        return self.config.cwd
