"""Process-lifetime content cache keyed on file modification time.

Each backend owns one ``ContentCache``. Entries are never refreshed in
place: a stale entry is evicted and a new one is stored after the next
full read.
"""
import logging
from typing import Dict, Iterator, Optional

from .reader_types import CacheEntry

logger = logging.getLogger('file_reader.cache')

# Stored when the mtime of freshly read content could not be determined.
# Never equal to a real mtime, so the entry is stale on the next access.
STALE_SENTINEL = 0


class ContentCache:
    """Mapping of file path to ``CacheEntry``."""

    def __init__(self):
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, path: str) -> Optional[CacheEntry]:
        return self._entries.get(path)

    def set(self, path: str, modified_at: float, content: str) -> CacheEntry:
        entry = CacheEntry(modified_at=modified_at, content=content)
        self._entries[path] = entry
        return entry

    def evict(self, path: str) -> None:
        if self._entries.pop(path, None) is not None:
            logger.debug(f"Evicted stale cache entry for {path}")

    @staticmethod
    def is_fresh(entry: CacheEntry, current_modified_at: float) -> bool:
        """An entry is valid only while its mtime equals the file's current one."""
        return entry.modified_at == current_modified_at

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
