"""In-memory filesystem and the file reader built on it.

Used to exercise traversal and content caching deterministically in tests.
"""
import logging
import posixpath
import time
from dataclasses import dataclass
from typing import AsyncGenerator, Dict, Iterable, List, Mapping, Optional

from .classification import FileClassifier
from .file_reader_interface import CachingFileReader
from .path import PathLike, to_unix_path_like
from .reader_types import FileSystemConfig, ProbeResult

logger = logging.getLogger('file_reader.memory_file_system')


@dataclass(frozen=True)
class InMemoryStat:
    """Subset of ``os.stat_result`` the in-memory filesystem provides."""
    mtime_ms: float
    size: int
    is_dir: bool


@dataclass
class _File:
    content: str
    mtime_ms: float


class InMemoryFileSystem:
    """A tree of directories and text files held in memory.

    Paths are normalized to absolute POSIX form; relative paths resolve
    against ``/``. Every write moves the file's mtime forward.
    """

    def __init__(self):
        self._files: Dict[str, _File] = {}
        self._dirs: Dict[str, List[str]] = {"/": []}
        self._dir_mtimes: Dict[str, float] = {"/": self._now()}
        self._last_tick = 0.0

    @classmethod
    def from_dict(cls, files: Mapping[str, str]) -> "InMemoryFileSystem":
        """Build a filesystem from a ``{path: content}`` mapping."""
        fs = cls()
        for path, content in files.items():
            fs.write_file(path, content)
        return fs

    @staticmethod
    def normalize(path: PathLike) -> str:
        return posixpath.normpath(posixpath.join("/", to_unix_path_like(path)))

    @staticmethod
    def _now() -> float:
        return time.time() * 1000

    def _tick(self) -> float:
        now = self._now()
        if now <= self._last_tick:
            now = self._last_tick + 1
        self._last_tick = now
        return now

    def _add_child(self, parent: str, name: str) -> None:
        children = self._dirs[parent]
        if name not in children:
            children.append(name)
            self._dir_mtimes[parent] = self._tick()

    def mkdir(self, path: PathLike) -> None:
        """Create a directory and any missing parents."""
        path = self.normalize(path)
        if path in self._files:
            raise FileExistsError(f"[Errno 17] File exists: '{path}'")
        if path in self._dirs:
            return
        parent = posixpath.dirname(path)
        self.mkdir(parent)
        self._dirs[path] = []
        self._dir_mtimes[path] = self._tick()
        self._add_child(parent, posixpath.basename(path))

    def write_file(self, path: PathLike, content: str) -> None:
        """Create or overwrite a file, creating parent directories."""
        path = self.normalize(path)
        if path in self._dirs:
            raise IsADirectoryError(f"[Errno 21] Is a directory: '{path}'")
        parent = posixpath.dirname(path)
        self.mkdir(parent)
        self._files[path] = _File(content=content, mtime_ms=self._tick())
        self._add_child(parent, posixpath.basename(path))

    def remove(self, path: PathLike) -> None:
        """Remove a file."""
        path = self.normalize(path)
        if path not in self._files:
            raise FileNotFoundError(f"[Errno 2] No such file or directory: '{path}'")
        del self._files[path]
        parent = posixpath.dirname(path)
        self._dirs[parent].remove(posixpath.basename(path))
        self._dir_mtimes[parent] = self._tick()

    def read_file(self, path: PathLike) -> str:
        path = self.normalize(path)
        if path in self._dirs:
            raise IsADirectoryError(f"[Errno 21] Is a directory: '{path}'")
        try:
            return self._files[path].content
        except KeyError:
            raise FileNotFoundError(f"[Errno 2] No such file or directory: '{path}'") from None

    def stat(self, path: PathLike) -> InMemoryStat:
        path = self.normalize(path)
        if path in self._dirs:
            return InMemoryStat(mtime_ms=self._dir_mtimes[path], size=0, is_dir=True)
        if path in self._files:
            entry = self._files[path]
            return InMemoryStat(
                mtime_ms=entry.mtime_ms,
                size=len(entry.content.encode('utf-8')),
                is_dir=False,
            )
        raise FileNotFoundError(f"[Errno 2] No such file or directory: '{path}'")

    def listdir(self, path: PathLike) -> List[str]:
        """Names of the entries in a directory, in creation order."""
        path = self.normalize(path)
        if path in self._files:
            raise NotADirectoryError(f"[Errno 20] Not a directory: '{path}'")
        try:
            return list(self._dirs[path])
        except KeyError:
            raise FileNotFoundError(f"[Errno 2] No such file or directory: '{path}'") from None

    def is_dir(self, path: PathLike) -> bool:
        return self.normalize(path) in self._dirs

    def exists(self, path: PathLike) -> bool:
        path = self.normalize(path)
        return path in self._dirs or path in self._files


class InMemoryFileReader(CachingFileReader):
    """File reader over an ``InMemoryFileSystem``.

    ``exists`` always answers True and ``stats`` always answers 0; this
    backend is meant for traversal and content tests only.
    """

    def __init__(
        self,
        config: Optional[FileSystemConfig] = None,
        fs: Optional[InMemoryFileSystem] = None,
        classifier: Optional[FileClassifier] = None,
        coalesce_reads: bool = False,
    ):
        super().__init__(
            config or FileSystemConfig(),
            classifier=classifier,
            coalesce_reads=coalesce_reads,
        )
        self.fs = fs if fs is not None else InMemoryFileSystem()

    async def _modified_at(self, filename: str) -> ProbeResult[float]:
        try:
            return ProbeResult.success(self.fs.stat(filename).mtime_ms)
        except Exception as e:
            return ProbeResult.failure(e)

    async def _read_text(self, filename: str) -> str:
        return self.fs.read_file(filename)

    def read_sync(self, filename: str) -> str:
        return self.fs.read_file(filename)

    async def exists(self, filename: str) -> bool:
        return True

    async def stats(self, filename: str) -> int:
        return 0

    async def readdir(self, root: str, extensions: Iterable[str]) -> AsyncGenerator[str, None]:
        """Recursively yield qualifying files, entering supported directories only."""
        extensions = frozenset(extensions)
        for name in self.fs.listdir(root):
            path = posixpath.normpath(posixpath.join(to_unix_path_like(root), name))
            if self.fs.is_dir(path):
                if self.classifier.is_dir_supported(path):
                    async for file_path in self.readdir(path, extensions):
                        yield file_path
                else:
                    logger.debug(f"Skipping unsupported directory {path}")
            elif self.is_qualifying_file(path, extensions):
                yield path
