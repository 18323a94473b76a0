"""File reader type definitions."""
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Generic, Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class FileSystemConfig:
    """Configuration owned by a single file reader backend.

    ``ignore_patterns`` is frozen to a tuple so a backend's configuration
    cannot change after construction.
    """
    cwd: str = "./"
    ignore_patterns: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "cwd", os.fspath(self.cwd))
        object.__setattr__(self, "ignore_patterns", tuple(self.ignore_patterns))


@dataclass(frozen=True)
class CacheEntry:
    """Content of a file together with the mtime (ms) it was read at."""
    modified_at: float
    content: str


class OutcomeKind(str, Enum):
    """How a filesystem probe ended."""
    OK = 'ok'
    RECOVERABLE = 'recoverable'
    FATAL = 'fatal'


@dataclass(frozen=True)
class ProbeResult(Generic[T]):
    """Result of a stat/access probe.

    OS level failures (missing file, permission denied, ...) are
    recoverable. Anything else is fatal and points at a programming error.
    """
    value: Optional[T] = None
    error: Optional[BaseException] = None
    kind: OutcomeKind = OutcomeKind.OK

    @classmethod
    def success(cls, value: T) -> "ProbeResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "ProbeResult[T]":
        kind = OutcomeKind.RECOVERABLE if isinstance(error, OSError) else OutcomeKind.FATAL
        return cls(error=error, kind=kind)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    @property
    def is_fatal(self) -> bool:
        return self.kind is OutcomeKind.FATAL

    def unwrap_or(self, default: T) -> T:
        """Return the probed value, or ``default`` when the probe failed."""
        return self.value if self.ok else default


class FileReaderError(Exception):
    """Base error for file reader backends."""


class IgnoredFileError(FileReaderError):
    """Raised by ``read`` when the requested file matches an ignore pattern."""

    def __init__(self, path: Union[str, Path], ignore_patterns: Sequence[str]):
        self.path = os.fspath(path)
        self.ignore_patterns = tuple(ignore_patterns)
        super().__init__(
            f"File {self.path} is ignored due to one of these ignore patterns "
            f"{' - '.join(self.ignore_patterns)}"
        )


@dataclass
class TraversalIssue:
    """A directory that could not be listed during traversal."""
    path: Union[str, Path]
    message: str
    error: Optional[BaseException] = None

    @property
    def error_type(self) -> str:
        return type(self.error).__name__ if self.error else "TraversalIssue"

    def __str__(self) -> str:
        return f"[{self.error_type}] in {self.path} {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': os.fspath(self.path),
            'error_type': self.error_type,
            'message': self.message,
        }
