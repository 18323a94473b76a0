"""Ignore pattern matching shared by the file reader backends."""
import fnmatch
import logging
from functools import lru_cache
from typing import Iterable, Sequence, Tuple

from .path import PathLike, join_under_root, relative_to_root, strip_dot_prefix, to_unix_path_like

logger = logging.getLogger('file_reader.ignore')


def _split(path: str) -> Tuple[str, ...]:
    return tuple(segment for segment in path.split("/") if segment)


@lru_cache(maxsize=1024)
def _compile(pattern: str) -> Tuple[bool, Tuple[str, ...]]:
    pattern = strip_dot_prefix(to_unix_path_like(pattern).strip())
    return pattern.startswith("/"), _split(pattern)


def _match_segments(parts: Sequence[str], pats: Sequence[str]) -> bool:
    """Match path components against pattern components.

    Succeeds once the pattern is exhausted on the path or on one of its
    ancestor directories.
    """
    def rec(i: int, j: int) -> bool:
        if j == len(pats):
            return i > 0
        token = pats[j]
        if token == "**":
            return rec(i, j + 1) or (i < len(parts) and rec(i + 1, j))
        return (
            i < len(parts)
            and fnmatch.fnmatchcase(parts[i], token)
            and rec(i + 1, j + 1)
        )

    return rec(0, 0)


def glob_match(path: PathLike, pattern: str) -> bool:
    """Match a path against a glob pattern.

    Dotfiles are eligible like any other name. A pattern without a slash
    matches any single component of the path, and a pattern that matches a
    directory also matches everything below it.

    Args:
        path: Path to test, any separator style
        pattern: Glob pattern, ``**`` matching any number of components

    Returns:
        True if the pattern matches the path
    """
    path_str = strip_dot_prefix(to_unix_path_like(path))
    anchored, pats = _compile(pattern)
    if not pats:
        return False

    parts = _split(path_str)
    if not anchored and len(pats) == 1:
        if any(fnmatch.fnmatchcase(part, pats[0]) for part in parts):
            return True

    if anchored != path_str.startswith("/") and pats[0] != "**":
        return False
    return _match_segments(parts, pats)


def is_ignored(path: PathLike, patterns: Sequence[str], cwd: PathLike) -> bool:
    """Check whether a path matches one of the configured ignore patterns.

    Each pattern is tried both resolved under ``cwd`` and as written. A
    relative pattern tried as written only sees the part of the path below
    ``cwd``, so directories above the project root never match it.

    Args:
        path: Path to check
        patterns: Ordered glob patterns
        cwd: Project root the patterns are relative to

    Returns:
        True on the first matching pattern, False otherwise
    """
    if not patterns:
        return False

    filename = to_unix_path_like(path)
    relative = relative_to_root(filename, cwd)
    for pattern in patterns:
        anchored, _ = _compile(pattern)
        raw_target = filename if relative is None or anchored else relative
        if glob_match(filename, join_under_root(cwd, pattern)) or glob_match(raw_target, pattern):
            logger.debug(f"{filename} matched ignore pattern {pattern!r}")
            return True
    return False


class IgnoreMatcher:
    """Ignore patterns bound to a project root."""

    def __init__(self, patterns: Iterable[str], cwd: PathLike):
        self.patterns: Tuple[str, ...] = tuple(patterns)
        self.cwd = cwd

    def __call__(self, path: PathLike) -> bool:
        return is_ignored(path, self.patterns, self.cwd)

    def __repr__(self) -> str:
        return f"IgnoreMatcher(patterns={list(self.patterns)!r}, cwd={self.cwd!r})"
