"""Path normalization helpers shared by both file reader backends."""
import os
import posixpath
from pathlib import PurePath
from typing import Optional, Union

PathLike = Union[str, PurePath, os.PathLike]


def to_unix_path_like(path: PathLike) -> str:
    """Map any platform path to its forward-slash form.

    Glob matching is only defined over forward slashes, so Windows paths
    have to be converted before they are compared with ignore patterns.

    Args:
        path: Path to normalize

    Returns:
        The same path with every backslash replaced by a forward slash
    """
    return os.fspath(path).replace("\\", "/")


def join_under_root(cwd: PathLike, pattern: str) -> str:
    """Resolve a pattern relative to the project root.

    The pattern is always treated as relative to ``cwd``, even when it
    starts with a separator.

    Args:
        cwd: Project root
        pattern: Glob pattern as written in the configuration

    Returns:
        Root-joined, normalized pattern using forward slashes only
    """
    joined = to_unix_path_like(cwd) + "/" + to_unix_path_like(pattern)
    return posixpath.normpath(joined)


def strip_dot_prefix(path: str) -> str:
    """Drop repeated leading ``./`` markers from a forward-slash path."""
    while path.startswith("./"):
        path = path[2:]
    return path


def relative_to_root(path: PathLike, cwd: PathLike) -> Optional[str]:
    """Express a path relative to the project root.

    Args:
        path: Path to relativize, any separator style
        cwd: Project root

    Returns:
        The forward-slash path below ``cwd`` (empty for the root itself),
        or None when the path does not lie under ``cwd``
    """
    path_str = posixpath.normpath(to_unix_path_like(path))
    root = posixpath.normpath(to_unix_path_like(cwd))
    if root == ".":
        if path_str.startswith("/") or path_str == ".." or path_str.startswith("../"):
            return None
        return "" if path_str == "." else path_str
    if path_str == root:
        return ""
    prefix = root.rstrip("/") + "/"
    if path_str.startswith(prefix):
        return path_str[len(prefix):]
    return None
