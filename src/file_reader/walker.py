"""Gitignore-aware recursive file lister."""
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from .async_utils import run_blocking
from .error_handling import ErrorHandler
from .path import PathLike, to_unix_path_like
from .reader_types import TraversalIssue

logger = logging.getLogger('file_reader.walker')

DEFAULT_IGNORE_FILES: Tuple[str, ...] = (".gitignore",)

# (directory relative to the walk root, patterns declared there)
_Layer = Tuple[str, List[GitWildMatchPattern]]


def load_ignore_patterns(directory: Path, ignore_files: Sequence[str]) -> List[GitWildMatchPattern]:
    """Parse the ignore files found directly inside ``directory``.

    Unreadable ignore files are logged and skipped.
    """
    patterns: List[GitWildMatchPattern] = []
    for name in ignore_files:
        ignore_file = directory / name
        if not ignore_file.is_file():
            continue
        try:
            lines = ignore_file.read_text(encoding='utf-8').splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read ignore file {ignore_file}: {e}")
            continue
        for line in lines:
            try:
                pattern = GitWildMatchPattern(line)
            except ValueError as e:
                logger.warning(f"Invalid pattern {line!r} in {ignore_file}: {e}")
                continue
            if pattern.include is not None:
                patterns.append(pattern)
    return patterns


def _relative_to(path: str, base: str) -> str:
    if not base:
        return path
    return path[len(base) + 1:]


def is_path_ignored(rel_path: str, layers: Sequence[_Layer], is_dir: bool = False) -> bool:
    """Apply every ignore layer from the root down; the last match wins."""
    ignored = False
    for base, patterns in layers:
        if base and not rel_path.startswith(base + "/"):
            continue
        candidate = _relative_to(rel_path, base)
        if is_dir:
            candidate += "/"
        for pattern in patterns:
            if pattern.match_file(candidate) is not None:
                ignored = bool(pattern.include)
    return ignored


def ignore_walk(
    root: PathLike,
    ignore_files: Sequence[str] = DEFAULT_IGNORE_FILES,
    error_handler: Optional[ErrorHandler] = None,
) -> List[str]:
    """List every file under ``root`` that no ignore file excludes.

    Each ignore file applies to the directory it lives in and everything
    below it. Ignored directories are not descended into.

    Args:
        root: Directory to walk
        ignore_files: Names of the ignore files to honour
        error_handler: Receives a ``TraversalIssue`` for every skipped directory

    Returns:
        File paths relative to ``root`` using OS separators, in walk order

    Raises:
        NotADirectoryError: If ``root`` is not a directory
        OSError: If ``root`` itself cannot be listed
    """
    root_path = Path(root)
    if not root_path.is_dir():
        if not root_path.exists():
            raise FileNotFoundError(f"[Errno 2] No such file or directory: '{root}'")
        raise NotADirectoryError(f"Not a directory: {root}")

    root_str = os.fspath(root_path)

    def on_walk_error(error: OSError) -> None:
        if error.filename is None or os.path.abspath(error.filename) == os.path.abspath(root_str):
            raise error
        logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")
        if error_handler is not None:
            error_handler.handle_error(
                TraversalIssue(path=error.filename, message="directory skipped", error=error)
            )

    layers: List[_Layer] = []
    files: List[str] = []

    for dirpath, dirnames, filenames in os.walk(root_str, topdown=True, onerror=on_walk_error):
        rel_dir = to_unix_path_like(os.path.relpath(dirpath, root_str))
        if rel_dir == ".":
            rel_dir = ""

        # Drop layers belonging to directories we have left
        layers = [
            (base, patterns) for base, patterns in layers
            if not base or rel_dir == base or rel_dir.startswith(base + "/")
        ]
        patterns = load_ignore_patterns(Path(dirpath), ignore_files)
        if patterns:
            layers.append((rel_dir, patterns))

        def rel(name: str) -> str:
            return f"{rel_dir}/{name}" if rel_dir else name

        dirnames[:] = [d for d in dirnames if not is_path_ignored(rel(d), layers, is_dir=True)]
        for name in filenames:
            rel_file = rel(name)
            if not is_path_ignored(rel_file, layers):
                files.append(os.path.join(*rel_file.split("/")))

    logger.debug(f"Listed {len(files)} files under {root_str}")
    return files


async def ignore_walk_async(
    root: PathLike,
    ignore_files: Sequence[str] = DEFAULT_IGNORE_FILES,
    error_handler: Optional[ErrorHandler] = None,
) -> List[str]:
    """Run ``ignore_walk`` on the default executor."""
    return await run_blocking(ignore_walk, root, ignore_files, error_handler)
