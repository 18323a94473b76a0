"""Default file classification used to decide which files are traversed.

Backends take any object implementing ``FileClassifier``; the defaults
below describe a JavaScript/TypeScript project.
"""
import os
from typing import FrozenSet, Protocol, runtime_checkable

from .path import to_unix_path_like

SUPPORTED_EXTENSIONS: FrozenSet[str] = frozenset({
    ".js", ".jsx", ".mjs", ".cjs",
    ".ts", ".tsx", ".mts", ".cts",
})
UNSUPPORTED_DIRECTORIES: FrozenSet[str] = frozenset({"node_modules"})
MANIFEST_FILES: FrozenSet[str] = frozenset({"package.json"})
DECLARATION_SUFFIXES = (".d.ts", ".d.mts", ".d.cts")


@runtime_checkable
class FileClassifier(Protocol):
    """Decides which directories and files are relevant for traversal."""

    def is_dir_supported(self, dir_path: str) -> bool:
        """Whether files inside this directory can be yielded."""
        ...

    def is_file_supported(self, file_path: str) -> bool:
        """Whether this file is a supported source file."""
        ...

    def is_manifest_file(self, file_path: str) -> bool:
        """Whether this file is a project manifest."""
        ...


class DefaultFileClassifier:
    """Classifier for JavaScript and TypeScript sources."""

    def __init__(
        self,
        supported_extensions: FrozenSet[str] = SUPPORTED_EXTENSIONS,
        unsupported_directories: FrozenSet[str] = UNSUPPORTED_DIRECTORIES,
        manifest_files: FrozenSet[str] = MANIFEST_FILES,
    ):
        self.supported_extensions = frozenset(supported_extensions)
        self.unsupported_directories = frozenset(unsupported_directories)
        self.manifest_files = frozenset(manifest_files)

    def is_dir_supported(self, dir_path: str) -> bool:
        parts = to_unix_path_like(dir_path).split("/")
        return not any(part in self.unsupported_directories for part in parts)

    def is_file_supported(self, file_path: str) -> bool:
        name = os.path.basename(to_unix_path_like(file_path))
        if name.endswith(DECLARATION_SUFFIXES):
            return False
        return os.path.splitext(name)[1] in self.supported_extensions

    def is_manifest_file(self, file_path: str) -> bool:
        return os.path.basename(to_unix_path_like(file_path)) in self.manifest_files


DEFAULT_CLASSIFIER = DefaultFileClassifier()


def is_dir_supported_by_default(dir_path: str) -> bool:
    return DEFAULT_CLASSIFIER.is_dir_supported(dir_path)


def is_file_supported_by_default(file_path: str) -> bool:
    return DEFAULT_CLASSIFIER.is_file_supported(file_path)


def is_manifest_file(file_path: str) -> bool:
    return DEFAULT_CLASSIFIER.is_manifest_file(file_path)
