"""Test fixtures for the file reader backends."""
import pytest
from typing import Dict, List

from src.file_reader.memory_file_system import InMemoryFileReader, InMemoryFileSystem
from src.file_reader.reader_types import FileSystemConfig


class CountingFileSystem(InMemoryFileSystem):
    """In-memory filesystem that records every content read."""

    def __init__(self):
        super().__init__()
        self.reads: List[str] = []

    def read_file(self, path):
        self.reads.append(self.normalize(path))
        return super().read_file(path)


@pytest.fixture
def mock_files() -> Dict[str, str]:
    """Create mock file contents."""
    return {
        '/project/a.ts': 'export const a = 1;',
        '/project/a.js': 'module.exports = 1;',
        '/project/package.json': '{"name": "demo"}',
        '/project/node_modules/b.ts': 'export const b = 2;',
        '/project/src/index.ts': 'import { a } from "../a";',
        '/project/src/index.test.ts': 'test("a", () => {});',
        '/project/src/generated/schema.ts': 'export type Schema = {};',
        '/project/dist/bundle.ts': 'export {};',
    }


@pytest.fixture
def memory_fs(mock_files) -> CountingFileSystem:
    fs = CountingFileSystem()
    for path, content in mock_files.items():
        fs.write_file(path, content)
    return fs


@pytest.fixture
def memory_reader(memory_fs) -> InMemoryFileReader:
    return InMemoryFileReader(FileSystemConfig(cwd="/project"), fs=memory_fs)
