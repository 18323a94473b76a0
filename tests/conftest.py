"""Common test fixtures."""
import logging

import pytest
from pathlib import Path
import tempfile


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def project_tree(temp_dir):
    """Create a small JavaScript project on disk."""
    files = {
        'a.ts': 'export const a = 1;\n',
        'a.js': 'module.exports = 1;\n',
        'package.json': '{"name": "demo"}\n',
        'node_modules/b.ts': 'export const b = 2;\n',
        'src/index.ts': 'import { a } from "../a";\n',
        'src/index.test.ts': 'test("a", () => {});\n',
        'src/types.d.ts': 'declare const x: number;\n',
    }
    for relative, content in files.items():
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
    return temp_dir


@pytest.fixture
def restore_package_logger():
    """Undo handler changes made by setup_logging."""
    package_logger = logging.getLogger('file_reader')
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)
    package_logger.propagate = propagate
