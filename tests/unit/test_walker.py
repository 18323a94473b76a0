"""Tests for the gitignore-aware file lister."""
import os

import pytest

from src.file_reader.error_handling import CollectingErrorHandler
from src.file_reader.walker import ignore_walk, ignore_walk_async, load_ignore_patterns


def make_tree(root, files):
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')


def listed(root, **kwargs):
    return {path.replace(os.sep, "/") for path in ignore_walk(root, **kwargs)}


def test_lists_all_files_without_ignore_files(temp_dir):
    make_tree(temp_dir, {"a.ts": "", "src/b.ts": "", "src/deep/c.ts": "", ".env": ""})

    assert listed(temp_dir) == {"a.ts", "src/b.ts", "src/deep/c.ts", ".env"}


def test_root_gitignore(temp_dir):
    make_tree(temp_dir, {
        ".gitignore": "dist/\n*.log\n# comment\n\n",
        "a.ts": "",
        "debug.log": "",
        "src/trace.log": "",
        "dist/bundle.js": "",
        "dist/nested/chunk.js": "",
    })

    assert listed(temp_dir) == {".gitignore", "a.ts"}


def test_nested_gitignore_applies_to_its_subtree(temp_dir):
    make_tree(temp_dir, {
        "secret.ts": "",
        "sub/.gitignore": "secret.ts\n/local.ts\n",
        "sub/secret.ts": "",
        "sub/local.ts": "",
        "sub/deeper/local.ts": "",
        "sub/deeper/secret.ts": "",
        "other/secret.ts": "",
    })

    assert listed(temp_dir) == {
        "secret.ts",
        "sub/.gitignore",
        "sub/deeper/local.ts",
        "other/secret.ts",
    }


def test_negation(temp_dir):
    make_tree(temp_dir, {
        ".gitignore": "*.log\n!keep.log\n",
        "drop.log": "",
        "keep.log": "",
    })

    assert listed(temp_dir) == {".gitignore", "keep.log"}


def test_nested_gitignore_can_reinclude(temp_dir):
    make_tree(temp_dir, {
        ".gitignore": "*.gen.ts\n",
        "a.gen.ts": "",
        "src/.gitignore": "!*.gen.ts\n",
        "src/b.gen.ts": "",
    })

    assert listed(temp_dir) == {".gitignore", "src/.gitignore", "src/b.gen.ts"}


def test_custom_ignore_files(temp_dir):
    make_tree(temp_dir, {".npmignore": "*.md\n", ".gitignore": "*.ts\n", "a.ts": "", "README.md": ""})

    assert listed(temp_dir, ignore_files=(".npmignore",)) == {".npmignore", ".gitignore", "a.ts"}


def test_load_ignore_patterns_skips_comments_and_blank_lines(temp_dir):
    make_tree(temp_dir, {".gitignore": "# comment\n\ndist\n!keep\n"})

    patterns = load_ignore_patterns(temp_dir, [".gitignore"])

    assert [pattern.include for pattern in patterns] == [True, False]


def test_missing_root_raises(temp_dir):
    with pytest.raises(FileNotFoundError):
        ignore_walk(temp_dir / "missing")


def test_file_root_raises(temp_dir):
    make_tree(temp_dir, {"a.ts": ""})
    with pytest.raises(NotADirectoryError):
        ignore_walk(temp_dir / "a.ts")


def test_unreadable_subdirectory_is_skipped(temp_dir, monkeypatch, caplog):
    root = str(temp_dir)
    handler = CollectingErrorHandler()

    def fake_walk(top, topdown=True, onerror=None, followlinks=False):
        yield top, ["locked", "open"], ["a.ts"]
        onerror(PermissionError(13, "Permission denied", os.path.join(top, "locked")))
        yield os.path.join(top, "open"), [], ["b.ts"]

    monkeypatch.setattr(os, 'walk', fake_walk)

    files = ignore_walk(root, error_handler=handler)

    assert files == ["a.ts", os.path.join("open", "b.ts")]
    issues = handler.get_errors()
    assert len(issues) == 1
    assert issues[0].path == os.path.join(root, "locked")
    assert issues[0].error_type == "PermissionError"
    assert "Skipping unreadable directory" in caplog.text


def test_unreadable_root_raises(temp_dir, monkeypatch):
    def fake_walk(top, topdown=True, onerror=None, followlinks=False):
        onerror(PermissionError(13, "Permission denied", top))
        yield from ()

    monkeypatch.setattr(os, 'walk', fake_walk)

    with pytest.raises(PermissionError):
        ignore_walk(temp_dir)


@pytest.mark.asyncio
async def test_ignore_walk_async(temp_dir):
    make_tree(temp_dir, {".gitignore": "build\n", "a.ts": "", "build/out.js": ""})

    files = await ignore_walk_async(temp_dir)

    assert sorted(files) == [".gitignore", "a.ts"]
