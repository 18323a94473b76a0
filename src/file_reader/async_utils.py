"""Async filesystem helpers for the real file reader backend."""
import asyncio
import os
from functools import partial
from typing import Any, Callable, TypeVar

import aiofiles
import aiofiles.os

from .path import PathLike
from .reader_types import ProbeResult

T = TypeVar("T")

__all__ = [
    'run_blocking',
    'read_text_async',
    'read_text',
    'modified_at_ms',
    'probe_modified_at',
    'probe_readable',
    'probe_size',
]

ENCODING = 'utf-8'


async def run_blocking(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a blocking callable on the default executor.

    Args:
        func: Callable to run
        *args: Positional arguments for ``func``
        **kwargs: Keyword arguments for ``func``

    Returns:
        Whatever ``func`` returns
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(func, *args, **kwargs))


async def read_text_async(file_path: PathLike) -> str:
    """Read a whole file as UTF-8 text.

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    async with aiofiles.open(file_path, mode='r', encoding=ENCODING) as f:
        return await f.read()


def read_text(file_path: PathLike) -> str:
    """Blocking counterpart of ``read_text_async``."""
    with open(file_path, mode='r', encoding=ENCODING) as f:
        return f.read()


def modified_at_ms(stat_result: os.stat_result) -> float:
    """Modification time in fractional milliseconds."""
    return stat_result.st_mtime_ns / 1_000_000


async def probe_modified_at(file_path: PathLike) -> ProbeResult[float]:
    """Current modification time of a file, as a ``ProbeResult``."""
    try:
        return ProbeResult.success(modified_at_ms(await aiofiles.os.stat(file_path)))
    except Exception as e:
        return ProbeResult.failure(e)


async def probe_readable(file_path: PathLike) -> ProbeResult[bool]:
    """Whether the file can be opened for reading."""
    try:
        return ProbeResult.success(await run_blocking(os.access, file_path, os.R_OK))
    except Exception as e:
        return ProbeResult.failure(e)


async def probe_size(file_path: PathLike) -> ProbeResult[int]:
    """Size of a file in bytes."""
    try:
        return ProbeResult.success((await aiofiles.os.stat(file_path)).st_size)
    except Exception as e:
        return ProbeResult.failure(e)
