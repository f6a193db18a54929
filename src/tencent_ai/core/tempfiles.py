"""
tempfiles.py - unique scratch paths for transient downloads.

``allocate_temp_path`` only hands out names; ``scoped_temp_file`` wraps one in
an async context manager that removes the file on every exit path.

Example:
    async with scoped_temp_file(suffix=".png") as path:
        await download(url, path)
        data = Path(path).read_bytes()
"""

import itertools
import os
import tempfile
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from ..utils.log_utils import get_logger

logger = get_logger(__name__)

TEMP_PREFIX = "tencent-ai-"

_counter = itertools.count()


def allocate_temp_path(directory: Optional[str] = None, suffix: str = "") -> str:
    """Return a fresh path in the scratch directory. No file is created."""
    base = directory or tempfile.gettempdir()
    name = f"{TEMP_PREFIX}{os.getpid()}-{next(_counter)}-{uuid.uuid4().hex[:12]}{suffix}"
    return os.path.join(base, name)


def remove_quietly(path: str) -> None:
    """Delete ``path``; failures are logged, never raised."""
    try:
        os.unlink(path)
    except FileNotFoundError:
        logger.debug("Temp file %s was never created", path)
    except OSError as err:
        logger.warning("Failed to remove temp file %s: %s", path, err)


@asynccontextmanager
async def scoped_temp_file(directory: Optional[str] = None, suffix: str = "") -> AsyncIterator[str]:
    """Yield a unique temp path and remove whatever ends up there afterwards."""
    path = allocate_temp_path(directory, suffix)
    logger.debug("Allocated temp file %s", path)
    try:
        yield path
    finally:
        remove_quietly(path)
