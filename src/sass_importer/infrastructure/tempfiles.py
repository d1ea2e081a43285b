"""Scoped temporary files for compiler output."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


@contextmanager
def scoped_temp_file(suffix: str = ".css") -> Iterator[Path]:
    """Yield the path of a fresh, empty temp file and delete it on exit.

    The file is removed on every exit path, including exceptions raised
    inside the ``with`` block.
    """
    fd, name = tempfile.mkstemp(prefix="sass-importer-", suffix=suffix)
    os.close(fd)
    path = Path(name)
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)
