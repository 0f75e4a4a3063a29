"""A flat-file record of installed package URLs."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from .bstring import BString
from .search import find as _find

log = logging.getLogger(__name__)

DB_DIR = "/usr/local/.devpkg"
DB_NAME = "db"


class DatabaseError(OSError):
    """Raised when the package database cannot be read or written."""


class PackageDB:
    """Installed-package list stored as one URL per line in ``<directory>/db``."""

    def __init__(self, directory: Union[str, os.PathLike] = DB_DIR) -> None:
        self.directory = Path(directory)
        self.path = self.directory / DB_NAME

    def init(self) -> None:
        """Create the database directory and an empty database file if needed."""
        if not os.access(self.directory, os.W_OK | os.X_OK):
            try:
                self.directory.mkdir(mode=0o770, parents=True, exist_ok=True)
            except OSError as exc:
                raise DatabaseError(
                    f"Failed to make database dir: {self.directory}"
                ) from exc
        if not os.access(self.path, os.W_OK):
            try:
                self.path.open("wb").close()
            except OSError as exc:
                raise DatabaseError(f"Cannot open database: {self.path}") from exc

    def load(self) -> BString:
        """Return the whole database contents."""
        try:
            with self.path.open("rb") as db:
                return BString(db.read())
        except OSError as exc:
            raise DatabaseError(f"Failed to open database: {self.path}") from exc

    def list(self, out: Optional[TextIO] = None) -> None:
        """Write the database contents to ``out`` (standard output by default)."""
        data = bytes(self.load()).split(b"\x00", 1)[0]
        stream = sys.stdout if out is None else out
        stream.write(data.decode("utf-8", "replace"))

    def find(self, url: str) -> bool:
        """Return whether ``url`` appears anywhere in the database."""
        return _find(self.load(), 0, url) >= 0

    def update(self, url: str) -> None:
        """Append ``url`` as a new line."""
        try:
            if self.find(url):
                log.info("Already recorded as installed: %s", url)
        except DatabaseError:
            pass
        line = BString(url)
        line.append_char("\n")
        try:
            with self.path.open("ab") as db:
                db.write(bytes(line))
        except OSError as exc:
            raise DatabaseError(f"Failed to append to the db: {self.path}") from exc