"""
Scoped access to SQLite databases.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Iterator, List

import pandas as pd

from ..errors import ContainerIOError, InvalidNameError

SQLITE_EXTS = (".db", ".sqlite", ".sqlite3")


def check_table_name(name) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidNameError(f"Invalid table name {name!r}")
    if '"' in name:
        raise InvalidNameError(f"Table names must not contain double quotes: {name!r}")
    return name


@contextmanager
def connect(path: Path, must_exist: bool = False) -> Iterator[sqlite3.Connection]:
    """
    Open the SQLite database at *path* for the duration of a ``with`` block.

    Driver errors raised while the connection is open are re-raised as
    `ContainerIOError`; the connection is always closed.
    """
    path = Path(path)
    if must_exist and not path.is_file():
        raise ContainerIOError(f"SQLite database {path} does not exist")
    try:
        conn = sqlite3.connect(path)
    except sqlite3.Error as err:
        raise ContainerIOError(f"Cannot open SQLite database {path}: {err}") from err

    with closing(conn):
        try:
            yield conn
        except (sqlite3.Error, pd.errors.DatabaseError) as err:
            raise ContainerIOError(f"SQLite database {path} failed: {err}") from err


def table_names(conn: sqlite3.Connection) -> List[str]:
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name"
    ).fetchall()
    return [row[0] for row in rows]
