"""
SQLite reader for DataFrames.

Classes
-------
SqliteTableReader : Reader
    Loads database tables as DataFrames.
"""

from pathlib import Path

import pandas as pd

from ....errors import NotFoundError
from ...base import Reader
from ...database import SQLITE_EXTS, check_table_name, connect, table_names
from ...registry import register_reader


class SqliteTableReader(Reader):
    """
    Reader for tables in .db/.sqlite/.sqlite3 files.
    """

    def read(self, path: Path, name: str) -> pd.DataFrame:
        check_table_name(name)
        with connect(path, must_exist=True) as conn:
            if name not in table_names(conn):
                raise NotFoundError(f"No table named {name!r} in {path}")
            return pd.read_sql_query(f'SELECT * FROM "{name}"', conn)

    def read_all(self, path: Path):
        with connect(path, must_exist=True) as conn:
            return {
                name: pd.read_sql_query(f'SELECT * FROM "{name}"', conn)
                for name in table_names(conn)
            }

    def names(self, path: Path):
        with connect(path, must_exist=True) as conn:
            return table_names(conn)


for _ext in SQLITE_EXTS:
    register_reader("table", _ext)(SqliteTableReader)
