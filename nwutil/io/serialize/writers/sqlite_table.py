"""
Writer for DataFrames to SQLite databases.

Classes
-------
SqliteTableWriter : Writer
    Replaces a database table with the contents of a DataFrame.
"""

from pathlib import Path

import pandas as pd

from ....errors import UnsupportedTypeError
from ...base import Writer
from ...database import SQLITE_EXTS, check_table_name, connect
from ...registry import register_writer


class SqliteTableWriter(Writer):
    """
    Writer for DataFrames to .db/.sqlite/.sqlite3 files.
    """

    def write(self, path: Path, name: str, value: pd.DataFrame):
        """
        Drop table *name* if it exists and bulk-load *value* into it.

        The DataFrame index is not stored. SQLite has no timestamp type, so
        datetime columns come back as text.
        """
        check_table_name(name)
        if not isinstance(value, pd.DataFrame):
            raise UnsupportedTypeError(f"Expected a DataFrame, got {type(value).__name__}")

        with connect(path) as conn:
            value.to_sql(name, conn, if_exists="replace", index=False)
            conn.commit()


for _ext in SQLITE_EXTS:
    register_writer("table", _ext)(SqliteTableWriter)
