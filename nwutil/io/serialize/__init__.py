"""
Storage plug-ins for nwutil.io.

This subpackage contains all reader and writer plug-ins for supported file
formats. Each plug-in registers itself with the global registry, enabling
automatic discovery and use by the save/load entry points.

Supported formats
-----------------
Readers:
- HDF5 (.h5, .hdf5):
    - ObjectH5Reader ('object')
    - LongTableH5Reader ('table')
- SQLite (.db, .sqlite, .sqlite3): SqliteTableReader ('table')

Writers:
- HDF5 (.h5, .hdf5):
    - ObjectH5Writer ('object')
    - LongTableH5Writer ('table')
- SQLite (.db, .sqlite, .sqlite3): SqliteTableWriter ('table')

Registration
------------
Importing a plug-in module runs its decorators, which file the class under its
(object tag, suffix) keys; `nwutil.io.serialize_boot` imports them all. A new
storage format is a Reader or Writer subclass placed under `readers/` or
`writers/` with the matching decorator.
"""

from .readers.h5_object_reader import ObjectH5Reader
from .readers.h5_table_reader import LongTableH5Reader
from .readers.sqlite_reader import SqliteTableReader
from .writers.h5_object import ObjectH5Writer
from .writers.h5_table import LongTableH5Writer
from .writers.sqlite_table import SqliteTableWriter

__all__ = [
    "ObjectH5Reader",
    "ObjectH5Writer",
    "LongTableH5Reader",
    "LongTableH5Writer",
    "SqliteTableReader",
    "SqliteTableWriter",
]
