"""
Storage subsystem of nwutil: persistence of structured values and tables.

Overview
--------
- **Structured codec** (`structured`): walks dicts, DataFrames, tuples,
  namedtuples, and leaf arrays/scalars and maps them onto HDF5 groups tagged
  with a small ``type`` attribute, then rebuilds them on load.

- **Base interfaces** (`base`): abstract `Reader` and `Writer` classes for
  named values stored in a file.

- **Registries** (`registry`): map (object tag, file extension) pairs to the
  reader or writer plug-in, so `save_table` writes HDF5 or SQLite depending on
  the path it is given.

- **Plug-ins** (`serialize`): one reader/writer per format, discovered and
  registered at import time by `serialize_boot`.

Typical usage
-------------
>>> save_object("store.h5", "loads", df)
>>> load_object("store.h5", "loads")
>>> save_table("store.db", "loads", df)
>>> list_tables("store.db")
['loads']

Submodules
----------
- `base`           : Abstract reader/writer interfaces.
- `container`      : Scoped HDF5 file access and node-name checks.
- `database`       : Scoped SQLite access.
- `registry`       : Global registries and save/load entry points.
- `structured`     : Recursive structured-object codec.
- `serialize`      : Reader/writer plug-ins.
- `serialize_boot` : Imports every plug-in so it registers itself.
"""

# ensure all plug-ins register
from . import serialize_boot  # noqa: E402  (import after registry)
from .registry import (
    list_tables,
    load,
    load_object,
    load_table,
    load_tables,
    save,
    save_object,
    save_table,
)

_ = serialize_boot  # to prevent unused import removal by linters

__all__ = [
    "load",
    "save",
    "save_object",
    "load_object",
    "save_table",
    "load_table",
    "load_tables",
    "list_tables",
]
