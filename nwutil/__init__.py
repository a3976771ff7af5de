"""
nwutil: glue between pandas DataFrames and storage backends.

- `nwutil.io`     : HDF5 structured-object codec, long-format table storage
                    in HDF5 or SQLite.
- `nwutil.frames` : long-format DataFrame helpers.
- `nwutil.colors` : label-to-colour cache for charts.
- `nwutil.errors` : exception hierarchy.
"""

from .colors import ColorCache
from .errors import (
    ContainerIOError,
    InvalidNameError,
    NotFoundError,
    NWUtilError,
    UnsupportedTypeError,
)
from .frames import create_dummy_data, equipment_loading, merge_frames, merge_pos_neg
from .io import (
    list_tables,
    load_object,
    load_table,
    load_tables,
    save_object,
    save_table,
)
from .text_utils import append_text

__version__ = "0.1.0"

__all__ = [
    "save_object",
    "load_object",
    "save_table",
    "load_table",
    "load_tables",
    "list_tables",
    "create_dummy_data",
    "merge_pos_neg",
    "merge_frames",
    "equipment_loading",
    "ColorCache",
    "append_text",
    "NWUtilError",
    "ContainerIOError",
    "NotFoundError",
    "UnsupportedTypeError",
    "InvalidNameError",
]
