"""
Writer for structured objects to HDF5 containers.

Classes
-------
ObjectH5Writer : Writer
    Stores dicts, DataFrames, tuples, namedtuples, and leaves as group trees.
"""

from pathlib import Path

from ...base import Writer
from ...container import WRITE_MODES, check_name, open_container
from ...registry import register_writer
from ...structured import encode, write_node


@register_writer("object", ".hdf5")
@register_writer("object", ".h5")
class ObjectH5Writer(Writer):
    """
    Writer for structured objects to .h5 files.
    """

    def write(self, path: Path, name: str, value, mode: str = "w"):
        """
        Write *value* as the root object *name*.

        Parameters
        ----------
        path : pathlib.Path
            Path to the .h5 file.
        name : str
            Root object name; an existing object of that name is deleted first.
        value : Any
            Structured value, see `nwutil.io.structured`.
        mode : {'w', 'a'}
            Truncate the file, or write into the existing one.
        """
        if mode not in WRITE_MODES:
            raise ValueError(f"Unsupported save mode {mode!r}; use one of {WRITE_MODES}")
        check_name(name)

        # validate the whole value before the file is opened
        plan = encode(value)

        with open_container(path, mode) as h5:
            if name in h5:
                del h5[name]
            write_node(h5, name, plan)
