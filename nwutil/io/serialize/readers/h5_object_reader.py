"""
HDF5 reader for structured objects.

Classes
-------
ObjectH5Reader : Reader
    Rebuilds values written by ObjectH5Writer from their group trees.
"""

from pathlib import Path

from ....errors import NotFoundError
from ...base import Reader
from ...container import check_name, open_container
from ...registry import register_reader
from ...structured import decode


@register_reader("object", ".hdf5")
@register_reader("object", ".h5")
class ObjectH5Reader(Reader):
    """
    Reader for structured objects in .h5 files.
    """

    def read(self, path: Path, name: str):
        check_name(name)
        with open_container(path) as h5:
            if name not in h5:
                raise NotFoundError(f"No object named {name!r} in {path}")
            return decode(h5[name])

    def read_all(self, path: Path):
        # one handle for the whole file
        with open_container(path) as h5:
            return {name: decode(node) for name, node in h5.items()}

    def names(self, path: Path):
        with open_container(path) as h5:
            return list(h5.keys())
