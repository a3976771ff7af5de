"""
HDF5 reader for long-format DataFrames.

Classes
-------
LongTableH5Reader : Reader
    Rebuilds DataFrames written by LongTableH5Writer.
"""

from pathlib import Path

import h5py
import numpy as np
import pandas as pd

from ....errors import ContainerIOError, NotFoundError
from ...base import Reader
from ...container import check_name, open_container
from ...registry import register_reader
from ...structured import decode_leaf
from ..writers.h5_table import CODES_PREFIX, LEVELS_PREFIX, VALUE_PREFIX


@register_reader("table", ".hdf5")
@register_reader("table", ".h5")
class LongTableH5Reader(Reader):
    """
    Reader for long-format tables in .h5 files.
    """

    def read(self, path: Path, name: str) -> pd.DataFrame:
        """
        Rebuild the table stored in group *name*.

        Parameters
        ----------
        path : pathlib.Path
            Path to the .h5 file.
        name : str
            Group name.

        Returns
        -------
        pandas.DataFrame
            Table with columns in their saved order and a fresh RangeIndex.
        """
        check_name(name)
        with open_container(path) as h5:
            if name not in h5:
                raise NotFoundError(f"No table named {name!r} in {path}")
            return _rebuild(h5[name])

    def read_all(self, path: Path):
        with open_container(path) as h5:
            return {name: _rebuild(node) for name, node in h5.items()}

    def names(self, path: Path):
        with open_container(path) as h5:
            return list(h5.keys())


def _rebuild(group) -> pd.DataFrame:
    if not isinstance(group, h5py.Group):
        raise ContainerIOError(f"{group.name} is not a table group")

    columns = {}
    for key, node in group.items():
        if key.startswith(LEVELS_PREFIX):
            column = key[len(LEVELS_PREFIX):]
            columns[column] = _expand(group, column, node)
        elif key.startswith(VALUE_PREFIX):
            columns[key[len(VALUE_PREFIX):]] = decode_leaf(node)
        elif key.startswith(CODES_PREFIX):
            if LEVELS_PREFIX + key[len(CODES_PREFIX):] not in group:
                raise ContainerIOError(f"Table {group.name} has codes {key!r} without levels")
        else:
            raise ContainerIOError(f"Unexpected dataset {key!r} in table {group.name}")
    return pd.DataFrame(columns)


def _expand(group, column: str, node) -> np.ndarray:
    try:
        codes = np.asarray(group[CODES_PREFIX + column][()])
    except KeyError as err:
        raise ContainerIOError(f"Table {group.name} lacks codes for {column!r}") from err

    levels = np.asarray(decode_leaf(node))
    if levels.ndim != 1 or codes.ndim != 1 or codes.dtype.kind not in "iu":
        raise ContainerIOError(f"Levels or codes for {column!r} in {group.name} are malformed")
    if codes.size and (codes.min() < 0 or codes.max() >= len(levels)):
        raise ContainerIOError(
            f"Codes for {column!r} in {group.name} fall outside its {len(levels)} levels"
        )
    return levels[codes]
