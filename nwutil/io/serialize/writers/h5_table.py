"""
Writer for long-format DataFrames to HDF5 containers.

A long-format table has any number of index columns and a single value
column. Each index column is stored as its sorted unique levels plus one
integer code per row, which keeps repeated labels cheap on disk:

    <name>/
        idset_<column>   levels
        idlvl_<column>   0-based code per row
        value_<column>   the value column

Datasets are written in column order and the group tracks creation order,
so the reader restores the original column order.

Classes
-------
LongTableH5Writer : Writer
    Serializes a long-format DataFrame to an .h5 group.
"""

from pathlib import Path

import numpy as np
import pandas as pd

from ....errors import InvalidNameError, UnsupportedTypeError
from ...base import Writer
from ...container import check_name, open_container
from ...registry import register_writer
from ...structured import encode_leaf, write_node

LEVELS_PREFIX = "idset_"
CODES_PREFIX = "idlvl_"
VALUE_PREFIX = "value_"


@register_writer("table", ".hdf5")
@register_writer("table", ".h5")
class LongTableH5Writer(Writer):
    """
    Writer for long-format DataFrames to .h5 files.
    """

    def write(self, path: Path, name: str, value: pd.DataFrame, value_column: str = "value"):
        """
        Write a long-format DataFrame as the group *name*.

        The file is opened in append mode; other groups are left untouched and
        an existing group *name* is replaced.

        Parameters
        ----------
        path : pathlib.Path
            Path to the .h5 file.
        name : str
            Group name.
        value : pandas.DataFrame
            Long-format table.
        value_column : str
            The single value column; every other column is an index column.
        """
        check_name(name)
        if not isinstance(value, pd.DataFrame):
            raise UnsupportedTypeError(f"Expected a DataFrame, got {type(value).__name__}")
        if value.columns.has_duplicates:
            raise InvalidNameError(f"Table {name!r} has duplicate column names")
        if value_column not in value.columns:
            raise InvalidNameError(f"Value column {value_column!r} not found in table {name!r}")

        # ---- encode every column before touching the file --------------------
        plan = []
        for pos, column in enumerate(value.columns):
            check_name(column)
            series = value.iloc[:, pos]
            if column == value_column:
                plan.append((VALUE_PREFIX + column, encode_leaf(series)))
                continue

            codes, levels = pd.factorize(series, sort=True)
            if (codes < 0).any():
                raise UnsupportedTypeError(f"Index column {column!r} contains missing values")
            plan.append((LEVELS_PREFIX + column, encode_leaf(levels)))
            plan.append((CODES_PREFIX + column, encode_leaf(codes.astype(np.int64))))

        with open_container(path, "a") as h5:
            if name in h5:
                del h5[name]
            group = h5.create_group(name, track_order=True)
            for key, node in plan:
                write_node(group, key, node)
