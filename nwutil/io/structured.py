"""
Recursive codec between structured Python values and HDF5 group trees.

A value is one of five variants, recognised by a fixed sequence of checks:

============  ====================================  ==============
Variant       Python type                           Group tag
============  ====================================  ==============
Mapping       ``dict`` / ``collections.abc.Mapping``  'dictionary'
Table         ``pandas.DataFrame``                   'dataframe'
Tuple         plain ``tuple``                        'tuple'
Record        ``namedtuple`` instance                'namedtuple'
Leaf          array, list, Series, or scalar         (dataset)
============  ====================================  ==============

Saving happens in two steps. `encode` walks the value and builds an in-memory
plan of `GroupNode` and `LeafNode` objects, rejecting unsupported values and
bad names before anything touches the disk. `write_node` then materialises
the plan under an open HDF5 parent. Loading (`decode`) reads the ``type``
attribute of each group and rebuilds the matching variant; datasets are
returned as scalars or arrays exactly as they were stored.

Groups are created with creation-order tracking, so enumeration order equals
write order. Table column order and Record field order rely on this.

Examples
--------
>>> plan = encode({"a": [1, 2, 3], "b": "x"})
>>> with open_container(path, "w") as h5:
...     write_node(h5, "obj", plan)
>>> with open_container(path) as h5:
...     decode(h5["obj"])
{'a': array([1, 2, 3]), 'b': 'x'}
"""

from __future__ import annotations

import datetime as dt
import enum
import warnings
from collections import namedtuple
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, List, Tuple, Union

import h5py
import numpy as np
import pandas as pd

from ..errors import ContainerIOError, InvalidNameError, UnsupportedTypeError
from .container import check_name

TYPE_ATTR = "type"
DATETIME_ATTR = "datetime_unit"


class Kind(enum.Enum):
    """Structural variant of a value; group kinds carry their on-disk tag."""

    MAPPING = "dictionary"
    TABLE = "dataframe"
    TUPLE = "tuple"
    RECORD = "namedtuple"
    LEAF = "leaf"


# tags that may appear on a group
GROUP_KINDS: Dict[str, Kind] = {
    kind.value: kind for kind in (Kind.MAPPING, Kind.TABLE, Kind.TUPLE, Kind.RECORD)
}


def is_record(value) -> bool:
    """True for namedtuple instances (tuples whose type declares ``_fields``)."""
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


# first match wins; the tuple check excludes records so the order below is stable
_DISPATCH = (
    (Kind.MAPPING, lambda value: isinstance(value, Mapping)),
    (Kind.TABLE, lambda value: isinstance(value, pd.DataFrame)),
    (Kind.TUPLE, lambda value: isinstance(value, tuple) and not is_record(value)),
    (Kind.RECORD, is_record),
)


def classify(value) -> Kind:
    """
    Return the structural variant of *value*.

    Anything that is not a Mapping, Table, Tuple or Record is classified as a
    Leaf; whether it can actually be stored is decided by `encode_leaf`.
    """
    for kind, check in _DISPATCH:
        if check(value):
            return kind
    return Kind.LEAF


# ── write plan ---------------------------------------------------------------
@dataclass
class LeafNode:
    """A validated dataset ready for ``create_dataset``."""

    data: Any
    dtype: Any = None
    attrs: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GroupNode:
    """A tagged group and its ordered children."""

    kind: Kind
    children: List[Tuple[str, "Node"]] = field(default_factory=list)


Node = Union[LeafNode, GroupNode]


def encode(value) -> Node:
    """
    Build the write plan for *value*.

    Parameters
    ----------
    value : Any
        Mapping, DataFrame, tuple, namedtuple, or leaf value, nested freely
        (DataFrame columns must be leaves).

    Returns
    -------
    GroupNode or LeafNode
        Plan consumed by `write_node`.

    Raises
    ------
    UnsupportedTypeError
        If some nested value cannot be represented.
    InvalidNameError
        For non-string, empty, path-like, or duplicate child names, and for
        namedtuple fields (such as ``_1``) that cannot be rebuilt on load.
    """
    kind = classify(value)
    if kind is Kind.LEAF:
        return encode_leaf(value)

    if kind is Kind.MAPPING:
        items = list(value.items())
    elif kind is Kind.TABLE:
        items = _table_columns(value)
    elif kind is Kind.TUPLE:
        # 1-based positional keys
        items = [(str(pos), item) for pos, item in enumerate(value, start=1)]
    else:
        # a field set that cannot be rebuilt on load is rejected up front
        try:
            record_class(tuple(value._fields))
        except ValueError as err:
            raise InvalidNameError(
                f"Record fields {value._fields} cannot be restored: {err}"
            ) from err
        items = list(zip(value._fields, value))

    node = GroupNode(kind)
    for key, child in items:
        check_name(key)
        if kind is Kind.TABLE:
            node.children.append((key, _encode_column(key, child)))
        else:
            node.children.append((key, encode(child)))
    return node


def _table_columns(df: pd.DataFrame) -> List[Tuple[Any, pd.Series]]:
    if df.columns.has_duplicates:
        dupes = sorted({str(c) for c in df.columns[df.columns.duplicated()]})
        raise InvalidNameError(f"Duplicate column names: {', '.join(dupes)}")
    return [(column, df.iloc[:, pos]) for pos, column in enumerate(df.columns)]


def _encode_column(name: str, column: pd.Series) -> LeafNode:
    leaf = encode_leaf(column)
    if np.ndim(leaf.data) != 1:
        raise UnsupportedTypeError(f"Column {name!r} is not one-dimensional")
    return leaf


def encode_leaf(value) -> LeafNode:
    """
    Validate a leaf and convert it into dataset data.

    Supported kinds are strings, booleans, integers, floats, and
    ``datetime64`` timestamps, either as a scalar or a homogeneous array.
    Lists become arrays; pandas Series and Index objects are unwrapped, and
    sequences of naive ``datetime`` objects become ``datetime64`` arrays.
    Timestamps are stored as int64 ticks with the unit in ``datetime_unit``.

    Raises
    ------
    UnsupportedTypeError
        For None, sets, arbitrary objects, mixed or ragged sequences,
        complex or timedelta data, timezone-aware timestamps, and strings
        holding NUL characters or unpaired surrogates.
    """
    if isinstance(value, (pd.Series, pd.Index)):
        value = value.to_numpy()
    elif isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            raise UnsupportedTypeError(f"Timezone-aware timestamp {value!r} is not supported")
        value = pd.Timestamp(value).to_datetime64()

    try:
        array = np.asarray(value)
    except (TypeError, ValueError) as err:
        raise UnsupportedTypeError(
            f"Cannot store {type(value).__name__} as a dataset: {err}"
        ) from err

    # numpy silently turns [1, "a"] into strings
    if array.dtype.kind == "U" and isinstance(value, list) and _mixes_text(value):
        raise UnsupportedTypeError(f"List mixes strings and other values: {value!r}")

    if array.dtype.kind == "O" and array.size and all(
        isinstance(item, dt.datetime) for item in array.flat
    ):
        array = _datetime_array(array)

    kind = array.dtype.kind
    if kind in "biuf":
        return LeafNode(array)

    if kind == "M":
        unit, _ = np.datetime_data(array.dtype)
        if unit == "generic":
            array, unit = array.astype("datetime64[ns]"), "ns"
        return LeafNode(array.view(np.int64), attrs={DATETIME_ATTR: unit})

    if kind == "U" or (kind == "O" and all(isinstance(item, str) for item in array.flat)):
        _check_text(array)
        data = array.item() if array.ndim == 0 else array.astype(object)
        return LeafNode(data, dtype=h5py.string_dtype())

    raise UnsupportedTypeError(
        f"Cannot store {type(value).__name__} with dtype {array.dtype} as a dataset"
    )


def _mixes_text(items: list) -> bool:
    flags = {isinstance(item, str) for item in np.asarray(items, dtype=object).flat}
    return len(flags) > 1


def _datetime_array(array: np.ndarray) -> np.ndarray:
    if any(item.tzinfo is not None for item in array.flat):
        raise UnsupportedTypeError("Timezone-aware timestamps are not supported")
    stamps = [pd.Timestamp(item).to_datetime64() for item in array.flat]
    return np.array(stamps).reshape(array.shape)


def _check_text(array: np.ndarray) -> None:
    # HDF5 variable-length strings are NUL-terminated UTF-8
    for item in array.flat:
        if "\x00" in item:
            raise UnsupportedTypeError(f"String {item!r} contains a NUL character")
        try:
            item.encode("utf-8")
        except UnicodeEncodeError as err:
            raise UnsupportedTypeError(f"String {item!r} is not valid UTF-8 text") from err


def write_node(parent: h5py.Group, name: str, node: Node) -> None:
    """Materialise a plan from `encode` as *name* under *parent*."""
    if isinstance(node, LeafNode):
        dataset = parent.create_dataset(name, data=node.data, dtype=node.dtype)
        dataset.attrs.update(node.attrs)
        return

    group = parent.create_group(name, track_order=True)
    group.attrs[TYPE_ATTR] = node.kind.value
    for key, child in node.children:
        write_node(group, key, child)


# ── load ----------------------------------------------------------------------
def decode(node: Union[h5py.Group, h5py.Dataset]):
    """
    Rebuild the value stored at *node*.

    Raises
    ------
    UnsupportedTypeError
        If a group has no ``type`` attribute or an unknown one. A
        ``UserWarning`` is emitted first.
    ContainerIOError
        If a group's children are inconsistent with its tag.
    """
    if isinstance(node, h5py.Dataset):
        return decode_leaf(node)

    tag = node.attrs.get(TYPE_ATTR) if isinstance(node, h5py.Group) else None
    if isinstance(tag, bytes):
        tag = tag.decode()
    kind = GROUP_KINDS.get(tag) if isinstance(tag, str) else None
    if kind is None:
        warnings.warn(f"Encountered an unsupported type {tag!r} at {node.name}", UserWarning)
        raise UnsupportedTypeError(f"Unsupported type tag {tag!r} at {node.name}")

    if kind is Kind.MAPPING:
        return {key: decode(child) for key, child in node.items()}
    if kind is Kind.TABLE:
        return _decode_table(node)
    if kind is Kind.TUPLE:
        return _decode_tuple(node)
    return _decode_record(node)


def decode_leaf(dataset: h5py.Dataset):
    """
    Read a dataset as stored: scalar datasets give scalars, others arrays.

    Strings come back as ``str`` (arrays of object dtype), timestamps as
    ``numpy.datetime64`` in their stored unit, and numeric or boolean
    scalars as the matching Python builtin.
    """
    if h5py.check_string_dtype(dataset.dtype) is not None:
        return dataset.asstr()[()]

    data = dataset[()]
    unit = dataset.attrs.get(DATETIME_ATTR)
    if unit is not None:
        if isinstance(unit, bytes):
            unit = unit.decode()
        stamps = np.asarray(data, dtype=np.int64).astype(f"datetime64[{unit}]")
        return stamps[()] if dataset.shape == () else stamps

    if dataset.shape == ():
        return data.item()
    return data


def _decode_table(group: h5py.Group) -> pd.DataFrame:
    columns = {}
    for key, child in group.items():
        if not isinstance(child, h5py.Dataset) or child.ndim != 1:
            raise ContainerIOError(
                f"Column {child.name} of table {group.name} is not a 1-D dataset"
            )
        columns[key] = decode_leaf(child)

    lengths = {len(column) for column in columns.values()}
    if len(lengths) > 1:
        raise ContainerIOError(
            f"Columns of table {group.name} have mismatched lengths {sorted(lengths)}"
        )
    return pd.DataFrame(columns)


def _decode_tuple(group: h5py.Group) -> tuple:
    try:
        ordered = sorted(group.items(), key=lambda item: int(item[0]))
    except ValueError as err:
        raise ContainerIOError(f"Tuple {group.name} has non-positional keys") from err
    return tuple(decode(child) for _, child in ordered)


def _decode_record(group: h5py.Group):
    fields = tuple(group.keys())
    try:
        record_type = record_class(fields)
    except ValueError as err:
        raise ContainerIOError(f"Record {group.name} has invalid field names: {err}") from err
    return record_type(*(decode(group[name]) for name in fields))


@lru_cache(maxsize=None)
def record_class(fields: Tuple[str, ...]):
    """Return the shared ``Record`` namedtuple type for a field sequence."""
    return namedtuple("Record", fields)
