"""
Global registries and entry points for storage plug-ins.

This module manages the registration and lookup of readers and writers for
different object tags and file formats, and provides the public save/load
functions built on top of them.

Functions
---------
register_writer(tag, ext)
    Decorator to register a Writer for a given object tag and file extension.
register_reader(tag, ext)
    Decorator to register a Reader for a given object tag and file extension.
save(tag, path, name, value, **options)
    Store a value using the writer registered for (tag, extension).
load(tag, path, name=None)
    Load one value, or every value when *name* is omitted.
names(tag, path)
    List the names stored in a file.
save_object / load_object
    Structured objects in HDF5 containers.
save_table / load_table / load_tables / list_tables
    Long-format DataFrames in HDF5 containers or SQLite databases.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from .base import Reader, Writer

WriterKey = Tuple[str, str]  # (tag, '.ext')
ReaderKey = Tuple[str, str]  # (tag, '.ext')

_writers: Dict[WriterKey, Writer] = {}
_readers: Dict[ReaderKey, Reader] = {}

# extension appended when a path carries none of the registered ones
DEFAULT_EXT = {"object": ".h5"}


def register_writer(tag: str, ext: str):
    ext = ext.lower()

    def decorator(cls):
        _writers[(tag, ext)] = cls()
        return cls

    return decorator


def register_reader(tag: str, ext: str):
    ext = ext.lower()

    def decorator(cls):
        _readers[(tag, ext)] = cls()
        return cls

    return decorator


def resolve_path(tag: str, path) -> Path:
    """Return *path*, with the tag's default extension appended if needed."""
    path = Path(path)
    known = {ext for t, ext in (*_writers, *_readers) if t == tag}
    if path.suffix.lower() not in known and tag in DEFAULT_EXT:
        path = path.with_name(path.name + DEFAULT_EXT[tag])
    return path


def _writer(tag: str, path: Path) -> Writer:
    ext = path.suffix.lower()
    try:
        return _writers[(tag, ext)]
    except KeyError as err:
        raise ValueError(f"No writer for '{tag}' values to *{ext} files") from err


def _reader(tag: str, path: Path) -> Reader:
    ext = path.suffix.lower()
    try:
        return _readers[(tag, ext)]
    except KeyError as err:
        raise ValueError(f"No reader for '{tag}' values in *{ext} files") from err


def save(tag: str, path, name: str, value, **options) -> Path:
    path = resolve_path(tag, path)
    _writer(tag, path).write(path, name, value, **options)
    return path


def load(tag: str, path, name: Optional[str] = None):
    path = resolve_path(tag, path)
    reader = _reader(tag, path)
    if name is None:
        return reader.read_all(path)
    return reader.read(path, name)


def names(tag: str, path):
    path = resolve_path(tag, path)
    return _reader(tag, path).names(path)


# ── structured objects --------------------------------------------------------
def save_object(path, name: str, value, mode: str = "w") -> Path:
    """
    Save *value* as the object *name* in the HDF5 container *path*.

    Supported values are dicts with string keys, DataFrames whose columns are
    1-D arrays, tuples, namedtuples, and leaves (scalars or homogeneous arrays
    of strings, booleans, integers, floats, or timestamps), nested freely.
    ``.h5`` is appended when *path* has no HDF5 extension.

    Parameters
    ----------
    path : str or pathlib.Path
        Container file, created if absent.
    name : str
        Name of the object at the container root; an existing object of the
        same name is replaced, other objects are left untouched.
    value : Any
        The value to store.
    mode : {'w', 'a'}
        'w' truncates the file first, 'a' writes into an existing file.

    Returns
    -------
    pathlib.Path
        The container file that was written.
    """
    return save("object", path, name, value, mode=mode)


def load_object(path, name: Optional[str] = None):
    """
    Load the object *name* from the HDF5 container *path*.

    Without *name*, every root object is loaded into a dict keyed by name.
    """
    return load("object", path, name)


# ── tables ---------------------------------------------------------------------
def save_table(path, name: str, df, **options) -> Path:
    """
    Save the DataFrame *df* as table *name*.

    The format follows the extension of *path*: ``.h5``/``.hdf5`` store a
    long-format table with categorical index columns (option
    ``value_column``, default ``'value'``); ``.db``/``.sqlite``/``.sqlite3``
    store a SQLite table. An existing table of the same name is replaced.
    """
    return save("table", path, name, df, **options)


def load_table(path, name: str):
    """Load table *name* saved by `save_table`."""
    return load("table", path, name)


def load_tables(path):
    """Load every table in *path* into a dict keyed by table name."""
    return load("table", path)


def list_tables(path):
    """List the table names stored in *path*."""
    return names("table", path)
