"""
Scoped access to HDF5 containers.

`open_container` wraps `h5py.File` so that every save/load holds the handle
for exactly one call and driver failures surface as `ContainerIOError`.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import h5py

from ..errors import ContainerIOError, InvalidNameError

WRITE_MODES = ("w", "a")


def check_name(name) -> str:
    """Validate a node name and return it unchanged."""
    if not isinstance(name, str):
        raise InvalidNameError(
            f"Node names must be strings, got {type(name).__name__} {name!r}"
        )
    if not name or name == "." or "/" in name or "\x00" in name:
        raise InvalidNameError(f"Invalid node name {name!r}")
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as err:
        raise InvalidNameError(f"Node name {name!r} is not valid UTF-8 text") from err
    return name


@contextmanager
def open_container(path: Path, mode: str = "r") -> Iterator[h5py.File]:
    """
    Open the HDF5 file at *path* for the duration of a ``with`` block.

    Parameters
    ----------
    path : pathlib.Path or str
        Container file.
    mode : {'r', 'w', 'a'}
        'r' reads an existing file, 'w' truncates or creates, 'a' opens an
        existing file for writing or creates it.

    Raises
    ------
    ContainerIOError
        If the file is missing, locked by another writer, not an HDF5 file,
        or the driver fails while the handle is open.
    """
    if mode != "r" and mode not in WRITE_MODES:
        raise ValueError(f"Unsupported container mode {mode!r}; use one of {WRITE_MODES}")

    # creation order keeps root enumeration in write order
    options = {} if mode == "r" else {"track_order": True}
    try:
        h5 = h5py.File(path, mode, **options)
    except OSError as err:
        raise ContainerIOError(f"Cannot open HDF5 container {path} ({mode!r}): {err}") from err

    with h5:
        try:
            yield h5
        except ContainerIOError:
            raise
        except OSError as err:
            raise ContainerIOError(f"HDF5 container {path} failed: {err}") from err
