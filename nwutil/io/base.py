"""
Base interfaces for the nwutil.io storage plug-ins.

Defines abstract base classes for file readers and writers. A plug-in handles
one object tag (e.g. 'object', 'table') for one file extension and addresses
stored values by name, so a single file can hold several of them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

Tag = str  # e.g. "object", "table"
Payload = Any  # dict | pd.DataFrame | tuple | np.ndarray | …


class Reader(ABC):
    """
    Loads named values from a single file format.

    Methods
    -------
    read(path, name) -> Payload
        Load the value stored under *name*.
    read_all(path) -> dict
        Load every value stored in the file, keyed by name.
    names(path) -> list of str
        List the names stored in the file.
    """

    @abstractmethod
    def read(self, path: Path, name: str) -> Payload:
        """
        Load the value stored under *name* in *path*.

        Parameters
        ----------
        path : pathlib.Path
            File to read.
        name : str
            Name of the stored value.

        Returns
        -------
        Payload
            The reconstructed value.

        Raises
        ------
        NotFoundError
            If *name* is not stored in *path*.
        ContainerIOError
            If the file cannot be opened or read.
        """
        ...

    def read_all(self, path: Path) -> Dict[str, Payload]:
        """Load every value in *path*, keyed by name."""
        return {name: self.read(path, name) for name in self.names(path)}

    @abstractmethod
    def names(self, path: Path) -> List[str]:
        """List the names of the values stored in *path*."""
        ...


class Writer(ABC):
    """
    Persists a named value to a single file format.

    Methods
    -------
    write(path, name, value, **options) -> None
        Store *value* under *name*, replacing any previous value of that name.
    """

    @abstractmethod
    def write(self, path: Path, name: str, value: Payload, **options) -> None:
        """
        Persist *value* as *name* in *path*.

        Parameters
        ----------
        path : pathlib.Path
            The file to write to.
        name : str
            Name of the stored value; an existing value of that name is replaced.
        value : Payload
            The value to serialize.
        """
        pass
