"""
Exception hierarchy for nwutil.

Every failure raised by the storage layer derives from `NWUtilError` and from
the built-in exception a caller would naturally catch (`OSError`,
`LookupError`, `TypeError`, `ValueError`).
"""

from __future__ import annotations


class NWUtilError(Exception):
    """Base exception for all nwutil failures."""


class ContainerIOError(NWUtilError, OSError):
    """Raised when a file or container cannot be opened, read, or written."""


class NotFoundError(NWUtilError, LookupError):
    """Raised when a named object or table does not exist in a container."""


class UnsupportedTypeError(NWUtilError, TypeError):
    """Raised for values or stored type tags outside the supported variants."""


class InvalidNameError(NWUtilError, ValueError):
    """Raised for empty, non-string, duplicate, or path-like names."""
