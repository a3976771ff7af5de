"""
Import every plug-in module under `nwutil.io.serialize`.

Readers and writers register themselves through decorators at import time,
so a plug-in dropped into ``serialize/readers`` or ``serialize/writers`` is
picked up without touching the registry.
"""

from __future__ import annotations

import importlib
import pkgutil

from . import serialize

PLUGINS = [
    importlib.import_module(mod.name).__name__
    for mod in pkgutil.walk_packages(serialize.__path__, prefix=f"{serialize.__name__}.")
]
