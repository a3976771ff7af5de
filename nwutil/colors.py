"""
Stable label-to-colour assignment for charts.
"""

import numpy as np


class ColorCache:
    """
    Map labels to RGBA colour strings, drawing a random colour for new labels.

    The cache is an ordinary object owned by the caller, so several charts can
    share one palette by passing the same instance around.

    Examples
    --------
    >>> colors = ColorCache({"solar": "rgba(255, 200, 000, 0.5)"}, rng=0)
    >>> colors.get("solar")
    'rgba(255, 200, 000, 0.5)'
    >>> colors.get("wind") == colors.get("wind")
    True
    """

    def __init__(self, colors=None, rng=None):
        self._colors = dict(colors or {})
        self._rng = np.random.default_rng(rng)

    def get(self, key) -> str:
        if key not in self._colors:
            r, g, b = self._rng.integers(0, 256, size=3)
            self._colors[key] = f"rgba({r:03d}, {g:03d}, {b:03d}, 0.5)"
        return self._colors[key]

    def as_dict(self) -> dict:
        return dict(self._colors)

    def __contains__(self, key) -> bool:
        return key in self._colors

    def __len__(self) -> int:
        return len(self._colors)
