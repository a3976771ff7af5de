"""Tests for the colour cache and text helpers."""

from __future__ import annotations

import re

from nwutil.colors import ColorCache
from nwutil.text_utils import append_text

RGBA = re.compile(r"rgba\(\d{3}, \d{3}, \d{3}, 0\.5\)")


def test_color_is_assigned_once_per_label() -> None:
    colors = ColorCache(rng=3)

    first = colors.get("wind")

    assert RGBA.fullmatch(first)
    assert colors.get("wind") == first
    assert "wind" in colors
    assert len(colors) == 1


def test_preset_colors_are_kept() -> None:
    colors = ColorCache({"solar": "rgba(255, 200, 000, 0.5)"})

    assert colors.get("solar") == "rgba(255, 200, 000, 0.5)"
    assert colors.as_dict() == {"solar": "rgba(255, 200, 000, 0.5)"}


def test_seeded_caches_agree() -> None:
    assert ColorCache(rng=7).get("x") == ColorCache(rng=7).get("x")


def test_append_text_adds_lines(tmp_path) -> None:
    path = tmp_path / "log.txt"

    append_text(path, "first")
    append_text(path, "")
    append_text(path, "second")

    assert path.read_text(encoding="utf-8") == "first\nsecond\n"
