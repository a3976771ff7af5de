"""Tests for long-format DataFrame helpers."""

from __future__ import annotations

import numpy as np
import pandas as pd

from nwutil.frames import create_dummy_data, equipment_loading, merge_frames, merge_pos_neg


def test_create_dummy_data_is_a_full_cross_join() -> None:
    df = create_dummy_data(2, 24, 3, 4, rng=0)

    assert list(df.columns) == ["year", "time", "region", "variable", "value"]
    assert len(df) == 2 * 24 * 3 * 4
    assert sorted(df["year"].unique()) == [2026, 2027]
    assert df["region"].nunique() == 3
    assert df["region"].str.len().eq(8).all()
    assert df["value"].between(0, 1000).all()
    np.testing.assert_array_equal(df["value"], df["value"].round(2))


def test_create_dummy_data_is_reproducible_with_a_seed() -> None:
    pd.testing.assert_frame_equal(
        create_dummy_data(1, 2, 2, 2, rng=42), create_dummy_data(1, 2, 2, 2, rng=42)
    )


def test_merge_pos_neg_fills_missing_sides_with_zero() -> None:
    pos = pd.DataFrame({"region": ["a", "b"], "value": [5.0, 3.0]})
    neg = pd.DataFrame({"region": ["b", "c"], "value": [1.0, 2.0]})

    merged = merge_pos_neg(pos, neg).sort_values("region").reset_index(drop=True)

    assert list(merged.columns) == ["region", "value"]
    assert list(merged["region"]) == ["a", "b", "c"]
    np.testing.assert_allclose(merged["value"], [5.0, 2.0, -2.0])


def test_merge_frames_renames_value_columns() -> None:
    first = pd.DataFrame({"region": ["a", "b"], "value": [1.0, 2.0]})
    second = pd.DataFrame({"region": ["b"], "value": [3.0]})

    merged = merge_frames([("x", first), ("y", second)]).sort_values("region")

    assert list(merged.columns) == ["region", "x", "y"]
    np.testing.assert_allclose(merged["x"], [1.0, 2.0])
    assert np.isnan(merged["y"].iloc[0])
    assert merged["y"].iloc[1] == 3.0


def test_merge_frames_needs_two_frames() -> None:
    only = pd.DataFrame({"region": ["a"], "value": [1.0]})

    assert merge_frames([("x", only)]).empty


def test_equipment_loading_is_mean_over_peak() -> None:
    df = pd.DataFrame({"region": ["a", "a", "b", "b"], "value": [2.0, -4.0, 0.0, 0.0]})

    loading = equipment_loading(df)

    assert list(loading.columns) == ["region", "value"]
    np.testing.assert_allclose(loading["value"], [0.75, 0.0])
