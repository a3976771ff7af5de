"""
Helpers for long-format DataFrames.

A long-format frame has index columns (e.g. year, time, region, variable) and
one value column, the layout `nwutil.io.save_table` stores.
"""

import string
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

_LABEL_CHARS = np.array(list(string.ascii_letters + string.digits))


def _random_label(rng: np.random.Generator, length: int = 8) -> str:
    return "".join(rng.choice(_LABEL_CHARS, size=length))


def create_dummy_data(n_year: int, n_time: int, n_region: int, n_variable: int, rng=None):
    """
    Create a dummy long-format DataFrame.

    Parameters
    ----------
    n_year, n_time, n_region, n_variable : int
        Number of distinct labels per index column. Years start at 2026, time
        steps at 1; regions and variables are random 8-character labels.
    rng : numpy.random.Generator or int, optional
        Random generator or seed.

    Returns
    -------
    pandas.DataFrame
        Columns ``year``, ``time``, ``region``, ``variable`` (full cross join)
        and ``value`` drawn from [0, 1000) rounded to 2 decimals.
    """
    rng = np.random.default_rng(rng)
    index = pd.MultiIndex.from_product(
        [
            2025 + np.arange(1, n_year + 1),
            np.arange(1, n_time + 1),
            [_random_label(rng) for _ in range(n_region)],
            [_random_label(rng) for _ in range(n_variable)],
        ],
        names=["year", "time", "region", "variable"],
    )
    df = index.to_frame(index=False)
    df["value"] = np.round(1000 * rng.random(len(df)), 2)
    return df


def merge_pos_neg(df_pos: pd.DataFrame, df_neg: pd.DataFrame, value_column: str = "value"):
    """
    Merge positive and negative flows into one bidirectional frame.

    Rows are matched on every column except *value_column*; a side missing
    from one frame counts as zero. The result holds ``pos - neg``.
    """
    keys = [column for column in df_pos.columns if column != value_column]
    df = df_pos.rename(columns={value_column: "pos"}).merge(
        df_neg.rename(columns={value_column: "neg"}), on=keys, how="outer"
    )
    df[["pos", "neg"]] = df[["pos", "neg"]].fillna(0.0)
    df[value_column] = df["pos"] - df["neg"]
    return df.drop(columns=["pos", "neg"])


def merge_frames(pairs: Sequence[Tuple[str, pd.DataFrame]], value_column: str = "value"):
    """
    Outer-join several frames on their common columns.

    Each frame's *value_column* is renamed to the key it is paired with.
    Fewer than two pairs give an empty DataFrame.
    """
    if len(pairs) < 2:
        return pd.DataFrame()

    key, df = pairs[0]
    merged = df.rename(columns={value_column: key})
    for key, df in pairs[1:]:
        df = df.rename(columns={value_column: key})
        common = [column for column in merged.columns if column in df.columns]
        merged = merged.merge(df, on=common, how="outer")
    return merged


def equipment_loading(df: pd.DataFrame, region_column: str = "region", value_column: str = "value"):
    """
    Loading factor per region: mean over peak of the absolute values.

    Regions whose values are all zero get a loading of 0.
    """
    magnitude = df[value_column].abs().groupby(df[region_column])
    loading = (magnitude.mean() / magnitude.max()).fillna(0.0)
    return loading.rename(value_column).reset_index()
