"""Tests for long-format table storage in HDF5 containers."""

from __future__ import annotations

import h5py
import numpy as np
import pandas as pd
import pytest

from nwutil.errors import (
    ContainerIOError,
    InvalidNameError,
    NotFoundError,
    UnsupportedTypeError,
)
from nwutil.frames import create_dummy_data
from nwutil.io import list_tables, load_table, load_tables, save_table


def test_dummy_table_round_trip(tmp_path) -> None:
    path = tmp_path / "tables.h5"
    df = create_dummy_data(2, 3, 2, 2, rng=1)

    save_table(path, "demo", df)

    pd.testing.assert_frame_equal(load_table(path, "demo"), df)


def test_index_columns_are_stored_as_levels_and_codes(tmp_path) -> None:
    path = tmp_path / "tables.h5"
    df = pd.DataFrame(
        {
            "region": ["south", "north", "south", "north"],
            "year": [2030, 2030, 2040, 2040],
            "value": [1.0, 2.0, 3.0, 4.0],
        }
    )

    save_table(path, "loads", df)

    with h5py.File(path, "r") as h5:
        group = h5["loads"]
        assert list(group.keys()) == [
            "idset_region",
            "idlvl_region",
            "idset_year",
            "idlvl_year",
            "value_value",
        ]
        assert list(group["idset_region"].asstr()[()]) == ["north", "south"]
        np.testing.assert_array_equal(group["idlvl_region"][()], [1, 0, 1, 0])
        np.testing.assert_array_equal(group["idset_year"][()], [2030, 2040])


def test_column_order_survives_value_column_in_the_middle(tmp_path) -> None:
    path = tmp_path / "tables.h5"
    df = pd.DataFrame({"region": ["a", "b"], "load": [0.5, 0.7], "hour": [1, 2]})

    save_table(path, "flows", df, value_column="load")

    loaded = load_table(path, "flows")
    assert list(loaded.columns) == ["region", "load", "hour"]
    pd.testing.assert_frame_equal(loaded, df)


def test_timestamp_index_column_round_trips(tmp_path) -> None:
    path = tmp_path / "tables.h5"
    stamps = pd.to_datetime(["2024-01-01", "2024-01-02", "2024-01-01"]).to_numpy()
    df = pd.DataFrame({"time": stamps, "value": [1.0, 2.0, 3.0]})

    save_table(path, "series", df)

    pd.testing.assert_frame_equal(load_table(path, "series"), df)


def test_saving_table_keeps_other_tables(tmp_path) -> None:
    path = tmp_path / "tables.h5"
    first = pd.DataFrame({"region": ["a"], "value": [1.0]})
    second = pd.DataFrame({"region": ["b", "c"], "value": [2.0, 3.0]})

    save_table(path, "a", first)
    save_table(path, "b", first)
    save_table(path, "a", second)

    assert sorted(list_tables(path)) == ["a", "b"]
    tables = load_tables(path)
    pd.testing.assert_frame_equal(tables["a"], second)
    pd.testing.assert_frame_equal(tables["b"], first)


def test_missing_value_column_is_rejected(tmp_path) -> None:
    df = pd.DataFrame({"region": ["a"], "amount": [1.0]})

    with pytest.raises(InvalidNameError):
        save_table(tmp_path / "tables.h5", "t", df)


def test_missing_labels_in_index_column_are_rejected(tmp_path) -> None:
    path = tmp_path / "tables.h5"
    df = pd.DataFrame({"region": ["a", None], "value": [1.0, 2.0]})

    with pytest.raises(UnsupportedTypeError):
        save_table(path, "t", df)

    assert not path.exists()


def test_missing_table_raises_not_found(tmp_path) -> None:
    path = tmp_path / "tables.h5"
    save_table(path, "present", pd.DataFrame({"value": [1.0]}))

    with pytest.raises(NotFoundError):
        load_table(path, "absent")


def _write_raw_table(path, datasets) -> None:
    with h5py.File(path, "w") as h5:
        group = h5.create_group("t", track_order=True)
        for key, data in datasets:
            group.create_dataset(key, data=data)


@pytest.mark.parametrize(
    "datasets",
    [
        [("idlvl_region", np.array([0, 1])), ("value_value", np.array([1.0, 2.0]))],
        [
            ("idset_region", np.array([10, 20])),
            ("idlvl_region", np.array([0, 2])),
            ("value_value", np.array([1.0, 2.0])),
        ],
        [
            ("idset_region", np.array([10, 20])),
            ("idlvl_region", np.array([-1, 0])),
            ("value_value", np.array([1.0, 2.0])),
        ],
        [("idset_region", np.array([10, 20])), ("value_value", np.array([1.0, 2.0]))],
    ],
    ids=["codes-without-levels", "code-past-levels", "negative-code", "levels-without-codes"],
)
def test_inconsistent_levels_and_codes_are_corrupt(tmp_path, datasets) -> None:
    path = tmp_path / "tables.h5"
    _write_raw_table(path, datasets)

    with pytest.raises(ContainerIOError):
        load_table(path, "t")
