"""Tests for DataFrame storage in SQLite databases."""

from __future__ import annotations

import pandas as pd
import pytest

from nwutil.errors import ContainerIOError, InvalidNameError, NotFoundError
from nwutil.io import list_tables, load_table, load_tables, save_table


@pytest.fixture
def loads() -> pd.DataFrame:
    return pd.DataFrame({"region": ["north", "south"], "value": [1.5, 2.5]})


def test_table_round_trip(tmp_path, loads) -> None:
    path = tmp_path / "store.db"

    save_table(path, "loads", loads)

    pd.testing.assert_frame_equal(load_table(path, "loads"), loads)


def test_saving_replaces_existing_table(tmp_path, loads) -> None:
    path = tmp_path / "store.sqlite"
    replacement = pd.DataFrame({"region": ["east"], "value": [9.0]})

    save_table(path, "loads", loads)
    save_table(path, "loads", replacement)

    pd.testing.assert_frame_equal(load_table(path, "loads"), replacement)


def test_list_and_load_all_tables(tmp_path, loads) -> None:
    path = tmp_path / "store.db"

    save_table(path, "zeta", loads)
    save_table(path, "alpha", loads.iloc[:1])

    assert list_tables(path) == ["alpha", "zeta"]
    tables = load_tables(path)
    assert set(tables) == {"alpha", "zeta"}
    pd.testing.assert_frame_equal(tables["zeta"], loads)


def test_missing_table_raises_not_found(tmp_path, loads) -> None:
    path = tmp_path / "store.db"
    save_table(path, "loads", loads)

    with pytest.raises(NotFoundError):
        load_table(path, "other")


def test_missing_database_raises_container_error(tmp_path) -> None:
    path = tmp_path / "absent.db"

    with pytest.raises(ContainerIOError):
        load_table(path, "loads")

    assert not path.exists()


def test_non_database_file_raises_container_error(tmp_path) -> None:
    path = tmp_path / "junk.db"
    path.write_text("definitely not sqlite " * 20)

    with pytest.raises(ContainerIOError):
        list_tables(path)


@pytest.mark.parametrize("name", ["", 'bad"name'])
def test_invalid_table_names_are_rejected(tmp_path, loads, name) -> None:
    with pytest.raises(InvalidNameError):
        save_table(tmp_path / "store.db", name, loads)
