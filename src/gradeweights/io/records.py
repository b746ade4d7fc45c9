"""Read the flat category and item records of a gradebook.

Records can be read from a :class:`pandas.DataFrame`, from a CSV file, or from a
list of dictionaries (as returned by the persistence layer). Column names may
be snake_case or camelCase; see :meth:`gradeweights.CategoryRecord.from_dict`
and :meth:`gradeweights.ItemRecord.from_dict`.

In a CSV file, missing values are empty cells, and the ``subcategories`` and
``items`` columns of a category hold ``;``-separated lists of ids.

"""

import numbers
import pathlib as _pathlib
from collections.abc import Mapping, Sequence
from typing import Any, Union

import pandas as _pd

from ..core import CategoryRecord, ItemRecord


RecordSource = Union[_pd.DataFrame, str, _pathlib.Path, Sequence[Mapping[str, Any]]]

_ID_COLUMNS = ["id", "parent", "category"]
_ID_LIST_COLUMNS = ["subcategory_ids", "subcategories", "item_ids", "items"]
_BOOL_COLUMNS = ["extra_credit", "extraCredit"]
_TRUTHY = {"true", "t", "yes", "y", "1"}


# private helper functions =============================================================


def _is_missing(value) -> bool:
    # pd.isna is elementwise on lists
    if isinstance(value, (list, tuple)):
        return False
    return bool(_pd.isna(value))


def _as_id(value):
    if _is_missing(value):
        return None
    return int(value)


def _as_id_list(value) -> tuple:
    if _is_missing(value):
        return ()
    if isinstance(value, str):
        return tuple(int(part) for part in value.split(";") if part.strip())
    if isinstance(value, numbers.Number):
        return (int(value),)
    return tuple(int(v) for v in value)


def _as_bool(value) -> bool:
    if _is_missing(value):
        return False
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def _clean_row(row: Mapping[str, Any]) -> dict:
    """Replace missing values with None and coerce the typed columns."""
    cleaned = {}
    for column, value in row.items():
        if column in _ID_COLUMNS:
            cleaned[column] = _as_id(value)
        elif column in _ID_LIST_COLUMNS:
            cleaned[column] = _as_id_list(value)
        elif column in _BOOL_COLUMNS:
            cleaned[column] = _as_bool(value)
        elif _is_missing(value):
            cleaned[column] = None
        else:
            cleaned[column] = value
    return cleaned


def _rows(source: RecordSource) -> list[dict]:
    if isinstance(source, (str, _pathlib.Path)):
        source = _pd.read_csv(source)

    if isinstance(source, _pd.DataFrame):
        rows = source.to_dict(orient="records")
    else:
        rows = list(source)

    return [_clean_row(row) for row in rows]


# public functions =====================================================================


def read_categories(source: RecordSource) -> list[CategoryRecord]:
    """Read category records.

    Parameters
    ----------
    source : pandas.DataFrame, str, pathlib.Path, or Sequence[Mapping]
        A table with one row per category, the path to a CSV file containing
        such a table, or a sequence of dictionaries.

    Returns
    -------
    list[CategoryRecord]
        In the order they appear in the source.

    Raises
    ------
    KeyError
        If a required column (``id``, ``name``) is missing.
    ValueError
        If a weight is out of bounds.

    """
    return [CategoryRecord.from_dict(row) for row in _rows(source)]


def read_items(source: RecordSource) -> list[ItemRecord]:
    """Read item records.

    Parameters
    ----------
    source : pandas.DataFrame, str, pathlib.Path, or Sequence[Mapping]
        A table with one row per item, the path to a CSV file containing such
        a table, or a sequence of dictionaries.

    Returns
    -------
    list[ItemRecord]
        In the order they appear in the source.

    Raises
    ------
    KeyError
        If a required column (``id``, ``name``) is missing.
    ValueError
        If a weight is out of bounds, or an activity module type is unknown.

    """
    return [ItemRecord.from_dict(row) for row in _rows(source)]
