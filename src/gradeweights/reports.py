"""Tabular summaries of a gradebook's computed weights."""

from typing import Sequence

import numpy as np
import pandas as pd

from ._util import iter_tree
from .core import SetupItemWithCalculations, Totals


_COLUMNS = [
    "id",
    "type",
    "name",
    "depth",
    "path",
    "weight",
    "adjusted_weight",
    "auto_weighted_zero",
    "overall_weight",
    "extra_credit",
    "max_grade",
    "weight_explanation",
]


def _or_nan(x):
    return np.nan if x is None else x


def weights_table(items: Sequence[SetupItemWithCalculations]) -> pd.DataFrame:
    """A table with one row per node of the tree, in pre-order.

    Parameters
    ----------
    items : Sequence[SetupItemWithCalculations]
        The root level of a tree whose weights have been computed.

    Returns
    -------
    pandas.DataFrame
        Has columns ``id``, ``type``, ``name``, ``depth``, ``path``, ``weight``,
        ``adjusted_weight``, ``auto_weighted_zero``, ``overall_weight``,
        ``extra_credit``, ``max_grade`` and ``weight_explanation``. The
        ``path`` of a node joins the names of its ancestors and itself with
        ``" > "``. Missing weights are `NaN`.

    """
    rows = []
    path = []
    for node, depth in iter_tree(items):
        del path[depth:]
        path.append(node.name)
        rows.append(
            {
                "id": node.id,
                "type": node.type.value,
                "name": node.name,
                "depth": depth,
                "path": " > ".join(path),
                "weight": _or_nan(node.weight),
                "adjusted_weight": _or_nan(node.adjusted_weight),
                "auto_weighted_zero": node.auto_weighted_zero,
                "overall_weight": _or_nan(node.overall_weight),
                "extra_credit": node.extra_credit,
                "max_grade": _or_nan(node.max_grade),
                "weight_explanation": node.weight_explanation,
            }
        )

    table = pd.DataFrame(rows, columns=_COLUMNS)
    for column in ["weight", "adjusted_weight", "overall_weight", "max_grade"]:
        table[column] = table[column].astype(float)
    return table


def leaf_weights(items: Sequence[SetupItemWithCalculations]) -> pd.Series:
    """The overall weight of every leaf, indexed by its path in the tree.

    Extra credit leaves are included. A leaf without an overall weight is
    `NaN`.

    """
    table = weights_table(items)
    leaves = table[table["type"] != "category"]
    s = leaves.set_index("path")["overall_weight"]
    s.name = "overall_weight"
    return s


def totals_frame(totals: Totals) -> pd.DataFrame:
    """A one-row table summarizing the totals of a tree."""
    return pd.DataFrame(
        [
            {
                "base_total": totals.base_total,
                "extra_credit_total": totals.extra_credit_total,
                "calculated_total": totals.calculated_total,
                "total_max_grade": totals.total_max_grade,
                "extra_credit_items": len(totals.extra_credit_items),
                "extra_credit_categories": len(totals.extra_credit_categories),
            }
        ]
    )
