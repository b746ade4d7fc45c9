"""Check that the weights at every level of a gradebook are consistent."""

import logging
from typing import Optional, Sequence

from .._util import TOLERANCE, within_tolerance
from ..exceptions import WeightExceedsLimitError, WeightZeroRequiredError
from ._items import SetupItem


logger = logging.getLogger(__name__)


def validate_gradebook_weights(
    items: Sequence[SetupItem],
    level_name: str = "course level",
    error_prefix: str = "Operation",
    *,
    level_weight: Optional[float] = None,
    require_auto_weighted_empty_levels: bool = False,
):
    """Validate the distribution of weights at a level, and every level below it.

    At each level, extra credit nodes are set aside. Of the rest:

        - If some are auto-weighted (have no specified weight), the specified
          weights must total at most 100%.
        - Otherwise, the specified weights must total exactly 100%.

    A level with nothing left after extra credit is set aside is not checked,
    but the categories within it still are. Comparisons allow a tolerance
    of 0.01 percentage points.

    This is meant to be run as a guard whenever a category or item is
    created, updated or deleted, against the tree as it would be afterwards.

    Parameters
    ----------
    items : Sequence[SetupItem]
        The nodes at the level being validated.
    level_name : str
        Name of the level, used in error messages. Nested levels are named by
        appending ``" > <category name>"``. Default: ``"course level"``.
    error_prefix : str
        Describes the operation being guarded in error messages, such as
        ``"Item creation"``. Default: ``"Operation"``.
    level_weight : Optional[float]
        The specified weight of the category owning this level. ``None`` at
        the course level.
    require_auto_weighted_empty_levels : bool
        If True, a category containing no regular (non-extra credit) nodes
        must itself be auto-weighted. Default: False.

    Raises
    ------
    WeightExceedsLimitError
        If the weights at some level are inconsistent.
    WeightZeroRequiredError
        If `require_auto_weighted_empty_levels` is set and a category without
        regular nodes has a specified weight.

    """
    regular = [item for item in items if not item.extra_credit]

    if not regular:
        if require_auto_weighted_empty_levels and level_weight is not None:
            raise WeightZeroRequiredError(
                f"Level {level_name} must be auto-weighted when no "
                "non-extra-credit items exist.",
                level=level_name,
            )
    else:
        total = sum(item.weight for item in regular if item.weight is not None)
        has_auto_weighted = any(item.weight is None for item in regular)

        if has_auto_weighted:
            if total > 100 + TOLERANCE:
                raise WeightExceedsLimitError(
                    f"{error_prefix} would result in total specified weight of "
                    f"{total:.2f}% at {level_name}. When auto-weighted items exist, "
                    "specified weights must not exceed 100%.",
                    level=level_name,
                    total=total,
                )
        elif not within_tolerance(total, 100):
            raise WeightExceedsLimitError(
                f"{error_prefix} would result in total weight of {total:.2f}% at "
                f"{level_name}. Total must equal exactly 100%.",
                level=level_name,
                total=total,
            )

    logger.debug("Validated weights at %s.", level_name)

    for item in items:
        if item.is_category:
            validate_gradebook_weights(
                item.grade_items,
                f"{level_name} > {item.name}",
                error_prefix,
                level_weight=item.weight,
                require_auto_weighted_empty_levels=require_auto_weighted_empty_levels,
            )
