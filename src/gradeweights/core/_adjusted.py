"""Distribute the remaining weight of each level among auto-weighted nodes."""

from typing import Sequence

from ._items import SetupItem, SetupItemWithCalculations


# private helper functions =============================================================


def _is_auto_weighted_zero(category: SetupItemWithCalculations) -> bool:
    """Decide whether an auto-weighted category contributes nothing.

    The category's children must already have been processed. It is worth zero
    if it has no regular (non-extra credit) leaves and every one of its child
    categories, if any, is itself worth zero.

    """
    children = category.grade_items

    if any(not c.is_category and not c.extra_credit for c in children):
        return False

    return all(c.auto_weighted_zero for c in children if c.is_category)


# public functions =====================================================================


def calculate_adjusted_weights(
    items: Sequence[SetupItem],
) -> list[SetupItemWithCalculations]:
    """Compute the weight actually used by every node of a tree.

    At each level of the tree:

        - Extra credit nodes keep their specified weight (possibly ``None``);
          they never receive a share of the remainder.
        - Auto-weighted categories without any regular weight-bearing
          descendants are marked ``auto_weighted_zero`` and get weight 0.
        - The remaining nodes participate in the distribution. Those with a
          specified weight keep it, and those without split
          ``max(0, 100 - sum(specified))`` evenly. If nothing is left to
          split, their adjusted weight is ``None``.

    Children are processed before their parents, since a category can only be
    classified once its contents are.

    Parameters
    ----------
    items : Sequence[SetupItem]
        The nodes of one level of the tree.

    Returns
    -------
    list[SetupItemWithCalculations]
        New nodes, in the same order, with `adjusted_weight` and
        `auto_weighted_zero` filled in throughout the tree. The input is not
        modified.

    """
    # classify bottom-up
    processed = []
    for item in items:
        children = (
            calculate_adjusted_weights(item.grade_items) if item.is_category else None
        )
        node = SetupItemWithCalculations.from_setup_item(item, grade_items=children)

        if node.is_category and node.weight is None:
            node.auto_weighted_zero = _is_auto_weighted_zero(node)

        processed.append(node)

    # distribute the remainder of this level
    participating = [
        p for p in processed if not p.extra_credit and not p.auto_weighted_zero
    ]
    total_specified = sum(p.weight for p in participating if p.weight is not None)
    number_auto_weighted = sum(1 for p in participating if p.weight is None)

    remaining = max(0.0, 100 - total_specified)
    if number_auto_weighted > 0 and remaining > 0:
        distributed = remaining / number_auto_weighted
    else:
        distributed = None

    for node in processed:
        if node.auto_weighted_zero:
            node.adjusted_weight = 0.0
        elif node.extra_credit or node.weight is not None:
            node.adjusted_weight = node.weight
        else:
            node.adjusted_weight = distributed

    return processed
