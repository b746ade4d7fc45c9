"""Build the gradebook tree from flat category and item records."""

import logging
from typing import Iterable, Optional, Sequence

from ..exceptions import CyclicCategoryError
from ._items import CategoryRecord, ItemRecord, ItemType, SetupItem


logger = logging.getLogger(__name__)


# private helper functions =============================================================


def _leaf_from_record(item: ItemRecord) -> SetupItem:
    return SetupItem(
        id=item.id,
        type=item.node_type,
        name=item.display_name,
        weight=item.weight,
        max_grade=item.max_grade,
        extra_credit=item.extra_credit,
    )


def _find_unreachable_categories(categories: Sequence[CategoryRecord]) -> set:
    """Find the categories whose parent chain never reaches the root.

    A category whose parent is not among `categories` is treated as a root
    category that is simply never attached; only chains that loop back on
    themselves are reported.

    """
    parent_of = {c.id: c.parent for c in categories}
    resolved = {}

    def _reaches_root(category_id) -> bool:
        path = []
        on_path = set()
        current = category_id
        while True:
            if current is None or current not in parent_of:
                result = True
                break
            if current in resolved:
                result = resolved[current]
                break
            if current in on_path:
                result = False
                break
            path.append(current)
            on_path.add(current)
            current = parent_of[current]

        for visited in path:
            resolved[visited] = result
        return result

    return {c.id for c in categories if not _reaches_root(c.id)}


# public functions =====================================================================


def build_category_structure(
    parent_id: Optional[int],
    categories: Sequence[CategoryRecord],
    items: Sequence[ItemRecord],
) -> list[SetupItem]:
    """Recursively build the nodes found under a category.

    Parameters
    ----------
    parent_id : int or None
        The category whose contents are built. If ``None``, the root level is
        built, but only its *categories*: root-level items are the
        responsibility of :func:`build_setup_items`.
    categories : Sequence[CategoryRecord]
        Every category of the gradebook.
    items : Sequence[ItemRecord]
        Every item of the gradebook.

    Returns
    -------
    list[SetupItem]
        The category's items, in order, followed by its subcategories, each of
        which has been expanded recursively.

    Notes
    -----
    No cycle check is made here. Categories whose parent pointers form a cycle
    are never reached from the root; :func:`build_setup_items` checks for this.

    """
    result = []

    if parent_id is not None:
        result.extend(_leaf_from_record(i) for i in items if i.category == parent_id)

    for category in categories:
        if category.parent != parent_id:
            continue

        result.append(
            SetupItem(
                id=category.id,
                type=ItemType.CATEGORY,
                name=category.name,
                weight=category.weight,
                extra_credit=category.extra_credit,
                grade_items=build_category_structure(category.id, categories, items),
            )
        )

    return result


def build_setup_items(
    categories: Iterable[CategoryRecord], items: Iterable[ItemRecord]
) -> list[SetupItem]:
    """Build the full gradebook tree from flat records.

    Root-level items (those without a category) come first, followed by the
    root categories with their contents expanded recursively.

    Parameters
    ----------
    categories : Iterable[CategoryRecord]
        Every category of the gradebook.
    items : Iterable[ItemRecord]
        Every item of the gradebook.

    Returns
    -------
    list[SetupItem]
        The root level of the tree.

    Raises
    ------
    CyclicCategoryError
        If the parent pointers of the categories form a cycle.

    """
    categories = list(categories)
    items = list(items)

    unreachable = _find_unreachable_categories(categories)
    if unreachable:
        raise CyclicCategoryError(
            f"Categories {sorted(unreachable)} have a cyclic parent chain.",
            category_ids=unreachable,
        )

    tree = [_leaf_from_record(i) for i in items if i.category is None]
    tree.extend(build_category_structure(None, categories, items))

    logger.debug(
        "Built gradebook tree from %d categories and %d items.",
        len(categories),
        len(items),
    )
    return tree
