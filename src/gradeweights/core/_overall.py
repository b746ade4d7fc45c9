"""Compute each leaf's share of the final grade, and the totals of a tree."""

import dataclasses
import logging
from typing import Optional, Sequence

from .._util import collect_categories, collect_leaves, format_percentage
from ._items import DEFAULT_OPTIONS, SetupItemWithCalculations, Totals, WeightOptions


logger = logging.getLogger(__name__)


# private helpers ======================================================================


def _key(node: SetupItemWithCalculations) -> tuple:
    # categories and items are numbered independently
    return (node.is_category, node.id)


class _ParentIndex:
    """Maps each node of a tree to the category directly containing it.

    If the same node appears more than once, the first containing category in
    pre-order wins.

    """

    def __init__(self, root_items: Sequence[SetupItemWithCalculations]):
        self._parents = {}
        self._index(root_items, set())

    def _index(self, items, expanded: set):
        for item in items:
            if not item.is_category or id(item) in expanded:
                continue
            expanded.add(id(item))
            for child in item.grade_items:
                self._parents.setdefault(_key(child), item)
            self._index(item.grade_items, expanded)

    def parent_of(self, node) -> Optional[SetupItemWithCalculations]:
        return self._parents.get(_key(node))

    def ancestors(self, node, max_depth: int) -> list[SetupItemWithCalculations]:
        """The chain of categories above `node`, from the root down.

        The walk stops early, with an error logged, if a category is visited
        twice or if more than `max_depth` categories are followed. In that case
        the chain collected so far is returned.

        """
        chain = []
        visited = set()
        current = self.parent_of(node)

        while current is not None:
            if len(chain) >= max_depth:
                logger.error(
                    "Maximum depth (%d) reached while traversing category hierarchy "
                    'above "%s". Possible circular reference or extremely deep nesting.',
                    max_depth,
                    node.name,
                )
                break

            if current.id in visited:
                logger.error(
                    'Circular reference detected in category hierarchy: category %s "%s" '
                    "was already visited.",
                    current.id,
                    current.name,
                )
                break

            visited.add(current.id)
            chain.insert(0, current)
            current = self.parent_of(current)

        return chain


def _chain_product(node, chain) -> float:
    """Multiply the node's adjusted weight through its ancestors, in percent.

    An ancestor without an adjusted weight has no effect on the product.

    """
    weight = node.adjusted_weight
    for category in reversed(chain):
        if category.adjusted_weight is not None:
            weight *= category.adjusted_weight / 100
    return weight


def _explain(leaf, chain) -> str:
    parts = [f"{c.name} ({format_percentage(c.adjusted_weight)})" for c in chain]
    parts.append(f"{leaf.name} ({format_percentage(leaf.adjusted_weight)})")
    return f"{' × '.join(parts)} = {format_percentage(leaf.overall_weight)}"


def _annotate(items, index: _ParentIndex, options: WeightOptions):
    """Set the overall weight and explanation of every node, in place."""
    for item in items:
        if item.is_category:
            item.overall_weight = None
            item.weight_explanation = None
            _annotate(item.grade_items, index, options)
            continue

        if item.adjusted_weight is None:
            item.overall_weight = None
            item.weight_explanation = None
            continue

        chain = index.ancestors(item, options.max_depth)
        item.overall_weight = _chain_product(item, chain)
        item.weight_explanation = _explain(item, chain)


def _category_contribution(category, index: _ParentIndex, options: WeightOptions):
    """The overall weight of a category itself, as a bonus percentage."""
    if category.adjusted_weight is None:
        return 0.0
    return _chain_product(category, index.ancestors(category, options.max_depth))


# public functions =====================================================================


def calculate_overall_weights(
    items: Sequence[SetupItemWithCalculations],
    root_items: Optional[Sequence[SetupItemWithCalculations]] = None,
    options: Optional[WeightOptions] = None,
) -> Totals:
    """Compute every leaf's overall weight and the totals of the tree.

    A leaf's overall weight is its adjusted weight multiplied through the
    adjusted weights of every category above it. For example, an item worth
    10% of a category worth 35% of the course has an overall weight of 3.5%.
    A leaf without an adjusted weight has no overall weight. Categories never
    have one.

    The nodes are modified in place: `overall_weight` and `weight_explanation`
    are set throughout `items`.

    Parameters
    ----------
    items : Sequence[SetupItemWithCalculations]
        The nodes to annotate, as produced by
        :func:`calculate_adjusted_weights`.
    root_items : Optional[Sequence[SetupItemWithCalculations]]
        The root level of the whole tree. Ancestors are looked up here, and
        the totals are computed over it. Only needed when `items` is a subtree.
        Default: `items`.
    options : Optional[WeightOptions]
        Controls the maximum depth of the ancestor walk.

    Returns
    -------
    Totals
        The aggregate weights of the tree rooted at `root_items`.

    Notes
    -----
    ``calculated_total`` is always ``100 + extra_credit_total``. It is not
    derived from ``base_total``, so that rounding errors in the base are not
    compounded.

    An extra credit category contributes its own chain-weighted percentage
    to ``extra_credit_total``, on top of whatever its children contribute.

    """
    options = DEFAULT_OPTIONS if options is None else options
    scope = items if root_items is None else root_items
    index = _ParentIndex(scope)

    _annotate(items, index, options)

    leaves = collect_leaves(scope)
    categories = [c for c in collect_categories(scope) if c.extra_credit]

    base_total = sum(
        leaf.overall_weight or 0.0 for leaf in leaves if not leaf.extra_credit
    )
    extra_credit_items = [
        leaf for leaf in leaves if leaf.extra_credit and leaf.overall_weight is not None
    ]
    extra_credit_categories = [
        dataclasses.replace(
            category,
            overall_weight=_category_contribution(category, index, options),
        )
        for category in categories
    ]

    extra_credit_total = sum(leaf.overall_weight for leaf in extra_credit_items) + sum(
        category.overall_weight for category in extra_credit_categories
    )

    totals = Totals(
        base_total=base_total,
        extra_credit_total=extra_credit_total,
        calculated_total=100 + extra_credit_total,
        extra_credit_items=extra_credit_items,
        extra_credit_categories=extra_credit_categories,
        total_max_grade=sum(leaf.max_grade or 0.0 for leaf in leaves),
    )

    logger.debug(
        "Computed overall weights for %d leaves: base %.2f%%, extra credit %.2f%%.",
        len(leaves),
        totals.base_total,
        totals.extra_credit_total,
    )
    return totals
