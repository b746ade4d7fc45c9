"""Private helper utilities."""

from typing import Iterator, Optional, Sequence


# percentage points; absorbs floating point drift when summing weights
TOLERANCE = 0.01


def within_tolerance(
    value: float, target: float, tolerance: float = TOLERANCE
) -> bool:
    """Determine if `value` is within `tolerance` of `target`."""
    return abs(value - target) <= tolerance


def format_percentage(value: Optional[float]) -> str:
    """Format a percentage with two decimals, as shown in weight explanations.

    A missing value is displayed as 100%, since it has no effect on a product
    of weights.

    """
    if value is None:
        return "100%"
    return f"{value:.2f}%"


def iter_tree(items: Sequence, depth: int = 0) -> Iterator[tuple]:
    """Walk a tree of setup items in pre-order, yielding ``(node, depth)`` pairs."""
    for item in items:
        yield item, depth
        if item.grade_items is not None:
            yield from iter_tree(item.grade_items, depth + 1)


def collect_leaves(items: Sequence) -> list:
    """Collect every leaf node of a tree, in pre-order."""
    return [node for node, _ in iter_tree(items) if not node.is_category]


def collect_categories(items: Sequence) -> list:
    """Collect every category node of a tree, in pre-order."""
    return [node for node, _ in iter_tree(items) if node.is_category]
