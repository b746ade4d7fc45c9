"""Errors raised by the weight engine.

All of them are subclasses of :class:`ValueError`, so code that already guards
against invalid weights with ``except ValueError`` continues to work.

"""

from typing import Collection, Optional


class GradebookWeightError(ValueError):
    """Base class for all weight engine errors."""


class WeightExceedsLimitError(GradebookWeightError):
    """The weights specified at some level of the gradebook are invalid.

    Raised by :func:`gradeweights.validate_gradebook_weights` when the
    specified weights at a level exceed 100% (when auto-weighted siblings
    exist), or do not total exactly 100% (when none do).

    Attributes
    ----------
    level : str or None
        The path of the offending level, e.g. ``"course level > Homework"``.
    total : float or None
        The total specified weight computed at that level.

    """

    def __init__(
        self, message: str, level: Optional[str] = None, total: Optional[float] = None
    ):
        super().__init__(message)
        self.level = level
        self.total = total


class WeightZeroRequiredError(GradebookWeightError):
    """A level without regular items was given a specified weight."""

    def __init__(self, message: str, level: Optional[str] = None):
        super().__init__(message)
        self.level = level


class CyclicCategoryError(GradebookWeightError):
    """The parent pointers of a set of categories form a cycle.

    Attributes
    ----------
    category_ids : frozenset
        The ids of the categories that are unreachable from the root because
        they lie on, or below, a cycle.

    """

    def __init__(self, message: str, category_ids: Collection[int] = ()):
        super().__init__(message)
        self.category_ids = frozenset(category_ids)
