"""Assemble the views of a gradebook's weight structure."""

import dataclasses
from typing import Iterable, Optional

from ._adjusted import calculate_adjusted_weights
from ._builder import build_setup_items
from ._items import CategoryRecord, ItemRecord, Totals, WeightOptions
from ._overall import calculate_overall_weights
from ._validate import validate_gradebook_weights


@dataclasses.dataclass
class GradebookSetup:
    """The weight structure of a gradebook, without any calculations.

    This is the form used for export.

    """

    items: list
    exclude_empty_grades: bool = True
    gradebook_id: Optional[int] = None
    course_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "gradebook_id": self.gradebook_id,
            "course_id": self.course_id,
            "gradebook_setup": {
                "items": [item.to_dict() for item in self.items],
                "exclude_empty_grades": self.exclude_empty_grades,
            },
        }


@dataclasses.dataclass
class GradebookSetupForUI:
    """The weight structure of a gradebook, with every weight computed."""

    items: list
    totals: Totals
    exclude_empty_grades: bool = True
    gradebook_id: Optional[int] = None
    course_id: Optional[int] = None

    @property
    def extra_credit_items(self) -> list:
        return self.totals.extra_credit_items

    def to_dict(self) -> dict:
        totals = self.totals.to_dict()
        return {
            "gradebook_id": self.gradebook_id,
            "course_id": self.course_id,
            "gradebook_setup": {
                "items": [item.to_dict() for item in self.items],
                "exclude_empty_grades": self.exclude_empty_grades,
            },
            "totals": {
                key: totals[key]
                for key in [
                    "baseTotal",
                    "extraCreditTotal",
                    "calculatedTotal",
                    "totalMaxGrade",
                ]
            },
            "extraCreditItems": totals["extraCreditItems"],
            "extraCreditCategories": totals["extraCreditCategories"],
        }


def get_gradebook_setup(
    categories: Iterable[CategoryRecord],
    items: Iterable[ItemRecord],
    gradebook_id: Optional[int] = None,
    course_id: Optional[int] = None,
) -> GradebookSetup:
    """Build the weight structure of a gradebook from its flat records."""
    return GradebookSetup(
        items=build_setup_items(categories, items),
        gradebook_id=gradebook_id,
        course_id=course_id,
    )


def get_gradebook_setup_for_ui(
    categories: Iterable[CategoryRecord],
    items: Iterable[ItemRecord],
    gradebook_id: Optional[int] = None,
    course_id: Optional[int] = None,
    options: Optional[WeightOptions] = None,
) -> GradebookSetupForUI:
    """Build the weight structure of a gradebook and compute all of its weights.

    The tree is built from the flat records, its adjusted weights are
    computed, and then its overall weights and totals.

    Parameters
    ----------
    categories : Iterable[CategoryRecord]
        Every category of the gradebook.
    items : Iterable[ItemRecord]
        Every item of the gradebook.
    gradebook_id : Optional[int]
        Passed through to the result.
    course_id : Optional[int]
        Passed through to the result.
    options : Optional[WeightOptions]
        Options for the overall weight computation.

    Returns
    -------
    GradebookSetupForUI

    """
    setup = get_gradebook_setup(categories, items, gradebook_id, course_id)
    adjusted = calculate_adjusted_weights(setup.items)
    totals = calculate_overall_weights(adjusted, options=options)
    return GradebookSetupForUI(
        items=adjusted,
        totals=totals,
        exclude_empty_grades=setup.exclude_empty_grades,
        gradebook_id=gradebook_id,
        course_id=course_id,
    )


def validate_setup(
    categories: Iterable[CategoryRecord],
    items: Iterable[ItemRecord],
    error_prefix: str = "Operation",
):
    """Validate the weights of the gradebook described by flat records.

    Intended as a write-path guard: pass the records as they would be after a
    create, update or delete, and reject the change if this raises.

    Raises
    ------
    WeightExceedsLimitError
        If the weights at some level are inconsistent.
    CyclicCategoryError
        If the categories' parent pointers form a cycle.

    """
    validate_gradebook_weights(
        build_setup_items(categories, items),
        "course level",
        error_prefix,
    )
