"""A package for computing the weight structure of a course gradebook."""

from .core import (
    ItemType,
    SetupItem,
    SetupItemWithCalculations,
    CategoryRecord,
    ItemRecord,
    Totals,
    WeightOptions,
    DEFAULT_OPTIONS,
    GradebookSetup,
    GradebookSetupForUI,
    build_category_structure,
    build_setup_items,
    calculate_adjusted_weights,
    calculate_overall_weights,
    validate_gradebook_weights,
    get_gradebook_setup,
    get_gradebook_setup_for_ui,
    validate_setup,
)
from .exceptions import (
    GradebookWeightError,
    WeightExceedsLimitError,
    WeightZeroRequiredError,
    CyclicCategoryError,
)

from . import io
from . import reports

__all__ = [
    "ItemType",
    "SetupItem",
    "SetupItemWithCalculations",
    "CategoryRecord",
    "ItemRecord",
    "Totals",
    "WeightOptions",
    "DEFAULT_OPTIONS",
    "GradebookSetup",
    "GradebookSetupForUI",
    "build_category_structure",
    "build_setup_items",
    "calculate_adjusted_weights",
    "calculate_overall_weights",
    "validate_gradebook_weights",
    "get_gradebook_setup",
    "get_gradebook_setup_for_ui",
    "validate_setup",
    "GradebookWeightError",
    "WeightExceedsLimitError",
    "WeightZeroRequiredError",
    "CyclicCategoryError",
    "io",
    "reports",
]
