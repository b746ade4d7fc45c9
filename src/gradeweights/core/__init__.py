from ._items import (
    ItemType,
    SetupItem,
    SetupItemWithCalculations,
    CategoryRecord,
    ItemRecord,
    Totals,
    WeightOptions,
    DEFAULT_OPTIONS,
)
from ._builder import build_category_structure, build_setup_items
from ._adjusted import calculate_adjusted_weights
from ._overall import calculate_overall_weights
from ._validate import validate_gradebook_weights
from ._setup import (
    GradebookSetup,
    GradebookSetupForUI,
    get_gradebook_setup,
    get_gradebook_setup_for_ui,
    validate_setup,
)

__all__ = [
    "ItemType",
    "SetupItem",
    "SetupItemWithCalculations",
    "CategoryRecord",
    "ItemRecord",
    "Totals",
    "WeightOptions",
    "DEFAULT_OPTIONS",
    "build_category_structure",
    "build_setup_items",
    "calculate_adjusted_weights",
    "calculate_overall_weights",
    "validate_gradebook_weights",
    "GradebookSetup",
    "GradebookSetupForUI",
    "get_gradebook_setup",
    "get_gradebook_setup_for_ui",
    "validate_setup",
]
