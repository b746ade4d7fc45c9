"""Types for representing the weight structure of a gradebook."""

from __future__ import annotations

import dataclasses
import enum
import math
from typing import Any, Mapping, Optional, Sequence


# private helper functions =============================================================


def _validate_weight(weight: Any) -> Optional[float]:
    """Validates and normalizes a percentage weight.

    ``None`` is accepted and means "auto-weighted". Anything else is cast to a
    float that must be finite and lie between 0 and 100, inclusive.

    Raises
    ------
    TypeError
        If the weight is not ``None`` and cannot be cast to a float.
    ValueError
        If the weight is not finite or is out of bounds.

    """
    if weight is None:
        return None

    if isinstance(weight, bool):
        raise TypeError("Weight must be a number or None.")

    try:
        weight = float(weight)
    except (TypeError, ValueError):
        raise TypeError("Weight must be a number or None.")

    if not math.isfinite(weight):
        raise ValueError("Weight must be a finite number.")

    if weight < 0 or weight > 100:
        raise ValueError("Weight must be between 0 and 100.")

    return weight


def _first_present(data: Mapping[str, Any], *keys: str, default=None):
    """Return the value of the first key present in `data`."""
    for key in keys:
        if key in data:
            return data[key]
    return default


# public classes =======================================================================


# ItemType -----------------------------------------------------------------------------


class ItemType(str, enum.Enum):
    """The kind of a node in the gradebook tree.

    Everything except ``CATEGORY`` is a leaf. The activity module kinds are used
    for items linked to a course activity; the rest are ``MANUAL_ITEM``.

    """

    MANUAL_ITEM = "manual_item"
    CATEGORY = "category"
    PAGE = "page"
    WHITEBOARD = "whiteboard"
    ASSIGNMENT = "assignment"
    QUIZ = "quiz"
    DISCUSSION = "discussion"

    @property
    def is_leaf(self) -> bool:
        return self is not ItemType.CATEGORY

    def __str__(self):
        return self.value


# WeightOptions ------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class WeightOptions:
    """Configures the behavior of the weight engine.

    Attributes
    ----------
    max_depth : int
        The maximum number of ancestor categories followed when computing the
        overall weight of a node. Default: 100.

    """

    max_depth: int = 100


DEFAULT_OPTIONS = WeightOptions()


# flat records -------------------------------------------------------------------------


@dataclasses.dataclass
class CategoryRecord:
    """A grade category as stored by the persistence layer.

    Attributes
    ----------
    id : int
        The category's id.
    parent : int or None
        The id of the containing category, or ``None`` for a root category.
    name : str
        The category's display name.
    weight : float or None
        The specified weight within the parent level, or ``None`` if the
        category is auto-weighted.
    extra_credit : bool
        Whether the category counts as extra credit.
    subcategory_ids : Sequence[int]
        Ids of the categories whose parent is this category.
    item_ids : Sequence[int]
        Ids of the items contained in this category.

    """

    id: int
    parent: Optional[int]
    name: str
    weight: Optional[float] = None
    extra_credit: bool = False
    subcategory_ids: Sequence[int] = ()
    item_ids: Sequence[int] = ()

    def __post_init__(self):
        self.weight = _validate_weight(self.weight)
        self.extra_credit = bool(self.extra_credit)
        self.subcategory_ids = tuple(self.subcategory_ids)
        self.item_ids = tuple(self.item_ids)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CategoryRecord":
        """Create a record from a dictionary.

        Both snake_case keys and the persistence layer's camelCase keys are
        understood.

        """
        return cls(
            id=data["id"],
            parent=data.get("parent"),
            name=data["name"],
            weight=data.get("weight"),
            extra_credit=_first_present(
                data, "extra_credit", "extraCredit", default=False
            ),
            subcategory_ids=_first_present(
                data, "subcategory_ids", "subcategories", default=()
            )
            or (),
            item_ids=_first_present(data, "item_ids", "items", default=()) or (),
        )


@dataclasses.dataclass
class ItemRecord:
    """A grade item as stored by the persistence layer.

    Attributes
    ----------
    id : int
        The item's id.
    category : int or None
        The id of the containing category, or ``None`` for a root item.
    name : str
        The item's own name.
    weight : float or None
        The specified weight within its level, or ``None`` if auto-weighted.
    max_grade : float or None
        The maximum score attainable on the item.
    extra_credit : bool
        Whether the item counts as extra credit.
    activity_module_type : str or None
        The kind of linked activity module, if any.
    activity_module_name : str or None
        The name of the linked activity module, if any. Takes precedence over
        ``name`` when displaying the item.

    """

    id: int
    category: Optional[int]
    name: str
    weight: Optional[float] = None
    max_grade: Optional[float] = None
    extra_credit: bool = False
    activity_module_type: Optional[str] = None
    activity_module_name: Optional[str] = None

    def __post_init__(self):
        self.weight = _validate_weight(self.weight)
        self.extra_credit = bool(self.extra_credit)
        if self.max_grade is not None:
            self.max_grade = float(self.max_grade)
        if self.activity_module_type is not None:
            if not ItemType(self.activity_module_type).is_leaf:
                raise ValueError("An item cannot be linked to a category.")

    @property
    def node_type(self) -> ItemType:
        if self.activity_module_type is None:
            return ItemType.MANUAL_ITEM
        return ItemType(self.activity_module_type)

    @property
    def display_name(self) -> str:
        if self.activity_module_name is None:
            return self.name
        return self.activity_module_name

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ItemRecord":
        """Create a record from a dictionary.

        Both snake_case keys and the persistence layer's camelCase keys are
        understood.

        """
        return cls(
            id=data["id"],
            category=data.get("category"),
            name=data["name"],
            weight=data.get("weight"),
            max_grade=_first_present(data, "max_grade", "maxGrade"),
            extra_credit=_first_present(
                data, "extra_credit", "extraCredit", default=False
            ),
            activity_module_type=_first_present(
                data, "activity_module_type", "activityModuleType"
            ),
            activity_module_name=_first_present(
                data, "activity_module_name", "activityModuleName"
            ),
        )


# SetupItem ----------------------------------------------------------------------------


@dataclasses.dataclass
class SetupItem:
    """A node of the gradebook tree: either a category or a leaf item.

    Attributes
    ----------
    id : int
        Identity of the underlying category or item.
    type : ItemType
        The kind of node. Strings are converted on construction.
    name : str
        Display label.
    weight : float or None
        The specified percentage weight, or ``None`` meaning "distribute the
        remainder of the level evenly".
    max_grade : float or None
        Maximum score of a leaf; always ``None`` for a category.
    extra_credit : bool
        If True, the specified weight is bonus percentage on top of 100% and
        does not take part in its level's accounting.
    grade_items : list or None
        Children of a category, in order. Always a list (possibly empty) for a
        category, and ``None`` for a leaf.

    """

    id: int
    type: ItemType
    name: str
    weight: Optional[float] = None
    max_grade: Optional[float] = None
    extra_credit: bool = False
    grade_items: Optional[list] = None

    def __post_init__(self):
        self.type = ItemType(self.type)
        self.weight = _validate_weight(self.weight)
        self.extra_credit = bool(self.extra_credit)

        if self.is_category:
            self.max_grade = None
            self.grade_items = [] if self.grade_items is None else list(self.grade_items)
        elif self.grade_items:
            raise ValueError(f'Leaf "{self.name}" cannot contain grade items.')
        else:
            self.grade_items = None
            if self.max_grade is not None:
                self.max_grade = float(self.max_grade)

    @property
    def is_category(self) -> bool:
        return self.type is ItemType.CATEGORY

    def to_dict(self) -> dict:
        """Serialize the node and its subtree."""
        data = {
            "id": self.id,
            "type": self.type.value,
            "name": self.name,
            "weight": self.weight,
            "max_grade": self.max_grade,
            "extra_credit": self.extra_credit,
        }
        if self.is_category:
            data["grade_items"] = [child.to_dict() for child in self.grade_items]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """Create a node, and its subtree, from a dictionary."""
        children = data.get("grade_items")
        kwargs = {
            "id": data["id"],
            "type": data["type"],
            "name": data["name"],
            "weight": data.get("weight"),
            "max_grade": data.get("max_grade"),
            "extra_credit": data.get("extra_credit", False),
            "grade_items": (
                None if children is None else [cls.from_dict(c) for c in children]
            ),
        }
        kwargs.update(cls._extra_fields_from_dict(data))
        return cls(**kwargs)

    @classmethod
    def _extra_fields_from_dict(cls, data: Mapping[str, Any]) -> dict:
        return {}


@dataclasses.dataclass
class SetupItemWithCalculations(SetupItem):
    """A node of the gradebook tree annotated with its computed weights.

    Attributes
    ----------
    adjusted_weight : float or None
        The weight actually used at this level after the remainder has been
        distributed among auto-weighted siblings.
    auto_weighted_zero : bool
        True if this is an auto-weighted category without any regular
        (non-extra credit) weight-bearing descendants. Such a category is worth
        0% and does not take part in its level's distribution.
    overall_weight : float or None
        For a leaf, its share of the final course grade, in percent. Always
        ``None`` for a category.
    weight_explanation : str or None
        For a leaf, how `overall_weight` was computed, e.g.
        ``"Homework (50.00%) × HW 1 (40.00%) = 20.00%"``.

    """

    adjusted_weight: Optional[float] = None
    auto_weighted_zero: bool = False
    overall_weight: Optional[float] = None
    weight_explanation: Optional[str] = None

    @classmethod
    def from_setup_item(
        cls, item: SetupItem, grade_items: Optional[list] = None
    ) -> "SetupItemWithCalculations":
        """Copy the specified fields of `item`, leaving the calculations empty."""
        return cls(
            id=item.id,
            type=item.type,
            name=item.name,
            weight=item.weight,
            max_grade=item.max_grade,
            extra_credit=item.extra_credit,
            grade_items=grade_items,
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            {
                "adjusted_weight": self.adjusted_weight,
                "auto_weighted_zero": self.auto_weighted_zero,
                "overall_weight": self.overall_weight,
                "weight_explanation": self.weight_explanation,
            }
        )
        return data

    @classmethod
    def _extra_fields_from_dict(cls, data: Mapping[str, Any]) -> dict:
        return {
            "adjusted_weight": data.get("adjusted_weight"),
            "auto_weighted_zero": data.get("auto_weighted_zero", False),
            "overall_weight": data.get("overall_weight"),
            "weight_explanation": data.get("weight_explanation"),
        }


# Totals -------------------------------------------------------------------------------


@dataclasses.dataclass
class Totals:
    """Aggregate weights of a gradebook tree.

    Attributes
    ----------
    base_total : float
        Sum of the overall weights of all regular leaves. Equals 100 (up to
        floating point error) when every level of the tree is valid.
    extra_credit_total : float
        Total bonus percentage from extra credit leaves and categories.
    calculated_total : float
        Always ``100 + extra_credit_total``.
    extra_credit_items : list[SetupItemWithCalculations]
        The extra credit leaves that have an overall weight.
    extra_credit_categories : list[SetupItemWithCalculations]
        Copies of the extra credit categories, each with `overall_weight` set
        to the category's own chain-weighted contribution.
    total_max_grade : float
        Sum of the maximum grades of all leaves.

    """

    base_total: float
    extra_credit_total: float
    calculated_total: float
    extra_credit_items: list
    extra_credit_categories: list
    total_max_grade: float

    def to_dict(self) -> dict:
        return {
            "baseTotal": self.base_total,
            "extraCreditTotal": self.extra_credit_total,
            "calculatedTotal": self.calculated_total,
            "extraCreditItems": [i.to_dict() for i in self.extra_credit_items],
            "extraCreditCategories": [
                c.to_dict() for c in self.extra_credit_categories
            ],
            "totalMaxGrade": self.total_max_grade,
        }
