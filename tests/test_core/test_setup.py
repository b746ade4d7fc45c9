import pytest

import gradeweights
from gradeweights import CategoryRecord, ItemRecord

from pytest import raises  # pyright: ignore


def test_gradebook_setup_has_no_calculations(nested_records):
    setup = gradeweights.get_gradebook_setup(*nested_records, gradebook_id=3, course_id=8)

    assert setup.gradebook_id == 3
    assert setup.course_id == 8
    assert setup.exclude_empty_grades
    assert all(type(n) is gradeweights.SetupItem for n in setup.items)


def test_gradebook_setup_to_dict(nested_records):
    data = gradeweights.get_gradebook_setup(*nested_records, gradebook_id=3).to_dict()

    assert data["gradebook_id"] == 3
    assert data["course_id"] is None
    assert data["gradebook_setup"]["exclude_empty_grades"] is True
    assert [n["name"] for n in data["gradebook_setup"]["items"]] == ["Homework", "Exams"]
    assert "adjusted_weight" not in data["gradebook_setup"]["items"][0]


def test_gradebook_setup_for_ui(scenario_c_records):
    setup = gradeweights.get_gradebook_setup_for_ui(*scenario_c_records, gradebook_id=1)

    assert [n.name for n in setup.items] == ["test", "test2", "cat"]
    assert setup.totals.calculated_total == pytest.approx(105.25)
    assert setup.extra_credit_items == setup.totals.extra_credit_items


def test_gradebook_setup_for_ui_to_dict(scenario_c_records):
    data = gradeweights.get_gradebook_setup_for_ui(*scenario_c_records).to_dict()

    assert set(data["totals"]) == {
        "baseTotal",
        "extraCreditTotal",
        "calculatedTotal",
        "totalMaxGrade",
    }
    assert data["totals"]["totalMaxGrade"] == 500
    assert [i["name"] for i in data["extraCreditItems"]] == ["test5"]
    assert [c["name"] for c in data["extraCreditCategories"]] == ["cat"]
    assert data["gradebook_setup"]["items"][0]["adjusted_weight"] == 95


def test_totals_to_dict_uses_camel_case_keys(scenario_c_records):
    totals = gradeweights.get_gradebook_setup_for_ui(*scenario_c_records).totals

    assert set(totals.to_dict()) == {
        "baseTotal",
        "extraCreditTotal",
        "calculatedTotal",
        "extraCreditItems",
        "extraCreditCategories",
        "totalMaxGrade",
    }


# write-path guard =====================================================================


def test_validate_setup_accepts_valid_records(nested_records, scenario_c_records):
    gradeweights.validate_setup(*nested_records)
    gradeweights.validate_setup(*scenario_c_records)


def test_validate_setup_rejects_an_update_that_breaks_a_level(nested_records):
    categories, items = nested_records
    items = [
        ItemRecord(id=i.id, category=i.category, name=i.name, weight=i.weight)
        for i in items
    ]
    items[4].weight = 70

    with raises(gradeweights.WeightExceedsLimitError) as exc:
        gradeweights.validate_setup(categories, items, "Item update")

    assert exc.value.level == "course level > Exams"
    assert str(exc.value).startswith("Item update would result in total weight of 110.00%")


def test_validate_setup_rejects_a_creation_that_exceeds_100():
    categories = [CategoryRecord(id=1, parent=None, name="Homework", weight=80)]
    items = [
        ItemRecord(id=1, category=1, name="HW 1"),
        ItemRecord(id=2, category=None, name="Final", weight=30),
    ]

    with raises(gradeweights.WeightExceedsLimitError):
        gradeweights.validate_setup(categories, items, "Item creation")


def test_validate_setup_rejects_cyclic_categories():
    categories = [
        CategoryRecord(id=1, parent=2, name="A"),
        CategoryRecord(id=2, parent=1, name="B"),
    ]

    with raises(gradeweights.CyclicCategoryError):
        gradeweights.validate_setup(categories, [])
