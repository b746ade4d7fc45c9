import numpy as np
import pandas as pd
import pytest

import gradeweights
import gradeweights.io.records

from pytest import raises  # pyright: ignore


def test_read_categories_from_dataframe():
    table = pd.DataFrame(
        {
            "id": [1, 2],
            "parent": [np.nan, 1],
            "name": ["Homework", "Labs"],
            "weight": [60, np.nan],
            "extra_credit": [False, True],
        }
    )

    first, second = gradeweights.io.records.read_categories(table)

    assert first.parent is None
    assert first.weight == 60
    assert second.parent == 1
    assert isinstance(second.parent, int)
    assert second.weight is None
    assert second.extra_credit


def test_read_items_from_dataframe_with_camel_case_columns():
    table = pd.DataFrame(
        {
            "id": [1, 2],
            "category": [np.nan, 1],
            "name": ["Final", "Quiz"],
            "weight": [50, np.nan],
            "maxGrade": [100, 10],
            "extraCredit": [False, False],
            "activityModuleType": [np.nan, "quiz"],
            "activityModuleName": [np.nan, "Quiz 1"],
        }
    )

    final, quiz = gradeweights.io.records.read_items(table)

    assert final.category is None
    assert final.node_type is gradeweights.ItemType.MANUAL_ITEM
    assert quiz.category == 1
    assert quiz.weight is None
    assert quiz.max_grade == 10
    assert quiz.display_name == "Quiz 1"


def test_read_from_csv(tmp_path):
    categories_path = tmp_path / "categories.csv"
    categories_path.write_text(
        "id,parent,name,weight,extra_credit,subcategories,items\n"
        "1,,Homework,50,False,2,1;2\n"
        "2,1,Labs,,False,,3\n"
    )
    items_path = tmp_path / "items.csv"
    items_path.write_text(
        "id,category,name,weight,max_grade,extra_credit\n"
        "1,1,HW 1,,10,False\n"
        "2,1,HW 2,,10,False\n"
        "3,2,Lab 1,,20,False\n"
        "4,,Final,50,100,False\n"
        "5,,Bonus,5,5,True\n"
    )

    categories = gradeweights.io.records.read_categories(categories_path)
    items = gradeweights.io.records.read_items(str(items_path))

    assert categories[0].subcategory_ids == (2,)
    assert categories[0].item_ids == (1, 2)
    assert categories[1].subcategory_ids == ()
    assert items[4].extra_credit

    setup = gradeweights.get_gradebook_setup_for_ui(categories, items)

    assert setup.totals.base_total == pytest.approx(100)
    assert setup.totals.extra_credit_total == pytest.approx(5)


def test_read_from_list_of_dicts():
    items = gradeweights.io.records.read_items(
        [
            {"id": 1, "category": None, "name": "Final", "weight": 100, "maxGrade": 50},
        ]
    )

    assert items == [
        gradeweights.ItemRecord(id=1, category=None, name="Final", weight=100, max_grade=50)
    ]


def test_read_rejects_invalid_weights():
    with raises(ValueError):
        gradeweights.io.records.read_items(
            pd.DataFrame({"id": [1], "category": [np.nan], "name": ["A"], "weight": [150]})
        )


def test_read_requires_a_name_column():
    with raises(KeyError):
        gradeweights.io.records.read_categories(pd.DataFrame({"id": [1]}))
