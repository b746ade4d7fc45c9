import numpy as np
import pytest

import gradeweights
import gradeweights.reports


@pytest.fixture
def nested_setup(nested_records):
    return gradeweights.get_gradebook_setup_for_ui(*nested_records)


def test_weights_table_has_one_row_per_node_in_preorder(nested_setup):
    table = gradeweights.reports.weights_table(nested_setup.items)

    assert list(table["name"]) == [
        "Homework",
        "HW 1",
        "HW 2",
        "Labs",
        "Lab 1",
        "Exams",
        "Midterm",
        "Final",
    ]
    assert list(table["depth"]) == [0, 1, 1, 1, 2, 0, 1, 1]


def test_weights_table_paths(nested_setup):
    table = gradeweights.reports.weights_table(nested_setup.items).set_index("name")

    assert table.loc["Lab 1", "path"] == "Homework > Labs > Lab 1"
    assert table.loc["Exams", "path"] == "Exams"


def test_weights_table_missing_weights_are_nan(nested_setup):
    table = gradeweights.reports.weights_table(nested_setup.items).set_index("name")

    assert np.isnan(table.loc["HW 1", "weight"])
    assert table.loc["HW 1", "adjusted_weight"] == 25
    assert np.isnan(table.loc["Homework", "overall_weight"])
    assert np.isnan(table.loc["Homework", "max_grade"])
    assert table["overall_weight"].sum() == pytest.approx(100)


def test_weights_table_of_empty_tree():
    table = gradeweights.reports.weights_table([])
    assert len(table) == 0
    assert "overall_weight" in table.columns


def test_leaf_weights(nested_setup):
    s = gradeweights.reports.leaf_weights(nested_setup.items)

    assert list(s.index) == [
        "Homework > HW 1",
        "Homework > HW 2",
        "Homework > Labs > Lab 1",
        "Exams > Midterm",
        "Exams > Final",
    ]
    assert s.sum() == pytest.approx(100)
    assert s.name == "overall_weight"


def test_totals_frame(scenario_c_records):
    setup = gradeweights.get_gradebook_setup_for_ui(*scenario_c_records)

    frame = gradeweights.reports.totals_frame(setup.totals)

    assert frame.loc[0, "calculated_total"] == pytest.approx(105.25)
    assert frame.loc[0, "extra_credit_items"] == 1
    assert frame.loc[0, "extra_credit_categories"] == 1
