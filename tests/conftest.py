import pytest

import gradeweights


@pytest.fixture
def scenario_c_records():
    """Root items "test" (auto) and "test2" (5%), plus an extra credit category."""
    categories = [
        gradeweights.CategoryRecord(
            id=5, parent=None, name="cat", weight=5, extra_credit=True
        ),
    ]
    items = [
        gradeweights.ItemRecord(id=7, category=None, name="test", max_grade=100),
        gradeweights.ItemRecord(
            id=20, category=None, name="test2", weight=5, max_grade=100
        ),
        gradeweights.ItemRecord(id=21, category=5, name="extra", max_grade=100),
        gradeweights.ItemRecord(id=23, category=5, name="test4", max_grade=100),
        gradeweights.ItemRecord(
            id=24, category=5, name="test5", weight=5, max_grade=100, extra_credit=True
        ),
    ]
    return categories, items


@pytest.fixture
def nested_records():
    """A course with a weighted category containing a nested category."""
    categories = [
        gradeweights.CategoryRecord(id=1, parent=None, name="Homework", weight=60),
        gradeweights.CategoryRecord(id=2, parent=None, name="Exams", weight=40),
        gradeweights.CategoryRecord(id=3, parent=1, name="Labs", weight=50),
    ]
    items = [
        gradeweights.ItemRecord(id=1, category=1, name="HW 1", max_grade=10),
        gradeweights.ItemRecord(id=2, category=1, name="HW 2", max_grade=10),
        gradeweights.ItemRecord(id=3, category=3, name="Lab 1", max_grade=20),
        gradeweights.ItemRecord(id=4, category=2, name="Midterm", weight=40, max_grade=50),
        gradeweights.ItemRecord(id=5, category=2, name="Final", weight=60, max_grade=100),
    ]
    return categories, items
