import gradeweights


def item(id, name, weight=None, extra_credit=False, max_grade=100, type="manual_item"):
    """Shorthand for a leaf SetupItem."""
    return gradeweights.SetupItem(
        id=id,
        type=type,
        name=name,
        weight=weight,
        max_grade=max_grade,
        extra_credit=extra_credit,
    )


def category(id, name, weight=None, grade_items=(), extra_credit=False):
    """Shorthand for a category SetupItem."""
    return gradeweights.SetupItem(
        id=id,
        type="category",
        name=name,
        weight=weight,
        extra_credit=extra_credit,
        grade_items=list(grade_items),
    )


def compute(tree):
    """Run the adjusted and overall weight calculations on a tree."""
    adjusted = gradeweights.calculate_adjusted_weights(tree)
    totals = gradeweights.calculate_overall_weights(adjusted)
    return adjusted, totals


def find(tree, name):
    """Find the first node in the tree with the given name."""
    for node in tree:
        if node.name == name:
            return node
        if node.is_category:
            found = find(node.grade_items, name)
            if found is not None:
                return found
    return None


def assert_tree_is_sound(tree):
    for node in tree:
        if node.is_category:
            assert isinstance(node.grade_items, list)
            assert node.max_grade is None
            if isinstance(node, gradeweights.SetupItemWithCalculations):
                assert node.overall_weight is None
                assert node.weight_explanation is None
            assert_tree_is_sound(node.grade_items)
        else:
            assert node.grade_items is None
