from priority_queue import greater_than, less_than


def test_greater_than_is_strict():
    assert greater_than(2, 1)
    assert not greater_than(1, 2)
    assert not greater_than(1, 1)


def test_less_than_is_strict():
    assert less_than(1, 2)
    assert not less_than(2, 1)
    assert not less_than(1, 1)


def test_natural_orderings_work_on_strings_and_tuples():
    assert greater_than("b", "a")
    assert less_than((1, "z"), (2, "a"))
