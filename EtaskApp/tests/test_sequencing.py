from types import SimpleNamespace

import pytest
from hypothesis import given, strategies as st

from EtaskApp.core.choices import ActivitiesSorting
from EtaskApp.domain.sequencing import (
    module_display_name,
    number_activities,
    short_title,
    sort_by_sections,
    sort_grade_items,
)


def item(id, activity_id=None, module="assign"):
    return SimpleNamespace(id=id, activity_id=activity_id or id * 10, module=module)


@pytest.fixture
def items():
    return [item(2), item(5), item(1), item(4)]


def ids(values):
    return [value.id for value in values]


def test_latest_orders_by_id_descending(items):
    assert ids(sort_grade_items(items, ActivitiesSorting.LATEST)) == [5, 4, 2, 1]


def test_oldest_orders_by_id_ascending(items):
    assert ids(sort_grade_items(items, ActivitiesSorting.OLDEST)) == [1, 2, 4, 5]


def test_unknown_mode_acts_as_latest(items):
    assert ids(sort_grade_items(items, "alphabetical")) == [5, 4, 2, 1]


def test_inherit_follows_section_sequence(items):
    sequence = [[40, 10], [], [50, 20]]
    assert ids(sort_grade_items(items, ActivitiesSorting.INHERIT, sequence)) == [4, 1, 5, 2]


def test_inherit_appends_activities_missing_from_sequence(items):
    assert ids(sort_grade_items(items, ActivitiesSorting.INHERIT, [[20]])) == [2, 5, 1, 4]


def test_inherit_keeps_items_of_one_activity_together():
    values = [item(1, activity_id=7), item(2, activity_id=8), item(3, activity_id=7)]
    assert ids(sort_by_sections(values, [[8, 7]])) == [2, 1, 3]


def test_inherit_ignores_repeated_activity_ids():
    values = [item(1, activity_id=7), item(2, activity_id=8)]
    assert ids(sort_by_sections(values, [[7], [7, 8]])) == [1, 2]


def test_number_activities_counts_per_module():
    values = [
        item(3, activity_id=30, module="quiz"),
        item(1, activity_id=10, module="assign"),
        item(2, activity_id=20, module="assign"),
        item(4, activity_id=20, module="assign"),
    ]
    assert number_activities(values) == {10: 1, 20: 2, 30: 1}


def test_short_title():
    assert short_title("assign", 1) == "A1"
    assert short_title("quiz", 12) == "Q12"
    assert short_title("", 3) == "3"



def test_module_display_name():
    assert module_display_name("assign") == "Assignment"
    assert module_display_name("quiz") == "Quiz"
    assert module_display_name("customcert") == "Customcert"


@given(
    id_list=st.lists(st.integers(min_value=1, max_value=10_000), unique=True, max_size=30),
    mode=st.sampled_from(ActivitiesSorting.values),
    data=st.data(),
)
def test_sorting_is_a_deterministic_permutation(id_list, mode, data):
    values = [item(value) for value in id_list]
    activity_ids = [value.activity_id for value in values]
    sequence = [data.draw(st.permutations(activity_ids))]
    shuffled = data.draw(st.permutations(values))

    first = sort_grade_items(values, mode, sequence)
    assert sorted(ids(first)) == sorted(id_list)
    assert ids(sort_grade_items(values, mode, sequence)) == ids(first)
    if mode != ActivitiesSorting.INHERIT:
        assert ids(sort_grade_items(shuffled, mode, sequence)) == ids(first)
    else:
        assert [value.activity_id for value in first] == sequence[0]
