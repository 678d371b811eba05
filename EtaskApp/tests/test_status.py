from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from EtaskApp.core.choices import GradeStatus
from EtaskApp.domain.status import classify_status


@pytest.mark.parametrize("grade, grade_pass, completed, expected", [
    (None, None, False, GradeStatus.NONE),
    (None, None, True, GradeStatus.COMPLETED),
    (None, 50, False, GradeStatus.NONE),
    (None, 50, True, GradeStatus.COMPLETED),
    (60, None, False, GradeStatus.NONE),
    (60, None, True, GradeStatus.NONE),
    (60, 50, False, GradeStatus.PASSED),
    (60, 50, True, GradeStatus.PASSED),
    (40, 50, False, GradeStatus.FAILED),
    (40, 50, True, GradeStatus.FAILED),
])
def test_classify_status_cases(grade, grade_pass, completed, expected):
    assert classify_status(grade, grade_pass, completed) == expected


def test_grade_equal_to_grade_pass_passes():
    assert classify_status(Decimal("50.00000"), Decimal("50"), False) == GradeStatus.PASSED


def test_zero_grade_counts_as_missing():
    assert classify_status(Decimal("0"), 50, True) == GradeStatus.COMPLETED
    assert classify_status(0, 50, False) == GradeStatus.NONE


def test_zero_grade_pass_counts_as_not_set():
    assert classify_status(80, Decimal("0"), False) == GradeStatus.NONE


def test_fractional_grade_just_below_grade_pass_fails():
    assert classify_status(Decimal("49.5"), 50, True) == GradeStatus.FAILED


@given(
    grade=st.one_of(st.none(), st.decimals(min_value=0, max_value=1000, places=2)),
    grade_pass=st.one_of(st.none(), st.integers(min_value=0, max_value=1000)),
    completed=st.booleans(),
)
def test_classify_status_is_total(grade, grade_pass, completed):
    status = classify_status(grade, grade_pass, completed)
    assert status in GradeStatus.values
    if grade and grade_pass:
        assert status in (GradeStatus.PASSED, GradeStatus.FAILED)
