import pytest

from pylist.datastructures.checks import check_bounds, check_empty, check_full, normalize_index
from pylist.errors import CapacityExceededError, EmptyError, OutOfBoundsError


def test_check_bounds_is_low_inclusive_high_exclusive():
    check_bounds(0, 0, 1)
    check_bounds(-3, -3, 3)
    with pytest.raises(OutOfBoundsError):
        check_bounds(1, 0, 1)
    with pytest.raises(OutOfBoundsError):
        check_bounds(-4, -3, 3)


def test_out_of_bounds_error_reports_range_and_is_an_index_error():
    with pytest.raises(IndexError) as excinfo:
        check_bounds(7, -2, 2)
    err = excinfo.value
    assert isinstance(err, OutOfBoundsError)
    assert (err.index, err.low, err.high) == (7, -2, 2)
    assert "[-2, 2)" in str(err)


def test_check_empty_and_check_full():
    check_empty(1)
    with pytest.raises(EmptyError):
        check_empty(0)

    check_full(5, 6)
    with pytest.raises(CapacityExceededError) as excinfo:
        check_full(6, 6)
    assert excinfo.value.ceiling == 6


def test_normalize_index_maps_negatives_from_the_end():
    assert normalize_index(0, 5, -5, 5) == 0
    assert normalize_index(4, 5, -5, 5) == 4
    assert normalize_index(-1, 5, -5, 5) == 4
    assert normalize_index(-5, 5, -5, 5) == 0


def test_normalize_index_accepts_one_past_end_when_range_allows():
    assert normalize_index(5, 5, -5, 6) == 5
    assert normalize_index(-6, 5, -6, 6) == -1


def test_normalize_index_rejects_outside_range():
    for raw in (5, -6, 100):
        with pytest.raises(OutOfBoundsError):
            normalize_index(raw, 5, -5, 5)
