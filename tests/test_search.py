import pytest
from hypothesis import given, strategies as st

from algokit.search import (
    can_finish,
    find_min,
    find_peak_element,
    min_eating_speed,
    search_rotated,
)

small_ints = st.integers(min_value=-100, max_value=100)


@st.composite
def rotated_distinct(draw):
    values = sorted(draw(st.lists(small_ints, min_size=1, max_size=30, unique=True)))
    k = draw(st.integers(0, len(values) - 1))
    return values[k:] + values[:k]


@st.composite
def rotated_with_duplicates(draw):
    values = sorted(draw(st.lists(st.integers(-10, 10), max_size=30)))
    k = draw(st.integers(0, max(len(values) - 1, 0)))
    return values[k:] + values[:k]


@given(rotated_distinct())
def test_find_min_rotated(nums):
    assert find_min(nums) == min(nums)


@given(small_ints)
def test_find_min_single(value):
    assert find_min([value]) == value


def test_find_min_empty_raises():
    with pytest.raises(ValueError):
        find_min([])


@given(st.lists(small_ints, min_size=1, max_size=30, unique=True))
def test_find_peak_element_is_a_peak(nums):
    i = find_peak_element(nums)
    assert 0 <= i < len(nums)
    if i > 0:
        assert nums[i] > nums[i - 1]
    if i + 1 < len(nums):
        assert nums[i] > nums[i + 1]


@given(st.lists(small_ints, min_size=1, max_size=30, unique=True))
def test_find_peak_element_strictly_increasing(nums):
    ordered = sorted(nums)
    assert find_peak_element(ordered) == len(ordered) - 1


def test_find_peak_element_empty_raises():
    with pytest.raises(ValueError):
        find_peak_element([])


@given(rotated_with_duplicates(), st.integers(-12, 12))
def test_search_rotated_matches_membership(nums, target):
    assert search_rotated(nums, target) == (target in nums)


@given(rotated_with_duplicates())
def test_search_rotated_finds_every_member(nums):
    assert all(search_rotated(nums, value) for value in nums)


@given(small_ints)
def test_search_rotated_empty(target):
    assert search_rotated([], target) is False


def test_min_eating_speed_worked_example():
    assert min_eating_speed([3, 6, 7, 11], 8) == 4


@given(st.data())
def test_min_eating_speed_is_minimal(data):
    piles = data.draw(st.lists(st.integers(1, 1000), min_size=1, max_size=15))
    h = data.draw(st.integers(len(piles), len(piles) * 50))
    speed = min_eating_speed(piles, h)
    assert 1 <= speed <= max(piles)
    assert can_finish(piles, h, speed)
    if speed > 1:
        assert not can_finish(piles, h, speed - 1)


@given(st.lists(st.integers(1, 1000), min_size=2, max_size=15))
def test_min_eating_speed_too_few_hours_gives_largest_pile(piles):
    assert min_eating_speed(piles, len(piles) - 1) == max(piles)


def test_min_eating_speed_empty_raises():
    with pytest.raises(ValueError):
        min_eating_speed([], 5)


@given(st.lists(st.integers(1, 1000), min_size=1, max_size=15))
def test_can_finish_at_largest_pile(piles):
    fastest = max(piles)
    assert can_finish(piles, len(piles), fastest)
    assert not can_finish(piles, len(piles) - 1, fastest)


@given(st.lists(st.integers(1, 1000), min_size=1, max_size=15))
def test_can_finish_one_per_hour(piles):
    assert can_finish(piles, sum(piles), 1)
    assert not can_finish(piles, sum(piles) - 1, 1)


def test_can_finish_rejects_zero_speed():
    with pytest.raises(ValueError):
        can_finish([1, 2], 3, 0)