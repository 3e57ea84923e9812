"""
Unit tests for src/services/pagination.py
"""
import pytest

from src.services.pagination import PaginationState, page_slice, paginate


def _assert_invariant(state: PaginationState):
    assert state.skip == state.size * (state.page - 1)
    assert 0 <= state.take <= state.size
    assert state.take == 0 or state.skip + state.take <= state.total


def test_seven_items_first_page():
    state = paginate(7, page=1, size=5)
    assert (state.skip, state.take) == (0, 5)
    _assert_invariant(state)


def test_seven_items_second_page():
    state = paginate(7, page=2, size=5)
    assert (state.skip, state.take) == (5, 2)
    _assert_invariant(state)


def test_page_past_end_is_empty_not_error():
    state = paginate(7, page=3, size=5)
    assert state.skip == 10
    assert state.take == 0
    assert page_slice(list(range(7)), state) == []


def test_page_below_one_clamps():
    state = paginate(7, page=0, size=5)
    assert state.page == 1
    assert state.skip == 0


def test_empty_total():
    state = paginate(0)
    assert state.take == 0
    assert state.total_pages == 1
    assert not state.has_next
    assert not state.has_previous


def test_default_size_is_five():
    assert paginate(12).size == 5


def test_total_pages_and_navigation_flags():
    state = paginate(11, page=2, size=5)
    assert state.total_pages == 3
    assert state.has_previous
    assert state.has_next
    assert not paginate(11, page=3, size=5).has_next


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        paginate(5, size=0)


@pytest.mark.parametrize("total", [0, 1, 4, 5, 6, 10, 23])
@pytest.mark.parametrize("page", [1, 2, 3, 5])
def test_invariant_holds(total, page):
    _assert_invariant(paginate(total, page=page, size=5))


def test_page_slice():
    items = list("abcdefg")
    assert page_slice(items, paginate(len(items), 2, 5)) == ["f", "g"]
