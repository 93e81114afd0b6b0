import pytest

from algobox.searching import binary_search, jump_search


def test_binary_search_documented_example():
    assert binary_search([1, 3, 5, 7, 9], 5) == 2


def test_jump_search_documented_example():
    assert jump_search([1, 3, 5, 7, 9], 5) == 2


@pytest.mark.parametrize("n", [1, 2, 3, 4, 9, 10, 17, 100])
def test_finds_every_element(n):
    values = list(range(0, 3 * n, 3))
    for index, target in enumerate(values):
        assert binary_search(values, target) == index
        assert jump_search(values, target) == index


@pytest.mark.parametrize("target", [-1, 1, 4, 1000])
def test_missing_target_returns_none(target):
    values = list(range(0, 30, 3))
    assert binary_search(values, target) is None
    assert jump_search(values, target) is None


def test_empty_sequence():
    assert binary_search([], 5) is None
    assert jump_search([], 5) is None


def test_duplicates_return_matching_index():
    values = [1, 2, 2, 2, 3, 4, 4, 9]
    for target in set(values):
        binary_index = binary_search(values, target)
        jump_index = jump_search(values, target)
        assert values[binary_index] == target
        assert values[jump_index] == target