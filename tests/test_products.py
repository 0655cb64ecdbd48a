import math

import pytest

from judgesolvers.products import max_subsequence_product, run


@pytest.mark.parametrize("value", [-7, 0, 3])
def test_single_number(value):
    assert max_subsequence_product([value]) == value


def test_all_positive_takes_everything():
    numbers = [2, 3, 5, 7]
    assert max_subsequence_product(numbers) == math.prod(numbers)


def test_two_negatives_pair_up():
    numbers = [2, -3, -4]
    assert max_subsequence_product(numbers) == math.prod(numbers)


def test_at_least_largest_element():
    numbers = [-2, 5, -1, -6, 0, 4]
    assert max_subsequence_product(numbers) >= max(numbers)


def test_zero_separates_negatives():
    numbers = [-2, 0, -3]
    assert max_subsequence_product(numbers) == max(numbers)


def test_arbitrarily_large_products():
    numbers = [99999] * 50
    assert max_subsequence_product(numbers) == 99999 ** 50


def test_empty_rejected():
    with pytest.raises(ValueError):
        max_subsequence_product([])


def test_run_reads_cases():
    assert run("5 -999999\n-3 -999999\n") == "5\n-3\n"


def test_run_stops_on_empty_case():
    assert run("-999999\n4 -999999\n") == ""