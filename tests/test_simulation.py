import math

import pytest

from judgesolvers.simulation import (
    cargo_time,
    copy_books,
    exact_sum,
    exhibition_shares,
    run,
    set_stack,
    surviving_cows,
)


def test_cargo_nothing_to_move():
    assert cargo_time(1, 1, [[], []]) == 0


def test_cargo_single_delivery():
    assert cargo_time(1, 1, [[2], []]) == 4


def test_cargo_bad_destination():
    with pytest.raises(ValueError):
        cargo_time(1, 1, [[5], []])


def test_cargo_more_cargo_takes_longer():
    one = cargo_time(2, 2, [[2], []])
    two = cargo_time(2, 2, [[2, 2], []])
    assert two > one


def test_identical_cows_all_survive():
    cows = [[1, 2], [1, 2], [1, 2]]
    assert surviving_cows(cows) == (len(cows), 0)


def test_lonely_cow_is_eaten_first_day():
    assert surviving_cows([[5]]) == (0, 1)


def test_surviving_cows_bounds():
    cows = [[3, 1], [2, 2], [4]]
    alive, day = surviving_cows(cows)
    assert 0 <= alive <= len(cows)
    assert day >= 0


def test_set_stack_one_size_per_operation():
    ops = ["PUSH", "DUP", "ADD", "PUSH", "ADD", "DUP", "UNION"]
    assert len(set_stack(ops)) == len(ops)


def test_set_stack_dup_keeps_size():
    sizes = set_stack(["PUSH", "PUSH", "ADD", "DUP"])
    assert sizes[-1] == sizes[-2]


def test_set_stack_self_intersection_and_union():
    base = ["PUSH", "PUSH", "ADD", "PUSH", "ADD"]
    before = set_stack(base)[-1]
    assert set_stack(base + ["DUP", "INTERSECT"])[-1] == before
    assert set_stack(base + ["DUP", "UNION"])[-1] == before


def test_set_stack_errors():
    with pytest.raises(ValueError):
        set_stack(["DUP"])
    with pytest.raises(ValueError):
        set_stack(["PUSH", "UNION"])
    with pytest.raises(ValueError):
        set_stack(["PUSH", "PUSH", "XOR"])


def test_exhibition_shares_sum_to_hundred():
    shares = exhibition_shares([[1, 2, 3], [3, 4], [5]])
    assert sum(shares) == pytest.approx(100.0)


def test_exhibition_symmetric_friends_share_equally():
    shares = exhibition_shares([[1, 2], [2, 3]])
    assert shares[0] == pytest.approx(shares[1])


def test_exhibition_duplicates_ignored():
    assert exhibition_shares([[1, 1, 1], [2]]) == exhibition_shares([[1], [2]])


def test_exhibition_no_unique_stamps():
    shares = list(exhibition_shares([[7], [7]]))
    assert len(shares) == 2
    assert math.isnan(shares[0])
    assert math.isnan(shares[1])


def test_exact_sum_equal_books():
    assert exact_sum([40, 40], 80) == (40, 40)


def test_exact_sum_invariants():
    prices = [10, 2, 8, 6, 4]
    a, b = exact_sum(prices, 10)
    assert a + b <= 10
    assert a <= b
    assert a in prices and b in prices


def test_exact_sum_no_pair():
    assert exact_sum([50, 60], 10) is None


def test_copy_books_sample():
    pages = [100, 200, 300, 400, 500, 600, 700, 800, 900]
    assert copy_books(pages, 3) == [[100, 200, 300, 400, 500], [600, 700], [800, 900]]


@pytest.mark.parametrize("scribers", [1, 2, 4, 5])
def test_copy_books_partition(scribers):
    pages = [5, 1, 9, 3, 7]
    groups = copy_books(pages, scribers)
    assert len(groups) == scribers
    assert [p for g in groups for p in g] == pages


def test_copy_books_too_many_scribers():
    with pytest.raises(ValueError):
        copy_books([1, 2], 3)


def test_run_set_stack_matches_function():
    ops = ["PUSH", "DUP", "ADD"]
    expected = "".join(f"{s}\n" for s in set_stack(ops)) + "***\n"
    assert run("12096", "1\n3\nPUSH\nDUP\nADD\n") == expected


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run("1", "")