import math

import pytest

from judgesolvers import arithmetic as ar


def test_double_displacement_linear():
    assert ar.double_displacement(0, 7) == 0
    assert ar.double_displacement(3, 4) == ar.double_displacement(4, 3)
    assert ar.double_displacement(-2, 5) == -ar.double_displacement(2, 5)


@pytest.mark.parametrize("a,b", [(1, 2), (5, 5), (9, -3)])
def test_compare_is_antisymmetric(a, b):
    flip = {"<": ">", ">": "<", "=": "="}
    assert ar.compare(b, a) == flip[ar.compare(a, b)]


def test_compare_equal():
    assert ar.compare(4, 4) == "="


@pytest.mark.parametrize("n", [-1000, -7, 0, 1, 637, 1000])
def test_automatic_answer_is_digit(n):
    assert 0 <= ar.automatic_answer(n) <= 9


def test_back_to_the_past():
    assert ar.back_to_the_past() == "May 29, 2013 Wednesday"


def test_gcd_sum_small_and_increasing():
    assert ar.gcd_sum(1) == 0
    values = [ar.gcd_sum(n) for n in range(1, 20)]
    assert values == sorted(values)


@pytest.mark.parametrize("v", [0, 1, 15, 16, 17, 10**18 + 3])
def test_isqrt_bounds(v):
    r = ar.isqrt(v)
    assert r * r <= v < (r + 1) * (r + 1)


def test_isqrt_negative():
    with pytest.raises(ValueError):
        ar.isqrt(-1)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 10**15])
def test_warrior_rows_bounds(n):
    r = ar.warrior_rows(n)
    assert r * (r + 1) // 2 <= n < (r + 1) * (r + 2) // 2


@pytest.mark.parametrize("n", [1, 5, 7, 100, 12345])
def test_smallest_factor_number(n):
    result = ar.smallest_factor_number(n)
    assert result >= n
    rest = result
    for p in (2, 3):
        while rest % p == 0:
            rest //= p
    assert rest == 1


def test_smallest_factor_number_exact_form():
    assert ar.smallest_factor_number(72) == 72


def test_anagrammatic_prime_none_left():
    assert ar.anagrammatic_prime_after(991) == 0


def test_chessboard_distance():
    assert ar.chessboard_distance(1) == 0.0
    assert ar.chessboard_distance(2) == pytest.approx(4.0)
    assert ar.chessboard_distance(5) > 25


def test_ant_position_on_square_edges():
    for k in range(1, 10):
        x, y = ar.ant_position(k * k)
        assert k in (x, y)
        assert 1 in (x, y)
    positions = {ar.ant_position(n) for n in range(1, 50)}
    assert len(positions) == 49


def test_snail_outcomes():
    success, _ = ar.snail(6, 3, 1, 10)
    assert success
    failed, day = ar.snail(10, 2, 1, 50)
    assert not failed
    assert day >= 1


def test_homework():
    assert ar.homework_correct("1+2=3")
    assert not ar.homework_correct("1-2=?")
    assert ar.homework_correct("5 - 7 = -2")
    with pytest.raises(ValueError):
        ar.homework_correct("garbage")


def test_is_jolly():
    assert ar.is_jolly([1, 4, 2, 3])
    assert not ar.is_jolly([1, 4, 2, -1, 6])
    assert ar.is_jolly([5])


def test_cycle_length():
    assert ar.cycle_length(1) == 1
    for n in range(2, 50):
        nxt = n // 2 if n % 2 == 0 else 3 * n + 1
        assert ar.cycle_length(n) == ar.cycle_length(nxt) + 1
    with pytest.raises(ValueError):
        ar.cycle_length(0)


def test_max_cycle_length_symmetric():
    assert ar.max_cycle_length(1, 10) == ar.max_cycle_length(10, 1)
    assert ar.max_cycle_length(7, 7) == ar.cycle_length(7)


def test_modular_fibonacci_recurrence():
    for m in (1, 5, 20):
        mod = 2 ** m
        for n in range(2, 40):
            expected = (ar.modular_fibonacci(n - 1, m) + ar.modular_fibonacci(n - 2, m)) % mod
            assert ar.modular_fibonacci(n, m) == expected


def test_run_relational():
    assert ar.run("11172", "3\n1 2\n2 1\n3 3\n") == "<\n>\n=\n"


def test_run_jolly():
    assert ar.run("10038", "4 1 4 2 3\n5 1 4 2 -1 6\n") == "Jolly\nNot jolly\n"


def test_run_unknown():
    with pytest.raises(ValueError):
        ar.run("0", "")


def test_run_snail_format():
    out = ar.run("573", "6 3 1 10\n0 0 0 0\n")
    assert out.startswith("success on day ")


def test_run_3n1_echoes_input():
    out = ar.run("100", "1 10\n").split()
    assert out[:2] == ["1", "10"]
    assert int(out[2]) == ar.max_cycle_length(1, 10)