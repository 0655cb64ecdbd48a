from fractions import Fraction

import pytest

from judgesolvers import primes as pr


def _is_prime(n):
    return n > 1 and all(n % d for d in range(2, int(n ** 0.5) + 1))


def test_prime_sieve_matches_trial_division():
    flags = pr.prime_sieve(200)
    assert len(flags) == 200
    assert [i for i, f in enumerate(flags) if f] == [i for i in range(200) if _is_prime(i)]


def test_prime_sieve_negative():
    with pytest.raises(ValueError):
        pr.prime_sieve(-1)


def test_determinate_runs_properties():
    runs = pr.determinate_prime_runs(1000, 1)
    assert runs
    for run in runs:
        assert len(run) >= 3
        assert all(_is_prime(p) for p in run)
        gaps = {b - a for a, b in zip(run, run[1:])}
        assert len(gaps) == 1
    assert runs == pr.determinate_prime_runs(1, 1000)


def test_lcm_last_digit():
    assert pr.lcm_last_digit(1) == 1
    for n in (2, 10, 100, 1000):
        assert 1 <= pr.lcm_last_digit(n) <= 9


@pytest.mark.parametrize("p", [2, 3, 97, 1299709])
def test_prime_gap_of_prime_is_zero(p):
    assert pr.prime_gap(p) == 0


def test_prime_gap_composite():
    gap = pr.prime_gap(25)
    assert gap > 0
    assert all(pr.prime_gap(n) == gap for n in range(24, 29))


def test_prime_gap_out_of_range():
    with pytest.raises(ValueError):
        pr.prime_gap(10**8)


@pytest.mark.parametrize("n", [8, 20, 42, 1000, 999998])
def test_goldbach(n):
    a, b = pr.goldbach(n)
    assert a + b == n
    assert a <= b
    assert _is_prime(a) and _is_prime(b)


def test_goldbach_none():
    assert pr.goldbach(1) is None


@pytest.mark.parametrize("base,p", [(2, 10), (3, 5), (7, 3), (10, 6)])
def test_largest_perfect_power(base, p):
    assert pr.largest_perfect_power(base ** p) >= p
    assert pr.largest_perfect_power(-(base ** p)) % 2 == 1


def test_largest_perfect_power_non_power():
    assert pr.largest_perfect_power(17) == 1


@pytest.mark.parametrize("text", ["0.2...", "0.20...", "0.474612399...", "0.123..."])
def test_dead_fraction_matches_some_reading(text):
    num, den = pr.dead_fraction(text)
    assert Fraction(num, den).denominator == den
    decimals = text[2:-3]
    readings = set()
    for i in range(len(decimals)):
        other, rep = decimals[:i], decimals[i:]
        scale = 10 ** len(other)
        value = Fraction(int(other or "0"), scale)
        value += Fraction(int(rep), scale * (10 ** len(rep) - 1))
        readings.add(value)
    assert Fraction(num, den) in readings
    assert den == min(r.denominator for r in readings)


def test_dead_fraction_pinned():
    assert pr.dead_fraction("0.2...") == (2, 9)


def test_run_goldbach_format():
    out = pr.run("543", "8\n0\n")
    assert out.startswith("8 = ")
    left, right = out.strip().split(" = ")[1].split(" + ")
    assert int(left) + int(right) == 8


def test_run_unknown():
    with pytest.raises(ValueError):
        pr.run("1", "5")