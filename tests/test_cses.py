import random

import pytest

from contestlib.cses import (
    assign_apartments,
    beautiful_permutation,
    concert_tickets,
    dice_combinations,
    distinct_numbers,
    ferris_wheel,
    find_hidden_number,
    increasing_array,
    longest_repetition,
    missing_number,
    movie_festival,
    number_spiral,
    restaurant_customers,
    weird_algorithm,
)

MOD = 1000000007


def test_dice_combinations_sample():
    assert dice_combinations(3) == 4


def test_dice_combinations_sliding_window():
    for n in range(7, 200):
        expected = (2 * dice_combinations(n - 1) - dice_combinations(n - 7)) % MOD
        assert dice_combinations(n) == expected


def test_dice_combinations_is_reduced():
    assert 0 <= dice_combinations(100_000) < MOD


def test_dice_combinations_negative():
    with pytest.raises(ValueError):
        dice_combinations(-1)


@pytest.mark.parametrize("hidden", [1, 2, 123456789, 999999999, 1000000000])
def test_find_hidden_number(hidden):
    calls = []

    def ask(guess):
        calls.append(guess)
        return hidden > guess

    assert find_hidden_number(ask) == hidden
    assert len(calls) <= 31
    assert all(1 <= guess <= 1000000000 for guess in calls)


def test_weird_algorithm_sample():
    assert weird_algorithm(3) == [3, 10, 5, 16, 8, 4, 2, 1]


@pytest.mark.parametrize("start", range(1, 60))
def test_weird_algorithm_steps(start):
    seq = weird_algorithm(start)
    assert seq[0] == start
    assert seq[-1] == 1
    assert 1 not in seq[:-1]
    for current, following in zip(seq, seq[1:]):
        if current % 2:
            assert following == 3 * current + 1
        else:
            assert following * 2 == current


def test_weird_algorithm_rejects_zero():
    with pytest.raises(ValueError):
        weird_algorithm(0)


@pytest.mark.parametrize("runs", [[1], [3, 1, 2], [2, 5, 5], [7], [1, 1, 1, 4]])
def test_longest_repetition(runs):
    letters = "ACGT"
    s = "".join(letters[i % 4] * length for i, length in enumerate(runs))
    assert longest_repetition(s) == max(runs)


@pytest.mark.parametrize("n", [2, 3])
def test_beautiful_permutation_none(n):
    assert beautiful_permutation(n) is None


@pytest.mark.parametrize("n", [1, *range(4, 30)])
def test_beautiful_permutation_valid(n):
    perm = beautiful_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(perm, perm[1:]))


def test_number_spiral_block_holds_first_squares():
    k = 9
    values = [number_spiral(y, x) for y in range(1, k + 1) for x in range(1, k + 1)]
    assert sorted(values) == list(range(1, k * k + 1))


def test_number_spiral_consecutive_values_are_adjacent():
    k = 9
    where = {
        number_spiral(y, x): (y, x) for y in range(1, k + 1) for x in range(1, k + 1)
    }
    for value in range(1, k * k):
        (y1, x1), (y2, x2) = where[value], where[value + 1]
        assert abs(y1 - y2) + abs(x1 - x2) == 1


@pytest.mark.parametrize("n,missing", [(2, 1), (2, 2), (10, 7), (1000, 513)])
def test_missing_number(n, missing):
    numbers = [v for v in range(1, n + 1) if v != missing]
    random.Random(n).shuffle(numbers)
    assert missing_number(n, numbers) == missing


def test_increasing_array_already_sorted():
    assert increasing_array([1, 2, 2, 5, 9]) == 0


def test_increasing_array_decreasing():
    values = list(range(10, 0, -1))
    assert increasing_array(values) == sum(10 - v for v in values)


def test_assign_apartments_generous_tolerance():
    applicants = [5, 80, 33, 12]
    apartments = [100, 1, 7]
    assert assign_apartments(applicants, apartments, 10**9) == 3


def test_assign_apartments_no_fit():
    assert assign_apartments([1, 1, 1], [100, 200], 5) == 0


def test_assign_apartments_identical():
    sizes = [4, 9, 1, 7, 7]
    assert assign_apartments(sizes, list(reversed(sizes)), 0) == len(sizes)


def test_assign_apartments_bounded():
    rng = random.Random(3)
    for _ in range(50):
        a = [rng.randint(1, 50) for _ in range(rng.randint(0, 10))]
        b = [rng.randint(1, 50) for _ in range(rng.randint(0, 10))]
        assert 0 <= assign_apartments(a, b, rng.randint(0, 5)) <= min(len(a), len(b))


def test_ferris_wheel_heavy_children_ride_alone():
    weights = [6, 7, 8, 9, 10]
    assert ferris_wheel(weights, 10) == len(weights)


def test_ferris_wheel_light_children_pair_up():
    weights = [1] * 6
    assert ferris_wheel(weights, 10) == len(weights) // 2


def test_ferris_wheel_bounds():
    rng = random.Random(5)
    for _ in range(50):
        weights = [rng.randint(1, 10) for _ in range(rng.randint(1, 12))]
        result = ferris_wheel(weights, 10)
        assert (len(weights) + 1) // 2 <= result <= len(weights)


def test_ferris_wheel_empty():
    assert ferris_wheel([], 10) == 0


def test_concert_tickets_sample():
    assert concert_tickets([5, 3, 7, 8, 5], [4, 8, 3]) == [3, 8, -1]


def test_concert_tickets_invariants():
    rng = random.Random(11)
    prices = [rng.randint(1, 30) for _ in range(15)]
    offers = [rng.randint(1, 30) for _ in range(20)]
    sold = concert_tickets(prices, offers)
    assert len(sold) == len(offers)
    remaining = list(prices)
    for offer, price in zip(offers, sold):
        if price != -1:
            assert price <= offer
            remaining.remove(price)
        else:
            assert all(p > offer for p in remaining)


def test_restaurant_disjoint():
    assert restaurant_customers([(1, 2), (3, 4), (5, 6)]) == 1


def test_restaurant_nested():
    intervals = [(i, 100 - i) for i in range(1, 8)]
    assert restaurant_customers(intervals) == len(intervals)


def test_restaurant_leaving_before_arriving():
    assert restaurant_customers([(1, 2), (2, 3)]) == 1


def test_distinct_numbers():
    assert distinct_numbers(list(range(5)) * 3) == 5
    assert distinct_numbers([]) == 0


def test_movie_festival_disjoint():
    movies = [(i * 10, i * 10 + 5) for i in range(6)]
    assert movie_festival(movies) == len(movies)


def test_movie_festival_all_overlap():
    movies = [(i, 100 + i) for i in range(6)]
    assert movie_festival(movies) == 1


def test_movie_festival_back_to_back():
    movies = [(2, 4), (0, 2), (4, 6)]
    assert movie_festival(movies) == len(movies)