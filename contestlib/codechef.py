"""Starter contest problems: spelling a word, buying vases and exchanging coins."""

from __future__ import annotations

from typing import Iterable, Sequence

SILVER_PER_GOLD = 5
_SECOND_DEFAULT = 1000
_COMBINATION_DEFAULT = 2000


def has_cat(chars: Iterable[str]) -> bool:
    """Whether the letters 'c', 'a' and 't' are all among ``chars``."""
    return {"c", "a", "t"} <= set(chars)


def min_vase_cost(vases: Sequence[int]) -> int:
    """Cheapest of buying the two cheapest vases or one vase at half price beside its left neighbour."""
    if not vases:
        raise ValueError("at least one vase is needed")
    smallest = vases[0]
    second = _SECOND_DEFAULT
    combination = _COMBINATION_DEFAULT
    for left, price in zip(vases, vases[1:]):
        if price < smallest:
            smallest, second = price, smallest
        elif price < second:
            second = price
        combination = min(combination, price // 2 + left)
    return min(smallest + second, combination)


def can_exchange(gold: int, silver: int, gold_target: int, silver_target: int) -> bool:
    """Whether coins can be exchanged (one gold for five silver and back) to reach the targets."""
    if (
        gold_target > gold + silver // SILVER_PER_GOLD
        or silver_target > silver + gold * SILVER_PER_GOLD
    ):
        return False
    delta = (silver - silver_target) + (gold - gold_target) * SILVER_PER_GOLD
    return any(
        remaining == exchanged
        for exchanged, remaining in enumerate(range(delta, -1, -SILVER_PER_GOLD))
    )