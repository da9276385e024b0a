import math
from typing import Dict, Iterable, List, Tuple

from app.models import Character

BUCKET_SIZE = 1000


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def average_stats(characters: Iterable[Character]) -> List[Tuple[str, int]]:
    """Mean of each stat over the characters that have it, in first-seen order."""
    totals: Dict[str, List[int]] = {}
    for character in characters:
        for stat, value in character.stats.items():
            bucket = totals.setdefault(stat, [0, 0])
            bucket[0] += value
            bucket[1] += 1
    return [(stat, _round_half_up(total / count)) for stat, (total, count) in totals.items()]


def stat_distribution(characters: Iterable[Character]) -> List[Tuple[str, int]]:
    """Count characters per bucket of summed stats, e.g. "33000-33999"."""
    counts: Dict[int, int] = {}
    for character in characters:
        total = sum(character.stats.values())
        low = (total // BUCKET_SIZE) * BUCKET_SIZE
        counts[low] = counts.get(low, 0) + 1
    return [(f"{low}-{low + BUCKET_SIZE - 1}", counts[low]) for low in sorted(counts)]
