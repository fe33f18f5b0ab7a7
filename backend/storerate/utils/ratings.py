from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Optional

MIN_SCORE = 1
MAX_SCORE = 5


def average_rating(total: Optional[int], count: Optional[int]) -> float:
    """Mean score rounded half-up to one decimal, 0.0 for an unrated store."""
    if not count:
        return 0.0
    mean = Decimal(int(total or 0)) / Decimal(int(count))
    return float(mean.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def rating_histogram(scores: Iterable[int]) -> Dict[int, int]:
    counts = {score: 0 for score in range(MIN_SCORE, MAX_SCORE + 1)}
    for score in scores:
        if score in counts:
            counts[score] += 1
    return counts
