"""
Review Aggregation

Recomputes a healer's rating inputs (avg_rating, total_reviews) after a
review is accepted.
"""
from typing import Iterable, Tuple

MIN_RATING = 1
MAX_RATING = 5


def validate_rating(rating) -> bool:
    """Ratings are whole or fractional stars between 1 and 5."""
    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        return False
    return MIN_RATING <= rating <= MAX_RATING


def aggregate_ratings(ratings: Iterable[float]) -> Tuple[float, int]:
    """Returns (avg_rating, total_reviews). No reviews -> (0.0, 0)."""
    values = list(ratings)
    if not values:
        return 0.0, 0
    return sum(values) / len(values), len(values)
