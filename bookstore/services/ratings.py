"""
Ratings Service

The book's average review is never stored. It is derived from the embedded
reviews every time a book is read, using the pure function below so the
calculation can be tested without a database.
"""

from collections.abc import Iterable


def average_rating(ratings: Iterable[int]) -> float | None:
    """
    Average a sequence of review ratings.

    Args:
        ratings: Review ratings (by convention 1 to 5)

    Returns:
        The mean rounded to one decimal place, or None when there are
        no ratings.

    Example:
        >>> average_rating([5, 4, 4])
        4.3
        >>> average_rating([]) is None
        True
    """
    values = list(ratings)
    if not values:
        return None
    return round(sum(values) / len(values), 1)
