from __future__ import annotations

import logging
from typing import Callable, Iterable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def select_best(items: Iterable[T], score: Callable[[T], int | None]) -> tuple[T, int] | None:
    """
    Return the first item with the lowest score, together with that score.

    Items scored as None are malformed and skipped. Iteration stops as soon as
    an item scores 0, so later items are never scored. Returns None when no
    item could be scored.
    """
    best_item: T | None = None
    best_score: int | None = None

    for item in items:
        s = score(item)
        if s is None:
            continue
        if best_score is None or s < best_score:
            logger.debug("  updating result: score=%s item=%r", s, item)
            best_item = item
            best_score = s
        if best_score == 0:
            break

    if best_score is None:
        return None
    return best_item, best_score  # type: ignore[return-value]
