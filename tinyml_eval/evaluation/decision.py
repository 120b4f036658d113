"""Decision rule: score vector -> predicted class index."""

from __future__ import annotations

from typing import Sequence


def argmax(scores: Sequence[float]) -> int:
    """
    Index of the largest score. The first index attaining the maximum wins:
    later equal values never replace it (argmax([0.5, 0.2, 0.5]) == 0).
    """
    if len(scores) == 0:
        raise ValueError("argmax of empty score vector")
    best_idx = 0
    best = scores[0]
    for i in range(1, len(scores)):
        if scores[i] > best:
            best = scores[i]
            best_idx = i
    return best_idx
