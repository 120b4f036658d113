"""
Confusion matrix accumulation.

Rows are real labels, columns are predicted labels. record() is the only
mutation path; accumulation is commutative, so the final state does not
depend on the order of calls.
"""

from __future__ import annotations

import numpy as np

from tinyml_eval.core.exceptions import LabelOutOfRangeError


class ConfusionAccumulator:
    """N x N counter matrix plus a running correct count."""

    def __init__(self, num_classes: int) -> None:
        if num_classes < 1:
            raise ValueError(f"num_classes must be >= 1, got {num_classes}")
        self._n = num_classes
        self._counts = np.zeros((num_classes, num_classes), dtype=np.int64)
        self._correct = 0

    @property
    def num_classes(self) -> int:
        return self._n

    def record(self, real: int, predicted: int) -> None:
        """Count one sample at [real][predicted]."""
        if not 0 <= real < self._n:
            raise LabelOutOfRangeError(real, self._n, where="real label")
        if not 0 <= predicted < self._n:
            raise LabelOutOfRangeError(predicted, self._n, where="predicted label")
        self._counts[real, predicted] += 1
        if real == predicted:
            self._correct += 1

    @property
    def matrix(self) -> np.ndarray:
        """Read-only copy of the counts."""
        out = self._counts.copy()
        out.setflags(write=False)
        return out

    @property
    def correct(self) -> int:
        return self._correct

    @property
    def total(self) -> int:
        return int(self._counts.sum())

    @property
    def accuracy(self) -> float:
        total = self.total
        if total == 0:
            raise ZeroDivisionError("accuracy of an empty confusion matrix")
        return self._correct / total
