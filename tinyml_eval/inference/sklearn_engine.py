"""
scikit-learn inference adapter.

Loads a joblib (or pickle) serialized classifier and scores samples with
predict_proba. Scores are reordered by classes_ so index k is class k.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import joblib
import numpy as np

from tinyml_eval.core.exceptions import InferenceError, InferenceInitError
from tinyml_eval.eval_logging import get_logger

logger = get_logger(__name__)


class SklearnEngine:
    def __init__(self, model_path: str | Path) -> None:
        self.model_path = Path(model_path)
        self._clf: Any = None
        self._order: np.ndarray | None = None
        self._width: int | None = None

    def initialize(self) -> None:
        path = self.model_path
        if not path.is_file():
            raise InferenceInitError(f"model file not found: {path}")
        try:
            clf = joblib.load(path)
        except Exception as e:
            raise InferenceInitError(f"failed to load model {path}: {e}") from e
        if not hasattr(clf, "predict_proba"):
            raise InferenceInitError(f"model {path} has no predict_proba")

        classes = np.asarray(getattr(clf, "classes_", []))
        if classes.size:
            try:
                class_idx = classes.astype(np.int64)
            except (TypeError, ValueError) as e:
                raise InferenceInitError(f"model classes_ are not integer labels: {classes.tolist()}") from e
            if class_idx.min() < 0:
                raise InferenceInitError(f"model classes_ contain negative labels: {classes.tolist()}")
            self._width = int(class_idx.max()) + 1
            self._order = class_idx
        self._clf = clf
        logger.info(
            "engine_initialized",
            engine="sklearn",
            path=str(path),
            input_width=self.input_width,
            output_width=self.output_width,
        )

    @property
    def input_width(self) -> int | None:
        n = getattr(self._clf, "n_features_in_", None)
        return int(n) if n is not None else None

    @property
    def output_width(self) -> int | None:
        return self._width

    def infer(self, features: np.ndarray) -> np.ndarray:
        if self._clf is None:
            raise InferenceError("engine used before initialize()")
        X = np.asarray(features, dtype=np.float64).reshape(1, -1)
        proba = np.asarray(self._clf.predict_proba(X)[0], dtype=np.float64)
        if self._order is None:
            return proba
        # Classes absent from training get a zero score
        scores = np.zeros(self._width, dtype=np.float64)
        scores[self._order] = proba
        return scores
