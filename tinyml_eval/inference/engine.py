"""
Inference engine interface and factory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

import numpy as np

from tinyml_eval.core.exceptions import ConfigurationError


@runtime_checkable
class InferenceEngine(Protocol):
    """Opaque classifier: per-class scores from a normalized feature vector."""

    def initialize(self) -> None:
        """Load the model. Raises InferenceInitError on failure."""

    def infer(self, features: np.ndarray) -> np.ndarray:
        """Return the score vector (length output_width) for one sample."""

    @property
    def input_width(self) -> int | None:
        """Expected feature count, or None when the model does not declare it."""

    @property
    def output_width(self) -> int | None:
        """Score vector length, or None when the model does not declare it."""


def create_engine(kind: str, model_path: str | Path) -> InferenceEngine:
    """Build (but do not initialize) the engine named by kind: 'sklearn' or 'tflite'."""
    from tinyml_eval.inference.sklearn_engine import SklearnEngine
    from tinyml_eval.inference.tflite_engine import TFLiteEngine

    if kind == "sklearn":
        return SklearnEngine(model_path)
    if kind == "tflite":
        return TFLiteEngine(model_path)
    raise ConfigurationError(f"unknown inference engine {kind!r}")
