"""
Input standardization: y[i] = (x[i] - mean[i]) / std[i].

Must use the exact statistics the reference model was fit with; a mismatch
degrades accuracy without any error. Zero std is rejected when the
NormalizationParams are built, not here.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from tinyml_eval.dataset.tables import NormalizationParams


def normalize(features: Sequence[float] | np.ndarray, params: NormalizationParams) -> np.ndarray:
    """Return a new float64 vector; the input is not modified."""
    x = np.asarray(features, dtype=np.float64)
    if x.shape != params.mean.shape:
        raise ValueError(f"feature vector has shape {x.shape}, expected {params.mean.shape}")
    return (x - params.mean) / params.std
