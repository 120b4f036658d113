"""
Dataset and normalization tables.

Dataset: ordered (feature vector, label) pairs, shape (num_samples, num_features).
NormalizationParams: mean / std vectors, one entry per feature position, in
the same order as the dataset columns.

CSV layouts:
  dataset:        f0..f{F-1},label   (header required, label is last column)
  normalization:  feature,mean,std   (one row per feature, dataset order)

Both types are immutable (read-only numpy views) and validated on creation:
shape mismatches, empty datasets, zero std and out-of-range labels are
configuration errors raised before the evaluation loop starts.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd

from tinyml_eval.core.exceptions import ConfigurationError, LabelOutOfRangeError
from tinyml_eval.eval_logging import get_logger

logger = get_logger(__name__)

LABEL_COLUMN = "label"


def _frozen(values, dtype) -> np.ndarray:
    arr = np.array(values, dtype=dtype)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class NormalizationParams:
    """Per-feature mean and standard deviation (StandardScaler statistics)."""

    mean: np.ndarray
    std: np.ndarray

    def __post_init__(self) -> None:
        mean = _frozen(self.mean, np.float64)
        std = _frozen(self.std, np.float64)
        if mean.ndim != 1 or std.ndim != 1:
            raise ConfigurationError("normalization mean/std must be 1-D")
        if mean.shape != std.shape:
            raise ConfigurationError(
                f"normalization mean has {mean.shape[0]} entries but std has {std.shape[0]}"
            )
        zero = np.flatnonzero(std == 0)
        if zero.size:
            raise ConfigurationError(f"normalization std is zero at feature(s) {zero.tolist()}")
        object.__setattr__(self, "mean", mean)
        object.__setattr__(self, "std", std)

    @property
    def num_features(self) -> int:
        return int(self.mean.shape[0])


@dataclass(frozen=True)
class Dataset:
    """Fixed labeled dataset. features: (N, F) float64; labels: (N,) int64."""

    features: np.ndarray
    labels: np.ndarray

    def __post_init__(self) -> None:
        features = _frozen(self.features, np.float64)
        labels = _frozen(self.labels, np.int64)
        if features.ndim != 2:
            raise ConfigurationError(f"dataset features must be 2-D, got shape {features.shape}")
        if labels.ndim != 1 or labels.shape[0] != features.shape[0]:
            raise ConfigurationError(
                f"dataset has {features.shape[0]} feature rows but {labels.shape[0]} labels"
            )
        object.__setattr__(self, "features", features)
        object.__setattr__(self, "labels", labels)

    def __len__(self) -> int:
        return int(self.labels.shape[0])

    def __iter__(self):
        for i in range(len(self)):
            yield self.features[i], int(self.labels[i])

    @property
    def num_features(self) -> int:
        return int(self.features.shape[1])

    def validate(self, num_features: int, num_classes: int) -> None:
        """
        Check the dataset against the configured shape.

        Raises:
            ConfigurationError: empty dataset or wrong feature count.
            LabelOutOfRangeError: a label outside [0, num_classes).
        """
        if len(self) == 0:
            raise ConfigurationError("dataset is empty; accuracy is undefined")
        if self.num_features != num_features:
            raise ConfigurationError(
                f"dataset has {self.num_features} features, expected {num_features}"
            )
        bad = np.flatnonzero((self.labels < 0) | (self.labels >= num_classes))
        if bad.size:
            raise LabelOutOfRangeError(int(self.labels[bad[0]]), num_classes, where=f"sample {int(bad[0])} label")


def load_dataset_csv(path: str | Path) -> Dataset:
    """
    Load dataset CSV (f0..fN, label).

    Raises:
        FileNotFoundError: path missing.
        ConfigurationError: no label column or non-numeric cells.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Dataset CSV not found: {path}")
    df = pd.read_csv(path)
    if LABEL_COLUMN not in df.columns:
        raise ConfigurationError(f"dataset CSV {path} has no '{LABEL_COLUMN}' column")
    feature_df = df.drop(columns=[LABEL_COLUMN]).apply(pd.to_numeric, errors="coerce")
    if feature_df.isna().any().any():
        raise ConfigurationError(f"dataset CSV {path} has missing or non-numeric feature values")
    labels = pd.to_numeric(df[LABEL_COLUMN], errors="coerce")
    if labels.isna().any() or (labels % 1 != 0).any():
        raise ConfigurationError(f"dataset CSV {path} has non-integer labels")
    dataset = Dataset(feature_df.to_numpy(dtype=np.float64), labels.to_numpy(dtype=np.int64))
    logger.info("dataset_loaded", path=str(path), n_samples=len(dataset), n_features=dataset.num_features)
    return dataset


def load_normalization_csv(path: str | Path) -> NormalizationParams:
    """Load normalization CSV (feature, mean, std); row order must match dataset columns."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Normalization CSV not found: {path}")
    df = pd.read_csv(path)
    missing = [c for c in ("mean", "std") if c not in df.columns]
    if missing:
        raise ConfigurationError(f"normalization CSV {path} missing column(s): {missing}")
    stats = df[["mean", "std"]].apply(pd.to_numeric, errors="coerce")
    if stats.isna().any().any():
        raise ConfigurationError(f"normalization CSV {path} has missing or non-numeric values")
    params = NormalizationParams(stats["mean"].to_numpy(), stats["std"].to_numpy())
    logger.info("normalization_loaded", path=str(path), n_features=params.num_features)
    return params
