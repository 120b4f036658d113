"""
Wine tables provisioning.

Builds the UCI Wine dataset (178 samples, 13 features, 3 classes) from
scikit-learn and the StandardScaler statistics the reference model was fit
with. The statistics are the population std (ddof=0) that StandardScaler
stores in scale_; any other estimate silently degrades accuracy.

Usage:
    from tinyml_eval.dataset.provision import load_wine_tables, export_tables
    dataset, params = load_wine_tables()
    export_tables(dataset, params, Path("data"))
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
from sklearn.datasets import load_wine
from sklearn.preprocessing import StandardScaler

from tinyml_eval.dataset.tables import LABEL_COLUMN, Dataset, NormalizationParams
from tinyml_eval.eval_logging import get_logger

logger = get_logger(__name__)

DATASET_FILENAME = "wine_dataset.csv"
NORMALIZATION_FILENAME = "wine_normalization.csv"


def fit_normalization(features: np.ndarray) -> NormalizationParams:
    """Fit StandardScaler on features and return its mean_ / scale_."""
    scaler = StandardScaler()
    scaler.fit(np.asarray(features, dtype=np.float64))
    return NormalizationParams(scaler.mean_, scaler.scale_)


def load_wine_tables() -> tuple[Dataset, NormalizationParams]:
    """Return (dataset, normalization params) for the full Wine dataset."""
    bunch = load_wine()
    dataset = Dataset(bunch.data, bunch.target)
    params = fit_normalization(dataset.features)
    logger.info(
        "wine_tables_loaded",
        n_samples=len(dataset),
        n_features=dataset.num_features,
        n_classes=int(np.unique(dataset.labels).size),
    )
    return dataset, params


def export_tables(
    dataset: Dataset,
    params: NormalizationParams,
    out_dir: Path,
    feature_names: list[str] | None = None,
) -> tuple[Path, Path]:
    """
    Write dataset and normalization CSVs into out_dir.

    Returns (dataset_path, normalization_path).
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    names = feature_names or [f"f{i}" for i in range(dataset.num_features)]

    df = pd.DataFrame(dataset.features, columns=names)
    df[LABEL_COLUMN] = dataset.labels
    dataset_path = out_dir / DATASET_FILENAME
    df.to_csv(dataset_path, index=False)

    norm = pd.DataFrame({"feature": names, "mean": params.mean, "std": params.std})
    normalization_path = out_dir / NORMALIZATION_FILENAME
    norm.to_csv(normalization_path, index=False)

    logger.info("tables_exported", dataset=str(dataset_path), normalization=str(normalization_path))
    return dataset_path, normalization_path
