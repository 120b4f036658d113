"""
Read-only dataset and normalization tables.

Tables are loaded once before evaluation and validated against the
configured feature / class counts.
"""

from tinyml_eval.dataset.provision import load_wine_tables
from tinyml_eval.dataset.tables import (
    Dataset,
    NormalizationParams,
    load_dataset_csv,
    load_normalization_csv,
)

__all__ = [
    "Dataset",
    "NormalizationParams",
    "load_dataset_csv",
    "load_normalization_csv",
    "load_wine_tables",
]
