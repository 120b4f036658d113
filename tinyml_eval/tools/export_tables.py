"""
Export the Wine dataset and its StandardScaler tables to CSV.

Output:
  - <out>/wine_dataset.csv        (13 feature columns + label)
  - <out>/wine_normalization.csv  (feature, mean, std)

Usage:
  python -m tinyml_eval.tools.export_tables --out data
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sklearn.datasets import load_wine

from tinyml_eval.dataset.provision import export_tables, load_wine_tables


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export Wine dataset and normalization tables to CSV.")
    parser.add_argument("--out", type=Path, default=Path("data"), help="Output directory (default: data)")
    args = parser.parse_args(argv)

    dataset, params = load_wine_tables()
    try:
        dataset_path, norm_path = export_tables(
            dataset, params, args.out, feature_names=list(load_wine().feature_names)
        )
    except OSError as e:
        print("ERROR:", e, file=sys.stderr)
        return 1
    print(f"dataset:       {dataset_path}")
    print(f"normalization: {norm_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
