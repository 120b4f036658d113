"""
Plain-text summary of an evaluation: matrix table and final accuracy.

Lines are meant for the diagnostic sink (serial console / stdout).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinyml_eval.evaluation.driver import EvaluationResult


def format_sample_line(index: int, real: int, predicted: int, scores) -> str:
    """One per-sample diagnostic line: index, labels and raw scores."""
    joined = " ".join(f"{float(s):.3f}" for s in scores)
    return f"Sample {index:3d}  Real: {real}  Pred: {predicted}  [{joined}]"


def format_summary(result: "EvaluationResult") -> list[str]:
    matrix = result.matrix
    n = matrix.shape[0]
    lines = ["", "Confusion Matrix (real vs predicted)"]
    lines.append(" " * 6 + "".join(f"   {'Pred' + str(c):>8}" for c in range(n)))
    for r in range(n):
        lines.append(f"Real {r}" + "".join(f"   {int(matrix[r, c]):8d}" for c in range(n)))
    lines.append("")
    lines.append(f"Final accuracy: {result.accuracy:.4f}  ( {result.correct} / {result.total} )")
    return lines
