"""
Draw a confusion matrix on a display driver.

Sequence: clear, header, N+1 horizontal lines, N+1 vertical lines, one
decimal label per cell, then a single flush. The same matrix always yields
the same primitive sequence.
"""

from __future__ import annotations

import numpy as np

from tinyml_eval.eval_logging import get_logger
from tinyml_eval.render.display import DisplayDriver
from tinyml_eval.render.layout import GridLayout, check_fits, compute_grid_layout

logger = get_logger(__name__)


def render_confusion_matrix(
    display: DisplayDriver,
    matrix: np.ndarray,
    layout: GridLayout | None = None,
) -> None:
    layout = layout or GridLayout()
    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"confusion matrix must be square, got shape {matrix.shape}")
    prims = compute_grid_layout(matrix.shape[0], layout)
    check_fits(prims, display.width, display.height)

    display.fill(False)
    display.draw_text(*prims.header, layout.header)
    for line in prims.horizontal:
        display.draw_line(*line)
    for line in prims.vertical:
        display.draw_line(*line)
    for r, c, (x, y) in prims.cells:
        display.draw_text(x, y, str(int(matrix[r, c])))
    display.flush()
    logger.info("render_flushed", n_classes=int(matrix.shape[0]), bounds=list(prims.bounds))
