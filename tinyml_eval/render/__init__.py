"""
Confusion matrix rendering onto a fixed-size bitmap canvas.
"""

from tinyml_eval.render.display import DisplayDriver, PillowDisplay
from tinyml_eval.render.layout import GridLayout, GridPrimitives, compute_grid_layout
from tinyml_eval.render.renderer import render_confusion_matrix

__all__ = [
    "DisplayDriver",
    "GridLayout",
    "GridPrimitives",
    "PillowDisplay",
    "compute_grid_layout",
    "render_confusion_matrix",
]
