"""
Grid layout for an N x N confusion matrix.

Pure geometry: given N, cell size, origin and bottom inset, produce the line
segments and text anchors to draw. The closing bottom border and the vertical
lines stop `bottom_inset` pixels above y0 + N*h so the border stays inside
the visible area of the panel; the right border stays at x0 + N*w.

Example (N=3, w=35, h=18, x0=0, y0=10, inset=3):
    horizontal y = 10, 28, 46, 61   x from 0 to 105
    vertical   x = 0, 35, 70, 105   y from 10 to 61
    text (r, c) at (c*35 + 8, 10 + r*18 + 6)
"""

from __future__ import annotations

from dataclasses import dataclass

from tinyml_eval.core.exceptions import ConfigurationError

Line = tuple[int, int, int, int]
Anchor = tuple[int, int]


@dataclass(frozen=True)
class GridLayout:
    """Rendering parameters. Defaults match the 128x64 SSD1306 panel."""

    cell_width: int = 35
    cell_height: int = 18
    x0: int = 0
    y0: int = 10
    bottom_inset: int = 3
    text_dx: int = 8
    text_dy: int = 6
    header: str = "Confusion Matrix"
    header_dx: int = 5
    header_dy: int = -10

    def header_anchor(self) -> Anchor:
        return self.x0 + self.header_dx, max(self.y0 + self.header_dy, 0)


@dataclass(frozen=True)
class GridPrimitives:
    horizontal: tuple[Line, ...]
    vertical: tuple[Line, ...]
    cells: tuple[tuple[int, int, Anchor], ...]
    header: Anchor

    @property
    def bounds(self) -> tuple[int, int]:
        """(right, bottom) pixel coordinates reached by the grid."""
        right = max(max(x0, x1) for x0, _, x1, _ in self.horizontal)
        bottom = max(max(y0, y1) for _, y0, _, y1 in self.vertical)
        return right, bottom


def compute_grid_layout(n: int, layout: GridLayout) -> GridPrimitives:
    """Lines and anchors for an n x n grid; no drawing."""
    if n < 1:
        raise ConfigurationError(f"grid needs at least one class, got {n}")
    w, h = layout.cell_width, layout.cell_height
    x0, y0 = layout.x0, layout.y0
    if w < 1 or h < 1:
        raise ConfigurationError(f"cell size must be positive, got {w}x{h}")
    if x0 < 0 or y0 < 0:
        raise ConfigurationError(f"grid origin ({x0}, {y0}) is off the canvas")
    if not 0 <= layout.bottom_inset < h:
        raise ConfigurationError(
            f"bottom inset must be in [0, {h}) for cell height {h}, got {layout.bottom_inset}"
        )
    x_end = x0 + n * w
    y_end = y0 + n * h - layout.bottom_inset

    horizontal = [(x0, y0 + r * h, x_end, y0 + r * h) for r in range(n)]
    horizontal.append((x0, y_end, x_end, y_end))
    vertical = tuple((x0 + c * w, y0, x0 + c * w, y_end) for c in range(n + 1))
    cells = tuple(
        (r, c, (x0 + c * w + layout.text_dx, y0 + r * h + layout.text_dy))
        for r in range(n)
        for c in range(n)
    )
    return GridPrimitives(
        horizontal=tuple(horizontal),
        vertical=vertical,
        cells=cells,
        header=layout.header_anchor(),
    )


def check_fits(primitives: GridPrimitives, width: int, height: int) -> None:
    """Raise ConfigurationError if the grid leaves a width x height canvas."""
    right, bottom = primitives.bounds
    if right >= width or bottom >= height:
        raise ConfigurationError(
            f"grid reaches ({right}, {bottom}) but canvas is {width}x{height}"
        )
