"""
Display driver interface and a Pillow-backed monochrome canvas.

PillowDisplay mirrors the SSD1306 driver model: drawing goes to an in-memory
1-bit framebuffer and nothing is visible until flush(), which writes the
frame to a PNG (the "device").
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from PIL import Image, ImageDraw, ImageFont

from tinyml_eval.eval_logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class DisplayDriver(Protocol):
    width: int
    height: int

    def fill(self, color: bool) -> None: ...

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None: ...

    def draw_text(self, x: int, y: int, text: str) -> None: ...

    def flush(self) -> None: ...


class PillowDisplay:
    """Fixed-size 1-bit canvas; flush() saves the current frame to output_path."""

    def __init__(self, width: int = 128, height: int = 64, output_path: str | Path | None = None) -> None:
        self.width = width
        self.height = height
        self.output_path = Path(output_path) if output_path else None
        self.image = Image.new("1", (width, height), 0)
        self._draw = ImageDraw.Draw(self.image)
        self._font = ImageFont.load_default()
        self.flush_count = 0

    def fill(self, color: bool) -> None:
        self._draw.rectangle((0, 0, self.width - 1, self.height - 1), fill=1 if color else 0)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        self._draw.line((x0, y0, x1, y1), fill=1)

    def draw_text(self, x: int, y: int, text: str) -> None:
        self._draw.text((x, y), text, fill=1, font=self._font)

    def flush(self) -> None:
        self.flush_count += 1
        if self.output_path is None:
            return
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(self.output_path)
        logger.debug("display_flushed", path=str(self.output_path), frame=self.flush_count)
