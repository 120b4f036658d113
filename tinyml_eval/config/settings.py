"""
Application settings.

Responsibilities:
- Load configuration from environment variables and the .env file.
- Validate values and provide the panel defaults (Wine: 13 features,
  3 classes, 128x64 canvas, 35x18 cells at (0, 10), 3 px bottom inset).
- Expose a frozen EvalSettings used by the harness, CLI and renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from tinyml_eval.config.env import (
    env_choice,
    env_int,
    env_path,
    load_eval_env,
)

ENGINE_CHOICES = ("sklearn", "tflite")
TRIGGER_CHOICES = ("immediate", "keyboard")

# Relative to the working directory
DEFAULT_MODEL_PATH = Path("models") / "wine_model.joblib"
DEFAULT_OUTPUT_IMAGE = Path("confusion_matrix.png")


@dataclass(frozen=True)
class EvalSettings:
    """Configuration for one evaluation run."""

    dataset_path: Path | None = None
    normalization_path: Path | None = None
    model_path: Path = DEFAULT_MODEL_PATH
    engine: str = "sklearn"
    num_features: int = 13
    num_classes: int = 3
    diagnostic_samples: int = 15
    trigger: str = "immediate"
    debounce_ms: int = 200
    poll_interval_ms: int = 10
    canvas_width: int = 128
    canvas_height: int = 64
    cell_width: int = 35
    cell_height: int = 18
    grid_x: int = 0
    grid_y: int = 10
    bottom_inset: int = 3
    output_image: Path = DEFAULT_OUTPUT_IMAGE

    def with_overrides(self, **overrides) -> "EvalSettings":
        """Return a copy with the non-None overrides applied (CLI flags)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def get_settings() -> EvalSettings:
    """
    Return settings read from the environment (after loading .env).

    Raises:
        ConfigurationError: a variable is present but malformed.
    """
    load_eval_env()
    return EvalSettings(
        dataset_path=env_path("EVAL_DATASET_PATH"),
        normalization_path=env_path("EVAL_NORMALIZATION_PATH"),
        model_path=env_path("EVAL_MODEL_PATH", DEFAULT_MODEL_PATH),
        engine=env_choice("EVAL_ENGINE", ENGINE_CHOICES, "sklearn"),
        num_features=env_int("EVAL_NUM_FEATURES", 13),
        num_classes=env_int("EVAL_NUM_CLASSES", 3),
        diagnostic_samples=env_int("EVAL_DIAGNOSTIC_SAMPLES", 15),
        trigger=env_choice("EVAL_TRIGGER", TRIGGER_CHOICES, "immediate"),
        debounce_ms=env_int("EVAL_DEBOUNCE_MS", 200),
        poll_interval_ms=env_int("EVAL_POLL_INTERVAL_MS", 10),
        canvas_width=env_int("EVAL_CANVAS_WIDTH", 128),
        canvas_height=env_int("EVAL_CANVAS_HEIGHT", 64),
        cell_width=env_int("EVAL_CELL_WIDTH", 35),
        cell_height=env_int("EVAL_CELL_HEIGHT", 18),
        grid_x=env_int("EVAL_GRID_X", 0),
        grid_y=env_int("EVAL_GRID_Y", 10),
        bottom_inset=env_int("EVAL_BOTTOM_INSET", 3),
        output_image=env_path("EVAL_OUTPUT_IMAGE", DEFAULT_OUTPUT_IMAGE),
    )
