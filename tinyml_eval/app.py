"""
Harness orchestration: tables -> engine init -> trigger -> evaluate -> report -> render.

Everything that can be checked up front (table shapes, labels, zero std,
engine widths, grid fitting the canvas) is checked before the trigger wait,
so a misconfigured board fails immediately instead of after the button press.
"""

from __future__ import annotations

import uuid
from typing import Callable

from tinyml_eval.config.settings import EvalSettings
from tinyml_eval.dataset.provision import fit_normalization, load_wine_tables
from tinyml_eval.dataset.tables import (
    Dataset,
    NormalizationParams,
    load_dataset_csv,
    load_normalization_csv,
)
from tinyml_eval.eval_logging.logger import bind_run
from tinyml_eval.evaluation.driver import EvaluationDriver, EvaluationResult
from tinyml_eval.evaluation.report import format_summary
from tinyml_eval.inference.engine import InferenceEngine, create_engine
from tinyml_eval.render.display import DisplayDriver, PillowDisplay
from tinyml_eval.render.layout import GridLayout, check_fits, compute_grid_layout
from tinyml_eval.render.renderer import render_confusion_matrix
from tinyml_eval.trigger.polling import TriggerInput, create_trigger, wait_for_trigger

BANNER = "=== TinyML Wine - Confusion Matrix ==="


def load_tables(settings: EvalSettings) -> tuple[Dataset, NormalizationParams]:
    """
    Dataset from EVAL_DATASET_PATH or the built-in Wine tables; normalization
    from EVAL_NORMALIZATION_PATH, else the Wine scaler, else fitted on the dataset.
    """
    if settings.dataset_path is None:
        dataset, params = load_wine_tables()
    else:
        dataset = load_dataset_csv(settings.dataset_path)
        params = None
    if settings.normalization_path is not None:
        params = load_normalization_csv(settings.normalization_path)
    elif params is None:
        params = fit_normalization(dataset.features)
    return dataset, params


def grid_layout_from(settings: EvalSettings) -> GridLayout:
    return GridLayout(
        cell_width=settings.cell_width,
        cell_height=settings.cell_height,
        x0=settings.grid_x,
        y0=settings.grid_y,
        bottom_inset=settings.bottom_inset,
    )


def run_harness(
    settings: EvalSettings,
    *,
    engine: InferenceEngine | None = None,
    display: DisplayDriver | None = None,
    trigger: TriggerInput | None = None,
    sink: Callable[[str], None] = print,
    tables: tuple[Dataset, NormalizationParams] | None = None,
) -> EvaluationResult:
    """
    Run one full evaluation and draw the result.

    Collaborators default to the ones named in settings; tests pass fakes.

    Raises:
        ConfigurationError: tables or layout violate a precondition.
        InferenceInitError: the model could not be loaded.
        InferenceError: the model returned an unusable score vector.
    """
    log = bind_run(uuid.uuid4().hex[:12])
    sink("")
    sink(BANNER)

    dataset, params = tables or load_tables(settings)
    layout = grid_layout_from(settings)
    display = display or PillowDisplay(
        settings.canvas_width, settings.canvas_height, output_path=settings.output_image
    )
    check_fits(compute_grid_layout(settings.num_classes, layout), display.width, display.height)

    engine = engine or create_engine(settings.engine, settings.model_path)
    engine.initialize()

    driver = EvaluationDriver(
        engine,
        params,
        settings.num_classes,
        diagnostic_samples=settings.diagnostic_samples,
        sink=sink,
    )
    driver.validate(dataset)

    wait_for_trigger(
        trigger or create_trigger(settings.trigger),
        display,
        debounce_ms=settings.debounce_ms,
        poll_interval_ms=settings.poll_interval_ms,
    )

    sink("Model initialized successfully!")
    sink(f"Running inference on {len(dataset)} samples...")
    result = driver.run(dataset)
    for line in format_summary(result):
        sink(line)

    render_confusion_matrix(display, result.matrix, layout)
    sink("")
    sink("Inference finished.")
    log.info("harness_finished", accuracy=round(result.accuracy, 4), total=result.total)
    return result
