"""
Run the on-device evaluation harness from the command line.

Settings come from the environment / .env (see tinyml_eval.config.settings);
flags override them.

Usage:
  python -m tinyml_eval.tools.run_evaluation --model models/wine_model.joblib
  python -m tinyml_eval.tools.run_evaluation --engine tflite --model wine.tflite --trigger keyboard
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tinyml_eval.config.env import load_eval_env, resolve_path
from tinyml_eval.config.settings import ENGINE_CHOICES, TRIGGER_CHOICES, get_settings
from tinyml_eval.core.exceptions import EvalError, InferenceInitError
from tinyml_eval.eval_logging import LOG_FORMATS, configure_structlog, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate a classifier over a fixed dataset and render its confusion matrix.",
    )
    parser.add_argument("--model", type=Path, default=None, help="Model artifact (.joblib / .tflite)")
    parser.add_argument("--engine", choices=ENGINE_CHOICES, default=None, help="Inference engine")
    parser.add_argument("--dataset", type=Path, default=None, help="Dataset CSV (f0..fN, label)")
    parser.add_argument("--normalization", type=Path, default=None, help="Normalization CSV (feature, mean, std)")
    parser.add_argument("--trigger", choices=TRIGGER_CHOICES, default=None, help="Trigger input")
    parser.add_argument("--output-image", type=Path, default=None, help="PNG written on display flush")
    parser.add_argument(
        "--diagnostic-samples",
        type=int,
        default=None,
        help="Per-sample diagnostic lines to print (default: 15)",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--log-format", choices=LOG_FORMATS, default=None, help="Log renderer (default: LOG_FORMAT or json)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_eval_env()
    configure_structlog(args.log_level, args.log_format)
    from tinyml_eval.app import run_harness

    try:
        settings = get_settings().with_overrides(
            model_path=_flag_path(args.model),
            engine=args.engine,
            dataset_path=_flag_path(args.dataset),
            normalization_path=_flag_path(args.normalization),
            trigger=args.trigger,
            output_image=_flag_path(args.output_image),
            diagnostic_samples=args.diagnostic_samples,
        )
        run_harness(settings)
    except InferenceInitError as e:
        logger.error("run_evaluation_failed", error=str(e), error_type=type(e).__name__)
        print(f"ERROR: Failed to initialize model: {e}", file=sys.stderr)
        return 1
    except (EvalError, FileNotFoundError) as e:
        logger.error("run_evaluation_failed", error=str(e), error_type=type(e).__name__)
        print("ERROR:", e, file=sys.stderr)
        return 1
    return 0


def _flag_path(path: Path | None) -> Path | None:
    return None if path is None else resolve_path(path)


if __name__ == "__main__":
    sys.exit(main())
