"""
Evaluation driver: dataset -> normalize -> infer -> argmax -> confusion matrix.

All preconditions (non-empty dataset, labels in range, feature widths, engine
input/output widths) are checked before the first sample is evaluated. The
accumulator is created fresh per run and owned by the driver; the returned
EvaluationResult is read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from tinyml_eval.core.exceptions import ConfigurationError, InferenceError
from tinyml_eval.dataset.tables import Dataset, NormalizationParams
from tinyml_eval.eval_logging import get_logger
from tinyml_eval.evaluation.confusion import ConfusionAccumulator
from tinyml_eval.evaluation.decision import argmax
from tinyml_eval.evaluation.normalizer import normalize
from tinyml_eval.evaluation.report import format_sample_line
from tinyml_eval.inference.engine import InferenceEngine

logger = get_logger(__name__)

DEFAULT_DIAGNOSTIC_SAMPLES = 15


@dataclass(frozen=True)
class EvaluationResult:
    """Final state of one evaluation run."""

    matrix: np.ndarray
    correct: int
    total: int

    @property
    def accuracy(self) -> float:
        return self.correct / self.total


class EvaluationDriver:
    """Sequences one full evaluation pass over a dataset."""

    def __init__(
        self,
        engine: InferenceEngine,
        params: NormalizationParams,
        num_classes: int,
        *,
        diagnostic_samples: int = DEFAULT_DIAGNOSTIC_SAMPLES,
        sink: Callable[[str], None] = print,
    ) -> None:
        self.engine = engine
        self.params = params
        self.num_classes = num_classes
        self.diagnostic_samples = max(0, diagnostic_samples)
        self.sink = sink

    def validate(self, dataset: Dataset) -> None:
        """
        Raise ConfigurationError for any shape or label problem.

        Engine widths are only checked when the engine declares them.
        """
        dataset.validate(self.params.num_features, self.num_classes)
        in_w = self.engine.input_width
        if in_w is not None and in_w != self.params.num_features:
            raise ConfigurationError(
                f"model expects {in_w} features but tables provide {self.params.num_features}"
            )
        out_w = self.engine.output_width
        if out_w is not None and out_w != self.num_classes:
            raise ConfigurationError(
                f"model produces {out_w} scores but {self.num_classes} classes are configured"
            )

    def run(self, dataset: Dataset) -> EvaluationResult:
        self.validate(dataset)
        acc = ConfusionAccumulator(self.num_classes)
        logger.info("evaluation_started", n_samples=len(dataset), n_classes=self.num_classes)

        for i, (features, real) in enumerate(dataset):
            x = normalize(features, self.params)
            scores = np.asarray(self.engine.infer(x), dtype=np.float64).reshape(-1)
            if scores.shape[0] != self.num_classes:
                logger.error("evaluation_bad_scores", sample=i, width=int(scores.shape[0]))
                raise InferenceError(
                    f"sample {i}: engine returned {scores.shape[0]} scores, expected {self.num_classes}"
                )
            pred = argmax(scores)
            acc.record(real, pred)
            if i < self.diagnostic_samples:
                self.sink(format_sample_line(i, real, pred, scores))

        result = EvaluationResult(matrix=acc.matrix, correct=acc.correct, total=acc.total)
        logger.info(
            "evaluation_finished",
            correct=result.correct,
            total=result.total,
            accuracy=round(result.accuracy, 4),
        )
        return result
