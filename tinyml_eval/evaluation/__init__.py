"""
Evaluation core: normalization, decision rule, confusion accumulation and
the driver that sequences them over a dataset.
"""

from tinyml_eval.evaluation.confusion import ConfusionAccumulator
from tinyml_eval.evaluation.decision import argmax
from tinyml_eval.evaluation.driver import EvaluationDriver, EvaluationResult
from tinyml_eval.evaluation.normalizer import normalize
from tinyml_eval.evaluation.report import format_summary

__all__ = [
    "ConfusionAccumulator",
    "EvaluationDriver",
    "EvaluationResult",
    "argmax",
    "format_summary",
    "normalize",
]
