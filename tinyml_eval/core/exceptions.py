"""
Application-level exceptions.

Every precondition violation is fatal: there is no retry or degraded mode.
Library code raises these; only the CLI entry points catch them, log once
and exit with status 1.
"""

from __future__ import annotations


class EvalError(Exception):
    """Base class for all harness errors."""


class ConfigurationError(EvalError):
    """Tables, settings or layout violate a precondition; detected before the loop."""


class LabelOutOfRangeError(ConfigurationError):
    """A class index outside [0, num_classes)."""

    def __init__(self, label: int, num_classes: int, where: str = "label") -> None:
        self.label = label
        self.num_classes = num_classes
        super().__init__(f"{where} {label} out of range [0, {num_classes})")


class InferenceInitError(EvalError):
    """Inference engine could not be initialized; the run must not start."""


class InferenceError(EvalError):
    """Inference engine returned an unusable score vector."""
