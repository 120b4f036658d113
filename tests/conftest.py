"""
Pytest fixtures for TinyML Eval tests: recording display, scripted engine and
trigger fakes, and small in-memory tables. No hardware or TFLite needed.
"""

from __future__ import annotations

import numpy as np
import pytest

from tinyml_eval.core.exceptions import InferenceInitError
from tinyml_eval.dataset.tables import Dataset, NormalizationParams


class RecordingDisplay:
    """Display driver that records every primitive instead of drawing."""

    def __init__(self, width: int = 128, height: int = 64) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []

    def fill(self, color):
        self.calls.append(("fill", color))

    def draw_line(self, x0, y0, x1, y1):
        self.calls.append(("line", x0, y0, x1, y1))

    def draw_text(self, x, y, text):
        self.calls.append(("text", x, y, text))

    def flush(self):
        self.calls.append(("flush",))

    def of(self, kind: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == kind]


class ScriptedEngine:
    """Returns pre-scripted score vectors in order; records normalized inputs."""

    def __init__(self, scores, input_width=None, output_width=None, fail_init=False):
        self._scores = [np.asarray(s, dtype=np.float64) for s in scores]
        self._input_width = input_width
        self._output_width = output_width
        self.fail_init = fail_init
        self.initialized = False
        self.inputs: list[np.ndarray] = []

    def initialize(self):
        if self.fail_init:
            raise InferenceInitError("scripted init failure")
        self.initialized = True

    @property
    def input_width(self):
        return self._input_width

    @property
    def output_width(self):
        return self._output_width

    def infer(self, features):
        self.inputs.append(np.array(features))
        return self._scores[len(self.inputs) - 1]


class ScriptedTrigger:
    """Reads 'not pressed' for the first `idle_polls` polls."""

    def __init__(self, idle_polls: int = 0):
        self.idle_polls = idle_polls
        self.reads = 0

    def is_pressed(self):
        self.reads += 1
        return self.reads > self.idle_polls


def one_hot(label: int, n: int = 3) -> list[float]:
    scores = [0.1] * n
    scores[label] = 0.8
    return scores


@pytest.fixture
def recording_display():
    return RecordingDisplay()


@pytest.fixture
def identity_params():
    """Two-feature mean=0, std=1 normalization."""
    return NormalizationParams(np.zeros(2), np.ones(2))


@pytest.fixture
def three_sample_dataset():
    """Labels [0, 1, 2] with two features each."""
    return Dataset(
        np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]),
        np.array([0, 1, 2]),
    )
