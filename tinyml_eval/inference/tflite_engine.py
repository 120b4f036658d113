"""
TensorFlow Lite inference adapter (tflite_runtime).

Runs the same .tflite flatbuffer that is deployed to the microcontroller:
float32 input of shape (1, F); int8/uint8 outputs are dequantized with the
tensor's (scale, zero_point) so scores are comparable across builds.

tflite_runtime is an optional dependency: pip install 'tinyml-eval[tflite]'.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np

from tinyml_eval.core.exceptions import InferenceError, InferenceInitError
from tinyml_eval.eval_logging import get_logger

logger = get_logger(__name__)


class TFLiteEngine:
    def __init__(self, model_path: str | Path, num_threads: int | None = None) -> None:
        self.model_path = Path(model_path)
        self.num_threads = num_threads
        self._interpreter: Any = None
        self._input: dict[str, Any] | None = None
        self._output: dict[str, Any] | None = None

    def initialize(self) -> None:
        path = self.model_path
        if not path.is_file():
            raise InferenceInitError(f"model file not found: {path}")
        try:
            import tflite_runtime.interpreter as tflite
        except ImportError as e:
            raise InferenceInitError(
                "tflite_runtime is required for the tflite engine. Install: pip install 'tinyml-eval[tflite]'"
            ) from e
        try:
            interpreter = tflite.Interpreter(model_path=str(path), num_threads=self.num_threads)
            interpreter.allocate_tensors()
        except Exception as e:
            raise InferenceInitError(f"failed to load model {path}: {e}") from e
        self._interpreter = interpreter
        self._input = interpreter.get_input_details()[0]
        self._output = interpreter.get_output_details()[0]
        logger.info(
            "engine_initialized",
            engine="tflite",
            path=str(path),
            input_shape=[int(d) for d in self._input["shape"]],
            output_shape=[int(d) for d in self._output["shape"]],
            input_dtype=str(np.dtype(self._input["dtype"])),
        )

    @property
    def input_width(self) -> int | None:
        if self._input is None:
            return None
        return int(self._input["shape"][-1])

    @property
    def output_width(self) -> int | None:
        if self._output is None:
            return None
        return int(self._output["shape"][-1])

    def _quantize_input(self, x: np.ndarray) -> np.ndarray:
        dtype = np.dtype(self._input["dtype"])
        if dtype == np.float32:
            return x.astype(np.float32)
        scale, zero_point = self._input["quantization"]
        info = np.iinfo(dtype)
        q = np.round(x / scale + zero_point)
        return np.clip(q, info.min, info.max).astype(dtype)

    def _dequantize_output(self, y: np.ndarray) -> np.ndarray:
        if np.dtype(self._output["dtype"]) == np.float32:
            return y.astype(np.float64)
        scale, zero_point = self._output["quantization"]
        return (y.astype(np.float64) - zero_point) * scale

    def infer(self, features: np.ndarray) -> np.ndarray:
        if self._interpreter is None:
            raise InferenceError("engine used before initialize()")
        x = np.asarray(features, dtype=np.float64).reshape(1, -1)
        self._interpreter.set_tensor(self._input["index"], self._quantize_input(x))
        self._interpreter.invoke()
        y = self._interpreter.get_tensor(self._output["index"])[0]
        return self._dequantize_output(np.asarray(y))
