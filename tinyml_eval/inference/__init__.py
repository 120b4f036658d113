"""
Inference engine adapters.

The harness treats the model as a black box: initialize() once (fatal on
failure), then infer(normalized_vector) -> score vector per sample.
"""

from tinyml_eval.inference.engine import InferenceEngine, create_engine
from tinyml_eval.inference.sklearn_engine import SklearnEngine
from tinyml_eval.inference.tflite_engine import TFLiteEngine

__all__ = ["InferenceEngine", "SklearnEngine", "TFLiteEngine", "create_engine"]
