"""
Configuration management for the TinyML Eval harness.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for dataset paths, engine choice,
trigger policy and display geometry.
"""

from tinyml_eval.config.settings import EvalSettings, get_settings  # noqa: F401

__all__ = ["EvalSettings", "get_settings"]
