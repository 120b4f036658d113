"""
Tests for harness orchestration and the CLI entry point.
"""

from __future__ import annotations

import json

import numpy as np
import pytest

from conftest import RecordingDisplay, ScriptedEngine, ScriptedTrigger, one_hot
from tinyml_eval.app import BANNER, load_tables, run_harness
from tinyml_eval.config.settings import EvalSettings
from tinyml_eval.core.exceptions import ConfigurationError, InferenceInitError
from tinyml_eval.eval_logging import configure_structlog
from tinyml_eval.dataset.tables import Dataset, NormalizationParams
from tinyml_eval.tools import run_evaluation


@pytest.fixture
def settings():
    return EvalSettings(num_features=2, num_classes=3, debounce_ms=0, poll_interval_ms=0)


@pytest.fixture
def tables(three_sample_dataset, identity_params):
    return three_sample_dataset, identity_params


def test_full_run_renders_matrix(settings, tables):
    """Init -> trigger -> evaluate -> summary -> render, in that order."""
    display = RecordingDisplay()
    engine = ScriptedEngine([one_hot(0), one_hot(1), one_hot(1)])
    lines: list[str] = []
    result = run_harness(
        settings,
        engine=engine,
        display=display,
        trigger=ScriptedTrigger(idle_polls=1),
        sink=lines.append,
        tables=tables,
    )
    assert engine.initialized
    assert result.accuracy == pytest.approx(2 / 3)
    assert BANNER in lines
    assert "Final accuracy: 0.6667  ( 2 / 3 )" in lines
    assert lines[-1] == "Inference finished."
    # one prompt frame while waiting, then the matrix frame
    assert len(display.of("flush")) == 2
    assert ("text", 8 + 35, 10 + 2 * 18 + 6, "1") in display.calls


def test_engine_init_failure_is_fatal(settings, tables):
    """Init failure propagates; nothing is evaluated, rendered or reported on the sink."""
    display = RecordingDisplay()
    lines: list[str] = []
    trigger = ScriptedTrigger()
    with pytest.raises(InferenceInitError):
        run_harness(
            settings,
            engine=ScriptedEngine([], fail_init=True),
            display=display,
            trigger=trigger,
            sink=lines.append,
            tables=tables,
        )
    assert lines == ["", BANNER]
    assert trigger.reads == 0
    assert display.calls == []


def test_bad_tables_fail_before_trigger(settings, identity_params):
    dataset = Dataset(np.zeros((1, 2)), [5])
    trigger = ScriptedTrigger()
    with pytest.raises(ConfigurationError):
        run_harness(
            settings,
            engine=ScriptedEngine([one_hot(0)]),
            display=RecordingDisplay(),
            trigger=trigger,
            sink=lambda _: None,
            tables=(dataset, identity_params),
        )
    assert trigger.reads == 0


def test_grid_too_large_for_canvas(tables):
    settings = EvalSettings(num_features=2, num_classes=3, cell_width=60)
    with pytest.raises(ConfigurationError, match="canvas"):
        run_harness(
            settings,
            engine=ScriptedEngine([]),
            display=RecordingDisplay(),
            trigger=ScriptedTrigger(),
            sink=lambda _: None,
            tables=tables,
        )


def test_load_tables_from_csv(tmp_path):
    """Dataset CSV without a normalization table gets statistics fitted on it."""
    path = tmp_path / "ds.csv"
    path.write_text("f0,label\n1.0,0\n3.0,1\n", encoding="utf-8")
    dataset, params = load_tables(EvalSettings(dataset_path=path))
    assert len(dataset) == 2
    np.testing.assert_allclose(params.mean, [2.0])
    np.testing.assert_allclose(params.std, [1.0])


def test_load_tables_normalization_override(tmp_path):
    norm = tmp_path / "norm.csv"
    norm.write_text("feature,mean,std\n" + "".join(f"f{i},0.0,2.0\n" for i in range(13)), encoding="utf-8")
    dataset, params = load_tables(EvalSettings(normalization_path=norm))
    assert len(dataset) == 178
    assert isinstance(params, NormalizationParams)
    np.testing.assert_allclose(params.std, np.full(13, 2.0))


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    """Run the CLI from tmp_path with no EVAL_* / LOG_* variables; restore logging afterwards."""
    for name in (
        "EVAL_DATASET_PATH",
        "EVAL_NORMALIZATION_PATH",
        "EVAL_MODEL_PATH",
        "EVAL_ENGINE",
        "EVAL_TRIGGER",
        "EVAL_OUTPUT_IMAGE",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    configure_structlog("INFO", "json")


def _json_levels(stderr: str) -> list[str]:
    return [json.loads(line)["level"] for line in stderr.splitlines() if line.startswith("{")]


def test_cli_missing_model_returns_1(cli_env, capsys):
    """Missing model: exit status 1 and exactly one ERROR line naming the model."""
    code = run_evaluation.main(["--model", "missing.joblib"])
    assert code == 1
    out, err = capsys.readouterr()
    assert "Failed" not in out
    error_lines = [line for line in err.splitlines() if line.startswith("ERROR:")]
    assert len(error_lines) == 1
    assert "Failed to initialize model" in error_lines[0]
    assert _json_levels(err).count("error") == 1


def test_cli_relative_flag_matches_env_variable(cli_env, monkeypatch, capsys):
    """--model and EVAL_MODEL_PATH with the same relative value name the same file."""
    run_evaluation.main(["--model", "models/m.joblib"])
    from_flag = capsys.readouterr().err

    monkeypatch.setenv("EVAL_MODEL_PATH", "models/m.joblib")
    run_evaluation.main([])
    from_env = capsys.readouterr().err

    expected = str(cli_env / "models" / "m.joblib")
    assert expected in from_flag
    assert expected in from_env


def test_cli_log_level_from_dotenv(cli_env, capsys):
    """LOG_LEVEL in the working directory's .env applies to the whole run."""
    (cli_env / ".env").write_text("LOG_LEVEL=ERROR\n", encoding="utf-8")
    code = run_evaluation.main(["--model", "missing.joblib"])
    assert code == 1
    levels = _json_levels(capsys.readouterr().err)
    assert levels == ["error"]


def test_cli_log_level_flag_overrides_dotenv(cli_env, capsys):
    (cli_env / ".env").write_text("LOG_LEVEL=ERROR\n", encoding="utf-8")
    run_evaluation.main(["--model", "missing.joblib", "--log-level", "INFO"])
    assert "info" in _json_levels(capsys.readouterr().err)
