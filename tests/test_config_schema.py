from __future__ import annotations

from pathlib import Path

import pytest
from omegaconf.errors import ConfigKeyError

from spgram.config_schema import (
    estimator_params,
    load_run_config,
    parse_estimator_config,
    parse_run_config,
    run_config_to_dict,
    save_run_config,
)


def test_parse_run_config_applies_defaults() -> None:
    cfg = parse_run_config(
        {
            "estimator": {"nfft": 256, "alpha": 0.5},
            "runtime": {"log_level": "DEBUG"},
        }
    )
    assert cfg.estimator.name == "spgram"
    assert cfg.estimator.nfft == 256
    assert cfg.estimator.window_len is None
    assert cfg.estimator.backend == "numpy"
    assert cfg.stream.chunk_size == 4096
    assert cfg.runtime.log_level == "DEBUG"
    assert cfg.runtime.jsonl_log is None


def test_parse_run_config_rejects_unknown_key() -> None:
    with pytest.raises(ConfigKeyError):
        parse_run_config({"estimator": {"unknown_field": 1}})


def test_estimator_params_drop_name() -> None:
    cfg = parse_estimator_config({"nfft": 128, "delay": 4})
    assert estimator_params(cfg) == {
        "nfft": 128,
        "window_len": None,
        "delay": 4,
        "alpha": 0.1,
        "backend": "numpy",
    }


def test_run_config_to_dict_round_trips_sections() -> None:
    data = run_config_to_dict(parse_run_config({}))
    assert set(data) == {"estimator", "stream", "runtime"}
    assert data["stream"]["sample_rate"] is None


def test_save_and_load_run_config_with_overrides(tmp_path: Path) -> None:
    path = tmp_path / "cfg" / "run.yaml"
    save_run_config(path, parse_run_config({"estimator": {"nfft": 256}}))

    cfg = load_run_config(path, overrides=["estimator.nfft=512", ""])

    assert cfg.estimator.nfft == 512
    assert cfg.estimator.alpha == pytest.approx(0.1)
    assert cfg.stream.chunk_size == 4096


def test_load_run_config_from_overrides_only() -> None:
    cfg = load_run_config(
        overrides=["estimator.backend=scipy", "stream.chunk_size=8"]
    )
    assert cfg.estimator.backend == "scipy"
    assert cfg.stream.chunk_size == 8
    assert cfg.estimator.nfft == 1024


def test_load_run_config_without_sources_gives_defaults() -> None:
    assert load_run_config() == parse_run_config({})


def test_load_run_config_rejects_unknown_override() -> None:
    with pytest.raises(ConfigKeyError):
        load_run_config(overrides=["estimator.window=hann"])


def test_load_run_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(TypeError, match="Expected mapping"):
        load_run_config(path)
