"""Typed run configuration: OmegaConf schemas, YAML loading and saving."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import importlib
from pathlib import Path
from typing import Any, Iterable, Mapping, TypeVar, cast

import yaml

try:
    OmegaConf = importlib.import_module("omegaconf").OmegaConf
except ModuleNotFoundError as exc:  # pragma: no cover
    raise RuntimeError(
        "spgram.config_schema requires 'omegaconf'. Install dependencies with `uv sync`."
    ) from exc


@dataclass
class EstimatorConfig:
    """Estimator configuration schema.

    ``window_len``/``delay`` left as ``None`` use ``nfft // 4``/``nfft // 8``.
    """

    name: str = "spgram"
    nfft: int = 1024
    window_len: int | None = None
    delay: int | None = None
    alpha: float = 0.1
    backend: str = "numpy"


@dataclass
class StreamConfig:
    """Input streaming options."""

    chunk_size: int = 4096
    sample_rate: float | None = None


@dataclass
class RuntimeConfig:
    """Runtime execution configuration schema."""

    log_level: str = "INFO"
    jsonl_log: str | None = None


@dataclass
class RunConfig:
    """Top-level spectrum run configuration schema."""

    estimator: EstimatorConfig = field(default_factory=EstimatorConfig)
    stream: StreamConfig = field(default_factory=StreamConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)


TSchema = TypeVar("TSchema")


def _decode_schema(cfg: Any, schema: type[TSchema]) -> TSchema:
    merged = OmegaConf.merge(OmegaConf.structured(schema), cfg)
    decoded = OmegaConf.to_object(merged)
    if not isinstance(decoded, schema):
        raise TypeError(f"Failed to decode config as {schema.__name__}")
    return cast(TSchema, decoded)


def parse_run_config(data: Mapping[str, object]) -> RunConfig:
    """Decode a mapping into :class:`RunConfig`."""
    return _decode_schema(OmegaConf.create(dict(data)), RunConfig)


def parse_estimator_config(data: Mapping[str, object]) -> EstimatorConfig:
    """Decode a mapping into :class:`EstimatorConfig`."""
    return _decode_schema(OmegaConf.create(dict(data)), EstimatorConfig)


def load_run_config(
    path: str | Path | None = None,
    *,
    overrides: Iterable[str] | None = None,
) -> RunConfig:
    """Load a :class:`RunConfig` from YAML and dotlist overrides.

    Either source may be absent; missing values take the schema defaults.
    Overrides such as ``estimator.nfft=512`` win over the file. Unknown keys
    raise ``omegaconf.errors.ConfigKeyError``.
    """
    cfg = OmegaConf.create({}) if path is None else OmegaConf.load(Path(path))
    if not OmegaConf.is_dict(cfg):
        raise TypeError(f"Expected mapping in {path}, got a YAML list")
    override_list = [item for item in (overrides or []) if item]
    if override_list:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(override_list))
    return _decode_schema(cfg, RunConfig)


def save_run_config(path: str | Path, config: RunConfig) -> None:
    """Write ``config`` as YAML so that :func:`load_run_config` reads it back."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(run_config_to_dict(config), handle, sort_keys=False)


def estimator_params(config: EstimatorConfig) -> dict[str, Any]:
    """Return estimator factory parameters for ``config`` (without ``name``)."""
    params = asdict(config)
    params.pop("name")
    return params


def run_config_to_dict(config: RunConfig) -> dict[str, Any]:
    """Convert :class:`RunConfig` to plain dictionary."""
    return asdict(config)
