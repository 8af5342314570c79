"""spgram public API."""

from .config_schema import RunConfig, load_run_config, save_run_config
from .estimators import (
    BaseSpectralEstimator,
    ConfigurationError,
    ExponentialAveraging,
    RegistryError,
    SpectralPeriodogram,
    SpectrumOutput,
    SpgramConfig,
    available_estimators,
    create_estimator,
)
from .logging_utils import JsonlLogger, log_steps_jsonl
from .signal import SlidingWindow, load_samples

__all__ = [
    "BaseSpectralEstimator",
    "ConfigurationError",
    "ExponentialAveraging",
    "RegistryError",
    "SpectralPeriodogram",
    "SpectrumOutput",
    "SpgramConfig",
    "SlidingWindow",
    "available_estimators",
    "create_estimator",
    "load_samples",
    "RunConfig",
    "load_run_config",
    "save_run_config",
    "JsonlLogger",
    "log_steps_jsonl",
]
