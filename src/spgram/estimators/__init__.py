"""Spectral estimators exposed by spgram."""

from .accumulators import ExponentialAveraging
from .core import (
    AccumulationRequest,
    AccumulationStrategy,
    BaseSpectralEstimator,
    ConfigurationError,
    RegistryError,
    SpectrumOutput,
    SpgramConfig,
    TransformEngine,
    available_engines,
    create_transform_engine,
)
from .factory import available_estimators, create_estimator, spgram_config_from_params
from .spgram import SpectralPeriodogram

__all__ = [
    "AccumulationRequest",
    "AccumulationStrategy",
    "BaseSpectralEstimator",
    "ConfigurationError",
    "ExponentialAveraging",
    "RegistryError",
    "SpectralPeriodogram",
    "SpectrumOutput",
    "SpgramConfig",
    "TransformEngine",
    "available_engines",
    "available_estimators",
    "create_estimator",
    "create_transform_engine",
    "spgram_config_from_params",
]
