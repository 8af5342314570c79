"""Core abstractions for streaming spectral estimators.

This package provides shared building blocks:

- Typed configuration and output containers.
- Base estimator class.
- Strategy interfaces.
- Transform engines for NumPy/SciPy/Torch FFTs.
"""

from .backend import (
    NumpyTransformEngine,
    ScipyTransformEngine,
    TorchTransformEngine,
    TransformEngine,
    available_engines,
    create_transform_engine,
)
from .base import BaseSpectralEstimator, zero_centered_order
from .errors import ConfigurationError, RegistryError
from .io_models import AccumulationRequest, SpectrumOutput, SpgramConfig
from .strategies import AccumulationStrategy

__all__ = [
    "TransformEngine",
    "NumpyTransformEngine",
    "ScipyTransformEngine",
    "TorchTransformEngine",
    "available_engines",
    "create_transform_engine",
    "BaseSpectralEstimator",
    "zero_centered_order",
    "ConfigurationError",
    "RegistryError",
    "AccumulationRequest",
    "SpectrumOutput",
    "SpgramConfig",
    "AccumulationStrategy",
]
