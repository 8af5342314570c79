"""Build estimators from plain parameter mappings (config files, CLI)."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from .core import (
    BaseSpectralEstimator,
    ConfigurationError,
    RegistryError,
    SpgramConfig,
    available_engines,
)
from .spgram import SpectralPeriodogram


def spgram_config_from_params(params: Mapping[str, Any]) -> SpgramConfig:
    """Resolve periodogram parameters, filling unset sizes from ``nfft``.

    ``window_len`` and ``delay`` that are missing or ``None`` become
    ``nfft // 4`` and ``nfft // 8``, as in :meth:`SpectralPeriodogram.create`.
    """
    if params.get("nfft") is None:
        raise ConfigurationError("nfft is required")
    nfft = int(params["nfft"])
    window_len = params.get("window_len")
    delay = params.get("delay")
    return SpgramConfig(
        nfft=nfft,
        window_len=nfft // 4 if window_len is None else int(window_len),
        delay=nfft // 8 if delay is None else int(delay),
        alpha=float(params.get("alpha", 0.1)),
    )


def _resolve_backend(params: Mapping[str, Any]) -> str:
    backend = str(params.get("backend", "numpy"))
    if backend not in available_engines():
        raise ConfigurationError(
            f"Unknown backend '{backend}'. "
            f"Available engines: {', '.join(available_engines())}"
        )
    return backend


def _build_spgram(params: Mapping[str, Any]) -> SpectralPeriodogram:
    config = spgram_config_from_params(params)
    return SpectralPeriodogram.from_config(config, backend=_resolve_backend(params))


_FACTORIES: dict[str, Callable[[Mapping[str, Any]], BaseSpectralEstimator]] = {
    "spgram": _build_spgram,
}


def available_estimators() -> list[str]:
    return sorted(_FACTORIES)


def create_estimator(
    name: str, params: Mapping[str, Any] | None = None
) -> BaseSpectralEstimator:
    """Create the estimator registered as ``name`` from ``params``."""
    if name not in _FACTORIES:
        available = ", ".join(available_estimators())
        raise RegistryError(
            f"Unknown estimator '{name}'. Available estimators: {available}"
        )
    return _FACTORIES[name]({} if params is None else params)
