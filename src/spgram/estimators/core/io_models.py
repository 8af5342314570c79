"""Typed data models shared by estimator implementations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class SpgramConfig:
    """Immutable spectral periodogram configuration.

    Parameters
    ----------
    nfft:
        Transform size ``N`` (at least 2).
    window_len:
        Number of most recent samples in each analysis window, ``1 <= M <= N``.
        Transform inputs are zero-padded from ``M`` to ``N``.
    delay:
        Number of new samples between consecutive transforms (at least 1).
        ``delay > window_len`` is allowed and leaves unanalyzed gaps.
    alpha:
        Exponential averaging factor in ``(0, 1]``.
    """

    nfft: int
    window_len: int
    delay: int
    alpha: float

    def __post_init__(self) -> None:
        if self.nfft < 2:
            raise ConfigurationError("fft size must be at least 2")
        if self.window_len > self.nfft:
            raise ConfigurationError("window size cannot exceed fft size")
        if self.window_len < 1:
            raise ConfigurationError("window size must be at least 1")
        if self.delay < 1:
            raise ConfigurationError("delay must be greater than zero")
        if not 0.0 < self.alpha <= 1.0:
            raise ConfigurationError("alpha must be in (0,1]")

    @classmethod
    def simple(cls, nfft: int, alpha: float) -> "SpgramConfig":
        """Derive ``window_len = nfft // 4`` and ``delay = nfft // 8``."""
        nfft = int(nfft)
        return cls(nfft=nfft, window_len=nfft // 4, delay=nfft // 8, alpha=alpha)

    @property
    def overlap(self) -> int:
        """Samples shared by consecutive windows (negative for gaps)."""
        return self.window_len - self.delay


@dataclass(slots=True)
class AccumulationRequest:
    """Input container for spectrum accumulation strategies."""

    psd: np.ndarray
    magnitude: np.ndarray
    n_transforms: int


@dataclass(slots=True)
class SpectrumOutput:
    """Spectrum query result.

    Parameters
    ----------
    spectrum_db:
        Zero-centered spectrum in dB, ``(nfft,)`` for a single query or
        ``(n_chunks, nfft)`` for a stream.
    n_transforms:
        Transforms accumulated since the last reset.
    n_samples:
        Samples consumed by the call that produced this output.
    frequencies:
        Optional normalized bin frequencies matching ``spectrum_db`` order.
    metadata:
        Free-form estimator metadata.
    """

    spectrum_db: np.ndarray
    n_transforms: int = 0
    n_samples: int = 0
    frequencies: np.ndarray | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
