"""Base classes for streaming spectral estimators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike

from .io_models import SpectrumOutput


def zero_centered_order(nfft: int) -> np.ndarray:
    """Return bin indices ``(i + nfft // 2) % nfft`` for ``i in range(nfft)``.

    Indexing a natural-order spectrum with this array moves the zero-frequency
    bin to position ``nfft - nfft // 2``.
    """
    return (np.arange(nfft) + nfft // 2) % nfft


class BaseSpectralEstimator(ABC):
    """Common contract for sample-driven spectral estimators."""

    @property
    @abstractmethod
    def nfft(self) -> int:
        """Return number of frequency bins."""

    @property
    @abstractmethod
    def n_transforms(self) -> int:
        """Return transforms accumulated since the last reset."""

    @abstractmethod
    def reset(self) -> None:
        """Reset runtime state, keeping configuration."""

    @abstractmethod
    def push(self, samples: ArrayLike) -> None:
        """Consume samples in order."""

    @abstractmethod
    def execute(self) -> np.ndarray:
        """Return the current zero-centered spectrum in dB."""

    def write(self, samples: ArrayLike) -> None:
        """Alias for :meth:`push`."""
        self.push(samples)

    def frequencies(self, sample_rate: float = 1.0) -> np.ndarray:
        """Return bin-center frequencies in the order used by :meth:`execute`."""
        if sample_rate <= 0:
            raise ValueError("sample_rate must be positive")
        freqs = np.fft.fftfreq(self.nfft, d=1.0 / float(sample_rate))
        return freqs[zero_centered_order(self.nfft)]

    def __call__(self, *args: Any, **kwargs: Any) -> SpectrumOutput:
        """Alias for :meth:`forward`."""
        return self.forward(*args, **kwargs)

    def forward(
        self, samples: ArrayLike, *, sample_rate: float | None = None
    ) -> SpectrumOutput:
        """Push ``samples`` and return the updated spectrum."""
        values = np.asarray(samples)
        self.push(values)
        return SpectrumOutput(
            spectrum_db=self.execute(),
            n_transforms=self.n_transforms,
            n_samples=int(values.size),
            frequencies=(
                None if sample_rate is None else self.frequencies(sample_rate)
            ),
        )

    def process_stream(
        self,
        stream: ArrayLike,
        *,
        chunk_size: int,
        sample_rate: float | None = None,
        on_chunk: Callable[[int, int, np.ndarray], None] | None = None,
    ) -> SpectrumOutput:
        """Push ``stream`` in chunks and stack one spectrum row per chunk.

        ``on_chunk(index, samples_seen, spectrum_db)`` is called after each
        chunk, while ``n_transforms`` still reflects that chunk.
        """
        values = np.asarray(stream).ravel()
        if chunk_size <= 0:
            raise ValueError("chunk_size must be a positive integer")
        if values.size == 0:
            raise ValueError("stream must contain at least one sample")

        rows = []
        for index, start in enumerate(range(0, values.size, chunk_size)):
            chunk = values[start : start + chunk_size]
            self.push(chunk)
            spectrum = self.execute()
            rows.append(spectrum)
            if on_chunk is not None:
                on_chunk(index, start + chunk.size, spectrum)
        return SpectrumOutput(
            spectrum_db=np.stack(rows, axis=0),
            n_transforms=self.n_transforms,
            n_samples=int(values.size),
            frequencies=(
                None if sample_rate is None else self.frequencies(sample_rate)
            ),
            metadata={"chunk_size": int(chunk_size)},
        )
