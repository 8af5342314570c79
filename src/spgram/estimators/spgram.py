"""Streaming spectral periodogram."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from ..signal import SlidingWindow, spgram_window
from .accumulators import ExponentialAveraging
from .core import (
    AccumulationRequest,
    BaseSpectralEstimator,
    SpgramConfig,
    create_transform_engine,
    zero_centered_order,
)

LOGGER = logging.getLogger(__name__)


class SpectralPeriodogram(BaseSpectralEstimator):
    """Running magnitude spectrum of a complex sample stream.

    Procedure
    ---------
    ```text

       input: sample stream x[0], x[1], ...
       every `delay` samples:
           u <- last `window_len` samples, oldest first
           X <- FFT_nfft([u * w, 0, ..., 0])
           P <- |X|                             (first transform)
           P <- (1 - alpha) P + alpha |X|       (afterwards)
       on query:
           S[i] <- 20 log10 |P[(i + nfft // 2) mod nfft]|
    ```

    with ``w[i] = hamming(i, window_len) / window_len``. Queries before the
    first transform return zeros.

    Examples
    --------
    ```python

       import numpy as np
       from spgram import SpectralPeriodogram

       t = np.arange(4096)
       x = np.exp(2j * np.pi * 0.125 * t)

       est = SpectralPeriodogram.create(nfft=256, alpha=0.1)
       est.push(x)
       spectrum_db = est.execute()          # (256,), DC at index 128
       freqs = est.frequencies(sample_rate=1.0)
    ```
    """

    def __init__(
        self,
        nfft: int,
        window_len: int,
        delay: int,
        alpha: float,
        *,
        backend: str = "numpy",
    ) -> None:
        self._config = SpgramConfig(
            nfft=int(nfft),
            window_len=int(window_len),
            delay=int(delay),
            alpha=float(alpha),
        )
        n, m = self._config.nfft, self._config.window_len

        self._buffer = SlidingWindow(m)
        self._window = spgram_window(m)
        self._input = np.zeros(n, dtype=np.complex128)
        self._output = np.zeros(n, dtype=np.complex128)
        self._psd = np.zeros(n, dtype=np.float64)
        self._order = zero_centered_order(n)
        self._engine = create_transform_engine(backend, n, self._input, self._output)
        self.accumulation = ExponentialAveraging(self._config.alpha)

        LOGGER.debug(
            "Created spectral periodogram nfft=%d window_len=%d delay=%d "
            "alpha=%g backend=%s",
            n,
            m,
            self._config.delay,
            self._config.alpha,
            backend,
        )
        self.reset()

    @classmethod
    def create(
        cls, nfft: int, alpha: float, *, backend: str = "numpy"
    ) -> "SpectralPeriodogram":
        """Build with ``window_len = nfft // 4`` and ``delay = nfft // 8``."""
        config = SpgramConfig.simple(nfft, alpha)
        return cls.from_config(config, backend=backend)

    @classmethod
    def create_advanced(
        cls,
        nfft: int,
        window_len: int,
        delay: int,
        alpha: float,
        *,
        backend: str = "numpy",
    ) -> "SpectralPeriodogram":
        """Build with every parameter given explicitly."""
        return cls(nfft, window_len, delay, alpha, backend=backend)

    @classmethod
    def from_config(
        cls, config: SpgramConfig, *, backend: str = "numpy"
    ) -> "SpectralPeriodogram":
        return cls(
            config.nfft,
            config.window_len,
            config.delay,
            config.alpha,
            backend=backend,
        )

    @property
    def config(self) -> SpgramConfig:
        return self._config

    @property
    def nfft(self) -> int:
        return self._config.nfft

    @property
    def window(self) -> np.ndarray:
        """Read-only taper applied to each analysis window."""
        return self._window

    @property
    def psd(self) -> np.ndarray:
        """Copy of the running magnitude spectrum in natural bin order."""
        return self._psd.copy()

    @property
    def n_transforms(self) -> int:
        return self._n_transforms

    def reset(self) -> None:
        """Clear buffered samples and forget the accumulated spectrum."""
        self._buffer.clear()
        self._index = 0
        self._n_transforms = 0

    def push(self, samples: ArrayLike) -> None:
        """Consume samples in order, transforming every ``delay`` samples."""
        values = np.asarray(samples, dtype=np.complex128).ravel()
        delay = self._config.delay
        pos = 0
        while pos < values.size:
            step = min(delay - self._index, values.size - pos)
            self._buffer.write(values[pos : pos + step])
            self._index += step
            pos += step
            if self._index == delay:
                self._index = 0
                self._transform()

    def _transform(self) -> None:
        m = self._config.window_len
        np.multiply(self._buffer.read(), self._window, out=self._input[:m])
        self._engine.execute()

        magnitude = np.abs(self._output)
        self._psd[:] = self.accumulation.accumulate(
            AccumulationRequest(
                psd=self._psd,
                magnitude=magnitude,
                n_transforms=self._n_transforms,
            )
        )
        self._n_transforms += 1

    def execute(self) -> np.ndarray:
        """Return the zero-centered magnitude spectrum in dB.

        Zeros until the first transform has run; a zero bin maps to ``-inf``.
        """
        if self._n_transforms == 0:
            return np.zeros(self._config.nfft, dtype=np.float64)
        with np.errstate(divide="ignore"):
            return 20.0 * np.log10(np.abs(self._psd[self._order]))
