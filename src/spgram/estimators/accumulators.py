"""Spectrum accumulation strategies."""

from __future__ import annotations

import numpy as np

from .core import AccumulationRequest, AccumulationStrategy, ConfigurationError


class ExponentialAveraging(AccumulationStrategy):
    """One-pole exponential moving average of magnitude spectra.

    The first spectrum after a reset is taken as-is; later spectra update

    $$
       P_k \\leftarrow (1 - \\alpha) P_k + \\alpha |X_k|
    $$
    """

    def __init__(self, alpha: float) -> None:
        if not 0.0 < alpha <= 1.0:
            raise ConfigurationError("alpha must be in (0,1]")
        self.alpha = float(alpha)

    def accumulate(self, request: AccumulationRequest) -> np.ndarray:
        if request.n_transforms == 0:
            return np.array(request.magnitude, copy=True)
        return (1.0 - self.alpha) * request.psd + self.alpha * request.magnitude
