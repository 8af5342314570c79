"""Tapering windows used by the spectral estimators."""

from __future__ import annotations

import numpy as np
from scipy.signal import windows

HAMMING_ALPHA = 0.53836


def hamming(length: int) -> np.ndarray:
    """Return a symmetric Hamming window of ``length`` samples.

    Uses the optimal equiripple coefficients
    ``0.53836 - 0.46164 * cos(2 pi n / (length - 1))``. A single-sample
    window is ``[1.0]``.
    """
    if length < 1:
        raise ValueError("window length must be a positive integer")
    return windows.general_hamming(int(length), HAMMING_ALPHA, sym=True)


def spgram_window(length: int) -> np.ndarray:
    """Return the periodogram taper ``hamming(i, length) / length``.

    The returned array is read-only.
    """
    taper = hamming(length) / float(length)
    taper.flags.writeable = False
    return taper
