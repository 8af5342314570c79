"""Sample loading helpers for files on disk."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import soundfile as sf


def iq_to_complex(data: np.ndarray) -> np.ndarray:
    """Combine a ``(n_samples, 2)`` in-phase/quadrature array into complex."""
    if data.ndim != 2 or data.shape[1] != 2:
        raise ValueError("I/Q data must be shaped (n_samples, 2)")
    return data[:, 0].astype(np.float64) + 1j * data[:, 1].astype(np.float64)


def load_samples(path: str | Path) -> tuple[np.ndarray, float | None]:
    """Load a 1-D complex sample stream.

    ``.npy`` files hold the samples directly (real or complex, 1-D, or a
    2-column I/Q array). Any other extension is read with ``soundfile``: a
    two-channel file is interpreted as I/Q, a mono file as a real signal.

    Returns
    -------
    samples : ndarray
        Complex128 samples.
    sample_rate : float or None
        Sampling rate when the file format records one.
    """
    file_path = Path(path)
    if file_path.suffix.lower() == ".npy":
        data = np.load(file_path, allow_pickle=False)
        sample_rate = None
    else:
        data, rate = sf.read(file_path, always_2d=True)
        sample_rate = float(rate)
        if data.shape[1] == 1:
            data = data[:, 0]

    if data.ndim == 2:
        samples = iq_to_complex(data)
    elif data.ndim == 1:
        samples = data.astype(np.complex128)
    else:
        raise ValueError(
            f"Expected 1-D samples or (n_samples, 2) I/Q data in {file_path}, "
            f"got shape {data.shape}"
        )
    return samples, sample_rate
