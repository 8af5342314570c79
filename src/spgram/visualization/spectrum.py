"""Plotting utilities for periodogram outputs."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from ..estimators.core import zero_centered_order


def plot_spectrum(
    spectrum_db: np.ndarray,
    frequencies: np.ndarray | None = None,
    *,
    ymin: float | None = None,
    ymax: float | None = None,
) -> plt.Figure:
    """Plot one zero-centered dB spectrum."""
    if spectrum_db.ndim != 1:
        raise ValueError("spectrum_db must be a 1-D array shaped (nfft,)")
    nfft = spectrum_db.shape[0]
    if frequencies is None:
        freq_axis = np.fft.fftfreq(nfft, d=1.0 / nfft)[zero_centered_order(nfft)]
        xlabel = "bin"
    else:
        if frequencies.shape != spectrum_db.shape:
            raise ValueError(
                "frequencies shape must match spectrum_db: "
                f"got {frequencies.shape}, expected {spectrum_db.shape}"
            )
        freq_axis = frequencies
        xlabel = "frequency"

    # odd sizes start at the highest positive bin
    order = np.argsort(freq_axis, kind="stable")
    fig, ax = plt.subplots()
    ax.plot(freq_axis[order], spectrum_db[order], linewidth=0.8)
    ax.set_xlabel(xlabel)
    ax.set_ylabel("magnitude [dB]")
    ax.set_ylim(ymin, ymax)
    ax.grid(True, linewidth=0.3)
    return fig


def save_waterfall(
    spectra_db: np.ndarray,
    path: str | Path,
    *,
    vmin: float = -80.0,
    vmax: float = 0.0,
) -> Path:
    """Save a frame-first ``(n_frames, nfft)`` stack of dB spectra as an image."""
    if spectra_db.ndim != 2:
        raise ValueError("spectra_db must be 2-D shaped (n_frames, nfft)")

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    finite = np.where(np.isfinite(spectra_db), spectra_db, vmin)
    plt.imshow(finite, vmin=vmin, vmax=vmax, aspect="auto", rasterized=True)
    plt.xlabel("bin")
    plt.ylabel("frame")
    plt.savefig(out)
    plt.close()
    return out
