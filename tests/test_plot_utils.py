from pathlib import Path

import matplotlib
import numpy as np
import pytest

from spgram.visualization import plot_spectrum, save_waterfall


matplotlib.use("Agg")


def test_plot_spectrum_returns_figure() -> None:
    spectrum = np.random.randn(33)
    fig = plot_spectrum(spectrum, ymin=-40, ymax=20)
    assert fig is not None


def test_plot_spectrum_validates_frequency_axis() -> None:
    with pytest.raises(ValueError, match="frequencies shape"):
        plot_spectrum(np.zeros(8), np.zeros(4))
    with pytest.raises(ValueError, match="1-D"):
        plot_spectrum(np.zeros((2, 8)))


def test_save_waterfall_writes_file(tmp_path: Path) -> None:
    spectra = np.random.randn(12, 16)
    spectra[0, 0] = -np.inf
    saved = save_waterfall(spectra, tmp_path / "waterfall.pdf")
    assert saved.exists()
