from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

from spgram import load_samples
from spgram.signal import iq_to_complex


def test_load_complex_npy(tmp_path: Path) -> None:
    x = np.arange(6) + 1j * np.arange(6)[::-1]
    path = tmp_path / "x.npy"
    np.save(path, x)

    samples, rate = load_samples(path)

    np.testing.assert_array_equal(samples, x)
    assert samples.dtype == np.complex128
    assert rate is None


def test_load_iq_columns_from_npy(tmp_path: Path) -> None:
    iq = np.array([[1.0, 2.0], [3.0, -4.0]])
    path = tmp_path / "iq.npy"
    np.save(path, iq)
    samples, _ = load_samples(path)
    np.testing.assert_array_equal(samples, [1.0 + 2.0j, 3.0 - 4.0j])


def test_load_stereo_wav_as_iq(tmp_path: Path) -> None:
    iq = np.array([[0.5, -0.25], [0.0, 0.125], [-0.5, 0.5]])
    path = tmp_path / "iq.wav"
    sf.write(path, iq, 8000, subtype="FLOAT")

    samples, rate = load_samples(path)

    assert rate == 8000.0
    np.testing.assert_allclose(samples, iq[:, 0] + 1j * iq[:, 1])


def test_load_mono_wav_as_real(tmp_path: Path) -> None:
    path = tmp_path / "mono.wav"
    sf.write(path, np.array([0.5, -0.5, 0.25]), 16000, subtype="FLOAT")
    samples, _ = load_samples(path)
    np.testing.assert_allclose(samples, [0.5, -0.5, 0.25])


def test_iq_to_complex_requires_two_columns() -> None:
    with pytest.raises(ValueError, match="n_samples, 2"):
        iq_to_complex(np.zeros((4, 3)))


def test_load_rejects_higher_rank_npy(tmp_path: Path) -> None:
    path = tmp_path / "cube.npy"
    np.save(path, np.zeros((2, 2, 2)))
    with pytest.raises(ValueError, match="shape"):
        load_samples(path)
