import numpy as np
import pytest

from spgram.signal import hamming, spgram_window


def test_hamming_matches_closed_form() -> None:
    n = 16
    i = np.arange(n)
    expected = 0.53836 - 0.46164 * np.cos(2.0 * np.pi * i / (n - 1))
    np.testing.assert_allclose(hamming(n), expected, rtol=1e-12, atol=1e-15)


def test_hamming_is_symmetric() -> None:
    w = hamming(9)
    np.testing.assert_allclose(w, w[::-1], rtol=0.0, atol=1e-15)
    assert w[4] == pytest.approx(1.0)


def test_single_sample_window_is_unity() -> None:
    np.testing.assert_allclose(hamming(1), [1.0])
    np.testing.assert_allclose(spgram_window(1), [1.0])


def test_spgram_window_is_scaled_and_read_only() -> None:
    w = spgram_window(8)
    np.testing.assert_allclose(w, hamming(8) / 8.0)
    with pytest.raises(ValueError):
        w[0] = 1.0


def test_hamming_rejects_empty_length() -> None:
    with pytest.raises(ValueError, match="positive"):
        hamming(0)
