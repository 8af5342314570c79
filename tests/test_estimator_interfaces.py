import numpy as np
import pytest

from spgram import (
    ConfigurationError,
    RegistryError,
    SpectralPeriodogram,
    SpectrumOutput,
    available_estimators,
    create_estimator,
)
from spgram.estimators import spgram_config_from_params


def test_forward_pushes_and_returns_typed_output() -> None:
    est = SpectralPeriodogram.create(nfft=32, alpha=0.5)
    x = np.exp(2j * np.pi * 0.125 * np.arange(40))

    out = est(x, sample_rate=8.0)

    assert isinstance(out, SpectrumOutput)
    assert out.n_samples == 40
    assert out.n_transforms == 10
    np.testing.assert_array_equal(out.spectrum_db, est.execute())
    assert out.frequencies is not None
    np.testing.assert_allclose(out.frequencies, est.frequencies(8.0))


def test_write_is_an_alias_for_push() -> None:
    x = np.arange(24, dtype=np.complex128)
    a = SpectralPeriodogram.create(nfft=32, alpha=0.5)
    b = SpectralPeriodogram.create(nfft=32, alpha=0.5)
    a.push(x)
    b.write(x)
    np.testing.assert_array_equal(a.psd, b.psd)


def test_process_stream_stacks_one_row_per_chunk() -> None:
    rng = np.random.default_rng(0)
    x = rng.standard_normal(100) + 1j * rng.standard_normal(100)
    est = SpectralPeriodogram.create(nfft=16, alpha=0.5)

    out = est.process_stream(x, chunk_size=30)

    assert out.spectrum_db.shape == (4, 16)
    assert out.n_transforms == 50
    assert out.metadata == {"chunk_size": 30}
    assert out.frequencies is None
    np.testing.assert_array_equal(out.spectrum_db[-1], est.execute())


def test_process_stream_rejects_bad_input() -> None:
    est = SpectralPeriodogram.create(nfft=16, alpha=0.5)
    with pytest.raises(ValueError, match="at least one sample"):
        est.process_stream(np.empty(0, dtype=np.complex128), chunk_size=4)
    with pytest.raises(ValueError, match="chunk_size"):
        est.process_stream(np.ones(4), chunk_size=0)


def test_scalar_and_empty_pushes_are_accepted() -> None:
    est = SpectralPeriodogram(8, 2, 1, 0.5)
    est.push(np.empty(0))
    assert est.n_transforms == 0
    est.push(1.0 + 1.0j)
    assert est.n_transforms == 1


def test_process_stream_reports_each_chunk() -> None:
    est = SpectralPeriodogram(16, 8, 4, 0.5)
    seen: list[tuple[int, int, int]] = []

    def record(index: int, samples_seen: int, spectrum: np.ndarray) -> None:
        assert spectrum.shape == (16,)
        seen.append((index, samples_seen, est.n_transforms))

    out = est.process_stream(np.ones(10), chunk_size=4, on_chunk=record)

    assert seen == [(0, 4, 1), (1, 8, 2), (2, 10, 2)]
    assert out.spectrum_db.shape == (3, 16)


def test_create_estimator_fills_default_window_and_delay() -> None:
    est = create_estimator("spgram", {"nfft": 64, "alpha": 0.3})
    assert isinstance(est, SpectralPeriodogram)
    assert est.config.window_len == 16
    assert est.config.delay == 8
    assert est.config.alpha == pytest.approx(0.3)

    explicit = create_estimator(
        "spgram",
        {"nfft": 64, "window_len": 40, "delay": 10, "alpha": 0.3, "backend": "scipy"},
    )
    assert explicit.config.window_len == 40
    assert explicit.config.delay == 10


def test_spgram_config_from_params_requires_nfft() -> None:
    with pytest.raises(ConfigurationError, match="nfft is required"):
        spgram_config_from_params({"alpha": 0.5})
    config = spgram_config_from_params({"nfft": 32, "window_len": None})
    assert (config.window_len, config.delay, config.alpha) == (8, 4, 0.1)


def test_create_estimator_rejects_unknown_names() -> None:
    assert available_estimators() == ["spgram"]
    with pytest.raises(RegistryError, match="Available estimators: spgram"):
        create_estimator("welch")
    with pytest.raises(ConfigurationError, match="Unknown backend 'fftw'"):
        create_estimator("spgram", {"nfft": 16, "backend": "fftw"})


def test_unknown_backend_produces_no_estimator() -> None:
    with pytest.raises(RegistryError, match="transform engine"):
        SpectralPeriodogram(16, 8, 4, 0.5, backend="fftw")
