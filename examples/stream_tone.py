"""Example: track a two-tone I/Q stream with a running periodogram.

Usage
-----
``uv run python examples/stream_tone.py --output-dir outputs``
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from spgram import SpectralPeriodogram
from spgram.visualization import plot_spectrum, save_waterfall


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a periodogram over a synthetic two-tone I/Q stream.",
    )
    parser.add_argument("--nfft", type=int, default=512, help="FFT size.")
    parser.add_argument("--alpha", type=float, default=0.05, help="Averaging factor.")
    parser.add_argument(
        "--sample-rate", type=float, default=48000.0, help="Sample rate in Hz."
    )
    parser.add_argument(
        "--duration", type=float, default=1.0, help="Stream length in seconds."
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("outputs"),
        help="Output directory for figures.",
    )
    return parser.parse_args(argv)


def synth_two_tone(n_samples: int, sample_rate: float, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    t = np.arange(n_samples) / sample_rate
    x = np.exp(2j * np.pi * 3000.0 * t) + 0.1 * np.exp(-2j * np.pi * 9000.0 * t)
    noise = rng.standard_normal(n_samples) + 1j * rng.standard_normal(n_samples)
    return x + 0.01 * noise


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    x = synth_two_tone(int(args.duration * args.sample_rate), args.sample_rate)

    est = SpectralPeriodogram.create(nfft=args.nfft, alpha=args.alpha)
    out = est.process_stream(x, chunk_size=args.nfft * 4, sample_rate=args.sample_rate)

    args.output_dir.mkdir(parents=True, exist_ok=True)
    fig = plot_spectrum(out.spectrum_db[-1], out.frequencies)
    fig.savefig(args.output_dir / "spectrum.pdf")
    plt.close(fig)
    save_waterfall(out.spectrum_db, args.output_dir / "waterfall.pdf")
    print(f"transforms: {out.n_transforms}, frames: {out.spectrum_db.shape[0]}")


if __name__ == "__main__":
    main()
