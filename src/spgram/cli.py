"""Command-line entry point for running a periodogram over a sample file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .config_schema import estimator_params, load_run_config
from .estimators import BaseSpectralEstimator, available_estimators, create_estimator
from .logging_utils import JsonlLogger
from .signal import load_samples
from .visualization import plot_spectrum, save_waterfall

LOGGER = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure logging format and level for CLI commands."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spgram",
        description="Streaming spectral periodogram of a complex sample file",
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="Sample file (.npy, or an audio file with I/Q as two channels)",
    )
    parser.add_argument(
        "--config", type=Path, default=None, help="YAML run configuration"
    )
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Dotlist override, e.g. estimator.nfft=512 (repeatable)",
    )
    parser.add_argument(
        "--output", type=Path, default=None, help="Save final dB spectrum (.npy)"
    )
    parser.add_argument(
        "--plot", type=Path, default=None, help="Save final spectrum figure"
    )
    parser.add_argument(
        "--waterfall", type=Path, default=None, help="Save per-chunk waterfall"
    )
    parser.add_argument(
        "--log-jsonl", type=Path, default=None, help="Append per-chunk records"
    )
    parser.add_argument("--log-level", type=str, default=None)
    parser.add_argument(
        "--list-estimators",
        action="store_true",
        help="Print available estimator names and exit",
    )
    return parser


def chunk_record_writer(
    estimator: BaseSpectralEstimator, logger: JsonlLogger
) -> Callable[[int, int, np.ndarray], None]:
    """Return a ``process_stream`` callback appending one record per chunk."""

    def write(index: int, samples_seen: int, spectrum: np.ndarray) -> None:
        taken = estimator.n_transforms > 0
        peak = int(np.argmax(spectrum))
        logger.write(
            {
                "chunk": index,
                "samples_seen": samples_seen,
                "n_transforms": estimator.n_transforms,
                "peak_index": peak if taken else None,
                "peak_db": spectrum[peak] if taken else None,
            }
        )

    return write


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_estimators:
        for name in available_estimators():
            print(name)
        return

    if args.input is None:
        parser.print_help()
        return

    cfg = load_run_config(args.config, overrides=args.set or None)
    configure_logging(args.log_level or cfg.runtime.log_level)

    samples, file_rate = load_samples(args.input)
    sample_rate = cfg.stream.sample_rate or file_rate or 1.0
    estimator = create_estimator(cfg.estimator.name, estimator_params(cfg.estimator))
    jsonl_path = args.log_jsonl or cfg.runtime.jsonl_log
    on_chunk = (
        chunk_record_writer(estimator, JsonlLogger(jsonl_path)) if jsonl_path else None
    )

    LOGGER.info(
        "Processing %d samples from %s with %s (nfft=%d)",
        samples.size,
        args.input,
        cfg.estimator.name,
        estimator.nfft,
    )
    out = estimator.process_stream(
        samples,
        chunk_size=cfg.stream.chunk_size,
        sample_rate=sample_rate,
        on_chunk=on_chunk,
    )
    final = out.spectrum_db[-1]
    if out.n_transforms == 0:
        LOGGER.warning(
            "No transform was taken; input holds fewer samples than one stride."
        )
    else:
        peak = int(np.argmax(final))
        LOGGER.info(
            "Transforms: %d | peak %.2f dB at %.6g",
            out.n_transforms,
            final[peak],
            out.frequencies[peak],
        )

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        np.save(args.output, final)
        LOGGER.info("Saved spectrum: %s", args.output)
    if args.plot is not None:
        args.plot.parent.mkdir(parents=True, exist_ok=True)
        fig = plot_spectrum(final, out.frequencies)
        fig.savefig(args.plot)
        plt.close(fig)
        LOGGER.info("Saved spectrum plot: %s", args.plot)
    if args.waterfall is not None:
        save_waterfall(out.spectrum_db, args.waterfall)
        LOGGER.info("Saved waterfall: %s", args.waterfall)


if __name__ == "__main__":
    main()
