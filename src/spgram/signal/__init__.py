"""Signal-level building blocks: windows, sliding buffers and file input."""

from .io import iq_to_complex, load_samples
from .sliding_window import SlidingWindow
from .windows import hamming, spgram_window

__all__ = [
    "SlidingWindow",
    "hamming",
    "iq_to_complex",
    "load_samples",
    "spgram_window",
]
