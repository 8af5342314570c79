"""Strategy interfaces for estimator component injection."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .io_models import AccumulationRequest


class AccumulationStrategy(ABC):
    """Blends a new magnitude spectrum into the running estimate."""

    @abstractmethod
    def accumulate(self, request: AccumulationRequest) -> np.ndarray:
        """Return the updated running spectrum."""
