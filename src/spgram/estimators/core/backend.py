"""Forward FFT engines bound to caller-owned input/output arrays."""

from __future__ import annotations

import importlib
from abc import ABC, abstractmethod
from typing import Callable

import numpy as np
import scipy.fft

from .errors import RegistryError


class TransformEngine(ABC):
    """Fixed-size forward transform over preallocated arrays.

    The engine reads ``input_array`` and overwrites ``output_array`` in place
    on every :meth:`execute` call; both arrays stay owned by the caller.
    """

    name: str

    def __init__(
        self, size: int, input_array: np.ndarray, output_array: np.ndarray
    ) -> None:
        size = int(size)
        if input_array.shape != (size,) or output_array.shape != (size,):
            raise ValueError(
                "input and output arrays must be 1-D of length "
                f"{size}: got {input_array.shape} and {output_array.shape}"
            )
        if not np.iscomplexobj(output_array):
            raise ValueError("output array must have a complex dtype")
        self.size = size
        self.input = input_array
        self.output = output_array

    @abstractmethod
    def execute(self) -> None:
        """Transform ``input`` into ``output``."""


class NumpyTransformEngine(TransformEngine):
    """``numpy.fft`` engine."""

    name = "numpy"

    def execute(self) -> None:
        self.output[:] = np.fft.fft(self.input, n=self.size)


class ScipyTransformEngine(TransformEngine):
    """``scipy.fft`` engine."""

    name = "scipy"

    def execute(self) -> None:
        self.output[:] = scipy.fft.fft(self.input, n=self.size)


class TorchTransformEngine(TransformEngine):
    """``torch.fft`` engine loaded lazily.

    This engine keeps torch as an optional dependency and only imports it when
    instantiated.
    """

    name = "torch"

    def __init__(
        self, size: int, input_array: np.ndarray, output_array: np.ndarray
    ) -> None:
        super().__init__(size, input_array, output_array)
        try:
            self.torch = importlib.import_module("torch")
        except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError(
                "TorchTransformEngine requires the optional 'torch' dependency."
            ) from exc

    def execute(self) -> None:
        spectrum = self.torch.fft.fft(self.torch.from_numpy(self.input), n=self.size)
        self.output[:] = spectrum.numpy()


EngineFactory = Callable[[int, np.ndarray, np.ndarray], TransformEngine]

_ENGINES: dict[str, EngineFactory] = {
    NumpyTransformEngine.name: NumpyTransformEngine,
    ScipyTransformEngine.name: ScipyTransformEngine,
    TorchTransformEngine.name: TorchTransformEngine,
}


def available_engines() -> list[str]:
    return sorted(_ENGINES)


def create_transform_engine(
    name: str,
    size: int,
    input_array: np.ndarray,
    output_array: np.ndarray,
) -> TransformEngine:
    """Bind the engine registered as ``name`` to the given arrays."""
    if name not in _ENGINES:
        available = ", ".join(available_engines())
        raise RegistryError(
            f"Unknown transform engine '{name}'. Available engines: {available}"
        )
    return _ENGINES[name](size, input_array, output_array)
