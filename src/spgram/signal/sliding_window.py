"""Fixed-capacity sliding window over the most recent samples."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike


class SlidingWindow:
    """Hold the ``capacity`` most recently pushed samples.

    The samples live in a buffer twice the window length; pushes append past
    the current view and the view is moved back to the front only when the
    buffer end is reached, so ``push`` is O(1) amortized and ``read`` never
    copies.

    Parameters
    ----------
    capacity:
        Number of samples kept in the window.
    dtype:
        Sample dtype (complex by default).
    """

    def __init__(self, capacity: int, *, dtype: DTypeLike = np.complex128) -> None:
        if capacity < 1:
            raise ValueError("capacity must be a positive integer")
        self._capacity = int(capacity)
        self._buffer = np.zeros(2 * self._capacity, dtype=dtype)
        self._read_index = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    def __len__(self) -> int:
        return self._capacity

    def __getitem__(self, index: int) -> Any:
        if not -self._capacity <= index < self._capacity:
            raise IndexError("sliding window index out of range")
        return self._buffer[self._read_index + index % self._capacity]

    def clear(self) -> None:
        """Zero every slot and rewind the view."""
        self._buffer[:] = 0
        self._read_index = 0

    def push(self, sample: complex) -> None:
        """Append one sample, evicting the oldest."""
        n = self._capacity
        if self._read_index == n:
            self._buffer[: n - 1] = self._buffer[n + 1 :]
            self._buffer[n - 1] = sample
            self._read_index = 0
            return
        self._buffer[self._read_index + n] = sample
        self._read_index += 1

    def write(self, samples: ArrayLike) -> None:
        """Append ``samples`` in order; equivalent to repeated :meth:`push`."""
        values = np.asarray(samples, dtype=self._buffer.dtype).ravel()
        count = values.shape[0]
        if count == 0:
            return

        n = self._capacity
        if count >= n:
            self._buffer[:n] = values[-n:]
            self._read_index = 0
            return

        end = self._read_index + n
        if end + count <= self._buffer.shape[0]:
            self._buffer[end : end + count] = values
            self._read_index += count
            return

        self._buffer[: n - count] = self._buffer[self._read_index + count : end]
        self._buffer[n - count : n] = values
        self._read_index = 0

    def read(self) -> np.ndarray:
        """Return the window contents, oldest first.

        The result is a read-only view that stays valid until the next
        ``push``/``write``/``clear``.
        """
        view = self._buffer[self._read_index : self._read_index + self._capacity]
        view.flags.writeable = False
        return view
