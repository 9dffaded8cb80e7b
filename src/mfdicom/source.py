# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""The image source interface consumed by the writer and a numpy adapter."""

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class ImageSource(Protocol):
    """A read-only multi-frame grayscale image.

    All frames share the same `width`, `height` and `bit_depth`.
    """

    @property
    def width(self) -> int:
        """The number of columns per frame."""
        ...  # pragma: no cover

    @property
    def height(self) -> int:
        """The number of rows per frame."""
        ...  # pragma: no cover

    @property
    def frame_count(self) -> int:
        """The number of frames."""
        ...  # pragma: no cover

    @property
    def bit_depth(self) -> int:
        """The bits per sample, one of 8, 16 or 32."""
        ...  # pragma: no cover

    @property
    def is_signed_16(self) -> bool:
        """``True`` if 16-bit samples are signed integers."""
        ...  # pragma: no cover

    def frame_pixels(self, index: int) -> Any:
        """Return the samples for the frame at `index`, starting at 1.

        The returned buffer holds ``width * height`` samples in row-major
        order: bytes-like or ``uint8`` for 8-bit, 16-bit integers for 16-bit
        and 32-bit floats for 32-bit images.
        """
        ...  # pragma: no cover


# numpy (kind, itemsize) -> bit depth
_BIT_DEPTHS = {
    ("u", 1): 8,
    ("u", 2): 16,
    ("i", 2): 16,
    ("f", 4): 32,
}


class ArrayImageSource:
    """An :class:`ImageSource` backed by a :class:`numpy.ndarray`.

    Parameters
    ----------
    arr : numpy.ndarray
        The image data, shaped (frames, rows, columns) or (rows, columns) for
        a single frame. The dtype sets the bit depth: ``uint8`` is 8-bit,
        ``uint16`` and ``int16`` are 16-bit and ``float32`` is 32-bit.
    is_signed_16 : bool, optional
        Override whether 16-bit samples are signed, by default this is
        ``True`` for ``int16`` arrays.

    Raises
    ------
    ValueError
        If `arr` isn't 2 or 3 dimensional.
    TypeError
        If the dtype of `arr` is not supported.
    """

    def __init__(self, arr: np.ndarray, is_signed_16: bool | None = None) -> None:
        arr = np.asarray(arr)
        if arr.ndim == 2:
            arr = arr[np.newaxis, ...]

        if arr.ndim != 3:
            raise ValueError(
                "The array must be shaped (rows, columns) or (frames, rows, "
                f"columns), not {arr.shape}"
            )

        bit_depth = _BIT_DEPTHS.get((arr.dtype.kind, arr.dtype.itemsize))
        if bit_depth is None:
            raise TypeError(
                f"Unsupported array dtype '{arr.dtype}', must be uint8, uint16, "
                "int16 or float32"
            )

        self._arr = arr
        self._bit_depth = bit_depth
        if is_signed_16 is None:
            is_signed_16 = arr.dtype == np.int16

        self._signed = bit_depth == 16 and bool(is_signed_16)

    @property
    def width(self) -> int:
        return self._arr.shape[2]

    @property
    def height(self) -> int:
        return self._arr.shape[1]

    @property
    def frame_count(self) -> int:
        return self._arr.shape[0]

    @property
    def bit_depth(self) -> int:
        return self._bit_depth

    @property
    def is_signed_16(self) -> bool:
        return self._signed

    def frame_pixels(self, index: int) -> np.ndarray:
        if not 1 <= index <= self.frame_count:
            raise IndexError(
                f"Frame index {index} is out of range 1 to {self.frame_count}"
            )

        return self._arr[index - 1].ravel()
