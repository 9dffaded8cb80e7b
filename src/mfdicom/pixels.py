# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Functions for writing native (uncompressed) *Pixel Data*."""

import logging

import numpy as np

from mfdicom.errors import UnsupportedBitDepthError
from mfdicom.filebase import DicomWriter
from mfdicom.source import ImageSource
from mfdicom.valuerep import VR


LOGGER = logging.getLogger(__name__)

_PIXEL_DATA_VR = {8: VR.OB, 16: VR.OW, 32: VR.OF}


def pixel_data_vr(bit_depth: int) -> VR:
    """Return the VR used for (7FE0,0010) *Pixel Data* with `bit_depth`.

    Raises
    ------
    mfdicom.errors.UnsupportedBitDepthError
        If `bit_depth` isn't 8, 16 or 32.
    """
    if bit_depth not in _PIXEL_DATA_VR:
        raise UnsupportedBitDepthError(bit_depth)

    return _PIXEL_DATA_VR[bit_depth]


def pixel_data_length(source: ImageSource) -> int:
    """Return the length of the encoded *Pixel Data* value for `source`,
    including the trailing padding byte (if any).
    """
    length = (
        source.frame_count * source.width * source.height * (source.bit_depth // 8)
    )
    return length + length % 2


def _check_range(arr: np.ndarray, dtype: str, index: int) -> None:
    """Raise if the samples in `arr` don't fit in `dtype`."""
    if not arr.size:
        return

    info = np.iinfo(dtype)
    low, high = arr.min(), arr.max()
    if low < info.min or high > info.max:
        raise ValueError(
            f"Frame {index} has sample values from {low} to {high}, which "
            f"don't fit the range {info.min} to {info.max}"
        )


def _frame_bytes(pixels: object, bit_depth: int, index: int) -> bytes:
    """Return frame `index` of samples as little endian encoded bytes."""
    if bit_depth == 8:
        if isinstance(pixels, bytes | bytearray | memoryview):
            return bytes(pixels)

        arr = np.asarray(pixels)
        if arr.dtype != np.uint8:
            _check_range(arr, "u1", index)

        return arr.astype(np.uint8, copy=False).tobytes()

    arr = np.asarray(pixels)
    if bit_depth == 16:
        # Keep the bit pattern of signed samples
        is_16bit_int = arr.dtype.kind in "iu" and arr.dtype.itemsize == 2
        if arr.dtype.kind == "i" and (is_16bit_int or (arr.size and arr.min() < 0)):
            dtype = "<i2"
        else:
            dtype = "<u2"

        if not is_16bit_int:
            _check_range(arr, dtype, index)

        return arr.astype(dtype, copy=False).tobytes()

    return arr.astype("<f4", copy=False).tobytes()


def write_pixel_data(fp: DicomWriter, source: ImageSource) -> int:
    """Write the *Pixel Data* value for every frame in `source` to `fp`.

    Frames are written in order, starting with frame 1. Multi-byte samples
    are written little endian and an odd total length is padded with a
    single ``0x00``.

    Parameters
    ----------
    fp : mfdicom.filebase.DicomWriter
        The destination for the encoded data.
    source : mfdicom.source.ImageSource
        The image to write.

    Returns
    -------
    int
        The total number of bytes written, including any padding.

    Raises
    ------
    mfdicom.errors.UnsupportedBitDepthError
        If the bit depth of `source` isn't 8, 16 or 32. Nothing is written.
    ValueError
        If a frame doesn't contain ``width * height`` samples or has
        integer sample values that don't fit the bit depth.
    """
    bit_depth = source.bit_depth
    pixel_data_vr(bit_depth)

    bytes_per_sample = bit_depth // 8
    expected = source.width * source.height * bytes_per_sample

    total = 0
    for index in range(1, source.frame_count + 1):
        data = _frame_bytes(source.frame_pixels(index), bit_depth, index)
        if len(data) != expected:
            raise ValueError(
                f"Frame {index} has {len(data) // bytes_per_sample} samples, "
                f"expected {source.width * source.height}"
            )

        total += fp.write(data)
        LOGGER.debug(f"Wrote frame {index}: {len(data)} bytes")

    if total % 2:
        total += fp.write(b"\x00")

    return total
