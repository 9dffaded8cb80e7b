# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Tests for the source module."""

import numpy as np
import pytest

from mfdicom.source import ArrayImageSource, ImageSource
from .test_helpers import StackSource


class TestImageSource:
    def test_protocol(self):
        """Both the array adapter and plain objects satisfy ImageSource"""
        arr = np.zeros((2, 3, 4), dtype=np.uint8)
        assert isinstance(ArrayImageSource(arr), ImageSource)
        assert isinstance(StackSource([None], 1, 1, 8), ImageSource)
        assert not isinstance(object(), ImageSource)


class TestArrayImageSource:
    """Test source.ArrayImageSource"""

    def test_shape(self):
        """Dimensions follow (frames, rows, columns)"""
        source = ArrayImageSource(np.zeros((2, 3, 4), dtype=np.uint8))
        assert source.frame_count == 2
        assert source.height == 3
        assert source.width == 4

    def test_single_frame(self):
        """A 2D array is a single frame"""
        source = ArrayImageSource(np.zeros((3, 4), dtype=np.uint8))
        assert source.frame_count == 1
        assert source.height == 3
        assert source.width == 4

    @pytest.mark.parametrize(
        "dtype, bit_depth, signed",
        [
            (np.uint8, 8, False),
            (np.uint16, 16, False),
            (np.int16, 16, True),
            (np.float32, 32, False),
        ],
    )
    def test_dtype(self, dtype, bit_depth, signed):
        """The dtype sets the bit depth and signedness"""
        source = ArrayImageSource(np.zeros((1, 2, 2), dtype=dtype))
        assert source.bit_depth == bit_depth
        assert source.is_signed_16 is signed

    def test_signed_override(self):
        """is_signed_16 can be overridden for 16-bit data only"""
        source = ArrayImageSource(np.zeros((2, 2), dtype=np.uint16), True)
        assert source.is_signed_16 is True
        source = ArrayImageSource(np.zeros((2, 2), dtype=np.int16), False)
        assert source.is_signed_16 is False
        source = ArrayImageSource(np.zeros((2, 2), dtype=np.uint8), True)
        assert source.is_signed_16 is False

    @pytest.mark.parametrize("dtype", [np.int8, np.int32, np.float64, np.bool_])
    def test_unsupported_dtype_raises(self, dtype):
        msg = "Unsupported array dtype"
        with pytest.raises(TypeError, match=msg):
            ArrayImageSource(np.zeros((2, 2), dtype=dtype))

    @pytest.mark.parametrize("shape", [(4,), (1, 2, 2, 2)])
    def test_bad_shape_raises(self, shape):
        msg = r"The array must be shaped \(rows, columns\) or"
        with pytest.raises(ValueError, match=msg):
            ArrayImageSource(np.zeros(shape, dtype=np.uint8))

    def test_frame_pixels(self):
        """Frames are 1-indexed and flattened in row-major order"""
        arr = np.arange(12, dtype=np.uint8).reshape(2, 2, 3)
        source = ArrayImageSource(arr)
        assert source.frame_pixels(1).tolist() == [0, 1, 2, 3, 4, 5]
        assert source.frame_pixels(2).tolist() == [6, 7, 8, 9, 10, 11]

    @pytest.mark.parametrize("index", [0, 3, -1])
    def test_frame_index_out_of_range(self, index):
        source = ArrayImageSource(np.zeros((2, 2, 2), dtype=np.uint8))
        with pytest.raises(IndexError, match=f"Frame index {index} is out of range"):
            source.frame_pixels(index)
