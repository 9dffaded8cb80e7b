# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""mfdicom package -- write multi-frame grayscale images as DICOM files.

-----------
Quick Start
-----------

1. Write a numpy array shaped (frames, rows, columns) to a new file::

    import numpy as np
    from mfdicom import ArrayImageSource, dcmwrite

    arr = np.zeros((3, 256, 256), dtype=np.uint16)
    dcmwrite("stack.dcm", ArrayImageSource(arr))

2. Any object implementing :class:`~mfdicom.source.ImageSource` can be
   written in the same way.

3. Files are Secondary Capture images encoded as Explicit VR Little Endian,
   8-bit images use a *Pixel Data* VR of OB, 16-bit OW and 32-bit OF.

"""

from mfdicom.dataelem import DataElement
from mfdicom.errors import (
    DicomWriteError,
    UnsupportedBitDepthError,
    UnsupportedValueTypeError,
)
from mfdicom.filewriter import dcmwrite
from mfdicom.source import ArrayImageSource, ImageSource

from ._version import __version__, __version_info__

__all__ = [
    "ArrayImageSource",
    "DataElement",
    "DicomWriteError",
    "ImageSource",
    "UnsupportedBitDepthError",
    "UnsupportedValueTypeError",
    "dcmwrite",
    "__version__",
    "__version_info__",
]
