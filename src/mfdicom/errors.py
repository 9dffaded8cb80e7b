# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Module for mfdicom exception classes"""


class DicomWriteError(Exception):
    """Base class for errors raised while encoding a DICOM file."""


class UnsupportedBitDepthError(DicomWriteError, ValueError):
    """Exception that is raised when an image's bit depth cannot be encoded.

    Only 8-bit (unsigned integer), 16-bit (integer) and 32-bit (float)
    grayscale samples are supported.
    """

    def __init__(self, bit_depth: int | None = None, *args: object) -> None:
        self.bit_depth = bit_depth
        if not args:
            if bit_depth is None:
                args = ("Unsupported bit depth",)
            else:
                args = (
                    f"Unsupported bit depth: {bit_depth}, must be one of "
                    "8, 16 or 32",
                )

        super().__init__(*args)


class UnsupportedValueTypeError(DicomWriteError, TypeError):
    """Exception that is raised when a data element value is not one of the
    supported :data:`~mfdicom.valuerep.TagValue` types.
    """

    def __init__(self, *args: object) -> None:
        if not args:
            args = ("Unsupported value type",)

        super().__init__(*args)
