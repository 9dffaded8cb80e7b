# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Build the File Meta Information and Secondary Capture data set elements
for a multi-frame grayscale image.
"""

from mfdicom.dataelem import DataElement
from mfdicom.source import ImageSource
from mfdicom.uid import (
    SecondaryCaptureImageStorage,
    ExplicitVRLittleEndian,
    IMPLEMENTATION_CLASS_UID,
    IMPLEMENTATION_VERSION_NAME,
)
from mfdicom.valuerep import VR, Bytes, Text, UShort


MODALITY = "OT"
PATIENT_NAME = "Patient^Name"
PHOTOMETRIC_INTERPRETATION = "MONOCHROME2"


def pixel_representation(bit_depth: int, is_signed_16: bool) -> int:
    """Return the (0028,0103) *Pixel Representation* for an image.

    Parameters
    ----------
    bit_depth : int
        The number of bits per sample.
    is_signed_16 : bool
        ``True`` if 16-bit samples are signed.

    Returns
    -------
    int
        ``1`` for 32-bit (float) samples and signed 16-bit samples, ``0``
        otherwise. 8-bit samples are always unsigned.
    """
    if bit_depth == 32:
        return 1

    if bit_depth == 16 and is_signed_16:
        return 1

    return 0


def build_dataset(source: ImageSource, instance_uid: str) -> list[DataElement]:
    """Return the File Meta Information and data set elements for `source`.

    The elements are returned in the order they must be written, with the
    *File Meta Information* group first. *Pixel Data* is not included.

    Parameters
    ----------
    source : mfdicom.source.ImageSource
        The image to describe.
    instance_uid : str
        The (0002,0003) *Media Storage SOP Instance UID*.

    Returns
    -------
    list[mfdicom.dataelem.DataElement]
        The encoded elements, in order.
    """
    bit_depth = source.bit_depth

    return [
        # File Meta Information
        DataElement(0x0002, 0x0001, VR.OB, Bytes(b"\x00\x01")),
        DataElement(0x0002, 0x0002, VR.UI, Text(SecondaryCaptureImageStorage)),
        DataElement(0x0002, 0x0003, VR.UI, Text(instance_uid)),
        DataElement(0x0002, 0x0010, VR.UI, Text(ExplicitVRLittleEndian)),
        DataElement(0x0002, 0x0012, VR.UI, Text(IMPLEMENTATION_CLASS_UID)),
        DataElement(0x0002, 0x0013, VR.SH, Text(IMPLEMENTATION_VERSION_NAME)),
        # Data Set
        DataElement(0x0008, 0x0060, VR.CS, Text(MODALITY)),
        DataElement(0x0010, 0x0010, VR.PN, Text(PATIENT_NAME)),
        DataElement(0x0028, 0x0002, VR.US, UShort(1)),
        DataElement(0x0028, 0x0004, VR.CS, Text(PHOTOMETRIC_INTERPRETATION)),
        DataElement(0x0028, 0x0008, VR.IS, Text(str(source.frame_count))),
        DataElement(0x0028, 0x0010, VR.US, UShort(source.height)),
        DataElement(0x0028, 0x0011, VR.US, UShort(source.width)),
        DataElement(0x0028, 0x0100, VR.US, UShort(bit_depth)),
        DataElement(0x0028, 0x0101, VR.US, UShort(bit_depth)),
        DataElement(0x0028, 0x0102, VR.US, UShort(bit_depth - 1)),
        DataElement(
            0x0028,
            0x0103,
            VR.US,
            UShort(pixel_representation(bit_depth, source.is_signed_16)),
        ),
    ]
