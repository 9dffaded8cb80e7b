# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Functions related to writing DICOM data."""

from collections.abc import Iterable
import logging
import os
from struct import pack
from typing import BinaryIO

from mfdicom.dataelem import DataElement
from mfdicom.dataset import build_dataset
from mfdicom.errors import UnsupportedValueTypeError
from mfdicom.filebase import DicomFile, DicomBytesIO, DicomWriter, WriteableBuffer
from mfdicom.misc import warn_and_log
from mfdicom.pixels import pixel_data_length, pixel_data_vr, write_pixel_data
from mfdicom.source import ImageSource
from mfdicom.uid import UIDProvider, generate_uid
from mfdicom.valuerep import EXPLICIT_VR_LENGTH_32, VR, Bytes, TagValue, Text, UShort


LOGGER = logging.getLogger("mfdicom")

PathType = str | bytes | os.PathLike

# (7FE0,0010) Pixel Data
PIXEL_DATA_GROUP = 0x7FE0
PIXEL_DATA_ELEMENT = 0x0010


def encode_value(value: TagValue) -> bytes:
    """Return the encoded `value`, without any padding.

    Parameters
    ----------
    value : mfdicom.valuerep.TagValue
        The value to encode.

    Returns
    -------
    bytes
        ``Text`` as ISO 8859-1, ``UShort`` as a 16-bit little endian
        integer and ``Bytes`` unchanged.

    Raises
    ------
    mfdicom.errors.UnsupportedValueTypeError
        If `value` isn't a ``Text``, ``UShort`` or ``Bytes``.
    """
    match value:
        case Text(value=text):
            return text.encode("latin_1")
        case UShort(value=number):
            if not 0 <= number <= 0xFFFF:
                warn_and_log(
                    f"The US value {number} doesn't fit in 16 bits and has "
                    f"been truncated to {number & 0xFFFF}"
                )

            return pack("<H", number & 0xFFFF)
        case Bytes(value=raw):
            return bytes(raw)

    raise UnsupportedValueTypeError(
        f"Unsupported value type '{type(value).__name__}'"
    )


def write_element_header(
    fp: DicomWriter, group: int, element: int, vr: VR | str, length: int
) -> None:
    """Write an Explicit VR Little Endian element header to `fp`.

    Parameters
    ----------
    fp : mfdicom.filebase.DicomWriter
        The file-like to write the header to.
    group : int
        The element's group number.
    element : int
        The element number.
    vr : mfdicom.valuerep.VR or str
        The element's VR, written as 2 ASCII characters.
    length : int
        The (even) length of the value that will follow the header.

    Raises
    ------
    ValueError
        If `length` can't be stored in the VR's length field.
    """
    vr = VR(vr)
    limit = 0xFFFFFFFF if vr in EXPLICIT_VR_LENGTH_32 else 0xFFFF
    if not 0 <= length <= limit:
        raise ValueError(
            f"The value length {length} for the element ({group:04X},"
            f"{element:04X}) can't be encoded with a VR of '{vr}'"
        )

    fp.write_tag(group, element)
    fp.write(vr.value.encode("ascii"))
    if vr in EXPLICIT_VR_LENGTH_32:
        fp.write_US(0)  # reserved 2 bytes
        fp.write_UL(length)
    else:
        fp.write_US(length)  # Explicit VR length field is 2 bytes


def write_element(fp: DicomWriter, elem: DataElement) -> None:
    """Write `elem` to `fp`, padding the value to an even length with
    ``0x00``.
    """
    value = encode_value(elem.value)
    if len(value) % 2:
        value += b"\x00"

    write_element_header(fp, elem.group, elem.element, elem.VR, len(value))
    fp.write(value)
    LOGGER.debug(f"{elem!r}, {len(value)} bytes")


def encode_element(elem: DataElement) -> bytes:
    """Return `elem` encoded as Explicit VR Little Endian."""
    with DicomBytesIO() as fp:
        write_element(fp, elem)
        return fp.getvalue()


def write_dataset(fp: DicomWriter, elements: Iterable[DataElement]) -> None:
    """Write each element in `elements` to `fp`, in order."""
    for elem in elements:
        write_element(fp, elem)


def write_preamble(fp: DicomWriter) -> None:
    """Write the 128 byte preamble and the ``b'DICM'`` prefix to `fp`."""
    fp.write(b"\x00" * 128)
    fp.write(b"DICM")


def validate_source(source: ImageSource) -> None:
    """Check that `source` can be encoded before anything is written.

    Raises
    ------
    mfdicom.errors.UnsupportedBitDepthError
        If the bit depth isn't 8, 16 or 32.
    ValueError
        If the *Pixel Data* would be too long for a 32-bit length field.
    """
    pixel_data_vr(source.bit_depth)

    length = pixel_data_length(source)
    if length > 0xFFFFFFFF:
        raise ValueError(
            f"The image is too large to encode, the Pixel Data length of "
            f"{length} bytes exceeds the maximum of {0xFFFFFFFF}"
        )


def write_stack(
    fp: DicomWriter, source: ImageSource, uid_provider: UIDProvider | None = None
) -> None:
    """Write `source` to `fp` as a multi-frame Secondary Capture DICOM file.

    **DICOM File Format**

    The preamble (128 ``0x00`` bytes) and the ``b'DICM'`` prefix are followed
    by the *File Meta Information* and data set elements from
    :func:`~mfdicom.dataset.build_dataset` and finally the (7FE0,0010)
    *Pixel Data* element, encoded as Explicit VR Little Endian. The *Pixel
    Data* VR is **OB** for 8-bit, **OW** for 16-bit and **OF** for 32-bit
    images.

    Parameters
    ----------
    fp : mfdicom.filebase.DicomWriter
        The destination for the encoded file.
    source : mfdicom.source.ImageSource
        The image to encode.
    uid_provider : callable, optional
        Returns the *SOP Instance UID* to use, default
        :func:`~mfdicom.uid.generate_uid`.
    """
    validate_source(source)
    uid_provider = uid_provider or generate_uid

    write_preamble(fp)
    write_dataset(fp, build_dataset(source, uid_provider()))

    length = pixel_data_length(source)
    write_element_header(
        fp,
        PIXEL_DATA_GROUP,
        PIXEL_DATA_ELEMENT,
        pixel_data_vr(source.bit_depth),
        length,
    )
    write_pixel_data(fp, source)


def dcmwrite(
    filename: PathType | BinaryIO | WriteableBuffer,
    source: ImageSource,
    *,
    uid_provider: UIDProvider | None = None,
    overwrite: bool = True,
) -> None:
    """Write `source` to `filename`, which can be a path, a file-like or a
    writeable buffer.

    The image is checked before anything is written, so an unsupported bit
    depth never creates or truncates the file at `filename`. A failure while
    writing may leave a partially written file behind.

    Parameters
    ----------
    filename : str, PathLike, file-like or writeable buffer
        File path, file-like or writeable buffer to write the encoded file
        to. If a path is used the file is always closed before returning,
        a file-like is left open for the caller to close.
    source : mfdicom.source.ImageSource
        The multi-frame grayscale image to be encoded.
    uid_provider : callable, optional
        Returns the *SOP Instance UID* to use, default
        :func:`~mfdicom.uid.generate_uid`.
    overwrite : bool, optional
        If ``False`` and `filename` is a :class:`str` or PathLike, then raise a
        :class:`FileExistsError` if a file already exists with the given
        filename (default ``True``).

    Raises
    ------
    mfdicom.errors.UnsupportedBitDepthError
        If the bit depth of `source` isn't 8, 16 or 32.
    ValueError
        If the image is too large or a frame has the wrong number of samples.
    TypeError
        If `filename` isn't a path or writeable.
    OSError
        If writing to `filename` fails.

    See Also
    --------
    mfdicom.filewriter.write_stack
        Encode `source` to an already wrapped buffer.
    """
    validate_source(source)

    caller_owns_file = True
    if isinstance(filename, str | bytes | os.PathLike):
        # A path-like to be written to
        file_mode = "xb" if not overwrite else "wb"
        fp: DicomWriter = DicomFile(os.fsdecode(filename), file_mode)
        # caller provided a file name; we own the file handle
        caller_owns_file = False
    elif isinstance(filename, DicomWriter):
        # A wrapped writeable buffer, don't wrap it again
        fp = filename
    else:
        # Anything else
        try:
            fp = DicomWriter(filename)
        except TypeError as exc:
            raise TypeError(
                "dcmwrite: Expected a file path, file-like or writeable buffer, "
                f"but got {type(filename).__name__}"
            ) from exc

    try:
        write_stack(fp, source, uid_provider)
        fp.flush()
    finally:
        if not caller_owns_file:
            fp.close()

    LOGGER.info(
        f"DICOM file written to {fp.name or type(fp.parent).__name__}: "
        f"{source.frame_count} frame(s), {fp.bytes_written} bytes"
    )
