# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Hold DicomWriter class, which does basic output for a DICOM file."""

from io import BytesIO
from struct import Struct
from types import TracebackType
from typing import Any, TypeVar, Protocol


ExitException = tuple[
    type[BaseException] | None, BaseException | None, TracebackType | None
]
Self = TypeVar("Self", bound="DicomWriter")

# Part-10 files written here are always Explicit VR Little Endian
_us_packer = Struct("<H").pack
_ul_packer = Struct("<L").pack
_tag_packer = Struct("<2H").pack


class WriteableBuffer(Protocol):
    def write(
        self, b: bytes | bytearray | memoryview, /
    ) -> int: ...  # pragma: no cover


class DicomWriter:
    """Wrapper for managing buffer-like objects used when writing DICOM
    data elements.

    All multi-byte integers are packed little endian regardless of the host
    byte order.
    """

    def __init__(self, buffer: WriteableBuffer) -> None:
        """Create a new ``DicomWriter`` instance.

        Parameters
        ----------
        buffer : buffer-like object
            A buffer-like object with a ``write()`` method with the same
            signature as :meth:`io.RawIOBase.write`. If it also has a
            ``close()`` method it will be used by :meth:`close`.
        """
        if not hasattr(buffer, "write"):
            raise TypeError(
                f"'{type(self).__name__}' cannot be used with "
                f"'{type(buffer).__name__}': object has no write() method"
            )

        # The buffer-like object being wrapped
        self._buffer = buffer

        # The filename associated with the buffer-like
        self._name: str | None = getattr(self._buffer, "name", None)

        # Total number of bytes passed to write()
        self._written = 0

    def close(self, *args: Any, **kwargs: Any) -> Any:
        """Close the buffer (if possible)"""
        if hasattr(self._buffer, "close"):
            return self._buffer.close(*args, **kwargs)

    def __enter__(self: Self) -> Self:
        return self

    def __exit__(self, *exc_info: ExitException) -> None:
        self.close()

    @property
    def bytes_written(self) -> int:
        """Return the number of bytes written through the wrapper so far."""
        return self._written

    @property
    def name(self) -> str | None:
        """Return the value of the :attr:`parent`'s ``name`` attribute, or
        ``None`` if no such attribute.
        """
        return self._name

    @property
    def parent(self) -> WriteableBuffer:
        """Return the buffer object being wrapped."""
        return self._buffer

    def flush(self) -> None:
        """Flush the buffer (if possible)"""
        if hasattr(self._buffer, "flush"):
            self._buffer.flush()

    def write(self, b: bytes | bytearray | memoryview, /) -> int:
        """Write the bytes-like object `b` to the buffer and return the number
        of bytes written.
        """
        nr_bytes = self._buffer.write(b)
        # Raw (unbuffered) streams may return None
        if nr_bytes is None:
            nr_bytes = len(b)

        self._written += nr_bytes
        return nr_bytes

    def write_tag(self, group: int, element: int) -> None:
        """Write a DICOM (group, element) tag to the buffer."""
        self.write(_tag_packer(group, element))

    def write_UL(self, val: int) -> None:
        """Write a UL value to the buffer."""
        self.write(_ul_packer(val))

    def write_US(self, val: int) -> None:
        """Write a US value to the buffer."""
        self.write(_us_packer(val))


def DicomFile(*args: Any, **kwargs: Any) -> DicomWriter:
    """Return a :class:`DicomWriter` around a newly opened file."""
    return DicomWriter(open(*args, **kwargs))


class DicomBytesIO(DicomWriter):
    """Wrapper for :class:`io.BytesIO` to simplify encoding DICOM data.

    See Also
    --------
    :class:`~mfdicom.filebase.DicomWriter`
    """

    def __init__(self) -> None:
        buffer = BytesIO()
        super().__init__(buffer)

        self.getvalue = buffer.getvalue
