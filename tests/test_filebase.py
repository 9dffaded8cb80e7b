# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Test for filebase.py"""

from io import BytesIO

import pytest

from mfdicom.filebase import DicomWriter, DicomFile, DicomBytesIO


class TestDicomWriter:
    """Test filebase.DicomWriter class"""

    def test_parent(self):
        """Test DicomWriter.parent"""
        buffer = BytesIO()
        fp = DicomWriter(buffer)
        assert fp.parent is buffer
        assert fp.name is None

    def test_no_write_raises(self):
        """A buffer without write() can't be wrapped"""
        msg = "'DicomWriter' cannot be used with 'object': object has no write"
        with pytest.raises(TypeError, match=msg):
            DicomWriter(object())

    def test_write_tag(self):
        """Tags are always written little endian"""
        fp = DicomBytesIO()
        fp.write_tag(0x0102, 0x0304)
        assert fp.getvalue() == b"\x02\x01\x04\x03"

    def test_write_us(self):
        """Test DicomWriter.write_US"""
        fp = DicomBytesIO()
        assert fp.getvalue() == b""
        fp.write_US(0)
        assert fp.getvalue() == b"\x00\x00"
        fp.write_US(255)
        assert fp.getvalue() == b"\x00\x00\xFF\x00"
        fp.write_US(65534)
        assert fp.getvalue() == b"\x00\x00\xFF\x00\xFE\xFF"

    def test_write_ul(self):
        """Test DicomWriter.write_UL"""
        fp = DicomBytesIO()
        fp.write_UL(0)
        fp.write_UL(0xFFFF)
        fp.write_UL(0xFFFFFFFE)
        assert fp.getvalue() == b"\x00\x00\x00\x00\xFF\xFF\x00\x00\xFE\xFF\xFF\xFF"

    def test_bytes_written(self):
        """The number of written bytes is tracked"""
        fp = DicomBytesIO()
        assert fp.bytes_written == 0
        fp.write(b"\x00\x01\x02")
        fp.write_US(1)
        fp.write_UL(1)
        assert fp.bytes_written == 9

    def test_write_returning_none(self):
        """Buffers whose write() returns None are counted by length"""

        class Sink:
            def __init__(self):
                self.data = b""

            def write(self, b):
                self.data += bytes(b)

        sink = Sink()
        fp = DicomWriter(sink)
        assert fp.write(b"\x01\x02") == 2
        assert fp.bytes_written == 2
        assert sink.data == b"\x01\x02"

    def test_close_and_context_manager(self):
        """The wrapped buffer is closed on exit"""
        buffer = BytesIO()
        with DicomWriter(buffer) as fp:
            fp.write(b"\x00")

        assert buffer.closed

    def test_close_without_close_method(self):
        """Buffers without close() can still be used as context managers"""

        class Sink:
            def write(self, b):
                return len(b)

            def flush(self):
                self.flushed = True

        sink = Sink()
        with DicomWriter(sink) as fp:
            fp.flush()

        assert sink.flushed


class TestDicomFile:
    def test_dicom_file(self, tmp_path):
        """DicomFile opens a file for writing"""
        path = tmp_path / "test.dcm"
        with DicomFile(path, "wb") as fp:
            assert str(fp.name) == str(path)
            fp.write_tag(0x0008, 0x0060)

        assert path.read_bytes() == b"\x08\x00\x60\x00"
