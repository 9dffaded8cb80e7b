# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Unit tests for the mfdicom.dataelem module."""

import dataclasses

import pytest

from mfdicom.dataelem import DataElement
from mfdicom.valuerep import VR, Bytes, Text, UShort


class TestDataElement:
    def test_tag(self):
        elem = DataElement(0x7FE0, 0x0010, VR.OW, Bytes(b""))
        assert elem.tag == 0x7FE00010

    def test_repr(self):
        elem = DataElement(0x0028, 0x0004, VR.CS, Text("MONOCHROME2"))
        assert repr(elem) == "(0028,0004) CS: Text(value='MONOCHROME2')"

    def test_frozen(self):
        """Elements and values are immutable"""
        elem = DataElement(0x0028, 0x0010, VR.US, UShort(3))
        with pytest.raises(dataclasses.FrozenInstanceError):
            elem.value = UShort(4)

        with pytest.raises(dataclasses.FrozenInstanceError):
            elem.value.value = 4

    def test_equality(self):
        a = DataElement(0x0028, 0x0010, VR.US, UShort(3))
        assert a == DataElement(0x0028, 0x0010, VR.US, UShort(3))
        assert a != DataElement(0x0028, 0x0010, VR.US, UShort(4))
        assert UShort(3) != Text("3")
