# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Define the DataElement class.

A DataElement has a (group, element) tag, a value representation (VR) and a
value.
"""

from dataclasses import dataclass

from mfdicom.valuerep import VR, TagValue


@dataclass(frozen=True)
class DataElement:
    """Contain and manipulate a DICOM Element.

    Examples
    --------

    >>> from mfdicom.valuerep import UShort
    >>> elem = DataElement(0x0028, 0x0010, VR.US, UShort(512))
    >>> elem
    (0028,0010) US: UShort(value=512)
    >>> hex(elem.tag)
    '0x280010'

    Attributes
    ----------
    group : int
        The element's group number.
    element : int
        The element number within the group.
    VR : mfdicom.valuerep.VR
        The element's Value Representation.
    value : mfdicom.valuerep.TagValue
        The element's value.
    """

    group: int
    element: int
    VR: VR
    value: TagValue

    @property
    def tag(self) -> int:
        """Return the element's tag as a single 32-bit ``int``."""
        return self.group << 16 | self.element

    def __repr__(self) -> str:
        return f"({self.group:04X},{self.element:04X}) {self.VR}: {self.value!r}"
