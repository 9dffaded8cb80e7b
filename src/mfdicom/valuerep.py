# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Value Representations and the value types used when writing elements."""

from dataclasses import dataclass
from enum import Enum, unique


@unique
class VR(str, Enum):
    """DICOM Data Element's Value Representation (VR)"""

    # The subset of Table 6.2-1 in Part 5 used by this package
    CS = "CS"
    IS = "IS"
    OB = "OB"
    OF = "OF"
    OW = "OW"
    PN = "PN"
    SH = "SH"
    SQ = "SQ"
    UI = "UI"
    UN = "UN"
    US = "US"
    UT = "UT"

    def __str__(self) -> str:
        return str.__str__(self)


# VRs whose explicit VR header has 2 reserved bytes and a 4 byte length,
#   all others have a 2 byte length
EXPLICIT_VR_LENGTH_32 = {VR.OB, VR.OW, VR.OF, VR.SQ, VR.UT, VR.UN}


@dataclass(frozen=True)
class Text:
    """A character string value, encoded as ISO 8859-1 (Latin-1)."""

    value: str


@dataclass(frozen=True)
class UShort:
    """An unsigned short value, encoded as a 16-bit little endian integer.

    Values outside ``[0, 65535]`` are truncated to their lowest 16 bits when
    encoded.
    """

    value: int


@dataclass(frozen=True)
class Bytes:
    """A raw byte string value, written unchanged."""

    value: bytes


TagValue = Text | UShort | Bytes
