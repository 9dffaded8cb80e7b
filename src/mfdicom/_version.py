"""Pure python package for writing multi-frame DICOM files."""

import re
from typing import cast
from re import Match
from importlib.metadata import version

__version__: str = version("mfdicom")

result = cast(Match[str], re.match(r"(\d+\.\d+\.\d+).*", __version__))
__version_info__ = tuple(result.group(1).split("."))
