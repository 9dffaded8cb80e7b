# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""mfdicom command line interface program

Converts a numpy ``.npy`` array into a multi-frame DICOM file.
"""

import argparse
import os
from pathlib import Path
import sys

import numpy as np

from mfdicom import config
from mfdicom.errors import DicomWriteError
from mfdicom.filewriter import dcmwrite
from mfdicom.source import ArrayImageSource


def default_output_path(input_path: str | os.PathLike) -> Path:
    """Return the default output path for `input_path`: the same directory
    and name with the extension (if any) replaced by ``.dcm``.
    """
    return Path(input_path).with_suffix(".dcm")


def main(args: list[str] | None = None) -> int:
    """Entry point for 'mfdicom' command line interface

    Parameters
    ----------
    args : List[str], optional
        Command-line arguments to parse.  If ``None``, then :attr:`sys.argv`
        is used.

    Returns
    -------
    int
        The exit status, ``0`` on success and ``1`` if writing failed.
    """
    py_version = sys.version.split()[0]

    parser = argparse.ArgumentParser(
        prog="mfdicom",
        description=(
            "Save a numpy array as a multi-frame DICOM file "
            f"(Python {py_version})"
        ),
    )
    parser.add_argument(
        "input",
        help=(
            "A .npy file holding a (frames, rows, columns) or (rows, columns) "
            "array of uint8, uint16, int16 or float32"
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        help="The file to write, defaults to the input path with a .dcm extension",
    )
    parser.add_argument(
        "--signed",
        help="Treat 16-bit samples as signed, regardless of the array dtype",
        action="store_true",
    )
    parser.add_argument(
        "--no-overwrite",
        help="Don't replace an existing output file",
        action="store_true",
    )
    parser.add_argument(
        "-v", "--verbose", help="Show debugging output", action="store_true"
    )

    ns = parser.parse_args(args)
    if ns.verbose:
        config.debug(True)

    output = Path(ns.output) if ns.output else default_output_path(ns.input)

    # np.load raises OSError or ValueError for a missing or unreadable file,
    # ArrayImageSource raises TypeError or ValueError for an unusable array
    try:
        arr = np.load(ns.input, allow_pickle=False)
        source = ArrayImageSource(arr, is_signed_16=True if ns.signed else None)
    except (OSError, TypeError, ValueError) as exc:
        print(f"mfdicom: {exc}", file=sys.stderr)
        return 1

    try:
        dcmwrite(output, source, overwrite=not ns.no_overwrite)
    except (DicomWriteError, OSError) as exc:
        print(f"mfdicom: {exc}", file=sys.stderr)
        return 1

    print(f"DICOM file written to:\n{output.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())  # pragma: no cover
