# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""mfdicom configuration options."""

# doc strings following items are picked up by sphinx for documentation

import logging


uid_root = "1.2.826.0.1.3680043.2.1."
"""The root used by :func:`~mfdicom.uid.generate_uid` when creating the
*SOP Instance UID* of a new file.

Default ``'1.2.826.0.1.3680043.2.1.'``.
"""

debugging: bool
"""Set by :func:`debug`, ``True`` when DEBUG level logging is enabled."""

# Logging system and debug function to change logging level
logger = logging.getLogger("mfdicom")
logger.addHandler(logging.NullHandler())


def debug(debug_on: bool = True, default_handler: bool = True) -> None:
    """Turn on/off debugging of DICOM file writing.

    When debugging is on, details about each data element as it is encoded
    are logged to the 'mfdicom' logger using Python's :mod:`logging` module.

    Parameters
    ----------
    debug_on : bool, optional
        If ``True`` (default) then turn on debugging, ``False`` to turn off.
    default_handler : bool, optional
        If ``True`` (default) then use :class:`logging.StreamHandler` as the
        handler for log messages.
    """
    global logger, debugging

    if default_handler:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if debug_on:
        logger.setLevel(logging.DEBUG)
        debugging = True
    else:
        logger.setLevel(logging.WARNING)
        debugging = False


# force level=WARNING, in case logging default is set differently
debug(False, False)
