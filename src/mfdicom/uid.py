# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Functions and constants for handling DICOM unique identifiers (UIDs)"""

from collections.abc import Callable
import re
import secrets
import threading
import time

from mfdicom import config


UIDProvider = Callable[[], str]
"""A callable returning a new UID each time it is called."""

SecondaryCaptureImageStorage = "1.2.840.10008.5.1.4.1.1.7"
"""1.2.840.10008.5.1.4.1.1.7"""

ExplicitVRLittleEndian = "1.2.840.10008.1.2.1"
"""1.2.840.10008.1.2.1"""

IMPLEMENTATION_CLASS_UID = "1.2.3.4.5.6.7.8"
"""The (0002,0012) *Implementation Class UID* written to every file."""

IMPLEMENTATION_VERSION_NAME = "ImageJ_DCM_Writer"
"""The (0002,0013) *Implementation Version Name* written to every file."""

# Regex for a valid UID and UID prefix (Part 5, Section 9.1)
RE_VALID_UID = r"^(0|[1-9][0-9]*)(\.(0|[1-9][0-9]*))*$"
RE_VALID_UID_PREFIX = r"^(0|[1-9][0-9]*)(\.(0|[1-9][0-9]*))*\.$"

_MAX_PREFIX_LENGTH = 54


def is_valid_uid(uid: str) -> bool:
    """Return ``True`` if `uid` is at most 64 characters and uses only the
    dotted-decimal UID syntax, ``False`` otherwise.
    """
    return len(uid) <= 64 and re.match(RE_VALID_UID, uid) is not None


def _check_prefix(prefix: str) -> None:
    if len(prefix) > _MAX_PREFIX_LENGTH:
        raise ValueError(
            f"The 'prefix' should be no more than {_MAX_PREFIX_LENGTH} characters long"
        )

    if not re.match(RE_VALID_UID_PREFIX, prefix):
        raise ValueError(
            "The 'prefix' is not valid for use with a UID, see Part 5, Section "
            "9.1 of the DICOM Standard"
        )


def generate_uid(prefix: str | None = None) -> str:
    """Return a UID of up to 64 characters which starts with `prefix`.

    Parameters
    ----------
    prefix : str or None, optional
        The UID prefix to use, must end with a ``'.'``. Defaults to
        :attr:`mfdicom.config.uid_root`. A random number from
        :func:`secrets.randbelow` is appended to the prefix.

    Returns
    -------
    str
        A DICOM UID of up to 64 characters.

    Raises
    ------
    ValueError
        If `prefix` is invalid or greater than 54 characters.

    Examples
    --------

    >>> from mfdicom.uid import generate_uid
    >>> generate_uid()
    1.2.826.0.1.3680043.2.1.22463838056059845879389038257786771680
    """
    if prefix is None:
        prefix = config.uid_root

    _check_prefix(prefix)

    maximum = 10 ** (64 - len(prefix))
    # randbelow is in [0, maximum)
    return f"{prefix}{secrets.randbelow(maximum)}"[:64]


class ClockUIDProvider:
    """A :data:`UIDProvider` which appends the wall clock time and a counter
    to a fixed root.

    UIDs have the form ``{prefix}{milliseconds since epoch}.{counter}``. The
    counter makes UIDs created within the same millisecond unique for a
    given provider instance.

    Parameters
    ----------
    prefix : str, optional
        The UID root, must end with a ``'.'``. Defaults to
        :attr:`mfdicom.config.uid_root`.
    clock : callable, optional
        Returns the current time in seconds, default :func:`time.time`.
    """

    def __init__(
        self, prefix: str | None = None, clock: Callable[[], float] = time.time
    ) -> None:
        prefix = config.uid_root if prefix is None else prefix
        _check_prefix(prefix)

        self.prefix = prefix
        self._clock = clock
        self._counter = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            self._counter += 1
            counter = self._counter

        millis = int(self._clock() * 1000)
        uid = f"{self.prefix}{millis}.{counter}"
        if len(uid) > 64:
            raise ValueError(
                f"The generated UID '{uid}' is longer than 64 characters, "
                "use a shorter prefix"
            )

        return uid
