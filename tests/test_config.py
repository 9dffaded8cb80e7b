# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Unit tests for the mfdicom.config module."""

import logging

from mfdicom import config
from mfdicom.dataelem import DataElement
from mfdicom.filebase import DicomBytesIO
from mfdicom.filewriter import write_element
from mfdicom.valuerep import VR, UShort


class TestDebug:
    """Tests for config.debug()."""

    def test_default(self):
        """Test the default logging level is WARNING"""
        assert config.logger.level == logging.WARNING
        assert config.debugging is False

    def test_debug_on_handler_null(self, caplog, restore_logging):
        """Test debug(True, False)."""
        config.debug(True, False)
        assert config.debugging is True
        assert config.logger.level == logging.DEBUG

        with caplog.at_level(logging.DEBUG, logger="mfdicom"):
            write_element(DicomBytesIO(), DataElement(0x0028, 0x0010, VR.US, UShort(3)))

        assert "(0028,0010) US: UShort(value=3), 2 bytes" in caplog.text

    def test_debug_on_handler_stream(self, restore_logging):
        """Test debug(True, True) adds a StreamHandler."""
        config.debug(True, True)
        assert isinstance(config.logger.handlers[-1], logging.StreamHandler)

    def test_debug_off(self, restore_logging):
        """Test debug(False)."""
        config.debug(True, False)
        config.debug(False, False)
        assert config.debugging is False
        assert config.logger.level == logging.WARNING
