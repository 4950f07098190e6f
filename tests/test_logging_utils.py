"""Tests for logging setup."""

from __future__ import annotations

import logging
from io import StringIO
from unittest.mock import patch

from huegrep.logging_utils import setup_logging


class TestSetupLogging:
    def test_warning_by_default(self) -> None:
        logger = setup_logging()
        assert logger.name == "huegrep"
        assert logger.level == logging.WARNING

    def test_debug(self) -> None:
        assert setup_logging(debug=True).level == logging.DEBUG

    def test_single_handler_after_repeat_calls(self) -> None:
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_writes_to_current_stderr(self) -> None:
        err = StringIO()
        with patch("huegrep.logging_utils.sys.stderr", err):
            setup_logging(debug=True)
            logging.getLogger("huegrep.patterns").debug("compiled %d", 3)
        assert err.getvalue() == "DEBUG: compiled 3\n"
