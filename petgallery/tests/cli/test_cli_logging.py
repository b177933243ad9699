import logging
import sys

from petgallery.cli.cli_logging import setup_logging


class TestCliLogging:
    def test_quiet_by_default(self):
        logger = setup_logging()

        assert logger.name == "petgallery-cli"
        assert logger.level == logging.ERROR

    def test_verbose_level(self):
        logger = setup_logging(verbose=True, verbose_level="debug")

        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logging(verbose=True, verbose_level="chatty")

        assert logger.level == logging.INFO

    def test_single_stderr_handler(self):
        setup_logging(verbose=True)
        logger = setup_logging(verbose=True)

        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr
