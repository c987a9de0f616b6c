"""
Tests du logging : niveau console derive de la verbosite, remplacement du handler.
"""

from pathlib import Path

import pytest
from loguru import logger

from featurette import logging_config
from featurette.logging_config import configure_logging, console_level_for, set_console_level


@pytest.fixture(autouse=True)
def isolated_logger(monkeypatch):
    """Repart d'un logger sans handler Featurette et nettoie apres le test."""
    monkeypatch.setattr(logging_config, "_console_handler_id", None)
    yield
    logger.remove()


class TestConsoleLevelFor:
    """Correspondance options CLI -> niveau console."""

    def test_quiet_wins_over_verbose(self):
        assert console_level_for(verbose=2, quiet=True) == "ERROR"

    def test_single_verbose(self):
        assert console_level_for(verbose=1, quiet=False) == "INFO"

    def test_double_verbose(self):
        assert console_level_for(verbose=2, quiet=False) == "DEBUG"

    def test_no_option(self):
        assert console_level_for(verbose=0, quiet=False) is None


class TestSetConsoleLevel:
    """Remplacement du handler stderr."""

    def test_debug_messages_reach_stderr(self, capsys):
        set_console_level("DEBUG")
        logger.debug("detail du scan")

        assert "detail du scan" in capsys.readouterr().err

    def test_error_level_filters_info(self, capsys):
        set_console_level("ERROR")
        logger.info("message informatif")
        logger.error("message d'erreur")

        err = capsys.readouterr().err
        assert "message informatif" not in err
        assert "message d'erreur" in err

    def test_level_change_keeps_single_console_handler(self, capsys):
        set_console_level("INFO")
        set_console_level("DEBUG")
        logger.info("une seule fois")

        assert capsys.readouterr().err.count("une seule fois") == 1


class TestConfigureLogging:
    """Installation des handlers console et fichier."""

    def test_file_handler_survives_console_change(self, tmp_path: Path, capsys):
        log_file = tmp_path / "logs" / "featurette.log"
        configure_logging(log_level="INFO", log_file=log_file)

        set_console_level("ERROR")
        logger.info("ecrit dans le fichier")
        logger.complete()

        assert "ecrit dans le fichier" not in capsys.readouterr().err
        assert "ecrit dans le fichier" in log_file.read_text(encoding="utf-8")
