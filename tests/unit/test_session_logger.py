"""Unit tests for the shared session log setup."""

import sys

import pytest
from loguru import logger

from folio import __version__
from folio.contexts.rendering.logger import setup_rendering_logger


@pytest.fixture
def restore_sinks():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_session_log_header(tmp_path, restore_sinks):
    log_file = setup_rendering_logger(tmp_path / "session", template_id="modern")
    logger.debug("file only")
    logger.remove()

    assert log_file == tmp_path / "session" / "render.log"
    text = log_file.read_text()
    assert f"folio: {__version__}" in text
    assert "Template: modern" in text
    assert "file only" in text
