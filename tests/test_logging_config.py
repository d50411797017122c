import logging

import pytest
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer

from rbxstats.core.logging_config import configure_logging, get_renderer


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_renderer_by_mode():
    assert isinstance(get_renderer(True), ConsoleRenderer)
    assert isinstance(get_renderer(False), JSONRenderer)


def test_configure_logging_levels(restore_root_logger):
    configure_logging(debug=True)
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging(debug=False)
    assert restore_root_logger.level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1


def test_stdlib_records_rendered_as_json(restore_root_logger, capsys):
    configure_logging(debug=False)
    logging.getLogger("rbxstats.test").warning("GET %s returned status %s", "https://h/api/x?api=***", 500)

    err = capsys.readouterr().err
    assert '"event": "GET https://h/api/x?api=*** returned status 500"' in err
    assert '"level": "warning"' in err
