"""Tests for the Logger wrapper and config resolution."""
import logging

from ogdl import OGDLParser
from ogdl.logger import Logger, OGDLStreamHandler
from ogdl.utils import resolve_config


def _owned_handlers(name: str) -> list[logging.Handler]:
    return [handler for handler in logging.getLogger(name).handlers if isinstance(handler, OGDLStreamHandler)]


def test_repeated_loggers_share_one_handler():
    """Requesting the same named logger twice attaches a single handler."""
    Logger(config={"name": "ogdl.test.repeat"})
    Logger(config={"name": "ogdl.test.repeat"})
    assert len(logging.getLogger("ogdl.test.repeat").handlers) == 1


def test_parsers_share_one_handler():
    """Each parser reuses the handler of the shared parser logger."""
    OGDLParser("a")
    OGDLParser("b")
    assert len(_owned_handlers("OGDL Parser")) == 1


def test_reenabled_after_disabled_instance():
    """A disabled instance does not keep a later enabled one silent."""
    Logger(config={"name": "ogdl.test.toggle", "is_enabled": False})
    logger = Logger(config={"name": "ogdl.test.toggle", "level": logging.INFO}).logger
    assert not logger.disabled
    assert logger.level == logging.INFO
    assert len(_owned_handlers("ogdl.test.toggle")) == 1


def test_disabled_logger_has_no_handler():
    """A logger that was never enabled gets no handler."""
    logger = Logger(config={"name": "ogdl.test.off", "is_enabled": False}).logger
    assert logger.disabled
    assert _owned_handlers("ogdl.test.off") == []


def test_format_is_reapplied():
    """The latest format wins on the shared handler."""
    Logger(config={"name": "ogdl.test.format"})
    Logger(config={"name": "ogdl.test.format", "format": "%(message)s"})
    (handler,) = _owned_handlers("ogdl.test.format")
    assert handler.format(logging.makeLogRecord({"msg": "hi"})) == "hi"


def test_resolve_config_overlays_known_keys():
    """Known keys are overridden, unknown keys are dropped, defaults are not mutated."""
    defaults = {"parse": True, "enable_logger": True}
    resolved = resolve_config({"parse": False, "unknown": 1}, defaults)
    assert resolved == {"parse": False, "enable_logger": True}
    assert defaults == {"parse": True, "enable_logger": True}
