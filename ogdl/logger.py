from typing import NotRequired, TypedDict
import logging
from ogdl.utils import resolve_config


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": "ogdl",
    "is_enabled": True,
    "level": logging.DEBUG,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class OGDLStreamHandler(logging.StreamHandler):
    """Stream handler attached by `Logger`, so it can be told apart from handlers added elsewhere."""


class Logger:
    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.logger = logging.getLogger(self.config["name"])
        self.set_configuration()

    @property
    def handler(self) -> OGDLStreamHandler | None:
        for handler in self.logger.handlers:
            if isinstance(handler, OGDLStreamHandler):
                return handler
        return None

    def set_configuration(self):
        # the named logger is shared, so every setting is reapplied
        self.logger.disabled = not self.config["is_enabled"]
        if self.logger.disabled:
            return

        self.logger.setLevel(self.config["level"])
        handler = self.handler
        if handler is None:
            handler = OGDLStreamHandler()
            self.logger.addHandler(handler)
        handler.setFormatter(logging.Formatter(self.config["format"]))
