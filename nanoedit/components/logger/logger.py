import logging

from nanoedit.components.logger.logger_interface import LoggerInterface

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Logger(LoggerInterface):
    def __init__(self, log_format: str | None = None, log_level: str | None = None):
        self.log_format = log_format or DEFAULT_LOG_FORMAT
        self.log_level = logging.getLevelName((log_level or "INFO").upper())
        if not isinstance(self.log_level, int):
            raise ValueError(f"Unknown log level: {log_level}")

        self.handler = logging.StreamHandler()
        self.handler.setFormatter(logging.Formatter(self.log_format))

    def get_logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(self.log_level)
        if self.handler not in logger.handlers:
            logger.addHandler(self.handler)
        logger.propagate = False
        return logger
