import logging
import logging.handlers
from functools import wraps
from pathlib import Path

from ..config import Config
from .exceptions import ConfigError

class CustomLogger:
    """Custom logger with console and optional rotating file output"""

    def __init__(self, name: str, level: str = None):
        self._name = name
        settings = Config.get_logging_config()
        level = (level or settings['level']).upper()
        if not isinstance(getattr(logging, level, None), int):
            raise ConfigError(f"Unknown log level: {level!r}")

        self.logger = logging.getLogger(f"persian_chrono.{name}")
        self.logger.setLevel(getattr(logging, level))

        # Clear any existing handlers to avoid duplicates
        if self.logger.hasHandlers():
            self.logger.handlers.clear()

        formatter = logging.Formatter(settings['format'], datefmt=settings['datefmt'])

        if settings['file']:
            try:
                log_path = Path(settings['file'])
                log_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.handlers.RotatingFileHandler(
                    filename=log_path,
                    maxBytes=settings['max_bytes'],
                    backupCount=settings['backup_count']
                )
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)
            except OSError as e:
                # Console output still works without the file
                logging.getLogger(__name__).warning(
                    "Could not create log file %s: %s", settings['file'], e
                )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

    @property
    def name(self):
        return self._name

    def debug(self, message, *args):
        self.logger.debug(message, *args)

    def info(self, message, *args):
        self.logger.info(message, *args)

    def warning(self, message, *args):
        self.logger.warning(message, *args)

    def error(self, message, *args):
        self.logger.error(message, *args)

    def exception(self, message: str, *args, exc_info=True, **kwargs):
        self.logger.exception(message, *args, exc_info=exc_info, **kwargs)

# Create a decorator for error handling
def error_handler(logger):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.debug("Error in %s: %s", func.__name__, e)
                raise
        return wrapper
    return decorator
