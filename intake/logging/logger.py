import logging
import sys


class Log:
    """Centralized logging for the intake pipeline."""

    _logger: logging.Logger = logging.getLogger("intake")

    # HTTP client internals log every request at INFO.
    QUIET_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "openai", "pdfminer")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level, attach a stdout handler once and quiet client libraries."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        for name in cls.QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
