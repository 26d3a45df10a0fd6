import logging, json, sys, time, os

from .constants import DEFAULT_LOG_LEVEL

ROOT_LOGGER = "SecureVariable"
LOG_LEVEL_ENV = "SECURE_VARIABLE_LOG_LEVEL"


def parse_level(level):
    """Map a level name or number to a logging level; None when unknown."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else None


def default_level():
    # a bad env value must not break importing the package
    return parse_level(os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)) or logging.INFO


def get_logger(name=ROOT_LOGGER, level=None, to_file=None):
    """
    Structured JSON logger for the secure_variable modules.

    Loggers below ``SecureVariable.`` carry no handler or level of their own;
    they inherit both from the package logger, so one configure_logging()
    call governs the whole package.
    """
    if name.startswith(ROOT_LOGGER + "."):
        get_logger(ROOT_LOGGER)
        return logging.getLogger(name)

    logger = logging.getLogger(name)
    if level is not None:
        resolved = parse_level(level)
        if resolved is None:
            raise ValueError(f"Unknown log level: {level}")
        logger.setLevel(resolved)
    elif logger.level == logging.NOTSET:
        logger.setLevel(default_level())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
