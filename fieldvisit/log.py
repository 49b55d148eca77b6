import sys
import logging
import os
from . import __version__, __home__
from datetime import datetime

FMT = "%(asctime)s - %(name)s - %(module)s - %(levelname)s - %(message)s"
LOGGER_NAME = "fieldvisit"


def get_logger(name=None) -> logging.Logger:
    """
    Logger within the fieldvisit namespace. Module loggers propagate to the package logger configured by
    ``setuplog``, so grade fallbacks and shift calculations end up in the same stdout and file handlers.

    Parameters
    ----------
    name : str, optional
        module name, e.g. ``__name__``. Names outside the fieldvisit namespace are nested under it.

    Returns
    -------
    logging.Logger
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def _add_handler(logger, handler, log_level, fmt):
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    return handler


def setuplog(
    path: str = None,
    log_level: int = 20,
    fmt: str = FMT,
    append: bool = True,
    name: str = None,
) -> logging.Logger:
    """Configure the fieldvisit package logger on sys.stdout and, if path is given, a log file.

    Existing handlers of the logger are closed first, so calling this again replaces the configuration instead of
    duplicating messages.

    Parameters
    ----------
    path : str, optional
        path to logfile, by default None
    log_level : int, optional
        Log level [0-50], by default 20 (info)
    fmt : str, optional
        log message formatter, by default FMT
    append : bool, optional
        Whether to append (True) or overwrite (False) to a logfile at path, by default True
    name : str, optional
        sub-logger within the fieldvisit namespace, by default the package logger itself

    Returns
    -------
    logging.Logger
        logger with a stdout handler and, if path is given, a file handler
    """
    logger = get_logger(name)
    for _ in range(len(logger.handlers)):
        logger.handlers.pop().close()  # remove and close existing handlers
    logging.captureWarnings(True)
    logger.setLevel(log_level)
    _add_handler(logger, logging.StreamHandler(sys.stdout), log_level, fmt)
    if path is not None:
        if append is False and os.path.isfile(path):
            os.unlink(path)
        add_filehandler(logger, path, log_level=log_level, fmt=fmt)
    logger.info(f"fieldvisit version: {__version__}")
    return logger


def add_filehandler(logger, path, log_level=20, fmt=FMT):
    """Add file handler to logger, creating the folder of the log file if needed."""
    dirname = os.path.dirname(path)
    if dirname and not os.path.isdir(dirname):
        os.makedirs(dirname)
    isfile = os.path.isfile(path)
    _add_handler(logger, logging.FileHandler(path), log_level, fmt)
    logger.debug(f"{'Appending' if isfile else 'Writing'} log messages to {path}.")


def get_logfile(log_path=None, now=None):
    """Path of the dated log file within log_path (defaults to <home>/log)."""
    if not log_path:
        log_path = os.path.join(__home__, "log")
    if now is None:
        now = datetime.now()
    return os.path.abspath(
        os.path.join(
            log_path,
            now.strftime("%Y%m%d"),
            f"fieldvisit_{now.strftime('%Y%m%dT%H%M%S')}.log"
        )
    )


def start_logger(verbose, quiet, log_path=None, append=True):
    if verbose:
        verbose = 2
    else:
        verbose = 1
    if quiet:
        quiet = 1
    else:
        quiet = 0
    log_level = max(10, 30 - 10 * (verbose - quiet))
    logger = setuplog(
        path=get_logfile(log_path),
        log_level=log_level,
        append=append,
    )
    logger.info("starting...")
    return logger
