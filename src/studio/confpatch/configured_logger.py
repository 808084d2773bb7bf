import logging
import sys

from typing import Optional

# LogLevel type since logging lib doesn't define its own enum/type for it
LogLevel = int

LOGGER_NAME = 'studio.confpatch'


def new_logger(
    name: str = LOGGER_NAME,
    level: LogLevel = logging.INFO,
    outfile: Optional[str] = None,
    stderr: Optional[bool] = True,
) -> logging.Logger:
    """
    Configure the tools' logger. Module loggers under ``studio.confpatch``
    propagate to it.

    :param name: The name of the logger. Defaults to "studio.confpatch".
    :param level: The logging level. Defaults to INFO.
    :param outfile: Optional to set. When set, will log to a file instead of stderr.
    :param stderr: Log to stderr when outfile is not set. Set to False to log to stdout.
    :return: The configured logger.
    """
    log = logging.getLogger(name)
    log.setLevel(level)
    fmt = logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s',
                            '%Y-%m-%d %H:%M:%S')

    if outfile is not None:
        handler = logging.FileHandler(outfile)
    elif stderr:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(fmt)

    # repeated calls in one process reconfigure instead of stacking handlers
    for old in list(log.handlers):
        log.removeHandler(old)
        old.close()
    log.addHandler(handler)
    log.propagate = False

    return log
