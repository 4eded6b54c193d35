"""Package loggers under the ``bwmesh`` namespace.

Library code only asks for loggers; output is switched on by the
application through :func:`configure_logging`, which never touches the
process root logger.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

Level = Union[str, int]

PACKAGE = 'bwmesh'


def _level(level: Level) -> Union[str, int]:
    # setLevel understands upper-case names and rejects unknown ones
    return level.upper() if isinstance(level, str) else level


def configure_logging(level: Level = 'INFO') -> logging.Logger:
    """Send ``bwmesh`` records to stdout at ``level`` and return the package logger.

    The NullHandler installed on import is swapped for a single stream
    handler and propagation to the root logger is turned off, so calling
    this more than once does not duplicate output.
    """
    pkg = logging.getLogger(PACKAGE)
    if all(isinstance(h, logging.NullHandler) for h in pkg.handlers):
        pkg.handlers.clear()
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        pkg.addHandler(handler)
    pkg.propagate = False
    pkg.setLevel(_level(level))
    return pkg


def get_logger(name: str, level: Optional[Level] = None) -> logging.Logger:
    """Logger ``bwmesh.<name>``; without ``level`` it inherits from the package logger."""
    if name != PACKAGE and not name.startswith(PACKAGE + '.'):
        name = f'{PACKAGE}.{name}'
    log = logging.getLogger(name)
    log.setLevel(logging.NOTSET if level is None else _level(level))
    return log


__all__ = ['get_logger', 'configure_logging']
