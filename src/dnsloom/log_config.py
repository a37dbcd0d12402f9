# dnsloom/log_config.py
"""Logging setup for dnsloom.

Every module logs through the shared Loguru ``logger``. The ``dnsloom``
records are disabled on import, so an application that never calls
``configure_logging()`` sees nothing from the client:

```python
from dnsloom.log_config import configure_logging

configure_logging(level="DEBUG")  # requests sent, responses received
```
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

logger.disable("dnsloom")


def configure_logging(level: str = "INFO", sink=sys.stderr, *, diagnose: bool = False):
    """Enables dnsloom logging and routes it to ``sink``.

    Existing handlers are replaced by a single handler using ``LOG_FORMAT``.

    Args:
        level: The minimum level, case-insensitive (e.g. "debug", "WARNING").
        sink: Anything Loguru accepts as a sink (stream, path, callable).
        diagnose: Show variable values in tracebacks. Values may include
            credentials, so this is off unless asked for.
    """
    level = level.upper()
    logger.remove()
    logger.add(
        sink,
        level=level,
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=diagnose,
    )
    logger.enable("dnsloom")
    logger.debug(f"dnsloom logging enabled at {level}")
