import logging
import os

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def level_for_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0) -> int:
    """Configure the root logger for command-line use and return the chosen level.

    ``-v`` maps to INFO and ``-vv`` to DEBUG. DELVE_LOG_LEVEL, when set to a
    level name, wins over the command line.
    """
    level = level_for_verbosity(verbosity)
    level_name = os.getenv("DELVE_LOG_LEVEL")
    if level_name:
        named = getattr(logging, level_name.upper(), None)
        if isinstance(named, int):
            level = named
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("delve").setLevel(level)
    return level
