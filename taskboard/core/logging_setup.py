import logging
import sys
from typing import Union

from taskboard.core.config import settings

_HANDLER_NAME = "taskboard-console"


def setup_logging(level: Union[str, int, None] = None) -> logging.Logger:
    """
    Attache un handler stderr formaté au logger "taskboard".

    Peut être appelé plusieurs fois : le handler n'est ajouté qu'une seule fois,
    seul le niveau est mis à jour.
    """
    logger = logging.getLogger("taskboard")
    logger.setLevel(level or settings.LOG_LEVEL)

    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    return logger
