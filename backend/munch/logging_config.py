import logging
import sys
from typing import Optional

from munch.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "munch-stdout"


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stdout handler to the root logger once and set its level."""
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        h = logging.StreamHandler(sys.stdout)
        h.set_name(HANDLER_NAME)
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(h)
