import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("PIZZA_LOG_LEVEL", "WARNING")
MENU_FILE = os.getenv("PIZZA_MENU_FILE", str(Path(__file__).with_name("menu.json")))


def configure_logging(level: str = None):
    """Apply the configured log level to the root logger."""
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    resolved = getattr(logging, level, None)
    # Only int attributes of logging are levels; BASIC_FORMAT is a str
    if not isinstance(resolved, int) or isinstance(resolved, bool):
        resolved = logging.WARNING
    logging.getLogger().setLevel(resolved)
