## Logging setup
import logging
from typing import Iterable

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)


def redact(text: str, secrets: Iterable[str]) -> str:
    """Mask every non-empty secret that appears in text."""
    for secret in secrets:
        if secret:
            text = text.replace(secret, "***")
    return text
