from .lang import detect_language, is_valid_language_tag
from .locks import ReadWriteLock
from .logging_config import configure_logging

__all__ = [
    "detect_language",
    "is_valid_language_tag",
    "ReadWriteLock",
    "configure_logging",
]
