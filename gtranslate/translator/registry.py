"""Process-scoped holder of the default translator used by the convenience API."""
from __future__ import annotations

import logging
from typing import Any

from ..utils.locks import ReadWriteLock
from .base import BaseTranslator
from .deepl_web import DeepLWebTranslator
from .google import GoogleTranslator

logger = logging.getLogger(__name__)


class TranslatorRegistry:
    """Holds exactly one active translator; swaps are atomic for readers."""

    def __init__(self, initial: BaseTranslator | None = None) -> None:
        self._lock = ReadWriteLock()
        self._translator: BaseTranslator = initial if initial is not None else GoogleTranslator()

    def get_default(self) -> BaseTranslator:
        with self._lock.read():
            return self._translator

    def set_default(self, translator: BaseTranslator) -> None:
        if translator is None:
            raise ValueError("default translator cannot be None")
        with self._lock.write():
            self._translator = translator
        logger.debug(f"Default translator set to {translator!r}")

    def use_google(self, **options: Any) -> GoogleTranslator:
        translator = GoogleTranslator(**options)
        self.set_default(translator)
        return translator

    def use_deepl(self, **options: Any) -> DeepLWebTranslator:
        translator = DeepLWebTranslator(**options)
        self.set_default(translator)
        return translator


_registry = TranslatorRegistry()


def get_registry() -> TranslatorRegistry:
    return _registry


def get_default_translator() -> BaseTranslator:
    return _registry.get_default()


def set_default_translator(translator: BaseTranslator) -> None:
    _registry.set_default(translator)


def use_google(**options: Any) -> GoogleTranslator:
    """Make a new Google translator the process default."""
    return _registry.use_google(**options)


def use_deepl(**options: Any) -> DeepLWebTranslator:
    """Make a new DeepL web translator the process default."""
    return _registry.use_deepl(**options)


def new_google_translator(**options: Any) -> GoogleTranslator:
    return GoogleTranslator(**options)


def new_deepl_translator(**options: Any) -> DeepLWebTranslator:
    return DeepLWebTranslator(**options)
