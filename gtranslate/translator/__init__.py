"""
gtranslate translation engines

Supported engines:
- Google Translate (web UI batchexecute RPC, no key)
- DeepL Web (JSON-RPC, free or Pro with a dl_session cookie)
"""
from .base import BaseTranslator, ConfigSnapshot, Correction, ProviderConfig, TranslationResult
from .deepl_web import DeepLWebTranslator
from .errors import (
    DecodeError,
    RateLimitedError,
    ResponseParseError,
    SessionUnavailableError,
    TranslationFailedError,
    TranslatorError,
    TransportError,
    ValidationError,
)
from .factory import AVAILABLE_ENGINES, build_translator, get_available_engines
from .google import GoogleTranslator
from .registry import TranslatorRegistry, get_registry

__all__ = [
    "BaseTranslator",
    "ConfigSnapshot",
    "Correction",
    "ProviderConfig",
    "TranslationResult",
    "GoogleTranslator",
    "DeepLWebTranslator",
    "TranslatorRegistry",
    "get_registry",
    "build_translator",
    "get_available_engines",
    "AVAILABLE_ENGINES",
    "TranslatorError",
    "ValidationError",
    "SessionUnavailableError",
    "TransportError",
    "RateLimitedError",
    "DecodeError",
    "TranslationFailedError",
    "ResponseParseError",
]
