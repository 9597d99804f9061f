"""Machine translation through the Google Translate and DeepL web endpoints."""
from .api import manual_translate, translate, translate_with, translate_with_param
from .params import TranslateParams
from .translator import (
    BaseTranslator,
    DeepLWebTranslator,
    GoogleTranslator,
    TranslationResult,
    TranslatorError,
    TranslatorRegistry,
    ValidationError,
)
from .translator.registry import (
    get_default_translator,
    get_registry,
    new_deepl_translator,
    new_google_translator,
    set_default_translator,
    use_deepl,
    use_google,
)

__version__ = "2.0.0"

__all__ = [
    "translate",
    "manual_translate",
    "translate_with",
    "translate_with_param",
    "TranslateParams",
    "BaseTranslator",
    "GoogleTranslator",
    "DeepLWebTranslator",
    "TranslationResult",
    "TranslatorError",
    "ValidationError",
    "TranslatorRegistry",
    "get_registry",
    "get_default_translator",
    "set_default_translator",
    "use_google",
    "use_deepl",
    "new_google_translator",
    "new_deepl_translator",
]
