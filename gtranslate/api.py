"""Validated entry points that delegate to the default (or a given) translator."""
from __future__ import annotations

from .params import AUTO, TranslateParams
from .translator.base import BaseTranslator, TranslationResult
from .translator.errors import ValidationError
from .translator.registry import TranslatorRegistry, get_registry
from .utils.lang import is_valid_language_tag


def _require_text(text: str) -> None:
    if not text:
        raise ValidationError("text value is required")


def _require_lang(value: str, label: str) -> None:
    if not value:
        raise ValidationError(f"{label} value is required")
    if not is_valid_language_tag(value):
        raise ValidationError(f"{label} value isn't valid: {value!r}")


def _check_source(value: str) -> str:
    if not value or value.lower() == AUTO:
        return AUTO
    if not is_valid_language_tag(value):
        raise ValidationError(f"from value isn't valid: {value!r}")
    return value


def _active(registry: TranslatorRegistry | None) -> BaseTranslator:
    return (registry or get_registry()).get_default()


async def translate(text: str, to_lang: str, *, registry: TranslatorRegistry | None = None) -> TranslationResult:
    """Translate ``text`` into ``to_lang`` with the source language auto-detected."""
    _require_text(text)
    _require_lang(to_lang, "to")
    return await _active(registry).translate(text, AUTO, to_lang)


async def manual_translate(
    text: str,
    from_lang: str,
    to_lang: str,
    *,
    registry: TranslatorRegistry | None = None,
) -> TranslationResult:
    _require_text(text)
    if not from_lang:
        raise ValidationError("from value is required")
    source = _check_source(from_lang)
    _require_lang(to_lang, "to")
    return await _active(registry).translate(text, source, to_lang)


async def translate_with_param(
    params: TranslateParams,
    *,
    registry: TranslatorRegistry | None = None,
) -> TranslationResult:
    _require_text(params.text)
    _require_lang(params.to, "to")
    source = _check_source(params.from_)
    return await _active(registry).translate(params.text, source, params.to)


async def translate_with(translator: BaseTranslator, text: str, to_lang: str) -> TranslationResult:
    """Translate with an explicit translator instead of the process default."""
    _require_text(text)
    _require_lang(to_lang, "to")
    return await translator.translate(text, AUTO, to_lang)
