from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from gtranslate import (
    TranslateParams,
    manual_translate,
    translate,
    translate_with,
    translate_with_param,
)
from gtranslate.translator.base import BaseTranslator, TranslationResult
from gtranslate.translator.errors import ValidationError
from gtranslate.translator.registry import TranslatorRegistry


class RecordingTranslator(BaseTranslator):
    name = "recording"

    def __init__(self) -> None:
        super().__init__(host="example.test")
        self.calls: list[tuple[str, str, str]] = []

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        self.calls.append((text, source_lang, target_lang))
        return TranslationResult(text=f"[{target_lang}] {text}", source_iso=source_lang, method=self.name)


@pytest.fixture
def recorder() -> RecordingTranslator:
    return RecordingTranslator()


@pytest.fixture
def registry(recorder: RecordingTranslator) -> TranslatorRegistry:
    return TranslatorRegistry(recorder)


@pytest.mark.asyncio
async def test_translate_uses_auto_source(registry: TranslatorRegistry, recorder: RecordingTranslator) -> None:
    result = await translate("Hello World", "id", registry=registry)

    assert result.text == "[id] Hello World"
    assert recorder.calls == [("Hello World", "auto", "id")]


@pytest.mark.asyncio
async def test_translate_rejects_empty_text(registry: TranslatorRegistry, recorder: RecordingTranslator) -> None:
    with pytest.raises(ValidationError, match="text"):
        await translate("", "en", registry=registry)

    assert recorder.calls == []


@pytest.mark.asyncio
async def test_translate_rejects_bad_target(registry: TranslatorRegistry, recorder: RecordingTranslator) -> None:
    with pytest.raises(ValidationError, match="to value isn't valid"):
        await translate("hi", "not-a-lang", registry=registry)

    with pytest.raises(ValidationError, match="to value isn't valid"):
        await translate("hi", "x-private", registry=registry)

    with pytest.raises(ValidationError, match="to value is required"):
        await translate("hi", "", registry=registry)

    assert recorder.calls == []


@pytest.mark.asyncio
async def test_manual_translate_validates_both_languages(
    registry: TranslatorRegistry, recorder: RecordingTranslator
) -> None:
    with pytest.raises(ValidationError, match="from value is required"):
        await manual_translate("Halo", "", "en", registry=registry)
    with pytest.raises(ValidationError, match="from value isn't valid"):
        await manual_translate("Halo", "not-a-lang", "en", registry=registry)

    await manual_translate("Halo Semuanya", "id", "jv", registry=registry)

    assert recorder.calls == [("Halo Semuanya", "id", "jv")]


@pytest.mark.asyncio
async def test_translate_with_param_defaults_source_to_auto(
    registry: TranslatorRegistry, recorder: RecordingTranslator
) -> None:
    await translate_with_param(TranslateParams(text="Halo Dunia", to="en"), registry=registry)
    await translate_with_param(TranslateParams(text="这是第一句话。", to="en", from_="zh-cn"), registry=registry)

    assert recorder.calls == [("Halo Dunia", "auto", "en"), ("这是第一句话。", "zh-cn", "en")]


@pytest.mark.asyncio
async def test_translate_with_bypasses_registry(recorder: RecordingTranslator) -> None:
    result = await translate_with(recorder, "Good morning", "ja")

    assert result.source_iso == "auto"
    assert recorder.calls == [("Good morning", "auto", "ja")]


@pytest.mark.asyncio
async def test_errors_propagate_unchanged(registry: TranslatorRegistry, recorder: RecordingTranslator) -> None:
    boom = RuntimeError("boom")
    recorder.translate = AsyncMock(side_effect=boom)

    with pytest.raises(RuntimeError) as excinfo:
        await translate("Hello", "id", registry=registry)

    assert excinfo.value is boom


def test_result_to_dict_matches_wire_shape() -> None:
    result = TranslationResult(text="Halo", source_iso="en", alternatives=("Hai",), method="Free")

    assert result.to_dict() == {
        "text": "Halo",
        "pronunciation": None,
        "alternatives": ["Hai"],
        "from": {
            "language": {"did_you_mean": False, "iso": "en"},
            "text": {"auto_corrected": False, "value": None, "did_you_mean": False},
        },
        "method": "Free",
    }
