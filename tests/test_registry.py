from __future__ import annotations

import threading

import pytest

from gtranslate.translator.base import BaseTranslator, ProviderConfig, TranslationResult
from gtranslate.translator.deepl_web import DeepLWebTranslator
from gtranslate.translator.factory import build_translator, get_available_engines
from gtranslate.translator.google import GoogleTranslator
from gtranslate.translator.registry import TranslatorRegistry


class EchoTranslator(BaseTranslator):
    name = "echo"

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        return TranslationResult(text=text, source_iso=source_lang, method=self.name)


@pytest.mark.parametrize(
    "field, value",
    [("host", "google.co.uk"), ("proxy_url", "http://proxy:8080"), ("credential", "token"), ("transport", object())],
)
def test_config_set_then_get(field: str, value) -> None:
    config = ProviderConfig(host="google.com")

    setattr(config, field, value)

    assert getattr(config, field) is value


def test_empty_strings_disable_features() -> None:
    config = ProviderConfig(host="www2.deepl.com", proxy_url="http://proxy:8080", credential="x")
    config.proxy_url = ""
    config.credential = ""

    snapshot = config.snapshot()

    assert snapshot.proxy_url == ""
    assert snapshot.credential == ""
    assert snapshot.host == "www2.deepl.com"


def test_config_reads_never_see_partial_writes() -> None:
    hosts = [f"google.co.{suffix}" for suffix in ("id", "uk", "jp", "kr")]
    config = ProviderConfig(host=hosts[0])
    seen: list[str] = []
    stop = threading.Event()

    def reader() -> None:
        while not stop.is_set():
            seen.append(config.host)

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for thread in readers:
        thread.start()
    for i in range(500):
        config.host = hosts[i % len(hosts)]
    stop.set()
    for thread in readers:
        thread.join()

    assert seen
    assert set(seen) <= set(hosts)


def test_translator_options_land_in_config() -> None:
    translator = DeepLWebTranslator(host="api.deepl.com", proxy="http://proxy:8080", dl_session="abc")

    assert translator.config.host == "api.deepl.com"
    assert translator.config.proxy_url == "http://proxy:8080"
    assert translator.dl_session == "abc"

    translator.dl_session = "def"
    assert translator.config.credential == "def"


def test_default_hosts() -> None:
    assert GoogleTranslator().config.host == "google.com"
    assert DeepLWebTranslator().config.host == "www2.deepl.com"


def test_registry_defaults_to_google() -> None:
    assert isinstance(TranslatorRegistry().get_default(), GoogleTranslator)


def test_registry_accepts_injected_translator() -> None:
    echo = EchoTranslator()

    assert TranslatorRegistry(echo).get_default() is echo


def test_registry_rejects_none() -> None:
    registry = TranslatorRegistry()

    with pytest.raises(ValueError):
        registry.set_default(None)

    assert registry.get_default() is not None


def test_registry_use_helpers_swap_default() -> None:
    registry = TranslatorRegistry()

    deepl = registry.use_deepl(dl_session="abc")
    assert registry.get_default() is deepl
    assert deepl.config.credential == "abc"

    google = registry.use_google(host="google.co.id")
    assert registry.get_default() is google


def test_concurrent_reads_during_swaps_never_see_none() -> None:
    candidates = [EchoTranslator(), GoogleTranslator(), DeepLWebTranslator()]
    registry = TranslatorRegistry(candidates[0])
    observed: list[BaseTranslator] = []
    stop = threading.Event()

    def reader() -> None:
        while not stop.is_set():
            observed.append(registry.get_default())

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for thread in readers:
        thread.start()
    for i in range(300):
        registry.set_default(candidates[i % len(candidates)])
    stop.set()
    for thread in readers:
        thread.join()

    assert observed
    assert all(translator in candidates for translator in observed)


def test_factory_builds_each_engine() -> None:
    assert set(get_available_engines()) == {"google", "deepl"}
    assert isinstance(build_translator("Google"), GoogleTranslator)
    deepl = build_translator("deepl", dl_session="abc", proxy="http://proxy:8080")
    assert isinstance(deepl, DeepLWebTranslator)
    assert deepl.config.credential == "abc"

    with pytest.raises(ValueError):
        build_translator("yandex")
