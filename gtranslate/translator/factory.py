"""
Translator Factory

Factory for creating translator instances.
Supports: Google (web UI RPC), DeepL Web (free or dl_session Pro)
"""
from __future__ import annotations

from typing import Optional

import aiohttp

from .base import BaseTranslator
from .deepl_web import DeepLWebTranslator
from .google import GoogleTranslator


# Available translation engines
AVAILABLE_ENGINES = {
    "google": "Google Translate",
    "deepl": "DeepL Web (Free/Pro)",
}


def get_available_engines() -> dict[str, str]:
    """Get available translation engines with display names."""
    return AVAILABLE_ENGINES.copy()


def build_translator(
    engine_name: str,
    *,
    host: Optional[str] = None,
    proxy: Optional[str] = None,
    dl_session: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[aiohttp.ClientSession] = None,
) -> BaseTranslator:
    """Build a translator instance.

    Args:
        engine_name: Name of the engine (google, deepl)
        host: Override the provider host
        proxy: Optional proxy URL
        dl_session: DeepL session cookie (deepl only, enables Pro)
        timeout: Per-call timeout for privately opened sessions
        transport: Shared aiohttp session

    Returns:
        BaseTranslator instance

    Raises:
        ValueError: If engine is not supported
    """
    engine = engine_name.lower()

    if engine == "google":
        return GoogleTranslator(host=host, proxy=proxy, timeout=timeout, transport=transport)

    if engine == "deepl":
        return DeepLWebTranslator(
            host=host,
            proxy=proxy,
            dl_session=dl_session,
            timeout=timeout,
            transport=transport,
        )

    raise ValueError(f"Unsupported translator engine: {engine_name}")
