"""
DeepL Web Translator

Translates text through DeepL's browser JSON-RPC endpoint without an API key.
The request carries the same i-count timestamp and method spacing quirks as
the official web client; a ``dl_session`` cookie unlocks the Pro tier.
"""
from __future__ import annotations

import json
import random
import time
from dataclasses import dataclass
from typing import Dict, List

import aiohttp

from ..config import SETTINGS
from ..utils.lang import AUTO, detect_language
from .base import BaseTranslator, Correction, TranslationResult
from .errors import ResponseParseError, TranslationFailedError, ValidationError
from .transport import ensure_ok, fetch


@dataclass(frozen=True, slots=True)
class OutboundEnvelope:
    request_id: int
    timestamp: int
    payload: str


def get_i_count(text: str) -> int:
    return text.count("i")


def get_random_number() -> int:
    return (random.randint(0, 99998) + 8300000) * 1000


def get_timestamp(i_count: int, now_ms: int | None = None) -> int:
    """Current time in ms, moved onto the next multiple of ``i_count + 1``.

    The web client rounds up rather than down to the enclosing multiple.
    Both keep ``ts % (i_count + 1) == 0``; rounding up matches captured traffic.
    """
    ts = now_ms if now_ms is not None else int(time.time() * 1000)
    if i_count != 0:
        i_count += 1
        return ts - ts % i_count + i_count
    return ts


def handle_body_method(request_id: int, body: str) -> str:
    """Apply the web client's spacing around the ``method`` key."""
    if (request_id + 5) % 29 == 0 or (request_id + 3) % 13 == 0:
        return body.replace('"method":"', '"method" : "', 1)
    return body.replace('"method":"', '"method": "', 1)


def build_envelope(
    text: str,
    source_lang: str,
    target_lang: str,
    *,
    request_id: int | None = None,
    now_ms: int | None = None,
) -> OutboundEnvelope:
    request_id = request_id if request_id is not None else get_random_number()
    timestamp = get_timestamp(get_i_count(text), now_ms)
    body = {
        "jsonrpc": "2.0",
        "method": SETTINGS.deepl.rpc_method,
        "id": request_id,
        "params": {
            "splitting": "newlines",
            "lang": {
                "source_lang_user_selected": source_lang,
                "target_lang": target_lang,
            },
            "texts": [{"text": text, "requestAlternatives": SETTINGS.deepl.request_alternatives}],
            "timestamp": timestamp,
        },
    }
    payload = json.dumps(body, ensure_ascii=False, separators=(",", ":"))
    return OutboundEnvelope(
        request_id=request_id,
        timestamp=timestamp,
        payload=handle_body_method(request_id, payload),
    )


def parse_jsonrpc_response(body: bytes | str, source_lang: str, method: str) -> TranslationResult:
    """Turn a decoded ``/jsonrpc`` body into a result or raise."""
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise ResponseParseError(f"DeepL returned malformed JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ResponseParseError("DeepL returned an unexpected JSON document")

    error = data.get("error")
    if isinstance(error, dict):
        raise TranslationFailedError(error.get("message") or None, code=error.get("code"))

    result = data.get("result")
    texts = result.get("texts") if isinstance(result, dict) else None
    if not isinstance(texts, list) or not texts or not isinstance(texts[0], dict):
        raise TranslationFailedError("Translation failed", code=503)

    main_text = texts[0].get("text")
    if not isinstance(main_text, str) or not main_text:
        raise TranslationFailedError("Translation failed", code=503)

    alternatives: List[str] = []
    for alt in texts[0].get("alternatives") or []:
        alt_text = alt.get("text") if isinstance(alt, dict) else None
        if isinstance(alt_text, str) and alt_text:
            alternatives.append(alt_text)

    detected = result.get("lang")
    return TranslationResult(
        text=main_text,
        source_iso=detected if isinstance(detected, str) and detected else source_lang,
        alternatives=tuple(alternatives),
        correction=Correction(),
        method=method,
    )


class DeepLWebTranslator(BaseTranslator):
    """DeepL Web Translator using the internal JSON-RPC API.

    Features:
    - No API key required
    - Optional ``dl_session`` cookie for the Pro tier
    - Source language auto-detection before the request is signed
    """

    name = "deepl"
    default_host = SETTINGS.deepl.default_host

    def __init__(
        self,
        *,
        host: str | None = None,
        timeout: float | None = None,
        proxy: str | None = None,
        dl_session: str | None = None,
        transport: aiohttp.ClientSession | None = None,
    ) -> None:
        super().__init__(host=host, timeout=timeout, proxy=proxy, credential=dl_session, transport=transport)

    @property
    def dl_session(self) -> str:
        return self.config.credential

    @dl_session.setter
    def dl_session(self, value: str) -> None:
        self.config.credential = value

    def _map_lang(self, lang: str) -> str:
        """Map language code to DeepL format."""
        return lang.upper()

    def _resolve_source(self, text: str, source_lang: str) -> str:
        if source_lang and source_lang.lower() != AUTO:
            # DeepL only knows primary source languages (ZH, not ZH-CN)
            return self._map_lang(source_lang.split("-", 1)[0])
        detected = detect_language(text)
        if not detected:
            raise ValidationError("Unable to detect the source language")
        self.logger.debug(f"Detected source language: {detected}")
        return detected.upper()

    def _build_headers(self, dl_session: str) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "*/*",
            "Accept-Language": "en-US,en;q=0.9",
            "Accept-Encoding": SETTINGS.translator.accept_encoding,
            "Origin": "https://www.deepl.com",
            "Referer": "https://www.deepl.com/",
            "Sec-Fetch-Dest": "empty",
            "Sec-Fetch-Mode": "cors",
            "Sec-Fetch-Site": "same-site",
            "User-Agent": SETTINGS.deepl.user_agent,
        }
        if dl_session:
            headers["Cookie"] = f"dl_session={dl_session}"
        return headers

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        if not text:
            raise ValidationError("No text to translate")

        snapshot = self.config.snapshot()
        source = self._resolve_source(text, source_lang)
        envelope = build_envelope(text, source, self._map_lang(target_lang))
        method = "Pro" if snapshot.credential else "Free"
        url = f"https://{snapshot.host}/jsonrpc"

        self.logger.debug(f"DeepL request id={envelope.request_id} {source}->{target_lang} ({method})")
        async with self._session_scope(snapshot) as session:
            response = await fetch(
                session,
                "POST",
                url,
                headers=self._build_headers(snapshot.credential),
                data=envelope.payload.encode("utf-8"),
                proxy=snapshot.proxy_url,
            )
        ensure_ok(response, provider="DeepL")
        return parse_jsonrpc_response(response.body, source, method)
