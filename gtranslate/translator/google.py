"""
Google Translate web UI translator.

Speaks the same ``batchexecute`` RPC the translate.google.com page uses.
Every call scrapes fresh session tokens from the landing page, posts the
double JSON encoded ``f.req`` form and walks the positional response tree.
"""
from __future__ import annotations

import json
import random
import re
import urllib.parse
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import aiohttp

from ..config import SETTINGS
from .base import BaseTranslator, Correction, TranslationResult
from .errors import (
    ResponseParseError,
    SessionUnavailableError,
    TransportError,
    TranslationFailedError,
    ValidationError,
)
from .transport import ensure_ok, fetch

# Anti-XSSI prefix ")]}'\n\n" in front of every batchexecute body
RESPONSE_PREFIX_LENGTH = 6

# Positions inside the outer envelope line and the inner document
ENVELOPE_PATH = (0, 2)
SENTENCES_PATH = (1, 0, 0, 5)
SENTENCE_TEXT_PATH = (0,)
PRONUNCIATION_PATH = (1, 0, 0, 1)
SOURCE_ISO_PATH = (1, 3)
AUTO_CORRECTION_PATH = (0, 0)
DID_YOU_MEAN_PATH = (0, 1, 0, 0, 1)

SESSION_ID_KEY = "FdrFJe"
BUILD_LABEL_KEY = "cfb2h"
ANTI_FORGERY_KEY = "SNlM0e"

_HTML_TAG_RE = re.compile(r"<.*?>")


@dataclass(frozen=True, slots=True)
class SessionTokens:
    session_id: str
    build_label: str
    anti_forgery_token: Optional[str]


def extract(key: str, page: str) -> Optional[str]:
    """Slice the value out of a ``"<key>":"<value>"`` marker, None when absent."""
    match = re.search('"' + re.escape(key) + '":"(.*?)"', page)
    if match is None:
        return None
    return match.group(1)


def parse_session_tokens(page: str) -> SessionTokens:
    session_id = extract(SESSION_ID_KEY, page)
    build_label = extract(BUILD_LABEL_KEY, page)
    if session_id is None or build_label is None:
        missing = [key for key, value in ((SESSION_ID_KEY, session_id), (BUILD_LABEL_KEY, build_label)) if value is None]
        raise SessionUnavailableError(f"Google Translate page is missing session tokens: {', '.join(missing)}")
    return SessionTokens(
        session_id=session_id,
        build_label=build_label,
        anti_forgery_token=extract(ANTI_FORGERY_KEY, page),
    )


def dig(tree: Any, path: Sequence[int]) -> Any:
    """Follow list indexes through ``tree``; None when any step is missing."""
    node = tree
    for index in path:
        if not isinstance(node, list) or index >= len(node):
            return None
        node = node[index]
    return node


def build_f_req(text: str, source_lang: str, target_lang: str, *, rpc_id: str | None = None) -> str:
    rpc_id = rpc_id or SETTINGS.google.rpc_id
    inner = json.dumps([[text, source_lang, target_lang, True], [None]], ensure_ascii=False, separators=(",", ":"))
    return json.dumps([[[rpc_id, inner, None, "generic"]]], ensure_ascii=False, separators=(",", ":"))


def random_request_id() -> int:
    settings = SETTINGS.google
    return settings.request_id_min + random.randrange(settings.request_id_span)


def build_batchexecute_request(
    host: str,
    tokens: SessionTokens,
    text: str,
    source_lang: str,
    target_lang: str,
    *,
    request_id: int | None = None,
) -> Tuple[str, Dict[str, str]]:
    """Return the RPC URL and the form fields for one translate call."""
    settings = SETTINGS.google
    params = {
        "rpcids": settings.rpc_id,
        "f.sid": tokens.session_id,
        "bl": tokens.build_label,
        "hl": settings.ui_language,
        "soc-app": "1",
        "soc-platform": "1",
        "soc-device": "1",
        "_reqid": str(request_id if request_id is not None else random_request_id()),
        "rt": "c",
    }
    url = f"https://translate.{host}/_/TranslateWebserverUi/data/batchexecute?{urllib.parse.urlencode(params)}"
    form = {"f.req": build_f_req(text, source_lang, target_lang, rpc_id=settings.rpc_id)}
    if tokens.anti_forgery_token:
        form["at"] = tokens.anti_forgery_token
    return url, form


def _load_json(payload: str, what: str) -> Any:
    try:
        return json.loads(payload)
    except ValueError as exc:
        raise ResponseParseError(f"Google Translate returned malformed {what}: {exc}") from exc


def _non_empty_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def parse_batchexecute_response(raw: str, source_lang: str) -> TranslationResult:
    """Decode the framed, JSON-in-JSON batchexecute body."""
    if len(raw) < RESPONSE_PREFIX_LENGTH:
        raise ResponseParseError("Google Translate returned an invalid response")
    lines = raw[RESPONSE_PREFIX_LENGTH:].split("\n")
    if len(lines) < 2:
        raise ResponseParseError("Google Translate response is missing the RPC envelope")

    envelope = _load_json(lines[1], "envelope")
    inner_json = dig(envelope, ENVELOPE_PATH)
    if not isinstance(inner_json, str) or not inner_json:
        raise TranslationFailedError(
            "request on google translate api isn't working, please check your parameter"
        )
    data = _load_json(inner_json, "translation document")

    fragments: List[str] = []
    sentences = dig(data, SENTENCES_PATH)
    for sentence in sentences if isinstance(sentences, list) else []:
        fragment = dig(sentence, SENTENCE_TEXT_PATH)
        if isinstance(fragment, str):
            fragments.append(fragment)
    text = " ".join(fragments).strip()
    if not text:
        raise TranslationFailedError("Google Translate returned no translated text")

    auto_corrected = _non_empty_str(dig(data, AUTO_CORRECTION_PATH))
    if auto_corrected is not None:
        correction = Correction(auto_corrected=True, value=auto_corrected, did_you_mean_language=True)
    else:
        suggestion = _non_empty_str(dig(data, DID_YOU_MEAN_PATH))
        if suggestion is not None:
            correction = Correction(value=_HTML_TAG_RE.sub("", suggestion), did_you_mean=True)
        else:
            correction = Correction()

    return TranslationResult(
        text=text,
        source_iso=_non_empty_str(dig(data, SOURCE_ISO_PATH)) or source_lang,
        pronunciation=_non_empty_str(dig(data, PRONUNCIATION_PATH)),
        correction=correction,
        method="Google",
    )


class GoogleTranslator(BaseTranslator):
    """Google Translate client built on the web UI's batchexecute RPC."""

    name = "google"
    default_host = SETTINGS.google.default_host

    def __init__(
        self,
        *,
        host: str | None = None,
        timeout: float | None = None,
        proxy: str | None = None,
        transport: aiohttp.ClientSession | None = None,
    ) -> None:
        super().__init__(host=host, timeout=timeout, proxy=proxy, transport=transport)

    def _bootstrap_headers(self) -> Dict[str, str]:
        return {
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,"
            "image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.9",
            "Accept-Language": "en-US,en;q=0.9,id;q=0.8",
            "Accept-Encoding": SETTINGS.translator.accept_encoding,
            "Sec-Ch-Ua": '".Not/A)Brand";v="99", "Google Chrome";v="103", "Chromium";v="103"',
            "Sec-Ch-Ua-Mobile": "?0",
            "Sec-Ch-Ua-Platform": '"Windows"',
            "Sec-Fetch-Dest": "document",
            "Sec-Fetch-User": "?1",
            "User-Agent": SETTINGS.google.bootstrap_user_agent,
        }

    def _rpc_headers(self, host: str) -> Dict[str, str]:
        return {
            "Sec-Ch-Ua": '"Google Chrome";v="95", "Chromium";v="95", ";Not A Brand";v="99"',
            "Content-Type": "application/x-www-form-urlencoded;charset=UTF-8",
            "X-Same-Domain": "1",
            "Sec-Ch-Ua-Mobile": "?1",
            "User-Agent": SETTINGS.google.rpc_user_agent,
            "Sec-Ch-Ua-Platform": '"Android"',
            "Accept": "*/*",
            "Accept-Encoding": SETTINGS.translator.accept_encoding,
            "Origin": f"https://translate.{host}",
            "Sec-Fetch-Site": "same-origin",
            "Sec-Fetch-Mode": "cors",
            "Sec-Fetch-Dest": "empty",
            "Accept-Language": "en-US,en;q=0.9",
        }

    async def _bootstrap(self, session: aiohttp.ClientSession, host: str, proxy_url: str) -> SessionTokens:
        try:
            response = await fetch(
                session,
                "GET",
                f"https://translate.{host}",
                headers=self._bootstrap_headers(),
                proxy=proxy_url,
            )
        except TransportError as exc:
            raise SessionUnavailableError(f"Google Translate page unavailable: {exc}") from exc
        if response.status != 200:
            raise SessionUnavailableError(
                f"Google Translate page request failed with status code {response.status}"
            )
        return parse_session_tokens(response.text())

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        if not text:
            raise ValidationError("No text to translate")

        snapshot = self.config.snapshot()
        source = source_lang or "auto"
        async with self._session_scope(snapshot) as session:
            tokens = await self._bootstrap(session, snapshot.host, snapshot.proxy_url)
            url, form = build_batchexecute_request(snapshot.host, tokens, text, source, target_lang)
            self.logger.debug(f"Google batchexecute {source}->{target_lang} via {snapshot.host}")
            response = await fetch(
                session,
                "POST",
                url,
                headers=self._rpc_headers(snapshot.host),
                data=urllib.parse.urlencode(form),
                proxy=snapshot.proxy_url,
            )
        ensure_ok(response, provider="Google Translate")
        return parse_batchexecute_response(response.text(), source)
