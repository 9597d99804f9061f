"""
HTTP execution and body decoding shared by the web translators.

Sessions created here disable aiohttp's automatic decompression so the
body can be decoded from the ``Content-Encoding`` header explicitly.
"""
from __future__ import annotations

import asyncio
import gzip
import logging
import zlib
from dataclasses import dataclass
from typing import Mapping, Optional

import aiohttp
import brotli

from .errors import DecodeError, RateLimitedError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RawResponse:
    status: int
    headers: Mapping[str, str]
    body: bytes

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


def create_session(*, timeout: float) -> aiohttp.ClientSession:
    return aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=timeout),
        auto_decompress=False,
    )


def decode_body(raw: bytes, content_encoding: str | None) -> bytes:
    """Decode ``raw`` according to a Content-Encoding label.

    Unknown or absent labels pass the body through unchanged.
    """
    encoding = (content_encoding or "").strip().lower()
    try:
        if encoding == "gzip":
            return gzip.decompress(raw)
        if encoding == "deflate":
            try:
                return zlib.decompress(raw)
            except zlib.error:
                return zlib.decompress(raw, -zlib.MAX_WBITS)
        if encoding == "br":
            return brotli.decompress(raw)
    except (OSError, EOFError, zlib.error, brotli.error) as exc:
        raise DecodeError(f"failed to decode {encoding} body: {exc}") from exc
    return raw


async def fetch(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    *,
    headers: Optional[Mapping[str, str]] = None,
    data: str | bytes | None = None,
    proxy: str | None = None,
) -> RawResponse:
    """Run one request and return the fully read body, decoded when the status is 200."""
    try:
        async with session.request(
            method,
            url,
            headers=dict(headers or {}),
            data=data,
            proxy=proxy or None,
        ) as resp:
            raw = await resp.read()
            status = resp.status
            response_headers = resp.headers
    except asyncio.TimeoutError as exc:
        raise TransportError(f"request to {url} timed out") from exc
    except aiohttp.ClientError as exc:
        raise TransportError(f"bad network: {exc}") from exc

    # non-200 bodies stay raw; ensure_ok reports them by status
    if status != 200 or getattr(session, "auto_decompress", False):
        body = raw
    else:
        body = decode_body(raw, response_headers.get("Content-Encoding"))
    logger.debug(f"{method} {url} -> HTTP {status} ({len(body)} bytes)")
    return RawResponse(status=status, headers=response_headers, body=body)


def ensure_ok(response: RawResponse, *, provider: str) -> None:
    if response.status == 429:
        raise RateLimitedError(
            f"{provider}: too many requests, your IP has been blocked temporarily",
            status_code=429,
        )
    if response.status != 200:
        raise TransportError(
            f"{provider}: request failed with status code {response.status}",
            status_code=response.status,
        )
