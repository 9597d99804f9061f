from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, Optional, Tuple

import aiohttp

from ..config import SETTINGS
from ..utils.locks import ReadWriteLock
from .transport import create_session


@dataclass(frozen=True, slots=True)
class ConfigSnapshot:
    host: str
    proxy_url: str
    credential: str
    transport: Optional[aiohttp.ClientSession]


class ProviderConfig:
    """Per-client mutable settings guarded by one reader/writer lock.

    An empty ``proxy_url`` or ``credential`` disables the feature. A ``transport``
    of ``None`` makes the translator open a private session for each call.
    """

    def __init__(
        self,
        *,
        host: str,
        proxy_url: str = "",
        credential: str = "",
        transport: aiohttp.ClientSession | None = None,
    ) -> None:
        self._lock = ReadWriteLock()
        self._host = host
        self._proxy_url = proxy_url
        self._credential = credential
        self._transport = transport

    @property
    def host(self) -> str:
        with self._lock.read():
            return self._host

    @host.setter
    def host(self, value: str) -> None:
        with self._lock.write():
            self._host = value

    @property
    def proxy_url(self) -> str:
        with self._lock.read():
            return self._proxy_url

    @proxy_url.setter
    def proxy_url(self, value: str) -> None:
        with self._lock.write():
            self._proxy_url = value

    @property
    def credential(self) -> str:
        with self._lock.read():
            return self._credential

    @credential.setter
    def credential(self, value: str) -> None:
        with self._lock.write():
            self._credential = value

    @property
    def transport(self) -> aiohttp.ClientSession | None:
        with self._lock.read():
            return self._transport

    @transport.setter
    def transport(self, value: aiohttp.ClientSession | None) -> None:
        with self._lock.write():
            self._transport = value

    def snapshot(self) -> ConfigSnapshot:
        """Read every field under a single read lock."""
        with self._lock.read():
            return ConfigSnapshot(
                host=self._host,
                proxy_url=self._proxy_url,
                credential=self._credential,
                transport=self._transport,
            )


@dataclass(frozen=True, slots=True)
class Correction:
    auto_corrected: bool = False
    value: Optional[str] = None
    did_you_mean: bool = False
    did_you_mean_language: bool = False


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Normalized output of a successful translate call."""

    text: str
    source_iso: str
    pronunciation: Optional[str] = None
    alternatives: Tuple[str, ...] = ()
    correction: Correction = field(default_factory=Correction)
    method: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "pronunciation": self.pronunciation,
            "alternatives": list(self.alternatives),
            "from": {
                "language": {
                    "did_you_mean": self.correction.did_you_mean_language,
                    "iso": self.source_iso,
                },
                "text": {
                    "auto_corrected": self.correction.auto_corrected,
                    "value": self.correction.value,
                    "did_you_mean": self.correction.did_you_mean,
                },
            },
            "method": self.method,
        }


class BaseTranslator(ABC):
    name: str = "base"
    default_host: str = ""

    def __init__(
        self,
        *,
        host: str | None = None,
        timeout: float | None = None,
        proxy: str | None = None,
        credential: str | None = None,
        transport: aiohttp.ClientSession | None = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else SETTINGS.translator.session_timeout
        self.config = ProviderConfig(
            host=host or self.default_host,
            proxy_url=proxy or "",
            credential=credential or "",
            transport=transport,
        )
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        """Translate ``text`` and return a fully populated result or raise."""

    @asynccontextmanager
    async def _session_scope(self, snapshot: ConfigSnapshot) -> AsyncIterator[aiohttp.ClientSession]:
        """Yield the configured transport, or a private session closed on exit."""
        if snapshot.transport is not None:
            yield snapshot.transport
            return
        session = create_session(timeout=self.timeout)
        try:
            yield session
        finally:
            await session.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(host={self.config.host!r})"
