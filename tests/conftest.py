from __future__ import annotations

import asyncio
import gzip
import json
from types import SimpleNamespace
from typing import Any, List

import pytest
from multidict import CIMultiDict

SOURCE_TEXT = "这是第一句话。这是第二句话。"
LANDING_PAGE = (
    '<html><script>window.WIZ_global_data = {"cfb2h":"boq_translate-webserver_20240101.08_p0",'
    '"FdrFJe":"-2371429744390616913","SNlM0e":"AKlEn5gAbCdEf:1700000000000","qwAQke":"TranslateWebserverUi"};'
    "</script></html>"
)


class FakeResponse:
    def __init__(self, status: int = 200, body: bytes | str = b"", headers: dict | None = None) -> None:
        self.status = status
        self._body = body.encode("utf-8") if isinstance(body, str) else body
        self.headers = CIMultiDict(headers or {})

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


class StalledResponse(FakeResponse):
    """A response whose body never arrives until ``release`` is set."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def read(self) -> bytes:
        self.started.set()
        await self.release.wait()
        return await super().read()


class FakeSession:
    """Stands in for an aiohttp.ClientSession created with auto_decompress=False."""

    auto_decompress = False

    def __init__(self, *responses: Any) -> None:
        self.responses: List[Any] = list(responses)
        self.calls: List[SimpleNamespace] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append(SimpleNamespace(method=method, url=url, **kwargs))
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


def google_inner_document(
    *,
    sentences: List[str] | None = None,
    pronunciation: str | None = None,
    source_iso: str | None = "zh-CN",
    auto_correction: str | None = None,
    did_you_mean: str | None = None,
) -> list:
    sentences = sentences if sentences is not None else ["This is the first sentence.", "This is the second sentence."]
    suggestion = [[[None, did_you_mean]], None] if did_you_mean is not None else None
    return [
        [auto_correction, suggestion, "zh-CN", [[[0, [[[None, 7]], [True]]], [1, [[[None, 14]], [True]]]], 14]],
        [
            [[None, pronunciation, None, True, None, [[s, None, None, None, [[s, [2]]]] for s in sentences]]],
            "en",
            1,
            source_iso,
            [SOURCE_TEXT, "zh-CN", "en", True],
        ],
        "zh-CN",
    ]


def google_response_body(inner: Any) -> str:
    envelope = json.dumps(
        [
            ["wrb.fr", "MkEWBc", json.dumps(inner, ensure_ascii=False), None, None, None, "generic"],
            ["di", 45],
            ["af.httprm", 44, "-6422393385316582066", 12],
        ],
        ensure_ascii=False,
    )
    return f")]}}'\n\n{len(envelope)}\n{envelope}\n25\n[[\"e\",4,null,null,{len(envelope) + 60}]]\n"


@pytest.fixture
def google_body() -> str:
    return google_response_body(google_inner_document())


@pytest.fixture
def deepl_body() -> bytes:
    payload = {
        "jsonrpc": "2.0",
        "id": 8300001000,
        "result": {
            "texts": [
                {
                    "text": "Halo Dunia",
                    "alternatives": [{"text": "Halo dunia"}, {"text": ""}, {"text": "Hai Dunia"}],
                }
            ],
            "lang": "EN",
            "lang_is_confident": True,
        },
    }
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def gzip_fixture() -> SimpleNamespace:
    plaintext = b'{"result":{"texts":[{"text":"Guten Morgen"}]}}'
    return SimpleNamespace(plaintext=plaintext, compressed=gzip.compress(plaintext))
