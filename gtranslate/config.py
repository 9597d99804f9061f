from __future__ import annotations

from dataclasses import dataclass, field


DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/103.0.0.0 Safari/537.36"
)
MOBILE_USER_AGENT = (
    "Mozilla/5.0 (Linux; Android 8.0.0; Pixel 2 XL Build/OPD1.170816.004) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/95.0.4638.69 Mobile Safari/537.36"
)
EDGE_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/141.0.0.0 Safari/537.36 Edg/141.0.0.0"
)


@dataclass(slots=True)
class TranslatorSettings:
    session_timeout: float = 20.0
    accept_encoding: str = "gzip, deflate, br"


@dataclass(slots=True)
class GoogleSettings:
    default_host: str = "google.com"
    rpc_id: str = "MkEWBc"
    ui_language: str = "en-US"
    request_id_min: int = 100000
    request_id_span: int = 9000
    bootstrap_user_agent: str = DESKTOP_USER_AGENT
    rpc_user_agent: str = MOBILE_USER_AGENT


@dataclass(slots=True)
class DeepLSettings:
    default_host: str = "www2.deepl.com"
    rpc_method: str = "LMT_handle_texts"
    request_alternatives: int = 3
    user_agent: str = EDGE_USER_AGENT


@dataclass(slots=True)
class AppSettings:
    translator: TranslatorSettings = field(default_factory=TranslatorSettings)
    google: GoogleSettings = field(default_factory=GoogleSettings)
    deepl: DeepLSettings = field(default_factory=DeepLSettings)
    default_engine: str = "google"
    default_target_lang: str = "en"


SETTINGS = AppSettings()
