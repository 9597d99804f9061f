from __future__ import annotations

from dataclasses import dataclass

AUTO = "auto"
AFRIKAANS = "af"
ARABIC = "ar"
BULGARIAN = "bg"
CHINESE_SIMPLIFIED = "zh-cn"
CHINESE_TRADITIONAL = "zh-tw"
CZECH = "cs"
DANISH = "da"
DUTCH = "nl"
ENGLISH = "en"
ESTONIAN = "et"
FINNISH = "fi"
FRENCH = "fr"
GERMAN = "de"
GREEK = "el"
HINDI = "hi"
HUNGARIAN = "hu"
INDONESIAN = "id"
ITALIAN = "it"
JAPANESE = "ja"
JAVANESE = "jv"
KOREAN = "ko"
LATVIAN = "lv"
LITHUANIAN = "lt"
MALAY = "ms"
NORWEGIAN = "no"
POLISH = "pl"
PORTUGUESE = "pt"
ROMANIAN = "ro"
RUSSIAN = "ru"
SLOVAK = "sk"
SLOVENIAN = "sl"
SPANISH = "es"
SUNDANESE = "su"
SWEDISH = "sv"
THAI = "th"
TURKISH = "tr"
UKRAINIAN = "uk"
VIETNAMESE = "vi"


@dataclass(slots=True)
class TranslateParams:
    text: str
    to: str
    from_: str = ""
