from __future__ import annotations

from langcodes import Language, tag_is_valid
from langcodes.tag_parser import LanguageTagError
from langdetect import DetectorFactory, LangDetectException, detect

from ..params import AUTO

DetectorFactory.seed = 0

__all__ = ["AUTO", "detect_language", "is_valid_language_tag"]


def detect_language(text: str, *, max_chars: int = 2500) -> str | None:
    """Return the ISO 639-1 code of ``text`` or None when it cannot be detected."""
    sample = text.strip()[:max_chars]
    if not sample:
        return None
    try:
        detected = detect(sample)
    except LangDetectException:
        return None
    # langdetect reports Chinese as zh-cn / zh-tw
    return detected.split("-", 1)[0]


def is_valid_language_tag(tag: str) -> bool:
    """Accept well-formed, registered BCP 47 tags without extension or private-use parts."""
    if not tag or not tag_is_valid(tag):
        return False
    # bare private-use (x-...) and grandfathered irregular (i-...) tags
    if tag.lower().startswith(("x-", "i-")):
        return False
    try:
        parsed = Language.get(tag, normalize=False)
    except LanguageTagError:
        return False
    if parsed.language is None or parsed.language.startswith(("x-", "i-")):
        return False
    return not parsed.extensions and not parsed.private
