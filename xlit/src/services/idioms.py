"""Idiom spans in English and their renderings in other languages."""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

# Import language data
from ..core.dictionary import IDIOMS
from ..core.languages import LanguageId

# Import schemas
from ..api.schemas import PartOfSpeech

# Import helpers
from ..utils.helpers import normalize_phrase

# Setup logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("idioms")

_ROLES = {
    "nominal": PartOfSpeech.NOUN,
    "verbal": PartOfSpeech.VERB,
    "adjectival": PartOfSpeech.ADJECTIVE,
    "adverbial": PartOfSpeech.ADVERB,
    "interjection": PartOfSpeech.INTERJECTION,
}


class IdiomHandler:
    """Handle idioms that must not be translated word by word"""

    def __init__(self):
        self.idioms = IDIOMS
        self._native: Dict[LanguageId, Dict[str, str]] = defaultdict(dict)
        for idiom, (_, _, renderings) in self.idioms.items():
            for lang, text in renderings.items():
                self._native[lang].setdefault(normalize_phrase(text), idiom)

        self._longest = max(len(idiom.split()) for idiom in self.idioms)
        self._longest_native = max(
            (len(key.split()) for index in self._native.values() for key in index), default=1
        )

    def __len__(self) -> int:
        return len(self.idioms)

    def meaning(self, idiom: str) -> str:
        return self.idioms[idiom][0]

    def role(self, idiom: str) -> PartOfSpeech:
        return _ROLES.get(self.idioms[idiom][1], PartOfSpeech.OTHER)

    def render(self, idiom: str, lang: LanguageId) -> Optional[str]:
        return self.idioms[idiom][2].get(lang)

    def match_english(self, tokens: List[str], start: int) -> Optional[Tuple[str, int]]:
        """Longest idiom beginning at ``tokens[start]``; returns (idiom, end index)"""
        limit = min(len(tokens), start + self._longest)
        for end in range(limit, start, -1):
            key = normalize_phrase(" ".join(tokens[start:end]))
            if key in self.idioms:
                log.debug(f"Idiom detected: '{key}' -> '{self.meaning(key)}'")
                return key, end
        return None

    def match_native(self, tokens: List[str], start: int, lang: LanguageId) -> Optional[Tuple[str, int]]:
        """Longest rendering in ``lang`` beginning at ``tokens[start]``, mapped back to its idiom"""
        index = self._native.get(lang)
        if not index:
            return None
        limit = min(len(tokens), start + self._longest_native)
        for end in range(limit, start, -1):
            idiom = index.get(normalize_phrase(" ".join(tokens[start:end])))
            if idiom is not None:
                log.debug(f"Idiom rendering detected in {lang.value}: '{idiom}'")
                return idiom, end
        return None
