"""Phonetic spelling correction for Latin-typed chat text."""

from __future__ import annotations
import difflib
from typing import Dict, List, Optional

# Import language data
from ..core.languages import LanguageId, ScriptFamily
from ..core.phonetics import (
    LANGUAGE_CORRECTIONS,
    SCRIPT_FAMILY_CORRECTIONS,
    STRIP_LEADING,
    STRIP_TRAILING,
    UNIVERSAL_LATIN_CORRECTIONS,
)

# Import schemas
from ..api.schemas import CorrectionResult

# Import services
from .registry import LanguageRegistry

# Import helpers
from ..utils.helpers import split_keep_whitespace, strip_token

# Setup logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("correction")


class PhoneticCorrector:
    """Replace common misspellings with the canonical phonetic spelling.

    Tables are consulted in order: the language's own, its effective
    language's, its script family's, and for Latin-script languages the
    universal chat shorthand table. The first table holding the token wins.
    """

    def __init__(self, registry: LanguageRegistry):
        self.registry = registry

    def tables_for(self, lang: LanguageId) -> List[Dict[str, str]]:
        profile = self.registry.info(lang)
        chain: List[Dict[str, str]] = []
        for table in (
            LANGUAGE_CORRECTIONS.get(profile.id),
            LANGUAGE_CORRECTIONS.get(self.registry.effective_language(profile.id)),
            SCRIPT_FAMILY_CORRECTIONS.get(profile.script),
            UNIVERSAL_LATIN_CORRECTIONS if profile.script == ScriptFamily.LATIN else None,
        ):
            if table and not any(table is seen for seen in chain):
                chain.append(table)
        return chain

    def _lookup(self, word: str, chain: List[Dict[str, str]]) -> Optional[str]:
        for table in chain:
            if word in table:
                return table[word]
        return None

    def correct(self, text: str, lang: LanguageId) -> CorrectionResult:
        if not text:
            return CorrectionResult(corrected_text=text)

        chain = self.tables_for(lang)
        if not chain:
            return CorrectionResult(corrected_text=text)

        parts = []
        corrections = []
        for part in split_keep_whitespace(text):
            if part.isspace():
                parts.append(part)
                continue
            prefix, core, suffix = strip_token(part, STRIP_LEADING, STRIP_TRAILING)
            replacement = self._lookup(core.lower(), chain) if core else None
            if replacement is None:
                parts.append(part)
                continue
            parts.append(f"{prefix}{replacement}{suffix}")
            corrections.append(f"{core} → {replacement}")

        if corrections:
            log.debug(f"{len(corrections)} correction(s) for {lang.value}: {corrections}")
        return CorrectionResult(corrected_text="".join(parts), corrections=corrections)

    def suggestions(self, word: str, lang: LanguageId, limit: int = 3) -> List[str]:
        """Close canonical spellings for an unknown word; never applied automatically"""
        word = word.strip().lower()
        if not word:
            return []
        chain = self.tables_for(lang)
        if not chain:
            return []

        direct = self._lookup(word, chain)
        if direct is not None:
            return [direct]

        candidates: Dict[str, str] = {}
        for table in chain:
            for wrong, right in table.items():
                candidates.setdefault(wrong, right)
                candidates.setdefault(right, right)

        matches = difflib.get_close_matches(word, list(candidates), n=limit * 2, cutoff=0.7)
        out: List[str] = []
        for match in matches:
            canonical = candidates[match]
            if canonical not in out:
                out.append(canonical)
            if len(out) >= limit:
                break
        return out
