"""Latin phonetic text <-> native script conversion."""

from __future__ import annotations
import re
import unicodedata
from typing import Dict, List, Optional, Tuple

# Import config
from ..core.config import MAX_KEY_LENGTH

# Import language data
from ..core.languages import LanguageId, ScriptFamily
from ..core.scripts import SCRIPT_TABLES, ZERO_WIDTH, ScriptGraphemeTable, block_of

# Import schemas
from ..api.schemas import ValidationReport

# Import services
from .cache import CacheTier
from .detection import is_latin_text
from .registry import LanguageRegistry

# Import helpers
from ..utils.helpers import collapse_runs, is_word_boundary

# Setup logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("transliteration")

_LATIN_RESIDUE_RE = re.compile(r"[A-Za-z]{3,}")
_LATIN_WORD_RE = re.compile(r"[A-Za-z]+")


class _InverseTable:
    """Glyph -> Latin key maps for one script, first (lowercase-preferred) key wins"""

    def __init__(self, table: ScriptGraphemeTable):
        self.table = table
        self.consonants = self._invert(table.consonants)
        self.vowels = self._invert(table.vowels)
        self.matras = self._invert(table.matras or {})
        self.digits = {glyph: key for key, glyph in table.digits.items()}
        self.punctuation = {glyph: key for key, glyph in table.punctuation.items()}
        if table.danda:
            self.punctuation[table.danda] = "."
        glyphs = list(self.consonants) + list(self.vowels) + list(self.matras) + list(self.punctuation)
        self.max_glyph = max((len(g) for g in glyphs), default=1)

    @staticmethod
    def _invert(mapping: Dict[str, str]) -> Dict[str, str]:
        inverse: Dict[str, str] = {}
        for key, glyph in mapping.items():
            if glyph and key == key.lower():
                inverse.setdefault(glyph, key)
        for key, glyph in mapping.items():
            if glyph:
                inverse.setdefault(glyph, key.lower())
        return inverse

    def match(self, mapping: Dict[str, str], text: str, i: int) -> Optional[Tuple[str, int]]:
        for length in range(min(self.max_glyph, len(text) - i), 0, -1):
            key = mapping.get(text[i:i + length])
            if key is not None:
                return key, length
        return None


def _is_word_end(text: str, i: int) -> bool:
    if i >= len(text):
        return True
    ch = text[i]
    return ch.isspace() or unicodedata.category(ch).startswith("P")


class TransliterationEngine:
    """Per-script grapheme rules for abugidas (with virama handling) and alphabets"""

    def __init__(self, registry: LanguageRegistry, cache: Optional[CacheTier] = None):
        self.registry = registry
        self.cache = cache
        self._inverse: Dict[ScriptFamily, _InverseTable] = {
            script: _InverseTable(table) for script, table in SCRIPT_TABLES.items()
        }

    def table_for(self, lang: LanguageId) -> Optional[ScriptGraphemeTable]:
        return SCRIPT_TABLES.get(self.registry.script_of(lang))

    def supports(self, lang) -> bool:
        lang = self.registry.try_normalize(lang)
        if lang is None or self.registry.is_latin_script(lang):
            return False
        return self.table_for(lang) is not None

    # ------------------------------------------------------------------
    def transliterate(self, text: str, lang: LanguageId) -> str:
        """Render Latin phonetic input in the native script of ``lang``.

        Returns the input unchanged for empty text, Latin-script languages,
        scripts without a table, and input that is not predominantly Latin.
        """
        if not text:
            return text
        lang = self.registry.normalize(lang)
        if self.registry.is_latin_script(lang):
            return text
        table = self.table_for(lang)
        if table is None or not is_latin_text(text):
            return text

        if self.cache is None:
            return self._render(text, table)
        return self.cache.get_or_compute(
            "transliteration", f"{text}|{lang.value}", lambda: self._render(text, table)
        )

    def _render(self, text: str, table: ScriptGraphemeTable) -> str:
        src = collapse_runs(text)
        # Shouted words carry no case information
        src = _LATIN_WORD_RE.sub(lambda m: m.group().lower() if m.group().isupper() else m.group(), src)
        # Capitals select retroflex consonants mid-word only
        src = "".join(
            ch.lower() if ch.isupper() and is_word_boundary(src, i) else ch
            for i, ch in enumerate(src)
        )

        out: List[str] = []
        pending = False
        i = 0
        n = len(src)
        while i < n:
            consonant = self._match_key(table.consonants, src, i)
            if consonant is not None:
                key, length = consonant
                if pending and table.virama:
                    out.append(table.virama)
                out.append(table.consonants[key])
                i += length
                pending = False
                if table.is_abugida:
                    vowel = self._match_key(table.matras, src, i)
                    if vowel is not None:
                        out.append(table.matras[vowel[0]])
                        i += vowel[1]
                    else:
                        pending = True
                continue

            vowel = self._match_key(table.vowels, src, i)
            if vowel is not None:
                out.append(table.vowels[vowel[0]])
                i += vowel[1]
                pending = False
                continue

            pending = False
            ch = src[i]

            if ch in table.digits:
                out.append(table.digits[ch])
                i += 1
                continue

            punct = self._match_key(table.punctuation, src, i, max_length=2)
            if punct is not None:
                out.append(table.punctuation[punct[0]])
                i += punct[1]
                continue

            if (
                ch == "."
                and table.danda
                and (i + 1 == n or src[i + 1].isspace())
                and not (i > 0 and src[i - 1].isdigit())
            ):
                out.append(table.danda)
                i += 1
                continue

            out.append(ch)
            i += 1

        return "".join(out)

    @staticmethod
    def _match_key(mapping: Dict[str, str], text: str, i: int,
                   max_length: int = MAX_KEY_LENGTH) -> Optional[Tuple[str, int]]:
        """Longest key at ``text[i:]``; exact case first, then lowercase, per length"""
        if not mapping:
            return None
        for length in range(min(max_length, len(text) - i), 0, -1):
            chunk = text[i:i + length]
            if chunk in mapping:
                return chunk, length
            lowered = chunk.lower()
            if lowered != chunk and lowered in mapping:
                return lowered, length
        return None

    # ------------------------------------------------------------------
    def reverse_transliterate(self, text: str, lang: Optional[LanguageId] = None) -> str:
        """Latin phonetic approximation of native-script text.

        With ``lang`` None the script is picked per character, so mixed
        script input is handled.
        """
        if not text:
            return text

        fixed: Optional[_InverseTable] = None
        if lang is not None:
            lang = self.registry.normalize(lang)
            fixed = self._inverse.get(self.registry.script_of(lang))
            if fixed is None:
                return text

        out: List[str] = []
        i = 0
        n = len(text)
        while i < n:
            ch = text[i]
            if ch in ZERO_WIDTH:
                i += 1
                continue

            inv = fixed
            if inv is None:
                block = block_of(ch)
                inv = self._inverse.get(block[0]) if block else None
            if inv is None:
                out.append(ch)
                i += 1
                continue

            table = inv.table
            consonant = inv.match(inv.consonants, text, i)
            if consonant is not None:
                key, length = consonant
                j = i + length
                while j < n and table.modifiers.get(text[j]) == "":
                    j += 1
                if not table.is_abugida:
                    out.append(key)
                    i = j
                    continue
                if table.virama and text.startswith(table.virama, j):
                    out.append(key)
                    i = j + len(table.virama)
                    continue
                matra = inv.match(inv.matras, text, j)
                if matra is not None:
                    out.append(key + matra[0])
                    i = j + matra[1]
                    continue
                if table.drops_final_schwa and _is_word_end(text, j):
                    out.append(key)
                else:
                    out.append(key + "a")
                i = j
                continue

            for mapping in (inv.vowels, inv.matras, inv.punctuation):
                hit = inv.match(mapping, text, i)
                if hit is not None:
                    out.append(hit[0])
                    i += hit[1]
                    break
            else:
                if ch in inv.digits:
                    out.append(inv.digits[ch])
                elif ch in table.modifiers:
                    out.append(table.modifiers[ch])
                else:
                    out.append(ch)
                i += 1

        return "".join(out)

    # ------------------------------------------------------------------
    def validate(self, original: str, output: str, lang: LanguageId) -> ValidationReport:
        """Flag obviously broken transliteration output"""
        issues = []
        if original.strip() and not output.strip():
            issues.append("empty output")
        if "�" in output:
            issues.append("replacement character in output")
        if self.supports(lang):
            residue = _LATIN_RESIDUE_RE.findall(output)
            if residue:
                issues.append(f"untransliterated Latin: {', '.join(residue)}")
        if issues:
            log.warning(f"Transliteration issues for {lang}: {issues}")
        return ValidationReport(valid=not issues, issues=issues)
