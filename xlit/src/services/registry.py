"""Language registry: canonical ids, profiles and alias resolution."""

from __future__ import annotations
from typing import Dict, List, Optional, Union

# Import language data
from ..core.languages import LANGUAGE_ALIASES, LANGUAGE_TABLE, RTL_SCRIPTS, LanguageId, ScriptFamily

# Import exceptions
from ..core.exceptions import UnsupportedLanguageError

# Import schemas
from ..api.schemas import LanguageProfile

# Setup logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("registry")

LanguageLike = Union[LanguageId, str, None]


def _alias_key(value: str) -> str:
    return " ".join(value.strip().lower().replace("_", "-").split())


class LanguageRegistry:
    """Read-only registry built once from the static language table"""

    def __init__(self):
        self._profiles: Dict[LanguageId, LanguageProfile] = {}
        self._aliases: Dict[str, LanguageId] = {}

        for lang, (name, native, script, nllb, fallback) in LANGUAGE_TABLE.items():
            self._profiles[lang] = LanguageProfile(
                id=lang,
                name=name,
                native_name=native,
                script=script,
                rtl=script in RTL_SCRIPTS,
                nllb_code=nllb,
                fallback=fallback,
            )

        # Codes and names first; NLLB codes shared by dialects keep the first owner
        for lang, profile in self._profiles.items():
            self._aliases[_alias_key(lang.value)] = lang
            self._aliases.setdefault(_alias_key(profile.name), lang)
            self._aliases.setdefault(_alias_key(profile.native_name), lang)
        for lang, profile in self._profiles.items():
            self._aliases.setdefault(_alias_key(profile.nllb_code), lang)
        for alias, lang in LANGUAGE_ALIASES.items():
            self._aliases.setdefault(_alias_key(alias), lang)

        log.debug(f"Language registry ready: {len(self._profiles)} languages, {len(self._aliases)} aliases")

    def __len__(self) -> int:
        return len(self._profiles)

    def try_normalize(self, value: LanguageLike) -> Optional[LanguageId]:
        """Resolve a code, name, native name or alias; None when unknown"""
        if isinstance(value, LanguageId):
            return value
        if not value or not isinstance(value, str):
            return None
        key = _alias_key(value)
        lang = self._aliases.get(key)
        if lang is None and "-" in key:
            # Region-qualified tags such as "hi-IN" or "pt-BR"
            lang = self._aliases.get(key.split("-", 1)[0])
        return lang

    def normalize(self, value: LanguageLike, strict: bool = False) -> LanguageId:
        """Resolve to a LanguageId; unknown input becomes English unless strict"""
        lang = self.try_normalize(value)
        if lang is not None:
            return lang
        if strict:
            raise UnsupportedLanguageError(value)
        log.warning(f"Unknown language {value!r}, falling back to English")
        return LanguageId.ENGLISH

    def info(self, lang: LanguageLike) -> LanguageProfile:
        return self._profiles[self.normalize(lang)]

    def is_same(self, a: LanguageLike, b: LanguageLike) -> bool:
        return self.normalize(a) == self.normalize(b)

    def is_latin_script(self, lang: LanguageLike) -> bool:
        return self.info(lang).script == ScriptFamily.LATIN

    def script_of(self, lang: LanguageLike) -> ScriptFamily:
        return self.info(lang).script

    def effective_language(self, lang: LanguageLike) -> LanguageId:
        """Nearest relative for dialects without resources of their own"""
        profile = self.info(lang)
        return profile.fallback or profile.id

    def nllb_code(self, lang: LanguageLike) -> str:
        return self.info(lang).nllb_code

    def supported(self) -> List[LanguageProfile]:
        return list(self._profiles.values())
