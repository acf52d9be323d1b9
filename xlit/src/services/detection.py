"""Script and language detection for raw chat text."""

from __future__ import annotations
import re
from collections import Counter
from typing import Dict, Optional, Tuple

# Import config
from ..core.config import (
    DETECTION_CONFIDENCE,
    LATIN_RATIO_THRESHOLD,
    PHONETIC_PATTERN_WEIGHT,
    PHONETIC_SCORE_SCALE,
    PHONETIC_WORD_WEIGHT,
)

# Import language data
from ..core.languages import LanguageId, ScriptFamily
from ..core.phonetics import LATIN_INDICATORS, PHONETIC_PATTERNS
from ..core.scripts import LATIN_RANGE, block_of

# Import schemas
from ..api.schemas import DetectionResult

# Import services
from .registry import LanguageRegistry

# Import shared utilities
from common.utils import clip_confidence

# Setup logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("detection")

_TOKEN_RE = re.compile(r"[a-z]+")


def _is_latin_letter(ch: str) -> bool:
    return LATIN_RANGE[0] <= ord(ch) <= LATIN_RANGE[1] and ch.isalpha()


def latin_ratio(text: str) -> float:
    """Share of letters that are Latin; whitespace, digits and punctuation are ignored"""
    letters = [ch for ch in text if ch.isalpha() or block_of(ch) is not None]
    if not letters:
        return 1.0
    latin = sum(1 for ch in letters if _is_latin_letter(ch))
    return latin / len(letters)


def is_latin_text(text: str) -> bool:
    """Latin means more than 70% Latin letters; text without letters counts as Latin"""
    letters = [ch for ch in text if ch.isalpha() or block_of(ch) is not None]
    if not letters:
        return True
    return latin_ratio(text) > LATIN_RATIO_THRESHOLD


class ScriptDetector:
    """Unicode block scan, then phonetic keyword scoring, then Latin indicators"""

    def __init__(self, registry: LanguageRegistry):
        self.registry = registry
        self._patterns = {
            lang: (set(rule["words"]), [re.compile(p, re.IGNORECASE) for p in rule["patterns"]])
            for lang, rule in PHONETIC_PATTERNS.items()
        }
        self._indicators = [
            (
                lang,
                conf,
                re.compile(charclass, re.IGNORECASE) if charclass else None,
                re.compile(keywords, re.IGNORECASE) if keywords else None,
            )
            for lang, conf, charclass, keywords in LATIN_INDICATORS
        ]

    def detect(self, text: str, hint: Optional[LanguageId] = None) -> DetectionResult:
        if not text or not text.strip():
            return DetectionResult(
                script=ScriptFamily.LATIN,
                language=LanguageId.ENGLISH,
                is_latin=True,
                confidence=DETECTION_CONFIDENCE["empty"],
            )

        hint = self.registry.try_normalize(hint) if hint is not None else None

        script_result = self._detect_script(text, hint)
        if script_result is not None:
            return script_result

        phonetic_lang, phonetic_conf = self._score_phonetic(text, hint)
        if phonetic_lang is not None and phonetic_conf > DETECTION_CONFIDENCE["phonetic_min"]:
            return DetectionResult(
                script=ScriptFamily.LATIN,
                language=phonetic_lang,
                is_latin=True,
                confidence=clip_confidence(phonetic_conf),
                is_phonetic=True,
            )

        indicator = self._match_indicators(text)
        if indicator is not None:
            lang, conf = indicator
            return DetectionResult(
                script=ScriptFamily.LATIN,
                language=lang,
                is_latin=True,
                confidence=clip_confidence(conf),
            )

        # A weak phonetic signal still beats the English default
        if phonetic_lang is not None and phonetic_conf > DETECTION_CONFIDENCE["phonetic_weak"]:
            return DetectionResult(
                script=ScriptFamily.LATIN,
                language=phonetic_lang,
                is_latin=True,
                confidence=clip_confidence(phonetic_conf),
                is_phonetic=True,
            )

        return DetectionResult(
            script=ScriptFamily.LATIN,
            language=LanguageId.ENGLISH,
            is_latin=True,
            confidence=DETECTION_CONFIDENCE["english_default"],
        )

    # ------------------------------------------------------------------
    def _detect_script(self, text: str, hint: Optional[LanguageId]) -> Optional[DetectionResult]:
        counts: Counter = Counter()
        defaults: Dict[ScriptFamily, LanguageId] = {}
        letters = 0
        for ch in text:
            block = block_of(ch)
            if block is not None:
                script, lang = block
                counts[script] += 1
                defaults.setdefault(script, lang)
                letters += 1
            elif _is_latin_letter(ch):
                letters += 1

        if not counts:
            return None

        # Japanese text mixes kana with Han; kana decides
        if ScriptFamily.JAPANESE in counts and ScriptFamily.HAN in counts:
            counts[ScriptFamily.JAPANESE] += counts.pop(ScriptFamily.HAN)

        script, hits = counts.most_common(1)[0]
        share = hits / letters if letters else 1.0
        confidence = DETECTION_CONFIDENCE["script_base"] + DETECTION_CONFIDENCE["script_share_weight"] * share

        language = defaults[script]
        if hint is not None and self.registry.script_of(hint) == script:
            language = hint

        log.debug(f"Script {script.value} ({hits}/{letters}) -> {language.value}")
        return DetectionResult(
            script=script,
            language=language,
            is_latin=False,
            confidence=clip_confidence(confidence),
        )

    def _score_phonetic(self, text: str, hint: Optional[LanguageId]) -> Tuple[Optional[LanguageId], float]:
        lowered = text.lower()
        tokens = _TOKEN_RE.findall(lowered)
        scores: Dict[LanguageId, float] = {}
        for lang, (words, patterns) in self._patterns.items():
            score = PHONETIC_WORD_WEIGHT * sum(1 for tok in tokens if tok in words)
            for pattern in patterns:
                score += PHONETIC_PATTERN_WEIGHT * len(pattern.findall(lowered))
            if score:
                scores[lang] = min(score / PHONETIC_SCORE_SCALE, 1.0)

        if not scores:
            return None, 0.0

        best_lang = max(scores, key=scores.get)
        best_conf = scores[best_lang]

        if hint is not None and hint in scores:
            boosted = min(scores[hint] + DETECTION_CONFIDENCE["hint_boost"], 1.0)
            if boosted >= best_conf:
                best_lang, best_conf = hint, boosted

        return best_lang, best_conf

    def _match_indicators(self, text: str) -> Optional[Tuple[LanguageId, float]]:
        for lang, conf, charclass, keywords in self._indicators:
            if charclass is not None and charclass.search(text):
                return lang, conf
            if keywords is not None and keywords.search(text):
                return lang, conf
        return None
