"""Pivot translation through English using the phrase dictionary."""

from __future__ import annotations
from collections import defaultdict
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

# Import config
from ..core.config import TRANSLATION_CONFIDENCE

# Import language data
from ..core.dictionary import PHONETIC_PHRASES, PHRASES, WORDS
from ..core.languages import LanguageId

# Import schemas
from ..api.schemas import (
    DictionaryEntry,
    PartOfSpeech,
    TranslationDirection,
    TranslationMethod,
    TranslationOutcome,
    WordUnit,
)

# Import services
from .cache import CacheTier
from .correction import PhoneticCorrector
from .detection import is_latin_text
from .idioms import IdiomHandler
from .morphology import lemma_candidates, pos_tag
from .registry import LanguageRegistry
from .reordering import reorder
from .transliteration import TransliterationEngine

# Import helpers
from ..utils.helpers import normalize_phrase, split_terminal_punctuation

# Import shared utilities
from common.utils import clip_confidence

# Setup logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("pivot")

EN = LanguageId.ENGLISH


class PhraseDictionary:
    """Forward (English -> native) and reverse (native -> English) phrase indices.

    Reverse keys include every native phrase and every romanized spelling,
    both as typed and as the sender's own pipeline would render it after
    correction and transliteration.
    """

    def __init__(self, registry: LanguageRegistry,
                 corrector: PhoneticCorrector,
                 transliterator: TransliterationEngine):
        self.registry = registry
        translations: Dict[str, Dict[LanguageId, str]] = defaultdict(dict)
        phonetic: Dict[str, Dict[LanguageId, List[str]]] = defaultdict(dict)
        self._reverse: Dict[LanguageId, Dict[str, str]] = defaultdict(dict)

        for lang, phrases in PHRASES.items():
            for native, english in phrases.items():
                translations[english].setdefault(lang, native)
                self._reverse[lang].setdefault(normalize_phrase(native), english)

        for lang, spellings in PHONETIC_PHRASES.items():
            latin_script = registry.is_latin_script(lang)
            for romanized, english in spellings.items():
                phonetic[english].setdefault(lang, []).append(romanized)
                index = self._reverse[lang]
                index.setdefault(normalize_phrase(romanized), english)
                if latin_script:
                    continue
                corrected = corrector.correct(romanized, lang).corrected_text
                for typed in {romanized, corrected}:
                    rendered = transliterator.transliterate(typed, lang)
                    index.setdefault(normalize_phrase(rendered), english)

        for lang, words in WORDS.items():
            for native, english in words.items():
                translations[english].setdefault(lang, native)
                self._reverse[lang].setdefault(normalize_phrase(native), english)

        self._entries: Dict[str, DictionaryEntry] = {
            english: DictionaryEntry(
                english=english,
                translations=dict(translations.get(english, {})),
                phonetic=dict(phonetic.get(english, {})),
            )
            for english in set(translations) | set(phonetic)
        }
        log.info(f"Phrase dictionary ready: {len(self._entries)} entries, "
                 f"{sum(len(v) for v in self._reverse.values())} reverse keys")

    def __len__(self) -> int:
        return len(self._entries)

    def entry(self, english: str) -> Optional[DictionaryEntry]:
        return self._entries.get(normalize_phrase(english))

    def forward(self, english: str, lang: LanguageId) -> Optional[str]:
        """English phrase -> phrase in ``lang``"""
        entry = self.entry(english)
        if entry is None:
            return None
        if lang == EN:
            return entry.english
        return entry.translations.get(self.registry.effective_language(lang))

    def reverse(self, text: str, lang: LanguageId) -> Optional[str]:
        """Phrase in ``lang`` (native or romanized) -> canonical English"""
        key = normalize_phrase(text)
        if not key:
            return None
        if lang == EN:
            entry = self._entries.get(key)
            return entry.english if entry else None
        return self._reverse.get(self.registry.effective_language(lang), {}).get(key)


class PivotTranslator:
    """Resolve a translation between any two languages with English as the bridge.

    Strategies per direction fall through deterministically: phrase lookup,
    word-by-word lookup, then transliteration or pass-through. The word step
    keeps idioms whole, falls back to dictionary forms of inflected English
    words and reorders each clause into the target's word order.
    """

    def __init__(self, registry: LanguageRegistry,
                 dictionary: PhraseDictionary,
                 transliterator: TransliterationEngine,
                 cache: Optional[CacheTier] = None):
        self.registry = registry
        self.dictionary = dictionary
        self.transliterator = transliterator
        self.cache = cache
        self.idioms = IdiomHandler()

    def resolve_direction(self, source: LanguageId, target: LanguageId) -> TranslationDirection:
        if self.registry.is_same(source, target):
            return TranslationDirection.SAME_LANGUAGE
        if source == EN:
            return TranslationDirection.ENGLISH_SOURCE
        if target == EN:
            return TranslationDirection.ENGLISH_TARGET
        if self.registry.is_latin_script(source) and self.registry.is_latin_script(target):
            return TranslationDirection.LATIN_TO_LATIN
        return TranslationDirection.PIVOT

    @staticmethod
    def cache_key(text: str, source: LanguageId, target: LanguageId) -> str:
        return f"{text}|{source.value}|{target.value}"

    def translate(self, text: str, source, target) -> TranslationOutcome:
        """Translate ``text``; a cache hit is reported with method ``cached``"""
        outcome, hit = self._resolve(text, source, target)
        if hit:
            return replace(outcome, method=TranslationMethod.CACHED)
        return outcome

    def resolve(self, text: str, source, target) -> TranslationOutcome:
        """Like translate, but a cache hit keeps the strategy that produced it"""
        return self._resolve(text, source, target)[0]

    def _resolve(self, text: str, source, target) -> Tuple[TranslationOutcome, bool]:
        source = self.registry.normalize(source)
        target = self.registry.normalize(target)
        if self.cache is None:
            return self._translate_uncached(text, source, target), False

        key = self.cache_key(text, source, target)
        cached = self.cache.get("translation", key)
        if cached is not None:
            return cached, True

        outcome = self._translate_uncached(text, source, target)
        self.cache.set("translation", key, outcome)
        return outcome, False

    def remember(self, text: str, source: LanguageId, target: LanguageId, outcome: TranslationOutcome) -> None:
        """Store an outcome produced elsewhere (e.g. by a model backend)"""
        if self.cache is not None:
            self.cache.set("translation", self.cache_key(text, source, target), outcome)

    @staticmethod
    def is_resolved(outcome: TranslationOutcome) -> bool:
        """True when no heavier backend is needed for this outcome"""
        return (
            outcome.direction == TranslationDirection.SAME_LANGUAGE
            or outcome.method in (
                TranslationMethod.PHRASE,
                TranslationMethod.WORD,
                TranslationMethod.IDIOM,
                TranslationMethod.MODEL,
            )
        )

    # ------------------------------------------------------------------
    def _translate_uncached(self, text: str, source: LanguageId, target: LanguageId) -> TranslationOutcome:
        direction = self.resolve_direction(source, target)
        if not text or not text.strip():
            return self._outcome(text, False, "passthrough", TranslationMethod.PASSTHROUGH, direction)

        handler = {
            TranslationDirection.SAME_LANGUAGE: self._same_language,
            TranslationDirection.ENGLISH_SOURCE: self._from_english,
            TranslationDirection.ENGLISH_TARGET: self._to_english,
            TranslationDirection.LATIN_TO_LATIN: self._latin_to_latin,
            TranslationDirection.PIVOT: self._pivot,
        }[direction]
        outcome = handler(text, source, target)
        log.debug(f"{source.value}->{target.value} [{direction.value}] {outcome.method.value} "
                  f"conf={outcome.confidence}")
        return outcome

    def _same_language(self, text, source, target):
        direction = TranslationDirection.SAME_LANGUAGE
        target_latin = self.registry.is_latin_script(target)
        if is_latin_text(text) and not target_latin:
            out = self.transliterator.transliterate(text, target)
            return self._outcome(out, out != text, "passthrough", TranslationMethod.TRANSLITERATION, direction)
        if not is_latin_text(text) and target_latin:
            out = self.transliterator.reverse_transliterate(text, source)
            return self._outcome(out, out != text, "passthrough",
                                 TranslationMethod.REVERSE_TRANSLITERATION, direction)
        return self._outcome(text, False, "passthrough", TranslationMethod.PASSTHROUGH, direction)

    def _from_english(self, text, source, target):
        direction = TranslationDirection.ENGLISH_SOURCE
        core, trailing = split_terminal_punctuation(text)

        phrase = self.dictionary.forward(core, target)
        if phrase is not None:
            return self._outcome(phrase + trailing, True, "english_phrase", TranslationMethod.PHRASE,
                                 direction, english_pivot=normalize_phrase(core))

        words, fraction, idioms = self._words_forward(core, target)
        if fraction > 0:
            return self._word_outcome(words + trailing, fraction, direction, normalize_phrase(core), idioms)

        return self._literal(text, target, direction, english_pivot=normalize_phrase(core))

    def _to_english(self, text, source, target):
        direction = TranslationDirection.ENGLISH_TARGET
        core, trailing = split_terminal_punctuation(text)

        english = self.dictionary.reverse(core, source)
        if english is not None:
            return self._outcome(english + trailing, True, "reverse_phrase", TranslationMethod.PHRASE,
                                 direction, english_pivot=english)

        words, fraction, idioms = self._words_reverse(core, source)
        if fraction > 0:
            return self._word_outcome(words + trailing, fraction, direction, words, idioms)

        if not is_latin_text(text):
            out = self.transliterator.reverse_transliterate(text, source)
            return self._outcome(out, True, "reverse_transliteration",
                                 TranslationMethod.REVERSE_TRANSLITERATION, direction)
        return self._outcome(text, False, "literal", TranslationMethod.LITERAL, direction)

    def _latin_to_latin(self, text, source, target):
        direction = TranslationDirection.LATIN_TO_LATIN
        core, trailing = split_terminal_punctuation(text)

        english = self.dictionary.reverse(core, source)
        if english is not None:
            phrase = self.dictionary.forward(english, target)
            if phrase is not None:
                return self._outcome(phrase + trailing, True, "latin_phrase", TranslationMethod.PHRASE,
                                     direction, english_pivot=english)

        english_words, _, found = self._words_reverse(core, source)
        words, fraction, used = self._words_forward(english_words, target)
        if fraction > 0:
            return self._word_outcome(words + trailing, fraction, direction, english_words,
                                      _merge(found, used))

        return self._outcome(text, False, "literal", TranslationMethod.LITERAL, direction)

    def _pivot(self, text, source, target):
        direction = TranslationDirection.PIVOT
        core, trailing = split_terminal_punctuation(text)

        found: List[str] = []
        english = self.dictionary.reverse(core, source)
        if english is None:
            words, fraction, found = self._words_reverse(core, source)
            if fraction > 0:
                english = words
            elif not is_latin_text(core):
                english = self.transliterator.reverse_transliterate(core, source)
            else:
                english = core

        phrase = self.dictionary.forward(english, target)
        if phrase is not None:
            return self._outcome(phrase + trailing, True, "pivot_phrase", TranslationMethod.PHRASE,
                                 direction, english_pivot=english)

        words, fraction, used = self._words_forward(english, target)
        if fraction > 0:
            return self._word_outcome(words + trailing, fraction, direction, english, _merge(found, used))

        if not self.registry.is_latin_script(target):
            out = self.transliterator.transliterate(english, target)
            return self._outcome(out + trailing, True, "transliteration", TranslationMethod.TRANSLITERATION,
                                 direction, english_pivot=english)
        return self._outcome(english + trailing, english != core, "literal", TranslationMethod.LITERAL,
                             direction, english_pivot=english)

    # ------------------------------------------------------------------
    def _words_forward(self, english: str, target: LanguageId) -> Tuple[str, float, List[str]]:
        """Translate English word by word; returns (text, translated fraction, idioms used).

        Idioms are matched first, longest span wins. An idiom with a rendering
        in ``target`` becomes a single unit; otherwise its plain meaning is
        translated in its place. Words missing from the dictionary are retried
        in their dictionary forms, and the result is reordered per clause.
        """
        tokens = normalize_phrase(english).split()
        if not tokens:
            return english, 0.0, []
        lang = self.registry.effective_language(target)

        units: List[WordUnit] = []
        idioms: List[str] = []
        i = 0
        while i < len(tokens):
            match = self.idioms.match_english(tokens, i)
            if match is not None:
                idiom, i = match
                idioms.append(idiom)
                rendering = self.idioms.render(idiom, lang)
                if rendering is not None:
                    units.append(WordUnit(rendering, idiom, self.idioms.role(idiom), translated=True))
                else:
                    for word in self.idioms.meaning(idiom).split():
                        units.append(self._forward_unit(word, target, _last_word(units)))
                continue
            units.append(self._forward_unit(tokens[i], target, _last_word(units)))
            i += 1

        units = reorder(units, EN, lang)
        return _join(units), _fraction(units), idioms

    def _forward_unit(self, word: str, target: LanguageId, previous: Optional[str]) -> WordUnit:
        pos = pos_tag(word, previous)
        for candidate in [word] + lemma_candidates(word):
            phrase = self.dictionary.forward(candidate, target)
            if phrase is not None:
                return WordUnit(phrase, word, pos, translated=True)
        return WordUnit(word, word, pos)

    def _words_reverse(self, text: str, source: LanguageId) -> Tuple[str, float, List[str]]:
        """Map each source word to English; unknown native words are romanized.

        Idiom renderings in ``source`` map back to the English idiom, and the
        English is put back into subject-verb-object order.
        """
        tokens = text.split()
        if not tokens:
            return text, 0.0, []
        lang = self.registry.effective_language(source)

        units: List[WordUnit] = []
        idioms: List[str] = []
        i = 0
        while i < len(tokens):
            match = self.idioms.match_native(tokens, i, lang)
            if match is not None:
                idiom, i = match
                idioms.append(idiom)
                units.append(WordUnit(idiom, idiom, self.idioms.role(idiom), translated=True))
                continue
            token = tokens[i]
            english = self.dictionary.reverse(token, source)
            if english is not None:
                units.append(WordUnit(english, english, pos_tag(english, _last_word(units)), translated=True))
            elif not is_latin_text(token):
                romanized = self.transliterator.reverse_transliterate(token, source)
                units.append(WordUnit(romanized, romanized, PartOfSpeech.NOUN))
            else:
                units.append(WordUnit(token, token, PartOfSpeech.NOUN))
            i += 1

        units = reorder(units, lang, EN)
        return _join(units), _fraction(units), idioms

    def _literal(self, text, target, direction, english_pivot=None):
        if not self.registry.is_latin_script(target):
            out = self.transliterator.transliterate(text, target)
            return self._outcome(out, out != text, "transliteration", TranslationMethod.TRANSLITERATION,
                                 direction, english_pivot=english_pivot)
        return self._outcome(text, False, "literal", TranslationMethod.LITERAL, direction,
                             english_pivot=english_pivot)

    def _word_outcome(self, text, fraction, direction, english_pivot, idioms=()):
        method = TranslationMethod.IDIOM if idioms else TranslationMethod.WORD
        scale = TRANSLATION_CONFIDENCE["idiom_scale" if idioms else "word_scale"]
        return TranslationOutcome(
            text=text,
            translated=True,
            confidence=clip_confidence(scale * fraction),
            method=method,
            direction=direction,
            english_pivot=english_pivot,
            idioms=list(idioms),
        )

    @staticmethod
    def _outcome(text, translated, confidence_key, method, direction, english_pivot=None):
        return TranslationOutcome(
            text=text,
            translated=translated,
            confidence=TRANSLATION_CONFIDENCE[confidence_key],
            method=method,
            direction=direction,
            english_pivot=english_pivot,
        )


def _last_word(units: List[WordUnit]) -> Optional[str]:
    return units[-1].english.split()[-1] if units else None


def _join(units: List[WordUnit]) -> str:
    return " ".join(unit.text for unit in units)


def _fraction(units: List[WordUnit]) -> float:
    return sum(1 for unit in units if unit.translated) / len(units) if units else 0.0


def _merge(*groups: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(idiom for group in groups for idiom in group))
