"""English morphology for word-level dictionary lookups."""

from __future__ import annotations
import re
from typing import List, Optional

# Import grammar data
from ..core.grammar import (
    ADJECTIVE_SUFFIXES,
    ADJECTIVES,
    ADVERB_SUFFIXES,
    ADVERBS,
    AUXILIARIES,
    CONJUNCTIONS,
    DETERMINERS,
    INTERJECTIONS,
    IRREGULAR_PLURALS,
    IRREGULAR_VERBS,
    NOUN_SUFFIXES,
    PREPOSITIONS,
    PRONOUNS,
    STEM_SUFFIXES,
    VERB_SUFFIXES,
    VERBS,
)

# Import schemas
from ..api.schemas import PartOfSpeech

POS = PartOfSpeech

_DOUBLED_END_RE = re.compile(r"([b-df-hj-np-tv-z])\1$")

# Inflected form -> base form
_IRREGULAR_FORMS = {}
for _infinitive, (_past, _participle) in IRREGULAR_VERBS.items():
    for _form in _past.split("/") + [_participle]:
        _IRREGULAR_FORMS.setdefault(_form, _infinitive)
for _singular, _plural in IRREGULAR_PLURALS.items():
    _IRREGULAR_FORMS.setdefault(_plural, _singular)

_CLOSED_CLASSES = (
    (DETERMINERS, POS.DETERMINER),
    (PRONOUNS, POS.PRONOUN),
    (PREPOSITIONS, POS.PREPOSITION),
    (CONJUNCTIONS, POS.CONJUNCTION),
    (AUXILIARIES, POS.AUXILIARY),
    (INTERJECTIONS, POS.INTERJECTION),
    (ADVERBS, POS.ADVERB),
)


def stem(word: str) -> str:
    """Porter-like suffix strip; keeps at least three letters of root"""
    result = word.lower()
    for suffix in STEM_SUFFIXES:
        if result.endswith(suffix) and len(result) > len(suffix) + 2:
            result = result[:-len(suffix)]
            break
    if len(result) > 3 and _DOUBLED_END_RE.search(result):
        result = result[:-1]
    return result


def lemma_candidates(word: str) -> List[str]:
    """Possible dictionary forms of ``word``, most likely first, without ``word`` itself"""
    lower = word.lower()
    candidates = []

    irregular = _IRREGULAR_FORMS.get(lower)
    if irregular:
        candidates.append(irregular)

    if lower.endswith("ing") and len(lower) > 4:
        base = lower[:-3]
        candidates.append(base)
        if _DOUBLED_END_RE.search(base):
            candidates.append(base[:-1])
        candidates.append(base + "e")
    elif lower.endswith("ied") and len(lower) > 4:
        candidates.append(lower[:-3] + "y")
    elif lower.endswith("ed") and len(lower) > 3:
        candidates.append(lower[:-1])
        base = lower[:-2]
        candidates.append(base)
        if _DOUBLED_END_RE.search(base):
            candidates.append(base[:-1])
    elif lower.endswith("ies") and len(lower) > 4:
        candidates.append(lower[:-3] + "y")
    elif lower.endswith("ves") and len(lower) > 4:
        candidates.extend([lower[:-3] + "f", lower[:-3] + "fe"])
    elif lower.endswith("es") and len(lower) > 3:
        candidates.extend([lower[:-1], lower[:-2]])
    elif lower.endswith("s") and not lower.endswith("ss") and len(lower) > 3:
        candidates.append(lower[:-1])

    candidates.append(stem(lower))

    seen = {lower}
    ordered = []
    for candidate in candidates:
        if len(candidate) >= 2 and candidate not in seen:
            seen.add(candidate)
            ordered.append(candidate)
    return ordered


def pos_tag(word: str, previous: Optional[str] = None) -> PartOfSpeech:
    """Heuristic part of speech for an English word given the word before it"""
    lower = word.lower()
    if not lower or " " in lower:
        return POS.OTHER

    for words, tag in _CLOSED_CLASSES:
        if lower in words:
            return tag
    if lower in ADJECTIVES:
        return POS.ADJECTIVE

    prev = (previous or "").lower()
    if prev in DETERMINERS or prev in ADJECTIVES:
        return POS.NOUN
    if prev == "to":
        return POS.VERB

    if lower in VERBS or any(c in VERBS for c in lemma_candidates(lower)):
        return POS.VERB

    for suffixes, tag in (
        (ADVERB_SUFFIXES, POS.ADVERB),
        (ADJECTIVE_SUFFIXES, POS.ADJECTIVE),
        (VERB_SUFFIXES, POS.VERB),
        (NOUN_SUFFIXES, POS.NOUN),
    ):
        if any(lower.endswith(s) and len(lower) > len(s) + 2 for s in suffixes):
            return tag

    if lower.endswith("ing") or lower.endswith("ed"):
        return POS.VERB
    return POS.NOUN
