"""Clause reordering between SVO, SOV and VSO word orders."""

from __future__ import annotations
from typing import List, Optional, Tuple

# Import grammar data
from ..core.grammar import ADJECTIVE_AFTER_NOUN, WORD_ORDER
from ..core.languages import LanguageId

# Import schemas
from ..api.schemas import PartOfSpeech, WordUnit

POS = PartOfSpeech

_NOMINAL = (POS.NOUN, POS.PRONOUN)
_VERBAL = (POS.VERB, POS.AUXILIARY)


def word_order(lang: LanguageId) -> str:
    return WORD_ORDER.get(lang, "SVO")


def adjectives_after_nouns(lang: LanguageId) -> bool:
    return lang in ADJECTIVE_AFTER_NOUN


def _first(units: List[WordUnit], tags, start: int = 0) -> Optional[int]:
    for i in range(start, len(units)):
        if units[i].pos in tags:
            return i
    return None


def _verb_group(units: List[WordUnit], start: int) -> Tuple[int, int]:
    """Span of consecutive verbs and auxiliaries beginning at ``start``"""
    end = start
    while end < len(units) and units[end].pos in _VERBAL:
        end += 1
    return start, end


def svo_to_sov(units: List[WordUnit]) -> List[WordUnit]:
    """``I drink water`` -> ``I water drink``; the verb group follows its object"""
    subject = _first(units, _NOMINAL)
    if subject is None:
        return units
    verb = _first(units, _VERBAL, subject + 1)
    if verb is None:
        return units
    start, end = _verb_group(units, verb)
    group = units[start:end]
    rest = units[:start] + units[end:]

    obj = _first(rest, _NOMINAL, start)
    insert_at = obj + 1 if obj is not None else len(rest)
    return rest[:insert_at] + group + rest[insert_at:]


def sov_to_svo(units: List[WordUnit]) -> List[WordUnit]:
    """``I water drink`` -> ``I drink water``; the last verb group moves after the subject"""
    end = None
    for i in range(len(units) - 1, -1, -1):
        if units[i].pos in _VERBAL:
            end = i + 1
            break
    if end is None:
        return units
    start = end - 1
    while start > 0 and units[start - 1].pos in _VERBAL:
        start -= 1

    subject = _first(units, _NOMINAL)
    if subject is None or subject >= start:
        return units
    group = units[start:end]
    rest = units[:start] + units[end:]

    insert_at = subject + 1
    # Adjectives trailing the subject stay with it; ones leading the object do not
    while insert_at < len(rest) and rest[insert_at].pos == POS.ADJECTIVE and \
            (insert_at + 1 == len(rest) or rest[insert_at + 1].pos not in _NOMINAL):
        insert_at += 1
    return rest[:insert_at] + group + rest[insert_at:]


def svo_to_vso(units: List[WordUnit]) -> List[WordUnit]:
    subject = _first(units, _NOMINAL)
    if subject is None:
        return units
    verb = _first(units, _VERBAL, subject + 1)
    if verb is None:
        return units
    start, end = _verb_group(units, verb)
    group = units[start:end]
    rest = units[:start] + units[end:]
    return rest[:subject] + group + rest[subject:]


def vso_to_svo(units: List[WordUnit]) -> List[WordUnit]:
    verb = _first(units, _VERBAL)
    subject = _first(units, _NOMINAL)
    if verb is None or subject is None or verb > subject:
        return units
    start, end = _verb_group(units, verb)
    group = units[start:end]
    rest = units[:start] + units[end:]
    subject = _first(rest, _NOMINAL, start)
    return rest[:subject + 1] + group + rest[subject + 1:]


def move_adjectives(units: List[WordUnit], after_noun: bool) -> List[WordUnit]:
    """Swap adjacent adjective/noun pairs into the target's modifier position"""
    first, second = (POS.ADJECTIVE, POS.NOUN) if after_noun else (POS.NOUN, POS.ADJECTIVE)
    result = list(units)
    i = 0
    while i < len(result) - 1:
        if result[i].pos == first and result[i + 1].pos == second:
            result[i], result[i + 1] = result[i + 1], result[i]
            i += 2
        else:
            i += 1
    return result


_TRANSFORMS = {
    ("SVO", "SOV"): svo_to_sov,
    ("SOV", "SVO"): sov_to_svo,
    ("SVO", "VSO"): svo_to_vso,
    ("VSO", "SVO"): vso_to_svo,
}


def _reorder_clause(units: List[WordUnit], source: LanguageId, target: LanguageId) -> List[WordUnit]:
    transform = _TRANSFORMS.get((word_order(source), word_order(target)))
    if transform is not None:
        units = transform(units)
    if adjectives_after_nouns(source) != adjectives_after_nouns(target):
        units = move_adjectives(units, adjectives_after_nouns(target))
    return units


def reorder(units: List[WordUnit], source: LanguageId, target: LanguageId) -> List[WordUnit]:
    """Reorder each conjunction-separated clause from ``source`` to ``target`` order"""
    if word_order(source) == word_order(target) and \
            adjectives_after_nouns(source) == adjectives_after_nouns(target):
        return units

    result: List[WordUnit] = []
    clause: List[WordUnit] = []
    for unit in units:
        if unit.pos == POS.CONJUNCTION:
            result.extend(_reorder_clause(clause, source, target))
            result.append(unit)
            clause = []
        else:
            clause.append(unit)
    result.extend(_reorder_clause(clause, source, target))
    return result
