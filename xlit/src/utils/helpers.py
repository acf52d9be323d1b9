"""Text helpers shared by the engine services."""

from __future__ import annotations
import re
from typing import List, Tuple

# Import config
from ..core.config import MAX_CHAR_RUN

_WS_RE = re.compile(r"\s+")
_SPLIT_KEEP_WS_RE = re.compile(r"(\s+)")
_TERMINAL_PUNCT = "?!.,;:।॥؟。？！"


def collapse_runs(text: str, max_run: int = MAX_CHAR_RUN) -> str:
    """Collapse runs of one repeated character down to ``max_run``"""
    if max_run < 1 or len(text) <= max_run:
        return text
    out = []
    prev = ""
    run = 0
    for ch in text:
        if ch == prev:
            run += 1
        else:
            prev = ch
            run = 1
        if run <= max_run:
            out.append(ch)
    return "".join(out)


def split_keep_whitespace(text: str) -> List[str]:
    """Split into alternating tokens and whitespace runs; joining restores the input"""
    return [part for part in _SPLIT_KEEP_WS_RE.split(text) if part != ""]


def strip_token(token: str, leading: str, trailing: str) -> Tuple[str, str, str]:
    """Split a token into (prefix, core, suffix) around the given punctuation sets"""
    start = 0
    end = len(token)
    while start < end and token[start] in leading:
        start += 1
    while end > start and token[end - 1] in trailing:
        end -= 1
    return token[:start], token[start:end], token[end:]


def normalize_phrase(text: str) -> str:
    """Lookup key: lowercase, single spaces, no trailing terminal punctuation"""
    key = _WS_RE.sub(" ", text.strip().lower())
    return key.rstrip(_TERMINAL_PUNCT).strip()


def split_terminal_punctuation(text: str) -> Tuple[str, str]:
    """Separate trailing terminal punctuation so it can be reattached"""
    stripped = text.rstrip()
    core = stripped.rstrip(_TERMINAL_PUNCT)
    return core, stripped[len(core):]


def is_word_boundary(text: str, index: int) -> bool:
    """True when ``index`` is at the start of the text or follows whitespace"""
    return index == 0 or text[index - 1].isspace()
