"""Tests for idiom span matching."""

import pytest

from xlit.src.api.schemas import PartOfSpeech
from xlit.src.core.languages import LanguageId
from xlit.src.services.idioms import IdiomHandler

L = LanguageId


@pytest.fixture
def handler():
    return IdiomHandler()


class TestIdiomHandler:
    """Longest-span matching in English and in each rendering language."""

    def test_match_english(self, handler):
        tokens = "that was a piece of cake".split()
        assert handler.match_english(tokens, 3) == ("piece of cake", 6)
        assert handler.match_english(tokens, 0) is None

    def test_match_english_ignores_trailing_punctuation(self, handler):
        assert handler.match_english(["break", "a", "leg!"], 0) == ("break a leg", 3)

    def test_longest_span_wins(self, handler):
        tokens = "let the cat out of the bag".split()
        assert handler.match_english(tokens, 0) == ("let the cat out of the bag", 7)

    def test_match_native(self, handler):
        tokens = "eso fue pan comido".split()
        assert handler.match_native(tokens, 2, L.SPANISH) == ("piece of cake", 4)
        assert handler.match_native(tokens, 0, L.SPANISH) is None

    def test_match_native_unknown_language(self, handler):
        assert handler.match_native(["x"], 0, L.SWAHILI) is None

    def test_entry_fields(self, handler):
        assert handler.meaning("piece of cake") == "very easy"
        assert handler.role("piece of cake") == PartOfSpeech.NOUN
        assert handler.role("kick the bucket") == PartOfSpeech.VERB
        assert handler.render("piece of cake", L.HINDI) == "बाएं हाथ का खेल"
        assert handler.render("piece of cake", L.TELUGU) is None
        assert len(handler) > 0
