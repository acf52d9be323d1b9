"""Tests for phonetic spelling correction."""

import pytest

from xlit.src.core.languages import LanguageId
from xlit.src.core.phonetics import LANGUAGE_CORRECTIONS, UNIVERSAL_LATIN_CORRECTIONS
from xlit.src.services.correction import PhoneticCorrector


@pytest.fixture
def corrector(registry):
    return PhoneticCorrector(registry)


class TestCorrect:
    """Exact token replacement with punctuation preserved."""

    def test_single_word(self, corrector):
        result = corrector.correct("namste", LanguageId.HINDI)
        assert result.corrected_text == "namaste"
        assert result.corrections == ["namste → namaste"]

    def test_case_insensitive_lookup(self, corrector):
        assert corrector.correct("Namste", LanguageId.HINDI).corrected_text == "namaste"

    def test_punctuation_and_whitespace_preserved(self, corrector):
        result = corrector.correct("(namste!  kese", LanguageId.HINDI)
        assert result.corrected_text == "(namaste!  kaise"
        assert len(result.corrections) == 2

    def test_no_hits(self, corrector):
        result = corrector.correct("namaste", LanguageId.HINDI)
        assert result.corrected_text == "namaste"
        assert result.corrections == []

    def test_empty(self, corrector):
        result = corrector.correct("", LanguageId.HINDI)
        assert result.corrected_text == ""
        assert result.corrections == []

    def test_dialect_uses_relative_table(self, corrector):
        assert corrector.correct("namste", LanguageId.BHOJPURI).corrected_text == "namaste"

    def test_universal_shorthand_for_latin_languages(self, corrector):
        result = corrector.correct("hru? pls reply", LanguageId.ENGLISH)
        assert result.corrected_text == "how are you? please reply"

    def test_universal_shorthand_skipped_for_native_languages(self, corrector):
        assert corrector.correct("pls", LanguageId.TELUGU).corrected_text == "pls"

    def test_language_without_table(self, corrector):
        result = corrector.correct("namste", LanguageId.JAPANESE)
        assert result.corrected_text == "namste"
        assert result.corrections == []


class TestIdempotence:
    """Correcting an already corrected text changes nothing."""

    @pytest.mark.parametrize("lang", sorted(set(LANGUAGE_CORRECTIONS) | {LanguageId.ENGLISH}, key=lambda l: l.value))
    def test_canonical_spellings_are_stable(self, corrector, lang):
        for table in corrector.tables_for(lang):
            for canonical in set(table.values()):
                result = corrector.correct(canonical, lang)
                assert result.corrections == [], f"{lang.value}: {canonical!r} -> {result.corrected_text!r}"

    def test_twice_equals_once(self, corrector):
        text = "namste ap kese ho, thik hai"
        once = corrector.correct(text, LanguageId.HINDI).corrected_text
        assert corrector.correct(once, LanguageId.HINDI).corrected_text == once

    def test_universal_table_values_are_not_keys(self):
        for value in UNIVERSAL_LATIN_CORRECTIONS.values():
            for word in value.split():
                assert word not in UNIVERSAL_LATIN_CORRECTIONS


class TestSuggestions:
    """Close matches are offered but never applied."""

    def test_direct_hit(self, corrector):
        assert corrector.suggestions("namste", LanguageId.HINDI) == ["namaste"]

    def test_close_match(self, corrector):
        assert "namaste" in corrector.suggestions("namastee", LanguageId.HINDI)

    def test_limit(self, corrector):
        assert len(corrector.suggestions("dhanyavaadd", LanguageId.HINDI, limit=1)) <= 1

    def test_empty(self, corrector):
        assert corrector.suggestions("  ", LanguageId.HINDI) == []
