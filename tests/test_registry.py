"""Tests for language normalization and profiles."""

import pytest

from xlit.src.core.exceptions import UnsupportedLanguageError
from xlit.src.core.languages import LanguageId, ScriptFamily


class TestNormalize:
    """Codes, names, native names and aliases all resolve to one id."""

    @pytest.mark.parametrize("value", ["hi", "HI", " Hindi ", "हिन्दी", "hin_Deva", "hindustani", "hi-IN", "hi_in"])
    def test_hindi_spellings(self, registry, value):
        assert registry.normalize(value) == LanguageId.HINDI

    @pytest.mark.parametrize("value,expected", [
        ("bangla", LanguageId.BENGALI),
        ("oriya", LanguageId.ODIA),
        ("farsi", LanguageId.PERSIAN),
        ("panjabi", LanguageId.PUNJABI),
        ("sinhalese", LanguageId.SINHALA),
        ("pt-BR", LanguageId.PORTUGUESE),
        ("tel_Telu", LanguageId.TELUGU),
    ])
    def test_aliases(self, registry, value, expected):
        assert registry.normalize(value) == expected

    def test_enum_passes_through(self, registry):
        assert registry.normalize(LanguageId.TAMIL) is LanguageId.TAMIL

    def test_unknown_falls_back_to_english(self, registry):
        assert registry.normalize("klingon") == LanguageId.ENGLISH
        assert registry.normalize(None) == LanguageId.ENGLISH

    def test_try_normalize_returns_none_for_unknown(self, registry):
        assert registry.try_normalize("klingon") is None
        assert registry.try_normalize("") is None

    def test_strict_raises(self, registry):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            registry.normalize("klingon", strict=True)
        assert exc_info.value.value == "klingon"

    def test_shared_nllb_code_keeps_first_owner(self, registry):
        """Tulu borrows Kannada's NLLB code; the code still means Kannada."""
        assert registry.nllb_code("tcy") == "kan_Knda"
        assert registry.normalize("kan_Knda") == LanguageId.KANNADA


class TestProfiles:
    """Profile lookups and derived properties."""

    def test_info(self, registry):
        profile = registry.info("te")
        assert profile.name == "Telugu"
        assert profile.script == ScriptFamily.TELUGU
        assert not profile.rtl
        assert not profile.is_latin

    def test_rtl(self, registry):
        assert registry.info("ur").rtl
        assert registry.info("he").rtl

    def test_is_same_is_reflexive_and_symmetric(self, registry):
        assert registry.is_same("hi", "Hindi")
        assert registry.is_same("Hindi", "hi")
        assert not registry.is_same("hi", "mr")
        assert not registry.is_same("mr", "hi")

    def test_latin_script(self, registry):
        assert registry.is_latin_script("en")
        assert registry.is_latin_script("es")
        assert not registry.is_latin_script("hi")

    @pytest.mark.parametrize("dialect,relative", [
        ("bho", LanguageId.HINDI),
        ("mai", LanguageId.HINDI),
        ("awa", LanguageId.HINDI),
        ("mag", LanguageId.HINDI),
        ("tcy", LanguageId.KANNADA),
        ("kok", LanguageId.MARATHI),
    ])
    def test_effective_language(self, registry, dialect, relative):
        assert registry.effective_language(dialect) == relative
        assert registry.script_of(dialect) == registry.script_of(relative)

    def test_effective_language_of_major_language_is_itself(self, registry):
        assert registry.effective_language("te") == LanguageId.TELUGU

    def test_supported_lists_every_language(self, registry):
        profiles = registry.supported()
        assert len(profiles) == len(registry) == len(LanguageId)
        assert profiles[0].to_dict()["id"] == "en"
