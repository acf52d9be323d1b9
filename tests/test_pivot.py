"""Tests for the phrase dictionary and the English-pivot resolver."""

from unittest.mock import patch

import pytest

from xlit.src.api.schemas import TranslationDirection, TranslationMethod
from xlit.src.core.languages import LanguageId
from xlit.src.services.correction import PhoneticCorrector
from xlit.src.services.pivot import PhraseDictionary, PivotTranslator
from xlit.src.services.transliteration import TransliterationEngine

L = LanguageId
D = TranslationDirection
M = TranslationMethod


@pytest.fixture
def transliterator(registry, cache):
    return TransliterationEngine(registry, cache)


@pytest.fixture
def dictionary(registry, transliterator):
    return PhraseDictionary(registry, PhoneticCorrector(registry), transliterator)


@pytest.fixture
def translator(registry, dictionary, transliterator, cache):
    return PivotTranslator(registry, dictionary, transliterator, cache)


class TestPhraseDictionary:
    """Forward, reverse and native-to-native lookups through one entry."""

    def test_forward(self, dictionary):
        assert dictionary.forward("hello", L.HINDI) == "नमस्ते"
        assert dictionary.forward("How are you?", L.TELUGU) == "మీరు ఎలా ఉన్నారు"
        assert dictionary.forward("hello", L.ENGLISH) == "hello"

    def test_forward_through_dialect(self, dictionary):
        assert dictionary.forward("hello", L.BHOJPURI) == dictionary.forward("hello", L.HINDI)

    def test_reverse_native(self, dictionary):
        assert dictionary.reverse("आप  कैसे हैं?", L.HINDI) == "how are you"

    def test_reverse_romanized(self, dictionary):
        assert dictionary.reverse("Bagunnava", L.TELUGU) == "how are you"

    def test_reverse_rendered_romanized(self, dictionary, transliterator):
        """The sender's own rendering of a romanized phrase maps back to its entry."""
        rendered = transliterator.transliterate("bagunnava", L.TELUGU)
        assert dictionary.reverse(rendered, L.TELUGU) == "how are you"

    def test_miss(self, dictionary):
        assert dictionary.reverse("qwerty", L.HINDI) is None
        assert dictionary.forward("qwerty", L.HINDI) is None
        assert dictionary.reverse("", L.HINDI) is None

    def test_entry(self, dictionary):
        entry = dictionary.entry("Hello")
        assert entry.translations[L.SPANISH] == "hola"
        assert "namaste" in entry.phonetic[L.HINDI]
        assert len(dictionary) > 0


class TestDirection:
    """Direction checks run in a fixed order."""

    @pytest.mark.parametrize("source,target,expected", [
        (L.HINDI, L.HINDI, D.SAME_LANGUAGE),
        (L.ENGLISH, L.HINDI, D.ENGLISH_SOURCE),
        (L.HINDI, L.ENGLISH, D.ENGLISH_TARGET),
        (L.SPANISH, L.FRENCH, D.LATIN_TO_LATIN),
        (L.HINDI, L.TELUGU, D.PIVOT),
        (L.SPANISH, L.HINDI, D.PIVOT),
    ])
    def test_resolve_direction(self, translator, source, target, expected):
        assert translator.resolve_direction(source, target) == expected


class TestTranslate:
    """Strategy fall-through per direction."""

    def test_same_language_transliterates_latin(self, translator):
        outcome = translator.translate("namaste", "hi", "hi")
        assert outcome.text == "नमस्ते"
        assert outcome.method == M.TRANSLITERATION
        assert outcome.confidence == 1.0

    def test_same_language_passthrough(self, translator):
        outcome = translator.translate("hello", "en", "en")
        assert outcome.text == "hello"
        assert outcome.method == M.PASSTHROUGH
        assert not outcome.translated

    def test_english_phrase(self, translator):
        outcome = translator.translate("Hello!", "en", "hi")
        assert outcome.text == "नमस्ते!"
        assert outcome.method == M.PHRASE
        assert outcome.confidence == 0.95
        assert outcome.english_pivot == "hello"

    def test_english_word_by_word(self, translator):
        outcome = translator.translate("hello friend", "en", "hi")
        assert outcome.text == "नमस्ते दोस्त"
        assert outcome.method == M.WORD
        assert outcome.confidence == 0.9

    def test_english_partial_word_by_word(self, translator):
        outcome = translator.translate("hello qwerty", "en", "hi")
        assert outcome.method == M.WORD
        assert outcome.confidence == 0.45

    def test_english_literal_transliterated(self, translator):
        outcome = translator.translate("qwerty", "en", "hi")
        assert outcome.method == M.TRANSLITERATION
        assert outcome.confidence == 0.6

    def test_english_literal_to_latin_target(self, translator):
        outcome = translator.translate("qwerty", "en", "es")
        assert outcome.text == "qwerty"
        assert outcome.method == M.LITERAL
        assert outcome.confidence == 0.5

    def test_to_english_native_phrase(self, translator):
        outcome = translator.translate("नमस्ते", "hi", "en")
        assert outcome.text == "hello"
        assert outcome.confidence == 0.9

    def test_to_english_romanized_phrase(self, translator):
        assert translator.translate("kaise ho?", "hi", "en").text == "how are you?"

    def test_to_english_reverse_transliteration(self, translator):
        outcome = translator.translate("कमल", "hi", "en")
        assert outcome.text == "kamal"
        assert outcome.method == M.REVERSE_TRANSLITERATION
        assert outcome.confidence == 0.7

    def test_latin_to_latin_phrase(self, translator):
        outcome = translator.translate("hola", "es", "fr")
        assert outcome.text == "bonjour"
        assert outcome.direction == D.LATIN_TO_LATIN
        assert outcome.english_pivot == "hello"

    def test_latin_to_latin_passthrough(self, translator):
        outcome = translator.translate("qwerty", "es", "fr")
        assert outcome.text == "qwerty"
        assert outcome.method == M.LITERAL

    def test_pivot_native_to_native(self, translator):
        outcome = translator.translate("आप कैसे हैं", "hi", "te")
        assert outcome.text == "మీరు ఎలా ఉన్నారు"
        assert outcome.direction == D.PIVOT
        assert outcome.english_pivot == "how are you"
        assert outcome.confidence == 0.85

    def test_pivot_latin_to_native(self, translator):
        outcome = translator.translate("gracias", "es", "hi")
        assert outcome.text == "धन्यवाद"
        assert outcome.english_pivot == "thank you"

    def test_pivot_miss_transliterates_into_target(self, translator):
        outcome = translator.translate("कमल", "hi", "te")
        assert outcome.method == M.TRANSLITERATION
        assert outcome.english_pivot == "kamal"
        assert outcome.text == "కమల"

    def test_empty_text(self, translator):
        outcome = translator.translate("", "hi", "te")
        assert outcome.text == ""
        assert outcome.method == M.PASSTHROUGH


class TestCaching:
    """Second call for the same key is served from the translation cache."""

    def test_second_call_is_cache_hit(self, translator):
        with patch.object(translator, "_translate_uncached", wraps=translator._translate_uncached) as spy:
            first = translator.translate("hello", "en", "te")
            second = translator.translate("hello", "en", "te")
        assert spy.call_count == 1
        assert first.text == second.text
        assert first.method == M.PHRASE
        assert second.method == M.CACHED

    def test_resolve_keeps_original_method(self, translator):
        translator.translate("hello", "en", "te")
        assert translator.resolve("hello", "en", "te").method == M.PHRASE

    def test_keys_are_normalized(self, translator):
        translator.translate("hello", "English", "Telugu")
        assert translator.translate("hello", "en", "te").method == M.CACHED

    def test_without_cache(self, registry, dictionary, transliterator):
        uncached = PivotTranslator(registry, dictionary, transliterator)
        with patch.object(uncached, "_translate_uncached", wraps=uncached._translate_uncached) as spy:
            uncached.translate("hello", "en", "te")
            uncached.translate("hello", "en", "te")
        assert spy.call_count == 2

    def test_is_resolved(self, translator):
        assert translator.is_resolved(translator.translate("hello", "en", "hi"))
        assert not translator.is_resolved(translator.translate("qwerty", "en", "hi"))
        assert translator.is_resolved(translator.translate("qwerty", "hi", "hi"))


class TestWordLevel:
    """Word-by-word fallback: dictionary forms, target word order and adjective position."""

    def test_english_to_sov(self, translator):
        outcome = translator.translate("I drink water", "en", "hi")
        assert outcome.text == "मैं पानी पीना"
        assert outcome.method == M.WORD
        assert outcome.confidence == 0.9
        assert outcome.english_pivot == "i drink water"

    def test_inflected_words_use_dictionary_forms(self, translator):
        outcome = translator.translate("we drank tea", "en", "hi")
        assert outcome.text == "हम चाय पीना"
        assert outcome.confidence == 0.9

    def test_adjective_follows_noun_in_spanish(self, translator):
        assert translator.translate("red books", "en", "es").text == "libro rojo"

    def test_sov_back_to_english(self, translator):
        outcome = translator.translate("मैं पानी पीना", "hi", "en")
        assert outcome.text == "i drink water"
        assert outcome.method == M.WORD

    def test_pivot_between_sov_languages(self, translator):
        outcome = translator.translate("मैं पानी पीना", "hi", "te")
        assert outcome.text == "నేను నీరు తాగు"
        assert outcome.english_pivot == "i drink water"

    def test_phrase_meaning_wins_over_word_meaning(self, dictionary):
        """A word listed under a phrase keeps the phrase's English on reverse lookups."""
        assert dictionary.reverse("खाना", L.HINDI) == "food"
        assert dictionary.forward("eat", L.HINDI) == "खाना"


class TestIdioms:
    """Idioms are kept whole instead of translated word by word."""

    def test_rendering_in_target(self, translator):
        outcome = translator.translate("piece of cake", "en", "hi")
        assert outcome.text == "बाएं हाथ का खेल"
        assert outcome.method == M.IDIOM
        assert outcome.confidence == 0.85
        assert outcome.idioms == ["piece of cake"]

    def test_meaning_when_target_has_no_rendering(self, translator):
        outcome = translator.translate("piece of cake", "en", "te")
        assert outcome.text == "చాలా సులభం"
        assert outcome.method == M.IDIOM
        assert outcome.idioms == ["piece of cake"]

    def test_rendering_back_to_english(self, translator):
        outcome = translator.translate("pan comido", "es", "en")
        assert outcome.text == "piece of cake"
        assert outcome.method == M.IDIOM

    def test_latin_to_latin(self, translator):
        outcome = translator.translate("pan comido", "es", "fr")
        assert outcome.text == "c'est du gâteau"
        assert outcome.direction == D.LATIN_TO_LATIN
        assert outcome.idioms == ["piece of cake"]

    def test_pivot(self, translator):
        outcome = translator.translate("pan comido", "es", "hi")
        assert outcome.text == "बाएं हाथ का खेल"
        assert outcome.english_pivot == "piece of cake"

    def test_idiom_outcome_is_resolved(self, translator):
        assert translator.is_resolved(translator.translate("break a leg", "en", "de"))

    def test_to_dict_lists_idioms(self, translator):
        assert translator.translate("break a leg", "en", "fr").to_dict()["idioms"] == ["break a leg"]

    def test_no_idioms_on_plain_words(self, translator):
        assert translator.translate("hello friend", "en", "hi").idioms == []
