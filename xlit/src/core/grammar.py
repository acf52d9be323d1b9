"""Word-level grammar data: word order, English word classes and inflections."""

from __future__ import annotations

from .languages import LanguageId

L = LanguageId

# Basic clause order; languages not listed are SVO
WORD_ORDER = {
    # South Asian
    L.HINDI: "SOV", L.BENGALI: "SOV", L.TELUGU: "SOV", L.TAMIL: "SOV",
    L.KANNADA: "SOV", L.MALAYALAM: "SOV", L.MARATHI: "SOV", L.GUJARATI: "SOV",
    L.PUNJABI: "SOV", L.ODIA: "SOV", L.ASSAMESE: "SOV", L.URDU: "SOV",
    L.NEPALI: "SOV", L.SINHALA: "SOV", L.SANSKRIT: "SOV", L.BHOJPURI: "SOV",
    L.MAITHILI: "SOV", L.AWADHI: "SOV", L.MAGAHI: "SOV", L.CHHATTISGARHI: "SOV",
    L.TULU: "SOV", L.KONKANI: "SOV",
    # Others
    L.JAPANESE: "SOV", L.KOREAN: "SOV", L.TURKISH: "SOV", L.PERSIAN: "SOV",
    L.BURMESE: "SOV", L.AMHARIC: "SOV",
    L.ARABIC: "VSO", L.TAGALOG: "VSO",
}

# Adjectives follow the noun they modify
ADJECTIVE_AFTER_NOUN = {
    L.SPANISH, L.FRENCH, L.PORTUGUESE, L.ITALIAN, L.ROMANIAN,
    L.ARABIC, L.HEBREW, L.PERSIAN, L.VIETNAMESE, L.THAI, L.LAO, L.KHMER,
    L.INDONESIAN, L.MALAY, L.SWAHILI,
}

# Closed English word classes
DETERMINERS = {
    "the", "a", "an", "this", "that", "these", "those", "my", "your", "his", "her", "its",
    "our", "their", "some", "any", "no", "every", "each", "all", "both", "few", "many", "much",
}
PRONOUNS = {
    "i", "me", "mine", "myself", "you", "yours", "yourself", "he", "him", "himself",
    "she", "hers", "herself", "it", "itself", "we", "us", "ours", "ourselves",
    "they", "them", "theirs", "themselves", "who", "whom", "whose", "what",
}
PREPOSITIONS = {
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "about", "into", "over",
    "after", "under", "above", "below", "between", "through", "during", "before",
    "behind", "near", "across", "around", "against", "without", "within",
}
CONJUNCTIONS = {
    "and", "but", "or", "nor", "yet", "so", "because", "although", "while", "if", "when",
    "where", "unless", "until", "since", "though", "whether",
}
AUXILIARIES = {
    "am", "is", "are", "was", "were", "be", "been", "being", "do", "does", "did",
    "have", "has", "had", "will", "would", "shall", "should", "can", "could",
    "may", "might", "must",
}
INTERJECTIONS = {
    "hello", "hi", "hey", "yes", "no", "please", "okay", "ok", "thanks", "goodbye", "bye", "sorry",
}
ADVERBS = {
    "very", "too", "not", "now", "today", "tomorrow", "yesterday", "here", "there",
    "again", "always", "never", "soon", "later", "also",
}

# Open classes: base forms known to the word lexicon
VERBS = {
    "be", "have", "do", "go", "come", "see", "take", "get", "make", "know", "think", "say",
    "give", "find", "tell", "feel", "leave", "keep", "begin", "help", "show", "hear", "play",
    "run", "live", "bring", "write", "sit", "stand", "lose", "pay", "meet", "learn", "speak",
    "read", "buy", "wait", "send", "build", "stay", "eat", "sleep", "drink", "drive", "fly",
    "forget", "sing", "want", "like", "love", "need", "miss", "call", "work", "open", "walk",
    "cook", "watch", "understand",
}
ADJECTIVES = {
    "good", "bad", "big", "small", "new", "old", "hot", "cold", "happy", "sad", "beautiful", "easy",
    "red", "blue", "green", "white", "black", "great", "nice", "fine", "tired", "hungry",
}

ADVERB_SUFFIXES = ("ly",)
ADJECTIVE_SUFFIXES = ("ful", "less", "ous", "ive", "able", "ible", "ical", "ish")
VERB_SUFFIXES = ("ize", "ify")
NOUN_SUFFIXES = ("tion", "sion", "ness", "ment", "ity", "ance", "ence", "ist", "ism")

# Irregular verbs: infinitive -> (past forms, past participle)
IRREGULAR_VERBS = {
    "be": ("was/were", "been"), "have": ("had", "had"), "do": ("did", "done"),
    "go": ("went", "gone"), "come": ("came", "come"), "see": ("saw", "seen"),
    "take": ("took", "taken"), "get": ("got", "gotten"), "make": ("made", "made"),
    "know": ("knew", "known"), "think": ("thought", "thought"), "say": ("said", "said"),
    "give": ("gave", "given"), "find": ("found", "found"), "tell": ("told", "told"),
    "feel": ("felt", "felt"), "leave": ("left", "left"), "keep": ("kept", "kept"),
    "begin": ("began", "begun"), "hear": ("heard", "heard"), "run": ("ran", "run"),
    "bring": ("brought", "brought"), "write": ("wrote", "written"), "sit": ("sat", "sat"),
    "stand": ("stood", "stood"), "lose": ("lost", "lost"), "pay": ("paid", "paid"),
    "meet": ("met", "met"), "speak": ("spoke", "spoken"), "buy": ("bought", "bought"),
    "send": ("sent", "sent"), "build": ("built", "built"), "eat": ("ate", "eaten"),
    "sleep": ("slept", "slept"), "drink": ("drank", "drunk"), "drive": ("drove", "driven"),
    "fly": ("flew", "flown"), "forget": ("forgot", "forgotten"), "sing": ("sang", "sung"),
    "understand": ("understood", "understood"),
}

IRREGULAR_PLURALS = {
    "child": "children", "person": "people", "man": "men", "woman": "women",
    "foot": "feet", "tooth": "teeth", "mouse": "mice", "knife": "knives",
    "wife": "wives", "life": "lives", "leaf": "leaves", "half": "halves",
}

# Porter-style suffixes, longest first
STEM_SUFFIXES = (
    "ational", "tional", "ization", "fulness", "ousness", "iveness",
    "ement", "ness", "ment", "able", "ible", "ally", "ance", "ence",
    "ism", "ity", "ous", "ive", "ful", "less", "ing", "tion", "sion",
    "ed", "ly", "er", "est", "en", "s",
)
