"""Phonetic keyword patterns and spelling correction tables."""

from __future__ import annotations

from .languages import LanguageId, ScriptFamily

L = LanguageId
S = ScriptFamily

# Latin-typed Indic languages: keyword list (+2 per token hit) and regexes (+1 per hit).
# Tokens that are also common English words are not listed.
PHONETIC_PATTERNS = {
    L.HINDI: {
        "words": [
            "namaste", "dhanyawad", "dhanyavaad", "kripya", "acha", "accha", "theek", "bahut",
            "pyar", "pyaar", "dost", "bhai", "behan", "maa", "papa", "ghar", "kaam", "paani",
            "khana", "sona", "jaana", "kaise", "kya", "nahi", "nahin", "haan",
        ],
        "patterns": [
            r"\b(kya|kaise|kab|kahan|kaun|kyun|aur|hai|hain|thi|hoga|hogi|karo|karna|jao|aao|bolo|dekho|suno)\b",
        ],
    },
    L.TELUGU: {
        "words": [
            "namaskar", "namaskaram", "dhanyavadalu", "manchiga", "bagundi", "bagunnava",
            "bagunnara", "bagunnanu", "chala", "prema", "sneham", "anna", "akka", "amma",
            "nanna", "illu", "pani", "neeru", "bhojanam", "nidra", "vellali",
        ],
        "patterns": [
            r"\b(emi|ela|eppudu|ekkada|evaru|enduku|mariyu|nenu|meeru|undi|unnaru|unnav|cheppu|chepandi|randi|poda)\b",
        ],
    },
    L.TAMIL: {
        "words": [
            "vanakkam", "nandri", "nalla", "romba", "kadhal", "nanban", "anna", "akka", "amma",
            "appa", "veedu", "velai", "thanni", "saapadu", "thookkam", "pogalam",
        ],
        "patterns": [
            r"\b(enna|eppadi|eppo|enga|yaar|mattum|naan|neenga|irukku|irukken|sollu|sollungal|vaanga|ponga)\b",
        ],
    },
    L.KANNADA: {
        "words": [
            "namaskara", "dhanyavadagalu", "chennagi", "tumba", "preeti", "gelaya", "anna",
            "akka", "amma", "appa", "mane", "kelasa", "neeru", "oota", "nidde", "hogona",
        ],
        "patterns": [
            r"\b(enu|hege|yavaga|elli|yaru|yaake|mattu|naanu|neevu|iddare|helu|heliri|banni|hogi)\b",
        ],
    },
    L.MALAYALAM: {
        "words": [
            "namaskaram", "nanni", "nallath", "valare", "sneham", "koottukar", "chettan",
            "chechi", "amma", "achan", "veedu", "pani", "vellam", "bhakshanam", "urakam", "pokam",
        ],
        "patterns": [
            r"\b(enthu|engane|eppol|evide|enthinau|njan|ningal|undu|undayo|parayoo|varee|poda)\b",
        ],
    },
    L.MARATHI: {
        "words": [
            "namaskar", "dhanyawad", "changle", "khup", "prem", "mitra", "dada", "tai", "aai",
            "baba", "ghar", "kaam", "paani", "jevan", "jhop", "jaauya",
        ],
        "patterns": [
            r"\b(kasa|kashi|keva|kuthe|kon|ani|tumhi|aahe|aahes|sang|sanga)\b",
        ],
    },
    L.BENGALI: {
        "words": [
            "nomoskar", "dhanyabad", "bhalo", "onek", "bhalobasha", "bondhu", "dada", "didi",
            "baba", "bari", "kaj", "jol", "khabar", "ghum",
        ],
        "patterns": [
            r"\b(kemon|kokhon|kothay|keno|ebong|ami|tumi|ache|achho|bolun|eso|esho)\b",
        ],
    },
    L.GUJARATI: {
        "words": [
            "aabhar", "saru", "ghanu", "prem", "mitra", "bhai", "maa", "papa", "ghar", "kaam",
            "paani", "jaman", "nidra", "jaiye", "kemcho", "majama",
        ],
        "patterns": [
            r"\b(kem|kyare|ane|tame|che|chho|kaho|kahejo|aavo|aavjo|jajo)\b",
        ],
    },
    L.PUNJABI: {
        "words": [
            "dhanyawad", "changi", "bahut", "pyar", "yaar", "bhai", "bhain", "pita", "ghar",
            "kaam", "paani", "khana", "neend", "chaliye", "satsriakal",
        ],
        "patterns": [
            r"\b(kivein|kado|kithe|tusi|tussi|dasso|dasao|aajo|jaao|sat sri akal)\b",
        ],
    },
    L.URDU: {
        "words": [
            "assalam", "salaam", "shukriya", "meharbani", "acha", "theek", "bahut", "mohabbat",
            "dost", "bhai", "behan", "ammi", "abbu", "ghar", "kaam", "paani", "khana", "inshallah",
        ],
        "patterns": [
            r"\b(kya|kaise|kab|kahan|kaun|kyun|aur|hai|hain|thi|hoga|hogi|karo|karna)\b",
        ],
    },
}

# Latin-script language indicators: (language, confidence, character class, keyword regex)
LATIN_INDICATORS = [
    (L.SPANISH, 0.8, r"[ñ¿¡]", r"\b(que|como|cuando|donde|por|para|esta|pero|muy|con|hola|gracias)\b"),
    (L.FRENCH, 0.8, r"[àâçèêëîïôùûœ]", r"\b(je|tu|il|elle|nous|vous|est|sont|avoir|être|dans|pour|avec|qui|bonjour|merci)\b"),
    (L.GERMAN, 0.8, r"[äöüß]", r"\b(ich|du|er|sie|wir|ihr|ist|sind|haben|sein|und|oder|aber|mit|für|danke)\b"),
    (L.PORTUGUESE, 0.8, r"[ãõ]", r"\b(quando|onde|mas|muito|não|você|obrigado|olá)\b"),
    (L.ITALIAN, 0.7, None, r"\b(che|come|dove|perché|questa|molto|non|sono|sei|siamo|ciao|grazie)\b"),
    (L.VIETNAMESE, 0.9, r"[ảạăắằẳẵặấầẩẫậẻẽẹếềểễệỉĩịỏọốồổỗộơớờởỡợủũụưứừửữựỳýỷỹỵđ]", None),
    (L.TURKISH, 0.8, r"[ğış]", r"\b(bir|bu|ve|ile|için|var|yok|evet|hayır|merhaba)\b"),
    (L.INDONESIAN, 0.7, None, r"\b(apa|bagaimana|kapan|dimana|siapa|mengapa|dan|atau|tapi|dengan|untuk|ini|itu|yang|adalah)\b"),
]


# Spelling corrections: misspelling -> canonical phonetic spelling.
# No value is also a key, so applying a table twice changes nothing.

HINDI_CORRECTIONS = {
    "namste": "namaste", "namestey": "namaste", "namasthe": "namaste",
    "namaskaar": "namaskar",
    "dhanyvaad": "dhanyavaad", "dhanyawad": "dhanyavaad", "dhanyabad": "dhanyavaad",
    "sukria": "shukriya", "shukria": "shukriya",
    "acha": "accha", "achha": "accha",
    "thik": "theek", "teek": "theek",
    "kese": "kaise", "kaisey": "kaise",
    "kyun": "kyon", "kiyu": "kyon", "kyo": "kyon",
    "han": "haan",
    "nahi": "nahin", "nai": "nahin",
    "mai": "main",
    "ap": "aap",
    "karunga": "karoonga",
    "jaenge": "jaayenge", "jayenge": "jaayenge",
    "ayega": "aayega",
    "sunlo": "sun lo",
    "pyar": "pyaar",
    "dosth": "dost",
    "bahot": "bahut", "bohot": "bahut",
    "kahan": "kahaan",
}

TELUGU_CORRECTIONS = {
    "namaskaramulu": "namaskaralu",
    "elunnaru": "ela unnaru",
    "bagunnara": "baagunnaaraa", "bagunara": "baagunnaaraa",
    "bagundi": "baagundi", "bagundhi": "baagundi",
    "dhanyavadalu": "dhanyavaadaalu", "dhanyavadamulu": "dhanyavaadaalu",
    "neenu": "nenu",
    "miru": "meeru",
    "endkuu": "enduku",
    "avnu": "avunu",
    "kadhu": "kaadu", "kadu": "kaadu", "kaadhu": "kaadu",
    "vellipotha": "vellipotaanu",
    "randi": "raandi",
    "vacchindi": "vachindi",
    "chestunna": "chestunnaanu", "chestuna": "chestunnaanu",
    "chepandi": "cheppandi",
    "chudu": "choodu", "chodu": "choodu",
    "premainchaanu": "preminchanu",
}

TAMIL_CORRECTIONS = {
    "vanakam": "vanakkam",
    "nanri": "nandri",
    "epdi": "eppadi",
    "nala": "nalla",
    "iruken": "irukken", "irukireen": "irukkireen",
    "nan": "naan",
    "ninga": "neenga",
    "ena": "enna", "yenna": "enna",
    "yen": "yaen",
    "amam": "aamaam",
    "illa": "illai", "ile": "illai",
    "vanthen": "vandhen",
    "poom": "povom",
    "kadhal": "kaadhal",
}

KANNADA_CORRECTIONS = {
    "namaskaar": "namaskara",
    "hegiddeeraa": "hegiddira",
    "chenagidini": "chennagiddini",
    "dhanyavadagalu": "dhanyavaadagalu",
    "nanu": "naanu",
    "nivu": "neevu",
    "yake": "yaake",
    "houdu": "howdu",
    "ila": "illa",
    "madu": "maadu",
    "noodu": "nodu",
    "priti": "preeti",
}

MALAYALAM_CORRECTIONS = {
    "namaskaram": "namaskkaaram", "namaskkaram": "namaskkaaram",
    "sugamano": "sughamano",
    "nandi": "nandhi",
    "njan": "njaan",
    "nigal": "ningal",
    "entu": "enthu",
    "enta": "enthaa",
    "ala": "alla",
    "cheyu": "cheyyu",
    "kanu": "kaanu",
    "snheam": "sneham",
}

BENGALI_CORRECTIONS = {
    "nomoskar": "namaskar", "namaskaar": "namaskar",
    "kamon": "kemon",
    "bhalo": "bhaalo", "balo": "bhaalo",
    "dhonnobad": "dhanyabaad", "dhanyabad": "dhanyabaad",
    "ami": "aami",
    "apni": "aapni", "aponi": "aapni",
    "kano": "keno",
    "han": "haan",
    "eso": "esho",
    "bhalobasha": "bhalobasa",
}

GUJARATI_CORRECTIONS = {
    "namstey": "namaste",
    "kemcho": "kem cho",
    "majama": "majaamaa",
    "abhar": "aabhaar", "aabhar": "aabhaar",
    "hu": "hun",
    "tamey": "tame",
    "avo": "aavo",
    "preema": "prem",
}

PUNJABI_CORRECTIONS = {
    "satsriakaal": "sat sri akaal", "satsriakal": "sat sri akaal",
    "kidaan": "ki haal",
    "vadia": "vadiya",
    "dhanyavad": "dhanyavaad",
    "mai": "main",
    "tusi": "tussi",
}

MARATHI_CORRECTIONS = {
    "namaskaar": "namaskar",
    "dhanyavad": "dhanyavaad", "dhanyawad": "dhanyavaad",
    "tumi": "tumhi",
    "ahe": "aahe", "ahes": "aahes",
    "khupach": "khup ch",
}

ODIA_CORRECTIONS = {
    "namaskaar": "namaskar",
    "dhanyabad": "dhanyabaad",
}

NEPALI_CORRECTIONS = {
    "namste": "namaste",
    "dhanyabad": "dhanyabaad",
}

URDU_CORRECTIONS = {
    "asalam": "assalam", "aslam": "assalam",
    "salam": "salaam",
    "shukria": "shukriya", "sukria": "shukriya",
    "meherbani": "meharbani",
    "acha": "accha",
    "thik": "theek",
    "nahi": "nahin",
}

ARABIC_CORRECTIONS = {
    "marhba": "marhaba",
    "shokran": "shukran", "shukren": "shukran",
    "habibii": "habibi",
    "salam": "salaam",
}

RUSSIAN_CORRECTIONS = {
    "privt": "privet",
    "spasiba": "spasibo",
    "pozhalusta": "pozhaluysta",
}

SPANISH_CORRECTIONS = {
    "q": "que",
    "xq": "porque",
    "tb": "también",
    "ola": "hola",
    "grasias": "gracias",
}

FRENCH_CORRECTIONS = {
    "slt": "salut",
    "bjr": "bonjour",
    "mrc": "merci",
    "pk": "pourquoi",
}

GERMAN_CORRECTIONS = {
    "dnk": "danke",
    "vllt": "vielleicht",
    "hallö": "hallo",
}

PORTUGUESE_CORRECTIONS = {
    "vc": "você",
    "tb": "também",
    "obg": "obrigado",
    "pq": "porque",
}

# Chat shorthand, applied to Latin-script languages after their own table
UNIVERSAL_LATIN_CORRECTIONS = {
    "u": "you",
    "r": "are",
    "ur": "your",
    "pls": "please", "plz": "please",
    "thx": "thanks", "thnx": "thanks",
    "ty": "thank you",
    "gm": "good morning",
    "gn": "good night",
    "hru": "how are you",
    "wru": "where are you",
    "tmrw": "tomorrow", "tmr": "tomorrow",
    "bcoz": "because", "coz": "because",
    "msg": "message",
}

LANGUAGE_CORRECTIONS = {
    L.HINDI: HINDI_CORRECTIONS,
    L.TELUGU: TELUGU_CORRECTIONS,
    L.TAMIL: TAMIL_CORRECTIONS,
    L.KANNADA: KANNADA_CORRECTIONS,
    L.MALAYALAM: MALAYALAM_CORRECTIONS,
    L.BENGALI: BENGALI_CORRECTIONS,
    L.GUJARATI: GUJARATI_CORRECTIONS,
    L.PUNJABI: PUNJABI_CORRECTIONS,
    L.MARATHI: MARATHI_CORRECTIONS,
    L.ODIA: ODIA_CORRECTIONS,
    L.NEPALI: NEPALI_CORRECTIONS,
    L.URDU: URDU_CORRECTIONS,
    L.ARABIC: ARABIC_CORRECTIONS,
    L.RUSSIAN: RUSSIAN_CORRECTIONS,
    L.SPANISH: SPANISH_CORRECTIONS,
    L.FRENCH: FRENCH_CORRECTIONS,
    L.GERMAN: GERMAN_CORRECTIONS,
    L.PORTUGUESE: PORTUGUESE_CORRECTIONS,
}

# Script-family fallback for languages without a table of their own
SCRIPT_FAMILY_CORRECTIONS = {
    S.DEVANAGARI: HINDI_CORRECTIONS,
    S.BENGALI: BENGALI_CORRECTIONS,
    S.ARABIC: URDU_CORRECTIONS,
    S.CYRILLIC: RUSSIAN_CORRECTIONS,
}

STRIP_TRAILING = ".,!?;:'\")"
STRIP_LEADING = "(\"'"
