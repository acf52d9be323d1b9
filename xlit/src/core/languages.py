"""Static language registry data."""

from __future__ import annotations
from enum import Enum


class ScriptFamily(str, Enum):
    LATIN = "Latin"
    DEVANAGARI = "Devanagari"
    BENGALI = "Bengali"
    GURMUKHI = "Gurmukhi"
    GUJARATI = "Gujarati"
    ODIA = "Odia"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    KANNADA = "Kannada"
    MALAYALAM = "Malayalam"
    SINHALA = "Sinhala"
    ARABIC = "Arabic"
    HEBREW = "Hebrew"
    CYRILLIC = "Cyrillic"
    GREEK = "Greek"
    ARMENIAN = "Armenian"
    GEORGIAN = "Georgian"
    ETHIOPIC = "Ethiopic"
    THAI = "Thai"
    LAO = "Lao"
    MYANMAR = "Myanmar"
    KHMER = "Khmer"
    HAN = "Han"
    JAPANESE = "Japanese"
    HANGUL = "Hangul"


class LanguageId(str, Enum):
    ENGLISH = "en"
    HINDI = "hi"
    BENGALI = "bn"
    TELUGU = "te"
    TAMIL = "ta"
    KANNADA = "kn"
    MALAYALAM = "ml"
    MARATHI = "mr"
    GUJARATI = "gu"
    PUNJABI = "pa"
    ODIA = "or"
    ASSAMESE = "as"
    URDU = "ur"
    NEPALI = "ne"
    SINHALA = "si"
    SANSKRIT = "sa"
    BHOJPURI = "bho"
    MAITHILI = "mai"
    AWADHI = "awa"
    MAGAHI = "mag"
    CHHATTISGARHI = "hne"
    TULU = "tcy"
    KONKANI = "kok"
    ARABIC = "ar"
    PERSIAN = "fa"
    HEBREW = "he"
    RUSSIAN = "ru"
    UKRAINIAN = "uk"
    BULGARIAN = "bg"
    GREEK = "el"
    ARMENIAN = "hy"
    GEORGIAN = "ka"
    AMHARIC = "am"
    THAI = "th"
    LAO = "lo"
    BURMESE = "my"
    KHMER = "km"
    CHINESE = "zh"
    JAPANESE = "ja"
    KOREAN = "ko"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    PORTUGUESE = "pt"
    ITALIAN = "it"
    DUTCH = "nl"
    POLISH = "pl"
    ROMANIAN = "ro"
    TURKISH = "tr"
    INDONESIAN = "id"
    MALAY = "ms"
    VIETNAMESE = "vi"
    TAGALOG = "tl"
    SWAHILI = "sw"
    HUNGARIAN = "hu"
    CZECH = "cs"
    SWEDISH = "sv"


L = LanguageId
S = ScriptFamily

RTL_SCRIPTS = {S.ARABIC, S.HEBREW}

# id -> (English name, native name, script, NLLB code, nearest relative for dialects)
LANGUAGE_TABLE = {
    L.ENGLISH: ("English", "English", S.LATIN, "eng_Latn", None),
    L.HINDI: ("Hindi", "हिन्दी", S.DEVANAGARI, "hin_Deva", None),
    L.BENGALI: ("Bengali", "বাংলা", S.BENGALI, "ben_Beng", None),
    L.TELUGU: ("Telugu", "తెలుగు", S.TELUGU, "tel_Telu", None),
    L.TAMIL: ("Tamil", "தமிழ்", S.TAMIL, "tam_Taml", None),
    L.KANNADA: ("Kannada", "ಕನ್ನಡ", S.KANNADA, "kan_Knda", None),
    L.MALAYALAM: ("Malayalam", "മലയാളം", S.MALAYALAM, "mal_Mlym", None),
    L.MARATHI: ("Marathi", "मराठी", S.DEVANAGARI, "mar_Deva", None),
    L.GUJARATI: ("Gujarati", "ગુજરાતી", S.GUJARATI, "guj_Gujr", None),
    L.PUNJABI: ("Punjabi", "ਪੰਜਾਬੀ", S.GURMUKHI, "pan_Guru", None),
    L.ODIA: ("Odia", "ଓଡ଼ିଆ", S.ODIA, "ory_Orya", None),
    L.ASSAMESE: ("Assamese", "অসমীয়া", S.BENGALI, "asm_Beng", None),
    L.URDU: ("Urdu", "اردو", S.ARABIC, "urd_Arab", None),
    L.NEPALI: ("Nepali", "नेपाली", S.DEVANAGARI, "npi_Deva", None),
    L.SINHALA: ("Sinhala", "සිංහල", S.SINHALA, "sin_Sinh", None),
    L.SANSKRIT: ("Sanskrit", "संस्कृतम्", S.DEVANAGARI, "san_Deva", None),
    L.BHOJPURI: ("Bhojpuri", "भोजपुरी", S.DEVANAGARI, "bho_Deva", L.HINDI),
    L.MAITHILI: ("Maithili", "मैथिली", S.DEVANAGARI, "mai_Deva", L.HINDI),
    L.AWADHI: ("Awadhi", "अवधी", S.DEVANAGARI, "awa_Deva", L.HINDI),
    L.MAGAHI: ("Magahi", "मगही", S.DEVANAGARI, "mag_Deva", L.HINDI),
    L.CHHATTISGARHI: ("Chhattisgarhi", "छत्तीसगढ़ी", S.DEVANAGARI, "hne_Deva", L.HINDI),
    L.TULU: ("Tulu", "ತುಳು", S.KANNADA, "kan_Knda", L.KANNADA),
    L.KONKANI: ("Konkani", "कोंकणी", S.DEVANAGARI, "gom_Deva", L.MARATHI),
    L.ARABIC: ("Arabic", "العربية", S.ARABIC, "arb_Arab", None),
    L.PERSIAN: ("Persian", "فارسی", S.ARABIC, "pes_Arab", None),
    L.HEBREW: ("Hebrew", "עברית", S.HEBREW, "heb_Hebr", None),
    L.RUSSIAN: ("Russian", "Русский", S.CYRILLIC, "rus_Cyrl", None),
    L.UKRAINIAN: ("Ukrainian", "Українська", S.CYRILLIC, "ukr_Cyrl", None),
    L.BULGARIAN: ("Bulgarian", "Български", S.CYRILLIC, "bul_Cyrl", None),
    L.GREEK: ("Greek", "Ελληνικά", S.GREEK, "ell_Grek", None),
    L.ARMENIAN: ("Armenian", "Հայերեն", S.ARMENIAN, "hye_Armn", None),
    L.GEORGIAN: ("Georgian", "ქართული", S.GEORGIAN, "kat_Geor", None),
    L.AMHARIC: ("Amharic", "አማርኛ", S.ETHIOPIC, "amh_Ethi", None),
    L.THAI: ("Thai", "ไทย", S.THAI, "tha_Thai", None),
    L.LAO: ("Lao", "ລາວ", S.LAO, "lao_Laoo", None),
    L.BURMESE: ("Burmese", "မြန်မာ", S.MYANMAR, "mya_Mymr", None),
    L.KHMER: ("Khmer", "ខ្មែរ", S.KHMER, "khm_Khmr", None),
    L.CHINESE: ("Chinese", "中文", S.HAN, "zho_Hans", None),
    L.JAPANESE: ("Japanese", "日本語", S.JAPANESE, "jpn_Jpan", None),
    L.KOREAN: ("Korean", "한국어", S.HANGUL, "kor_Hang", None),
    L.SPANISH: ("Spanish", "Español", S.LATIN, "spa_Latn", None),
    L.FRENCH: ("French", "Français", S.LATIN, "fra_Latn", None),
    L.GERMAN: ("German", "Deutsch", S.LATIN, "deu_Latn", None),
    L.PORTUGUESE: ("Portuguese", "Português", S.LATIN, "por_Latn", None),
    L.ITALIAN: ("Italian", "Italiano", S.LATIN, "ita_Latn", None),
    L.DUTCH: ("Dutch", "Nederlands", S.LATIN, "nld_Latn", None),
    L.POLISH: ("Polish", "Polski", S.LATIN, "pol_Latn", None),
    L.ROMANIAN: ("Romanian", "Română", S.LATIN, "ron_Latn", None),
    L.TURKISH: ("Turkish", "Türkçe", S.LATIN, "tur_Latn", None),
    L.INDONESIAN: ("Indonesian", "Bahasa Indonesia", S.LATIN, "ind_Latn", None),
    L.MALAY: ("Malay", "Bahasa Melayu", S.LATIN, "zsm_Latn", None),
    L.VIETNAMESE: ("Vietnamese", "Tiếng Việt", S.LATIN, "vie_Latn", None),
    L.TAGALOG: ("Tagalog", "Tagalog", S.LATIN, "tgl_Latn", None),
    L.SWAHILI: ("Swahili", "Kiswahili", S.LATIN, "swh_Latn", None),
    L.HUNGARIAN: ("Hungarian", "Magyar", S.LATIN, "hun_Latn", None),
    L.CZECH: ("Czech", "Čeština", S.LATIN, "ces_Latn", None),
    L.SWEDISH: ("Swedish", "Svenska", S.LATIN, "swe_Latn", None),
}

# Alternate spellings and ISO 639-2/3 codes not derivable from the table
LANGUAGE_ALIASES = {
    "eng": L.ENGLISH, "english (us)": L.ENGLISH, "english (uk)": L.ENGLISH,
    "hin": L.HINDI, "hindustani": L.HINDI, "hindi (india)": L.HINDI,
    "ben": L.BENGALI, "bangla": L.BENGALI,
    "tel": L.TELUGU, "telegu": L.TELUGU,
    "tam": L.TAMIL,
    "kan": L.KANNADA, "kanada": L.KANNADA,
    "mal": L.MALAYALAM,
    "mar": L.MARATHI,
    "guj": L.GUJARATI,
    "pan": L.PUNJABI, "panjabi": L.PUNJABI,
    "ori": L.ODIA, "ory": L.ODIA, "oriya": L.ODIA, "odiya": L.ODIA,
    "asm": L.ASSAMESE,
    "urd": L.URDU,
    "nep": L.NEPALI, "npi": L.NEPALI,
    "sin": L.SINHALA, "sinhalese": L.SINHALA,
    "san": L.SANSKRIT,
    "bhojpuri": L.BHOJPURI,
    "maithili": L.MAITHILI,
    "awadhi": L.AWADHI,
    "magahi": L.MAGAHI, "magadhi": L.MAGAHI,
    "chhattisgarhi": L.CHHATTISGARHI,
    "tulu": L.TULU,
    "gom": L.KONKANI, "konkani": L.KONKANI,
    "ara": L.ARABIC, "arb": L.ARABIC,
    "fas": L.PERSIAN, "per": L.PERSIAN, "pes": L.PERSIAN, "farsi": L.PERSIAN,
    "heb": L.HEBREW, "iw": L.HEBREW,
    "rus": L.RUSSIAN,
    "ukr": L.UKRAINIAN,
    "bul": L.BULGARIAN,
    "ell": L.GREEK, "gre": L.GREEK,
    "hye": L.ARMENIAN, "arm": L.ARMENIAN,
    "kat": L.GEORGIAN, "geo": L.GEORGIAN,
    "amh": L.AMHARIC,
    "tha": L.THAI,
    "lao": L.LAO,
    "mya": L.BURMESE, "bur": L.BURMESE, "myanmar": L.BURMESE,
    "khm": L.KHMER, "cambodian": L.KHMER,
    "zho": L.CHINESE, "chi": L.CHINESE, "mandarin": L.CHINESE, "zh-cn": L.CHINESE, "zh-tw": L.CHINESE,
    "jpn": L.JAPANESE,
    "kor": L.KOREAN,
    "spa": L.SPANISH, "castilian": L.SPANISH,
    "fra": L.FRENCH, "fre": L.FRENCH,
    "deu": L.GERMAN, "ger": L.GERMAN,
    "por": L.PORTUGUESE, "pt-br": L.PORTUGUESE,
    "ita": L.ITALIAN,
    "nld": L.DUTCH, "dut": L.DUTCH, "flemish": L.DUTCH,
    "pol": L.POLISH,
    "ron": L.ROMANIAN, "rum": L.ROMANIAN,
    "tur": L.TURKISH,
    "ind": L.INDONESIAN, "bahasa": L.INDONESIAN,
    "msa": L.MALAY, "may": L.MALAY, "zsm": L.MALAY,
    "vie": L.VIETNAMESE,
    "tgl": L.TAGALOG, "fil": L.TAGALOG, "filipino": L.TAGALOG,
    "swa": L.SWAHILI, "swh": L.SWAHILI, "kiswahili": L.SWAHILI,
    "hun": L.HUNGARIAN,
    "ces": L.CZECH, "cze": L.CZECH,
    "swe": L.SWEDISH,
}
