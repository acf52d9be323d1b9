"""Grapheme tables and Unicode blocks for every supported script."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .languages import LanguageId, ScriptFamily

L = LanguageId
S = ScriptFamily


@dataclass(frozen=True)
class ScriptGraphemeTable:
    """Latin phonetic key -> glyph maps for one script.

    ``matras`` is None for alphabets and abjads; there every vowel is written
    with its independent glyph. For abugidas it must hold an entry for every
    vowel key, with "" for the inherent vowel.
    """
    script: ScriptFamily
    vowels: Dict[str, str]
    consonants: Dict[str, str]
    matras: Optional[Dict[str, str]] = None
    virama: str = ""
    digits: Dict[str, str] = field(default_factory=dict)
    punctuation: Dict[str, str] = field(default_factory=dict)
    modifiers: Dict[str, str] = field(default_factory=dict)
    danda: str = ""
    drops_final_schwa: bool = False

    @property
    def is_abugida(self) -> bool:
        return self.matras is not None


def _digits(zero: int) -> Dict[str, str]:
    return {str(d): chr(zero + d) for d in range(10)}


def _modifiers(block_start: int) -> Dict[str, str]:
    """Candrabindu, anusvara, visarga and nukta sit at fixed offsets in Indic blocks"""
    return {
        chr(block_start + 0x01): "n",
        chr(block_start + 0x02): "n",
        chr(block_start + 0x03): "h",
        chr(block_start + 0x3C): "",
    }


# Devanagari

DEVANAGARI = ScriptGraphemeTable(
    script=S.DEVANAGARI,
    vowels={
        'a': 'अ', 'aa': 'आ', 'i': 'इ', 'ee': 'ई', 'ii': 'ई', 'u': 'उ', 'oo': 'ऊ', 'uu': 'ऊ',
        'e': 'ए', 'ai': 'ऐ', 'o': 'ओ', 'au': 'औ', 'ou': 'औ',
    },
    consonants={
        'k': 'क', 'kh': 'ख', 'g': 'ग', 'gh': 'घ', 'ng': 'ङ',
        'ch': 'च', 'chh': 'छ', 'j': 'ज', 'jh': 'झ', 'ny': 'ञ',
        'T': 'ट', 'Th': 'ठ', 'D': 'ड', 'Dh': 'ढ', 'N': 'ण',
        't': 'त', 'th': 'थ', 'd': 'द', 'dh': 'ध', 'n': 'न',
        'p': 'प', 'ph': 'फ', 'f': 'फ़', 'b': 'ब', 'bh': 'भ', 'm': 'म',
        'y': 'य', 'r': 'र', 'l': 'ल', 'v': 'व', 'w': 'व',
        'sh': 'श', 'shh': 'ष', 's': 'स', 'h': 'ह',
        'ksh': 'क्ष', 'tr': 'त्र', 'gy': 'ज्ञ',
        'q': 'क़', 'x': 'क्स', 'z': 'ज़',
    },
    matras={
        'a': '', 'aa': 'ा', 'i': 'ि', 'ee': 'ी', 'ii': 'ी',
        'u': 'ु', 'oo': 'ू', 'uu': 'ू', 'e': 'े', 'ai': 'ै',
        'o': 'ो', 'au': 'ौ', 'ou': 'ौ',
    },
    virama='्',
    digits=_digits(0x0966),
    punctuation={'||': '॥', '|': '।'},
    modifiers=_modifiers(0x0900),
    danda='।',
    drops_final_schwa=True,
)

# Telugu

TELUGU = ScriptGraphemeTable(
    script=S.TELUGU,
    vowels={
        'a': 'అ', 'aa': 'ఆ', 'i': 'ఇ', 'ee': 'ఈ', 'ii': 'ఈ', 'u': 'ఉ', 'oo': 'ఊ', 'uu': 'ఊ',
        'e': 'ఎ', 'ae': 'ఏ', 'ai': 'ఐ', 'o': 'ఒ', 'oe': 'ఓ', 'au': 'ఔ', 'ou': 'ఔ',
    },
    consonants={
        'k': 'క', 'kh': 'ఖ', 'g': 'గ', 'gh': 'ఘ', 'ng': 'ఙ',
        'ch': 'చ', 'chh': 'ఛ', 'j': 'జ', 'jh': 'ఝ', 'ny': 'ఞ',
        'T': 'ట', 'Th': 'ఠ', 'D': 'డ', 'Dh': 'ఢ', 'N': 'ణ',
        't': 'త', 'th': 'థ', 'd': 'ద', 'dh': 'ధ', 'n': 'న',
        'p': 'ప', 'ph': 'ఫ', 'f': 'ఫ', 'b': 'బ', 'bh': 'భ', 'm': 'మ',
        'y': 'య', 'r': 'ర', 'l': 'ల', 'v': 'వ', 'w': 'వ',
        'sh': 'శ', 'shh': 'ష', 's': 'స', 'h': 'హ',
        'L': 'ళ', 'R': 'ఱ',
    },
    matras={
        'a': '', 'aa': 'ా', 'i': 'ి', 'ee': 'ీ', 'ii': 'ీ',
        'u': 'ు', 'oo': 'ూ', 'uu': 'ూ', 'e': 'ె', 'ae': 'ే',
        'ai': 'ై', 'o': 'ొ', 'oe': 'ో', 'au': 'ౌ', 'ou': 'ౌ',
    },
    virama='్',
    digits=_digits(0x0C66),
    modifiers=_modifiers(0x0C00),
)

# Tamil

TAMIL = ScriptGraphemeTable(
    script=S.TAMIL,
    vowels={
        'a': 'அ', 'aa': 'ஆ', 'i': 'இ', 'ee': 'ஈ', 'ii': 'ஈ', 'u': 'உ', 'oo': 'ஊ', 'uu': 'ஊ',
        'e': 'எ', 'ae': 'ஏ', 'ai': 'ஐ', 'o': 'ஒ', 'oe': 'ஓ', 'au': 'ஔ', 'ou': 'ஔ',
    },
    consonants={
        'k': 'க', 'g': 'க', 'ng': 'ங',
        'ch': 'ச', 'j': 'ஜ', 'ny': 'ஞ',
        'T': 'ட', 'D': 'ட', 'N': 'ண',
        't': 'த', 'd': 'த', 'n': 'ந', 'nn': 'ன',
        'p': 'ப', 'b': 'ப', 'm': 'ம',
        'y': 'ய', 'r': 'ர', 'R': 'ற', 'l': 'ல', 'L': 'ள', 'zh': 'ழ',
        'v': 'வ', 'w': 'வ',
        'sh': 'ஷ', 's': 'ச', 'h': 'ஹ',
    },
    matras={
        'a': '', 'aa': 'ா', 'i': 'ி', 'ee': 'ீ', 'ii': 'ீ',
        'u': 'ு', 'oo': 'ூ', 'uu': 'ூ', 'e': 'ெ', 'ae': 'ே',
        'ai': 'ை', 'o': 'ொ', 'oe': 'ோ', 'au': 'ௌ', 'ou': 'ௌ',
    },
    virama='்',
    digits=_digits(0x0BE6),
    modifiers={'ஃ': 'h'},
)

# Kannada

KANNADA = ScriptGraphemeTable(
    script=S.KANNADA,
    vowels={
        'a': 'ಅ', 'aa': 'ಆ', 'i': 'ಇ', 'ee': 'ಈ', 'ii': 'ಈ', 'u': 'ಉ', 'oo': 'ಊ', 'uu': 'ಊ',
        'e': 'ಎ', 'ae': 'ಏ', 'ai': 'ಐ', 'o': 'ಒ', 'oe': 'ಓ', 'au': 'ಔ', 'ou': 'ಔ',
    },
    consonants={
        'k': 'ಕ', 'kh': 'ಖ', 'g': 'ಗ', 'gh': 'ಘ', 'ng': 'ಙ',
        'ch': 'ಚ', 'chh': 'ಛ', 'j': 'ಜ', 'jh': 'ಝ', 'ny': 'ಞ',
        'T': 'ಟ', 'Th': 'ಠ', 'D': 'ಡ', 'Dh': 'ಢ', 'N': 'ಣ',
        't': 'ತ', 'th': 'ಥ', 'd': 'ದ', 'dh': 'ಧ', 'n': 'ನ',
        'p': 'ಪ', 'ph': 'ಫ', 'f': 'ಫ', 'b': 'ಬ', 'bh': 'ಭ', 'm': 'ಮ',
        'y': 'ಯ', 'r': 'ರ', 'l': 'ಲ', 'v': 'ವ', 'w': 'ವ',
        'sh': 'ಶ', 'shh': 'ಷ', 's': 'ಸ', 'h': 'ಹ',
        'L': 'ಳ',
    },
    matras={
        'a': '', 'aa': 'ಾ', 'i': 'ಿ', 'ee': 'ೀ', 'ii': 'ೀ',
        'u': 'ು', 'oo': 'ೂ', 'uu': 'ೂ', 'e': 'ೆ', 'ae': 'ೇ',
        'ai': 'ೈ', 'o': 'ೊ', 'oe': 'ೋ', 'au': 'ೌ', 'ou': 'ೌ',
    },
    virama='್',
    digits=_digits(0x0CE6),
    modifiers=_modifiers(0x0C80),
)

# Malayalam

MALAYALAM = ScriptGraphemeTable(
    script=S.MALAYALAM,
    vowels={
        'a': 'അ', 'aa': 'ആ', 'i': 'ഇ', 'ee': 'ഈ', 'ii': 'ഈ', 'u': 'ഉ', 'oo': 'ഊ', 'uu': 'ഊ',
        'e': 'എ', 'ae': 'ഏ', 'ai': 'ഐ', 'o': 'ഒ', 'oe': 'ഓ', 'au': 'ഔ', 'ou': 'ഔ',
    },
    consonants={
        'k': 'ക', 'kh': 'ഖ', 'g': 'ഗ', 'gh': 'ഘ', 'ng': 'ങ',
        'ch': 'ച', 'chh': 'ഛ', 'j': 'ജ', 'jh': 'ഝ', 'ny': 'ഞ',
        'T': 'ട', 'Th': 'ഠ', 'D': 'ഡ', 'Dh': 'ഢ', 'N': 'ണ',
        't': 'ത', 'th': 'ഥ', 'd': 'ദ', 'dh': 'ധ', 'n': 'ന',
        'p': 'പ', 'ph': 'ഫ', 'f': 'ഫ', 'b': 'ബ', 'bh': 'ഭ', 'm': 'മ',
        'y': 'യ', 'r': 'ര', 'l': 'ല', 'v': 'വ', 'w': 'വ',
        'sh': 'ശ', 'shh': 'ഷ', 's': 'സ', 'h': 'ഹ',
        'L': 'ള', 'zh': 'ഴ', 'R': 'റ',
    },
    matras={
        'a': '', 'aa': 'ാ', 'i': 'ി', 'ee': 'ീ', 'ii': 'ീ',
        'u': 'ു', 'oo': 'ൂ', 'uu': 'ൂ', 'e': 'െ', 'ae': 'േ',
        'ai': 'ൈ', 'o': 'ൊ', 'oe': 'ോ', 'au': 'ൌ', 'ou': 'ൌ',
    },
    virama='്',
    digits=_digits(0x0D66),
    modifiers=_modifiers(0x0D00),
)

# Bengali / Assamese

BENGALI = ScriptGraphemeTable(
    script=S.BENGALI,
    vowels={
        'a': 'অ', 'aa': 'আ', 'i': 'ই', 'ee': 'ঈ', 'ii': 'ঈ', 'u': 'উ', 'oo': 'ঊ', 'uu': 'ঊ',
        'e': 'এ', 'ai': 'ঐ', 'o': 'ও', 'au': 'ঔ', 'ou': 'ঔ',
    },
    consonants={
        'k': 'ক', 'kh': 'খ', 'g': 'গ', 'gh': 'ঘ', 'ng': 'ঙ',
        'ch': 'চ', 'chh': 'ছ', 'j': 'জ', 'jh': 'ঝ', 'ny': 'ঞ',
        'T': 'ট', 'Th': 'ঠ', 'D': 'ড', 'Dh': 'ঢ', 'N': 'ণ',
        't': 'ত', 'th': 'থ', 'd': 'দ', 'dh': 'ধ', 'n': 'ন',
        'p': 'প', 'ph': 'ফ', 'f': 'ফ', 'b': 'ব', 'bh': 'ভ', 'm': 'ম',
        'y': 'য', 'r': 'র', 'l': 'ল', 'v': 'ভ', 'w': 'ব',
        'sh': 'শ', 'shh': 'ষ', 's': 'স', 'h': 'হ',
    },
    matras={
        'a': '', 'aa': 'া', 'i': 'ি', 'ee': 'ী', 'ii': 'ী',
        'u': 'ু', 'oo': 'ূ', 'uu': 'ূ', 'e': 'ে',
        'ai': 'ৈ', 'o': 'ো', 'au': 'ৌ', 'ou': 'ৌ',
    },
    virama='্',
    digits=_digits(0x09E6),
    punctuation={'|': '।'},
    modifiers=_modifiers(0x0980),
    danda='।',
    drops_final_schwa=True,
)

# Gujarati

GUJARATI = ScriptGraphemeTable(
    script=S.GUJARATI,
    vowels={
        'a': 'અ', 'aa': 'આ', 'i': 'ઇ', 'ee': 'ઈ', 'ii': 'ઈ', 'u': 'ઉ', 'oo': 'ઊ', 'uu': 'ઊ',
        'e': 'એ', 'ai': 'ઐ', 'o': 'ઓ', 'au': 'ઔ', 'ou': 'ઔ',
    },
    consonants={
        'k': 'ક', 'kh': 'ખ', 'g': 'ગ', 'gh': 'ઘ', 'ng': 'ઙ',
        'ch': 'ચ', 'chh': 'છ', 'j': 'જ', 'jh': 'ઝ', 'ny': 'ઞ',
        'T': 'ટ', 'Th': 'ઠ', 'D': 'ડ', 'Dh': 'ઢ', 'N': 'ણ',
        't': 'ત', 'th': 'થ', 'd': 'દ', 'dh': 'ધ', 'n': 'ન',
        'p': 'પ', 'ph': 'ફ', 'f': 'ફ', 'b': 'બ', 'bh': 'ભ', 'm': 'મ',
        'y': 'ય', 'r': 'ર', 'l': 'લ', 'v': 'વ', 'w': 'વ',
        'sh': 'શ', 'shh': 'ષ', 's': 'સ', 'h': 'હ',
        'L': 'ળ',
    },
    matras={
        'a': '', 'aa': 'ા', 'i': 'િ', 'ee': 'ી', 'ii': 'ી',
        'u': 'ુ', 'oo': 'ૂ', 'uu': 'ૂ', 'e': 'ે',
        'ai': 'ૈ', 'o': 'ો', 'au': 'ૌ', 'ou': 'ૌ',
    },
    virama='્',
    digits=_digits(0x0AE6),
    modifiers=_modifiers(0x0A80),
    drops_final_schwa=True,
)

# Gurmukhi

GURMUKHI = ScriptGraphemeTable(
    script=S.GURMUKHI,
    vowels={
        'a': 'ਅ', 'aa': 'ਆ', 'i': 'ਇ', 'ee': 'ਈ', 'ii': 'ਈ', 'u': 'ਉ', 'oo': 'ਊ', 'uu': 'ਊ',
        'e': 'ਏ', 'ai': 'ਐ', 'o': 'ਓ', 'au': 'ਔ', 'ou': 'ਔ',
    },
    consonants={
        'k': 'ਕ', 'kh': 'ਖ', 'g': 'ਗ', 'gh': 'ਘ', 'ng': 'ਙ',
        'ch': 'ਚ', 'chh': 'ਛ', 'j': 'ਜ', 'jh': 'ਝ', 'ny': 'ਞ',
        'T': 'ਟ', 'Th': 'ਠ', 'D': 'ਡ', 'Dh': 'ਢ', 'N': 'ਣ',
        't': 'ਤ', 'th': 'ਥ', 'd': 'ਦ', 'dh': 'ਧ', 'n': 'ਨ',
        'p': 'ਪ', 'ph': 'ਫ', 'f': 'ਫ਼', 'b': 'ਬ', 'bh': 'ਭ', 'm': 'ਮ',
        'y': 'ਯ', 'r': 'ਰ', 'l': 'ਲ', 'v': 'ਵ', 'w': 'ਵ',
        'sh': 'ਸ਼', 's': 'ਸ', 'h': 'ਹ',
        'L': 'ਲ਼',
    },
    matras={
        'a': '', 'aa': 'ਾ', 'i': 'ਿ', 'ee': 'ੀ', 'ii': 'ੀ',
        'u': 'ੁ', 'oo': 'ੂ', 'uu': 'ੂ', 'e': 'ੇ',
        'ai': 'ੈ', 'o': 'ੋ', 'au': 'ੌ', 'ou': 'ੌ',
    },
    virama='੍',
    digits=_digits(0x0A66),
    punctuation={'|': '।'},
    modifiers={'ਂ': 'n', 'ੰ': 'n', 'ਃ': 'h', '਼': ''},
    danda='।',
    drops_final_schwa=True,
)

# Odia

ODIA = ScriptGraphemeTable(
    script=S.ODIA,
    vowels={
        'a': 'ଅ', 'aa': 'ଆ', 'i': 'ଇ', 'ee': 'ଈ', 'ii': 'ଈ', 'u': 'ଉ', 'oo': 'ଊ', 'uu': 'ଊ',
        'e': 'ଏ', 'ai': 'ଐ', 'o': 'ଓ', 'au': 'ଔ', 'ou': 'ଔ',
    },
    consonants={
        'k': 'କ', 'kh': 'ଖ', 'g': 'ଗ', 'gh': 'ଘ', 'ng': 'ଙ',
        'ch': 'ଚ', 'chh': 'ଛ', 'j': 'ଜ', 'jh': 'ଝ', 'ny': 'ଞ',
        'T': 'ଟ', 'Th': 'ଠ', 'D': 'ଡ', 'Dh': 'ଢ', 'N': 'ଣ',
        't': 'ତ', 'th': 'ଥ', 'd': 'ଦ', 'dh': 'ଧ', 'n': 'ନ',
        'p': 'ପ', 'ph': 'ଫ', 'f': 'ଫ', 'b': 'ବ', 'bh': 'ଭ', 'm': 'ମ',
        'y': 'ଯ', 'r': 'ର', 'l': 'ଲ', 'v': 'ଵ', 'w': 'ଵ',
        'sh': 'ଶ', 'shh': 'ଷ', 's': 'ସ', 'h': 'ହ',
        'L': 'ଳ',
    },
    matras={
        'a': '', 'aa': 'ା', 'i': 'ି', 'ee': 'ୀ', 'ii': 'ୀ',
        'u': 'ୁ', 'oo': 'ୂ', 'uu': 'ୂ', 'e': 'େ',
        'ai': 'ୈ', 'o': 'ୋ', 'au': 'ୌ', 'ou': 'ୌ',
    },
    virama='୍',
    digits=_digits(0x0B66),
    punctuation={'|': '।'},
    modifiers=_modifiers(0x0B00),
    danda='।',
)

# Sinhala

SINHALA = ScriptGraphemeTable(
    script=S.SINHALA,
    vowels={
        'a': 'අ', 'aa': 'ආ', 'i': 'ඉ', 'ee': 'ඊ', 'ii': 'ඊ', 'u': 'උ', 'oo': 'ඌ', 'uu': 'ඌ',
        'e': 'එ', 'ai': 'ඓ', 'o': 'ඔ', 'au': 'ඖ', 'ou': 'ඖ',
    },
    consonants={
        'k': 'ක', 'kh': 'ඛ', 'g': 'ග', 'gh': 'ඝ', 'ng': 'ඞ',
        'ch': 'ච', 'chh': 'ඡ', 'j': 'ජ', 'jh': 'ඣ', 'ny': 'ඤ',
        'T': 'ට', 'Th': 'ඨ', 'D': 'ඩ', 'Dh': 'ඪ', 'N': 'ණ',
        't': 'ත', 'th': 'ථ', 'd': 'ද', 'dh': 'ධ', 'n': 'න',
        'p': 'ප', 'ph': 'ඵ', 'f': 'ෆ', 'b': 'බ', 'bh': 'භ', 'm': 'ම',
        'y': 'ය', 'r': 'ර', 'l': 'ල', 'v': 'ව', 'w': 'ව',
        'sh': 'ශ', 'shh': 'ෂ', 's': 'ස', 'h': 'හ',
    },
    matras={
        'a': '', 'aa': 'ා', 'i': 'ි', 'ee': 'ී', 'ii': 'ී',
        'u': 'ු', 'oo': 'ූ', 'uu': 'ූ', 'e': 'ෙ',
        'ai': 'ෛ', 'o': 'ො', 'au': 'ෞ', 'ou': 'ෞ',
    },
    virama='්',
    modifiers={'ං': 'n', 'ඃ': 'h'},
)

# Alphabets and abjads (no dependent vowel signs)

ARABIC = ScriptGraphemeTable(
    script=S.ARABIC,
    vowels={
        'a': 'ا', 'aa': 'آ', 'i': 'ی', 'ee': 'ی', 'u': 'و', 'oo': 'و',
        'e': 'ے', 'ai': 'ے', 'o': 'و', 'au': 'و',
    },
    consonants={
        'b': 'ب', 'p': 'پ', 't': 'ت', 'th': 'ث', 's': 'س', 'j': 'ج',
        'ch': 'چ', 'h': 'ح', 'kh': 'خ', 'd': 'د', 'dh': 'ذ', 'r': 'ر',
        'z': 'ز', 'zh': 'ژ', 'sh': 'ش', 'gh': 'غ', 'f': 'ف', 'q': 'ق',
        'k': 'ک', 'g': 'گ', 'l': 'ل', 'm': 'م', 'n': 'ن', 'w': 'و',
        'v': 'و', 'y': 'ی', 'N': 'ں',
    },
    digits=_digits(0x06F0),
    punctuation={'?': '؟', ',': '،'},
)

THAI = ScriptGraphemeTable(
    script=S.THAI,
    vowels={
        'a': 'อ', 'aa': 'า', 'i': 'ิ', 'ee': 'ี', 'u': 'ุ', 'oo': 'ู',
        'e': 'เ', 'ai': 'ไ', 'o': 'โ', 'au': 'เา',
    },
    consonants={
        'k': 'ก', 'kh': 'ข', 'g': 'ค', 'ng': 'ง',
        'ch': 'จ', 'j': 'จ', 's': 'ซ', 'sh': 'ช',
        'd': 'ด', 't': 'ต', 'th': 'ท', 'n': 'น',
        'b': 'บ', 'p': 'ป', 'ph': 'พ', 'f': 'ฟ', 'm': 'ม',
        'y': 'ย', 'r': 'ร', 'l': 'ล', 'w': 'ว', 'h': 'ห',
    },
    digits=_digits(0x0E50),
)

CYRILLIC = ScriptGraphemeTable(
    script=S.CYRILLIC,
    vowels={
        'a': 'а', 'e': 'е', 'yo': 'ё', 'i': 'и', 'o': 'о', 'u': 'у',
        'yu': 'ю', 'ya': 'я',
    },
    consonants={
        'b': 'б', 'v': 'в', 'g': 'г', 'd': 'д', 'zh': 'ж', 'z': 'з',
        'y': 'й', 'k': 'к', 'l': 'л', 'm': 'м', 'n': 'н', 'p': 'п',
        'r': 'р', 's': 'с', 't': 'т', 'f': 'ф', 'kh': 'х', 'h': 'х',
        'ts': 'ц', 'ch': 'ч', 'sh': 'ш', 'shch': 'щ',
    },
)

GREEK = ScriptGraphemeTable(
    script=S.GREEK,
    vowels={
        'a': 'α', 'e': 'ε', 'ee': 'η', 'i': 'ι', 'o': 'ο', 'u': 'υ', 'oo': 'ω',
    },
    consonants={
        'b': 'β', 'g': 'γ', 'd': 'δ', 'z': 'ζ', 'th': 'θ', 'k': 'κ',
        'l': 'λ', 'm': 'μ', 'n': 'ν', 'x': 'ξ', 'p': 'π', 'r': 'ρ',
        's': 'σ', 't': 'τ', 'ph': 'φ', 'f': 'φ', 'ch': 'χ', 'ps': 'ψ',
    },
    punctuation={'?': ';'},
)

HEBREW = ScriptGraphemeTable(
    script=S.HEBREW,
    vowels={'a': 'א', 'e': 'א', 'i': 'י', 'ee': 'י', 'u': 'ו', 'oo': 'ו', 'o': 'ו'},
    consonants={
        'b': 'ב', 'v': 'ב', 'g': 'ג', 'd': 'ד', 'h': 'ה',
        'w': 'ו', 'z': 'ז', 'kh': 'ח', 'ch': 'ח', 't': 'ט', 'y': 'י',
        'k': 'כ', 'l': 'ל', 'm': 'מ', 'n': 'נ', 's': 'ס', 'p': 'פ',
        'f': 'פ', 'ts': 'צ', 'q': 'ק', 'r': 'ר', 'sh': 'ש', 'th': 'ת',
    },
)

SCRIPT_TABLES: Dict[ScriptFamily, ScriptGraphemeTable] = {
    t.script: t for t in (
        DEVANAGARI, TELUGU, TAMIL, KANNADA, MALAYALAM, BENGALI, GUJARATI,
        GURMUKHI, ODIA, SINHALA, ARABIC, THAI, CYRILLIC, GREEK, HEBREW,
    )
}

# (first, last, script, default language). Scanned in this order.
SCRIPT_BLOCKS: List[Tuple[int, int, ScriptFamily, LanguageId]] = [
    (0x0900, 0x097F, S.DEVANAGARI, L.HINDI),
    (0x0980, 0x09FF, S.BENGALI, L.BENGALI),
    (0x0A00, 0x0A7F, S.GURMUKHI, L.PUNJABI),
    (0x0A80, 0x0AFF, S.GUJARATI, L.GUJARATI),
    (0x0B00, 0x0B7F, S.ODIA, L.ODIA),
    (0x0B80, 0x0BFF, S.TAMIL, L.TAMIL),
    (0x0C00, 0x0C7F, S.TELUGU, L.TELUGU),
    (0x0C80, 0x0CFF, S.KANNADA, L.KANNADA),
    (0x0D00, 0x0D7F, S.MALAYALAM, L.MALAYALAM),
    (0x0D80, 0x0DFF, S.SINHALA, L.SINHALA),
    (0x0E00, 0x0E7F, S.THAI, L.THAI),
    (0x0E80, 0x0EFF, S.LAO, L.LAO),
    (0x1000, 0x109F, S.MYANMAR, L.BURMESE),
    (0x1780, 0x17FF, S.KHMER, L.KHMER),
    (0x3040, 0x30FF, S.JAPANESE, L.JAPANESE),
    (0xAC00, 0xD7AF, S.HANGUL, L.KOREAN),
    (0x4E00, 0x9FFF, S.HAN, L.CHINESE),
    (0x0600, 0x06FF, S.ARABIC, L.ARABIC),
    (0x0590, 0x05FF, S.HEBREW, L.HEBREW),
    (0x0400, 0x04FF, S.CYRILLIC, L.RUSSIAN),
    (0x0370, 0x03FF, S.GREEK, L.GREEK),
    (0x0530, 0x058F, S.ARMENIAN, L.ARMENIAN),
    (0x10A0, 0x10FF, S.GEORGIAN, L.GEORGIAN),
    (0x1200, 0x137F, S.ETHIOPIC, L.AMHARIC),
]

# Latin letters including Latin-1 Supplement and Extended-A/B
LATIN_RANGE = (0x0041, 0x024F)

ZERO_WIDTH = {'‌', '‍'}


def block_of(ch: str) -> Optional[Tuple[ScriptFamily, LanguageId]]:
    """Script block a single character belongs to, if any"""
    cp = ord(ch)
    for first, last, script, lang in SCRIPT_BLOCKS:
        if first <= cp <= last:
            return script, lang
    return None
