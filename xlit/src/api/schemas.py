"""Data schemas for the transliteration engine."""

from __future__ import annotations
import asyncio
import time
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from ..core.languages import LanguageId, ScriptFamily


class TranslationStatus(str, Enum):
    NOT_NEEDED = "not_needed"
    PENDING = "pending"
    COMPLETE = "complete"
    FAILED = "failed"


class TranslationDirection(str, Enum):
    SAME_LANGUAGE = "same_language"
    ENGLISH_SOURCE = "english_source"
    ENGLISH_TARGET = "english_target"
    LATIN_TO_LATIN = "latin_to_latin"
    PIVOT = "pivot"


class TranslationMethod(str, Enum):
    PASSTHROUGH = "passthrough"
    PHRASE = "phrase"
    WORD = "word"
    TRANSLITERATION = "transliteration"
    REVERSE_TRANSLITERATION = "reverse_transliteration"
    LITERAL = "literal"
    IDIOM = "idiom"
    MODEL = "model"
    CACHED = "cached"


class PartOfSpeech(str, Enum):
    NOUN = "noun"
    PRONOUN = "pronoun"
    VERB = "verb"
    AUXILIARY = "auxiliary"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    DETERMINER = "determiner"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    OTHER = "other"


@dataclass(frozen=True)
class LanguageProfile:
    """Registry record for one supported language"""
    id: LanguageId
    name: str
    native_name: str
    script: ScriptFamily
    rtl: bool
    nllb_code: str
    fallback: Optional[LanguageId] = None

    @property
    def is_latin(self) -> bool:
        return self.script == ScriptFamily.LATIN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id.value,
            "name": self.name,
            "native_name": self.native_name,
            "script": self.script.value,
            "rtl": self.rtl,
            "is_latin": self.is_latin,
            "nllb_code": self.nllb_code,
            "fallback": self.fallback.value if self.fallback else None,
        }


@dataclass
class DetectionResult:
    """Detected script and language of a piece of text"""
    script: ScriptFamily
    language: LanguageId
    is_latin: bool
    confidence: float
    is_phonetic: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "script": self.script.value,
            "language": self.language.value,
            "is_latin": self.is_latin,
            "confidence": self.confidence,
            "is_phonetic": self.is_phonetic,
        }


@dataclass
class CorrectionResult:
    corrected_text: str
    corrections: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DictionaryEntry:
    """One canonical English phrase and its renderings per language"""
    english: str
    translations: Dict[LanguageId, str] = field(default_factory=dict)
    phonetic: Dict[LanguageId, List[str]] = field(default_factory=dict)


@dataclass
class WordUnit:
    """One slot of a word-level translation: rendered text plus the English it stands for"""
    text: str
    english: str
    pos: PartOfSpeech
    translated: bool = False


@dataclass
class TranslationOutcome:
    """Result of one pivot translation"""
    text: str
    translated: bool
    confidence: float
    method: TranslationMethod
    direction: TranslationDirection
    english_pivot: Optional[str] = None
    idioms: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "translated": self.translated,
            "confidence": self.confidence,
            "method": self.method.value,
            "direction": self.direction.value,
            "english_pivot": self.english_pivot,
            "idioms": list(self.idioms),
        }


@dataclass
class TranslationJob:
    """Unit of background work; lives only inside the job queue"""
    id: str
    text: str
    source: LanguageId
    target: LanguageId
    priority: int
    future: "asyncio.Future[str]"
    seq: int = 0
    enqueued_at: float = field(default_factory=time.time)


@dataclass
class ValidationReport:
    valid: bool
    issues: List[str] = field(default_factory=list)


@dataclass
class BiDirectionalMessage:
    """One chat message with both participants' views"""
    id: str
    timestamp: float
    original_input: str
    detection: DetectionResult
    sender_language: LanguageId
    sender_native_text: str
    receiver_language: LanguageId
    receiver_native_text: Optional[str] = None
    status: TranslationStatus = TranslationStatus.PENDING
    corrections: List[str] = field(default_factory=list)
    translation: Optional[TranslationOutcome] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["detection"] = self.detection.to_dict()
        data["sender_language"] = self.sender_language.value
        data["receiver_language"] = self.receiver_language.value
        data["status"] = self.status.value
        data["translation"] = self.translation.to_dict() if self.translation else None
        return data


MessageCallback = Callable[[BiDirectionalMessage], Union[None, Awaitable[None]]]
ErrorCallback = Callable[[BiDirectionalMessage, Exception], Union[None, Awaitable[None]]]


@dataclass
class TranslationCallbacks:
    """Optional hooks fired as the two views of a message become ready"""
    on_sender_view_ready: Optional[MessageCallback] = None
    on_receiver_view_ready: Optional[MessageCallback] = None
    on_translation_error: Optional[ErrorCallback] = None
