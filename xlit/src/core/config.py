"""Configuration for the transliteration engine."""

from __future__ import annotations
import os


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


# Background job queue
MAX_CONCURRENT_JOBS = _env_int("XLIT_MAX_CONCURRENT_JOBS", 3)
JOB_TIMEOUT_S = _env_float("XLIT_JOB_TIMEOUT_S", 30.0)

OUTGOING_JOB_PRIORITY = 10
INCOMING_JOB_PRIORITY = 5

# Cache sizes (entries) and the share dropped per eviction pass
CACHE_SIZES = {
    "detection": _env_int("XLIT_DETECTION_CACHE_SIZE", 5000),
    "correction": _env_int("XLIT_CORRECTION_CACHE_SIZE", 5000),
    "transliteration": _env_int("XLIT_TRANSLITERATION_CACHE_SIZE", 10000),
    "translation": _env_int("XLIT_TRANSLATION_CACHE_SIZE", 5000),
    "preview": _env_int("XLIT_PREVIEW_CACHE_SIZE", 2000),
    "messages": _env_int("XLIT_MESSAGE_CACHE_SIZE", 1000),
}
CACHE_EVICT_FRACTION = 0.2

# Text heuristics
LATIN_RATIO_THRESHOLD = 0.7
MAX_CHAR_RUN = 2
MAX_KEY_LENGTH = 4

# Detection confidences (heuristic, tunable)
DETECTION_CONFIDENCE = {
    "empty": 0.0,
    "script_base": 0.9,
    "script_share_weight": 0.1,
    "phonetic_min": 0.3,
    "phonetic_weak": 0.1,
    "hint_boost": 0.3,
    "english_default": 0.5,
}
PHONETIC_WORD_WEIGHT = 2
PHONETIC_PATTERN_WEIGHT = 1
PHONETIC_SCORE_SCALE = 5.0

# Translation confidences (heuristic, tunable)
TRANSLATION_CONFIDENCE = {
    "passthrough": 1.0,
    "english_phrase": 0.95,
    "reverse_phrase": 0.9,
    "latin_phrase": 0.9,
    "pivot_phrase": 0.85,
    "word_scale": 0.9,
    "idiom_scale": 0.85,
    "reverse_transliteration": 0.7,
    "transliteration": 0.6,
    "literal": 0.5,
    "model": 0.8,
}

CONFIDENCE_THRESHOLDS = {
    "high": 0.85,
    "medium": 0.70,
    "low": 0.50,
}

# Heavy translation backends
NLLB_MODEL_NAME = os.getenv("XLIT_NLLB_MODEL", "facebook/nllb-200-distilled-600M")
NLLB_MAX_LENGTH = _env_int("XLIT_NLLB_MAX_LENGTH", 128)
NLLB_NUM_BEAMS = _env_int("XLIT_NLLB_NUM_BEAMS", 2)
MODEL_LOAD_RETRIES = 3
MODEL_LOAD_RETRY_DELAY_S = 5
DEVICE = os.getenv("XLIT_DEVICE", "cpu")

MT_ENDPOINT = os.getenv("XLIT_MT_ENDPOINT", "http://localhost:8765/translate")
MT_TIMEOUT_S = _env_float("XLIT_MT_TIMEOUT_S", 10.0)

# Service
API_HOST = os.getenv("XLIT_HOST", "0.0.0.0")
API_PORT = _env_int("XLIT_PORT", 8766)
RELAY_PORT = _env_int("XLIT_RELAY_PORT", 8000)
FALLBACK_BACKEND = os.getenv("XLIT_FALLBACK_BACKEND", "none")
