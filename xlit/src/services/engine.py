"""Translation backends used by the background job queue."""

from __future__ import annotations
import time
from threading import RLock
from typing import Optional

# Import HTTP client
import requests

# Import config
from ..core.config import (
    DEVICE,
    MODEL_LOAD_RETRIES,
    MODEL_LOAD_RETRY_DELAY_S,
    MT_ENDPOINT,
    MT_TIMEOUT_S,
    NLLB_MAX_LENGTH,
    NLLB_MODEL_NAME,
    NLLB_NUM_BEAMS,
    TRANSLATION_CONFIDENCE,
)

# Import exceptions
from ..core.exceptions import ModelLoadError, TranslationError

# Import schemas
from ..api.schemas import TranslationMethod, TranslationOutcome

# Import services
from .pivot import PivotTranslator
from .registry import LanguageRegistry

# Setup logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("engine")


class NLLBBackend:
    """
    NLLB-200 seq2seq translator.

    The model is loaded on first use, with retries, so constructing the
    backend is cheap. torch and transformers are only imported then.
    """

    def __init__(self, registry: LanguageRegistry,
                 model_name: str = NLLB_MODEL_NAME,
                 device: str = DEVICE,
                 max_length: int = NLLB_MAX_LENGTH,
                 num_beams: int = NLLB_NUM_BEAMS):
        self.registry = registry
        self.model_name = model_name
        self.device = device
        self.max_length = max_length
        self.num_beams = num_beams
        self.model = None
        self.tokenizer = None
        self.lock = RLock()

    def is_ready(self) -> bool:
        return self.model is not None and self.tokenizer is not None

    def load(self) -> None:
        with self.lock:
            if self.is_ready():
                return
            try:
                from transformers import AutoModelForSeq2SeqLM, AutoTokenizer
            except ImportError as e:
                raise ModelLoadError(f"transformers is not installed: {e}") from e

            for attempt in range(MODEL_LOAD_RETRIES):
                try:
                    log.info(f"Loading {self.model_name} on {self.device}... "
                             f"(Attempt {attempt + 1}/{MODEL_LOAD_RETRIES})")
                    self.tokenizer = AutoTokenizer.from_pretrained(self.model_name, src_lang="eng_Latn")
                    self.model = AutoModelForSeq2SeqLM.from_pretrained(self.model_name).to(self.device)
                    self.model.eval()
                    log.info("NLLB model loaded successfully!")
                    return
                except Exception as e:
                    log.error(f"Failed to load NLLB model (Attempt {attempt + 1}/{MODEL_LOAD_RETRIES}): {e}")
                    self.model = None
                    self.tokenizer = None
                    if attempt < MODEL_LOAD_RETRIES - 1:
                        log.info(f"Retrying in {MODEL_LOAD_RETRY_DELAY_S} seconds...")
                        time.sleep(MODEL_LOAD_RETRY_DELAY_S)
            raise ModelLoadError(f"Could not load {self.model_name} after {MODEL_LOAD_RETRIES} attempts")

    def _get_bos_id(self, target_code: str) -> int:
        """Resolve the target language token id across tokenizer versions"""
        mapping = getattr(self.tokenizer, "lang_code_to_id", None)
        if mapping and target_code in mapping:
            return mapping[target_code]
        token_id = self.tokenizer.convert_tokens_to_ids(target_code)
        if token_id is None or token_id == self.tokenizer.unk_token_id:
            raise TranslationError(f"NLLB has no language token for {target_code}")
        return token_id

    def translate(self, text: str, source_code: str, target_code: str) -> str:
        self.load()
        import torch

        src = self.registry.nllb_code(source_code)
        tgt = self.registry.nllb_code(target_code)
        try:
            with self.lock:
                self.tokenizer.src_lang = src
                encoded = self.tokenizer(text, return_tensors="pt").to(self.device)
                with torch.no_grad():
                    generated = self.model.generate(
                        **encoded,
                        forced_bos_token_id=self._get_bos_id(tgt),
                        max_length=self.max_length,
                        num_beams=self.num_beams,
                        early_stopping=True,
                    )
                return self.tokenizer.decode(generated[0], skip_special_tokens=True)
        except TranslationError:
            raise
        except Exception as e:
            log.error(f"NLLB translation error {src}->{tgt}: {e}")
            raise TranslationError(str(e)) from e


class HTTPTranslationBackend:
    """Remote MT service speaking ``{text, source_lang, target_lang} -> {translated_text}``"""

    def __init__(self, endpoint: str = MT_ENDPOINT, timeout: float = MT_TIMEOUT_S,
                 session: Optional[requests.Session] = None):
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()
        self.healthy = True

    def is_ready(self) -> bool:
        return self.healthy

    def translate(self, text: str, source_code: str, target_code: str) -> str:
        payload = {"text": text, "source_lang": source_code, "target_lang": target_code}
        try:
            response = self.session.post(self.endpoint, json=payload, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            self.healthy = False
            log.error(f"MT service error at {self.endpoint}: {e}")
            raise TranslationError(str(e)) from e

        self.healthy = True
        translated = data.get("translated_text") if isinstance(data, dict) else None
        if not translated:
            raise TranslationError(f"MT service returned no translated_text: {data!r}")
        return translated


class DictionaryBackend:
    """Queue backend over the pivot resolver.

    An optional heavier backend is consulted only when the dictionary
    strategies miss. Its failures reject the job.
    """

    def __init__(self, translator: PivotTranslator, fallback=None):
        self.translator = translator
        self.fallback = fallback

    def is_ready(self) -> bool:
        return self.fallback is None or bool(self.fallback.is_ready())

    def load(self) -> None:
        load = getattr(self.fallback, "load", None)
        if load is not None:
            load()

    def translate(self, text: str, source_code: str, target_code: str) -> str:
        outcome = self.translator.resolve(text, source_code, target_code)
        if self.fallback is None or self.translator.is_resolved(outcome):
            return outcome.text

        try:
            translated = self.fallback.translate(text, source_code, target_code)
        except (TranslationError, ModelLoadError) as e:
            log.error(f"Fallback backend failed on {outcome.method.value} miss {source_code}->{target_code}: {e}")
            raise TranslationError(f"fallback backend failed: {e}") from e

        self.translator.remember(text, self.translator.registry.normalize(source_code),
                                 self.translator.registry.normalize(target_code),
                                 TranslationOutcome(
                                     text=translated,
                                     translated=True,
                                     confidence=TRANSLATION_CONFIDENCE["model"],
                                     method=TranslationMethod.MODEL,
                                     direction=outcome.direction,
                                     english_pivot=outcome.english_pivot,
                                 ))
        return translated


def build_fallback_backend(kind: Optional[str], registry: LanguageRegistry, endpoint: Optional[str] = None):
    """Heavy backend by name: "nllb", "http", or "none"/None for dictionary only"""
    kind = (kind or "none").strip().lower()
    if kind == "none":
        return None
    if kind == "nllb":
        return NLLBBackend(registry)
    if kind == "http":
        return HTTPTranslationBackend(endpoint or MT_ENDPOINT)
    raise ValueError(f"Unknown fallback backend: {kind!r}")
