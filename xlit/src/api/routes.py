"""API routes for the transliteration engine."""

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
import uvicorn

# Import the pipeline
from xlit.src.main import BidirectionalPipeline

# Import config
from xlit.src.core.config import API_HOST, API_PORT, FALLBACK_BACKEND, MT_ENDPOINT

# Import exceptions
from xlit.src.core.exceptions import UnsupportedLanguageError

# Import services
from xlit.src.services.engine import build_fallback_backend
from xlit.src.services.registry import LanguageRegistry

# Import logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("api")


class TextRequest(BaseModel):
    text: str
    language: str

class DetectRequest(BaseModel):
    text: str
    hint: Optional[str] = None

class CorrectRequest(BaseModel):
    text: str
    language: str
    suggest: bool = False

class ReverseTransliterationRequest(BaseModel):
    text: str
    language: Optional[str] = None

class TranslationRequest(BaseModel):
    text: str
    source_lang: str
    target_lang: str

class MessageRequest(BaseModel):
    text: str
    sender_lang: str
    receiver_lang: str


def create_app(pipeline: Optional[BidirectionalPipeline] = None) -> FastAPI:
    """Create and configure the FastAPI application"""

    if pipeline is None:
        registry = LanguageRegistry()
        fallback = build_fallback_backend(FALLBACK_BACKEND, registry, MT_ENDPOINT)
        pipeline = BidirectionalPipeline(registry=registry, fallback_backend=fallback)
        log.info("Pipeline initialized successfully")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await pipeline.warm_up()
        yield
        pipeline.shutdown()

    app = FastAPI(
        title="xlit Transliteration Service",
        description="Transliteration and pivot translation for bilingual chat",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.pipeline = pipeline

    def lang(value):
        return pipeline.registry.normalize(value, strict=True)

    @app.exception_handler(UnsupportedLanguageError)
    async def unsupported_language(request: Request, exc: UnsupportedLanguageError):
        return JSONResponse(status_code=422, content={"detail": str(exc), "language": exc.value})

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "service": "xlit", "queue": pipeline.queue_stats()}

    @app.get("/languages")
    async def languages():
        return [profile.to_dict() for profile in pipeline.registry.supported()]

    @app.post("/detect")
    async def detect(request: DetectRequest):
        hint = lang(request.hint) if request.hint else None
        return pipeline.detect(request.text, hint).to_dict()

    @app.post("/correct")
    async def correct(request: CorrectRequest):
        language = lang(request.language)
        result = pipeline.correct(request.text, language)
        response = {"corrected_text": result.corrected_text, "corrections": result.corrections}
        if request.suggest:
            response["suggestions"] = {
                word: pipeline.corrector.suggestions(word, language)
                for word in result.corrected_text.split()
            }
        return response

    @app.post("/transliterate")
    async def transliterate(request: TextRequest):
        language = lang(request.language)
        output = pipeline.transliterator.transliterate(request.text, language)
        report = pipeline.transliterator.validate(request.text, output, language)
        return {
            "text": request.text,
            "output": output,
            "language": language.value,
            "valid": report.valid,
            "issues": report.issues,
        }

    @app.post("/reverse-transliterate")
    async def reverse_transliterate(request: ReverseTransliterationRequest):
        language = lang(request.language) if request.language else None
        return {"text": request.text, "output": pipeline.transliterator.reverse_transliterate(request.text, language)}

    @app.post("/translate")
    async def translate_text(request: TranslationRequest):
        """Resolve a translation; the body also carries translated_text for MT-service clients"""
        outcome = pipeline.translator.translate(request.text, lang(request.source_lang), lang(request.target_lang))
        return {**outcome.to_dict(), "translated_text": outcome.text}

    @app.post("/preview")
    async def preview(request: TextRequest):
        return {"preview": pipeline.get_live_preview(request.text, lang(request.language))}

    @app.post("/messages/outgoing")
    async def outgoing(request: MessageRequest):
        message = await pipeline.process_outgoing_message(
            request.text, lang(request.sender_lang), lang(request.receiver_lang)
        )
        return message.to_dict()

    @app.get("/messages/{message_id}")
    async def get_message(message_id: str):
        message = pipeline.get_message(message_id)
        if message is None:
            raise HTTPException(status_code=404, detail=f"Unknown message {message_id}")
        return message.to_dict()

    @app.post("/messages/incoming")
    async def incoming(request: MessageRequest):
        translated = await pipeline.process_incoming_message(
            request.text, lang(request.sender_lang), lang(request.receiver_lang)
        )
        return {"translated_text": translated}

    @app.get("/queue/stats")
    async def queue_stats():
        return {**pipeline.queue_stats(), "metrics": pipeline.queue.metrics()}

    @app.post("/cache/clear")
    async def clear_cache():
        pipeline.clear_caches()
        return {"status": "cleared"}

    @app.get("/state")
    async def state():
        return pipeline.translator_state()

    return app

def main():
    """Main entry point for the xlit service"""

    # Get configuration from environment variables
    host = os.getenv("XLIT_HOST", API_HOST)
    port = int(os.getenv("XLIT_PORT", str(API_PORT)))
    workers = int(os.getenv("XLIT_WORKERS", "1"))
    log_level = os.getenv("XLIT_LOG_LEVEL", "info")

    log.info(f"Starting xlit service on {host}:{port} with {workers} workers")

    uvicorn.run(
        "xlit.src.api.routes:create_app",
        host=host,
        port=port,
        factory=True,
        workers=workers,
        log_level=log_level,
    )

if __name__ == "__main__":
    main()
