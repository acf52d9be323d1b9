"""Custom exceptions for the transliteration engine."""

class XlitError(Exception):
    """Base exception for engine errors."""
    pass

class UnsupportedLanguageError(XlitError):
    """Raised when a language cannot be normalized on a strict path."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported language: {value!r}")

class ModelLoadError(XlitError):
    """Raised when a translation model fails to load."""
    pass

class TranslationError(XlitError):
    """Raised by a translation backend on any internal fault."""
    pass

class TranslationFailedError(TranslationError):
    """Raised when a queued translation job fails or times out."""

    def __init__(self, job_id: str, reason: str):
        self.job_id = job_id
        self.reason = reason
        super().__init__(f"Translation job {job_id} failed: {reason}")

class JobCancelledError(XlitError):
    """Raised when a queued job is cancelled before dispatch."""

    def __init__(self, job_id: str):
        self.job_id = job_id
        super().__init__(f"Translation job {job_id} cancelled")
