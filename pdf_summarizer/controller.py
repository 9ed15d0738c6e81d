import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from .errors import EmptyContentError, ProtectedDocumentError, SummarizerError
from .extractor import TextExtractor

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Failed to process PDF"


class UploadState(str, Enum):
    IDLE = "idle"
    CHECKING = "checking"
    REJECTED = "rejected"
    EXTRACTING = "extracting"
    FAILED = "failed"
    EXTRACTED = "extracted"


@dataclass
class UploadOutcome:
    """Result of one submission: either extracted text or one error."""

    state: UploadState
    text: str | None = None
    error: str | None = None
    exception: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None

    @property
    def error_kind(self) -> str | None:
        if self.exception is None:
            return None
        return getattr(self.exception, "kind", "error")


class UploadController:
    """
    Validates an uploaded PDF and hands its text to the caller.

    Handles a single document at a time: Idle -> Checking -> (Rejected |
    Extracting) -> (Failed | Extracted), then back to Idle.
    """

    def __init__(
        self,
        extractor: TextExtractor | None = None,
        on_text_extracted: Callable[[str], None] | None = None,
    ):
        self.extractor = extractor or TextExtractor()
        self.on_text_extracted = on_text_extracted
        self.state = UploadState.IDLE
        self.last_state = UploadState.IDLE
        self.error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.state in (UploadState.CHECKING, UploadState.EXTRACTING)

    def submit(self, files: Sequence[bytes]) -> UploadOutcome | None:
        """
        Process the first file of a batch. Returns None when the batch is empty.
        """
        if not files:
            return None
        if self.is_loading:
            raise RuntimeError("A document is already being processed")
        if len(files) > 1:
            logger.warning(f"Received {len(files)} files, only the first is processed")

        self.error = None
        try:
            outcome = self._process(files[0])
        except Exception as e:
            message = user_message(e)
            logger.error(f"Failed to process PDF: {message}")
            outcome = UploadOutcome(UploadState.FAILED, error=message, exception=e)

        self.error = outcome.error
        self.last_state = outcome.state
        self.state = UploadState.IDLE
        return outcome

    def _process(self, data: bytes) -> UploadOutcome:
        self.state = UploadState.CHECKING
        if self.extractor.is_protected(data):
            e = ProtectedDocumentError()
            logger.warning(e.message)
            return UploadOutcome(UploadState.REJECTED, error=e.message, exception=e)

        self.state = UploadState.EXTRACTING
        text = self.extractor.extract(data)
        if not text.strip():
            raise EmptyContentError()

        if self.on_text_extracted:
            self.on_text_extracted(text)
        return UploadOutcome(UploadState.EXTRACTED, text=text)


def user_message(error: Exception) -> str:
    """Message shown for a pipeline error."""
    if isinstance(error, SummarizerError):
        return error.message
    return str(error) or GENERIC_ERROR
