class SummarizerError(Exception):
    """Base class for every failure the pipeline reports to a user."""

    kind = "error"
    status_code = 500
    default_message = "Failed to process PDF"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ExtractionError(SummarizerError):
    kind = "extraction"
    status_code = 400
    default_message = "Failed to extract text from PDF"


class ProtectedDocumentError(ExtractionError):
    kind = "protected"
    default_message = "Password protected PDFs are not supported"


class EmptyContentError(ExtractionError):
    kind = "empty"
    default_message = "No text could be extracted from the PDF"


class SummarizationError(SummarizerError):
    kind = "summarization"
    status_code = 502
    default_message = "Failed to summarize text"


class SummarizationTimeout(SummarizationError):
    kind = "timeout"
    status_code = 504
    default_message = "Summarization request timed out"


class ConfigurationError(SummarizerError):
    kind = "configuration"
    status_code = 500
    default_message = "Missing configuration"
