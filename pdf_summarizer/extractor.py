import logging
from dataclasses import dataclass, field

import fitz  # PyMuPDF

from .errors import ExtractionError, ProtectedDocumentError

logger = logging.getLogger(__name__)


@dataclass
class ExtractedDocument:
    text: str
    page_count: int = 0
    metadata: dict = field(default_factory=dict)


class TextExtractor:
    """
    Extract plain text from PDF bytes using PyMuPDF.
    """

    def _open(self, data: bytes) -> fitz.Document:
        if not data:
            raise ExtractionError()
        try:
            return fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            logger.error(f"Error opening PDF: {e}")
            raise ExtractionError() from e

    def is_protected(self, data: bytes) -> bool:
        """
        Report whether the document needs a password before it can be read.
        Unreadable input is not considered protected.
        """
        try:
            doc = self._open(data)
        except ExtractionError:
            return False
        with doc:
            return bool(doc.needs_pass)

    def parse(self, data: bytes) -> ExtractedDocument:
        with self._open(data) as doc:
            if doc.needs_pass:
                raise ProtectedDocumentError()
            try:
                pages = [page.get_text() for page in doc]
            except Exception as e:
                logger.error(f"Error extracting text from PDF: {e}")
                raise ExtractionError() from e
            result = ExtractedDocument(
                text="\n".join(pages),
                page_count=doc.page_count,
                metadata={k: v for k, v in (doc.metadata or {}).items() if v},
            )
        logger.info(f"Extracted {len(result.text)} characters from {result.page_count} pages")
        return result

    def extract(self, data: bytes) -> str:
        """
        Extract text from PDF bytes.
        """
        return self.parse(data).text
