import logging
from dataclasses import dataclass
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

HTML_TEMPLATE = """
<html>
  <head>
    <style>
      body {{ font-family: Arial, sans-serif; margin: 40px; }}
      h1 {{ color: #333; }}
      p {{ line-height: 1.6; }}
    </style>
  </head>
  <body>
    <h1>PDF Summary</h1>
    <p>{body}</p>
  </body>
</html>
"""


class Clipboard(Protocol):
    def write_text(self, text: str) -> None: ...


class SpeechEngine(Protocol):
    def speak(self, text: str, on_end: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


@dataclass
class CopyResult:
    ok: bool
    error: str | None = None


@dataclass
class ExportArtifact:
    filename: str
    media_type: str
    content: str

    def encode(self) -> bytes:
        return self.content.encode("utf-8")


def render_html(text: str) -> str:
    return HTML_TEMPLATE.format(body=text.replace("\n", "<br>"))


class SummaryPresenter:
    """
    Holds the summary currently shown to the user, with edit, export,
    clipboard and speech actions. Edits replace the text used by every
    later action.
    """

    def __init__(
        self,
        summary: str = "",
        on_save: Callable[[str], None] | None = None,
        clipboard: Clipboard | None = None,
        speech: SpeechEngine | None = None,
    ):
        self.current_text = summary
        self.on_save = on_save
        self.clipboard = clipboard
        self.speech = speech
        self.is_editing = False
        self.is_speaking = False
        self._utterance = 0

    def load(self, summary: str) -> None:
        """Show a new summary. Unsaved edits are dropped."""
        self.current_text = summary

    def edit(self, text: str) -> None:
        self.current_text = text

    def toggle_edit(self) -> None:
        self.is_editing = not self.is_editing

    def save(self) -> None:
        self.is_editing = False
        if self.on_save:
            self.on_save(self.current_text)

    def copy(self) -> CopyResult:
        if self.clipboard is None:
            logger.warning("Failed to copy text: no clipboard available")
            return CopyResult(ok=False, error="Clipboard unavailable")
        try:
            self.clipboard.write_text(self.current_text)
        except Exception as e:
            logger.warning(f"Failed to copy text: {e}")
            return CopyResult(ok=False, error=str(e))
        return CopyResult(ok=True)

    def download(self, fmt: str) -> ExportArtifact:
        if fmt == "txt":
            return ExportArtifact("summary.txt", "text/plain", self.current_text)
        if fmt == "pdf":
            # HTML content under a .pdf name, kept for compatibility with existing downloads
            return ExportArtifact("summary.pdf", "text/html", render_html(self.current_text))
        raise ValueError(f"Unsupported export format '{fmt}'. Choose 'txt' or 'pdf'.")

    def toggle_speech(self) -> None:
        if self.speech is None:
            return

        if self.is_speaking:
            self._utterance += 1
            self.speech.cancel()
            self.is_speaking = False
            return

        self._utterance += 1
        utterance = self._utterance

        def on_end():
            # ignore the end of an utterance that was cancelled or replaced
            if utterance == self._utterance:
                self.is_speaking = False

        self.is_speaking = True
        try:
            self.speech.speak(self.current_text, on_end)
        except Exception:
            self.is_speaking = False
            raise
