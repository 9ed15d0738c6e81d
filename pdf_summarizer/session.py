import logging
from typing import Sequence

from .controller import UploadController, user_message
from .presenter import SummaryPresenter
from .summarizer import Summarizer
from .tiers import LengthTier

logger = logging.getLogger(__name__)


class SummarySession:
    """
    One user's upload -> extract -> summarize -> present flow.

    Owns the controller, the summarizer and the presenter so that none of
    them share state with another session.
    """

    def __init__(
        self,
        summarizer: Summarizer,
        controller: UploadController | None = None,
        presenter: SummaryPresenter | None = None,
    ):
        self.summarizer = summarizer
        self.controller = controller or UploadController()
        self.presenter = presenter or SummaryPresenter()
        self.summary: str | None = None
        self.error: str | None = None
        self.error_kind: str | None = None
        self.exception: Exception | None = None

    def _fail(self, error: Exception) -> None:
        self.exception = error
        self.error = user_message(error)
        self.error_kind = getattr(error, "kind", "error")

    def run(self, files: Sequence[bytes], tier: LengthTier) -> str | None:
        """
        Summarize the first PDF in files. Returns the summary, or None with
        error set when any step fails.
        """
        self.error = self.error_kind = self.exception = None

        outcome = self.controller.submit(files)
        if outcome is None:
            return None
        if not outcome.ok:
            self._fail(outcome.exception)
            return None

        try:
            summary = self.summarizer.summarize(outcome.text, tier)
        except Exception as e:
            logger.error(f"Summarization failed: {e}")
            self._fail(e)
            return None

        self.summary = summary
        self.presenter.load(summary)
        return summary
