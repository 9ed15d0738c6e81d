import logging

import torch
from transformers import pipeline

from . import config
from .errors import SummarizationError
from .tiers import LengthTier

logger = logging.getLogger(__name__)

_pipelines = {}


def get_offline_summarizer(model: str = config.MODEL_NAME):
    """
    Load the local summarization pipeline once per process.
    """
    if model not in _pipelines:
        device = 0 if torch.cuda.is_available() else -1
        logger.info(f"Loading {model} on {'GPU' if device == 0 else 'CPU'}")
        _pipelines[model] = pipeline("summarization", model=model, device=device)
    return _pipelines[model]


class OfflineSummarizer:
    """Runs the summarization model in-process instead of calling the API."""

    def __init__(self, model: str = config.MODEL_NAME):
        self.model = model

    def summarize(self, text: str, tier: LengthTier) -> str:
        try:
            summarizer = get_offline_summarizer(self.model)
            out = summarizer(
                text,
                max_length=tier.max_length,
                min_length=tier.min_length,
                do_sample=False,
                truncation=True,
            )
        except Exception as e:
            logger.error(f"Local summarization failed: {e}")
            raise SummarizationError(str(e) or None) from e
        return out[0]["summary_text"]

    def close(self) -> None:
        # pipeline stays cached for the next request
        pass
