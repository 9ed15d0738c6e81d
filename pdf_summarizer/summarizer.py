import logging
from typing import Protocol

import httpx

from . import config
from .errors import ConfigurationError, SummarizationError, SummarizationTimeout
from .tiers import LengthTier

logger = logging.getLogger(__name__)


class Summarizer(Protocol):
    def summarize(self, text: str, tier: LengthTier) -> str: ...

    def close(self) -> None: ...

def build_payload(text: str, tier: LengthTier) -> dict:
    return {
        "inputs": text,
        "parameters": {
            "max_length": tier.max_length,
            "min_length": tier.min_length,
        },
    }


class HuggingFaceSummarizer:
    """
    Thin client for the hosted summarization model. One request per call,
    no retries.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = config.MODEL_NAME,
        timeout: float = config.REQUEST_TIMEOUT,
        http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key or config.get_api_key()
        if not self.api_key:
            raise ConfigurationError(
                f"{config.API_KEY_ENV} is not set. Add it to the environment or a .env file."
            )
        self.model = model
        self.url = f"{config.INFERENCE_URL}/{model}"
        self._owns_client = http_client is None
        self.client = http_client or httpx.Client(timeout=timeout)

    def summarize(self, text: str, tier: LengthTier) -> str:
        payload = build_payload(text, tier)
        logger.info(
            f"Requesting {tier.value} summary from {self.model} "
            f"(max_length={tier.max_length}, min_length={tier.min_length})"
        )
        try:
            response = self.client.post(
                self.url,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json=payload,
            )
        except httpx.TimeoutException as e:
            logger.error(f"Summarization request timed out: {e}")
            raise SummarizationTimeout() from e
        except httpx.HTTPError as e:
            logger.error(f"Summarization request failed: {e}")
            raise SummarizationError(str(e) or None) from e

        if response.status_code != 200:
            message = _error_message(response)
            logger.error(f"Inference API returned {response.status_code}: {message}")
            raise SummarizationError(message)

        return _summary_text(response)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        error = body["error"]
        return error if isinstance(error, str) else str(error)
    return response.text or f"Inference API returned status {response.status_code}"


def _summary_text(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError as e:
        raise SummarizationError("Inference API returned invalid JSON") from e
    if isinstance(body, list) and body:
        body = body[0]
    if not isinstance(body, dict) or "summary_text" not in body:
        raise SummarizationError("Inference API response has no summary_text")
    return body["summary_text"]


def create_summarizer(mode: str) -> Summarizer:
    """
    Pick the summarizer backend: 'online' uses the hosted model,
    'offline' runs it locally.
    """
    if mode == "online":
        return HuggingFaceSummarizer()
    if mode == "offline":
        from .offline import OfflineSummarizer

        return OfflineSummarizer()
    raise ValueError("Invalid mode. Choose 'online' or 'offline'.")
