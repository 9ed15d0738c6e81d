"""
Tests for the local summarization pipeline
"""
from unittest.mock import Mock, patch

import pytest

from pdf_summarizer import offline
from pdf_summarizer.errors import SummarizationError
from pdf_summarizer.offline import OfflineSummarizer, get_offline_summarizer
from pdf_summarizer.tiers import LengthTier


@pytest.fixture(autouse=True)
def clear_pipelines():
    offline._pipelines.clear()
    yield
    offline._pipelines.clear()


class TestOfflineSummarizer:
    """Test cases for OfflineSummarizer"""

    def test_pipeline_loaded_once_on_cpu(self):
        with patch("pdf_summarizer.offline.pipeline") as mock_pipeline, \
             patch("pdf_summarizer.offline.torch.cuda.is_available", return_value=False):
            first = get_offline_summarizer()
            second = get_offline_summarizer()

        assert first is second
        mock_pipeline.assert_called_once_with("summarization", model="facebook/bart-large-cnn", device=-1)

    def test_summarize_passes_tier_bounds(self):
        fake = Mock(return_value=[{"summary_text": "Local summary."}])
        with patch("pdf_summarizer.offline.get_offline_summarizer", return_value=fake):
            result = OfflineSummarizer().summarize("Some long text", LengthTier.LONG)

        assert result == "Local summary."
        fake.assert_called_once_with(
            "Some long text", max_length=400, min_length=240, do_sample=False, truncation=True
        )

    def test_pipeline_failure_becomes_summarization_error(self):
        fake = Mock(side_effect=RuntimeError("CUDA out of memory"))
        with patch("pdf_summarizer.offline.get_offline_summarizer", return_value=fake):
            with pytest.raises(SummarizationError) as exc_info:
                OfflineSummarizer().summarize("text", LengthTier.SHORT)
        assert "CUDA out of memory" in str(exc_info.value)
