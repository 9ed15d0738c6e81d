"""
Pytest configuration and fixtures
"""
import fitz
import pytest


def make_pdf(*pages: str, user_pw: str | None = None) -> bytes:
    """Build an in-memory PDF with one page per string."""
    doc = fitz.open()
    for text in pages or ("",):
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    if user_pw:
        data = doc.tobytes(
            encryption=fitz.PDF_ENCRYPT_AES_256,
            owner_pw="owner-secret",
            user_pw=user_pw,
        )
    else:
        data = doc.tobytes()
    doc.close()
    return data


class FakeSummarizer:
    """Records calls and returns a canned summary."""

    def __init__(self, summary: str = "Hello.", error: Exception | None = None):
        self.summary = summary
        self.error = error
        self.calls = []
        self.closed = False

    def summarize(self, text, tier):
        self.calls.append((text, tier))
        if self.error:
            raise self.error
        return self.summary

    def close(self):
        self.closed = True


@pytest.fixture
def hello_pdf():
    return make_pdf("Hello world")


@pytest.fixture
def blank_pdf():
    return make_pdf("")


@pytest.fixture
def protected_pdf():
    return make_pdf("Top secret", user_pw="secret")


@pytest.fixture
def fake_summarizer():
    return FakeSummarizer()


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    monkeypatch.delenv("HUGGINGFACE_API_KEY", raising=False)
