import logging
from contextlib import closing

from fastapi import FastAPI, Form, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse, Response

from .errors import SummarizerError
from .presenter import SummaryPresenter
from .session import SummarySession
from .summarizer import create_summarizer
from .tiers import LengthTier

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="AI PDF Summarizer")


@app.exception_handler(SummarizerError)
async def summarizer_error_handler(request: Request, exc: SummarizerError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.kind},
    )


def parse_length(length: str) -> LengthTier:
    try:
        return LengthTier.parse(length)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def get_summarizer(mode: str):
    try:
        return create_summarizer(mode)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/summarize/{mode}")
def summarize(mode: str, file: UploadFile, length: str = Form("medium")):
    """
    Summarize an uploaded PDF.

    mode picks the hosted model ('online') or the local one ('offline').
    length is one of 'short', 'medium' or 'long' and sets the model's
    max/min output length; anything else is a 400.

    Pipeline failures answer with {"detail": message, "error": kind}:
    400 for unreadable, protected or empty PDFs, 502/504 when the model
    fails or times out, 500 when the API key is missing.
    """
    if not file.filename or not file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are supported.")

    tier = parse_length(length)
    content = file.file.read()

    with closing(get_summarizer(mode)) as summarizer:
        session = SummarySession(summarizer)
        summary = session.run([content], tier)

    if summary is None:
        if isinstance(session.exception, SummarizerError):
            raise session.exception
        raise HTTPException(status_code=500, detail=session.error)

    return JSONResponse({"summary": summary, "length": tier.value})


@app.post("/api/export/{fmt}")
async def export(fmt: str, text: str = Form(...)):
    """
    Download a summary as 'txt' or 'pdf'.
    """
    try:
        artifact = SummaryPresenter(text).download(fmt)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return Response(
        content=artifact.encode(),
        media_type=artifact.media_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


@app.get("/")
async def root():
    return JSONResponse({"message": "POST a PDF to /api/summarize/{mode} to get a summary"})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("pdf_summarizer.main:app", host="127.0.0.1", port=5000, reload=True)
