"""
Interview Question Generator API — Main Application
FastAPI application: resume text extraction, LLM question generation, export.
"""

from dotenv import load_dotenv
load_dotenv()

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .routers import documents, export, questions
from .routers.common import error_response

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
INVALID_BODY_MESSAGE = "Invalid request body"

# Use Python's standard logger so output appears in the uvicorn console
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s  %(levelname)s  %(message)s")
log = logging.getLogger(__name__)


app = FastAPI(
    title="Interview Question Generator API",
    description="Resume text extraction, tailored interview question generation, and PDF/text export",
    version=__version__,
)

# Malformed or mistyped bodies answer with {"error": ...} like every other failure
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    log.warning("Invalid request body path=%s errors=%s", request.url.path, exc.errors())
    return error_response(INVALID_BODY_MESSAGE, 400)


# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ─── Routers ───────────────────────────────────────────────────────────────────

app.include_router(documents.router)    # /api/extract-text
app.include_router(questions.router)    # /api/generate-questions
app.include_router(export.router)       # /api/export/*


@app.get("/")
def root():
    return {
        "name": "Interview Question Generator API",
        "version": __version__,
        "endpoints": {
            "docs": "/docs",
            "extract_text": "/api/extract-text",
            "generate_questions": "/api/generate-questions",
            "export_pdf": "/api/export/pdf",
            "export_text": "/api/export/text",
        },
    }


@app.get("/health")
def health_check():
    return {"status": "healthy", "service": "interview-question-generator"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
