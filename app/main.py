from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from utility.config import Settings
from utility.dto import ErrorResponse, SpeechRequest, SpeechResponse, TranslateRequest, TranslateResponse
from utility.errors import RelayError
from utility.gemini_client import GeminiClient
from utility.logging_setup import setup_logging
from utility.speech import SpeechHandler
from utility.translator import TranslationHandler

logger = logging.getLogger(__name__)

# Absolute path relative to this file
static_path = Path(__file__).parent.parent / "static"

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def create_app(settings: Optional[Settings] = None,
               transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """
    Build the relay app. Settings default to the process environment;
    transport replaces the network for the upstream client (tests).
    """
    settings = settings or Settings.from_env()

    app = FastAPI(title="Manipuri translation relay")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if static_path.is_dir():
        app.mount("/static", StaticFiles(directory=static_path), name="static")

    # Shared, read-only per process
    client = GeminiClient(settings, transport=transport)
    app.state.settings = settings
    app.state.translator = TranslationHandler(settings, client)
    app.state.speech = SpeechHandler(settings, client)

    if not settings.has_api_key:
        logger.warning("GOOGLE_API_KEY is not set; /api/translate and /api/tts will fail")

    # -----------------------------
    # Error mapping
    # -----------------------------
    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected %s body: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Request body must be a JSON object"},
        )

    # -----------------------------
    # HTTP Endpoints
    # -----------------------------
    @app.get("/", response_class=HTMLResponse)
    async def serve_ui():
        html_path = static_path / "index.html"
        with html_path.open("r", encoding="utf-8") as f:
            return f.read()

    @app.post("/api/translate", response_model=TranslateResponse, responses=ERROR_RESPONSES)
    async def translate(req: TranslateRequest):
        translator: TranslationHandler = app.state.translator
        try:
            translated = await translator.translate(req.inputText, req.targetLanguage)
        except RelayError:
            raise
        except Exception as e:
            logger.exception("Translation error")
            raise translator.failed(str(e)) from e
        return TranslateResponse(translatedText=translated)

    @app.post("/api/tts", response_model=SpeechResponse, responses=ERROR_RESPONSES)
    async def tts(req: SpeechRequest):
        speech: SpeechHandler = app.state.speech
        try:
            audio = await speech.synthesize(req.text, req.targetLanguage)
        except RelayError:
            raise
        except Exception as e:
            logger.exception("TTS error")
            raise speech.failed(str(e)) from e
        return SpeechResponse(**audio)

    return app


setup_logging()
app = create_app()


if __name__ == "__main__":
    logger.info("Server running on http://localhost:%d", app.state.settings.port)
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
