from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_PORT = 3000
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TRANSLATE_MODEL = "gemini-2.5-flash-preview-05-20"
DEFAULT_TTS_MODEL = "gemini-2.5-flash-preview-tts"
DEFAULT_SOURCE_LANGUAGE = "Manipuri"


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, built once at startup and handed to handlers.
    A missing api_key is allowed; requests that need it fail on their own.
    """
    api_key: Optional[str] = None
    port: int = DEFAULT_PORT
    api_base: str = DEFAULT_API_BASE
    translate_model: str = DEFAULT_TRANSLATE_MODEL
    tts_model: str = DEFAULT_TTS_MODEL
    source_language: str = DEFAULT_SOURCE_LANGUAGE
    upstream_timeout: Optional[float] = None

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "Settings":
        # Load variables from .env into the environment
        if load_dotenv_file:
            load_dotenv()

        port_raw = os.getenv("PORT")
        timeout_raw = os.getenv("UPSTREAM_TIMEOUT")

        return cls(
            api_key=os.getenv("GOOGLE_API_KEY") or None,
            port=int(port_raw) if port_raw else DEFAULT_PORT,
            api_base=(os.getenv("GEMINI_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
            translate_model=os.getenv("TRANSLATE_MODEL") or DEFAULT_TRANSLATE_MODEL,
            tts_model=os.getenv("TTS_MODEL") or DEFAULT_TTS_MODEL,
            source_language=os.getenv("SOURCE_LANGUAGE") or DEFAULT_SOURCE_LANGUAGE,
            upstream_timeout=float(timeout_raw) if timeout_raw else None,
        )
