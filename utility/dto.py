from typing import Optional

from pydantic import BaseModel


# Request fields are optional so a missing field reaches the handler's own
# check and comes back as 400 {"error": ...}.
class TranslateRequest(BaseModel):
    inputText: Optional[str] = None
    targetLanguage: Optional[str] = None


class TranslateResponse(BaseModel):
    translatedText: str


class SpeechRequest(BaseModel):
    text: Optional[str] = None
    targetLanguage: Optional[str] = None


class SpeechResponse(BaseModel):
    audioData: str  # base64
    mimeType: str  # "audio/..."


class ErrorResponse(BaseModel):
    error: str
