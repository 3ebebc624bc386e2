import pytest


def audio_envelope(data="QUJD", mime_type="audio/wav"):
    return {"candidates": [{"content": {"parts": [{"inlineData": {"data": data, "mimeType": mime_type}}]}}]}


def test_tts_returns_audio_unchanged(client, upstream):
    upstream.reply_json(audio_envelope())

    response = client.post("/api/tts", json={"text": "Hello", "targetLanguage": "English"})

    assert response.status_code == 200
    assert response.json() == {"audioData": "QUJD", "mimeType": "audio/wav"}
    assert upstream.calls == 1


def test_tts_passes_through_mime_parameters(client, upstream):
    upstream.reply_json(audio_envelope(mime_type="audio/L16;codec=pcm;rate=24000"))

    response = client.post("/api/tts", json={"text": "Hello", "targetLanguage": "English"})

    assert response.json()["mimeType"] == "audio/L16;codec=pcm;rate=24000"


@pytest.mark.parametrize("language, voice", [
    ("Japanese", "Leda"),
    ("Assamese", "Achernar"),
    ("Manipuri", "Kore"),
    ("japanese", "Kore"),
])
def test_tts_payload_requests_audio_with_voice(client, upstream, language, voice):
    upstream.reply_json(audio_envelope())

    client.post("/api/tts", json={"text": "Konnichiwa", "targetLanguage": language})

    assert upstream.requests[0].url.path.endswith("/models/gemini-2.5-flash-preview-tts:generateContent")
    payload = upstream.last_payload()
    assert payload["contents"] == [{"parts": [{"text": "Konnichiwa"}]}]
    config = payload["generationConfig"]
    assert config["responseModalities"] == ["AUDIO"]
    assert config["speechConfig"]["voiceConfig"]["prebuiltVoiceConfig"]["voiceName"] == voice
    assert payload["model"] == "gemini-2.5-flash-preview-tts"


@pytest.mark.parametrize("body", [
    {},
    {"text": "Hello"},
    {"targetLanguage": "English"},
    {"text": "", "targetLanguage": "English"},
])
def test_missing_fields_are_rejected_without_upstream_call(client, upstream, body):
    response = client.post("/api/tts", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields: text and targetLanguage"
    assert upstream.calls == 0


def test_non_audio_part_is_shape_error(client, upstream):
    upstream.reply_json(audio_envelope(data="SGVsbG8=", mime_type="text/plain"))

    response = client.post("/api/tts", json={"text": "Hello", "targetLanguage": "English"})

    assert response.status_code == 500
    assert response.json() == {"error": "Unexpected TTS API response structure"}


def test_text_refusal_is_shape_error(client, upstream):
    upstream.reply_json({"candidates": [{"content": {"parts": [{"text": "I can't read that aloud."}]}}]})

    response = client.post("/api/tts", json={"text": "Hello", "targetLanguage": "English"})

    assert response.status_code == 500
    assert response.json() == {"error": "Unexpected TTS API response structure"}


def test_upstream_http_error(client, upstream):
    upstream.reply_text("model overloaded", status_code=500)

    response = client.post("/api/tts", json={"text": "Hello", "targetLanguage": "English"})

    assert response.status_code == 500
    assert response.json() == {"error": "TTS service error: 500"}


def test_no_credential(unconfigured_client, upstream):
    response = unconfigured_client.post("/api/tts", json={"text": "Hello", "targetLanguage": "English"})

    assert response.status_code == 500
    assert response.json() == {"error": "API key not configured"}
    assert upstream.calls == 0
