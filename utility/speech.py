from __future__ import annotations

import logging
from typing import Dict

from utility.relay_handler import RelayHandler
from utility.envelope import part_inline_data
from utility.voices import VOICE_TABLE, select_voice

logger = logging.getLogger(__name__)

AUDIO_MIME_PREFIX = "audio/"


class SpeechHandler(RelayHandler):
    """Text-to-speech through the audio model, one prebuilt voice per language."""

    label = "TTS"

    def build_payload(self, text: str, voice_name: str) -> Dict:
        return {
            "contents": [{"parts": [{"text": text}]}],
            "generationConfig": {
                "responseModalities": ["AUDIO"],
                "speechConfig": {
                    "voiceConfig": {
                        "prebuiltVoiceConfig": {"voiceName": voice_name}
                    }
                },
            },
            "model": self.settings.tts_model,
        }

    async def synthesize(self, text: str, target_language: str) -> Dict[str, str]:
        """
        Returns {"audioData": <base64>, "mimeType": "audio/..."} exactly as
        the upstream sent them.
        """
        self._require(text=text, targetLanguage=target_language)

        voice_name = select_voice(target_language)
        if target_language not in VOICE_TABLE:
            logger.debug("No voice mapped for %r, using %s", target_language, voice_name)

        payload = self.build_payload(text, voice_name)
        envelope = await self._generate(self.settings.tts_model, payload)

        inline = part_inline_data(envelope)
        if not inline.found:
            raise self.shape_error(f"no audio data: {inline.describe()}", envelope)

        mime_type = inline.value["mimeType"]
        if not mime_type.startswith(AUDIO_MIME_PREFIX):
            raise self.shape_error(f"non-audio part {mime_type!r}", envelope)

        logger.info("Synthesized %d chars with voice %s (%s)", len(text), voice_name, mime_type)
        return {"audioData": inline.value["data"], "mimeType": mime_type}
