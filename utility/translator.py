"""
Translation relay.

Builds a single-turn instruction for the text model and returns the
model's first text part verbatim.
"""
from __future__ import annotations

import logging
from typing import Dict, List

from utility.relay_handler import RelayHandler
from utility.envelope import part_text

logger = logging.getLogger(__name__)


# Native script names for source languages that have a well-known one.
NATIVE_SCRIPTS = {"Manipuri": "Meitei Mayek"}


class TranslationHandler(RelayHandler):
    label = "Translation"

    def build_prompt(self, input_text: str, target_language: str) -> str:
        source = self.settings.source_language
        script = NATIVE_SCRIPTS.get(source, f"native {source} script")
        return (
            f"Translate the following {source} text to {target_language}. "
            "Only output the translated text without any prefixes, conversational phrases, "
            "or extra information. "
            f"If the input is Romanized {source}, process it as such. "
            f"If it is written in {script}, process it as {script}.\n"
            f"\n{source} Text: {input_text}"
        )

    def build_payload(self, input_text: str, target_language: str) -> Dict[str, List[Dict]]:
        prompt = self.build_prompt(input_text, target_language)
        return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

    async def translate(self, input_text: str, target_language: str) -> str:
        self._require(inputText=input_text, targetLanguage=target_language)

        payload = self.build_payload(input_text, target_language)
        envelope = await self._generate(self.settings.translate_model, payload)

        text = part_text(envelope)
        if not text.found:
            raise self.shape_error(text.describe(), envelope)

        logger.info("Translated %d chars to %s", len(input_text), target_language)
        return text.value
