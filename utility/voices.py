from types import MappingProxyType
from typing import Mapping

# Used for every language not listed below, typos and case mismatches included.
DEFAULT_VOICE = "Kore"

# Prebuilt voice names understood by the speech model, keyed by the exact
# language names the client sends.
VOICE_TABLE: Mapping[str, str] = MappingProxyType({
    "English": "Zephyr",
    "Hindi": "Rasalgethi",
    "Bengali": "Sadachbia",
    "Spanish": "Autonoe",
    "French": "Charon",
    "German": "Fenrir",
    "Japanese": "Leda",
    "Korean": "Orus",
    "Italian": "Aoede",
    "Portuguese": "Callirrhoe",
    "Russian": "Enceladus",
    "Dutch": "Iapetus",
    "Polish": "Umbriel",
    "Thai": "Algenib",
    "Turkish": "Rasalgethi",
    "Vietnamese": "Laomedeia",
    "Assamese": "Achernar",
})


def select_voice(language: str) -> str:
    """Exact, case-sensitive lookup; anything unknown gets DEFAULT_VOICE."""
    return VOICE_TABLE.get(language, DEFAULT_VOICE)
