"""Occasion defaults and normalization for inferred music styles.

The LLM call itself happens in the inference collaborator; this module only
turns its raw reply into a bounded ``MusicStyleInference`` and supplies the
fallback used for "surprise" mode or when the reply is unusable.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from songsmith.models.song_request import MusicStyleInference

log = logging.getLogger(__name__)

MAX_GENRES = 3
MAX_INSTRUMENTS = 4
MAX_KEYWORDS = 5
TEMPO_HINTS = ("slow", "medium", "upbeat")

# (occasion keywords, style) checked in order; first match wins
OCCASION_STYLES: list[tuple[tuple[str, ...], dict[str, Any]]] = [
    (
        ("birthday",),
        {
            "genres": ["Pop", "R&B/Soul"],
            "mood": "celebratory",
            "suggested_instruments": ["Piano", "Drums", "Bass", "Synthesizer"],
            "tempo_hint": "upbeat",
            "style_keywords": ["upbeat", "joyful", "celebratory", "feel-good"],
        },
    ),
    (
        ("wedding", "anniversary"),
        {
            "genres": ["Pop", "R&B/Soul"],
            "mood": "romantic",
            "suggested_instruments": ["Piano", "Strings", "Acoustic Guitar"],
            "tempo_hint": "slow",
            "style_keywords": ["romantic", "heartfelt", "intimate", "timeless"],
        },
    ),
    (
        ("retirement", "farewell"),
        {
            "genres": ["Folk/Acoustic", "Rock"],
            "mood": "nostalgic",
            "suggested_instruments": ["Acoustic Guitar", "Piano", "Harmonica"],
            "tempo_hint": "medium",
            "style_keywords": ["reflective", "nostalgic", "warm", "sincere"],
        },
    ),
    (
        ("graduation",),
        {
            "genres": ["Pop", "Indie"],
            "mood": "hopeful",
            "suggested_instruments": ["Piano", "Drums", "Electric Guitar"],
            "tempo_hint": "upbeat",
            "style_keywords": ["uplifting", "inspiring", "hopeful", "energetic"],
        },
    ),
    (
        ("memorial", "tribute", "remembrance"),
        {
            "genres": ["Folk/Acoustic", "Classical"],
            "mood": "tender",
            "suggested_instruments": ["Piano", "Strings", "Acoustic Guitar"],
            "tempo_hint": "slow",
            "style_keywords": ["gentle", "tender", "emotional", "reverent"],
        },
    ),
]

GENERIC_STYLE: dict[str, Any] = {
    "genres": ["Pop", "Folk/Acoustic"],
    "mood": "heartfelt",
    "suggested_instruments": ["Piano", "Acoustic Guitar", "Strings"],
    "tempo_hint": "medium",
    "style_keywords": ["warm", "personal", "heartfelt", "sincere"],
}

_CODE_FENCE = re.compile(r"```(?:json)?\n?")


def default_style(occasion: str | None = None) -> MusicStyleInference:
    """Pick a sensible style for the occasion by keyword, or the generic default."""
    occasion_lower = (occasion or "").lower()
    for keywords, style in OCCASION_STYLES:
        if any(keyword in occasion_lower for keyword in keywords):
            return MusicStyleInference(**style)
    return MusicStyleInference(**GENERIC_STYLE)


def _string_list(value: Any, limit: int, default: list[str]) -> list[str]:
    if not isinstance(value, list):
        return list(default)
    return [str(item) for item in value][:limit]


def parse_style_inference(text: str, occasion: str | None = None) -> MusicStyleInference:
    """Normalize a raw inference reply into a ``MusicStyleInference``.

    The reply may be wrapped in a Markdown code fence. Missing or malformed
    fields get per-field defaults; a reply that is not a JSON object falls
    back to ``default_style(occasion)``.
    """
    raw = (text or "").strip()
    if raw.startswith("```"):
        raw = _CODE_FENCE.sub("", raw).strip()

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        log.warning("Style inference reply is not valid JSON (%s), using default style", e)
        return default_style(occasion)

    if not isinstance(parsed, dict):
        log.warning("Style inference reply is %s, not an object; using default style", type(parsed).__name__)
        return default_style(occasion)

    mood = parsed.get("mood")
    tempo_hint = parsed.get("tempoHint", parsed.get("tempo_hint"))
    instruments = parsed.get("suggestedInstruments", parsed.get("suggested_instruments"))
    keywords = parsed.get("styleKeywords", parsed.get("style_keywords"))

    return MusicStyleInference(
        genres=_string_list(parsed.get("genres"), MAX_GENRES, ["Pop"]),
        mood=mood if isinstance(mood, str) else "uplifting",
        suggested_instruments=_string_list(
            instruments, MAX_INSTRUMENTS, ["Piano", "Acoustic Guitar"]
        ),
        tempo_hint=tempo_hint if tempo_hint in TEMPO_HINTS else "medium",
        style_keywords=_string_list(keywords, MAX_KEYWORDS, ["warm", "personal"]),
    )
