"""Build the sound-first style prompt sent to the music-generation provider.

Clause order is fixed: the provider weights leading terms more heavily, so
genre and mood come first and the avoid list always comes last.
"""

from __future__ import annotations

import logging

from songsmith.models.song_request import MusicPreferences, TonePreferences

log = logging.getLogger(__name__)

STYLE_PROMPT_MAX_CHARS = 300
MAX_STYLE_KEYWORDS = 3
ELLIPSIS = "..."

TEMPO_CLAUSES: dict[str, str] = {
    "slow": "60-80 BPM, spacious ballad feel",
    "medium": "90-110 BPM, steady groove",
    "upbeat": "120-140 BPM, driving energy",
}

VOCAL_CLAUSES: dict[str, str] = {
    "male": "warm male vocals, natural delivery",
    "female": "clear female vocals, emotive delivery",
    "choir": "layered choir harmonies",
}

AVOID_CLAUSE = "avoid abrupt ending, avoid mumbling, clear pronunciation"


def _is_minimal(tone: TonePreferences) -> bool:
    return tone.minimal_lyrical <= 4


def _rhythm_clause(tone: TonePreferences) -> str:
    if _is_minimal(tone):
        return "minimal drums, soft percussion, subtle bass"
    if tone.intimate_anthem >= 7:
        return "powerful drums, driving bass, stadium sound"
    return "natural drum kit, warm bass"


def _delivery_clause(tone: TonePreferences) -> str | None:
    if tone.heartfelt_funny <= 3:
        return "sincere emotional delivery, heartfelt"
    if tone.heartfelt_funny >= 7:
        return "playful delivery, lighthearted energy"
    return None


def _scale_clause(tone: TonePreferences) -> str | None:
    if tone.intimate_anthem <= 3:
        return "intimate acoustic feel, personal"
    if tone.intimate_anthem >= 7:
        return "anthemic build, powerful dynamics"
    return None


def _duration_clause(tone: TonePreferences) -> str:
    if _is_minimal(tone):
        return "2:30-3:30 duration, spacious arrangement"
    return "2:30-3:30 duration, full arrangement with outro fade"


def truncate_text(text: str, max_chars: int) -> str:
    """Cut ``text`` to ``max_chars`` characters, ending in an ellipsis when cut."""
    if len(text) <= max_chars:
        return text
    return text[: max_chars - len(ELLIPSIS)] + ELLIPSIS


def build_style_prompt(
    music: MusicPreferences | None = None,
    tone: TonePreferences | None = None,
) -> str:
    """Combine music preferences and tone sliders into one prompt of at most 300 characters.

    An inferred style, when present, replaces the manual genre and instrument
    lists and contributes its mood and up to three style keywords. The
    manual tempo still wins over the inferred tempo hint.
    """
    music = music or MusicPreferences()
    tone = tone or TonePreferences()
    inferred = music.inferred_style

    genres = inferred.genres if inferred else music.genres
    instruments = inferred.suggested_instruments if inferred else music.instruments

    parts: list[str] = []

    if genres:
        parts.append(", ".join(genres))

    if inferred and inferred.mood:
        parts.append(f"{inferred.mood} mood")
    if inferred and inferred.style_keywords:
        parts.append(", ".join(inferred.style_keywords[:MAX_STYLE_KEYWORDS]))

    tempo = music.tempo or (inferred.tempo_hint if inferred else None) or "medium"
    tempo_clause = TEMPO_CLAUSES.get(tempo)
    if tempo_clause:
        parts.append(tempo_clause)
    else:
        log.debug("Unrecognized tempo %r, omitting tempo clause", tempo)

    parts.append(_rhythm_clause(tone))

    if instruments:
        parts.append(f"featuring {', '.join(instruments)}")

    vocal_clause = VOCAL_CLAUSES.get(music.vocal_style or "")
    if vocal_clause:
        parts.append(vocal_clause)

    for clause in (_delivery_clause(tone), _scale_clause(tone)):
        if clause:
            parts.append(clause)

    parts.append(_duration_clause(tone))
    parts.append(AVOID_CLAUSE)

    prompt = ", ".join(parts)
    if len(prompt) > STYLE_PROMPT_MAX_CHARS:
        log.debug("Style prompt is %d chars, truncating to %d", len(prompt), STYLE_PROMPT_MAX_CHARS)
        prompt = truncate_text(prompt, STYLE_PROMPT_MAX_CHARS)
    return prompt


def describe_tone(tone: TonePreferences | None = None) -> str:
    """Short human-readable summary of the tone sliders, e.g. 'heartfelt, anthemic'."""
    tone = tone or TonePreferences()
    parts: list[str] = []

    if tone.heartfelt_funny <= 3:
        parts.append("heartfelt")
    elif tone.heartfelt_funny >= 7:
        parts.append("playful")

    if tone.intimate_anthem <= 3:
        parts.append("intimate")
    elif tone.intimate_anthem >= 7:
        parts.append("anthemic")

    if tone.minimal_lyrical <= 3:
        parts.append("minimal")
    elif tone.minimal_lyrical >= 7:
        parts.append("lyrical")

    return ", ".join(parts) if parts else "balanced"
