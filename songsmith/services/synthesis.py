"""One-call synthesis: extract content, then build the style prompt and lyrics."""

from __future__ import annotations

import logging

from songsmith.models.song_request import SongRequest, SongSynthesis, SynthesisOutput
from songsmith.services.content_extractor import extract_content
from songsmith.services.lyrics import LYRICS_MAX_CHARS, generate_lyrics
from songsmith.services.style_prompt import (
    STYLE_PROMPT_MAX_CHARS,
    build_style_prompt,
    describe_tone,
    truncate_text,
)

log = logging.getLogger(__name__)

# Provider floors; ceilings come from the builders
STYLE_PROMPT_MIN_CHARS = 10
LYRICS_MIN_CHARS = 10
STYLE_PROMPT_PADDING = ", professional quality music"
LYRICS_PADDING = "\n[Outro]\nThank you"


def song_title(honoree_name: str, occasion: str) -> str:
    return f"For {honoree_name} - {occasion}"


def fit_provider_limits(style_prompt: str, lyrics: str) -> SynthesisOutput:
    """Force both strings into the provider's accepted length window.

    Text over the ceiling is cut with an ellipsis; text under the floor is
    padded with a neutral suffix.
    """
    style_prompt = truncate_text(style_prompt, STYLE_PROMPT_MAX_CHARS)
    if len(style_prompt) < STYLE_PROMPT_MIN_CHARS:
        style_prompt += STYLE_PROMPT_PADDING

    lyrics = truncate_text(lyrics, LYRICS_MAX_CHARS)
    if len(lyrics) < LYRICS_MIN_CHARS:
        lyrics += LYRICS_PADDING

    return SynthesisOutput(style_prompt=style_prompt, lyrics=lyrics)


def synthesize(request: SongRequest) -> SongSynthesis:
    """Produce the style prompt, lyrics, title and tone summary for a song request.

    ``request.constraints.topics_to_avoid`` is carried for the AI generator
    only; the template output is not filtered against it.
    """
    content = extract_content(request.submissions, request.constraints.must_include_items)

    style_prompt = build_style_prompt(request.music, request.tone)
    lyrics = generate_lyrics(
        content,
        honoree_name=request.honoree_name,
        occasion=request.occasion,
        minimal_lyrical=request.tone.minimal_lyrical,
    )
    fitted = fit_provider_limits(style_prompt, lyrics)

    log.info(
        "Synthesized song for '%s' (%s): %d submissions, style_prompt=%d chars, lyrics=%d chars",
        request.honoree_name,
        request.occasion,
        len(request.submissions),
        len(fitted.style_prompt),
        len(fitted.lyrics),
    )
    if content.is_empty():
        log.info("No usable submission content; lyrics are template-only")

    return SongSynthesis(
        style_prompt=fitted.style_prompt,
        lyrics=fitted.lyrics,
        title=song_title(request.honoree_name, request.occasion),
        tone_description=describe_tone(request.tone),
    )
