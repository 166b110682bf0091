"""Template lyric synthesis used when no AI lyric generator is available.

The song always has the same twelve sections so the provider gets a
full-length structure no matter how little content was collected.
"""

from __future__ import annotations

import logging
import re

from songsmith.models.song_request import ExtractedContent
from songsmith.services.style_prompt import truncate_text

log = logging.getLogger(__name__)

LYRICS_MAX_CHARS = 3000

# Per-slot line budgets
LEAD_LINE_MAX = 80
DETAIL_LINE_MAX = 60

SECTION_ORDER = (
    "Intro",
    "Verse 1",
    "Pre-Chorus",
    "Chorus",
    "Verse 2",
    "Pre-Chorus",
    "Chorus",
    "Bridge",
    "Instrumental",
    "Chorus",
    "Chorus",
    "Outro",
)

INTRO_LINES = ["La la la, la la la", "Here we go"]
VERSE_1_FILLER = ["Every moment with you is a treasure", "Every memory we hold so dear"]
PRE_CHORUS_LINES = ["And now we gather here today", "To show you in every way"]
VERSE_2_FILLER = ["You light up every room you enter"]
BRIDGE_FILLER = ["Here's to all the years ahead", "Here's to all the love we share"]
INSTRUMENTAL_LINES = ["Oh oh oh, oh oh oh", "Yeah yeah yeah"]

_LINE_BREAKS = re.compile(r"[\r\n]+")


def clean_line(text: str, max_len: int = DETAIL_LINE_MAX) -> str:
    """Flatten ``text`` onto one line and fit it into ``max_len`` characters."""
    return truncate_text(_LINE_BREAKS.sub(" ", text).strip(), max_len)


def _pick(items: list[str], index: int, max_len: int) -> list[str]:
    # Blank lines would read as section breaks
    if len(items) > index:
        line = clean_line(items[index], max_len)
        return [line] if line else []
    return []


def _chorus(honoree_name: str, occasion: str) -> list[str]:
    return [
        f"{honoree_name}, this one's for you",
        f"On your {occasion}",
        "We celebrate everything you do",
        f"{honoree_name}, we love you",
    ]


def _final_chorus(honoree_name: str, occasion: str) -> list[str]:
    return [
        f"{honoree_name}, this one's for you",
        "This one's for you",
        f"On your {occasion}",
        "We celebrate everything you do",
        "Everything you do",
        f"{honoree_name}, we love you",
        "We love you so much",
    ]


def _verse_two(content: ExtractedContent) -> list[str]:
    lines: list[str] = []
    # Second entries fall back to the first so the verse is never bare
    for bucket in (content.memories, content.traits):
        lines += _pick(bucket, 1 if len(bucket) > 1 else 0, DETAIL_LINE_MAX)
    lines += _pick(content.quirks, 1, DETAIL_LINE_MAX)
    lines += _pick(content.must_include, 0, DETAIL_LINE_MAX)
    return lines + VERSE_2_FILLER


def _render(sections: list[tuple[str, list[str]]]) -> str:
    blocks = []
    for name, lines in sections:
        blocks.append("".join(f"{line}\n" for line in [f"[{name}]", *lines]))
    return "\n".join(blocks)


def generate_lyrics(
    content: ExtractedContent,
    honoree_name: str,
    occasion: str,
    minimal_lyrical: int = 5,
) -> str:
    """Assemble the fixed song structure from extracted content.

    ``minimal_lyrical`` is accepted for signature parity with the AI
    generator; the template always emits every section. The result is at
    most 3000 characters; past that the tail is cut, section markers
    included.
    """
    chorus = _chorus(honoree_name, occasion)

    verse_one = (
        _pick(content.memories, 0, LEAD_LINE_MAX)
        + _pick(content.traits, 0, DETAIL_LINE_MAX)
        + _pick(content.quirks, 0, DETAIL_LINE_MAX)
        + VERSE_1_FILLER
    )
    bridge = (
        _pick(content.wishes, 0, LEAD_LINE_MAX)
        + _pick(content.wishes, 1, DETAIL_LINE_MAX)
        + BRIDGE_FILLER
    )
    outro = [honoree_name, "We love you", honoree_name, "La la la, la la la"]

    bodies = [
        INTRO_LINES,
        verse_one,
        PRE_CHORUS_LINES,
        chorus,
        _verse_two(content),
        PRE_CHORUS_LINES,
        chorus,
        bridge,
        INSTRUMENTAL_LINES,
        chorus,
        _final_chorus(honoree_name, occasion),
        outro,
    ]
    lyrics = _render(list(zip(SECTION_ORDER, bodies, strict=True)))

    if len(lyrics) > LYRICS_MAX_CHARS:
        log.debug("Lyrics are %d chars, truncating to %d", len(lyrics), LYRICS_MAX_CHARS)
        lyrics = truncate_text(lyrics, LYRICS_MAX_CHARS)
    return lyrics
