"""Request and result models for tribute-song synthesis."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

TONE_MIN = 1
TONE_MAX = 10

TempoHint = Literal["slow", "medium", "upbeat"]


class _CamelModel(BaseModel):
    """Accepts both snake_case field names and the camelCase names the web app sends.

    FastAPI and the CLI dump these by alias, so output keys are camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _strings_only(value: Any) -> Any:
    # null or numeric entries are dropped, not rejected
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, str)]
    return value


class Submission(_CamelModel):
    """One contributor's answer-set plus any curated must-include lines."""

    answers: dict[str, Any] = Field(
        default_factory=dict,
        description="Free-text answers keyed by question id, e.g. {'admire': '...'}",
    )
    must_include_lines: list[str] = Field(
        default_factory=list,
        description="Phrases attached to this submission that should appear in the song",
    )

    _must_include_strings = field_validator("must_include_lines", mode="before")(_strings_only)


class ConstraintSet(_CamelModel):
    """Curation constraints set on the project."""

    must_include_items: list[str] = Field(default_factory=list)
    topics_to_avoid: list[str] = Field(
        default_factory=list,
        description="Hint only; synthesized text is not filtered against these",
    )

    _item_strings = field_validator("must_include_items", "topics_to_avoid", mode="before")(_strings_only)


class TonePreferences(_CamelModel):
    """Three independent 1-10 sliders. Out-of-range values are clamped, never rejected."""

    heartfelt_funny: int = Field(default=5, description="1 = heartfelt, 10 = funny")
    intimate_anthem: int = Field(default=5, description="1 = intimate, 10 = anthemic")
    minimal_lyrical: int = Field(default=5, description="1 = minimal, 10 = lyrical/dense")

    @field_validator("heartfelt_funny", "intimate_anthem", "minimal_lyrical", mode="before")
    @classmethod
    def _clamp(cls, value: Any) -> int:
        try:
            number = int(value)
        except OverflowError:
            # +/-Infinity
            return TONE_MAX if value > 0 else TONE_MIN
        except (TypeError, ValueError) as e:
            raise ValueError(f"tone slider must be a number, got {value!r}") from e
        return max(TONE_MIN, min(TONE_MAX, number))


class MusicStyleInference(_CamelModel):
    """Style bundle inferred from song/artist references or a vibe description."""

    genres: list[str] = Field(default_factory=list)
    mood: str = ""
    suggested_instruments: list[str] = Field(default_factory=list)
    tempo_hint: TempoHint = "medium"
    style_keywords: list[str] = Field(default_factory=list)


class MusicPreferences(_CamelModel):
    """Manually selected music options, optionally overridden by an inferred style."""

    genres: list[str] = Field(default_factory=list)
    tempo: str | None = Field(default=None, description="'slow', 'medium' or 'upbeat'")
    vocal_style: str | None = Field(default=None, description="'male', 'female' or 'choir'")
    instruments: list[str] = Field(default_factory=list)
    inferred_style: MusicStyleInference | None = None


class ExtractedContent(BaseModel):
    """Submission answers partitioned into lyric buckets, in submission order."""

    memories: list[str] = Field(default_factory=list)
    traits: list[str] = Field(default_factory=list)
    quirks: list[str] = Field(default_factory=list)
    wishes: list[str] = Field(default_factory=list)
    must_include: list[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.memories or self.traits or self.quirks or self.wishes or self.must_include)


class SongRequest(_CamelModel):
    """Everything needed to synthesize a style prompt and lyrics for one song."""

    honoree_name: str
    occasion: str
    submissions: list[Submission] = Field(default_factory=list)
    constraints: ConstraintSet = Field(default_factory=ConstraintSet)
    tone: TonePreferences = Field(default_factory=TonePreferences)
    music: MusicPreferences = Field(default_factory=MusicPreferences)


class SynthesisOutput(_CamelModel):
    """The two strings forwarded verbatim to the music-generation provider."""

    style_prompt: str = Field(description="At most 300 characters")
    lyrics: str = Field(description="At most 3000 characters, with [Section] markers")


class SongSynthesis(SynthesisOutput):
    """Synthesis output plus the derived display fields."""

    title: str
    tone_description: str
