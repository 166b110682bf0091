"""REST API routes for fallback song synthesis."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from songsmith.config import get_cors_origins
from songsmith.models.song_request import (
    MusicPreferences,
    MusicStyleInference,
    SongRequest,
    SongSynthesis,
    TonePreferences,
)
from songsmith.services.style_inference import default_style, parse_style_inference
from songsmith.services.style_prompt import build_style_prompt, describe_tone
from songsmith.services.synthesis import synthesize

log = logging.getLogger(__name__)


class StylePromptRequest(BaseModel):
    music: MusicPreferences = Field(default_factory=MusicPreferences)
    tone: TonePreferences = Field(default_factory=TonePreferences)


class StylePromptResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    style_prompt: str
    tone_description: str


class StyleInferenceReply(BaseModel):
    text: str = Field(description="Raw reply from the style inference model")
    occasion: str | None = None


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Songsmith Synthesis API",
        description="Deterministic lyric and style-prompt synthesis for tribute songs",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/api/synthesize")
    async def synthesize_song(request: SongRequest) -> SongSynthesis:
        """Build the style prompt and fallback lyrics for one song.

        Args:
            request: Honoree, occasion, approved submissions, curation
                constraints, tone sliders and music preferences

        Returns:
            Style prompt, lyrics, title and tone summary
        """
        log.info(
            "Synthesis requested for '%s' with %d submissions",
            request.honoree_name,
            len(request.submissions),
        )
        return synthesize(request)

    @app.post("/api/style-prompt")
    async def style_prompt(request: StylePromptRequest) -> StylePromptResponse:
        """Build only the style prompt."""
        return StylePromptResponse(
            style_prompt=build_style_prompt(request.music, request.tone),
            tone_description=describe_tone(request.tone),
        )

    @app.get("/api/default-style")
    async def get_default_style(occasion: str | None = None) -> MusicStyleInference:
        """Style used for "surprise" mode, keyed on the occasion."""
        return default_style(occasion)

    @app.post("/api/style-inference/normalize")
    async def normalize_style_inference(reply: StyleInferenceReply) -> MusicStyleInference:
        """Turn a raw inference reply into a bounded style bundle."""
        return parse_style_inference(reply.text, reply.occasion)

    @app.get("/api/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "ok"}

    return app
