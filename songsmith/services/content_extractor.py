"""Partition contributor answers into the buckets the lyric templates draw from."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from songsmith.models.song_request import ExtractedContent, Submission

log = logging.getLogger(__name__)

# Question id -> bucket. None marks ids that are known but not sung.
QUESTION_BUCKETS: dict[str, str | None] = {
    # Quick mode
    "admire": "traits",
    "memory": "memories",
    "quirk": "quirks",
    "wish": "wishes",
    # Deep mode
    "memory_funny": "memories",
    "memory_tender": "memories",
    "memory_defining": "memories",
    "how_they_show_love": "traits",
    "current_chapter": None,
    "what_matters_most": "traits",
}


def _split_submission(submission: Any) -> tuple[Mapping[str, Any], list[Any]]:
    """Return (answers, must_include_lines) for a model, a wrapped mapping or a bare answer-set."""
    if isinstance(submission, Submission):
        return submission.answers, submission.must_include_lines

    if not isinstance(submission, Mapping):
        return {}, []

    lines = submission.get("must_include_lines", submission.get("mustIncludeLines"))
    lines = list(lines) if isinstance(lines, (list, tuple)) else []

    answers = submission.get("answers")
    if isinstance(answers, Mapping):
        return answers, lines
    # A bare answer-set may carry its own lines next to the question ids
    return submission, lines


def extract_content(
    submissions: Iterable[Submission | Mapping[str, Any]] | None,
    must_include_items: Iterable[str] | None = None,
) -> ExtractedContent:
    """Scan submissions in order and sort their answers into buckets.

    Within one submission, answers are read in ``QUESTION_BUCKETS`` order.
    Only string answers with non-blank content are kept, and they are kept
    raw (no trimming, no dedup). Unknown question ids and non-text values
    are skipped. Per-submission must-include lines are appended after the
    caller's ``must_include_items``.
    """
    content = ExtractedContent(
        must_include=[item for item in (must_include_items or []) if isinstance(item, str)]
    )
    buckets: dict[str, list[str]] = {
        "memories": content.memories,
        "traits": content.traits,
        "quirks": content.quirks,
        "wishes": content.wishes,
    }

    for submission in submissions or []:
        answers, lines = _split_submission(submission)

        for question_id, bucket in QUESTION_BUCKETS.items():
            if bucket is None:
                continue
            value = answers.get(question_id)
            if not isinstance(value, str) or not value.strip():
                continue
            buckets[bucket].append(value)

        content.must_include.extend(line for line in lines if isinstance(line, str))

    log.debug(
        "Extracted %d memories, %d traits, %d quirks, %d wishes, %d must-include",
        len(content.memories),
        len(content.traits),
        len(content.quirks),
        len(content.wishes),
        len(content.must_include),
    )
    return content
