import json

import pytest

from songsmith.services.style_inference import default_style, parse_style_inference


class TestDefaultStyle:
    @pytest.mark.parametrize(
        "occasion, mood, tempo",
        [
            ("Birthday", "celebratory", "upbeat"),
            ("our 25th wedding anniversary", "romantic", "slow"),
            ("Retirement party", "nostalgic", "medium"),
            ("farewell dinner", "nostalgic", "medium"),
            ("High school GRADUATION", "hopeful", "upbeat"),
            ("memorial service", "tender", "slow"),
            ("a tribute", "tender", "slow"),
        ],
    )
    def test_occasion_keywords(self, occasion, mood, tempo):
        style = default_style(occasion)
        assert style.mood == mood
        assert style.tempo_hint == tempo

    def test_birthday_bundle(self):
        style = default_style("birthday")
        assert style.genres == ["Pop", "R&B/Soul"]
        assert style.suggested_instruments == ["Piano", "Drums", "Bass", "Synthesizer"]
        assert style.style_keywords == ["upbeat", "joyful", "celebratory", "feel-good"]

    def test_first_match_wins(self):
        """'birthday' is checked before 'wedding'."""
        assert default_style("wedding birthday").mood == "celebratory"

    @pytest.mark.parametrize("occasion", [None, "", "just because"])
    def test_generic_default(self, occasion):
        style = default_style(occasion)
        assert style.genres == ["Pop", "Folk/Acoustic"]
        assert style.mood == "heartfelt"
        assert style.tempo_hint == "medium"

    def test_returns_fresh_objects(self):
        first = default_style("birthday")
        first.genres.append("Polka")
        assert default_style("birthday").genres == ["Pop", "R&B/Soul"]


class TestParseStyleInference:
    def test_plain_json(self):
        reply = json.dumps(
            {
                "genres": ["Rock", "Indie"],
                "mood": "energetic",
                "suggestedInstruments": ["Electric Guitar", "Drums"],
                "tempoHint": "upbeat",
                "styleKeywords": ["gritty", "raw", "anthemic"],
            }
        )
        style = parse_style_inference(reply)
        assert style.genres == ["Rock", "Indie"]
        assert style.mood == "energetic"
        assert style.suggested_instruments == ["Electric Guitar", "Drums"]
        assert style.tempo_hint == "upbeat"
        assert style.style_keywords == ["gritty", "raw", "anthemic"]

    def test_markdown_fenced_reply(self):
        reply = '```json\n{"genres": ["Jazz"], "mood": "smoky", "tempoHint": "slow"}\n```'
        style = parse_style_inference(reply)
        assert style.genres == ["Jazz"]
        assert style.mood == "smoky"
        assert style.tempo_hint == "slow"

    def test_lists_are_capped(self):
        reply = json.dumps(
            {
                "genres": ["a", "b", "c", "d"],
                "suggestedInstruments": ["1", "2", "3", "4", "5"],
                "styleKeywords": ["k1", "k2", "k3", "k4", "k5", "k6"],
            }
        )
        style = parse_style_inference(reply)
        assert style.genres == ["a", "b", "c"]
        assert style.suggested_instruments == ["1", "2", "3", "4"]
        assert style.style_keywords == ["k1", "k2", "k3", "k4", "k5"]

    def test_field_defaults(self):
        """Wrong-typed fields fall back one by one."""
        style = parse_style_inference(json.dumps({"genres": "Pop", "mood": 7, "tempoHint": "fast"}))
        assert style.genres == ["Pop"]
        assert style.mood == "uplifting"
        assert style.suggested_instruments == ["Piano", "Acoustic Guitar"]
        assert style.tempo_hint == "medium"
        assert style.style_keywords == ["warm", "personal"]

    def test_snake_case_keys_accepted(self):
        style = parse_style_inference(json.dumps({"tempo_hint": "slow", "suggested_instruments": ["Cello"]}))
        assert style.tempo_hint == "slow"
        assert style.suggested_instruments == ["Cello"]

    @pytest.mark.parametrize("reply", ["", "not json at all", "[1, 2, 3]", '"a string"'])
    def test_unusable_reply_uses_occasion_default(self, reply):
        assert parse_style_inference(reply, "wedding") == default_style("wedding")
