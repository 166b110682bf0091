from songsmith.models.song_request import SongRequest
from songsmith.services.synthesis import (
    LYRICS_PADDING,
    STYLE_PROMPT_PADDING,
    fit_provider_limits,
    song_title,
    synthesize,
)


def make_request(**overrides) -> SongRequest:
    payload = {
        "honoreeName": "Grandpa Joe",
        "occasion": "80th birthday",
        "submissions": [
            {
                "answers": {
                    "admire": "his endless patience",
                    "memory": "teaching me to fish at Lake George",
                    "quirk": "whistles off-key",
                    "wish": "many more summers",
                },
                "mustIncludeLines": ["the blue house"],
            },
            {"answers": {"memory_tender": "the night he drove four hours to pick me up"}},
        ],
        "constraints": {"mustIncludeItems": ["Fenway Park"], "topicsToAvoid": ["the divorce"]},
        "tone": {"heartfeltFunny": 2, "intimateAnthem": 8, "minimalLyrical": 6},
        "music": {"genres": ["Folk/Acoustic"], "tempo": "slow", "vocalStyle": "male"},
    }
    payload.update(overrides)
    return SongRequest.model_validate(payload)


class TestSynthesize:
    def test_end_to_end(self):
        result = synthesize(make_request())

        assert result.title == "For Grandpa Joe - 80th birthday"
        assert result.tone_description == "heartfelt, anthemic"
        assert result.style_prompt.startswith("Folk/Acoustic, 60-80 BPM")
        assert "warm male vocals" in result.style_prompt
        assert len(result.style_prompt) <= 300

        assert "teaching me to fish at Lake George" in result.lyrics
        assert "the night he drove four hours to pick me up" in result.lyrics
        # Project items precede submission lines, so Verse 2 sings Fenway Park
        assert "Fenway Park" in result.lyrics
        assert "the blue house" not in result.lyrics
        assert "Grandpa Joe, this one's for you" in result.lyrics
        assert len(result.lyrics) <= 3000

    def test_topics_to_avoid_are_not_enforced(self):
        """Avoid-topics are a hint for the AI generator, not a filter."""
        request = make_request(
            submissions=[{"answers": {"memory": "the divorce was hard on everyone"}}],
        )
        assert "the divorce was hard on everyone" in synthesize(request).lyrics

    def test_empty_request(self):
        result = synthesize(SongRequest(honoree_name="Mia", occasion="graduation"))
        assert result.lyrics.count("[Chorus]") == 4
        assert result.tone_description == "balanced"
        assert result.style_prompt.endswith("clear pronunciation")

    def test_deterministic(self):
        assert synthesize(make_request()) == synthesize(make_request())


class TestFitProviderLimits:
    def test_pads_short_strings(self):
        fitted = fit_provider_limits("Pop", "la")
        assert fitted.style_prompt == "Pop" + STYLE_PROMPT_PADDING
        assert fitted.lyrics == "la" + LYRICS_PADDING

    def test_truncates_long_strings(self):
        fitted = fit_provider_limits("s" * 500, "l" * 5000)
        assert len(fitted.style_prompt) == 300
        assert fitted.style_prompt.endswith("...")
        assert len(fitted.lyrics) == 3000
        assert fitted.lyrics.endswith("...")

    def test_in_window_untouched(self):
        fitted = fit_provider_limits("Pop, 90-110 BPM", "[Verse 1]\nhello there\n")
        assert fitted.style_prompt == "Pop, 90-110 BPM"
        assert fitted.lyrics == "[Verse 1]\nhello there\n"


def test_song_title():
    assert song_title("Mom", "Mother's Day") == "For Mom - Mother's Day"
