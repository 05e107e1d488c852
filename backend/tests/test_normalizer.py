"""
Unit tests for the response normalizer.
"""

import json

import pytest

from mindcare.core.errors import InvalidUpstreamFormat
from mindcare.core.normalizer import (
    NO_EMOTIONAL_ANALYSIS,
    NO_SUMMARY,
    UNANALYZABLE_FORMAT,
    NotJson,
    ParsedReply,
    ReplyResult,
    SummaryResult,
    normalize,
    parse_reply,
)


class TestParseReply:
    """Tests for the tagged JSON parse."""

    def test_json_object(self):
        parsed = parse_reply('{"response": "hi"}')
        assert parsed == ParsedReply({"response": "hi"})

    def test_surrounding_whitespace(self):
        parsed = parse_reply('\n  {"response": "hi"}  \n')
        assert isinstance(parsed, ParsedReply)

    def test_prose(self):
        text = "I think you should talk to a friend."
        assert parse_reply(text) == NotJson(text)

    def test_truncated_json(self):
        assert isinstance(parse_reply('{"response": "cut off'), NotJson)

    def test_json_array_is_not_an_object(self):
        assert isinstance(parse_reply('["a", "b"]'), NotJson)

    def test_empty_string(self):
        assert parse_reply("") == NotJson("")

    def test_deeply_nested_json_does_not_raise(self):
        text = "[" * 100000 + "]" * 100000
        assert parse_reply(text) == NotJson(text)


class TestNormalizeReply:
    """Tests for reply normalization."""

    @pytest.mark.parametrize("response,analysis", [
        ("That sounds hard.", "anxious, seeking support"),
        ("Take a breath.", "overwhelmed"),
        ("Ça va aller.", "triste"),
    ])
    def test_well_formed_reply_passes_through(self, response, analysis):
        raw = json.dumps({"response": response, "emotional_analysis": analysis})
        result = normalize("reply", raw)
        assert result == ReplyResult(response=response, emotional_analysis=analysis)

    def test_missing_analysis_uses_fallback(self):
        result = normalize("reply", '{"response": "I hear you."}')
        assert result.response == "I hear you."
        assert result.emotional_analysis == "No emotional analysis available."
        assert NO_EMOTIONAL_ANALYSIS == "No emotional analysis available."

    def test_empty_analysis_uses_fallback(self):
        result = normalize("reply", '{"response": "I hear you.", "emotional_analysis": ""}')
        assert result.emotional_analysis == NO_EMOTIONAL_ANALYSIS

    def test_plain_text_degrades_gracefully(self):
        text = "I think you should talk to a friend."
        result = normalize("reply", text)
        assert result.response == text
        assert result.emotional_analysis == "Unable to analyze emotions from this response format."
        assert UNANALYZABLE_FORMAT == result.emotional_analysis

    def test_missing_response_is_contract_violation(self):
        with pytest.raises(InvalidUpstreamFormat) as exc_info:
            normalize("reply", '{"emotional_analysis": "calm"}')
        assert exc_info.value.status_code == 500
        assert "missing response field" in exc_info.value.message

    def test_empty_response_is_contract_violation(self):
        with pytest.raises(InvalidUpstreamFormat):
            normalize("reply", '{"response": "", "emotional_analysis": "calm"}')

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
    def test_blank_reply_is_contract_violation(self, raw):
        with pytest.raises(InvalidUpstreamFormat):
            normalize("reply", raw)

    @pytest.mark.parametrize("raw", ["42", "[\"I hear you\"]", "\"quoted\"", "null"])
    def test_json_scalar_or_array_treated_as_text(self, raw):
        # Only a JSON object is held to the response-field contract
        result = normalize("reply", raw)
        assert result == ReplyResult(response=raw, emotional_analysis=UNANALYZABLE_FORMAT)

    def test_deeply_nested_reply_degrades_gracefully(self):
        raw = "[" * 100000 + "]" * 100000
        result = normalize("reply", raw)
        assert result.response == raw
        assert result.emotional_analysis == UNANALYZABLE_FORMAT

    def test_structured_analysis_rendered_as_text(self):
        raw = json.dumps({"response": "ok", "emotional_analysis": {"mood": "calm"}})
        result = normalize("reply", raw)
        assert result.emotional_analysis == '{"mood": "calm"}'

    def test_to_dict(self):
        result = ReplyResult(response="r", emotional_analysis="a")
        assert result.to_dict() == {"response": "r", "emotional_analysis": "a"}


class TestNormalizeSummary:
    """Tests for summary normalization."""

    def test_summary_verbatim(self):
        text = '{"not": "parsed"} The user seems calmer.'
        result = normalize("summary", text)
        assert result == SummaryResult(summary=text)
        assert result.display_text == text

    def test_empty_summary(self):
        result = normalize("summary", "")
        assert result.summary is None
        assert result.display_text == "No summary available."
        assert result.to_dict() == {"summary": None}

    def test_missing_summary(self):
        assert normalize("summary", None).display_text == NO_SUMMARY


def test_unknown_kind_raises():
    with pytest.raises(ValueError, match="Unsupported"):
        normalize("poem", "text")
