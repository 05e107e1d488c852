"""
Unit tests for prompt building.
"""

import pytest

from mindcare.core.prompts import build_messages, build_prompt


class TestBuildPrompt:

    def test_summary_embeds_transcript(self):
        transcript = "User: I can't sleep\nAI: That sounds exhausting."
        prompt = build_prompt("summary", transcript)
        assert transcript in prompt
        assert "3-4 sentences" in prompt
        assert "emotional state" in prompt

    def test_reply_requests_json(self):
        prompt = build_prompt("reply", "I feel anxious today")
        assert '"response"' in prompt
        assert '"emotional_analysis"' in prompt
        assert "JSON" in prompt
        assert "I feel anxious today" not in prompt

    def test_pure(self):
        assert build_prompt("reply", "a") == build_prompt("reply", "b")
        assert build_prompt("summary", "x") == build_prompt("summary", "x")

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            build_prompt("poem", "text")


class TestBuildMessages:

    def test_reply_has_system_and_user(self):
        messages = build_messages("reply", "I feel anxious today")
        assert [m.role for m in messages] == ["system", "user"]
        assert messages[1].content == "I feel anxious today"

    def test_summary_has_system_only(self):
        messages = build_messages("summary", "User: hi")
        assert len(messages) == 1
        assert messages[0].role == "system"
        assert "User: hi" in messages[0].content
