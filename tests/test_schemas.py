"""
Unit tests for request validation models.
"""

import pytest
from pydantic import ValidationError

from shared.schemas.chat import InsightsRequest, SummarizeRequest
from shared.schemas.content import GenerateContentRequest
from shared.schemas.resume import ImproveResumeRequest, ScoreResumeRequest


class TestSummarizeRequest:
    """Tests for SummarizeRequest."""

    def test_accepts_valid_input(self):
        request = SummarizeRequest.model_validate(
            {"messages": [{"role": "user", "content": "Hello world"}], "style": "concise"}
        )
        assert len(request.messages) == 1
        assert request.style == "concise"

    def test_style_defaults_to_concise(self):
        request = SummarizeRequest.model_validate({"messages": [{"role": "user", "content": "Hello"}]})
        assert request.style == "concise"

    def test_rejects_empty_messages(self):
        with pytest.raises(ValidationError):
            SummarizeRequest.model_validate({"messages": []})

    def test_rejects_too_many_messages(self):
        messages = [{"role": "user", "content": "hi"}] * 201
        with pytest.raises(ValidationError):
            SummarizeRequest.model_validate({"messages": messages})

    def test_accepts_two_hundred_messages(self):
        messages = [{"role": "assistant", "content": "hi"}] * 200
        request = SummarizeRequest.model_validate({"messages": messages})
        assert len(request.messages) == 200

    def test_rejects_invalid_role(self):
        with pytest.raises(ValidationError):
            SummarizeRequest.model_validate({"messages": [{"role": "invalid", "content": "Hello"}]})

    def test_rejects_empty_content(self):
        with pytest.raises(ValidationError):
            SummarizeRequest.model_validate({"messages": [{"role": "user", "content": ""}]})

    def test_rejects_oversized_content(self):
        with pytest.raises(ValidationError):
            SummarizeRequest.model_validate({"messages": [{"role": "user", "content": "x" * 50_001}]})

    def test_rejects_unknown_style(self):
        with pytest.raises(ValidationError):
            SummarizeRequest.model_validate({"messages": [{"role": "user", "content": "Hi"}], "style": "verbose"})


class TestInsightsRequest:
    """Tests for InsightsRequest signal toggles."""

    def test_accepts_partial_signals(self):
        request = InsightsRequest.model_validate(
            {"messages": [{"role": "user", "content": "Test"}], "signals": {"sentiment": True, "topics": False}}
        )
        assert request.signals.sentiment is True
        assert request.signals.topics is False
        assert request.signals.entities is True

    def test_signals_default_to_all_true(self):
        request = InsightsRequest.model_validate({"messages": [{"role": "user", "content": "Test"}]})
        assert request.signals.sentiment is True
        assert request.signals.topics is True
        assert request.signals.entities is True


class TestResumeRequests:
    """Tests for resume scoring and improvement requests."""

    def test_accepts_valid_resume(self):
        request = ScoreResumeRequest.model_validate({"resumeText": "Experienced developer with 5 years of expertise"})
        assert request.resume_text.startswith("Experienced")
        assert request.job_description is None

    def test_accepts_job_description(self):
        request = ScoreResumeRequest.model_validate(
            {
                "resumeText": "Experienced developer with 5 years of expertise",
                "jobDescription": "Looking for a senior developer",
            }
        )
        assert request.job_description == "Looking for a senior developer"

    def test_rejects_too_short_resume(self):
        with pytest.raises(ValidationError):
            ScoreResumeRequest.model_validate({"resumeText": "short"})

    def test_ten_characters_is_enough(self):
        request = ScoreResumeRequest.model_validate({"resumeText": "0123456789"})
        assert len(request.resume_text) == 10

    def test_improve_accepts_target_role(self):
        request = ImproveResumeRequest.model_validate(
            {"resumeText": "Experienced developer with 5 years of expertise", "targetRole": "Senior Engineer"}
        )
        assert request.target_role == "Senior Engineer"

    def test_improve_rejects_long_target_role(self):
        with pytest.raises(ValidationError):
            ImproveResumeRequest.model_validate(
                {"resumeText": "Experienced developer with 5 years of expertise", "targetRole": "x" * 201}
            )


class TestGenerateContentRequest:
    """Tests for GenerateContentRequest."""

    def test_accepts_valid_prompt(self):
        request = GenerateContentRequest.model_validate(
            {"prompt": "Write a blog post about AI", "tone": "casual", "length": "short"}
        )
        assert request.tone == "casual"
        assert request.length == "short"

    def test_length_defaults_to_medium(self):
        request = GenerateContentRequest.model_validate({"prompt": "Write something"})
        assert request.length == "medium"
        assert request.tone is None

    def test_rejects_empty_prompt(self):
        with pytest.raises(ValidationError):
            GenerateContentRequest.model_validate({"prompt": ""})

    def test_rejects_long_tone(self):
        with pytest.raises(ValidationError):
            GenerateContentRequest.model_validate({"prompt": "Write", "tone": "t" * 101})
