"""
Tests for the analysis flows: classification engine, response assembly
and the short-term remedies flow.

The simulated processing delay is zeroed by the autouse fixture in conftest.

Run with: python -m pytest tests/test_analysis_service.py -v
"""

import asyncio

import pytest


def _analyze(text, **kwargs):
    from mindwell.schemas.analysis import AnalysisRequest
    from mindwell.services.analysis_service import analyze_user_input

    return asyncio.run(analyze_user_input(AnalysisRequest(text=text, **kwargs)))


# =============================================================================
# CLASSIFICATION ENGINE TESTS
# =============================================================================

class TestClassificationEngine:
    """Combined classification result."""

    def test_short_term_low(self):
        from mindwell.services.classification_service import get_classification_engine

        result = get_classification_engine().classify_and_recommend("sometimes I feel anxious at work")

        assert result.type.value == "short-term"
        assert result.urgency.value == "low"
        assert result.primary_concerns == ["anxiety"]
        assert [p.id for p in result.recommendations] == ["nadi-shodhana", "bhramari"]
        assert result.professional_help_needed is False

    def test_medium_long_term_needs_professional(self):
        from mindwell.services.classification_service import get_classification_engine

        result = get_classification_engine().classify_and_recommend(
            "I often feel nervous, it has been going on for months"
        )

        assert result.type.value == "long-term"
        assert result.urgency.value == "medium"
        assert result.professional_help_needed is True

    def test_medium_short_term_does_not(self):
        from mindwell.services.classification_service import get_classification_engine

        result = get_classification_engine().classify_and_recommend("I often feel nervous before meetings")

        assert result.urgency.value == "medium"
        assert result.professional_help_needed is False

    def test_crisis_message(self):
        from mindwell.services.classification_service import (
            CRISIS_MESSAGE,
            get_classification_engine,
        )

        engine = get_classification_engine()
        result = engine.classify_and_recommend("I want to die and can't cope anymore")

        assert result.urgency.value == "crisis"
        assert result.professional_help_needed is True
        assert engine.generate_culturally_aware_message(result) == CRISIS_MESSAGE


# =============================================================================
# RESPONSE ASSEMBLY TESTS
# =============================================================================

class TestAnalyzeUserInput:
    """Full analysis response."""

    def test_short_term_low_response(self):
        from mindwell.services.classification_service import SHORT_TERM_MESSAGE

        response = _analyze("sometimes I feel anxious at work")

        assert response.classification.type.value == "short-term"
        assert response.classification.primary_concern_labels == ["Anxiety"]
        assert response.cultural_message == SHORT_TERM_MESSAGE
        assert response.estimated_time_to_relief == "15-30 minutes with breathing exercises"
        assert len(response.next_steps) == 4
        assert response.follow_up_recommended is True

    def test_crisis_response(self):
        response = _analyze("I want to die and can't cope anymore")

        assert response.classification.urgency.value == "crisis"
        assert len(response.next_steps) == 3
        assert "1800-599-0019" in response.next_steps[0]
        assert response.estimated_time_to_relief == "Immediate professional intervention needed"
        assert response.follow_up_recommended is True

    def test_long_term_high_response(self):
        from mindwell.services.classification_service import LONG_TERM_MESSAGE

        response = _analyze("For months I have constantly felt on edge")

        assert response.classification.type.value == "long-term"
        assert response.classification.urgency.value == "high"
        assert response.cultural_message == LONG_TERM_MESSAGE
        assert response.next_steps[0] == "Schedule appointment with mental health professional"
        assert len(response.next_steps) == 6
        assert response.estimated_time_to_relief == "1-2 weeks with consistent practice + professional help"

    def test_relief_estimates(self):
        short_medium = _analyze("I often feel nervous before meetings")
        long_medium = _analyze("I often feel nervous, it has been going on for months")

        assert short_medium.estimated_time_to_relief == "1-3 hours with combined practices"
        assert long_medium.estimated_time_to_relief == "2-4 weeks with regular practice"

    def test_formatted_recommendations_follow_profile(self):
        response = _analyze(
            "sometimes I feel anxious at work",
            user_profile={"age": 30, "experience": "beginner"},
        )

        formatted = response.formatted_recommendations
        assert [item.practice.id for item in formatted] == ["nadi-shodhana", "bhramari"]
        assert all(step.endswith("(Take your time, no rush)") for step in formatted[0].adapted_instructions)
        assert formatted[0].cultural_context.startswith("प्राणायाम")

    def test_invalid_input_raises(self):
        from mindwell.utils.input_validator import InvalidInputError

        with pytest.raises(InvalidInputError):
            _analyze("hi")


class TestShortTermFlow:
    """Short-term remedies flow with the default beginner profile."""

    def test_default_profile_and_remedies(self):
        from mindwell.schemas.analysis import AnalysisRequest
        from mindwell.services.analysis_service import analyze_short_term

        response = asyncio.run(analyze_short_term(AnalysisRequest(text="sometimes I feel anxious at work")))

        assert [r.id for r in response.remedies] == ["box-breathing", "grounding-54321", "body-scan"]
        first = response.analysis.formatted_recommendations[0]
        assert first.adapted_instructions[0].endswith("(Take your time, no rush)")

    def test_default_profile_not_shared(self):
        """Each request gets its own default profile."""
        from mindwell.services.analysis_service import default_short_term_profile

        first = default_short_term_profile()
        first.cultural_preferences.append("ayurveda")

        second = default_short_term_profile()

        assert first is not second
        assert second.cultural_preferences == []
        assert second.experience.value == "beginner"

    def test_invalid_input_raises(self):
        from mindwell.schemas.analysis import AnalysisRequest
        from mindwell.services.analysis_service import analyze_short_term
        from mindwell.utils.input_validator import InvalidInputError

        with pytest.raises(InvalidInputError):
            asyncio.run(analyze_short_term(AnalysisRequest(text="buy now, click here")))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
