"""
Tests for questionnaire scoring: classification answers, unsure triage
and long-term assessment urgency.

Run with: python -m pytest tests/test_answer_scorer.py -v
"""

import pytest


class TestClassificationScoring:
    """Five-question short-term vs long-term tally."""

    def test_clear_short_term(self):
        from mindwell.utils.answer_scorer import score_answers

        scores = score_answers({
            "duration": "recent",
            "impact": "minimal",
            "episodes": "never",
            "severity": "mild",
            "support": "strong",
        })

        assert (scores.short_term, scores.long_term) == (5, 0)
        assert scores.issue_type.value == "short-term"

    def test_clear_long_term(self):
        from mindwell.utils.answer_scorer import analyze_answers

        result = analyze_answers({
            "duration": "years",
            "impact": "severe",
            "episodes": "often",
            "severity": "crisis",
            "support": "none",
        })

        assert result.value == "long-term"

    def test_tie_resolves_to_long_term(self):
        """3 vs 3 is not strictly short-term."""
        from mindwell.utils.answer_scorer import score_answers

        scores = score_answers({
            "duration": "recent",
            "impact": "severe",
            "episodes": "rarely",
            "severity": "moderate",
            "support": "none",
        })

        assert (scores.short_term, scores.long_term) == (3, 3)
        assert scores.issue_type.value == "long-term"

    def test_weeks_counts_one_point(self):
        from mindwell.utils.answer_scorer import score_answers

        scores = score_answers({
            "duration": "weeks",
            "impact": "some",
            "episodes": "never",
            "severity": "moderate",
            "support": "strong",
        })

        assert (scores.short_term, scores.long_term) == (3, 0)

    def test_missing_answers_fall_to_long_term(self):
        """Unanswered duration, impact and episodes each add two long-term points."""
        from mindwell.utils.answer_scorer import score_answers

        scores = score_answers({})

        assert (scores.short_term, scores.long_term) == (0, 6)
        assert scores.issue_type.value == "long-term"


class TestUnsureTriage:
    """Three-question triage for users unsure of their timeline."""

    def test_all_long_term_signals(self):
        from mindwell.utils.answer_scorer import analyze_unsure_answers, score_unsure_answers

        answers = {"duration": ["yes"], "pattern": ["constant"], "first_time": ["no"]}

        assert score_unsure_answers(answers) == 3
        assert analyze_unsure_answers(answers).value == "long-term"

    def test_threshold_of_two(self):
        from mindwell.utils.answer_scorer import analyze_unsure_answers

        answers = {"duration": ["yes"], "pattern": ["comeandgo"], "first_time": ["no"]}

        assert analyze_unsure_answers(answers).value == "long-term"

    def test_single_signal_is_short_term(self):
        from mindwell.utils.answer_scorer import analyze_unsure_answers

        answers = {"duration": ["no"], "pattern": ["constant"], "first_time": ["yes"]}

        assert analyze_unsure_answers(answers).value == "short-term"

    def test_any_selected_value_counts(self):
        """Multiple selections count when the long-term value is among them."""
        from mindwell.utils.answer_scorer import score_unsure_answers

        assert score_unsure_answers({"duration": ["no", "yes"]}) == 1

    def test_no_answers(self):
        from mindwell.utils.answer_scorer import analyze_unsure_answers, score_unsure_answers

        assert score_unsure_answers({}) == 0
        assert analyze_unsure_answers({}).value == "short-term"


class TestAssessmentUrgency:
    """Urgency of the long-term assessment."""

    @pytest.mark.parametrize(
        "severity,duration,expected",
        [
            ("crisis", "6-12months", "crisis"),
            ("severe", "6-12months", "high"),
            ("moderate", "2+years", "moderate"),
            ("moderate", "1-2years", "standard"),
            ("mild", "2+years", "standard"),
        ],
    )
    def test_urgency_table(self, severity, duration, expected):
        from mindwell.utils.answer_scorer import assessment_urgency

        result = assessment_urgency({"severity": severity, "duration": duration})

        assert result.value == expected


class TestAssessmentService:
    """Long-term assessment called without the HTTP schema in front."""

    ANSWERS = {
        "primary_concern": "sleep",
        "duration": "6-12months",
        "severity": "moderate",
        "previous_treatment": "counseling",
        "support_system": "friends",
    }

    def test_complete_answers(self):
        from mindwell.services.assessment_service import AssessmentService

        result = AssessmentService.analyze_assessment(self.ANSWERS)

        assert result.urgency.value == "standard"
        assert result.needs_immediate is False
        assert result.iks_recommendations[0].practice == "Yoga Nidra"

    @pytest.mark.parametrize("field", ["previous_treatment", "support_system"])
    def test_missing_required_field(self, field):
        from mindwell.services.assessment_service import AssessmentService
        from mindwell.utils.input_validator import InvalidInputError

        answers = {**self.ANSWERS, field: ""}

        with pytest.raises(InvalidInputError) as exc_info:
            AssessmentService.analyze_assessment(answers)

        assert field in exc_info.value.reason


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
