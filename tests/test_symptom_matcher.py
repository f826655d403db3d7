"""
Test suite for the free-text symptom matcher.

Covers:
1. Category matching and emotional/physical breakdown
2. Crisis keyword override and severity scan
3. Issue-type classification from duration indicators
4. Urgency decision table

Run with: python -m pytest tests/test_symptom_matcher.py -v
"""

import pytest


# =============================================================================
# CATEGORY MATCHING TESTS
# =============================================================================

class TestCategoryMatching:
    """Tests for keyword category detection."""

    def test_anxious_at_work(self):
        """Single anxiety keyword with a work trigger."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        result = analyze_symptoms("sometimes I feel anxious at work")

        assert result.symptoms == ["anxiety"]
        assert result.emotional_state == ["anxiety"]
        assert result.triggers == ["work"]
        assert result.severity.value == "mild"
        assert result.physical_symptoms == []

    def test_matching_is_case_insensitive(self):
        """Upper-case input matches lower-case keywords."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        result = analyze_symptoms("I AM SO ANXIOUS")

        assert "anxiety" in result.symptoms

    def test_categories_follow_declaration_order(self):
        """Depression is declared before stress, regardless of text order."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        result = analyze_symptoms("I'm stressed and sad")

        assert result.symptoms == ["depression", "stress"]
        assert result.emotional_state == ["depression", "stress"]

    def test_physical_literal_matches_surfaced(self):
        """Physical keywords are reported verbatim, substrings included."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        result = analyze_symptoms("I have a headache and my stomach hurts")

        assert "physical" in result.symptoms
        assert "physical" not in result.emotional_state
        assert result.physical_symptoms == ["headache", "ache", "stomach"]

    def test_curly_apostrophe_matches(self):
        """Phone keyboards send curly quotes; they still match."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        result = analyze_symptoms("I can’t sleep at night")

        assert "sleep" in result.symptoms

    def test_no_matches(self):
        """Neutral text yields no categories and zero confidence."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        result = analyze_symptoms("the weather was fine")

        assert result.symptoms == []
        assert result.confidence == 0.0


# =============================================================================
# SEVERITY TESTS
# =============================================================================

class TestSeverity:
    """Tests for crisis override and the severity indicator scan."""

    def test_crisis_keyword(self):
        """A crisis phrase forces crisis severity."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        result = analyze_symptoms("I want to die and can't cope anymore")

        assert result.severity.value == "crisis"

    def test_crisis_keyword_overrides_other_indicators(self):
        """Crisis wins even when mild indicators are present."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        result = analyze_symptoms("sometimes it feels manageable but I feel hopeless")

        assert result.severity.value == "crisis"

    def test_later_tier_overwrites_earlier(self):
        """Mild, moderate and severe indicators together resolve to severe."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        result = analyze_symptoms("I often feel worried, sometimes it is unbearable")

        assert result.severity.value == "severe"

    def test_crisis_tier_indicator(self):
        """The crisis indicator tier applies without a crisis keyword."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        result = analyze_symptoms("I feel desperate about my exams")

        assert result.severity.value == "crisis"

    def test_default_mild(self):
        from mindwell.utils.symptom_matcher import analyze_symptoms

        assert analyze_symptoms("I feel a bit off").severity.value == "mild"


# =============================================================================
# CONFIDENCE TESTS
# =============================================================================

class TestConfidence:
    """Tests for the confidence heuristic."""

    def test_single_category_confidence(self):
        """One matched category over the 79 keyword entries."""
        from mindwell.utils.symptom_matcher import analyze_symptoms
        from mindwell.utils.wellness_lexicon import total_keyword_count

        result = analyze_symptoms("sometimes I feel anxious at work")

        assert total_keyword_count() == 79
        assert result.confidence == pytest.approx(100 / 79)

    def test_confidence_bounds(self):
        """Every category matched stays within [0, 95]."""
        from mindwell.utils.symptom_matcher import analyze_symptoms

        text = "anxious sad stressed tired headache confused alone"
        result = analyze_symptoms(text)

        assert len(result.symptoms) == 7
        assert 0.0 <= result.confidence <= 95.0


# =============================================================================
# ISSUE TYPE TESTS
# =============================================================================

class TestIssueType:
    """Tests for short-term vs long-term classification of text."""

    def test_long_term_indicator_only(self):
        from mindwell.utils.symptom_matcher import classify_issue_type

        assert classify_issue_type("I have felt this way for months").value == "long-term"

    def test_both_indicators_default_short_term(self):
        from mindwell.utils.symptom_matcher import classify_issue_type

        text = "This started recently but has lasted months"
        assert classify_issue_type(text).value == "short-term"

    def test_no_indicators_default_short_term(self):
        from mindwell.utils.symptom_matcher import classify_issue_type

        assert classify_issue_type("nothing specific here").value == "short-term"

    def test_explicit_duration_wins(self):
        """An explicit duration answer outranks the text."""
        from mindwell.utils.symptom_matcher import classify_issue_type

        assert classify_issue_type("for years and years", duration="recent").value == "short-term"
        assert classify_issue_type("it happened today", duration="2 years").value == "long-term"

    def test_unrecognised_duration_falls_back_to_text(self):
        from mindwell.utils.symptom_matcher import classify_issue_type

        assert classify_issue_type("this is chronic", duration="ongoing").value == "long-term"


# =============================================================================
# URGENCY TESTS
# =============================================================================

class TestUrgency:
    """Tests for the urgency decision table."""

    def test_crisis(self):
        from mindwell.utils.symptom_matcher import analyze_symptoms, assess_urgency

        analysis = analyze_symptoms("I want to die and can't cope anymore")
        assert assess_urgency(analysis).value == "crisis"

    def test_severe_is_high(self):
        from mindwell.utils.symptom_matcher import analyze_symptoms, assess_urgency

        analysis = analyze_symptoms("For months I have constantly felt on edge")
        assert assess_urgency(analysis).value == "high"

    def test_moderate_with_anxiety_is_medium(self):
        from mindwell.utils.symptom_matcher import analyze_symptoms, assess_urgency

        analysis = analyze_symptoms("I often feel nervous before meetings")
        assert analysis.severity.value == "moderate"
        assert assess_urgency(analysis).value == "medium"

    def test_moderate_without_anxiety_or_depression_is_low(self):
        from mindwell.models.classification import Severity, SymptomAnalysis
        from mindwell.utils.symptom_matcher import assess_urgency

        analysis = SymptomAnalysis(symptoms=["stress"], severity=Severity.MODERATE)
        assert assess_urgency(analysis).value == "low"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
