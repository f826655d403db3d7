"""Point-based scoring of the multiple-choice questionnaires."""
from __future__ import annotations

from typing import List, Mapping, Optional

from mindwell.models.classification import AnswerScores, AssessmentUrgency, IssueType

SHORT_TERM_IMPACT = {"minimal", "some"}
SHORT_TERM_EPISODES = {"never", "rarely"}
WEAK_SUPPORT = {"none", "limited"}

# Unsure triage: (question id, answer that counts toward long-term)
UNSURE_LONG_TERM_SIGNALS = [
    ("duration", "yes"),
    ("pattern", "constant"),
    ("first_time", "no"),
]
UNSURE_LONG_TERM_THRESHOLD = 2


def score_answers(answers: Mapping[str, Optional[str]]) -> AnswerScores:
    """Tally short-term and long-term points for the five classification questions.

    Unanswered duration, impact and episodes questions fall through to their
    long-term branch.
    """
    short_term = 0
    long_term = 0

    duration = answers.get("duration")
    if duration == "recent":
        short_term += 2
    elif duration == "weeks":
        short_term += 1
    else:
        long_term += 2

    if answers.get("impact") in SHORT_TERM_IMPACT:
        short_term += 1
    else:
        long_term += 2

    if answers.get("episodes") in SHORT_TERM_EPISODES:
        short_term += 1
    else:
        long_term += 2

    severity = answers.get("severity")
    if severity == "crisis":
        long_term += 3
    elif severity == "mild":
        short_term += 1

    if answers.get("support") in WEAK_SUPPORT:
        long_term += 1

    return AnswerScores(short_term=short_term, long_term=long_term)


def analyze_answers(answers: Mapping[str, Optional[str]]) -> IssueType:
    return score_answers(answers).issue_type


def score_unsure_answers(answers: Mapping[str, List[str]]) -> int:
    tally = 0
    for question_id, long_term_value in UNSURE_LONG_TERM_SIGNALS:
        if long_term_value in (answers.get(question_id) or []):
            tally += 1
    return tally


def analyze_unsure_answers(answers: Mapping[str, List[str]]) -> IssueType:
    if score_unsure_answers(answers) >= UNSURE_LONG_TERM_THRESHOLD:
        return IssueType.LONG_TERM
    return IssueType.SHORT_TERM


def assessment_urgency(answers: Mapping[str, Optional[str]]) -> AssessmentUrgency:
    """Urgency for the long-term assessment from severity and duration bucket."""
    severity = answers.get("severity")
    duration = answers.get("duration") or ""
    if severity == "crisis":
        return AssessmentUrgency.CRISIS
    if severity == "severe":
        return AssessmentUrgency.HIGH
    if severity == "moderate" and "2+" in duration:
        return AssessmentUrgency.MODERATE
    return AssessmentUrgency.STANDARD
