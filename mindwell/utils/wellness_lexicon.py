"""
Wellness Keyword Lexicon for MindWell
======================================
Fixed keyword tables used by the free-text symptom matcher.

Matching is plain substring containment on lower-cased text, so every
entry here is written lower-case. Declaration order matters:
- symptom categories are reported in the order declared below
- severity tiers are scanned mild -> crisis and the last matching tier wins
"""

from __future__ import annotations
from typing import Dict, List


# =============================================================================
# SYMPTOM CATEGORIES
# =============================================================================
SYMPTOM_KEYWORDS: Dict[str, List[str]] = {
    "anxiety": [
        "anxious",
        "worried",
        "nervous",
        "panic",
        "fear",
        "scared",
        "restless",
        "jittery",
        "on edge",
        "tense",
        "apprehensive",
        "uneasy",
        "dread",
    ],
    "depression": [
        "sad",
        "depressed",
        "down",
        "hopeless",
        "empty",
        "worthless",
        "guilty",
        "numb",
        "lonely",
        "isolated",
        "meaningless",
        "dark",
        "heavy",
    ],
    "stress": [
        "stressed",
        "overwhelmed",
        "pressure",
        "burden",
        "exhausted",
        "burned out",
        "overloaded",
        "stretched",
        "strained",
        "frazzled",
        "swamped",
    ],
    "sleep": [
        "insomnia",
        "sleepless",
        "tired",
        "fatigue",
        "restless sleep",
        "nightmares",
        "wake up",
        "can't sleep",
        "sleep problems",
        "drowsy",
        "exhausted",
    ],
    "physical": [
        "headache",
        "tension",
        "pain",
        "ache",
        "tight",
        "sore",
        "stomach",
        "nausea",
        "dizzy",
        "breathless",
        "heart racing",
        "sweating",
    ],
    "cognitive": [
        "focus",
        "concentrate",
        "memory",
        "confused",
        "foggy",
        "distracted",
        "forgetful",
        "unclear",
        "scattered",
        "racing thoughts",
    ],
    "social": [
        "isolated",
        "alone",
        "withdrawn",
        "avoid people",
        "social anxiety",
        "relationships",
        "family problems",
        "conflict",
        "misunderstood",
    ],
}

# Categories that also describe the user's emotional state
EMOTIONAL_CATEGORIES = ("anxiety", "depression", "stress")

# =============================================================================
# CRISIS INDICATORS
# =============================================================================
# Any match forces crisis severity regardless of other indicators
CRISIS_KEYWORDS: List[str] = [
    "suicide",
    "kill myself",
    "end it all",
    "no point living",
    "better off dead",
    "self harm",
    "hurt myself",
    "can't go on",
    "want to die",
    "hopeless",
]

# =============================================================================
# SEVERITY INDICATORS (scan order: mild, moderate, severe, crisis)
# =============================================================================
SEVERITY_INDICATORS: Dict[str, List[str]] = {
    "mild": ["sometimes", "occasionally", "manageable", "slight", "minor"],
    "moderate": ["often", "regularly", "affecting", "difficult", "struggling"],
    "severe": ["always", "constantly", "unbearable", "can't function", "overwhelming"],
    "crisis": ["can't cope", "desperate", "emergency", "immediate help", "crisis"],
}

# =============================================================================
# DURATION INDICATORS
# =============================================================================
DURATION_INDICATORS: Dict[str, List[str]] = {
    "short_term": ["today", "yesterday", "this week", "recently", "sudden", "new"],
    "long_term": ["months", "years", "always", "chronic", "ongoing", "persistent"],
}

COMMON_TRIGGERS: List[str] = ["work", "family", "relationship", "money", "health", "school"]


def total_keyword_count() -> int:
    """Number of entries across every symptom list, duplicates included."""
    return sum(len(words) for words in SYMPTOM_KEYWORDS.values())


def find_matches(text_lower: str, keywords: List[str]) -> List[str]:
    """Return keywords contained in the already lower-cased text, in list order."""
    return [keyword for keyword in keywords if keyword in text_lower]


def contains_any(text_lower: str, keywords: List[str]) -> bool:
    for keyword in keywords:
        if keyword in text_lower:
            return True
    return False
