from __future__ import annotations

from typing import Dict, List

SYMPTOM_DISPLAY_NAMES: Dict[str, str] = {
    "anxiety": "Anxiety",
    "depression": "Depression",
    "stress": "Stress",
    "sleep": "Sleep Issues",
    "physical": "Physical Symptoms",
    "cognitive": "Concentration Issues",
    "social": "Social Concerns",
}


def format_symptom_for_display(symptom: str) -> str:
    if symptom in SYMPTOM_DISPLAY_NAMES:
        return SYMPTOM_DISPLAY_NAMES[symptom]
    return symptom[:1].upper() + symptom[1:]


def symptom_labels(symptoms: List[str]) -> List[str]:
    return [format_symptom_for_display(s) for s in symptoms]
