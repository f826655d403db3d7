"""
Static catalogs for recommendations and helpline resources.

All records are hand-authored; nothing here is generated at runtime.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from mindwell.models.catalog import (
    Difficulty,
    PlanItem,
    Practice,
    PracticeCategory,
    Remedy,
    RemedyCategory,
    Resource,
    ResourceCost,
    ResourceType,
)


class PracticeNotFoundError(LookupError):
    """Raised when an identifier has no record in the practice catalog."""

    def __init__(self, practice_id: str):
        super().__init__(f"No practice mapped for id '{practice_id}'")
        self.practice_id = practice_id


class RemedyNotFoundError(LookupError):
    """Raised when an identifier has no record in the short-term remedy catalog."""

    def __init__(self, remedy_id: str):
        super().__init__(f"No remedy mapped for id '{remedy_id}'")
        self.remedy_id = remedy_id


# =============================================================================
# IKS PRACTICES
# =============================================================================
IKS_PRACTICES: List[Practice] = [
    Practice(
        id="nadi-shodhana",
        title="Nadi Shodhana (Alternate Nostril Breathing)",
        category=PracticeCategory.PRANAYAMA,
        description="Balancing pranayama technique that harmonizes the nervous system",
        instructions=[
            "Sit comfortably with spine straight",
            "Use right thumb to close right nostril",
            "Inhale through left nostril for 4 counts",
            "Close left nostril with ring finger, release thumb",
            "Exhale through right nostril for 4 counts",
            "Inhale through right nostril",
            "Close right nostril, release left",
            "Exhale through left nostril",
            "This completes one round - repeat 5-10 times",
        ],
        benefits=["Balances nervous system", "Reduces anxiety", "Improves focus", "Calms mind"],
        duration="10-15 minutes",
        difficulty=Difficulty.BEGINNER,
    ),
    Practice(
        id="bhramari",
        title="Bhramari Pranayama (Humming Bee Breath)",
        category=PracticeCategory.PRANAYAMA,
        description="Calming breathing technique that soothes the nervous system",
        instructions=[
            "Sit comfortably with eyes closed",
            "Place thumbs in ears, index fingers above eyebrows",
            "Place remaining fingers over closed eyes",
            "Take deep breath in",
            "Exhale making humming sound like a bee",
            "Feel vibrations in head and chest",
            "Repeat 5-10 times",
        ],
        benefits=["Reduces stress", "Calms anxiety", "Improves concentration", "Relieves tension"],
        duration="5-10 minutes",
        difficulty=Difficulty.BEGINNER,
    ),
    Practice(
        id="child-pose",
        title="Balasana (Child's Pose)",
        category=PracticeCategory.YOGA,
        description="Restorative pose that calms the mind and relieves stress",
        instructions=[
            "Kneel on floor with big toes touching",
            "Sit back on heels",
            "Separate knees hip-width apart",
            "Fold forward, extending arms in front",
            "Rest forehead on ground",
            "Breathe deeply and hold for 1-5 minutes",
        ],
        benefits=["Calms nervous system", "Relieves back tension", "Promotes introspection"],
        duration="3-5 minutes",
        difficulty=Difficulty.BEGINNER,
    ),
    Practice(
        id="legs-up-wall",
        title="Viparita Karani (Legs Up the Wall)",
        category=PracticeCategory.YOGA,
        description="Gentle inversion that promotes relaxation and reduces anxiety",
        instructions=[
            "Lie on back near a wall",
            "Extend legs up the wall",
            "Arms relaxed by sides",
            "Close eyes and breathe naturally",
            "Hold for 5-15 minutes",
            "Focus on breath and body sensations",
        ],
        benefits=["Reduces anxiety", "Improves circulation", "Calms nervous system", "Relieves fatigue"],
        duration="10-15 minutes",
        difficulty=Difficulty.BEGINNER,
    ),
    Practice(
        id="ashwagandha",
        title="Ashwagandha Supplementation",
        category=PracticeCategory.AYURVEDA,
        description="Adaptogenic herb that helps manage stress and anxiety",
        instructions=[
            "Consult with qualified Ayurvedic practitioner",
            "Typical dose: 300-600mg daily",
            "Best taken with warm milk or water",
            "Take consistently for 4-6 weeks",
            "Monitor effects and adjust as needed",
        ],
        benefits=["Reduces cortisol levels", "Manages stress", "Improves sleep", "Boosts energy"],
        duration="Daily supplementation",
        difficulty=Difficulty.BEGINNER,
        contraindications=["Pregnancy", "Autoimmune conditions", "Thyroid disorders"],
    ),
    Practice(
        id="brahmi",
        title="Brahmi (Bacopa Monnieri)",
        category=PracticeCategory.AYURVEDA,
        description="Cognitive enhancing herb that supports mental clarity and reduces anxiety",
        instructions=[
            "Consult Ayurvedic practitioner for proper dosage",
            "Typically 300-600mg daily",
            "Take with meals to avoid stomach upset",
            "Use consistently for 8-12 weeks for best results",
            "Can be taken as powder, capsule, or tea",
        ],
        benefits=["Improves memory", "Reduces anxiety", "Enhances cognitive function", "Supports nervous system"],
        duration="Daily supplementation",
        difficulty=Difficulty.BEGINNER,
        contraindications=["Pregnancy", "Breastfeeding", "Slow heart rate"],
    ),
    Practice(
        id="yoga-nidra",
        title="Yoga Nidra (Yogic Sleep)",
        category=PracticeCategory.MEDITATION,
        description="Deep relaxation practice that promotes healing and reduces stress",
        instructions=[
            "Lie down comfortably on back",
            "Close eyes and relax entire body",
            "Follow guided instructions for body awareness",
            "Set positive intention (sankalpa)",
            "Systematically relax each body part",
            "Remain aware but deeply relaxed",
            "End with gentle movement and opening eyes",
        ],
        benefits=["Deep relaxation", "Reduces PTSD symptoms", "Improves sleep", "Releases trauma"],
        duration="20-45 minutes",
        difficulty=Difficulty.BEGINNER,
    ),
    Practice(
        id="trataka",
        title="Trataka (Candle Gazing Meditation)",
        category=PracticeCategory.MEDITATION,
        description="Concentration practice that calms the mind and improves focus",
        instructions=[
            "Sit comfortably 3-4 feet from lit candle",
            "Gaze steadily at candle flame",
            "Blink naturally, don't strain eyes",
            "When eyes water, close them",
            "Visualize flame in mind's eye",
            "Open eyes and repeat",
            "Practice for 10-20 minutes",
        ],
        benefits=["Improves concentration", "Calms mind", "Reduces mental chatter", "Enhances willpower"],
        duration="10-20 minutes",
        difficulty=Difficulty.INTERMEDIATE,
    ),
    Practice(
        id="dinacharya",
        title="Dinacharya (Daily Routine)",
        category=PracticeCategory.LIFESTYLE,
        description="Ayurvedic daily routine that promotes balance and well-being",
        instructions=[
            "Wake up before sunrise (5-6 AM)",
            "Drink warm water upon waking",
            "Practice meditation or pranayama",
            "Exercise or yoga practice",
            "Eat largest meal at midday",
            "Wind down activities after sunset",
            "Sleep by 10 PM for optimal rest",
        ],
        benefits=["Balances doshas", "Improves digestion", "Enhances energy", "Promotes mental clarity"],
        duration="Daily practice",
        difficulty=Difficulty.INTERMEDIATE,
    ),
]

_PRACTICES_BY_ID: Dict[str, Practice] = {p.id: p for p in IKS_PRACTICES}


# =============================================================================
# SHORT-TERM REMEDIES
# =============================================================================
SHORT_TERM_REMEDIES: List[Remedy] = [
    Remedy(
        id="box-breathing",
        title="Box Breathing (Sama Vritti)",
        category=RemedyCategory.BREATHING,
        duration="5-10 minutes",
        description="A calming pranayama technique that balances the nervous system",
        instructions=[
            "Sit comfortably with your spine straight",
            "Inhale slowly for 4 counts",
            "Hold your breath for 4 counts",
            "Exhale slowly for 4 counts",
            "Hold empty for 4 counts",
            "Repeat for 5-10 cycles",
        ],
        benefits=["Reduces anxiety", "Improves focus", "Calms mind"],
    ),
    Remedy(
        id="body-scan",
        title="Progressive Body Scan",
        category=RemedyCategory.MEDITATION,
        duration="10-15 minutes",
        description="Mindful awareness practice to release tension and stress",
        instructions=[
            "Lie down or sit comfortably",
            "Close your eyes and take 3 deep breaths",
            "Start from your toes, notice any sensations",
            "Slowly move attention up through each body part",
            "Breathe into areas of tension",
            "End at the crown of your head",
        ],
        benefits=["Releases physical tension", "Promotes relaxation", "Increases body awareness"],
    ),
    Remedy(
        id="child-pose",
        title="Balasana (Child's Pose)",
        category=RemedyCategory.YOGA,
        duration="3-5 minutes",
        description="A gentle resting pose that calms the mind and relieves stress",
        instructions=[
            "Kneel on the floor with big toes touching",
            "Sit back on your heels",
            "Separate knees about hip-width apart",
            "Fold forward, extending arms in front",
            "Rest forehead on the ground",
            "Breathe deeply and hold",
        ],
        benefits=["Calms nervous system", "Relieves back tension", "Promotes introspection"],
    ),
    Remedy(
        id="chamomile-tea",
        title="Chamomile Tea Ritual",
        category=RemedyCategory.HERBAL,
        duration="15-20 minutes",
        description="A soothing herbal remedy with mindful preparation",
        instructions=[
            "Boil water mindfully, focusing on the sound",
            "Add 1-2 tsp dried chamomile or 1 tea bag",
            "Steep for 5-7 minutes",
            "Hold the warm cup in both hands",
            "Inhale the gentle aroma deeply",
            "Sip slowly with full attention",
        ],
        benefits=["Natural relaxation", "Digestive comfort", "Mindful ritual"],
    ),
    Remedy(
        id="grounding-54321",
        title="5-4-3-2-1 Grounding",
        category=RemedyCategory.MINDFULNESS,
        duration="5-10 minutes",
        description="A sensory awareness technique to anchor you in the present moment",
        instructions=[
            "Notice 5 things you can see around you",
            "Notice 4 things you can touch or feel",
            "Notice 3 things you can hear",
            "Notice 2 things you can smell",
            "Notice 1 thing you can taste",
            "Take 3 deep breaths to complete",
        ],
        benefits=["Reduces overwhelm", "Increases present-moment awareness", "Calms racing thoughts"],
    ),
]

_REMEDIES_BY_ID: Dict[str, Remedy] = {r.id: r for r in SHORT_TERM_REMEDIES}


# =============================================================================
# HELPLINES & SERVICES
# =============================================================================
RESOURCES: List[Resource] = [
    Resource(
        id="crisis-helpline",
        title="National Mental Health Crisis Helpline",
        type=ResourceType.CRISIS,
        description="24/7 immediate crisis support and suicide prevention",
        contact="1800-599-0019",
        cost=ResourceCost.FREE,
        availability="24/7",
    ),
    Resource(
        id="vandrevala",
        title="Vandrevala Foundation Helpline",
        type=ResourceType.CRISIS,
        description="Free 24/7 mental health support in multiple languages",
        contact="1860-2662-345",
        cost=ResourceCost.FREE,
        availability="24/7",
    ),
    Resource(
        id="kiran-helpline",
        title="KIRAN Mental Health Helpline",
        type=ResourceType.CRISIS,
        description="Government of India's 24/7 mental health support",
        contact="1800-599-0019",
        cost=ResourceCost.FREE,
        availability="24/7",
    ),
    Resource(
        id="sneha-helpline",
        title="SNEHA Suicide Prevention",
        type=ResourceType.NGO,
        description="Chennai-based suicide prevention and emotional support",
        contact="044-2464-0050",
        cost=ResourceCost.FREE,
        availability="24/7",
    ),
    Resource(
        id="aasra",
        title="Aasra Suicide Prevention",
        type=ResourceType.NGO,
        description="Mumbai-based crisis intervention and suicide prevention",
        contact="022-2754-6669",
        cost=ResourceCost.FREE,
        availability="24/7",
    ),
    Resource(
        id="parivarthan",
        title="Parivarthan Counselling",
        type=ResourceType.NGO,
        description="Bangalore-based free counselling services",
        contact="080-2549-7777",
        cost=ResourceCost.FREE,
        availability="Mon-Sat, 10 AM - 6 PM",
    ),
    Resource(
        id="nimhans",
        title="NIMHANS Tele-counseling",
        type=ResourceType.PROFESSIONAL,
        description="Professional psychiatric consultation and therapy",
        contact="080-4611-0007",
        website="nimhans.ac.in",
        cost=ResourceCost.LOW_COST,
        availability="Mon-Sat, 9 AM - 5 PM",
    ),
    Resource(
        id="mpower",
        title="MPower Mental Health Services",
        type=ResourceType.NGO,
        description="Affordable counseling and therapy services",
        website="mpowerminds.com",
        cost=ResourceCost.VARIES,
        availability="By appointment",
    ),
    Resource(
        id="ayurvedic-consultation",
        title="Ayurvedic Mental Health Consultation",
        type=ResourceType.IKS,
        description="Traditional Ayurvedic approach to mental wellness",
        cost=ResourceCost.VARIES,
        availability="By appointment",
    ),
    Resource(
        id="yoga-therapy",
        title="Certified Yoga Therapy Programs",
        type=ResourceType.IKS,
        description="Structured yoga therapy for mental health conditions",
        cost=ResourceCost.LOW_COST,
        availability="Group sessions available",
    ),
]


# =============================================================================
# LONG-TERM IKS PLAN
# =============================================================================
IKS_PLANS: Dict[str, List[PlanItem]] = {
    "depression": [
        PlanItem("Surya Namaskara (Sun Salutation)", "Daily morning practice to boost energy and mood", "Daily, 15-20 minutes"),
        PlanItem("Brahmi and Ashwagandha", "Herbal supplements for mental clarity and mood balance", "As per Ayurvedic consultation"),
    ],
    "anxiety": [
        PlanItem("Nadi Shodhana (Alternate Nostril Breathing)", "Balancing pranayama for nervous system regulation", "Twice daily, 10-15 minutes"),
        PlanItem("Jatamansi and Shankhpushpi", "Calming herbs for anxiety and restlessness", "As per Ayurvedic consultation"),
    ],
    "sleep": [
        PlanItem("Yoga Nidra", "Deep relaxation practice for better sleep", "Before bedtime, 20-30 minutes"),
        PlanItem("Warm milk with nutmeg", "Traditional Ayurvedic sleep remedy", "30 minutes before bed"),
    ],
}

GENERAL_PLAN_ITEM = PlanItem(
    "Dinacharya (Daily Routine)",
    "Structured daily routine aligned with natural rhythms",
    "Daily practice",
)


# =============================================================================
# CULTURAL CONTEXT
# =============================================================================
CULTURAL_CONTEXTS: Dict[str, str] = {
    PracticeCategory.PRANAYAMA.value: "प्राणायाम - Ancient breathing practices from yoga tradition for mental balance",
    PracticeCategory.YOGA.value: "योग - Physical postures that unite body and mind for holistic wellness",
    PracticeCategory.AYURVEDA.value: "आयुर्वेद - Traditional Indian medicine focusing on natural healing",
    PracticeCategory.MEDITATION.value: "ध्यान - Contemplative practices for inner peace and mental clarity",
    PracticeCategory.LIFESTYLE.value: "जीवनशैली - Daily routines aligned with natural rhythms",
}
DEFAULT_CULTURAL_CONTEXT = "Traditional wellness practice"


def get_practice(practice_id: str) -> Practice:
    practice = _PRACTICES_BY_ID.get(practice_id)
    if practice is None:
        raise PracticeNotFoundError(practice_id)
    return practice


def list_practices(category: Optional[PracticeCategory] = None) -> List[Practice]:
    if category is None:
        return list(IKS_PRACTICES)
    return [p for p in IKS_PRACTICES if p.category == category]


def get_remedy(remedy_id: str) -> Remedy:
    remedy = _REMEDIES_BY_ID.get(remedy_id)
    if remedy is None:
        raise RemedyNotFoundError(remedy_id)
    return remedy


def list_resources(resource_type: Optional[ResourceType] = None) -> List[Resource]:
    if resource_type is None:
        return list(RESOURCES)
    return [r for r in RESOURCES if r.type == resource_type]


def get_cultural_context(category: str) -> str:
    return CULTURAL_CONTEXTS.get(category, DEFAULT_CULTURAL_CONTEXT)
