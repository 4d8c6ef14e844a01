"""
Coping strategy catalog.

Seed content for the strategy library plus the read-only catalog that answers
category / intensity / mood queries over it. The catalog is built once from
STRATEGY_SEEDS and never mutated; construct it explicitly and pass it to the
recommendation engine (tests build their own with controlled seed data).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from resilientme.config.logger import app_logger
from resilientme.models.strategy import StrategyCategory, StrategyIntensity, StrategyRecord
from resilientme.services.category_mapping import normalize


# ════════════════════════════════════════════════════════════════════════════
# SEED CONTENT
# Categories are written as the library labels and normalised on load.
# ════════════════════════════════════════════════════════════════════════════

STRATEGY_SEEDS: List[Dict[str, Any]] = [
    # MINDFULNESS
    {
        "id": "grounding-5-4-3-2-1",
        "title": "Grounding with 5-4-3-2-1",
        "description": "Use your senses to anchor yourself in the present moment and reduce overwhelming emotions.",
        "time_to_complete": "2-5 minutes",
        "steps": [
            "Find a comfortable position and take a deep breath.",
            "Name 5 things you can SEE around you.",
            "Name 4 things you can FEEL/TOUCH (texture of your clothes, air on skin).",
            "Name 3 things you can HEAR right now.",
            "Name 2 things you can SMELL (or like to smell).",
            "Name 1 thing you can TASTE (or like to taste).",
        ],
        "category": "Mindfulness",
        "mood_targets": ["Anxious", "Overwhelmed", "Stressed", "Panicked"],
        "intensity": "quick",
        "resources": ["https://www.mayoclinic.org/healthy-lifestyle/consumer-health/in-depth/mindfulness-exercises/art-20046356"],
    },
    {
        "id": "box-breathing",
        "title": "Box Breathing Technique",
        "description": "Control your breathing pattern to activate your parasympathetic nervous system and reduce anxiety.",
        "time_to_complete": "3-5 minutes",
        "steps": [
            "Sit comfortably with your back supported.",
            "Breathe in slowly through your nose for 4 counts.",
            "Hold your breath for 4 counts.",
            "Exhale slowly through your mouth for 4 counts.",
            "Hold your breath for 4 counts.",
            "Repeat for at least 4 cycles.",
        ],
        "category": "Mindfulness",
        "mood_targets": ["Anxious", "Stressed", "Angry", "Overwhelmed"],
        "intensity": "quick",
    },
    {
        "id": "emotion-naming",
        "title": "Emotion Naming",
        "description": "Identify and name your emotions specifically. Naming feelings reduces their intensity.",
        "time_to_complete": "Under 2 minutes",
        "steps": [
            "Pause and notice what you are feeling right now.",
            "Name the emotion as precisely as you can (e.g. 'embarrassed' rather than 'bad').",
            "Say or write: 'I notice I am feeling ...'.",
            "Rate its strength from 1 to 10 and notice whether naming it shifts that number.",
        ],
        "category": "Mindfulness",
        "mood_targets": ["Overwhelmed", "Confused", "Angry", "Anxious"],
        "intensity": "quick",
    },
    {
        "id": "body-scan",
        "title": "Body Scan Meditation",
        "description": "Progressively focus attention on different parts of your body to release tension and increase awareness.",
        "time_to_complete": "10-15 minutes",
        "steps": [
            "Lie down or sit comfortably and close your eyes.",
            "Begin by bringing awareness to your breathing.",
            "Gradually direct attention to your feet, noticing any sensations.",
            "Slowly move attention upward (ankles, calves, knees...) through your entire body.",
            "For each area, notice sensations without judgment.",
            "If you notice tension, breathe into that area and imagine releasing it.",
            "Complete the scan at the top of your head.",
        ],
        "category": "Mindfulness",
        "mood_targets": ["Anxious", "Stressed", "Tense", "Sad"],
        "intensity": "moderate",
    },
    # COGNITIVE
    {
        "id": "thought-challenge",
        "title": "Thought Challenge",
        "description": "Identify and reframe negative thoughts contributing to difficult emotions.",
        "time_to_complete": "10-15 minutes",
        "steps": [
            "Write down the negative thought causing distress (e.g., 'I'll never succeed').",
            "Rate how strongly you believe it (0-100%).",
            "Identify evidence that supports this thought.",
            "List evidence that contradicts or doesn't support the thought.",
            "Write a more balanced alternative thought.",
            "Rate your belief in the new thought and notice feeling changes.",
        ],
        "category": "Cognitive",
        "mood_targets": ["Sad", "Anxious", "Disappointed", "Rejected"],
        "intensity": "moderate",
    },
    {
        "id": "rain-for-rejection",
        "title": "RAIN for Dealing with Rejection",
        "description": "Process rejection feelings methodically to reduce their power over you.",
        "time_to_complete": "5-10 minutes",
        "steps": [
            "R - Recognize the feelings of rejection without judgment.",
            "A - Allow the experience to be there, just as it is.",
            "I - Investigate with kindness how it feels in your body and mind.",
            "N - Non-identification: These feelings are temporary, not your identity.",
        ],
        "category": "Cognitive",
        "mood_targets": ["Rejected", "Disappointed", "Hurt", "Sad"],
        "intensity": "quick",
    },
    {
        "id": "growth-from-rejection",
        "title": "Growth from Rejection",
        "description": "Transform rejection into a learning opportunity using a structured reflection.",
        "time_to_complete": "15-20 minutes",
        "steps": [
            "Write about the rejection experience objectively.",
            "List three things you can learn from this experience.",
            "Identify aspects within your control vs. outside your control.",
            "Write how this experience might benefit you in the future.",
            "Set one small action step to move forward.",
        ],
        "category": "Cognitive",
        "mood_targets": ["Rejected", "Disappointed", "Frustrated"],
        "intensity": "moderate",
    },
    {
        "id": "rejection-reframe",
        "title": "Rejection Reframe",
        "description": "List three possible alternative explanations for the rejection that don't involve your worth or abilities.",
        "time_to_complete": "3-5 minutes",
        "steps": [
            "Write one sentence describing what happened.",
            "List three explanations that have nothing to do with your worth.",
            "Circle the explanation that feels most plausible.",
        ],
        "category": "Cognitive",
        "mood_targets": ["Rejected", "Inadequate", "Doubtful"],
        "intensity": "quick",
    },
    {
        "id": "growth-mindset-development",
        "title": "Growth Mindset Development",
        "description": "Cultivate a perspective that sees challenges and rejection as opportunities to grow.",
        "time_to_complete": "30+ minutes",
        "steps": [
            "Catch yourself using fixed mindset language ('I'm not good at this').",
            "Replace with growth mindset alternatives ('I'm still learning this').",
            "Add 'yet' to end of limiting statements ('I haven't mastered this skill yet').",
            "Keep a daily log of challenges and what you learned from them.",
            "Celebrate effort and process rather than just outcomes.",
            "Create a personal mantra that reinforces growth through challenges.",
        ],
        "category": "Cognitive",
        "mood_targets": ["Anxious", "Rejected", "Inadequate", "Disappointed"],
        "intensity": "intensive",
        "tips": ["Revisit your log weekly to see how challenges turned into lessons."],
    },
    # PHYSICAL
    {
        "id": "movement-and-music",
        "title": "Movement and Music Boost",
        "description": "Combine physical movement with music to shift your emotional state quickly.",
        "time_to_complete": "5-10 minutes",
        "steps": [
            "Choose an uplifting or energizing song.",
            "Play the music and allow yourself to move freely.",
            "Dance, jump, or simply sway - no right or wrong way.",
            "Focus on the music and sensations in your body.",
            "Continue until the song ends, then notice how you feel.",
        ],
        "category": "Physical",
        "mood_targets": ["Sad", "Lethargic", "Stressed", "Anxious"],
        "intensity": "quick",
    },
    {
        "id": "physical-reset",
        "title": "Physical Reset",
        "description": "Do 10 jumping jacks, 10 squats, or dance to your favorite song. Physical movement releases tension and anxiety.",
        "time_to_complete": "2-5 minutes",
        "steps": [
            "Stand up and shake out your arms and legs.",
            "Do 10 jumping jacks.",
            "Do 10 squats at a comfortable pace.",
            "Finish with three slow, deep breaths.",
        ],
        "category": "Physical",
        "mood_targets": ["Angry", "Frustrated", "Tense", "Anxious"],
        "intensity": "quick",
    },
    {
        "id": "progressive-muscle-relaxation",
        "title": "Progressive Muscle Relaxation",
        "description": "Systematically tense and release muscle groups to reduce physical tension.",
        "time_to_complete": "10-15 minutes",
        "steps": [
            "Find a quiet, comfortable place to sit or lie down.",
            "Start with your feet: tense the muscles for 5 seconds, then release.",
            "Work your way up through each muscle group (calves, thighs, abdomen, etc.).",
            "For each area, focus on the contrast between tension and relaxation.",
            "End with facial muscles (jaw, forehead).",
            "When complete, notice the overall sensation of relaxation.",
        ],
        "category": "Physical",
        "mood_targets": ["Anxious", "Tense", "Stressed", "Angry"],
        "intensity": "moderate",
    },
    {
        "id": "digital-detox",
        "title": "Digital Detox",
        "description": "Take a 30-minute break from all screens. Go for a walk, journal, or connect with someone in person.",
        "time_to_complete": "30+ minutes",
        "steps": [
            "Put your phone on do-not-disturb and leave it in another room.",
            "Step outside for a walk, or find a quiet spot without screens.",
            "Notice the urge to check your phone and let it pass.",
            "Spend the rest of the time on something offline you enjoy.",
        ],
        "category": "Physical",
        "mood_targets": ["Overwhelmed", "Anxious", "Rejected", "Stressed"],
        "intensity": "intensive",
    },
    # SOCIAL
    {
        "id": "connection-quick-chat",
        "title": "Connection Quick-Chat",
        "description": "Reach out to a supportive person for a brief conversation to counter feelings of rejection.",
        "time_to_complete": "5-15 minutes",
        "steps": [
            "Identify someone supportive in your life.",
            "Send a message or make a call with a specific timeframe (e.g., \"Do you have 5 minutes to chat?\").",
            "Share briefly how you're feeling without dwelling.",
            "Listen to their perspective or simply enjoy the connection.",
            "Express gratitude for their time and support.",
        ],
        "category": "Social",
        "mood_targets": ["Lonely", "Rejected", "Sad", "Isolated"],
        "intensity": "quick",
    },
    {
        "id": "rejection-experience-sharing",
        "title": "Rejection Experience Sharing",
        "description": "Connect with others through shared experiences of rejection for perspective and support.",
        "time_to_complete": "Varies",
        "steps": [
            "Identify a trusted friend or join a support group/forum.",
            "Share your rejection experience honestly.",
            "Ask others about their similar experiences.",
            "Listen for how they coped with and grew from rejection.",
            "Note insights that shift your perspective on your own situation.",
        ],
        "category": "Social",
        "mood_targets": ["Rejected", "Embarrassed", "Inadequate"],
        "intensity": "moderate",
    },
    {
        "id": "assertiveness-training",
        "title": "Assertiveness Training",
        "description": "Build skills to express your needs and boundaries respectfully.",
        "time_to_complete": "15-20 minutes practice sessions",
        "steps": [
            "Identify situations where you'd like to be more assertive.",
            "Use the format: 'I feel [emotion] when [situation]. I need [specific request].'",
            "Practice your assertive statements aloud or in writing.",
            "Role-play difficult conversations with a trusted person or in the mirror.",
            "Start with lower-pressure situations and work up to more challenging ones.",
            "Celebrate your assertiveness efforts regardless of outcome.",
        ],
        "category": "Social",
        "mood_targets": ["Frustrated", "Angry", "Rejected", "Lonely"],
        "intensity": "intensive",
    },
    # CREATIVE
    {
        "id": "visualization-safe-place",
        "title": "Visualization Safe Place",
        "description": "Create a mental sanctuary where you feel safe, confident and accepted.",
        "time_to_complete": "5-10 minutes",
        "steps": [
            "Close your eyes and take several deep breaths.",
            "Imagine a place where you feel completely safe and accepted.",
            "Build details: What do you see? Hear? Smell? Feel?",
            "Imagine supportive figures or memories in this space.",
            "When the image is clear, affirm: \"This is my inner safe place.\"",
            "Return to this place whenever rejection feelings arise.",
        ],
        "category": "Creative",
        "mood_targets": ["Anxious", "Rejected", "Unsafe", "Threatened"],
        "intensity": "quick",
    },
    {
        "id": "expressive-writing",
        "title": "Expressive Writing",
        "description": "Process emotions through structured writing to gain clarity and release.",
        "time_to_complete": "15-20 minutes",
        "steps": [
            "Find a private space with no distractions.",
            "Write continuously for 15-20 minutes about your deepest thoughts and feelings.",
            "Don't worry about grammar, spelling, or structure - just express.",
            "Focus especially on how the rejection experience connects to past experiences.",
            "After writing, you can either keep or destroy the writing.",
            "Reflect on any insights gained.",
        ],
        "category": "Creative",
        "mood_targets": ["Confused", "Sad", "Angry", "Anxious", "Rejected"],
        "intensity": "moderate",
    },
    {
        "id": "future-self-letter",
        "title": "Future Self Letter",
        "description": "Write a letter from your future self who has moved past this rejection. What wisdom would they share?",
        "time_to_complete": "30+ minutes",
        "steps": [
            "Picture yourself a year from now, past this experience.",
            "Write a letter from that future self to who you are today.",
            "Include what they learned and what they are grateful for.",
            "Read the letter aloud and keep it somewhere you can return to.",
        ],
        "category": "Creative",
        "mood_targets": ["Rejected", "Disappointed", "Hopeless", "Sad"],
        "intensity": "intensive",
    },
    # SELF-CARE
    {
        "id": "self-compassion-break",
        "title": "Self-Compassion Break",
        "description": "Apply the three components of self-compassion to difficult emotions.",
        "time_to_complete": "3-5 minutes",
        "steps": [
            "Notice your suffering: \"This is a moment of difficulty.\"",
            "Acknowledge shared humanity: \"Difficulty is part of life; many others feel this way.\"",
            "Offer yourself kindness: Place hands over heart and say, \"May I be kind to myself right now.\"",
            "Take several breaths, feeling the warmth of your hands and your care for yourself.",
        ],
        "category": "Self-Care",
        "mood_targets": ["Any"],
        "intensity": "quick",
    },
    {
        "id": "achievements-quick-list",
        "title": "Achievements Quick-List",
        "description": "Counter rejection by reminding yourself of past successes and strengths.",
        "time_to_complete": "5-10 minutes",
        "steps": [
            "Take out paper or open a note app.",
            "Quickly list 10 achievements you're proud of (big or small).",
            "For each, note one strength or quality it demonstrates.",
            "Choose one achievement that feels most meaningful right now.",
            "Spend a moment fully recalling how it felt to succeed in that instance.",
        ],
        "category": "Self-Care",
        "mood_targets": ["Inadequate", "Disappointed", "Rejected", "Doubtful"],
        "intensity": "quick",
    },
    {
        "id": "soothing-ritual",
        "title": "Soothing Ritual",
        "description": "Create a brief, sensory-rich ritual to comfort yourself during difficult emotions.",
        "time_to_complete": "5-15 minutes",
        "steps": [
            "Choose 2-3 sensory comforts (e.g., warm tea, soft blanket, calming music).",
            "Find a quiet space where you won't be disturbed.",
            "Set a timer for your chosen duration.",
            "Engage with your comfort items mindfully, focusing on sensations.",
            "If difficult thoughts arise, gently return focus to sensory experiences.",
            "Before ending, acknowledge this act of self-care.",
        ],
        "category": "Self-Care",
        "mood_targets": ["Sad", "Lonely", "Disappointed", "Overwhelmed"],
        "intensity": "moderate",
    },
    {
        "id": "value-alignment",
        "title": "Value Alignment",
        "description": "Identify one personal value you can honor today, regardless of external validation.",
        "time_to_complete": "10-15 minutes",
        "steps": [
            "List five values that matter to you (e.g. kindness, curiosity, courage).",
            "Pick the one that feels most important today.",
            "Choose a small action that honors it, independent of anyone's approval.",
            "Do it, then note how it felt.",
        ],
        "category": "Self-Care",
        "mood_targets": ["Rejected", "Inadequate", "Doubtful"],
        "intensity": "moderate",
    },
]


def build_strategy(seed: Dict[str, Any]) -> StrategyRecord:
    """Build a StrategyRecord from a seed dict, normalising its category label."""
    steps = tuple(seed.get("steps") or ())
    if not steps:
        raise ValueError(f"Strategy {seed.get('id')!r} has no steps")
    intensity = StrategyIntensity(seed.get("intensity", "moderate"))
    return StrategyRecord(
        id=seed["id"],
        title=seed["title"],
        description=seed["description"],
        category=normalize(seed["category"]),
        intensity=intensity,
        time_to_complete=seed.get("time_to_complete") or intensity.time_estimate,
        steps=steps,
        tips=tuple(seed.get("tips") or ()),
        resources=tuple(seed.get("resources") or ()),
        mood_targets=tuple(seed.get("mood_targets") or ()),
    )


class StrategyCatalog:
    """Read-only, in-memory collection of coping strategies."""

    def __init__(self, strategies: Iterable[StrategyRecord]):
        records: Tuple[StrategyRecord, ...] = tuple(strategies)
        by_id: Dict[str, StrategyRecord] = {}
        for record in records:
            if record.id in by_id:
                raise ValueError(f"Duplicate strategy id in catalog: {record.id!r}")
            by_id[record.id] = record
        self._strategies = records
        self._by_id = by_id

    @classmethod
    def from_seeds(cls, seeds: Sequence[Dict[str, Any]]) -> "StrategyCatalog":
        return cls(build_strategy(seed) for seed in seeds)

    def __len__(self) -> int:
        return len(self._strategies)

    def all_strategies(self) -> Tuple[StrategyRecord, ...]:
        """Every strategy, in seed declaration order."""
        return self._strategies

    def get(self, strategy_id: str) -> Optional[StrategyRecord]:
        return self._by_id.get(strategy_id)

    def strategies_for_category(self, category: StrategyCategory) -> List[StrategyRecord]:
        return [s for s in self._strategies if s.category == category]

    def strategies_for_intensity(self, intensity: StrategyIntensity) -> List[StrategyRecord]:
        return [s for s in self._strategies if s.intensity == intensity]

    def quick_relief_strategies(self) -> List[StrategyRecord]:
        """Strategies usable in the moment (quick tier)."""
        return self.strategies_for_intensity(StrategyIntensity.QUICK)

    def strategies_for_mood(self, mood: str) -> List[StrategyRecord]:
        """Strategies whose mood targets mention the mood, plus those targeting any mood."""
        return [s for s in self._strategies if s.targets_mood(mood)]


@lru_cache(maxsize=1)
def get_default_catalog() -> StrategyCatalog:
    """Process-wide catalog built from STRATEGY_SEEDS."""
    catalog = StrategyCatalog.from_seeds(STRATEGY_SEEDS)
    counts = {category.value: len(catalog.strategies_for_category(category)) for category in StrategyCategory}
    app_logger.info(f"Strategy catalog loaded: {len(catalog)} strategies ({counts})")
    return catalog
