"""
Reflective journal prompts chosen by mood and rejection trigger.

- Mood groups and rejection trigger groups (Section I)
- Prompt text (Section II)
- Prompt selection (Section III)
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple


# ════════════════════════════════════════════════════════════════════════════
# SECTION I: MOOD AND TRIGGER GROUPS
# ════════════════════════════════════════════════════════════════════════════

POSITIVE_MOODS: Tuple[str, ...] = ("happy", "calm", "excited", "grateful", "proud", "motivated", "confident")
NEGATIVE_MOODS: Tuple[str, ...] = (
    "sad", "anxious", "angry", "discouraged", "frustrated", "disappointed", "embarrassed", "overwhelmed",
)

REJECTION_TRIGGERS: Dict[str, Tuple[str, ...]] = {
    "social": ("Social media rejection", "Friend ignored me", "Excluded from group", "Message left on read"),
    "romantic": ("Dating app rejection", "Romantic interest chose someone else", "Breakup", "Date canceled"),
    "professional": ("Job application rejected", "Promotion passed over", "Project feedback negative", "Idea dismissed at work"),
    "family": ("Family criticism", "Family disagreement", "Not supported by family"),
    "academic": ("Poor grade received", "Academic application rejected", "Criticism from instructor"),
}


# ════════════════════════════════════════════════════════════════════════════
# SECTION II: PROMPT TEXT
# Trigger prompts are keyed by group, then mood; the None key is the fallback.
# ════════════════════════════════════════════════════════════════════════════

TRIGGER_PROMPTS: Dict[str, Dict[Optional[str], str]] = {
    "social": {
        "anxious": "Social rejection can trigger anxiety. What specific fears came up during this experience? How have you successfully navigated similar social situations in the past?",
        "sad": "Social connection is a fundamental need. How did this social rejection experience affect your sense of belonging? What supports or connections can you lean on right now?",
        "discouraged": "Social connection is a fundamental need. How did this social rejection experience affect your sense of belonging? What supports or connections can you lean on right now?",
        "angry": "Social rejection can feel unfair. What boundaries might have been crossed? How can you honor your feelings while responding in a way that aligns with your values?",
        None: "Social rejection can be challenging. What have you learned about yourself through this experience? How might this insight help with future interactions?",
    },
    "professional": {
        "discouraged": "Professional setbacks often feel personal but rarely are. What strengths and accomplishments can you remind yourself of right now? What is one small step toward your goals?",
        "sad": "Professional setbacks often feel personal but rarely are. What strengths and accomplishments can you remind yourself of right now? What is one small step toward your goals?",
        "embarrassed": "Professional rejection in front of others can be difficult. How would you view this situation if it happened to a colleague you respect? What perspective might help you be kinder to yourself?",
        None: "Professional rejection is part of everyone's journey. What lessons or feedback might be valuable here? How can you separate your worth from this particular outcome?",
    },
    "romantic": {
        "sad": "Romantic rejection touches our deepest vulnerabilities. What does this experience bring up about your fears or past relationships? What would you tell a friend going through this?",
        "discouraged": "Romantic rejection touches our deepest vulnerabilities. What does this experience bring up about your fears or past relationships? What would you tell a friend going through this?",
        "angry": "Romantic disappointments can bring up strong emotions. What unmet expectation or need is beneath this anger? What healthy boundaries might need to be established?",
        None: "Romantic rejection, while painful, often redirects us to better paths. What have you learned about your needs and values through this experience?",
    },
}

NEGATIVE_MOOD_PROMPTS: Dict[str, str] = {
    "anxious": "What specifically about this situation is making you feel anxious? What's the worst that could happen, and how likely is it? What resources do you have to cope?",
    "sad": "What thoughts are contributing to your sadness? Is there another perspective you could consider? What small comfort might help right now?",
    "discouraged": "What thoughts are contributing to your sadness? Is there another perspective you could consider? What small comfort might help right now?",
    "angry": "What's beneath your anger? Is there a boundary that was crossed or a need that wasn't met? How can you honor this emotion while responding thoughtfully?",
    "frustrated": "What's beneath your anger? Is there a boundary that was crossed or a need that wasn't met? How can you honor this emotion while responding thoughtfully?",
    "overwhelmed": "What's contributing to feeling overwhelmed right now? How might you break things down into smaller, manageable parts? What can you let go of temporarily?",
    "embarrassed": "We all experience embarrassment. How might this look from an outside perspective? How significant will this feel in a week, a month, or a year?",
}

GENERIC_NEGATIVE_PROMPT = "What thoughts are going through your mind right now? How might you respond to a friend feeling this way? What small step might help you feel better?"
POSITIVE_PROMPT = "What contributed to this positive feeling? How can you create more moments like this? Who might you share this experience with?"
DEFAULT_PROMPT = "How are you feeling right now, and what might have contributed to this feeling? What would support you in this moment?"


# ════════════════════════════════════════════════════════════════════════════
# SECTION III: PROMPT SELECTION
# ════════════════════════════════════════════════════════════════════════════

def trigger_group(trigger: Optional[str]) -> Optional[str]:
    """Group a known rejection trigger label belongs to ("social", "professional", ...)."""
    if not trigger:
        return None
    key = trigger.strip().lower()
    for group, labels in REJECTION_TRIGGERS.items():
        if any(label.lower() == key for label in labels):
            return group
    return None


def prompt_for_mood(mood: Optional[str], trigger: Optional[str] = None) -> str:
    """
    Pick a journal prompt for a mood, preferring a trigger-specific one.

    Trigger prompts exist for social, professional and romantic rejection;
    other triggers fall through to the mood prompts. Matching is
    case-insensitive and unknown moods get the default prompt.
    """
    mood_key = (mood or "").strip().lower()

    prompts = TRIGGER_PROMPTS.get(trigger_group(trigger) or "")
    if prompts:
        return prompts.get(mood_key, prompts[None])

    if mood_key in NEGATIVE_MOODS:
        return NEGATIVE_MOOD_PROMPTS.get(mood_key, GENERIC_NEGATIVE_PROMPT)
    if mood_key in POSITIVE_MOODS:
        return POSITIVE_PROMPT
    return DEFAULT_PROMPT
