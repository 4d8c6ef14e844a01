"""Unit tests for mood-history pattern detection and adaptive nudges."""

import pytest

from resilientme.models.mood import MoodCheckIn
from resilientme.services.mood_patterns import (
    adaptive_nudges,
    analyze_patterns,
    anxiety_after_rejection,
    persistent_sadness,
    professional_rejection,
    social_rejection_sensitivity,
)


def _check_in(mood="Anxious", intensity=4, rejection_related=True, trigger=None, note=None):
    return MoodCheckIn(
        mood=mood,
        intensity=intensity,
        note=note,
        rejection_related=rejection_related,
        rejection_trigger=trigger,
    )


def _neutral(count):
    return [_check_in(mood="Calm", intensity=2, rejection_related=False) for _ in range(count)]


class TestMoodCheckIn:
    def test_mood_match_ignores_case(self):
        assert _check_in(mood="ANXIOUS").is_mood("anxious")
        assert not _check_in(mood="Sad").is_mood("anxious")

    def test_text_mentions(self):
        entry = _check_in(trigger="Job application rejected", note="Felt Not Good Enough")
        assert entry.trigger_mentions("job")
        assert entry.note_mentions("not good enough")
        assert not _check_in().trigger_mentions("job")
        assert not _check_in().note_mentions("lonely")


class TestAnxietyAfterRejection:
    def test_detected_at_threshold(self):
        pattern = anxiety_after_rejection([_check_in() for _ in range(3)], threshold=3)
        assert pattern.pattern == "anxiety-after-rejection"
        assert pattern.occurrences == 3
        assert pattern.confidence == 0.6
        assert pattern.strategy_ids == ("grounding-5-4-3-2-1", "thought-challenge")

    def test_below_threshold(self):
        assert anxiety_after_rejection([_check_in() for _ in range(2)], threshold=3) is None

    def test_mild_or_unrelated_entries_ignored(self):
        entries = [_check_in(intensity=2), _check_in(rejection_related=False), _check_in(mood="Sad"), _check_in()]
        assert anxiety_after_rejection(entries, threshold=2) is None

    def test_social_trigger_adds_connection(self):
        entries = [_check_in(), _check_in(), _check_in(trigger="Friend ignored me")]
        pattern = anxiety_after_rejection(entries, threshold=3)
        assert pattern.strategy_ids[0] == "connection-quick-chat"

    def test_confidence_capped(self):
        pattern = anxiety_after_rejection([_check_in() for _ in range(12)], threshold=3)
        assert pattern.confidence == 1.0


class TestPersistentSadness:
    def test_share_of_recent_entries(self):
        entries = [_check_in(mood="Sad") for _ in range(3)] + _neutral(2)
        pattern = persistent_sadness(entries, threshold=3)
        assert pattern.pattern == "persistent-sadness"
        assert pattern.confidence == 0.8

    def test_diluted_by_other_entries(self):
        entries = [_check_in(mood="Sad") for _ in range(3)] + _neutral(17)
        assert persistent_sadness(entries, threshold=3) is None

    def test_only_recent_window_counts(self):
        """Sad entries older than the last twenty check-ins are not counted."""
        entries = _neutral(20) + [_check_in(mood="Sad") for _ in range(5)]
        assert persistent_sadness(entries, threshold=3) is None


class TestSocialRejectionSensitivity:
    def test_needs_strong_reactions(self):
        mild = [_check_in(intensity=3, trigger="Social media rejection") for _ in range(3)]
        assert social_rejection_sensitivity(mild, threshold=3) is None

        strong = [_check_in(intensity=4, trigger="Excluded from group") for _ in range(3)]
        pattern = social_rejection_sensitivity(strong, threshold=3)
        assert pattern.strategy_ids == ("rejection-reframe", "connection-quick-chat", "assertiveness-training")
        assert pattern.confidence == 0.625


class TestProfessionalRejection:
    def test_detected_from_triggers(self):
        entries = [_check_in(mood="Sad", intensity=1, trigger="Idea dismissed at work") for _ in range(3)]
        pattern = professional_rejection(entries, threshold=3)
        assert pattern.pattern == "professional-rejection"
        assert pattern.confidence == 0.675

    def test_other_triggers_ignored(self):
        entries = [_check_in(trigger="Breakup") for _ in range(3)]
        assert professional_rejection(entries, threshold=3) is None


class TestAnalyzePatterns:
    def test_fixed_order(self):
        entries = [_check_in(trigger="Job application rejected") for _ in range(3)]
        entries += [_check_in(mood="Sad", trigger="Friend ignored me") for _ in range(3)]
        found = [p.pattern for p in analyze_patterns(entries, threshold=3)]
        assert found == [
            "anxiety-after-rejection",
            "persistent-sadness",
            "social-rejection-sensitivity",
            "professional-rejection",
        ]

    def test_empty_history(self):
        assert analyze_patterns([], threshold=3) == []

    def test_strategies_exist_in_catalog(self, catalog):
        entries = [_check_in(trigger="Friend ignored me") for _ in range(3)]
        entries += [_check_in(mood="Sad", trigger="Job application rejected") for _ in range(3)]
        patterns = analyze_patterns(entries, threshold=3)
        assert len(patterns) == 4
        for pattern in patterns:
            for strategy_id in pattern.strategy_ids:
                assert catalog.get(strategy_id) is not None


class TestAdaptiveNudges:
    """Recurring themes in the last thirty check-ins."""

    def test_self_doubt(self):
        entries = [_check_in(note="I doubt myself"), _check_in(note="felt like an imposter")]
        entries += [_check_in(note="not good enough again")]
        nudges = adaptive_nudges(entries, threshold=3)
        assert [n.pattern for n in nudges] == ["self-doubt"]
        assert nudges[0].frequency == 3

    def test_loneliness(self):
        entries = [_check_in(mood="Sad", note="so lonely tonight") for _ in range(3)]
        nudge = adaptive_nudges(entries, threshold=3)[0]
        assert nudge.pattern == "loneliness"
        assert "Connection Quick-Chat" in nudge.body

    def test_job_rejection(self):
        entries = [_check_in(trigger="Job application rejected") for _ in range(3)]
        nudges = adaptive_nudges(entries, threshold=3)
        assert [n.pattern for n in nudges] == ["job-rejection"]
        assert nudges[0].mood == "discouraged"

    def test_short_history(self):
        entries = [_check_in(note="lonely") for _ in range(3)]
        assert adaptive_nudges(entries, threshold=5) == []

    @pytest.mark.parametrize("count", [0, 2])
    def test_below_frequency(self, count):
        entries = [_check_in(note="lonely") for _ in range(count)] + _neutral(5)
        assert adaptive_nudges(entries, threshold=3) == []
