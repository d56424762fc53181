"""
Unit tests for emergency symptom and keyword detection.
"""

import pytest

from chatbot import prompts
from chatbot.emergency import check_emergency, detect_emergency_keywords
from chatbot.types import Locale


class TestCheckEmergency:
    """Test emergency checks over selected symptom ids."""

    def test_no_symptoms(self):
        result = check_emergency([], Locale.EN)

        assert not result.is_emergency
        assert result.message is None
        assert result.symptom_id is None

    def test_non_emergency_symptoms(self):
        assert not check_emergency(["knee_pain", "heel_pain"], Locale.EN).is_emergency

    def test_chest_pain_message(self):
        result = check_emergency(["chest_pain"], Locale.EN)

        assert result.is_emergency
        assert result.symptom_id == "chest_pain"
        assert result.message.startswith("CHEST PAIN requires IMMEDIATE emergency care")

    def test_first_flagged_symptom_in_selection_order_wins(self):
        result = check_emergency(["knee_pain", "confusion", "stroke_symptoms"], Locale.EN)

        assert result.symptom_id == "confusion"
        assert result.message == "Sudden confusion may indicate stroke. Seek emergency care."

    def test_flagged_symptom_without_message_uses_generic(self):
        # Seizures and thoracic aortic aneurysm carry the flag but no message of their own
        result = check_emergency(["seizures"], Locale.EN)

        assert result.is_emergency
        assert result.message == prompts.GENERIC_EMERGENCY.en

    def test_chinese_message(self):
        result = check_emergency(["seizures"], Locale.ZH_TW)

        assert result.message == prompts.GENERIC_EMERGENCY.zh_tw

    def test_unknown_symptom_ignored(self):
        assert not check_emergency(["not_a_symptom"], Locale.EN).is_emergency


class TestDetectEmergencyKeywords:
    """Test free-text keyword detection."""

    @pytest.mark.parametrize("text,expected", [
        ("I have chest pain since this morning", ["chest pain"]),
        ("CHEST PAIN and I can't breathe", ["chest pain", "can't breathe"]),
        ("我覺得胸痛", ["chest pain"]),
        ("爸爸可能中風了", ["stroke"]),
        ("My knee hurts when I walk", []),
        ("I had heatstroke last summer", []),
        ("strokes of bad luck", []),
        ("Is this a stroke?", ["stroke"]),
        ("", []),
    ])
    def test_detection(self, text, expected):
        assert detect_emergency_keywords(text) == expected

    def test_results_in_table_order(self):
        assert detect_emergency_keywords("stroke? or a heart attack? chest pain!") == [
            "chest pain", "stroke", "heart attack",
        ]

    def test_emergency_disclaimer_mentions_hotline(self):
        assert "999" in prompts.emergency_disclaimer(Locale.EN)
        assert "香港" in prompts.emergency_disclaimer(Locale.ZH_TW)
