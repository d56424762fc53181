"""
Test utilities for clinic chatbot tests.
"""

from typing import List, Optional

from chatbot.conversation import ChatbotConversation


def advance_to_symptoms(conv: ChatbotConversation, area_id: str, gender: Optional[str] = None) -> None:
    """Select a body area (and gender for pelvic) from the body-area step."""
    assert conv.select_body_area(area_id).accepted
    if gender is not None:
        assert conv.select_gender(gender).accepted


def complete_flow(
    conv: ChatbotConversation,
    area_id: str,
    symptom_ids: List[str],
    gender: Optional[str] = None,
    duration: str = "1_to_4_weeks",
    severity: str = "moderate",
) -> None:
    """Drive a started conversation all the way to results."""
    advance_to_symptoms(conv, area_id, gender)
    for symptom_id in symptom_ids:
        assert conv.toggle_symptom(symptom_id).accepted
    assert conv.confirm_symptoms().accepted
    assert conv.select_duration(duration).accepted
    assert conv.select_severity(severity).accepted


def post_action(client, session_key: str, action: str, value: str = ""):
    """POST a quick-reply click and return the parsed JSON body."""
    response = client.post(
        f"/api/chatbot/sessions/{session_key}/actions",
        json={"action": action, "value": value},
    )
    assert response.status_code == 200, response.text
    return response.json()
