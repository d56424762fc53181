"""
Emergency symptom detection.

Symptoms carry an emergency flag in the static tables. These helpers only
inspect data; the conversation reports the result alongside each transition
and leaves it to the widget to surface.
"""

import logging
import re
from typing import Iterable, List

from chatbot.data import EMERGENCY_KEYWORDS, find_symptom
from chatbot.prompts import GENERIC_EMERGENCY
from chatbot.types import EmergencyCheck, Locale

logger = logging.getLogger(__name__)


def check_emergency(symptom_ids: Iterable[str], locale: Locale) -> EmergencyCheck:
    """
    Check selected symptoms for emergency flags.

    The first flagged symptom (in selection order) determines the message;
    flagged symptoms without their own message get a generic one.
    """
    for symptom_id in symptom_ids:
        symptom = find_symptom(symptom_id)
        if symptom is None or not symptom.is_emergency:
            continue
        message = symptom.emergency_message or GENERIC_EMERGENCY
        logger.info(f"Emergency symptom selected: {symptom_id}")
        return EmergencyCheck(is_emergency=True, message=message.get(locale), symptom_id=symptom_id)
    return EmergencyCheck(is_emergency=False)


def detect_emergency_keywords(text: str) -> List[str]:
    """
    Find emergency phrases in free text, in either language.

    English phrases must match whole words ("heatstroke" is not "stroke");
    Chinese phrases match anywhere since the script has no word breaks.

    Returns:
        The matched keywords (English form), in table order
    """
    lowered = text.lower()
    matches = [
        keyword.en for keyword in EMERGENCY_KEYWORDS
        if re.search(rf"\b{re.escape(keyword.en)}\b", lowered) or keyword.zh_tw in text
    ]
    if matches:
        logger.warning(f"Emergency keyword(s) detected: {matches} in message: {text[:100]}...")
    return matches
