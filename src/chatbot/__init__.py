"""
Rule-based symptom checker chatbot.

Walks a patient through body area, symptoms, duration and severity questions
and suggests the clinic treatments whose symptom profiles overlap the most.
"""

from chatbot.conversation import ChatbotConversation, TransitionResult
from chatbot.emergency import check_emergency, detect_emergency_keywords
from chatbot.scoring import match_conditions
from chatbot.snapshot import dump_snapshot, load_snapshot
from chatbot.types import ConversationState, ConversationStep, Locale

__all__ = [
    "ChatbotConversation",
    "TransitionResult",
    "ConversationState",
    "ConversationStep",
    "Locale",
    "check_emergency",
    "detect_emergency_keywords",
    "match_conditions",
    "dump_snapshot",
    "load_snapshot",
]
