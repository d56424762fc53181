"""
Services package for shared business logic.

This package contains service classes that encapsulate business logic
shared across multiple API endpoints.
"""

from .chatbot_session_service import ChatbotSessionService, SessionTurn

__all__ = [
    "ChatbotSessionService",
    "SessionTurn",
]
