# Package initialization
# Import all models so they're registered on Base.metadata
from .chatbot_session import ChatbotSession

__all__ = [
    "ChatbotSession",
]
