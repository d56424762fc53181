"""
Chatbot session model for persisted conversation snapshots.

Each row holds the serialized `{version, messages, conversation_state}`
snapshot of one symptom-checker conversation, keyed by an opaque session key
handed to the browser widget. Rows are replaced on every action and purged
once they go stale.
"""

from typing import Any, Dict
from datetime import datetime

from sqlalchemy import String, JSON, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from core.constants import SESSION_KEY_LENGTH
from core.database import Base


class ChatbotSession(Base):
    """Persisted state of a single symptom-checker conversation."""

    __tablename__ = "chatbot_sessions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    """Unique identifier for the session record."""

    session_key: Mapped[str] = mapped_column(String(SESSION_KEY_LENGTH), unique=True, nullable=False, index=True)
    """Opaque key the widget presents on every request."""

    locale: Mapped[str] = mapped_column(String(10), nullable=False, default="zh-TW")
    """Locale the conversation was started in ('en' or 'zh-TW')."""

    snapshot: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    """Versioned conversation snapshot (messages + conversation state)."""

    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)
    """Timestamp when the conversation was started."""

    updated_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False, index=True)
    """Timestamp of the last applied action; used for expiry."""

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<ChatbotSession(id={self.id}, "
            f"session_key={self.session_key[:8]}..., "
            f"locale={self.locale})>"
        )
