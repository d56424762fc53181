"""
Chatbot session service for persisting symptom-checker conversations.

Each browser widget holds an opaque session key; this service loads the
conversation snapshot for that key, applies one action, and writes the
snapshot back. Stale sessions are purged opportunistically when new ones
are created.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from core.constants import CHATBOT_SESSION_EXPIRY_HOURS
from chatbot.conversation import ChatbotConversation, TransitionResult
from chatbot.data import CategoryNames
from chatbot.snapshot import dump_snapshot, load_snapshot
from chatbot.types import Locale, OptionAction
from models import ChatbotSession
from utils.datetime_utils import clinic_now

logger = logging.getLogger(__name__)


@dataclass
class SessionTurn:
    """A persisted session together with its live conversation and the last transition."""
    session: ChatbotSession
    conversation: ChatbotConversation
    result: TransitionResult


class ChatbotSessionService:
    """Service for loading, updating and discarding chatbot sessions."""

    @staticmethod
    def create_session(
        db: Session,
        locale: Locale,
        category_names: Optional[CategoryNames] = None,
    ) -> SessionTurn:
        """
        Start a new conversation and persist it.

        Args:
            db: Database session
            locale: Conversation language
            category_names: Optional treatment category name overrides

        Returns:
            SessionTurn whose result holds the welcome and body-area messages
        """
        ChatbotSessionService.purge_expired_sessions(db)

        conversation = ChatbotConversation(locale=locale, category_names=category_names)
        result = conversation.start()

        session = ChatbotSession(
            session_key=secrets.token_urlsafe(32),
            locale=locale.value,
            snapshot=dump_snapshot(conversation),
        )
        db.add(session)
        db.commit()
        db.refresh(session)

        logger.info(f"Started chatbot session {session.session_key[:8]}... (locale={locale.value})")
        return SessionTurn(session=session, conversation=conversation, result=result)

    @staticmethod
    def get_session(db: Session, session_key: str) -> Optional[ChatbotSession]:
        return db.query(ChatbotSession).filter(ChatbotSession.session_key == session_key).first()

    @staticmethod
    def resume_session(
        db: Session,
        session_key: str,
        category_names: Optional[CategoryNames] = None,
    ) -> Optional[SessionTurn]:
        """
        Restore a stored conversation without applying any action.

        A replacement conversation (unreadable snapshot) is saved right away so
        later reads and actions see the same transcript.

        Returns:
            SessionTurn for the restored conversation, or None if the session does not exist
        """
        session = ChatbotSessionService.get_session(db, session_key)
        if session is None:
            return None

        conversation = ChatbotSessionService.load_conversation(session, category_names)
        if session.snapshot != dump_snapshot(conversation):
            ChatbotSessionService.save_conversation(db, session, conversation)

        result = TransitionResult(accepted=True, emergency=conversation.check_emergency())
        return SessionTurn(session=session, conversation=conversation, result=result)

    @staticmethod
    def load_conversation(
        session: ChatbotSession,
        category_names: Optional[CategoryNames] = None,
    ) -> ChatbotConversation:
        """
        Restore the session's conversation.

        An unreadable snapshot (older schema, corrupt data) yields a freshly
        started conversation instead of an error.
        """
        locale = Locale(session.locale)
        conversation = load_snapshot(session.snapshot, locale, category_names=category_names)
        if conversation is None:
            logger.warning(f"Restarting chatbot session {session.session_key[:8]}... with unreadable snapshot")
            conversation = ChatbotConversation(locale=locale, category_names=category_names)
            conversation.start()
        return conversation

    @staticmethod
    def save_conversation(db: Session, session: ChatbotSession, conversation: ChatbotConversation) -> None:
        # Assign a new dict so SQLAlchemy detects the JSON change
        session.snapshot = dump_snapshot(conversation)
        db.commit()
        db.refresh(session)

    @staticmethod
    def apply_action(
        db: Session,
        session_key: str,
        action: OptionAction,
        value: str,
        category_names: Optional[CategoryNames] = None,
    ) -> Optional[SessionTurn]:
        """
        Apply one clicked option to a stored conversation.

        Returns:
            SessionTurn after the action, or None if the session does not exist
        """
        session = ChatbotSessionService.get_session(db, session_key)
        if session is None:
            return None

        conversation = ChatbotSessionService.load_conversation(session, category_names)
        result = conversation.handle_action(action, value)
        if not result.accepted:
            logger.info(
                f"Chatbot session {session_key[:8]}...: {action.value}={value!r} not accepted "
                f"in step {conversation.state.step.value}"
            )

        ChatbotSessionService.save_conversation(db, session, conversation)
        return SessionTurn(session=session, conversation=conversation, result=result)

    @staticmethod
    def restart_session(
        db: Session,
        session_key: str,
        category_names: Optional[CategoryNames] = None,
    ) -> Optional[SessionTurn]:
        """Reset a stored conversation and greet the patient again."""
        session = ChatbotSessionService.get_session(db, session_key)
        if session is None:
            return None

        conversation = ChatbotConversation(locale=Locale(session.locale), category_names=category_names)
        conversation.restart()
        result = conversation.start()

        ChatbotSessionService.save_conversation(db, session, conversation)
        logger.info(f"Restarted chatbot session {session_key[:8]}...")
        return SessionTurn(session=session, conversation=conversation, result=result)

    @staticmethod
    def delete_session(db: Session, session_key: str) -> bool:
        """
        Discard a stored conversation (widget closed).

        Returns:
            True if a session was deleted, False if none existed
        """
        session = ChatbotSessionService.get_session(db, session_key)
        if session is None:
            return False
        db.delete(session)
        db.commit()
        return True

    @staticmethod
    def purge_expired_sessions(db: Session, now: Optional[datetime] = None) -> int:
        """
        Delete sessions untouched for longer than CHATBOT_SESSION_EXPIRY_HOURS.

        Returns:
            Number of deleted sessions
        """
        cutoff = (now or clinic_now()) - timedelta(hours=CHATBOT_SESSION_EXPIRY_HOURS)
        deleted = db.query(ChatbotSession).filter(
            ChatbotSession.updated_at < cutoff
        ).delete(synchronize_session=False)
        if deleted:
            db.commit()
            logger.info(f"Purged {deleted} expired chatbot session(s)")
        return deleted
