"""
Integration tests for ChatbotSessionService against a real (in-memory) database.

Covers:
- Creating sessions and persisting the welcome transcript
- Applying actions across separate loads of the stored snapshot
- Recovering from unreadable snapshots
- Restart, delete and expiry purging
"""

from datetime import timedelta

from chatbot.types import ConversationStep, Locale, MessageRole, OptionAction
from core.constants import CHATBOT_SESSION_EXPIRY_HOURS, SNAPSHOT_SCHEMA_VERSION
from models import ChatbotSession
from services.chatbot_session_service import ChatbotSessionService
from utils.datetime_utils import clinic_now


class TestCreateSession:
    """Test session creation."""

    def test_create_persists_snapshot(self, db_session):
        turn = ChatbotSessionService.create_session(db_session, Locale.EN)

        stored = db_session.query(ChatbotSession).filter(
            ChatbotSession.session_key == turn.session.session_key
        ).one()
        assert stored.locale == "en"
        assert stored.snapshot["version"] == SNAPSHOT_SCHEMA_VERSION
        assert stored.snapshot["conversation_state"]["step"] == "body_area"
        assert len(stored.snapshot["messages"]) == 2
        assert stored.created_at is not None
        assert stored.updated_at is not None
        assert len(turn.result.messages) == 2

    def test_session_keys_unique(self, db_session):
        keys = {ChatbotSessionService.create_session(db_session, Locale.EN).session.session_key for _ in range(5)}
        assert len(keys) == 5


class TestApplyAction:
    """Test applying actions to stored conversations."""

    def test_actions_survive_reloads(self, db_session):
        key = ChatbotSessionService.create_session(db_session, Locale.EN).session.session_key

        ChatbotSessionService.apply_action(db_session, key, OptionAction.SELECT_BODY_AREA, "knees")
        ChatbotSessionService.apply_action(db_session, key, OptionAction.SELECT_SYMPTOM, "knee_pain")
        ChatbotSessionService.apply_action(db_session, key, OptionAction.SELECT_SYMPTOM, "knee_stiffness")
        ChatbotSessionService.apply_action(db_session, key, OptionAction.SELECT_SYMPTOM, "continue")
        ChatbotSessionService.apply_action(db_session, key, OptionAction.SELECT_DURATION, "1_to_6_months")
        turn = ChatbotSessionService.apply_action(db_session, key, OptionAction.SELECT_SEVERITY, "moderate")

        assert turn.result.accepted
        assert turn.conversation.state.step == ConversationStep.RESULTS
        assert turn.conversation.matched_conditions[0].condition_id == "knee_arthritis"

        session = ChatbotSessionService.get_session(db_session, key)
        reloaded = ChatbotSessionService.load_conversation(session)
        assert reloaded.state == turn.conversation.state
        assert len(reloaded.messages) == len(turn.conversation.messages)

    def test_rejected_action_leaves_state(self, db_session):
        key = ChatbotSessionService.create_session(db_session, Locale.EN).session.session_key

        turn = ChatbotSessionService.apply_action(db_session, key, OptionAction.SELECT_DURATION, "less_than_week")

        assert not turn.result.accepted
        assert turn.conversation.state.step == ConversationStep.BODY_AREA
        assert len(turn.conversation.messages) == 2

    def test_unknown_session_returns_none(self, db_session):
        assert ChatbotSessionService.apply_action(
            db_session, "missing", OptionAction.SELECT_BODY_AREA, "knees"
        ) is None

    def test_unreadable_snapshot_starts_fresh(self, db_session):
        turn = ChatbotSessionService.create_session(db_session, Locale.ZH_TW)
        turn.session.snapshot = {"version": 0, "messages": "garbage"}
        db_session.commit()

        conversation = ChatbotSessionService.load_conversation(turn.session)

        assert conversation.locale == Locale.ZH_TW
        assert conversation.state.step == ConversationStep.BODY_AREA
        assert all(m.role == MessageRole.BOT for m in conversation.messages)
        assert len(conversation.messages) == 2

    def test_resume_persists_replacement_conversation(self, db_session):
        turn = ChatbotSessionService.create_session(db_session, Locale.EN)
        key = turn.session.session_key
        turn.session.snapshot = {"version": 0, "messages": "garbage"}
        db_session.commit()

        resumed = ChatbotSessionService.resume_session(db_session, key)

        stored = db_session.query(ChatbotSession).filter_by(session_key=key).one()
        assert stored.snapshot["version"] == SNAPSHOT_SCHEMA_VERSION
        assert [m["id"] for m in stored.snapshot["messages"]] == [m.id for m in resumed.conversation.messages]

        again = ChatbotSessionService.resume_session(db_session, key)
        assert [m.id for m in again.conversation.messages] == [m.id for m in resumed.conversation.messages]

    def test_resume_unknown_session(self, db_session):
        assert ChatbotSessionService.resume_session(db_session, "missing") is None


class TestRestartAndDelete:
    """Test restart and delete."""

    def test_restart_resets_stored_conversation(self, db_session):
        key = ChatbotSessionService.create_session(db_session, Locale.EN).session.session_key
        ChatbotSessionService.apply_action(db_session, key, OptionAction.SELECT_BODY_AREA, "feet")

        turn = ChatbotSessionService.restart_session(db_session, key)

        assert turn.conversation.state.step == ConversationStep.BODY_AREA
        assert turn.conversation.state.selected_body_area is None
        assert turn.session.snapshot["conversation_state"]["selected_body_area"] is None
        assert len(turn.session.snapshot["messages"]) == 2

    def test_restart_unknown_session(self, db_session):
        assert ChatbotSessionService.restart_session(db_session, "missing") is None

    def test_delete(self, db_session):
        key = ChatbotSessionService.create_session(db_session, Locale.EN).session.session_key

        assert ChatbotSessionService.delete_session(db_session, key) is True
        assert ChatbotSessionService.get_session(db_session, key) is None
        assert ChatbotSessionService.delete_session(db_session, key) is False


class TestPurgeExpiredSessions:
    """Test stale session cleanup."""

    def test_fresh_sessions_kept(self, db_session):
        ChatbotSessionService.create_session(db_session, Locale.EN)

        assert ChatbotSessionService.purge_expired_sessions(db_session) == 0
        assert db_session.query(ChatbotSession).count() == 1

    def test_stale_sessions_removed(self, db_session):
        ChatbotSessionService.create_session(db_session, Locale.EN)
        ChatbotSessionService.create_session(db_session, Locale.ZH_TW)

        later = clinic_now() + timedelta(hours=CHATBOT_SESSION_EXPIRY_HOURS + 1)
        deleted = ChatbotSessionService.purge_expired_sessions(db_session, now=later)

        assert deleted == 2
        assert db_session.query(ChatbotSession).count() == 0
