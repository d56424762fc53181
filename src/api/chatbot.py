# pyright: reportMissingTypeStubs=false
"""
Symptom checker chatbot API endpoints.

Lets the website's chat widget start a conversation, apply quick-reply
clicks, restart, and discard the conversation. Conversation state lives
server-side, keyed by the session key returned on creation.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from api.responses import (
    ActionSignalModel,
    BodyAreaOptionsResponse,
    ChatbotActionRequest,
    ChatbotSessionResponse,
    EmergencyCheckModel,
    EmergencyTextRequest,
    EmergencyTextResponse,
    SessionCreateRequest,
)
from chatbot import prompts
from chatbot.emergency import detect_emergency_keywords
from chatbot.snapshot import message_to_model, option_to_model, state_to_model
from chatbot.types import Locale
from core.config import DEFAULT_LOCALE
from core.database import get_db
from services.chatbot_session_service import ChatbotSessionService, SessionTurn

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(turn: SessionTurn) -> ChatbotSessionResponse:
    conversation = turn.conversation
    result = turn.result
    return ChatbotSessionResponse(
        session_key=turn.session.session_key,
        locale=conversation.locale,
        accepted=result.accepted,
        messages=[message_to_model(m) for m in conversation.messages],
        new_messages=[message_to_model(m) for m in result.messages],
        conversation_state=state_to_model(conversation.state),
        emergency=EmergencyCheckModel(
            is_emergency=result.emergency.is_emergency,
            message=result.emergency.message,
            symptom_id=result.emergency.symptom_id,
        ),
        signals=[
            ActionSignalModel(
                kind=signal.kind,
                category_id=signal.category_id,
                condition_id=signal.condition_id,
                category_index=signal.category_index,
            )
            for signal in result.signals
        ],
    )


def _session_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="對話不存在或已過期")


@router.get("/options/body-areas", summary="List body-area options")
async def list_body_area_options(
    locale: Locale = Query(Locale(DEFAULT_LOCALE)),
) -> BodyAreaOptionsResponse:
    """Quick-entry options followed by every body area, in display order."""
    return BodyAreaOptionsResponse(
        locale=locale,
        options=[option_to_model(o) for o in prompts.body_area_options(locale)],
    )


@router.post("/sessions", summary="Start a conversation", status_code=status.HTTP_201_CREATED)
async def create_session(
    request: SessionCreateRequest,
    db: Session = Depends(get_db),
) -> ChatbotSessionResponse:
    """Create a session and return the welcome and body-area messages."""
    turn = ChatbotSessionService.create_session(db, request.locale)
    return _to_response(turn)


@router.get("/sessions/{session_key}", summary="Get a conversation")
async def get_session(
    session_key: str,
    db: Session = Depends(get_db),
) -> ChatbotSessionResponse:
    """Return the stored transcript and state, e.g. after a page reload."""
    turn = ChatbotSessionService.resume_session(db, session_key)
    if turn is None:
        raise _session_not_found()
    return _to_response(turn)


@router.post("/sessions/{session_key}/actions", summary="Apply a quick-reply click")
async def apply_action(
    session_key: str,
    request: ChatbotActionRequest,
    db: Session = Depends(get_db),
) -> ChatbotSessionResponse:
    """
    Apply one clicked option.

    Rejected actions (wrong step, unknown id) return 200 with accepted=false
    and leave the conversation unchanged, apart from corrective messages.
    """
    turn = ChatbotSessionService.apply_action(db, session_key, request.action, request.value)
    if turn is None:
        raise _session_not_found()
    return _to_response(turn)


@router.post("/sessions/{session_key}/restart", summary="Restart a conversation")
async def restart_session(
    session_key: str,
    db: Session = Depends(get_db),
) -> ChatbotSessionResponse:
    turn = ChatbotSessionService.restart_session(db, session_key)
    if turn is None:
        raise _session_not_found()
    return _to_response(turn)


@router.delete("/sessions/{session_key}", summary="Discard a conversation", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_key: str,
    db: Session = Depends(get_db),
) -> None:
    if not ChatbotSessionService.delete_session(db, session_key):
        raise _session_not_found()


@router.post("/emergency-check", summary="Check free text for emergency phrases")
async def check_emergency_text(request: EmergencyTextRequest) -> EmergencyTextResponse:
    """Flag typed text that mentions an emergency (e.g. chest pain, stroke)."""
    keywords = detect_emergency_keywords(request.text)
    if not keywords:
        return EmergencyTextResponse(is_emergency=False, keywords=[])
    return EmergencyTextResponse(
        is_emergency=True,
        keywords=keywords,
        message=prompts.emergency_disclaimer(request.locale),
    )
