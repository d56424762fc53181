"""
Versioned conversation snapshots.

A snapshot is the JSON blob `{"version", "messages", "conversation_state"}`
that lets a conversation survive page reloads. Snapshots written by another
schema version, or that fail validation, are discarded so the patient simply
starts a fresh conversation.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from core.constants import SNAPSHOT_SCHEMA_VERSION
from chatbot.conversation import ChatbotConversation
from chatbot.data import CategoryNames, find_body_area, find_vocabulary
from chatbot.types import (
    BodyAreaKind,
    ChatMessage,
    ConditionResult,
    ConversationState,
    ConversationStep,
    Duration,
    Gender,
    Locale,
    MatchTier,
    MessageRole,
    MessageType,
    OptionAction,
    QuickReplyOption,
    Severity,
)

logger = logging.getLogger(__name__)


class QuickReplyOptionModel(BaseModel):
    id: str
    label: str
    value: str
    action: OptionAction


class ConditionResultModel(BaseModel):
    condition_id: str
    title: str
    short_description: str
    match_score: MatchTier
    category_id: str
    category_name: str
    score: float = 0.0
    match_label: str = ""


class ChatMessageModel(BaseModel):
    id: str
    role: MessageRole
    content: str
    type: MessageType = MessageType.TEXT
    options: List[QuickReplyOptionModel] = []
    results: List[ConditionResultModel] = []
    step: Optional[ConversationStep] = None
    timestamp: int = 0
    delay_ms: int = 0


class ConversationStateModel(BaseModel):
    step: ConversationStep = ConversationStep.WELCOME
    selected_body_area: Optional[str] = None
    selected_gender: Optional[Gender] = None
    vocabulary_id: Optional[str] = None
    selected_symptoms: List[str] = []
    duration: Optional[Duration] = None
    severity: Optional[Severity] = None
    matched_conditions: List[ConditionResultModel] = []


class ConversationSnapshot(BaseModel):
    """Persisted form of a conversation."""
    version: int
    messages: List[ChatMessageModel]
    conversation_state: ConversationStateModel


# ===== Dataclass <-> model conversion =====

def option_to_model(option: QuickReplyOption) -> QuickReplyOptionModel:
    return QuickReplyOptionModel(id=option.id, label=option.label, value=option.value, action=option.action)


def result_to_model(result: ConditionResult) -> ConditionResultModel:
    return ConditionResultModel(
        condition_id=result.condition_id,
        title=result.title,
        short_description=result.short_description,
        match_score=result.match_score,
        category_id=result.category_id,
        category_name=result.category_name,
        score=result.score,
        match_label=result.match_label,
    )


def message_to_model(message: ChatMessage) -> ChatMessageModel:
    return ChatMessageModel(
        id=message.id,
        role=message.role,
        content=message.content,
        type=message.type,
        options=[option_to_model(o) for o in message.options],
        results=[result_to_model(r) for r in message.results],
        step=message.step,
        timestamp=message.timestamp,
        delay_ms=message.delay_ms,
    )


def state_to_model(state: ConversationState) -> ConversationStateModel:
    return ConversationStateModel(
        step=state.step,
        selected_body_area=state.selected_body_area,
        selected_gender=state.selected_gender,
        vocabulary_id=state.vocabulary_id,
        selected_symptoms=list(state.selected_symptoms),
        duration=state.duration,
        severity=state.severity,
        matched_conditions=[result_to_model(r) for r in state.matched_conditions],
    )


def _result_from_model(model: ConditionResultModel) -> ConditionResult:
    return ConditionResult(**model.model_dump())


def _message_from_model(model: ChatMessageModel) -> ChatMessage:
    return ChatMessage(
        id=model.id,
        role=model.role,
        content=model.content,
        type=model.type,
        options=[QuickReplyOption(**o.model_dump()) for o in model.options],
        results=[_result_from_model(r) for r in model.results],
        step=model.step,
        timestamp=model.timestamp,
        delay_ms=model.delay_ms,
    )


def _state_from_model(model: ConversationStateModel) -> ConversationState:
    return ConversationState(
        step=model.step,
        selected_body_area=model.selected_body_area,
        selected_gender=model.selected_gender,
        vocabulary_id=model.vocabulary_id,
        selected_symptoms=list(dict.fromkeys(model.selected_symptoms)),
        duration=model.duration,
        severity=model.severity,
        matched_conditions=[_result_from_model(r) for r in model.matched_conditions],
    )


_STEPS_WITH_VOCABULARY = (
    ConversationStep.SYMPTOMS,
    ConversationStep.DURATION,
    ConversationStep.SEVERITY,
    ConversationStep.RESULTS,
)


def _state_is_consistent(state: ConversationState) -> bool:
    """Restored ids must still exist in the static tables and fit the restored step."""
    area = None
    if state.selected_body_area is not None:
        area = find_body_area(state.selected_body_area)
        if area is None:
            return False

    if state.step == ConversationStep.GENDER_SELECT:
        if area is None or area.kind != BodyAreaKind.PELVIC:
            return False
    if state.selected_gender is not None and (area is None or area.kind != BodyAreaKind.PELVIC):
        return False

    if state.vocabulary_id is None:
        return state.step not in _STEPS_WITH_VOCABULARY and not state.selected_symptoms
    vocabulary = find_vocabulary(state.vocabulary_id)
    if vocabulary is None:
        return False
    # The vocabulary must be the one the area (and gender) actually offers
    if area is None or area.vocabulary_for(state.selected_gender) is not vocabulary:
        return False
    return all(symptom_id in vocabulary.symptom_ids for symptom_id in state.selected_symptoms)


# ===== Public API =====

def dump_snapshot(conversation: ChatbotConversation) -> Dict[str, Any]:
    """Serialize a conversation to a JSON-compatible dict."""
    snapshot = ConversationSnapshot(
        version=SNAPSHOT_SCHEMA_VERSION,
        messages=[message_to_model(m) for m in conversation.messages],
        conversation_state=state_to_model(conversation.state),
    )
    return snapshot.model_dump(mode="json")


def load_snapshot(
    data: Optional[Dict[str, Any]],
    locale: Locale,
    category_names: Optional[CategoryNames] = None,
    typing_delays: Optional[bool] = None,
) -> Optional[ChatbotConversation]:
    """
    Restore a conversation from a snapshot.

    Returns:
        The restored conversation, or None when the snapshot is empty, from a
        different schema version, malformed, or refers to ids that no longer
        exist. Callers start a fresh conversation in that case.
    """
    if not data:
        return None

    version = data.get("version")
    if version != SNAPSHOT_SCHEMA_VERSION:
        logger.warning(f"Discarding chatbot snapshot with schema version {version!r} (expected {SNAPSHOT_SCHEMA_VERSION})")
        return None

    try:
        snapshot = ConversationSnapshot.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Discarding malformed chatbot snapshot: {e}")
        return None

    state = _state_from_model(snapshot.conversation_state)
    if not _state_is_consistent(state):
        logger.warning("Discarding chatbot snapshot that references unknown body areas or symptoms")
        return None

    kwargs: Dict[str, Any] = {}
    if typing_delays is not None:
        kwargs["typing_delays"] = typing_delays
    return ChatbotConversation(
        locale=locale,
        category_names=category_names,
        state=state,
        messages=[_message_from_model(m) for m in snapshot.messages],
        **kwargs,
    )
