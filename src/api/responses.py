"""
Shared request/response models for the chatbot API.

Message, option, result and state shapes are the snapshot models from
`chatbot.snapshot`, so the widget receives exactly what is persisted.
"""

from typing import List, Optional

from pydantic import BaseModel, field_validator

from chatbot.snapshot import ChatMessageModel, ConversationStateModel, QuickReplyOptionModel
from chatbot.types import Locale, OptionAction, SignalKind
from core.config import DEFAULT_LOCALE


class SessionCreateRequest(BaseModel):
    """Request model for starting a conversation."""
    locale: Locale = Locale(DEFAULT_LOCALE)


class ChatbotActionRequest(BaseModel):
    """Request model for a clicked quick-reply option."""
    action: OptionAction
    value: str = ""

    @field_validator('value')
    @classmethod
    def strip_value(cls, v: str) -> str:
        return v.strip()


class EmergencyTextRequest(BaseModel):
    """Request model for checking free text for emergency phrases."""
    text: str
    locale: Locale = Locale(DEFAULT_LOCALE)

    @field_validator('text')
    @classmethod
    def validate_text(cls, v: str) -> str:
        if len(v) > 2000:
            raise ValueError('訊息長度過長')
        return v


class ActionSignalModel(BaseModel):
    """Outbound request for the hosting page (open a treatment dialog, book, close)."""
    kind: SignalKind
    category_id: Optional[str] = None
    condition_id: Optional[str] = None
    category_index: Optional[int] = None


class EmergencyCheckModel(BaseModel):
    """Emergency status of the current symptom selection."""
    is_emergency: bool
    message: Optional[str] = None
    symptom_id: Optional[str] = None


class ChatbotSessionResponse(BaseModel):
    """Response model for every conversation endpoint."""
    session_key: str
    locale: Locale
    accepted: bool
    messages: List[ChatMessageModel]
    new_messages: List[ChatMessageModel]
    conversation_state: ConversationStateModel
    emergency: EmergencyCheckModel
    signals: List[ActionSignalModel] = []


class BodyAreaOptionsResponse(BaseModel):
    """Response model for the body-area quick replies."""
    locale: Locale
    options: List[QuickReplyOptionModel]


class EmergencyTextResponse(BaseModel):
    """Response model for the free-text emergency check."""
    is_emergency: bool
    keywords: List[str]
    message: Optional[str] = None
