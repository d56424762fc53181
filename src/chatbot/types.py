"""
Shared types for the symptom-checker chatbot.

Static table records (body areas, symptoms, condition mappings) are frozen
dataclasses; per-conversation records (state, messages, results) are plain
mutable dataclasses owned by a single conversation.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


class Locale(str, Enum):
    """User-facing languages supported by the chatbot."""
    EN = "en"
    ZH_TW = "zh-TW"


class ConversationStep(str, Enum):
    """Conversation steps, in the only order they can be visited."""
    WELCOME = "welcome"
    BODY_AREA = "body_area"
    GENDER_SELECT = "gender_select"
    SYMPTOMS = "symptoms"
    DURATION = "duration"
    SEVERITY = "severity"
    RESULTS = "results"


class BodyAreaKind(str, Enum):
    """How selecting a body area loads its symptom vocabulary."""
    STANDARD = "standard"          # Area owns a single vocabulary
    PELVIC = "pelvic"              # Vocabulary depends on the selected gender
    DIRECT_ENTRY = "direct_entry"  # Quick-entry for one condition with a fixed vocabulary


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"


class Duration(str, Enum):
    LESS_THAN_WEEK = "less_than_week"
    ONE_TO_FOUR_WEEKS = "1_to_4_weeks"
    ONE_TO_SIX_MONTHS = "1_to_6_months"
    MORE_THAN_SIX_MONTHS = "more_than_6_months"


class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class MatchTier(str, Enum):
    """Qualitative bucket derived from a numeric match score."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class OptionAction(str, Enum):
    """What clicking a quick-reply option asks the conversation to do."""
    SELECT_BODY_AREA = "select_body_area"
    SELECT_GENDER = "select_gender"
    SELECT_SYMPTOM = "select_symptom"
    SELECT_DURATION = "select_duration"
    SELECT_SEVERITY = "select_severity"
    VIEW_CONDITION = "view_condition"
    BOOK_APPOINTMENT = "book_appointment"
    START_OVER = "start_over"
    CLOSE = "close"


class MessageRole(str, Enum):
    USER = "user"
    BOT = "bot"


class MessageType(str, Enum):
    TEXT = "text"
    QUICK_REPLIES = "quick_replies"
    RESULTS = "results"


class SignalKind(str, Enum):
    """Requests the conversation hands to the hosting UI; it never navigates itself."""
    VIEW_TREATMENT = "view_treatment"
    BOOK_APPOINTMENT = "book_appointment"
    CLOSE = "close"


@dataclass(frozen=True)
class LocalizedText:
    """A user-facing string in every supported locale."""
    en: str
    zh_tw: str

    def get(self, locale: Locale) -> str:
        return self.zh_tw if locale == Locale.ZH_TW else self.en


@dataclass(frozen=True)
class Symptom:
    """A selectable symptom inside a vocabulary."""
    id: str
    label: LocalizedText
    related_conditions: Tuple[str, ...] = ()
    is_emergency: bool = False
    emergency_message: Optional[LocalizedText] = None


@dataclass(frozen=True)
class SymptomVocabulary:
    """Ordered list of symptoms offered together in the symptoms step."""
    id: str
    symptoms: Tuple[Symptom, ...]

    @property
    def symptom_ids(self) -> Tuple[str, ...]:
        return tuple(symptom.id for symptom in self.symptoms)

    def find(self, symptom_id: str) -> Optional[Symptom]:
        for symptom in self.symptoms:
            if symptom.id == symptom_id:
                return symptom
        return None


@dataclass(frozen=True)
class BodyArea:
    """
    Top-level option of the body-area question.

    Exactly one vocabulary source is populated, selected by ``kind``:
    ``vocabulary`` for STANDARD and DIRECT_ENTRY areas, ``branches`` for
    PELVIC. DIRECT_ENTRY areas also name the condition they shortcut to.
    """
    id: str
    label: LocalizedText
    kind: BodyAreaKind = BodyAreaKind.STANDARD
    vocabulary: Optional[SymptomVocabulary] = None
    branches: Mapping[Gender, SymptomVocabulary] = field(default_factory=lambda: MappingProxyType({}))
    condition_id: Optional[str] = None

    def vocabulary_for(self, gender: Optional[Gender] = None) -> Optional[SymptomVocabulary]:
        """Return the symptom vocabulary this area offers (for pelvic areas, per gender)."""
        if self.kind == BodyAreaKind.PELVIC:
            if gender is None:
                return None
            return self.branches.get(gender)
        if self.kind in (BodyAreaKind.STANDARD, BodyAreaKind.DIRECT_ENTRY):
            return self.vocabulary
        raise ValueError(f"Unhandled body area kind: {self.kind}")


@dataclass(frozen=True)
class ConditionMapping:
    """Static record linking a set of symptoms to one condition and its treatment category."""
    id: str
    category_id: str
    symptoms: Tuple[str, ...]
    body_areas: Tuple[str, ...]
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ConditionText:
    """Display text of a condition's treatment."""
    title: LocalizedText
    short_description: LocalizedText


@dataclass
class ConditionResult:
    """A scored condition, localized for display."""
    condition_id: str
    title: str
    short_description: str
    match_score: MatchTier
    category_id: str
    category_name: str
    score: float = 0.0
    match_label: str = ""  # Localized tier badge, e.g. "High Match"


@dataclass
class QuickReplyOption:
    """A clickable option attached to a bot message."""
    id: str
    label: str
    value: str
    action: OptionAction


@dataclass
class ChatMessage:
    """One bubble in the conversation transcript."""
    id: str
    role: MessageRole
    content: str
    type: MessageType = MessageType.TEXT
    options: List[QuickReplyOption] = field(default_factory=list)
    results: List[ConditionResult] = field(default_factory=list)
    step: Optional[ConversationStep] = None  # Step the message was emitted for
    timestamp: int = 0  # Milliseconds since epoch
    delay_ms: int = 0  # Cosmetic typing pause the widget shows before this message


@dataclass
class ActionSignal:
    """Outbound request for the hosting UI."""
    kind: SignalKind
    category_id: Optional[str] = None
    condition_id: Optional[str] = None
    category_index: Optional[int] = None


@dataclass
class EmergencyCheck:
    """Result of inspecting selected symptoms for emergency flags."""
    is_emergency: bool
    message: Optional[str] = None
    symptom_id: Optional[str] = None


@dataclass
class ConversationState:
    """
    Mutable per-session state of one conversation.

    ``selected_symptoms`` holds unique ids, always drawn from the vocabulary
    named by ``vocabulary_id``.
    """
    step: ConversationStep = ConversationStep.WELCOME
    selected_body_area: Optional[str] = None
    selected_gender: Optional[Gender] = None
    vocabulary_id: Optional[str] = None
    selected_symptoms: List[str] = field(default_factory=list)
    duration: Optional[Duration] = None
    severity: Optional[Severity] = None
    matched_conditions: List[ConditionResult] = field(default_factory=list)
