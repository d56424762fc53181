"""
Symptom-checker conversation state machine.

Drives the fixed question sequence

    welcome -> body_area -> [gender_select] -> symptoms -> duration -> severity -> results

and records the transcript the widget renders. Every operation returns a
TransitionResult with the messages it appended, any outbound signals for the
hosting page, and the current emergency check. Operations attempted in the
wrong step, or with unknown ids, are rejected without changing state.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from core.config import CHATBOT_TYPING_DELAYS_ENABLED
from core.constants import (
    TYPING_DELAY_CORRECTION_MS,
    TYPING_DELAY_DISCLAIMER_MS,
    TYPING_DELAY_QUESTION_MS,
    TYPING_DELAY_RESULTS_MS,
    TYPING_DELAY_STEP_MS,
    TYPING_DELAY_WELCOME_MS,
)
from chatbot import prompts
from chatbot.data import CATEGORY_INDEX, CategoryNames, find_body_area, find_condition_mapping, find_vocabulary
from chatbot.emergency import check_emergency
from chatbot.scoring import match_conditions
from chatbot.types import (
    ActionSignal,
    BodyAreaKind,
    ChatMessage,
    ConditionResult,
    ConversationState,
    ConversationStep,
    Duration,
    EmergencyCheck,
    Gender,
    Locale,
    MessageRole,
    MessageType,
    OptionAction,
    QuickReplyOption,
    Severity,
    SignalKind,
    SymptomVocabulary,
)
from utils.datetime_utils import clinic_now, to_epoch_millis

logger = logging.getLogger(__name__)


@dataclass
class TransitionResult:
    """Outcome of one user action."""
    accepted: bool
    messages: List[ChatMessage] = field(default_factory=list)
    signals: List[ActionSignal] = field(default_factory=list)
    emergency: EmergencyCheck = field(default_factory=lambda: EmergencyCheck(is_emergency=False))


class ChatbotConversation:
    """
    One patient's conversation with the symptom checker.

    Not thread-safe; a conversation belongs to a single session and actions
    are applied one at a time.
    """

    def __init__(
        self,
        locale: Locale,
        category_names: Optional[CategoryNames] = None,
        typing_delays: bool = CHATBOT_TYPING_DELAYS_ENABLED,
        state: Optional[ConversationState] = None,
        messages: Optional[List[ChatMessage]] = None,
    ):
        self.locale = locale
        self.category_names = category_names
        self.typing_delays = typing_delays
        self.state = state if state is not None else ConversationState()
        self.messages: List[ChatMessage] = list(messages) if messages else []

    # ===== Public operations =====

    def start(self) -> TransitionResult:
        """Reset and greet: welcome message, then the body-area question."""
        self.state = ConversationState()
        self.messages = []
        result = TransitionResult(accepted=True)
        result.messages.append(self._bot(prompts.WELCOME.get(self.locale), delay_ms=TYPING_DELAY_WELCOME_MS))
        self.state.step = ConversationStep.BODY_AREA
        result.messages.append(self._bot(
            prompts.BODY_AREA_QUESTION.get(self.locale),
            message_type=MessageType.QUICK_REPLIES,
            options=prompts.body_area_options(self.locale),
            delay_ms=TYPING_DELAY_QUESTION_MS,
        ))
        return self._commit(result)

    def restart(self) -> TransitionResult:
        """Clear all state and return to the welcome step. Valid from any step."""
        logger.debug(f"Restarting conversation from step {self.state.step.value}")
        self.state = ConversationState()
        self.messages = []
        return self._commit(TransitionResult(accepted=True))

    def select_body_area(self, area_id: str) -> TransitionResult:
        return self._commit(self._select_body_area(area_id))

    def select_gender(self, value: str) -> TransitionResult:
        return self._commit(self._select_gender(value))

    def toggle_symptom(self, symptom_id: str) -> TransitionResult:
        return self._commit(self._toggle_symptom(symptom_id))

    def confirm_symptoms(self) -> TransitionResult:
        return self._commit(self._confirm_symptoms())

    def select_duration(self, bucket: str) -> TransitionResult:
        return self._commit(self._select_duration(bucket))

    def select_severity(self, bucket: str) -> TransitionResult:
        return self._commit(self._select_severity(bucket))

    def handle_option(self, option: QuickReplyOption) -> TransitionResult:
        return self.handle_action(option.action, option.value)

    def handle_action(self, action: OptionAction, value: str) -> TransitionResult:
        """
        Apply a clicked quick-reply option.

        Selections are echoed back as a user message before the bot's reply,
        using the option's label in the conversation locale. Symptom toggles
        are not echoed; "Continue" echoes the selected symptom labels.
        """
        if action == OptionAction.SELECT_BODY_AREA:
            result = self._select_body_area(value)
            area = find_body_area(value)
            return self._commit(result, echo=area.label.get(self.locale) if area else None)

        if action == OptionAction.SELECT_GENDER:
            result = self._select_gender(value)
            echo = prompts.gender_label(Gender(value), self.locale) if result.accepted else None
            return self._commit(result, echo=echo)

        if action == OptionAction.SELECT_SYMPTOM:
            if value != prompts.CONTINUE_VALUE:
                return self._commit(self._toggle_symptom(value))
            echo = self._selected_symptom_labels() or prompts.CONTINUE_ECHO.get(self.locale)
            return self._commit(self._confirm_symptoms(), echo=echo)

        if action == OptionAction.SELECT_DURATION:
            result = self._select_duration(value)
            echo = prompts.duration_label(Duration(value), self.locale) if result.accepted else None
            return self._commit(result, echo=echo)

        if action == OptionAction.SELECT_SEVERITY:
            result = self._select_severity(value)
            echo = prompts.severity_label(Severity(value), self.locale) if result.accepted else None
            return self._commit(result, echo=echo)

        if action == OptionAction.VIEW_CONDITION:
            return self._commit(self._view_condition(value))

        if action == OptionAction.BOOK_APPOINTMENT:
            return self._commit(TransitionResult(
                accepted=True,
                signals=[ActionSignal(SignalKind.BOOK_APPOINTMENT), ActionSignal(SignalKind.CLOSE)],
            ))

        if action == OptionAction.START_OVER:
            logger.debug(f"Starting over from step {self.state.step.value}")
            return self.start()

        if action == OptionAction.CLOSE:
            return self._commit(TransitionResult(accepted=True, signals=[ActionSignal(SignalKind.CLOSE)]))

        raise ValueError(f"Unhandled option action: {action}")

    def check_emergency(self) -> EmergencyCheck:
        """Emergency status of the current symptom selection."""
        return check_emergency(self.state.selected_symptoms, self.locale)

    def active_vocabulary(self) -> Optional[SymptomVocabulary]:
        return find_vocabulary(self.state.vocabulary_id)

    @property
    def matched_conditions(self) -> List[ConditionResult]:
        return self.state.matched_conditions

    # ===== Transitions =====

    def _select_body_area(self, area_id: str) -> TransitionResult:
        if not self._in_step(ConversationStep.BODY_AREA, "select_body_area"):
            return TransitionResult(accepted=False)

        area = find_body_area(area_id)
        if area is None:
            logger.info(f"Ignoring unknown body area: {area_id}")
            return TransitionResult(accepted=False)

        if area.kind == BodyAreaKind.PELVIC:
            self.state.selected_body_area = area.id
            self.state.step = ConversationStep.GENDER_SELECT
            return TransitionResult(accepted=True, messages=[self._bot(
                prompts.GENDER_QUESTION.get(self.locale),
                message_type=MessageType.QUICK_REPLIES,
                options=prompts.gender_options(self.locale),
                delay_ms=TYPING_DELAY_STEP_MS,
            )])

        if area.kind in (BodyAreaKind.STANDARD, BodyAreaKind.DIRECT_ENTRY):
            vocabulary = area.vocabulary_for()
            if vocabulary is None:
                logger.error(f"Body area {area.id} has no symptom vocabulary")
                return TransitionResult(accepted=False)
            self.state.selected_body_area = area.id
            return self._enter_symptoms(vocabulary)

        raise ValueError(f"Unhandled body area kind: {area.kind}")

    def _select_gender(self, value: str) -> TransitionResult:
        if not self._in_step(ConversationStep.GENDER_SELECT, "select_gender"):
            return TransitionResult(accepted=False)

        try:
            gender = Gender(value)
        except ValueError:
            logger.info(f"Ignoring unknown gender value: {value}")
            return TransitionResult(accepted=False)

        area = find_body_area(self.state.selected_body_area or "")
        vocabulary = area.vocabulary_for(gender) if area else None
        if vocabulary is None:
            logger.error(f"No {gender.value} vocabulary for body area {self.state.selected_body_area}")
            return TransitionResult(accepted=False)

        self.state.selected_gender = gender
        return self._enter_symptoms(vocabulary)

    def _enter_symptoms(self, vocabulary: SymptomVocabulary) -> TransitionResult:
        self.state.vocabulary_id = vocabulary.id
        self.state.selected_symptoms = []
        self.state.step = ConversationStep.SYMPTOMS
        return TransitionResult(accepted=True, messages=[self._bot(
            prompts.SYMPTOM_QUESTION.get(self.locale),
            message_type=MessageType.QUICK_REPLIES,
            options=prompts.symptom_options(vocabulary, self.locale),
            delay_ms=TYPING_DELAY_STEP_MS,
        )])

    def _toggle_symptom(self, symptom_id: str) -> TransitionResult:
        if not self._in_step(ConversationStep.SYMPTOMS, "toggle_symptom"):
            return TransitionResult(accepted=False)

        vocabulary = self.active_vocabulary()
        if vocabulary is None or vocabulary.find(symptom_id) is None:
            logger.info(f"Ignoring symptom {symptom_id} outside vocabulary {self.state.vocabulary_id}")
            return TransitionResult(accepted=False)

        if symptom_id in self.state.selected_symptoms:
            self.state.selected_symptoms.remove(symptom_id)
        else:
            self.state.selected_symptoms.append(symptom_id)
        return TransitionResult(accepted=True)

    def _confirm_symptoms(self) -> TransitionResult:
        if not self._in_step(ConversationStep.SYMPTOMS, "confirm_symptoms"):
            return TransitionResult(accepted=False)

        if not self.state.selected_symptoms:
            return TransitionResult(accepted=False, messages=[
                self._bot(prompts.SELECT_AT_LEAST_ONE.get(self.locale), delay_ms=TYPING_DELAY_CORRECTION_MS),
            ])

        self.state.step = ConversationStep.DURATION
        return TransitionResult(accepted=True, messages=[self._bot(
            prompts.DURATION_QUESTION.get(self.locale),
            message_type=MessageType.QUICK_REPLIES,
            options=prompts.duration_options(self.locale),
            delay_ms=TYPING_DELAY_STEP_MS,
        )])

    def _select_duration(self, bucket: str) -> TransitionResult:
        if not self._in_step(ConversationStep.DURATION, "select_duration"):
            return TransitionResult(accepted=False)

        try:
            duration = Duration(bucket)
        except ValueError:
            logger.info(f"Ignoring unknown duration bucket: {bucket}")
            return TransitionResult(accepted=False)

        self.state.duration = duration
        self.state.step = ConversationStep.SEVERITY
        return TransitionResult(accepted=True, messages=[self._bot(
            prompts.SEVERITY_QUESTION.get(self.locale),
            message_type=MessageType.QUICK_REPLIES,
            options=prompts.severity_options(self.locale),
            delay_ms=TYPING_DELAY_STEP_MS,
        )])

    def _select_severity(self, bucket: str) -> TransitionResult:
        if not self._in_step(ConversationStep.SEVERITY, "select_severity"):
            return TransitionResult(accepted=False)

        try:
            severity = Severity(bucket)
        except ValueError:
            logger.info(f"Ignoring unknown severity bucket: {bucket}")
            return TransitionResult(accepted=False)

        self.state.severity = severity
        self.state.step = ConversationStep.RESULTS
        return TransitionResult(accepted=True, messages=self._show_results())

    def _show_results(self) -> List[ChatMessage]:
        matched = match_conditions(
            self.state.selected_symptoms,
            self.locale,
            category_names=self.category_names,
            gender=self.state.selected_gender,
        )
        self.state.matched_conditions = matched
        logger.info(
            f"Symptom check completed: area={self.state.selected_body_area}, "
            f"symptoms={self.state.selected_symptoms}, matches={[r.condition_id for r in matched]}"
        )

        messages: List[ChatMessage] = []
        if not matched:
            messages.append(self._bot(prompts.NO_MATCH.get(self.locale), delay_ms=TYPING_DELAY_RESULTS_MS))
        else:
            messages.append(self._bot(
                prompts.RESULTS_INTRO.get(self.locale),
                message_type=MessageType.RESULTS,
                results=matched,
                options=prompts.results_options(self.locale),
                delay_ms=TYPING_DELAY_RESULTS_MS,
            ))
            messages.append(self._bot(prompts.NEXT_STEP_HINT.get(self.locale), delay_ms=TYPING_DELAY_STEP_MS))
        messages.append(self._bot(prompts.DISCLAIMER.get(self.locale), delay_ms=TYPING_DELAY_DISCLAIMER_MS))
        return messages

    def _view_condition(self, condition_id: str) -> TransitionResult:
        mapping = find_condition_mapping(condition_id)
        if mapping is None:
            logger.info(f"Ignoring view request for unknown condition: {condition_id}")
            return TransitionResult(accepted=False)
        return TransitionResult(accepted=True, signals=[ActionSignal(
            SignalKind.VIEW_TREATMENT,
            category_id=mapping.category_id,
            condition_id=mapping.id,
            category_index=CATEGORY_INDEX.get(mapping.category_id),
        )])

    # ===== Helpers =====

    def _in_step(self, expected: ConversationStep, action: str) -> bool:
        if self.state.step != expected:
            logger.info(f"Rejected {action}: conversation is in step {self.state.step.value}, not {expected.value}")
            return False
        return True

    def _commit(self, result: TransitionResult, echo: Optional[str] = None) -> TransitionResult:
        """Append the result's messages to the transcript, preceded by the user's echoed choice."""
        if echo and (result.accepted or result.messages):
            result.messages.insert(0, self._message(MessageRole.USER, echo, MessageType.TEXT))
        self.messages.extend(result.messages)
        result.emergency = self.check_emergency()
        return result

    def _selected_symptom_labels(self) -> str:
        vocabulary = self.active_vocabulary()
        labels = []
        for symptom_id in self.state.selected_symptoms:
            symptom = vocabulary.find(symptom_id) if vocabulary else None
            labels.append(symptom.label.get(self.locale) if symptom else symptom_id)
        return ", ".join(labels)

    def _bot(
        self,
        content: str,
        message_type: MessageType = MessageType.TEXT,
        options: Optional[List[QuickReplyOption]] = None,
        results: Optional[List[ConditionResult]] = None,
        delay_ms: int = 0,
    ) -> ChatMessage:
        return self._message(MessageRole.BOT, content, message_type, options, results, delay_ms)

    def _message(
        self,
        role: MessageRole,
        content: str,
        message_type: MessageType,
        options: Optional[List[QuickReplyOption]] = None,
        results: Optional[List[ConditionResult]] = None,
        delay_ms: int = 0,
    ) -> ChatMessage:
        return ChatMessage(
            id=uuid.uuid4().hex[:12],
            role=role,
            content=content,
            type=message_type,
            options=options or [],
            results=list(results) if results else [],
            step=self.state.step,
            timestamp=to_epoch_millis(clinic_now()),
            delay_ms=delay_ms if self.typing_delays else 0,
        )
