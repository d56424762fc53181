"""
Localized chatbot copy and quick-reply option builders.

Every string the conversation shows to a patient lives here, in English and
Traditional Chinese.
"""

from typing import List

from core.config import EMERGENCY_HOTLINE, EMERGENCY_REGION, EMERGENCY_REGION_ZH
from chatbot.data import BODY_AREAS, QUICK_ENTRIES
from chatbot.types import (
    Duration,
    Gender,
    LocalizedText as T,
    Locale,
    MatchTier,
    OptionAction,
    QuickReplyOption,
    Severity,
    SymptomVocabulary,
)


CONTINUE_OPTION_ID = "continue"
CONTINUE_VALUE = "continue"

WELCOME = T(
    "Hello! I'm the BEVA Clinic virtual assistant. I can help you learn which treatments might be suitable "
    "for your condition. Please note that I cannot provide medical diagnoses. For emergencies, please seek "
    "immediate medical care.",
    "您好！我是BEVA診所的虛擬助手。我可以幫助您了解哪些治療項目可能適合您的情況。請注意，我無法提供醫療診斷，"
    "如有緊急情況請立即就醫。",
)
BODY_AREA_QUESTION = T("Which body area are you experiencing issues with?", "請問您哪個身體部位有不適？")
GENDER_QUESTION = T(
    "To show the relevant pelvic symptoms, please select your sex:",
    "為了顯示相關的盆腔症狀，請選擇您的性別：",
)
SYMPTOM_QUESTION = T(
    'What symptoms are you experiencing? (Select all that apply, then click "Continue")',
    "請問您有什麼症狀？（可多選，完成後點擊「繼續」）",
)
CONTINUE_LABEL = T("Continue →", "繼續 →")
CONTINUE_ECHO = T("Continue", "繼續")
SELECT_AT_LEAST_ONE = T("Please select at least one symptom to continue.", "請至少選擇一個症狀以繼續。")
DURATION_QUESTION = T("How long have you been experiencing these symptoms?", "這些症狀持續了多久？")
SEVERITY_QUESTION = T("How would you rate the severity of your symptoms?", "症狀的嚴重程度如何？")
RESULTS_INTRO = T(
    "Based on your symptoms, the following treatments may be suitable for your condition:",
    "根據您的症狀，以下治療項目可能適合您的情況：",
)
NEXT_STEP_HINT = T(
    'You can click "Learn More" above to view treatment details, or "Book Consultation" to connect with '
    "our specialists.",
    "您可以點擊上方「了解更多」查看治療詳情，或點擊「預約諮詢」與我們的專科醫生聯繫。",
)
NO_MATCH = T(
    "Based on the information provided, we cannot determine specific treatment recommendations. We suggest "
    "booking a consultation for a detailed evaluation by our specialists.",
    "根據您提供的資訊，我們無法確定具體的治療建議。建議您預約諮詢，讓我們的專科醫生為您進行詳細評估。",
)
DISCLAIMER = T(
    "Disclaimer: This tool is for informational purposes only and is not a substitute for professional "
    "medical advice, diagnosis, or treatment. For medical emergencies, please call emergency services or "
    "visit the ER immediately.",
    "免責聲明：此工具僅供參考，不能替代專業醫療建議、診斷或治療。如有醫療緊急情況，請立即致電緊急服務或前往急症室。",
)
GENERIC_EMERGENCY = T(
    "This is an emergency symptom. Please seek immediate medical attention.",
    "這是緊急症狀。請立即尋求醫療協助。",
)
REASSESS_LABEL = T("Reassess", "重新評估")
BOOK_CONSULTATION_LABEL = T("Book Consultation", "預約諮詢")

_GENDER_LABELS = {
    Gender.FEMALE: T("Female", "女性"),
    Gender.MALE: T("Male", "男性"),
}

_DURATION_LABELS = {
    Duration.LESS_THAN_WEEK: T("Less than 1 week", "少於1週"),
    Duration.ONE_TO_FOUR_WEEKS: T("1-4 weeks", "1-4週"),
    Duration.ONE_TO_SIX_MONTHS: T("1-6 months", "1-6個月"),
    Duration.MORE_THAN_SIX_MONTHS: T("More than 6 months", "超過6個月"),
}
_DURATION_OPTION_IDS = {
    Duration.LESS_THAN_WEEK: "dur_1",
    Duration.ONE_TO_FOUR_WEEKS: "dur_2",
    Duration.ONE_TO_SIX_MONTHS: "dur_3",
    Duration.MORE_THAN_SIX_MONTHS: "dur_4",
}

_SEVERITY_LABELS = {
    Severity.MILD: T("Mild - does not affect daily activities", "輕微 - 不影響日常活動"),
    Severity.MODERATE: T("Moderate - some impact", "中度 - 有些影響"),
    Severity.SEVERE: T("Severe - significantly affects quality of life", "嚴重 - 顯著影響生活品質"),
}
_SEVERITY_OPTION_IDS = {
    Severity.MILD: "sev_mild",
    Severity.MODERATE: "sev_mod",
    Severity.SEVERE: "sev_sev",
}

_MATCH_TIER_LABELS = {
    MatchTier.HIGH: T("High Match", "高度吻合"),
    MatchTier.MEDIUM: T("Possible Match", "可能吻合"),
    MatchTier.LOW: T("May be related", "可能相關"),
}


def emergency_disclaimer(locale: Locale) -> str:
    """Instruction shown alongside an emergency symptom notice."""
    if locale == Locale.ZH_TW:
        return (
            f"請立即致電緊急服務熱線（{EMERGENCY_REGION_ZH}：{EMERGENCY_HOTLINE}）或前往最近的急症室。"
            "您的症狀可能需要立即醫療關注。"
        )
    return (
        f"Please call emergency services immediately ({EMERGENCY_REGION}: {EMERGENCY_HOTLINE}) or go to the "
        "nearest emergency room. Your symptoms may require immediate medical attention."
    )


def match_tier_label(tier: MatchTier, locale: Locale) -> str:
    return _MATCH_TIER_LABELS[tier].get(locale)


def body_area_options(locale: Locale) -> List[QuickReplyOption]:
    """Quick-entry options first, then every body area."""
    options = [
        QuickReplyOption(f"direct_{entry.id}", entry.label.get(locale), entry.id, OptionAction.SELECT_BODY_AREA)
        for entry in QUICK_ENTRIES
    ]
    options.extend(
        QuickReplyOption(f"area_{area.id}", area.label.get(locale), area.id, OptionAction.SELECT_BODY_AREA)
        for area in BODY_AREAS
    )
    return options


def gender_options(locale: Locale) -> List[QuickReplyOption]:
    return [
        QuickReplyOption(f"gender_{gender.value}", label.get(locale), gender.value, OptionAction.SELECT_GENDER)
        for gender, label in _GENDER_LABELS.items()
    ]


def gender_label(gender: Gender, locale: Locale) -> str:
    return _GENDER_LABELS[gender].get(locale)


def symptom_options(vocabulary: SymptomVocabulary, locale: Locale) -> List[QuickReplyOption]:
    """Symptom checkboxes followed by the "Continue" affordance."""
    options = [
        QuickReplyOption(f"sym_{symptom.id}", symptom.label.get(locale), symptom.id, OptionAction.SELECT_SYMPTOM)
        for symptom in vocabulary.symptoms
    ]
    options.append(
        QuickReplyOption(CONTINUE_OPTION_ID, CONTINUE_LABEL.get(locale), CONTINUE_VALUE, OptionAction.SELECT_SYMPTOM)
    )
    return options


def duration_options(locale: Locale) -> List[QuickReplyOption]:
    return [
        QuickReplyOption(_DURATION_OPTION_IDS[duration], label.get(locale), duration.value, OptionAction.SELECT_DURATION)
        for duration, label in _DURATION_LABELS.items()
    ]


def duration_label(duration: Duration, locale: Locale) -> str:
    return _DURATION_LABELS[duration].get(locale)


def severity_options(locale: Locale) -> List[QuickReplyOption]:
    return [
        QuickReplyOption(_SEVERITY_OPTION_IDS[severity], label.get(locale), severity.value, OptionAction.SELECT_SEVERITY)
        for severity, label in _SEVERITY_LABELS.items()
    ]


def severity_label(severity: Severity, locale: Locale) -> str:
    return _SEVERITY_LABELS[severity].get(locale)


def results_options(locale: Locale) -> List[QuickReplyOption]:
    """Actions offered under the result cards."""
    return [
        QuickReplyOption("start_over", REASSESS_LABEL.get(locale), "start_over", OptionAction.START_OVER),
        QuickReplyOption("book", BOOK_CONSULTATION_LABEL.get(locale), "book", OptionAction.BOOK_APPOINTMENT),
    ]
