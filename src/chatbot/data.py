"""
Static decision-tree tables for the symptom checker.

Body areas and their symptom vocabularies, condition mappings to treatment
categories, per-condition display text and the default treatment catalog
names. Everything here is immutable and built once at import time.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from chatbot.types import (
    BodyArea,
    BodyAreaKind,
    ConditionMapping,
    ConditionText,
    Gender,
    LocalizedText as T,
    Symptom,
    SymptomVocabulary,
)


# Head / Brain
_SEVERE_HEADACHE = Symptom(
    "severe_headache", T("Severe sudden headache", "突發嚴重頭痛"),
    ("cerebral_aneurysm", "acute_stroke", "csdh"),
)
_VISION_PROBLEMS = Symptom(
    "vision_problems", T("Vision problems / Double vision", "視力問題 / 重影"),
    ("cerebral_aneurysm", "acute_stroke", "carotid_stenosis"),
)
_NECK_PAIN = Symptom(
    "neck_pain", T("Neck pain / Stiffness", "頸部疼痛 / 僵硬"),
    ("cerebral_aneurysm", "carotid_stenosis"),
)
_STROKE_SYMPTOMS = Symptom(
    "stroke_symptoms", T("Face drooping / Arm weakness / Speech difficulty", "面部下垂 / 手臂無力 / 言語困難"),
    ("acute_stroke", "carotid_stenosis"),
    is_emergency=True,
    emergency_message=T(
        "These are stroke symptoms. Call emergency services immediately.",
        "這些是中風症狀。請立即致電緊急服務。",
    ),
)
_CONFUSION = Symptom(
    "confusion", T("Confusion / Memory loss", "神志不清 / 記憶力減退"),
    ("acute_stroke", "csdh", "dbs"),
    is_emergency=True,
    emergency_message=T(
        "Sudden confusion may indicate stroke. Seek emergency care.",
        "突發神志不清可能表示中風。請尋求緊急醫療。",
    ),
)
_BALANCE_ISSUES = Symptom(
    "balance_issues", T("Balance problems / Dizziness", "平衡問題 / 頭暈"),
    ("acute_stroke", "dbs", "avm"),
)
_TREMOR = Symptom("tremor", T("Tremor / Shaking", "震顫 / 顫抖"), ("dbs",))
_RIGIDITY = Symptom("rigidity", T("Muscle stiffness / Rigidity", "肌肉僵硬 / 強直"), ("dbs",))
_SEIZURES = Symptom("seizures", T("Seizures", "癲癇發作"), ("avm", "cerebral_aneurysm"), is_emergency=True)

# Sleep / Breathing
_LOUD_SNORING = Symptom("loud_snoring", T("Loud snoring", "大聲打鼾"), ("sleep_apnea",))
_BREATHING_PAUSES = Symptom(
    "breathing_pauses", T("Breathing pauses during sleep", "睡眠時呼吸暫停"),
    ("sleep_apnea",),
    is_emergency=True,
    emergency_message=T(
        "Breathing pauses can be life-threatening. Seek immediate evaluation.",
        "呼吸暫停可能危及生命。請立即求醫。",
    ),
)
_DAYTIME_SLEEPINESS = Symptom("daytime_sleepiness", T("Excessive daytime sleepiness", "日間過度嗜睡"), ("sleep_apnea",))
_MORNING_HEADACHES = Symptom("morning_headaches", T("Morning headaches", "晨起頭痛"), ("sleep_apnea",))
_CPAP_INTOLERANCE = Symptom("cpap_intolerance", T("Cannot tolerate CPAP machine", "無法耐受正壓呼吸機"), ("sleep_apnea",))

# Pelvic (female)
_HEAVY_PERIODS = Symptom("heavy_periods", T("Heavy menstrual bleeding", "經血過多"), ("uterine_fibroids",))
_PELVIC_PAIN = Symptom("pelvic_pain", T("Pelvic pain / Pressure", "盆腔疼痛 / 壓迫感"), ("uterine_fibroids", "pelvic_congestion"))
_FREQUENT_URINATION = Symptom("frequent_urination", T("Frequent urination", "頻尿"), ("uterine_fibroids", "prostate_enlargement"))
_CHRONIC_PELVIC_PAIN = Symptom(
    "chronic_pelvic_pain", T("Chronic pelvic pain (standing/walking worse)", "慢性盆腔疼痛（站立/行走時加重）"),
    ("pelvic_congestion",),
)
_VARICOSE_VEINS_PELVIS = Symptom("varicose_veins_pelvis", T("Varicose veins in pelvic area", "盆腔靜脈曲張"), ("pelvic_congestion",))

# Pelvic (male)
_WEAK_STREAM = Symptom("weak_stream", T("Weak urine stream", "尿流無力"), ("prostate_enlargement",))
_URGENCY = Symptom("urgency", T("Frequent/urgent need to urinate", "尿頻/尿急"), ("prostate_enlargement",))
_NIGHTTIME_URINATION = Symptom("nighttime_urination", T("Nighttime urination (nocturia)", "夜尿"), ("prostate_enlargement",))
_INCOMPLETE_EMPTYING = Symptom(
    "incomplete_emptying", T("Feeling of incomplete bladder emptying", "排尿不盡感"), ("prostate_enlargement",),
)
_SCROTAL_PAIN = Symptom("scrotal_pain", T("Scrotal pain / Swollen veins", "陰囊疼痛 / 靜脈腫脹"), ("varicocele",))
_INFERTILITY = Symptom("infertility", T("Infertility issues", "不育問題"), ("varicocele",))

# Legs / Veins
_VISIBLE_VARICOSE = Symptom("visible_varicose", T("Visible varicose veins", "明顯靜脈曲張"), ("varicose_veins",))
_LEG_PAIN_SWELLING = Symptom(
    "leg_pain_swelling", T("Leg pain, swelling, heaviness", "腿部疼痛、腫脹、沉重感"),
    ("varicose_veins", "peripheral_vascular"),
)
_WALKING_PAIN = Symptom(
    "walking_pain", T("Leg pain when walking (relieved by rest)", "走路時腿痛（休息後緩解）"), ("peripheral_vascular",),
)
_SKIN_CHANGES = Symptom(
    "skin_changes", T("Skin discoloration / ulcers on legs", "腿部皮膚變色/潰瘍"),
    ("peripheral_vascular", "varicose_veins"),
    is_emergency=True,
    emergency_message=T("Leg ulcers require prompt medical attention.", "腿部潰瘍需要及時醫療關注。"),
)
_COLD_FEET = Symptom("cold_feet", T("Cold feet / Weak pulse", "腳部冰冷 / 脈搏微弱"), ("peripheral_vascular",))

# Knees
_KNEE_PAIN = Symptom("knee_pain", T("Chronic knee pain", "慢性膝蓋疼痛"), ("knee_arthritis",))
_KNEE_STIFFNESS = Symptom("knee_stiffness", T("Knee stiffness (especially morning)", "膝蓋僵硬（尤其早晨）"), ("knee_arthritis",))
_KNEE_SWELLING = Symptom("knee_swelling", T("Knee swelling", "膝蓋腫脹"), ("knee_arthritis",))
_NOT_READY_SURGERY = Symptom("not_ready_surgery", T("Not ready for knee replacement", "尚未準備接受膝關節置換"), ("knee_arthritis",))

# Feet
_HEEL_PAIN = Symptom("heel_pain", T("Heel pain (especially morning)", "足跟疼痛（尤其早晨）"), ("plantar_fasciitis",))
_HEEL_TENDERNESS = Symptom("heel_tenderness", T("Tenderness in arch of foot", "足弓壓痛"), ("plantar_fasciitis",))
_TREATMENT_FAILED = Symptom("treatment_failed", T("Failed orthotics/physical therapy", "矯形鞋墊/物理治療無效"), ("plantar_fasciitis",))

# Abdomen / Digestive
_HEMORRHOID_BLEEDING = Symptom(
    "hemorrhoid_bleeding", T("Rectal bleeding", "直腸出血"), ("hemorrhoids",),
    is_emergency=True,
    emergency_message=T("Significant bleeding requires immediate medical attention.", "大量出血需要立即醫療關注。"),
)
_HEMORRHOID_PAIN = Symptom("hemorrhoid_pain", T("Pain/itching around anus", "肛門周圍疼痛/瘙癢"), ("hemorrhoids",))
_LIVER_TUMOR = Symptom("liver_tumor", T("Liver tumor / Hepatocellular carcinoma", "肝腫瘤 / 肝癌"), ("oncology_intervention",))
_KIDNEY_TUMOR = Symptom("kidney_tumor", T("Kidney tumor", "腎腫瘤"), ("oncology_intervention",))
_LUNG_TUMOR = Symptom("lung_tumor", T("Lung tumor", "肺腫瘤"), ("oncology_intervention",))
_ABDOMINAL_AORTA = Symptom(
    "abdominal_aorta", T("Abdominal aortic aneurysm (diagnosed)", "腹主動脈瘤（已確診）"), ("aortic_disease",),
    is_emergency=True,
    emergency_message=T("Aortic aneurysm requires immediate specialist evaluation.", "主動脈瘤需要立即專科評估。"),
)

# Chest / Torso
_CHEST_PAIN = Symptom(
    "chest_pain", T("Chest pain", "胸痛"), (),
    is_emergency=True,
    emergency_message=T(
        "CHEST PAIN requires IMMEDIATE emergency care. Call emergency services now.",
        "胸痛需要立即緊急醫療。請立即致電緊急服務。",
    ),
)
_SHORTNESS_BREATH = Symptom(
    "shortness_breath", T("Shortness of breath", "呼吸困難"), ("aortic_disease", "sleep_apnea"),
    is_emergency=True,
    emergency_message=T("Severe shortness of breath requires immediate care.", "嚴重呼吸困難需要立即醫療。"),
)
_THORACIC_AORTA = Symptom(
    "thoracic_aorta", T("Thoracic aortic aneurysm (diagnosed)", "胸主動脈瘤（已確診）"), ("aortic_disease",),
    is_emergency=True,
)
_BACK_PAIN = Symptom(
    "back_pain", T("Severe back pain (sudden)", "突發嚴重背痛"), ("aortic_disease",),
    is_emergency=True,
    emergency_message=T("Sudden severe back pain may indicate aortic emergency.", "突發嚴重背痛可能表示主動脈急症。"),
)


PELVIC_FEMALE = SymptomVocabulary(
    "pelvic_female",
    (_HEAVY_PERIODS, _PELVIC_PAIN, _FREQUENT_URINATION, _CHRONIC_PELVIC_PAIN, _VARICOSE_VEINS_PELVIS),
)
PELVIC_MALE = SymptomVocabulary(
    "pelvic_male",
    (_WEAK_STREAM, _URGENCY, _NIGHTTIME_URINATION, _INCOMPLETE_EMPTYING, _SCROTAL_PAIN, _INFERTILITY),
)
HEMORRHOIDS_VOCABULARY = SymptomVocabulary("hemorrhoids", (_HEMORRHOID_BLEEDING, _HEMORRHOID_PAIN))


# Quick-entry options, offered before the body areas
QUICK_ENTRIES: Tuple[BodyArea, ...] = (
    BodyArea(
        id="hemorrhoids",
        label=T("🩸 Hemorrhoids (Rectal bleeding/Anal pain)", "🩸 痔瘡 (直腸出血/肛門疼痛)"),
        kind=BodyAreaKind.DIRECT_ENTRY,
        vocabulary=HEMORRHOIDS_VOCABULARY,
        condition_id="hemorrhoids",
    ),
)

BODY_AREAS: Tuple[BodyArea, ...] = (
    BodyArea(
        id="head_brain",
        label=T("Head / Brain", "頭部 / 腦部"),
        vocabulary=SymptomVocabulary("head_brain", (
            _SEVERE_HEADACHE, _VISION_PROBLEMS, _NECK_PAIN, _STROKE_SYMPTOMS, _CONFUSION,
            _BALANCE_ISSUES, _TREMOR, _RIGIDITY, _SEIZURES,
        )),
    ),
    BodyArea(
        id="sleep",
        label=T("Sleep / Breathing", "睡眠 / 呼吸"),
        vocabulary=SymptomVocabulary("sleep", (
            _LOUD_SNORING, _BREATHING_PAUSES, _DAYTIME_SLEEPINESS, _MORNING_HEADACHES, _CPAP_INTOLERANCE,
        )),
    ),
    BodyArea(
        id="pelvic",
        label=T("Pelvic / Urinary", "盆腔 / 泌尿"),
        kind=BodyAreaKind.PELVIC,
        branches=MappingProxyType({Gender.FEMALE: PELVIC_FEMALE, Gender.MALE: PELVIC_MALE}),
    ),
    BodyArea(
        id="legs",
        label=T("Legs / Veins", "腿部 / 靜脈"),
        vocabulary=SymptomVocabulary("legs", (
            _VISIBLE_VARICOSE, _LEG_PAIN_SWELLING, _WALKING_PAIN, _SKIN_CHANGES, _COLD_FEET,
        )),
    ),
    BodyArea(
        id="knees",
        label=T("Knees", "膝蓋"),
        vocabulary=SymptomVocabulary("knees", (_KNEE_PAIN, _KNEE_STIFFNESS, _KNEE_SWELLING, _NOT_READY_SURGERY)),
    ),
    BodyArea(
        id="feet",
        label=T("Feet", "足部"),
        vocabulary=SymptomVocabulary("feet", (_HEEL_PAIN, _HEEL_TENDERNESS, _TREATMENT_FAILED)),
    ),
    BodyArea(
        id="abdomen",
        label=T("Abdomen / Digestive", "腹部 / 消化"),
        vocabulary=SymptomVocabulary("abdomen", (
            _HEMORRHOID_BLEEDING, _HEMORRHOID_PAIN, _LIVER_TUMOR, _KIDNEY_TUMOR, _LUNG_TUMOR, _ABDOMINAL_AORTA,
        )),
    ),
    BodyArea(
        id="chest",
        label=T("Chest / Torso", "胸部 / 軀幹"),
        vocabulary=SymptomVocabulary("chest", (_CHEST_PAIN, _SHORTNESS_BREATH, _THORACIC_AORTA, _BACK_PAIN)),
    ),
)


# Condition mappings to treatments, in declaration order (used for tie-breaks)
CONDITION_MAPPINGS: Tuple[ConditionMapping, ...] = (
    ConditionMapping(
        "cerebral_aneurysm", "neurovascular",
        ("severe_headache", "vision_problems", "neck_pain", "seizures"), ("head_brain",),
        ("aneurysm", "brain aneurysm", "cerebral aneurysm"),
    ),
    ConditionMapping(
        "acute_stroke", "neurovascular",
        ("stroke_symptoms", "confusion", "balance_issues", "vision_problems"), ("head_brain",),
        ("stroke", "blood clot brain", "ischemic stroke"),
    ),
    ConditionMapping(
        "carotid_stenosis", "neurovascular",
        ("vision_problems", "stroke_symptoms", "neck_pain"), ("head_brain", "neck"),
        ("carotid", "carotid artery", "neck artery"),
    ),
    ConditionMapping(
        "csdh", "neurovascular",
        ("confusion", "severe_headache", "balance_issues"), ("head_brain",),
        ("subdural hematoma", "chronic subdural", "brain bleed", "csdh"),
    ),
    ConditionMapping(
        "avm", "neurovascular",
        ("seizures", "balance_issues", "headache"), ("head_brain",),
        ("avm", "arteriovenous malformation", "brain avm", "dural fistula"),
    ),
    ConditionMapping(
        "dbs", "neuromodulation",
        ("tremor", "rigidity", "balance_issues", "confusion"), ("head_brain",),
        ("parkinson", "dbs", "deep brain stimulation", "tremor", "essential tremor", "dystonia"),
    ),
    ConditionMapping(
        "sleep_apnea", "neuromodulation",
        ("loud_snoring", "breathing_pauses", "daytime_sleepiness", "morning_headaches", "cpap_intolerance"),
        ("sleep", "head_brain"),
        ("sleep apnea", "inspire therapy", "hypoglossal", "snoring", "osa"),
    ),
    ConditionMapping(
        "uterine_fibroids", "urogenital",
        ("heavy_periods", "pelvic_pain", "frequent_urination"), ("pelvic_female",),
        ("uterine fibroid", "fibroids", "uae", "heavy periods"),
    ),
    ConditionMapping(
        "prostate_enlargement", "urogenital",
        ("weak_stream", "urgency", "nighttime_urination", "incomplete_emptying", "frequent_urination"),
        ("pelvic_male",),
        ("bph", "prostate enlargement", "prostate", "pae", "benign prostatic"),
    ),
    ConditionMapping(
        "pelvic_congestion", "urogenital",
        ("chronic_pelvic_pain", "varicose_veins_pelvis"), ("pelvic_female", "pelvic_male"),
        ("pelvic congestion", "varicocele", "ovarian vein"),
    ),
    ConditionMapping(
        "varicocele", "urogenital",
        ("scrotal_pain", "infertility"), ("pelvic_male",),
        ("varicocele", "scrotal veins", "male infertility"),
    ),
    ConditionMapping(
        "varicose_veins", "urogenital",
        ("visible_varicose", "leg_pain_swelling", "skin_changes"), ("legs",),
        ("varicose veins", "spider veins", "venous insufficiency", "evla", "rfa"),
    ),
    ConditionMapping(
        "hemorrhoids", "gastrointestinal",
        ("hemorrhoid_bleeding", "hemorrhoid_pain"), ("abdomen",),
        ("hemorrhoids", "hemorrhoid", "piles", "hae"),
    ),
    ConditionMapping(
        "knee_arthritis", "musculoskeletal",
        ("knee_pain", "knee_stiffness", "knee_swelling", "not_ready_surgery"), ("knees",),
        ("knee arthritis", "osteoarthritis knee", "gae", "knee pain"),
    ),
    ConditionMapping(
        "plantar_fasciitis", "musculoskeletal",
        ("heel_pain", "heel_tenderness", "treatment_failed"), ("feet",),
        ("plantar fasciitis", "heel pain", "foot pain", "pfe"),
    ),
    ConditionMapping(
        "oncology_intervention", "vascular",
        ("liver_tumor", "kidney_tumor", "lung_tumor"), ("abdomen", "chest"),
        ("liver cancer", "liver tumor", "tace", "y-90", "radioembolization", "kidney tumor", "lung tumor", "ablation"),
    ),
    ConditionMapping(
        "peripheral_vascular", "vascular",
        ("walking_pain", "leg_pain_swelling", "cold_feet", "skin_changes"), ("legs",),
        ("peripheral artery disease", "pad", "claudication", "leg artery", "peripheral vascular"),
    ),
    ConditionMapping(
        "aortic_disease", "vascular",
        ("abdominal_aorta", "thoracic_aorta", "back_pain"), ("abdomen", "chest"),
        ("aortic aneurysm", "aaa", "taa", "evar", "tevar", "aortic"),
    ),
)


_PELVIC_EMBOLIZATION = ConditionText(
    T("Pelvic Congestion & Varicocele Embolization", "盆腔充血及精索靜脈曲張栓塞術"),
    T(
        "Vein embolization for pelvic congestion syndrome and male varicocele.",
        "針對盆腔充血綜合症及男性精索靜脈曲張的靜脈栓塞術。",
    ),
)

CONDITION_TEXTS: Mapping[str, ConditionText] = MappingProxyType({
    "cerebral_aneurysm": ConditionText(
        T("Cerebral Aneurysm Embolization", "腦動脈瘤栓塞術"),
        T(
            "Minimally invasive treatment for brain aneurysms using advanced coiling and flow diversion techniques.",
            "採用先進的栓塞及血流導向技術，以微創方式治療腦動脈瘤。",
        ),
    ),
    "acute_stroke": ConditionText(
        T("Acute Stroke Revascularization", "急性中風血管再通術"),
        T(
            "Emergency mechanical thrombectomy to restore blood flow during acute ischemic stroke.",
            "緊急機械取栓術，在急性缺血性中風期間恢復腦部血流。",
        ),
    ),
    "carotid_stenosis": ConditionText(
        T("Carotid Artery Stenting", "頸動脈支架置入術"),
        T("Stent placement to open narrowed carotid arteries and prevent stroke.", "置入支架打開狹窄的頸動脈，預防中風。"),
    ),
    "csdh": ConditionText(
        T("Chronic Subdural Hematoma Embolization", "慢性硬腦膜下血腫栓塞術"),
        T(
            "MMA embolization to treat and prevent recurrent chronic subdural hematoma.",
            "腦膜中動脈栓塞術，治療及預防復發性慢性硬腦膜下血腫。",
        ),
    ),
    "avm": ConditionText(
        T("Brain AVM & Dural Fistula Treatment", "腦部動靜脈畸形及硬腦膜瘻管治療"),
        T(
            "Endovascular embolization for arteriovenous malformations and dural arteriovenous fistulas.",
            "血管內栓塞術治療動靜脈畸形及硬腦膜動靜脈瘻管。",
        ),
    ),
    "dbs": ConditionText(
        T("Deep Brain Stimulation (DBS)", "深腦部刺激術 (DBS)"),
        T(
            "Neuromodulation therapy for Parkinson's disease, movement disorders, and psychiatric conditions.",
            "針對柏金遜症、運動障礙及精神疾病的神經調節治療。",
        ),
    ),
    "sleep_apnea": ConditionText(
        T("Hypoglossal Nerve Stimulation", "舌下神經刺激術"),
        T(
            "Implantable device therapy for moderate-to-severe obstructive sleep apnea.",
            "針對中度至重度阻塞性睡眠窒息症的植入裝置治療。",
        ),
    ),
    "uterine_fibroids": ConditionText(
        T("Uterine Fibroid Embolization", "子宮動脈栓塞術"),
        T(
            "Non-surgical treatment for uterine fibroids causing heavy bleeding and pain.",
            "非手術治療子宮肌瘤，減少大量出血及疼痛。",
        ),
    ),
    "prostate_enlargement": ConditionText(
        T("Prostate Artery Embolization", "前列腺動脈栓塞術"),
        T(
            "Minimally invasive treatment for enlarged prostate (BPH) urinary symptoms.",
            "微創治療前列腺肥大（BPH）的泌尿症狀。",
        ),
    ),
    "pelvic_congestion": _PELVIC_EMBOLIZATION,
    "varicocele": _PELVIC_EMBOLIZATION,
    "varicose_veins": ConditionText(
        T("Varicose Vein Treatment", "靜脈曲張治療"),
        T(
            "Advanced minimally invasive options for varicose veins and chronic venous insufficiency.",
            "針對靜脈曲張及慢性靜脈功能不全的先進微創治療。",
        ),
    ),
    "hemorrhoids": ConditionText(
        T("Hemorrhoidal Artery Embolization", "痔瘡動脈栓塞術"),
        T("Non-surgical treatment for symptomatic internal hemorrhoids.", "針對症狀性內痔的非手術治療。"),
    ),
    "knee_arthritis": ConditionText(
        T("Genicular Artery Embolization", "膝動脈栓塞術"),
        T("Targeted embolization for knee osteoarthritis pain.", "針對膝骨關節炎疼痛的靶向栓塞術。"),
    ),
    "plantar_fasciitis": ConditionText(
        T("Plantar Fasciitis Embolization", "足底筋膜炎栓塞術"),
        T("Minimally invasive treatment for chronic plantar fasciitis heel pain.", "針對慢性足底筋膜炎足跟疼痛的微創治療。"),
    ),
    "oncology_intervention": ConditionText(
        T("Oncology Interventions", "腫瘤介入治療"),
        T(
            "Minimally invasive treatments for cancer including chemoembolization and ablation.",
            "針對癌症的微創治療，包括化療栓塞及消融術。",
        ),
    ),
    "peripheral_vascular": ConditionText(
        T("Peripheral Vascular Revascularization", "周邊血管再通術"),
        T(
            "Angioplasty and stenting for peripheral artery disease and limb salvage.",
            "針對周邊動脈疾病及肢體挽救的血管成形術及支架置入術。",
        ),
    ),
    "aortic_disease": ConditionText(
        T("Visceral & Aortic Disease Treatment", "內臟及主動脈疾病治療"),
        T(
            "Comprehensive treatment for aortic aneurysms and visceral vascular conditions.",
            "針對主動脈瘤及內臟血管疾病的全面治療。",
        ),
    ),
})


# Treatment catalog, in the order the homepage lists its category dialogs
TREATMENT_CATEGORIES: Tuple[Tuple[str, T], ...] = (
    ("neurovascular", T("Neurovascular Interventions", "神經血管介入治療")),
    ("neuromodulation", T("Neuromodulation", "神經調節治療")),
    ("urogenital", T("Urogenital & Venous Interventions", "泌尿生殖及靜脈介入治療")),
    ("gastrointestinal", T("Gastrointestinal Interventions", "腸胃介入治療")),
    ("musculoskeletal", T("Musculoskeletal Interventions", "肌肉骨骼介入治療")),
    ("vascular", T("Vascular & Oncology Interventions", "血管及腫瘤介入治療")),
)

CategoryNames = Mapping[str, Mapping[str, str]]
"""Category id -> locale value ('en' / 'zh-TW') -> display name."""

DEFAULT_CATEGORY_NAMES: CategoryNames = MappingProxyType({
    category_id: MappingProxyType({"en": name.en, "zh-TW": name.zh_tw})
    for category_id, name in TREATMENT_CATEGORIES
})

CATEGORY_INDEX: Mapping[str, int] = MappingProxyType({
    category_id: index for index, (category_id, _) in enumerate(TREATMENT_CATEGORIES)
})


# Free-text phrases that indicate an emergency regardless of the selected symptoms
EMERGENCY_KEYWORDS: Tuple[T, ...] = (
    T("chest pain", "胸痛"),
    T("can't breathe", "無法呼吸"),
    T("unconscious", "昏迷"),
    T("severe bleeding", "大量出血"),
    T("stroke", "中風"),
    T("heart attack", "心臟病發"),
    T("face drooping", "面部下垂"),
    T("arm weakness", "手臂無力"),
    T("speech slurred", "口齒不清"),
)


def _index_symptoms() -> Dict[str, Symptom]:
    index: Dict[str, Symptom] = {}
    vocabularies = [area.vocabulary for area in BODY_AREAS + QUICK_ENTRIES if area.vocabulary is not None]
    vocabularies.extend([PELVIC_FEMALE, PELVIC_MALE])
    for vocabulary in vocabularies:
        for symptom in vocabulary.symptoms:
            index.setdefault(symptom.id, symptom)
    return index


SYMPTOMS_BY_ID: Mapping[str, Symptom] = MappingProxyType(_index_symptoms())

_VOCABULARIES_BY_ID: Mapping[str, SymptomVocabulary] = MappingProxyType({
    vocabulary.id: vocabulary
    for vocabulary in (
        [area.vocabulary for area in BODY_AREAS + QUICK_ENTRIES if area.vocabulary is not None]
        + [PELVIC_FEMALE, PELVIC_MALE]
    )
})

_MAPPINGS_BY_ID: Mapping[str, ConditionMapping] = MappingProxyType({
    mapping.id: mapping for mapping in CONDITION_MAPPINGS
})


def find_body_area(area_id: str) -> Optional[BodyArea]:
    """Look up a body area or quick-entry option by id."""
    for area in QUICK_ENTRIES + BODY_AREAS:
        if area.id == area_id:
            return area
    return None


def find_symptom(symptom_id: str) -> Optional[Symptom]:
    return SYMPTOMS_BY_ID.get(symptom_id)


def find_vocabulary(vocabulary_id: Optional[str]) -> Optional[SymptomVocabulary]:
    if vocabulary_id is None:
        return None
    return _VOCABULARIES_BY_ID.get(vocabulary_id)


def find_condition_mapping(condition_id: str) -> Optional[ConditionMapping]:
    return _MAPPINGS_BY_ID.get(condition_id)
