"""
GBM Connect — Налаштування системи

Всі параметри підбору схожих пацієнтів зібрані в dataclass-и для:
- Типізації та валідації
- Легкого доступу через config.weights.mgmt_status
- Серіалізації в YAML

Ваги та межі шкал — продуктові рішення без клінічного обґрунтування,
тому вони винесені в конфігурацію, а не захардкоджені в енкодері.
"""

import math
from dataclasses import dataclass, field, fields
from typing import Dict, Tuple

import numpy as np


# =============================================================================
# FEATURE ORDER
# =============================================================================

# Порядок ознак фіксований і спільний для всіх векторів
FEATURE_NAMES: Tuple[str, ...] = (
    "mgmt_status",
    "idh_status",
    "age_bracket",
    "kps_score",
    "treatment_phase",
    "time_since_diagnosis",
    "user_type",
)


# =============================================================================
# FEATURE WEIGHTS
# =============================================================================

@dataclass(frozen=True)
class FeatureWeights:
    """
    Ваги ознак для зваженої косинусної схожості.

    Молекулярні маркери (MGMT, IDH) мають найбільшу вагу,
    тип користувача — найменшу.
    """

    mgmt_status: float = 1.0
    idh_status: float = 1.0
    age_bracket: float = 0.7
    kps_score: float = 0.6
    treatment_phase: float = 0.5
    time_since_diagnosis: float = 0.4
    user_type: float = 0.3

    def __post_init__(self):
        for name in FEATURE_NAMES:
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
                raise ValueError(f"Weight '{name}' must be a positive finite number, got {value!r}")

    def as_dict(self) -> Dict[str, float]:
        """Ваги у вигляді {feature: weight}"""
        return {name: float(getattr(self, name)) for name in FEATURE_NAMES}

    def as_array(self) -> np.ndarray:
        """Ваги у фіксованому порядку ознак, shape (7,)"""
        return np.array([getattr(self, name) for name in FEATURE_NAMES], dtype=np.float64)


# =============================================================================
# ENCODING CONFIGURATION
# =============================================================================

DEFAULT_TREATMENT_PHASES: Tuple[str, ...] = (
    "pre_treatment",
    "initial_surgery",
    "concurrent_chemoradiation",
    "adjuvant_chemotherapy",
    "maintenance",
    "recurrence",
    "clinical_trial",
    "palliative",
)


def _default_time_scale() -> Dict[str, float]:
    return {
        "newly_diagnosed": 0.1,
        "1_month": 0.2,
        "3_months": 0.4,
        "6_months": 0.6,
        "1_year_plus": 1.0,
    }


@dataclass(frozen=True)
class EncodingConfig:
    """Шкали та межі кодування клінічних ознак"""

    # Верхні межі вікових груп (напіввідкриті інтервали): <40, 40-54, 55-69, >=70
    age_brackets: Tuple[int, ...] = (40, 55, 70)
    age_min_exclusive: float = 0.0
    age_max_inclusive: float = 120.0

    # Karnofsky
    kps_min: float = 0.0
    kps_max: float = 100.0
    kps_default: float = 0.5

    # Фази лікування (порядок важливий)
    treatment_phases: Tuple[str, ...] = DEFAULT_TREATMENT_PHASES

    # Час від діагнозу
    time_since_diagnosis_scale: Dict[str, float] = field(default_factory=_default_time_scale)

    def __post_init__(self):
        brackets = tuple(self.age_brackets)
        if not brackets or list(brackets) != sorted(set(brackets)):
            raise ValueError(f"age_brackets must be strictly increasing, got {brackets!r}")
        if not self.treatment_phases:
            raise ValueError("treatment_phases must not be empty")
        if not 0.0 <= self.kps_default <= 1.0:
            raise ValueError(f"kps_default must be in [0, 1], got {self.kps_default!r}")
        for key, value in self.time_since_diagnosis_scale.items():
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"time_since_diagnosis_scale['{key}'] must be finite and >= 0")
        # YAML віддає списки, приводимо до tuple
        object.__setattr__(self, "age_brackets", brackets)
        object.__setattr__(self, "treatment_phases", tuple(self.treatment_phases))

    @property
    def n_age_brackets(self) -> int:
        return len(self.age_brackets) + 1


# =============================================================================
# MATCHING CONFIGURATION
# =============================================================================

@dataclass
class MatchingConfig:
    """Параметри видачі результатів"""

    default_limit: int = 10
    max_limit: int = 50

    # Округлення схожості для відображення
    display_precision: int = 4

    def __post_init__(self):
        if self.default_limit <= 0:
            raise ValueError("default_limit must be positive")
        if self.max_limit < self.default_limit:
            raise ValueError("max_limit must be >= default_limit")


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class GBMConnectConfig:
    """
    Головна конфігурація GBM Connect

    Створюється один раз при старті процесу і явно передається
    в енкодер та рушій схожості.

    Приклад використання:
        config = GBMConnectConfig()
        print(config.weights.mgmt_status)  # 1.0
        print(config.matching.default_limit)  # 10
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "GBM Connect"

    # Компоненти
    weights: FeatureWeights = field(default_factory=FeatureWeights)
    encoding: EncodingConfig = field(default_factory=EncodingConfig)
    matching: MatchingConfig = field(default_factory=MatchingConfig)

    @classmethod
    def from_dict(cls, data: Dict) -> "GBMConnectConfig":
        """Зібрати конфігурацію з вкладеного словника (напр. з YAML)"""
        data = dict(data or {})
        sections = {
            "weights": FeatureWeights,
            "encoding": EncodingConfig,
            "matching": MatchingConfig,
        }
        top_level = {f.name for f in fields(cls)}

        unknown = set(data) - top_level
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        kwargs = {}
        for key, value in data.items():
            section_cls = sections.get(key)
            if section_cls is None:
                kwargs[key] = value
                continue

            value = dict(value or {})
            allowed = {f.name for f in fields(section_cls)}
            unknown = set(value) - allowed
            if unknown:
                raise ValueError(f"Unknown keys in '{key}': {sorted(unknown)}")
            kwargs[key] = section_cls(**value)

        return cls(**kwargs)


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> GBMConnectConfig:
    """Отримати конфігурацію за замовчуванням"""
    return GBMConnectConfig()
