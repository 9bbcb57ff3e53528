"""
GBM Connect — Схеми підбору схожих пацієнтів

- PatientFeatureVector: вектор ознак фіксованої довжини
- MatchCandidate: кандидат для ранжування (id + вектор + згода)
- MatchResult: результат ранжування (не зберігається)
- MatchView: результат для відображення
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

import numpy as np
from pydantic import BaseModel, Field

from gbm_connect.config import FEATURE_NAMES


@dataclass(frozen=True)
class PatientFeatureVector:
    """
    Вектор ознак пацієнта.

    Порядок компонентів фіксований (FEATURE_NAMES), тому вектори
    можна порівнювати позиційно.

    known — ознаки, отримані з наявних даних (а не зі значень
    за замовчуванням). Використовується лише для опису спільних
    характеристик, на схожість не впливає.
    """
    mgmt_status: float = 0.0
    idh_status: float = 0.0
    age_bracket: float = 0.0
    kps_score: float = 0.5
    treatment_phase: float = 0.0
    time_since_diagnosis: float = 0.0
    user_type: float = 0.0

    known: FrozenSet[str] = field(default=frozenset(FEATURE_NAMES), compare=False)

    @classmethod
    def from_array(cls, values, known: Optional[FrozenSet[str]] = None) -> "PatientFeatureVector":
        values = [float(v) for v in values]
        if len(values) != len(FEATURE_NAMES):
            raise ValueError(f"Expected {len(FEATURE_NAMES)} values, got {len(values)}")
        kwargs = dict(zip(FEATURE_NAMES, values))
        if known is not None:
            kwargs["known"] = frozenset(known)
        return cls(**kwargs)

    def as_array(self) -> np.ndarray:
        """Вектор shape (7,)"""
        return np.array([getattr(self, name) for name in FEATURE_NAMES], dtype=np.float64)

    def as_tuple(self) -> Tuple[float, ...]:
        return tuple(getattr(self, name) for name in FEATURE_NAMES)

    def to_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in FEATURE_NAMES}

    def __len__(self) -> int:
        return len(FEATURE_NAMES)


@dataclass(frozen=True)
class MatchCandidate:
    """Кандидат для ранжування"""
    candidate_id: str
    vector: PatientFeatureVector
    consent: bool = True


@dataclass(frozen=True)
class MatchResult:
    """Результат ранжування одного кандидата"""
    candidate_id: str
    similarity: float
    shared_attributes: Tuple[str, ...] = ()


class MatchView(BaseModel):
    """Схожий пацієнт для відображення"""
    user_id: str
    name: str
    similarity: float = Field(..., ge=0, le=1)
    phase: Optional[str] = None
    shared_attributes: List[str] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "u-002",
                "name": "Linda S.",
                "similarity": 0.9731,
                "phase": "Adjuvant Chemotherapy",
                "shared_attributes": ["mgmt_status", "treatment_phase"],
            }
        }
