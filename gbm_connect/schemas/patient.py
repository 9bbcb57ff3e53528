"""
GBM Connect — Схеми даних пацієнта

Pydantic моделі для:
- PatientProfile: клінічний профіль (як зберігається в базі)
- UserAccount: обліковий запис з налаштуваннями приватності
- ClinicalRecord: профіль з явними Known/Unknown для енкодера
- DisplayInfo: дані для відображення в списку схожих пацієнтів
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field

from .clinical import UNKNOWN, ClinicalValue, UserType, observe


class PatientProfile(BaseModel):
    """
    Клінічний профіль пацієнта.

    Клінічні поля зберігаються "як є": значення може бути відсутнім,
    нерозпізнаним або некоректним. Енкодер тотальний і не падає на них.

    Приклад:
        profile = PatientProfile(
            mgmt_status="methylated",
            idh_status="wildtype",
            age_at_diagnosis=58,
            karnofsky_score=80,
            current_treatment_phase="adjuvant_chemotherapy",
            time_since_diagnosis="6_months",
        )
    """
    mgmt_status: Optional[Any] = Field(default=None, description="methylated / unmethylated / unknown / pending")
    idh_status: Optional[Any] = Field(default=None, description="mutant / wildtype / unknown")
    age_at_diagnosis: Optional[Any] = Field(default=None, description="Вік на момент діагнозу")
    karnofsky_score: Optional[Any] = Field(default=None, description="Шкала Карновського 0-100")
    current_treatment_phase: Optional[Any] = Field(default=None, description="Поточна фаза лікування")
    time_since_diagnosis: Optional[Any] = Field(default=None, description="newly_diagnosed ... 1_year_plus")

    treating_institution: Optional[str] = None
    diagnosis_date: Optional[date] = None

    class Config:
        json_schema_extra = {
            "example": {
                "mgmt_status": "methylated",
                "idh_status": "wildtype",
                "age_at_diagnosis": 58,
                "karnofsky_score": 80,
                "current_treatment_phase": "adjuvant_chemotherapy",
                "time_since_diagnosis": "6_months",
            }
        }


@dataclass(frozen=True)
class ClinicalRecord:
    """
    Клінічний запис для енкодера.

    Кожне необов'язкове поле — Known(value) або UNKNOWN.
    user_type обов'язковий.
    """
    user_type: UserType
    mgmt_status: ClinicalValue = UNKNOWN
    idh_status: ClinicalValue = UNKNOWN
    age_at_diagnosis: ClinicalValue = UNKNOWN
    karnofsky_score: ClinicalValue = UNKNOWN
    current_treatment_phase: ClinicalValue = UNKNOWN
    time_since_diagnosis: ClinicalValue = UNKNOWN

    @classmethod
    def from_profile(
        cls,
        profile: Optional[PatientProfile],
        user_type: UserType = UserType.PATIENT
    ) -> "ClinicalRecord":
        """Побудувати запис з профілю (None → всі поля UNKNOWN)"""
        if profile is None:
            return cls(user_type=user_type)

        return cls(
            user_type=user_type,
            mgmt_status=observe(profile.mgmt_status),
            idh_status=observe(profile.idh_status),
            age_at_diagnosis=observe(profile.age_at_diagnosis),
            karnofsky_score=observe(profile.karnofsky_score),
            current_treatment_phase=observe(profile.current_treatment_phase),
            time_since_diagnosis=observe(profile.time_since_diagnosis),
        )

    @classmethod
    def from_values(cls, user_type: UserType = UserType.PATIENT, **values: Any) -> "ClinicalRecord":
        """Зручний конструктор із сирих значень: None → UNKNOWN"""
        return cls(user_type=user_type, **{k: observe(v) for k, v in values.items()})


class UserAccount(BaseModel):
    """
    Обліковий запис користувача спільноти.

    share_with_community — згода з'являтися в результатах підбору
    схожих пацієнтів.
    """
    user_id: str = Field(..., min_length=1)
    user_type: UserType = UserType.PATIENT

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    display_name: Optional[str] = None

    # Приватність
    share_with_community: bool = True

    # Статус
    is_active: bool = True
    is_memorial: bool = False

    profile: Optional[PatientProfile] = None

    @property
    def resolved_name(self) -> str:
        """Ім'я для відображення"""
        return self.display_name or self.first_name or "Anonymous"

    @property
    def is_matchable(self) -> bool:
        """Чи може користувач з'являтися в результатах підбору"""
        return (
            self.share_with_community
            and self.is_active
            and not self.is_memorial
            and self.profile is not None
        )

    def to_clinical_record(self) -> ClinicalRecord:
        return ClinicalRecord.from_profile(self.profile, self.user_type)

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "u-001",
                "user_type": "patient",
                "first_name": "Robert",
                "display_name": "Robert K.",
                "share_with_community": True,
                "profile": PatientProfile.Config.json_schema_extra["example"],
            }
        }


@dataclass(frozen=True)
class DisplayInfo:
    """Дані для відображення кандидата"""
    name: str
    current_phase: Optional[str] = None
