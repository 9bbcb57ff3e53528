"""
GBM Connect — Кодування клінічного профілю пацієнта

Перетворює клінічний запис пацієнта у вектор ознак фіксованої довжини
для підбору схожих пацієнтів.

Таблиця кодування:
    mgmt_status           unknown=0, unmethylated=1, methylated=2
    idh_status            unknown=0, wildtype=1, mutant=2
    age_bracket           unknown=0, <40=1, 40-54=2, 55-69=3, >=70=4
    kps_score             score/100, відсутній → 0.5
    treatment_phase       (index+1)/8 у фіксованому списку фаз, невідома → 0
    time_since_diagnosis  newly_diagnosed=0.1 ... 1_year_plus=1.0, невідомо → 0
    user_type             patient=0, caregiver=1
"""

import math
from typing import Any, Iterable, List, Optional

import numpy as np

from gbm_connect.config import FEATURE_NAMES, EncodingConfig
from gbm_connect.schemas import (
    ClinicalRecord,
    ClinicalValue,
    IdhStatus,
    Known,
    MgmtStatus,
    PatientFeatureVector,
    PatientProfile,
    UserType,
)


MGMT_CODES = {
    MgmtStatus.UNMETHYLATED.value: 1.0,
    MgmtStatus.METHYLATED.value: 2.0,
}
IDH_CODES = {
    IdhStatus.WILDTYPE.value: 1.0,
    IdhStatus.MUTANT.value: 2.0,
}


def _as_number(value: ClinicalValue) -> Optional[float]:
    """Known числове значення → float, все інше → None"""
    if not isinstance(value, Known):
        return None

    raw: Any = value.value
    # bool є підкласом int, але не є числом
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        number = float(raw)
    elif isinstance(raw, str):
        try:
            number = float(raw.strip())
        except ValueError:
            return None
    else:
        return None

    return number if math.isfinite(number) else None


def _as_label(value: ClinicalValue) -> Optional[str]:
    """Known рядкове значення → str (без зміни регістру)"""
    if isinstance(value, Known) and isinstance(value.value, str):
        return value.value
    return None


class PatientEncoder:
    """
    Кодувальник клінічного профілю пацієнта.

    Чиста детермінована функція: без побічних ефектів та I/O.
    Тотальна: відсутні, невідомі та некоректні значення завжди
    кодуються значенням за замовчуванням, винятків немає.

    Приклад використання:
        encoder = PatientEncoder()

        record = ClinicalRecord.from_values(
            mgmt_status="methylated",
            idh_status="mutant",
            age_at_diagnosis=45,
            karnofsky_score=80,
            current_treatment_phase="adjuvant_chemotherapy",
            time_since_diagnosis="6_months",
        )
        vector = encoder.encode(record)
        # (2, 2, 2, 0.8, 0.5, 0.6, 0)
    """

    def __init__(self, config: Optional[EncodingConfig] = None):
        """
        Args:
            config: Шкали кодування (за замовчуванням — EncodingConfig())
        """
        self.config = config or EncodingConfig()
        self._phase_index = {
            phase: i for i, phase in enumerate(self.config.treatment_phases)
        }

    @property
    def vector_dim(self) -> int:
        """Розмірність вектора"""
        return len(FEATURE_NAMES)

    # =========================================================================
    # Окремі ознаки
    # =========================================================================

    def encode_mgmt(self, value: ClinicalValue) -> float:
        return MGMT_CODES.get(_as_label(value), 0.0)

    def encode_idh(self, value: ClinicalValue) -> float:
        return IDH_CODES.get(_as_label(value), 0.0)

    def encode_age(self, value: ClinicalValue) -> float:
        """
        Вікова група на момент діагнозу.

        Межі напіввідкриті: age < 40 → 1, 40 <= age < 55 → 2, ...
        Вік <= 0 або неправдоподібний → 0 (невідомо).
        """
        age = _as_number(value)
        if age is None:
            return 0.0
        if age <= self.config.age_min_exclusive or age > self.config.age_max_inclusive:
            return 0.0

        for bracket, upper in enumerate(self.config.age_brackets, start=1):
            if age < upper:
                return float(bracket)
        return float(self.config.n_age_brackets)

    def encode_kps(self, value: ClinicalValue) -> float:
        """Karnofsky → [0, 1]; відсутній або поза шкалою → нейтральне 0.5"""
        score = _as_number(value)
        if score is None or not self.config.kps_min <= score <= self.config.kps_max:
            return self.config.kps_default
        return score / self.config.kps_max

    def encode_treatment_phase(self, value: ClinicalValue) -> float:
        """Позиція у списку фаз, (index+1)/N; точний збіг з урахуванням регістру"""
        index = self._phase_index.get(_as_label(value))
        if index is None:
            return 0.0
        return (index + 1) / len(self.config.treatment_phases)

    def encode_time_since_diagnosis(self, value: ClinicalValue) -> float:
        label = _as_label(value)
        if label is None:
            return 0.0
        return float(self.config.time_since_diagnosis_scale.get(label, 0.0))

    def encode_user_type(self, user_type: Any) -> float:
        if isinstance(user_type, UserType):
            user_type = user_type.value
        return 1.0 if user_type == UserType.CAREGIVER.value else 0.0

    # =========================================================================
    # Вектор
    # =========================================================================

    def encode(self, record) -> PatientFeatureVector:
        """
        Закодувати клінічний запис у вектор ознак.

        Args:
            record: ClinicalRecord (або PatientProfile — тоді тип
                    користувача вважається patient)

        Returns:
            PatientFeatureVector з усіма 7 компонентами
        """
        if isinstance(record, PatientProfile):
            record = ClinicalRecord.from_profile(record)

        values = {
            "mgmt_status": self.encode_mgmt(record.mgmt_status),
            "idh_status": self.encode_idh(record.idh_status),
            "age_bracket": self.encode_age(record.age_at_diagnosis),
            "kps_score": self.encode_kps(record.karnofsky_score),
            "treatment_phase": self.encode_treatment_phase(record.current_treatment_phase),
            "time_since_diagnosis": self.encode_time_since_diagnosis(record.time_since_diagnosis),
            "user_type": self.encode_user_type(record.user_type),
        }

        # Ознаки з реальних даних: ненульові категорії + KPS у межах шкали
        known = {name for name, v in values.items() if v != 0.0 and name != "kps_score"}
        known.add("user_type")
        score = _as_number(record.karnofsky_score)
        if score is not None and self.config.kps_min <= score <= self.config.kps_max:
            known.add("kps_score")

        return PatientFeatureVector(known=frozenset(known), **values)

    def encode_batch(self, records: Iterable) -> np.ndarray:
        """
        Закодувати кілька записів у матрицю.

        Returns:
            Матриця shape (N, 7)
        """
        rows: List[np.ndarray] = [self.encode(r).as_array() for r in records]
        if not rows:
            return np.zeros((0, self.vector_dim), dtype=np.float64)
        return np.vstack(rows)

    def __repr__(self) -> str:
        return f"PatientEncoder(vector_dim={self.vector_dim}, phases={len(self.config.treatment_phases)})"
