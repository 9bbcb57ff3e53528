"""
Тести для модуля encoding

Запуск: pytest tests/test_encoding.py -v
Або демо: python tests/test_encoding.py
"""

import math

import pytest


def _record(**values):
    from gbm_connect.schemas import ClinicalRecord, UserType

    user_type = values.pop("user_type", UserType.PATIENT)
    return ClinicalRecord.from_values(user_type=user_type, **values)


def _encoder():
    from gbm_connect.encoding import PatientEncoder
    return PatientEncoder()


def test_reference_patient():
    """Приклад: methylated / mutant / 45 / KPS 80 / adjuvant / 6 months"""
    encoder = _encoder()

    vector = encoder.encode(_record(
        mgmt_status="methylated",
        idh_status="mutant",
        age_at_diagnosis=45,
        karnofsky_score=80,
        current_treatment_phase="adjuvant_chemotherapy",
        time_since_diagnosis="6_months",
    ))

    assert vector.as_tuple() == pytest.approx((2, 2, 2, 0.8, 0.5, 0.6, 0))
    print(f"✓ Reference vector: {vector.as_tuple()}")


def test_all_missing_gives_defaults():
    """Всі необов'язкові поля відсутні → вектор за замовчуванням"""
    from gbm_connect.schemas import UserType

    encoder = _encoder()

    patient = encoder.encode(_record())
    caregiver = encoder.encode(_record(user_type=UserType.CAREGIVER))

    assert patient.as_tuple() == (0.0, 0.0, 0.0, 0.5, 0.0, 0.0, 0.0)
    assert caregiver.as_tuple() == (0.0, 0.0, 0.0, 0.5, 0.0, 0.0, 1.0)
    assert patient.known == frozenset({"user_type"})


@pytest.mark.parametrize("status,expected", [
    ("methylated", 2.0),
    ("unmethylated", 1.0),
    ("unknown", 0.0),
    ("pending", 0.0),
    ("Methylated", 0.0),
    (None, 0.0),
    (42, 0.0),
])
def test_mgmt(status, expected):
    assert _encoder().encode(_record(mgmt_status=status)).mgmt_status == expected


@pytest.mark.parametrize("status,expected", [
    ("mutant", 2.0),
    ("wildtype", 1.0),
    ("unknown", 0.0),
    (None, 0.0),
])
def test_idh(status, expected):
    assert _encoder().encode(_record(idh_status=status)).idh_status == expected


@pytest.mark.parametrize("age,expected", [
    (18, 1.0),
    (39, 1.0),
    (39.9, 1.0),
    (40, 2.0),
    (54, 2.0),
    (55, 3.0),
    (69, 3.0),
    (70, 4.0),
    (95, 4.0),
    ("62", 3.0),
    (0, 0.0),
    (-5, 0.0),
    (200, 0.0),
    ("unknown", 0.0),
    (True, 0.0),
    (float("nan"), 0.0),
    (None, 0.0),
])
def test_age_brackets(age, expected):
    """Напіввідкриті інтервали, неправдоподібний вік → 0"""
    assert _encoder().encode(_record(age_at_diagnosis=age)).age_bracket == expected


@pytest.mark.parametrize("score,expected", [
    (100, 1.0),
    (80, 0.8),
    (0, 0.0),
    (None, 0.5),
    (250, 0.5),
    (-10, 0.5),
    ("abc", 0.5),
])
def test_kps(score, expected):
    """KPS/100, відсутній або поза шкалою → 0.5"""
    assert _encoder().encode(_record(karnofsky_score=score)).kps_score == pytest.approx(expected)


def test_treatment_phases():
    """(index+1)/8, точний збіг з урахуванням регістру"""
    from gbm_connect.config import DEFAULT_TREATMENT_PHASES

    encoder = _encoder()

    for i, phase in enumerate(DEFAULT_TREATMENT_PHASES):
        vector = encoder.encode(_record(current_treatment_phase=phase))
        assert vector.treatment_phase == pytest.approx((i + 1) / 8)

    assert encoder.encode(_record(current_treatment_phase="palliative")).treatment_phase == 1.0
    assert encoder.encode(_record(current_treatment_phase="Palliative")).treatment_phase == 0.0
    assert encoder.encode(_record(current_treatment_phase="adjuvant_chemo")).treatment_phase == 0.0
    assert encoder.encode(_record(current_treatment_phase=3)).treatment_phase == 0.0


@pytest.mark.parametrize("timeline,expected", [
    ("newly_diagnosed", 0.1),
    ("1_month", 0.2),
    ("3_months", 0.4),
    ("6_months", 0.6),
    ("1_year_plus", 1.0),
    ("2_years", 0.0),
    (None, 0.0),
])
def test_time_since_diagnosis(timeline, expected):
    assert _encoder().encode(_record(time_since_diagnosis=timeline)).time_since_diagnosis == expected


def test_encoding_is_total_and_finite():
    """Будь-які вхідні дані → скінченний вектор у документованих межах"""
    from gbm_connect.schemas import UserType

    encoder = _encoder()
    garbage = [None, "", "???", -1, 0, 1e308, float("inf"), float("-inf"), float("nan"),
               [], {}, object(), True, "  45  ", b"methylated"]

    for value in garbage:
        for user_type in (UserType.PATIENT, UserType.CAREGIVER):
            vector = encoder.encode(_record(
                user_type=user_type,
                mgmt_status=value,
                idh_status=value,
                age_at_diagnosis=value,
                karnofsky_score=value,
                current_treatment_phase=value,
                time_since_diagnosis=value,
            ))

            assert all(math.isfinite(x) for x in vector.as_tuple())
            assert vector.mgmt_status in (0.0, 1.0, 2.0)
            assert vector.idh_status in (0.0, 1.0, 2.0)
            assert vector.age_bracket in (0.0, 1.0, 2.0, 3.0, 4.0)
            assert 0.0 <= vector.kps_score <= 1.0
            assert 0.0 <= vector.treatment_phase <= 1.0
            assert 0.0 <= vector.time_since_diagnosis <= 1.0
            assert vector.user_type in (0.0, 1.0)

    print(f"✓ {len(garbage) * 2} garbage records encoded without errors")


def test_encode_profile_directly():
    """PatientProfile без типу користувача → patient"""
    from gbm_connect.schemas import PatientProfile

    vector = _encoder().encode(PatientProfile(mgmt_status="unmethylated", karnofsky_score=60))

    assert vector.mgmt_status == 1.0
    assert vector.kps_score == pytest.approx(0.6)
    assert vector.user_type == 0.0
    assert "kps_score" in vector.known


def test_enum_values_encode_like_labels():
    """MgmtStatus / IdhStatus у профілі кодуються як їхні рядкові значення"""
    from gbm_connect.schemas import PatientProfile, MgmtStatus, IdhStatus

    encoder = _encoder()

    vector = encoder.encode(PatientProfile(mgmt_status=MgmtStatus.METHYLATED, idh_status=IdhStatus.MUTANT))
    assert (vector.mgmt_status, vector.idh_status) == (2.0, 2.0)

    vector = encoder.encode(PatientProfile(mgmt_status=MgmtStatus.PENDING, idh_status=IdhStatus.UNKNOWN))
    assert (vector.mgmt_status, vector.idh_status) == (0.0, 0.0)


def test_encoding_is_deterministic():
    """Однаковий запис → однаковий вектор"""
    encoder = _encoder()
    record = _record(mgmt_status="methylated", age_at_diagnosis=61, karnofsky_score=70)

    assert encoder.encode(record) == encoder.encode(record)


def test_custom_scales():
    """Шкали з конфігурації"""
    from gbm_connect.config import EncodingConfig
    from gbm_connect.encoding import PatientEncoder

    encoder = PatientEncoder(EncodingConfig(
        age_brackets=(50,),
        treatment_phases=("surgery", "radiation"),
        time_since_diagnosis_scale={"recent": 0.5},
    ))

    vector = encoder.encode(_record(
        age_at_diagnosis=60,
        current_treatment_phase="surgery",
        time_since_diagnosis="recent",
    ))

    assert vector.age_bracket == 2.0
    assert vector.treatment_phase == 0.5
    assert vector.time_since_diagnosis == 0.5


def test_encode_batch():
    """Матриця векторів"""
    encoder = _encoder()

    matrix = encoder.encode_batch([_record(), _record(mgmt_status="methylated")])
    assert matrix.shape == (2, 7)
    assert matrix[1, 0] == 2.0

    assert encoder.encode_batch([]).shape == (0, 7)


def demo():
    """Демонстрація модуля encoding"""
    print("=" * 60)
    print("GBM Connect — Демонстрація модуля encoding")
    print("=" * 60)

    encoder = _encoder()
    print(f"✓ {encoder}")

    test_reference_patient()
    test_all_missing_gives_defaults()
    test_encoding_is_total_and_finite()

    print("\n" + "=" * 60)
    print("✅ Всі тести пройдено успішно!")
    print("=" * 60)


if __name__ == "__main__":
    demo()
