"""
Тести для модуля schemas

Запуск: pytest tests/test_schemas.py -v
Або демо: python tests/test_schemas.py
"""


def test_observe():
    """Сирі значення → Known / Unknown"""
    from gbm_connect.schemas import observe, Known, UNKNOWN, MgmtStatus

    assert observe(None) == UNKNOWN
    assert observe("") == UNKNOWN
    assert observe("   ") == UNKNOWN
    assert observe("methylated") == Known("methylated")
    assert observe(0) == Known(0)
    assert observe(MgmtStatus.METHYLATED) == Known("methylated")

    print(f"✓ observe: {observe(None)!r}, {observe(45)!r}")


def test_clinical_record_from_profile():
    """ClinicalRecord з профілю"""
    from gbm_connect.schemas import ClinicalRecord, PatientProfile, UserType, Known, UNKNOWN

    profile = PatientProfile(mgmt_status="methylated", age_at_diagnosis=58)
    record = ClinicalRecord.from_profile(profile, UserType.CAREGIVER)

    assert record.user_type == UserType.CAREGIVER
    assert record.mgmt_status == Known("methylated")
    assert record.age_at_diagnosis == Known(58)
    assert record.idh_status == UNKNOWN
    assert record.karnofsky_score == UNKNOWN

    empty = ClinicalRecord.from_profile(None)
    assert empty.user_type == UserType.PATIENT
    assert empty.time_since_diagnosis == UNKNOWN

    print(f"✓ ClinicalRecord: {record}")


def test_profile_keeps_raw_values():
    """Нерозпізнані значення зберігаються як є"""
    from gbm_connect.schemas import PatientProfile

    profile = PatientProfile(age_at_diagnosis="unknown", karnofsky_score=250, mgmt_status=3)

    assert profile.age_at_diagnosis == "unknown"
    assert profile.karnofsky_score == 250
    assert profile.mgmt_status == 3


def test_user_account():
    """Обліковий запис та ім'я для відображення"""
    from gbm_connect.schemas import UserAccount, PatientProfile

    account = UserAccount(user_id="u-1", first_name="Robert", display_name="Robert K.")
    assert account.resolved_name == "Robert K."
    assert account.share_with_community is True
    assert account.is_matchable is False  # немає профілю

    account = UserAccount(user_id="u-2", first_name="Linda", profile=PatientProfile())
    assert account.resolved_name == "Linda"
    assert account.is_matchable is True

    assert UserAccount(user_id="u-3").resolved_name == "Anonymous"

    opted_out = UserAccount(user_id="u-4", share_with_community=False, profile=PatientProfile())
    memorial = UserAccount(user_id="u-5", is_memorial=True, profile=PatientProfile())
    inactive = UserAccount(user_id="u-6", is_active=False, profile=PatientProfile())
    assert not opted_out.is_matchable
    assert not memorial.is_matchable
    assert not inactive.is_matchable


def test_user_account_validation():
    """Невідомий тип користувача — помилка валідації"""
    import pytest
    from pydantic import ValidationError
    from gbm_connect.schemas import UserAccount

    with pytest.raises(ValidationError):
        UserAccount(user_id="u-1", user_type="doctor")
    with pytest.raises(ValidationError):
        UserAccount(user_id="")


def test_feature_vector():
    """PatientFeatureVector: порядок та перетворення"""
    import pytest
    from gbm_connect.schemas import PatientFeatureVector
    from gbm_connect.config import FEATURE_NAMES

    vector = PatientFeatureVector.from_array([2, 2, 2, 0.8, 0.5, 0.6, 0])

    assert len(vector) == 7
    assert vector.as_tuple() == (2.0, 2.0, 2.0, 0.8, 0.5, 0.6, 0.0)
    assert list(vector.to_dict()) == list(FEATURE_NAMES)
    assert vector.as_array().dtype.name == "float64"
    assert vector.known == frozenset(FEATURE_NAMES)

    with pytest.raises(ValueError):
        PatientFeatureVector.from_array([1, 2, 3])

    default = PatientFeatureVector()
    assert default.as_tuple() == (0.0, 0.0, 0.0, 0.5, 0.0, 0.0, 0.0)

    print(f"✓ Vector: {vector.to_dict()}")


def test_match_view_json():
    """MatchView серіалізація"""
    from gbm_connect.schemas import MatchView

    view = MatchView(user_id="u-2", name="Linda S.", similarity=0.97, phase="Maintenance")
    data = view.model_dump()

    assert data["shared_attributes"] == []
    assert data["similarity"] == 0.97

    json_str = view.model_dump_json()
    assert "Linda S." in json_str


def demo():
    """Демонстрація модуля schemas"""
    print("=" * 60)
    print("GBM Connect — Демонстрація модуля schemas")
    print("=" * 60)

    test_observe()
    test_clinical_record_from_profile()
    test_feature_vector()

    print("\n" + "=" * 60)
    print("✅ Всі тести пройдено успішно!")
    print("=" * 60)


if __name__ == "__main__":
    demo()
