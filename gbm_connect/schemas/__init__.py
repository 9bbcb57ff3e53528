"""
GBM Connect — Модуль схем даних (schemas)

Компоненти:
- clinical.py: UserType, MgmtStatus, IdhStatus, Known / Unknown
- patient.py: PatientProfile, ClinicalRecord, UserAccount, DisplayInfo
- matching.py: PatientFeatureVector, MatchCandidate, MatchResult, MatchView

Приклад використання:
    from gbm_connect.schemas import UserAccount, PatientProfile, UserType

    account = UserAccount(
        user_id="u-001",
        user_type=UserType.PATIENT,
        display_name="Robert K.",
        profile=PatientProfile(mgmt_status="methylated", age_at_diagnosis=58),
    )

    record = account.to_clinical_record()
    print(record.mgmt_status)   # Known(value='methylated')
    print(record.idh_status)    # UNKNOWN
"""

# Clinical values
from .clinical import (
    UserType,
    MgmtStatus,
    IdhStatus,
    Known,
    Unknown,
    UNKNOWN,
    ClinicalValue,
    observe,
)

# Patient schemas
from .patient import (
    PatientProfile,
    ClinicalRecord,
    UserAccount,
    DisplayInfo,
)

# Matching schemas
from .matching import (
    PatientFeatureVector,
    MatchCandidate,
    MatchResult,
    MatchView,
)


__all__ = [
    # Clinical
    "UserType",
    "MgmtStatus",
    "IdhStatus",
    "Known",
    "Unknown",
    "UNKNOWN",
    "ClinicalValue",
    "observe",

    # Patient
    "PatientProfile",
    "ClinicalRecord",
    "UserAccount",
    "DisplayInfo",

    # Matching
    "PatientFeatureVector",
    "MatchCandidate",
    "MatchResult",
    "MatchView",
]
