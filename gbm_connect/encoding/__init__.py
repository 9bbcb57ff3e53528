"""
GBM Connect — Модуль кодування (encoding)

Векторизація клінічного профілю пацієнта для підбору схожих пацієнтів.

Компоненти:
- PatientEncoder: ClinicalRecord → PatientFeatureVector

Приклад використання:
    from gbm_connect.encoding import PatientEncoder
    from gbm_connect.schemas import ClinicalRecord

    encoder = PatientEncoder()
    vector = encoder.encode(ClinicalRecord.from_values(mgmt_status="methylated"))
    print(vector.as_tuple())  # (2.0, 0.0, 0.0, 0.5, 0.0, 0.0, 0.0)
"""

from .patient_encoder import PatientEncoder, MGMT_CODES, IDH_CODES


__all__ = [
    "PatientEncoder",
    "MGMT_CODES",
    "IDH_CODES",
]
