"""
GBM Connect — Модуль сховища (storage)

Доступ до облікових записів та клінічних профілів для підбору.

Компоненти:
- PatientRepository: абстрактний контракт
- InMemoryPatientRepository: словник у пам'яті
- JsonPatientRepository: завантаження з JSON файлу

Приклад використання:
    from gbm_connect.storage import JsonPatientRepository

    repo = JsonPatientRepository("data/patients.example.json")
    record = repo.get_patient_record("u-001")
    pool = repo.list_consenting_candidates(exclude_user_id="u-001")
"""

from .base import PatientRepository
from .memory import InMemoryPatientRepository
from .json_loader import JsonPatientRepository


__all__ = [
    "PatientRepository",
    "InMemoryPatientRepository",
    "JsonPatientRepository",
]
