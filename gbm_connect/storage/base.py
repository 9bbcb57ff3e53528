"""
GBM Connect — Інтерфейс сховища пацієнтів

Контракт між підбором схожих пацієнтів та CRUD-шаром:
- get_patient_record(user_id) → ClinicalRecord | PatientNotFoundError
- list_consenting_candidates(exclude_user_id) → [(user_id, ClinicalRecord)]
- get_display_info(user_id) → DisplayInfo

Реалізації визначають лише доступ до облікових записів;
фільтрація та перетворення спільні.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from gbm_connect.exceptions import PatientNotFoundError
from gbm_connect.schemas import ClinicalRecord, DisplayInfo, PatientProfile, UserAccount


class PatientRepository(ABC):
    """Базовий клас сховища пацієнтів (лише читання для підбору)"""

    # =========================================================================
    # Доступ до облікових записів
    # =========================================================================

    @abstractmethod
    def get_account(self, user_id: str) -> Optional[UserAccount]:
        """Обліковий запис або None"""

    @abstractmethod
    def list_accounts(self) -> List[UserAccount]:
        """Всі облікові записи, відсортовані за user_id"""

    @abstractmethod
    def add_user(self, account: UserAccount) -> None:
        """Додати або замінити обліковий запис"""

    @abstractmethod
    def update_profile(self, user_id: str, profile: PatientProfile) -> UserAccount:
        """Оновити клінічний профіль"""

    def count(self) -> int:
        return len(self.list_accounts())

    # =========================================================================
    # Контракт для підбору
    # =========================================================================

    def get_patient_record(self, user_id: str) -> ClinicalRecord:
        """
        Клінічний запис запитувача.

        Raises:
            PatientNotFoundError: користувача немає або в нього немає профілю
        """
        account = self.get_account(user_id)
        if account is None or account.profile is None:
            raise PatientNotFoundError(user_id)
        return account.to_clinical_record()

    def list_consenting_candidates(self, exclude_user_id: Optional[str] = None) -> List[Tuple[str, ClinicalRecord]]:
        """Активні користувачі зі згодою та профілем, крім exclude_user_id"""
        return [
            (account.user_id, account.to_clinical_record())
            for account in self.list_accounts()
            if account.is_matchable and account.user_id != exclude_user_id
        ]

    def get_display_info(self, user_id: str) -> DisplayInfo:
        account = self.get_account(user_id)
        if account is None:
            return DisplayInfo(name="Anonymous")

        phase = None
        if account.profile is not None and isinstance(account.profile.current_treatment_phase, str):
            phase = account.profile.current_treatment_phase

        return DisplayInfo(name=account.resolved_name, current_phase=phase)
