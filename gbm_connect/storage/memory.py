"""
GBM Connect — Сховище в пам'яті

Зберігає облікові записи в словнику. Всі звернення до словника
проходять під lock-ом, list_accounts повертає знімок.
"""

import threading
from typing import Dict, Iterable, List, Optional

from gbm_connect.exceptions import PatientNotFoundError
from gbm_connect.schemas import PatientProfile, UserAccount

from .base import PatientRepository


class InMemoryPatientRepository(PatientRepository):
    """
    Сховище облікових записів у пам'яті.

    Приклад використання:
        repo = InMemoryPatientRepository([
            UserAccount(user_id="u-1", profile=PatientProfile(mgmt_status="methylated")),
        ])
        record = repo.get_patient_record("u-1")
    """

    def __init__(self, accounts: Optional[Iterable[UserAccount]] = None):
        self._accounts: Dict[str, UserAccount] = {}
        self._lock = threading.Lock()

        for account in accounts or []:
            self.add_user(account)

    def get_account(self, user_id: str) -> Optional[UserAccount]:
        with self._lock:
            return self._accounts.get(user_id)

    def list_accounts(self) -> List[UserAccount]:
        # Знімок під lock-ом, сортування поза ним
        with self._lock:
            accounts = list(self._accounts.values())
        return sorted(accounts, key=lambda a: a.user_id)

    def add_user(self, account: UserAccount) -> None:
        with self._lock:
            self._accounts[account.user_id] = account

    def update_profile(self, user_id: str, profile: PatientProfile) -> UserAccount:
        with self._lock:
            account = self._accounts.get(user_id)
            if account is None:
                raise PatientNotFoundError(user_id)

            updated = account.model_copy(update={"profile": profile})
            self._accounts[user_id] = updated
            return updated

    def count(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __repr__(self) -> str:
        return f"InMemoryPatientRepository(users={self.count()})"
