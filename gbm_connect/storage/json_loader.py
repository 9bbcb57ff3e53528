"""
GBM Connect — Завантаження спільноти з JSON

Структура JSON:
{
  "users": [
    {
      "user_id": "u-001",
      "user_type": "patient",
      "display_name": "Robert K.",
      "share_with_community": true,
      "profile": {
        "mgmt_status": "methylated",
        "age_at_diagnosis": 58,
        ...
      }
    },
    ...
  ]
}
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from gbm_connect.schemas import UserAccount

from .memory import InMemoryPatientRepository


logger = logging.getLogger(__name__)


class JsonPatientRepository(InMemoryPatientRepository):
    """
    Сховище, заповнене з JSON файлу.

    Некоректний запис користувача пропускається з попередженням,
    решта файлу завантажується.

    Приклад використання:
        repo = JsonPatientRepository("data/patients.example.json")
        print(f"Користувачів: {repo.count()}")
        print(f"Пропущено: {len(repo.skipped)}")
    """

    def __init__(self, path: Optional[str] = None):
        """
        Args:
            path: Шлях до JSON файлу. Якщо None, використовує приклад з data/.
        """
        super().__init__()

        if path is None:
            # Шлях відносно кореня проекту
            path = Path(__file__).parent.parent.parent / "data" / "patients.example.json"

        self.path = Path(path)
        self.skipped: List[Dict] = []

        self._load()

    def _load(self) -> None:
        """Завантажити облікові записи"""
        if not self.path.exists():
            raise FileNotFoundError(f"Patient data file not found: {self.path}")

        with open(self.path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        entries = raw.get("users", []) if isinstance(raw, dict) else raw
        if not isinstance(entries, list):
            raise ValueError(f"Expected a list of users in {self.path}")

        for i, entry in enumerate(entries):
            try:
                account = UserAccount.model_validate(entry)
            except ValidationError as e:
                logger.warning("Skipping malformed user entry #%d in %s: %s", i, self.path, e)
                self.skipped.append({"index": i, "error": str(e)})
                continue

            self.add_user(account)

        logger.info("Loaded %d users from %s (%d skipped)", self.count(), self.path, len(self.skipped))

    def __repr__(self) -> str:
        return f"JsonPatientRepository(path={self.path.name}, users={self.count()})"
