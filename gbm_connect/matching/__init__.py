"""
GBM Connect — Модуль підбору схожих пацієнтів (matching)

Компоненти:
- SimilarityEngine: зважена косинусна схожість + ранжування топ-K
- MatchingService: сховище → енкодер → рушій → MatchView

Приклад використання:
    from gbm_connect.config import get_default_config
    from gbm_connect.matching import MatchingService
    from gbm_connect.storage import JsonPatientRepository

    service = MatchingService.from_config(
        JsonPatientRepository("data/patients.example.json"),
        get_default_config(),
    )
    matches = service.get_matches("u-001", limit=10)
"""

from gbm_connect.exceptions import GBMConnectError, PatientNotFoundError

from .similarity import SimilarityEngine
from .service import MatchingService, coerce_limit, format_phase


__all__ = [
    "SimilarityEngine",
    "MatchingService",
    "coerce_limit",
    "format_phase",
    "GBMConnectError",
    "PatientNotFoundError",
]
