"""
GBM Connect — Підбір схожих пацієнтів

Pipeline:
1. Запитувач → клінічний запис (зі сховища)
2. Запис → вектор ознак
3. Пул кандидатів зі згодою → вектори
4. SimilarityEngine → топ-K
5. Топ-K → MatchView (ім'я, схожість, фаза лікування)
"""

import logging
from typing import Any, List, Optional

from gbm_connect.config import GBMConnectConfig, MatchingConfig
from gbm_connect.encoding import PatientEncoder
from gbm_connect.schemas import MatchCandidate, MatchView
from gbm_connect.storage import PatientRepository

from .similarity import SimilarityEngine


logger = logging.getLogger(__name__)


def coerce_limit(value: Any, default: int = 10, maximum: Optional[int] = None) -> int:
    """
    Привести limit до додатного цілого.

    Відсутнє, недодатне, нечислове або нескінченне значення → default.
    Більше за maximum → maximum.
    """
    if value is None or isinstance(value, bool):
        limit = default
    else:
        try:
            limit = int(value)
        except (TypeError, ValueError, OverflowError):
            limit = default

    if limit <= 0:
        limit = default
    if maximum is not None:
        limit = min(limit, maximum)
    return limit


def format_phase(phase: Optional[str], known_phases=None) -> Optional[str]:
    """adjuvant_chemotherapy → 'Adjuvant Chemotherapy'; невідома фаза → None"""
    if not phase:
        return None
    if known_phases is not None and phase not in known_phases:
        return None
    return phase.replace("_", " ").title()


class MatchingService:
    """
    Зовнішня точка входу підбору схожих пацієнтів.

    Приклад використання:
        service = MatchingService.from_config(repository, get_default_config())
        matches = service.get_matches("u-001", limit=5)

        for m in matches:
            print(f"{m.name}: {m.similarity:.2f} ({m.phase})")
    """

    def __init__(
        self,
        repository: PatientRepository,
        encoder: Optional[PatientEncoder] = None,
        engine: Optional[SimilarityEngine] = None,
        config: Optional[MatchingConfig] = None
    ):
        """
        Args:
            repository: Сховище пацієнтів
            encoder: Енкодер профілю
            engine: Рушій схожості
            config: Параметри видачі
        """
        self.repository = repository
        self.encoder = encoder or PatientEncoder()
        self.engine = engine or SimilarityEngine()
        self.config = config or MatchingConfig()

    @classmethod
    def from_config(cls, repository: PatientRepository, config: GBMConnectConfig) -> "MatchingService":
        """Зібрати сервіс з головної конфігурації"""
        return cls(
            repository=repository,
            encoder=PatientEncoder(config.encoding),
            engine=SimilarityEngine(config.weights),
            config=config.matching,
        )

    def get_matches(self, requesting_user_id: str, limit: Any = None) -> List[MatchView]:
        """
        Топ-K схожих пацієнтів для користувача.

        Args:
            requesting_user_id: ID запитувача
            limit: Кількість результатів (відсутній/недодатний → default)

        Returns:
            Список MatchView, відсортований за схожістю

        Raises:
            PatientNotFoundError: у запитувача немає клінічного профілю
        """
        k = coerce_limit(limit, self.config.default_limit, self.config.max_limit)

        record = self.repository.get_patient_record(requesting_user_id)
        query = self.encoder.encode(record)

        # Оцінюється весь пул кандидатів
        candidates = [
            MatchCandidate(candidate_id=user_id, vector=self.encoder.encode(candidate_record))
            for user_id, candidate_record in self.repository.list_consenting_candidates(
                exclude_user_id=requesting_user_id
            )
        ]

        results = self.engine.rank(query, candidates, requester_id=requesting_user_id, k=k)

        logger.debug(
            "Matches for %s: pool=%d, returned=%d (k=%d)",
            requesting_user_id, len(candidates), len(results), k
        )

        return [self._to_view(r) for r in results]

    def _to_view(self, result) -> MatchView:
        """MatchResult → MatchView"""
        info = self.repository.get_display_info(result.candidate_id)

        return MatchView(
            user_id=result.candidate_id,
            name=info.name,
            similarity=round(min(1.0, max(0.0, result.similarity)), self.config.display_precision),
            phase=format_phase(info.current_phase, self.encoder.config.treatment_phases),
            shared_attributes=list(result.shared_attributes),
        )

    def __repr__(self) -> str:
        return f"MatchingService(repository={self.repository!r})"
