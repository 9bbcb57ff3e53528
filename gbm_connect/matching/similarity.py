"""
GBM Connect — Рушій схожості

Зважена косинусна схожість між векторами ознак пацієнтів
та ранжування кандидатів.

Формула:
    sim(u, v) = Σ (w·u)(w·v) / (‖w·u‖ · ‖w·v‖)

Ваги застосовуються до кожного компонента ДО скалярного добутку
та норм. Якщо хоча б один зважений вектор нульовий — схожість 0.
"""

import math
from typing import List, Optional, Sequence

import numpy as np

from gbm_connect.config import FEATURE_NAMES, FeatureWeights
from gbm_connect.schemas import MatchCandidate, MatchResult, PatientFeatureVector


class SimilarityEngine:
    """
    Рушій зваженої косинусної схожості.

    Не має стану між викликами і не змінює вхідні дані,
    тому безпечний для паралельного використання.

    Приклад використання:
        engine = SimilarityEngine(FeatureWeights())

        score = engine.similarity(vector_a, vector_b)

        results = engine.rank(
            query=my_vector,
            candidates=[MatchCandidate("u-2", v2), MatchCandidate("u-3", v3, consent=False)],
            requester_id="u-1",
            k=10,
        )
    """

    def __init__(self, weights: Optional[FeatureWeights] = None):
        """
        Args:
            weights: Ваги ознак (за замовчуванням — FeatureWeights())
        """
        self.weights = weights or FeatureWeights()
        self._weight_array = self.weights.as_array()

    def similarity(self, u: PatientFeatureVector, v: PatientFeatureVector) -> float:
        """
        Зважена косинусна схожість двох векторів.

        Returns:
            Значення в [-1, 1] (на практиці [0, 1]), 0 для нульових векторів
        """
        return float(self.similarity_matrix(u, [v])[0])

    def similarity_matrix(
        self,
        query: PatientFeatureVector,
        vectors: Sequence[PatientFeatureVector]
    ) -> np.ndarray:
        """
        Схожість запиту з кожним вектором.

        Returns:
            Масив shape (N,)
        """
        if not vectors:
            return np.zeros(0, dtype=np.float64)

        wq = self._weight_array * query.as_array()
        matrix = np.vstack([v.as_array() for v in vectors]) * self._weight_array

        # Построкова сума: однакові рядки дають бітово однакові значення
        wq_row = wq[np.newaxis, :]
        query_sq = np.sum(wq_row * wq_row, axis=1)
        row_sq = np.sum(matrix * matrix, axis=1)

        # Один корінь з добутку: для v == q sqrt(x·x) == x, sim(v, v) == 1 точно
        denom = np.sqrt(query_sq * row_sq)

        dots = np.sum(matrix * wq_row, axis=1)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            scores = np.where(denom > 0, dots / np.where(denom > 0, denom, 1.0), 0.0)

        scores = np.where(np.isfinite(scores), scores, 0.0)
        return np.clip(scores, -1.0, 1.0)

    def shared_attributes(self, u: PatientFeatureVector, v: PatientFeatureVector) -> tuple:
        """Ознаки, відомі в обох векторах і з однаковим значенням"""
        shared = []
        for name in FEATURE_NAMES:
            if name not in u.known or name not in v.known:
                continue
            if math.isclose(getattr(u, name), getattr(v, name), abs_tol=1e-9):
                shared.append(name)
        return tuple(shared)

    def rank(
        self,
        query: PatientFeatureVector,
        candidates: Sequence[MatchCandidate],
        requester_id: Optional[str] = None,
        k: int = 10
    ) -> List[MatchResult]:
        """
        Топ-K найбільш схожих кандидатів.

        Кандидати без згоди та сам запитувач відкидаються ДО ранжування,
        тому результат має довжину min(k, кількість допустимих).
        Порядок: схожість за спаданням, при рівності — candidate_id за зростанням.

        Args:
            query: Вектор запитувача
            candidates: Кандидати
            requester_id: ID запитувача (виключається з результатів)
            k: Скільки результатів повернути (> 0)

        Returns:
            Список MatchResult
        """
        if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
            raise ValueError(f"k must be a positive integer, got {k!r}")

        eligible = [
            c for c in candidates
            if c.consent and (requester_id is None or c.candidate_id != requester_id)
        ]
        if not eligible:
            return []

        scores = self.similarity_matrix(query, [c.vector for c in eligible])

        order = sorted(
            range(len(eligible)),
            key=lambda i: (-scores[i], eligible[i].candidate_id)
        )

        return [
            MatchResult(
                candidate_id=eligible[i].candidate_id,
                similarity=float(scores[i]),
                shared_attributes=self.shared_attributes(query, eligible[i].vector),
            )
            for i in order[:k]
        ]

    def __repr__(self) -> str:
        return f"SimilarityEngine(weights={self.weights.as_dict()})"
