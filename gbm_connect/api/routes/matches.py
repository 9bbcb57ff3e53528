"""
GBM Connect — Matching Routes

Endpoints підбору схожих пацієнтів.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from gbm_connect.config import FEATURE_NAMES
from gbm_connect.exceptions import PatientNotFoundError
from gbm_connect.matching import MatchingService, coerce_limit

from ..dependencies import get_current_user_id, get_matching_service
from ..models import MatchListResponse, WeightsResponse

router = APIRouter(prefix="/community/matches", tags=["Matching"])


@router.get("", response_model=MatchListResponse)
async def get_matches(
    limit: Optional[int] = Query(default=None, description="Кількість результатів (за замовчуванням 10)"),
    user_id: str = Depends(get_current_user_id),
    service: MatchingService = Depends(get_matching_service)
) -> MatchListResponse:
    """
    Топ-K найбільш схожих пацієнтів для поточного користувача.

    Відсутній або недодатний limit замінюється на 10.

    Приклад:
    ```
    GET /api/community/matches?limit=5
    X-User-Id: u-001
    ```
    """
    k = coerce_limit(limit, service.config.default_limit, service.config.max_limit)

    try:
        matches = service.get_matches(user_id, k)
    except PatientNotFoundError:
        raise HTTPException(
            status_code=404,
            detail="Complete your profile first"
        )

    return MatchListResponse(matches=matches, count=len(matches), limit=k)


@router.get("/weights", response_model=WeightsResponse)
async def get_weights(
    service: MatchingService = Depends(get_matching_service)
) -> WeightsResponse:
    """Ваги ознак, що використовуються для схожості (лише читання)"""
    return WeightsResponse(
        weights=service.engine.weights.as_dict(),
        feature_order=list(FEATURE_NAMES),
    )
