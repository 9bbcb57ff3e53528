"""
GBM Connect — API Models

Pydantic моделі відповідей API.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from gbm_connect.schemas import MatchView


class MatchListResponse(BaseModel):
    """Список схожих пацієнтів"""
    matches: List[MatchView]
    count: int
    limit: int


class WeightsResponse(BaseModel):
    """Активні ваги ознак"""
    weights: Dict[str, float]
    feature_order: List[str]


class HealthResponse(BaseModel):
    """Відповідь health check"""
    status: str = "ok"
    version: str
    patients: int = Field(..., ge=0)
    config_loaded: bool


class ErrorResponse(BaseModel):
    """Відповідь з помилкою"""
    error: str
    detail: Optional[str] = None
