"""
GBM Connect — API Configuration

Налаштування FastAPI сервера та шляхи до даних.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["GET", "OPTIONS"])
    cors_allow_headers: list = field(default_factory=lambda: ["Content-Type", "Authorization", "X-User-Id"])

    # Шляхи
    data_path: Optional[str] = None
    config_path: Optional[str] = None

    # API
    api_prefix: str = "/api"
    api_title: str = "GBM Connect API"
    api_description: str = "Підбір схожих пацієнтів для спільноти підтримки GBM"

    def __post_init__(self):
        """Автоматичне визначення шляху до даних"""
        if self.data_path is None:
            current = Path(__file__).parent.parent.parent

            for root in (current, Path.cwd()):
                candidate = root / "data" / "patients.example.json"
                if candidate.exists():
                    self.data_path = str(candidate)
                    break

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("GBM_API_HOST", "0.0.0.0"),
            port=int(os.getenv("GBM_API_PORT", "8000")),
            debug=os.getenv("GBM_API_DEBUG", "false").lower() == "true",
            data_path=os.getenv("GBM_DATA_PATH"),
            config_path=os.getenv("GBM_CONFIG_PATH"),
        )


# Глобальна конфігурація
config = APIConfig.from_env()
