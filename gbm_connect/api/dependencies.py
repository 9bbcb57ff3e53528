"""
GBM Connect — API Dependencies

Dependency Injection для FastAPI.
Завантаження конфігурації та сховища, створення сервісу підбору.
"""

import threading
from pathlib import Path
from typing import Optional

from fastapi import Header, HTTPException

from gbm_connect.config import GBMConnectConfig, get_default_config, load_config
from gbm_connect.matching import MatchingService
from gbm_connect.storage import InMemoryPatientRepository, JsonPatientRepository, PatientRepository

from .config import config


class ServicesManager:
    """
    Менеджер сервісів — завантажує конфігурацію та сховище один раз.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.is_loaded = False
        self.config_loaded = False
        self.settings: GBMConnectConfig = get_default_config()
        self.repository: Optional[PatientRepository] = None
        self.matching: Optional[MatchingService] = None
        self.error = None

    def load(self) -> bool:
        """Завантажити конфігурацію та сховище"""
        if self.is_loaded:
            return True

        print("📦 Завантаження даних...")

        # 1. Конфігурація (помилка конфігурації фатальна)
        if config.config_path:
            self.settings = load_config(config.config_path)
            self.config_loaded = True
            print(f"   ✅ Config: {config.config_path}")
        else:
            print("   ℹ️ Config: defaults")

        # 2. Сховище
        if config.data_path and Path(config.data_path).exists():
            repository = JsonPatientRepository(config.data_path)
            print(f"   ✅ Patients: {repository.count()} users ({len(repository.skipped)} skipped)")
        else:
            self.error = f"Patient data not found: {config.data_path}"
            repository = InMemoryPatientRepository()
            print(f"   ⚠️ {self.error}, starting with empty community")

        self.use(repository, self.settings)
        print("📦 Готово!")
        return True

    def use(self, repository: PatientRepository, settings: Optional[GBMConnectConfig] = None) -> None:
        """Підключити сховище (також використовується в тестах)"""
        if settings is not None:
            self.settings = settings
        self.repository = repository
        self.matching = MatchingService.from_config(repository, self.settings)
        self.is_loaded = True

    def reset(self) -> None:
        """Скинути стан"""
        self.is_loaded = False
        self.config_loaded = False
        self.settings = get_default_config()
        self.repository = None
        self.matching = None
        self.error = None


# Глобальний менеджер
services_manager = ServicesManager()


# Dependency functions для FastAPI
def get_services() -> ServicesManager:
    """Dependency: отримати менеджер сервісів"""
    if not services_manager.is_loaded:
        services_manager.load()
    return services_manager


def get_matching_service() -> MatchingService:
    """Dependency: отримати сервіс підбору"""
    return get_services().matching


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    Dependency: ID автентифікованого користувача.

    Автентифікація виконується перед API (gateway / JWT middleware),
    сюди доходить лише заголовок X-User-Id.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()
