"""
GBM Connect — Спільнота підтримки пацієнтів з гліобластомою

Підбір схожих пацієнтів: кодування клінічного профілю + зважена
косинусна схожість.

Модулі:
- config: Конфігурація (ваги ознак, шкали кодування)
- schemas: Схеми даних
- encoding: Векторизація клінічного профілю
- matching: Рушій схожості та сервіс підбору
- storage: Доступ до облікових записів
- api: Backend API
"""

__version__ = "0.1.0"

from .config import GBMConnectConfig, get_default_config
