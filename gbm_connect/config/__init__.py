"""GBM Connect — Модуль конфігурації"""
from .settings import (
    FEATURE_NAMES,
    DEFAULT_TREATMENT_PHASES,
    FeatureWeights,
    EncodingConfig,
    MatchingConfig,
    GBMConnectConfig,
    get_default_config,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "FEATURE_NAMES",
    "DEFAULT_TREATMENT_PHASES",
    "FeatureWeights",
    "EncodingConfig",
    "MatchingConfig",
    "GBMConnectConfig",
    "get_default_config",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
