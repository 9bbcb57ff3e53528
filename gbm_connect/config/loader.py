"""GBM Connect — Завантаження конфігурації"""
import yaml
from pathlib import Path
from dataclasses import asdict
from .settings import GBMConnectConfig


def _to_plain(value):
    """tuple → list, щоб yaml.safe_load міг прочитати файл назад"""
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def save_yaml(config: GBMConnectConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(_to_plain(asdict(config)), f, default_flow_style=False, sort_keys=False)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def save_config(config: GBMConnectConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> GBMConnectConfig:
    return GBMConnectConfig.from_dict(load_yaml(path))
