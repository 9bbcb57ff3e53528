"""
GBM Connect — Клінічні значення

Кожне клінічне поле пацієнта — або відоме значення Known(value),
або Unknown. Це дозволяє відрізнити "немає даних" від "нуля"
до того, як енкодер згорне значення в числа.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union


T = TypeVar("T")


class UserType(str, Enum):
    """Тип користувача"""
    PATIENT = "patient"
    CAREGIVER = "caregiver"


class MgmtStatus(str, Enum):
    """Статус метилювання промотора MGMT"""
    METHYLATED = "methylated"
    UNMETHYLATED = "unmethylated"
    UNKNOWN = "unknown"
    PENDING = "pending"


class IdhStatus(str, Enum):
    """Статус мутації IDH"""
    MUTANT = "mutant"
    WILDTYPE = "wildtype"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Known(Generic[T]):
    """Відоме значення клінічного поля"""
    value: T


@dataclass(frozen=True)
class Unknown:
    """Значення відсутнє"""

    def __repr__(self) -> str:
        return "UNKNOWN"


UNKNOWN = Unknown()

ClinicalValue = Union[Known, Unknown]


def observe(raw: Any) -> ClinicalValue:
    """
    Загорнути сире значення з бази в Known/Unknown.

    None та порожні рядки вважаються відсутніми.
    Все інше — Known, навіть якщо значення нерозпізнане:
    оцінку змісту робить енкодер.
    """
    if raw is None:
        return UNKNOWN
    if isinstance(raw, str) and not raw.strip():
        return UNKNOWN
    if isinstance(raw, Enum):
        raw = raw.value
    return Known(raw)
