"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import astuple, dataclass
from typing import Any


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Immutable value compared by its fields rather than by identity.
    Subclasses must also be declared ``@dataclass(frozen=True)``.
    """

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        return astuple(self) == astuple(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, astuple(self)))
