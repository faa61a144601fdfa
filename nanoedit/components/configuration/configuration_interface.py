from abc import ABC, abstractmethod
from typing import Any, TypeVar

T = TypeVar("T")

MISSING: Any = object()


class ConfigurationInterface(ABC):
    @abstractmethod
    def get_configuration(
        self, key: str, type_: type[T], default: T | None = MISSING
    ) -> T:
        """
        Return the value stored under ``key`` converted to ``type_``.

        Raises:
            ValueError: If the key is absent and no default was given, or the
                value cannot be converted
        """
