import os
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml
from dotenv import load_dotenv

from nanoedit.components.configuration.configuration_interface import (
    MISSING,
    ConfigurationInterface,
)

T = TypeVar("T")

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


class Configuration(ConfigurationInterface):
    """
    Layered configuration: environment variables, then ``<env>.yaml``.

    ``.env`` files are loaded into the environment on construction.
    """

    def __init__(self, env: str, config_path: str) -> None:
        load_dotenv()
        self.env = env
        self.config_file = Path(config_path) / f"{env}.yaml"
        self._values: dict[str, Any] = self._load_file()

    def _load_file(self) -> dict[str, Any]:
        if not self.config_file.is_file():
            return {}

        with self.config_file.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}

        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration file {self.config_file} must contain a mapping"
            )
        return data

    def get_configuration(
        self, key: str, type_: type[T], default: T | None = MISSING
    ) -> T:
        raw: Any = os.getenv(key)
        if raw is None:
            raw = self._values.get(key)

        if raw is None:
            if default is MISSING:
                raise ValueError(f"Configuration key {key} is not set")
            return cast(T, default)

        return self._convert(key, raw, type_)

    @staticmethod
    def _convert(key: str, raw: Any, type_: type[T]) -> T:
        if isinstance(raw, type_):
            return raw

        if type_ is bool:
            normalized = str(raw).strip().lower()
            if normalized in _TRUE_VALUES:
                return cast(T, True)
            if normalized in _FALSE_VALUES:
                return cast(T, False)
            raise ValueError(f"Configuration key {key} is not a boolean: {raw!r}")

        try:
            return type_(raw)  # type: ignore[call-arg]
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Configuration key {key} cannot be read as {type_.__name__}: {raw!r}"
            ) from e
