from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Protocol


class EnvStore(Protocol):
    def get(self, name: str) -> str | None:
        ...

    def set(self, name: str, value: str) -> None:
        ...

    def has(self, name: str) -> bool:
        ...

    def delete(self, name: str) -> None:
        ...


class OsEnvironStore:
    """Process environment. Every call goes straight to ``os.environ``."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def set(self, name: str, value: str) -> None:
        os.environ[name] = value

    def has(self, name: str) -> bool:
        return name in os.environ

    def delete(self, name: str) -> None:
        os.environ.pop(name, None)


@dataclass
class MemoryEnvStore:
    values: dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def set(self, name: str, value: str) -> None:
        self.values[name] = value

    def has(self, name: str) -> bool:
        return name in self.values

    def delete(self, name: str) -> None:
        self.values.pop(name, None)
