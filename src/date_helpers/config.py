from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from date_helpers.constants import DEFAULT_HOLIDAY_LATENCY_S, DEFAULT_UNIT, UnitKind


@dataclass(frozen=True)
class Config:
    """Raw settings mapping read from yaml, looked up by key path."""

    raw: dict[str, Any]

    def get(self, *path: str, default: Any | None = None) -> Any:
        node: Any = self.raw
        for key in path:
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return default if node is None else node


def load_config(path: Path | str) -> Config:
    """Read a yaml settings file. An empty file yields an empty Config."""
    path = Path(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return Config(raw={})
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must hold a mapping, got {type(data).__name__}")
    return Config(raw=data)


@dataclass(frozen=True)
class Settings:
    tz: ZoneInfo | None = None
    default_unit: UnitKind = DEFAULT_UNIT
    holiday_latency_s: float = DEFAULT_HOLIDAY_LATENCY_S

    @staticmethod
    def from_config(config: Config) -> "Settings":
        tz_name = config.get("timezone")
        tz = None
        if tz_name:
            try:
                tz = ZoneInfo(str(tz_name))
            except ZoneInfoNotFoundError as exc:
                raise ValueError(f"Unknown timezone: {tz_name}") from exc
        latency_s = float(config.get("holidays", "latency_s", default=DEFAULT_HOLIDAY_LATENCY_S))
        if latency_s <= 0:
            raise ValueError(f"holidays.latency_s must be positive, got {latency_s}")
        return Settings(
            tz=tz,
            default_unit=UnitKind.coerce(config.get("offset", "default_unit", default=DEFAULT_UNIT.value)),
            holiday_latency_s=latency_s,
        )
