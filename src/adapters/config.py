from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class AppConfig:
    catalogue_path: str
    reveal_errors: bool

    @staticmethod
    def from_env() -> "AppConfig":
        catalogue_path = (os.getenv("CATALOGUE_PATH") or "").strip()

        return AppConfig(
            catalogue_path=catalogue_path or "data/catalogue.json",
            reveal_errors=_env_bool("TRANSIT_REVEAL_ERRORS", False),
        )
